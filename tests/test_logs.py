import logging
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from file_mcp.utils import logs


class TestCreateLogger(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.logger = logging.getLogger("file_mcp")
        self._handlers = list(self.logger.handlers)
        self._disabled = self.logger.disabled

    def tearDown(self):
        for handler in self.logger.handlers:
            handler.close()
        self.logger.handlers[:] = self._handlers
        self.logger.disabled = self._disabled
        self._tmp.cleanup()

    def test_unwritable_log_dir_falls_back_to_console(self):
        blocker = Path(self._tmp.name) / "not-a-dir"
        blocker.write_text("", encoding="utf-8")
        env = {"VERBOSE": "true", "LOG_DIR": str(blocker / "logs")}
        with mock.patch.dict(os.environ, env), mock.patch("sys.stderr"):
            logger = logs._create_logger()
        self.assertEqual(len(logger.handlers), 1)
        self.assertNotIsInstance(logger.handlers[0], logging.FileHandler)

    def test_log_file_is_written_under_log_dir(self):
        log_dir = Path(self._tmp.name) / "logs"
        with mock.patch.dict(os.environ, {"VERBOSE": "true", "LOG_DIR": str(log_dir)}):
            logger = logs._create_logger()
        self.assertTrue(any(isinstance(h, logging.FileHandler) for h in logger.handlers))
        self.assertEqual(len(list(log_dir.glob("*.log"))), 1)

    def test_records_carry_calling_module(self):
        records = []

        class Collect(logging.Handler):
            def emit(self, record):
                records.append(record)

        logger = logging.getLogger("file_mcp")
        logger.disabled = False
        logger.handlers[:] = [Collect()]
        logger.info("hello")
        self.assertEqual(records[0].module_name, __name__)


if __name__ == "__main__":
    unittest.main()
