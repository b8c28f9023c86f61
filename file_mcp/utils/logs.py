import inspect
import logging
import os
from datetime import datetime
from pathlib import Path


class ModuleAwareLogger(logging.Logger):
    """Logger that tags every record with the calling module's name."""

    def _log(
        self,
        level,
        msg,
        args,
        exc_info=None,
        extra=None,
        stack_info=False,
        stacklevel=1,
    ):
        frame = inspect.currentframe()
        try:
            # skip _log and logger.info/exception/etc. frames
            caller_frame = frame.f_back if frame else None
            while caller_frame and caller_frame.f_globals.get("__name__") in (__name__, "logging"):
                caller_frame = caller_frame.f_back
            module_name = caller_frame.f_globals.get("__name__", "unknown") if caller_frame else "unknown"
        finally:
            del frame

        if extra is None:
            extra = {}
        extra["module_name"] = module_name

        super()._log(level, msg, args, exc_info, extra, stack_info, stacklevel)


def _create_logger() -> logging.Logger:
    """Create and configure the package-wide logger."""
    verbose = os.environ.get("VERBOSE", "true").lower() in ("true", "1", "yes")

    previous_class = logging.getLoggerClass()
    logging.setLoggerClass(ModuleAwareLogger)
    try:
        logger = logging.getLogger("file_mcp")
    finally:
        logging.setLoggerClass(previous_class)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    if not verbose:
        logger.disabled = True
        return logger

    logger.disabled = False
    logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(module_name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # stdout carries the MCP protocol, so the console handler must stay on stderr
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_dir = Path(os.environ.get("LOG_DIR", "logs"))
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / datetime.now().strftime("%Y-%m-%d.log")
        file_exists = log_file.exists()
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    except OSError as exc:
        logger.warning(f"File logging disabled, cannot write to {log_dir}: {exc}")
        return logger

    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    separator = "=" * 80
    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    with open(log_file, "a", encoding="utf-8") as f:
        if file_exists:
            f.write("\n")
        f.write(f"{separator}\n")
        f.write(f"[{now}] New Session Started\n")
        f.write(f"{separator}\n")

    return logger


logger = _create_logger()
