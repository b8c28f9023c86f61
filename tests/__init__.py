import os

# keep test runs from writing session logs
os.environ.setdefault("VERBOSE", "false")
