import os

os.environ.setdefault("TASKLENS_ENVIRONMENT", "test")
os.environ.setdefault("TASKLENS_LOG_FORMAT", "text")
os.environ.setdefault("TASKLENS_LOG_COLOR", "0")
