import logging
import os
from datetime import datetime, timezone
from concurrent_log_handler import ConcurrentRotatingFileHandler
from ..config.settings import LOG_DIR, LOG_LEVEL


def setup_logging():
    logger = logging.getLogger("flatauth_log") # create logger
    if not logger.handlers: # check if handlers already exist
        logger.setLevel(LOG_LEVEL) # set log level

        # create log directory if it doesn't exist
        os.makedirs(LOG_DIR, exist_ok=True)

        # create a file handler
        file_handler = ConcurrentRotatingFileHandler(
            os.path.join(LOG_DIR, "auth.log"),
            maxBytes=10000, # 10KB
            backupCount=500
        )
        file_handler.setLevel(LOG_LEVEL) # a .__auth.lock file is created next to the log

        #  create a console handler
        console_handler = logging.StreamHandler()
        console_handler.setLevel(LOG_LEVEL)

        # create a formatter
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s - %(pathname)s - %(filename)s - %(lineno)d" , datefmt="%Y-%m-%d %H:%M:%S")
        file_handler.setFormatter(formatter)
        console_handler.setFormatter(formatter)

        #  add the handlers to the logger
        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
    return logger


def utc_timestamp():
    """ISO-8601 UTC time with millisecond precision, e.g. 2025-01-31T12:00:00.000Z"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
