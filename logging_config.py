import logging
import os
from logging.handlers import RotatingFileHandler

LOGS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "logs")
LOG_FORMAT = ("%(asctime)s %(levelname)-8s "
              "[%(filename)s:%(lineno)d %(funcName)s()] "
              "%(message)s")


def setup_logging(name="facade", log_file="facade_app.log", level=logging.INFO, max_bytes=5*1024*1024, backup_count=3):
    """Set up a logger with a rotating file handler and a stream handler.

    Log files land in the project's ./logs/ directory unless an absolute
    path is given (tests pass a tmpdir path). The stream handler writes to
    stderr so that stdout carries only facade output.

    Args:
        name: The name of the logger.
        log_file: The name of the log file.
        level: The level of the logger.
        max_bytes: The maximum size of the log file.
        backup_count: The number of backup log files.

    Returns:
        logger: The logger object.

    Example usage:
    from logging_config import setup_logging
    logger = setup_logging(__name__, log_file="facade.log")
    """
    logger = logging.getLogger(name)
    # Re-running setup must not stack handlers
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    os.makedirs(LOGS_DIR, exist_ok=True)
    if os.path.isabs(log_file):
        log_path = log_file
    else:
        log_path = os.path.join(LOGS_DIR, os.path.basename(log_file))

    file_handler = RotatingFileHandler(log_path, maxBytes=max_bytes, backupCount=backup_count, encoding='utf-8')
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    logger.setLevel(level)
    return logger


def set_log_level(level, *names):
    """Apply a level to already configured loggers.

    Args:
        level: A level name ("DEBUG") or number (logging.DEBUG).
        *names: Logger names to update.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    for name in names:
        logging.getLogger(name).setLevel(level)
