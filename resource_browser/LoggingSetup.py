"""
Logging setup for the browser.

Every module logs through logging.getLogger(__name__); this module wires the
root logger once at startup. Records go to a rotating file under the logs
directory and, when a terminal is attached, to stderr. HTTP library loggers
are held at WARNING unless verbose because they log every request.
"""
import sys
import logging
from pathlib import Path
from logging.handlers import RotatingFileHandler

LOG_FILE_NAME = "browser.log"
LOG_FORMAT = '[%(asctime)s] [%(levelname)s] %(name)s: %(message)s'
MAX_BYTES = 10 * 1024 * 1024
BACKUP_COUNT = 5

QUIET_LOGGERS = ("urllib3", "requests")


def _attach(root_logger: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def setup_logging(logs_dir: Path, verbose: bool = False, is_frozen: bool = False) -> Path:
    """
    Configure the root logger.

    Args:
        logs_dir: Directory for the rotating log file, created if missing
        verbose: DEBUG level and chatty HTTP loggers; otherwise INFO
        is_frozen: Skip the stderr handler (no console attached)

    Returns:
        Path of the log file
    """
    logs_dir.mkdir(parents=True, exist_ok=True)
    level = logging.DEBUG if verbose else logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)
    log_file = logs_dir / LOG_FILE_NAME
    _attach(
        root_logger,
        RotatingFileHandler(log_file, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT, encoding='utf-8'),
        level,
        formatter
    )
    if not is_frozen:
        _attach(root_logger, logging.StreamHandler(sys.stderr), level, formatter)

    http_level = logging.INFO if verbose else logging.WARNING
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(http_level)

    logging.info(f"Logging initialized: level={logging.getLevelName(level)}, file={log_file}, frozen={is_frozen}")
    return log_file
