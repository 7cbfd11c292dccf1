import logging
import os
import sys
from typing import Any

from docrecon.common.utils.config import config

NOTICE_LEVEL = 25
logging.addLevelName(NOTICE_LEVEL, "NOTICE")

ROOT_LOGGER_NAME = "docrecon"

RESET = "\033[0m"
COLORS = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "NOTICE": "\033[38;5;33m",  # Blue-ish
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[1;41m",  # White on red
}

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_DIR = os.environ.get(
    "DOCRECON_LOG_DIR",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "../../../logs"),
)
LOG_FILE = os.path.join(LOG_DIR, "docrecon.log")


class ColorFormatter(logging.Formatter):
    """Colors the level name. Only attached to the console handler."""

    def format(self, record: logging.LogRecord) -> str:
        color = COLORS.get(record.levelname, "")
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname:<7}{RESET}"
        return super().format(record)


class NoticeLogger(logging.Logger):
    """Routes info() to NOTICE so progress messages reach the console."""

    def info(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(NOTICE_LEVEL):
            self._log(NOTICE_LEVEL, msg, args, **kwargs)


logging.setLoggerClass(NoticeLogger)


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(NOTICE_LEVEL)
    handler.setFormatter(ColorFormatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _file_handler() -> logging.Handler:
    os.makedirs(LOG_DIR, exist_ok=True)
    handler = logging.FileHandler(LOG_FILE, encoding="utf-8")
    handler.setLevel(config.log_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


package_logger = logging.getLogger(ROOT_LOGGER_NAME)
package_logger.setLevel(logging.DEBUG)
package_logger.handlers.clear()
package_logger.addHandler(_console_handler())
package_logger.addHandler(_file_handler())
package_logger.propagate = False


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the `docrecon` namespace."""
    if not name or name == ROOT_LOGGER_NAME:
        return package_logger
    if not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


logger = package_logger
logger.debug("Logger initialized successfully.")
