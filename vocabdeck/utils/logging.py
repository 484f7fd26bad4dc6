import logging
from pathlib import Path
from typing import Optional

from ..config import LOG_FILE, LOG_LEVEL

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

_configured = False


def setup_logging(log_file: Optional[Path] = LOG_FILE, level: str = LOG_LEVEL) -> None:
    """
    Initializes the logging system.
    Logs go to the console and, when a file is given, appended to it.
    Safe to call more than once; only the first call configures handlers.
    """
    global _configured
    if _configured:
        return

    handlers = [logging.StreamHandler()]
    if log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(str(log_file), mode='a', encoding='utf-8'))
        except OSError as e:
            print(f"⚠ Failed to open log file {log_file}: {e}")

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )
    _configured = True

    logging.getLogger("vocabdeck").info(f"Logging initialized (level={level})")


def get_logger(name: str) -> logging.Logger:
    """Returns a named logger instance."""
    return logging.getLogger(name)
