# game_log.py
# Append-only log sink: one file per process run, optional console echo in debug mode

from pathlib import Path
from typing import Optional
import logging
import sys

SUCCESS = 25
logging.addLevelName(SUCCESS, 'SUCCESS')

DATE_FORMAT = '%Y/%m/%d %H:%M:%S'
LOG_DATE_FORMAT = '%Y%m%d_%H%M%S'

SEVERITY_TAGS = {
    logging.CRITICAL: '[ERROR] ',
    logging.ERROR: '[ERROR] ',
    logging.WARNING: '[WARN]  ',
    SUCCESS: '[OK]    ',
    logging.INFO: '[LOG]   ',
    logging.DEBUG: '[LOG]   ',
}

# marks handlers we own so configure_logging can be called again safely
_HANDLER_FLAG = '_guessing_game_handler'


class SeverityFormatter(logging.Formatter):
    """Render records as ``[TAG]<timestamp> in function "<name>": <message>``."""

    def __init__(self):
        super().__init__(datefmt=DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        tag = SEVERITY_TAGS.get(record.levelno, '[LOG]   ')
        timestamp = self.formatTime(record, self.datefmt)
        line = f'{tag}{timestamp} in function "{record.funcName}": {record.getMessage()}'
        if record.exc_info:
            line = f'{line}\n{self.formatException(record.exc_info)}'
        return line


def log_file_name(session_start: str) -> str:
    return f'game_{session_start}.log'


def remove_handlers(logger: Optional[logging.Logger] = None) -> None:
    """Detach and close the handlers added by configure_logging."""
    target = logger or logging.getLogger()
    for handler in list(target.handlers):
        if getattr(handler, _HANDLER_FLAG, False):
            target.removeHandler(handler)
            handler.close()


def configure_logging(log_dir: str, session_start: str, debug: bool = False,
                      logger: Optional[logging.Logger] = None) -> Path:
    """
    Attach the game's log handlers.

    Args:
        log_dir: Directory that receives the log file (created if missing).
        session_start: Process start timestamp formatted with LOG_DATE_FORMAT.
        debug: Also echo every log line to stdout.
        logger: Logger to configure; the root logger by default.

    Returns:
        Path of the log file for this run.
    """
    target = logger or logging.getLogger()
    remove_handlers(target)

    directory = Path(log_dir)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / log_file_name(session_start)

    formatter = SeverityFormatter()
    file_handler = logging.FileHandler(path, mode='a', encoding='utf-8', delay=True)
    file_handler.setFormatter(formatter)
    setattr(file_handler, _HANDLER_FLAG, True)
    target.addHandler(file_handler)

    if debug:
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(formatter)
        setattr(stream_handler, _HANDLER_FLAG, True)
        target.addHandler(stream_handler)

    target.setLevel(logging.DEBUG if debug else logging.INFO)
    return path
