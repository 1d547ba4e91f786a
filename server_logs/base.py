from abc import ABC, abstractmethod
from datetime import datetime, timezone

LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class Logger(ABC):
    """Structured event logger: an event name plus keyword data."""

    def __init__(self, log_type="server", min_level="DEBUG"):
        self.log_type = log_type
        self.min_level = LEVELS.get(min_level.upper(), 10)

    @abstractmethod
    def _log(self, level: str, msg: str, data: dict): ...

    def _emit(self, level, msg, data):
        if LEVELS[level] >= self.min_level:
            self._log(level, msg, data)

    def info(self, msg: str, **data):
        self._emit("INFO", msg, data)

    def debug(self, msg: str, **data):
        self._emit("DEBUG", msg, data)

    def warning(self, msg: str, **data):
        self._emit("WARN", msg, data)

    def error(self, msg: str, **data):
        self._emit("ERROR", msg, data)
