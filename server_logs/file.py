from server_logs.base import Logger
from server_logs.json import format_record
from pathlib import Path


class FileLogger(Logger):
    """Appends one JSON record per line to `<base_path>/<log_type>.log`."""

    def __init__(self, log_type="server", base_path="logs", min_level="DEBUG"):
        super().__init__(log_type=log_type, min_level=min_level)
        self.path = Path(base_path) / f"{log_type}.log"
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def _log(self, level, msg, data):
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(format_record(self.log_type, level, msg, data) + "\n")
