from server_logs.stdout import StdoutLogger
from server_logs.file import FileLogger
from server_logs.json import JSONLogger
from server_logs.composite import CompositeLogger


def get_logger(mode="dev", log_type="server", min_level="DEBUG", base_path="logs"):
    if mode == "prod":
        return CompositeLogger(
            FileLogger(log_type=log_type, base_path=base_path, min_level=min_level),
            JSONLogger(log_type=log_type, min_level=min_level)
        )
    return StdoutLogger(log_type=log_type, min_level=min_level)
