from server_logs.base import Logger, utc_timestamp
import json


def format_record(log_type, level, msg, data) -> str:
    return json.dumps({
        "ts": utc_timestamp(),
        "log_type": log_type,
        "level": level,
        "event": msg,
        **data
    }, ensure_ascii=False, default=str)


class JSONLogger(Logger):

    def _log(self, level, msg, data):
        print(format_record(self.log_type, level, msg, data))
