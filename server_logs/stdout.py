from server_logs.base import Logger, utc_timestamp


class StdoutLogger(Logger):

    def _log(self, level, msg, data):
        print(f"[{utc_timestamp()}] [{self.log_type}] {level} {msg} {data}")
