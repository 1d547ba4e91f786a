from server_logs.chooseLogType import get_logger
import os

env = os.getenv("ENV", "dev")
level = os.getenv("LOG_LEVEL", "DEBUG" if env == "dev" else "INFO")
log_dir = os.getenv("LOG_DIR", "logs")

server_logger = get_logger(mode=env, log_type="server", min_level=level, base_path=log_dir)
round_logger = get_logger(mode=env, log_type="round", min_level=level, base_path=log_dir)
lookup_logger = get_logger(mode=env, log_type="lookup", min_level=level, base_path=log_dir)
