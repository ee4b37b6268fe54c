import logging
import os
import sys
from typing import List

from ..configuration.config import Config


class Logger:
    @staticmethod
    def configure_logger(config: Config):
        log_level = logging.DEBUG if config.debug else logging.INFO

        stdout_format = "%(message)s"
        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

        stdout_handler = logging.StreamHandler(sys.stdout)
        stdout_handler.setLevel(log_level)
        stdout_handler.setFormatter(logging.Formatter(stdout_format))
        handlers: List[logging.Handler] = [stdout_handler]

        # No file output when the log file name is blanked out
        if config.log_file_name:
            full_log_path = os.path.join(config.log_folder, config.log_file_name)
            os.makedirs(os.path.dirname(full_log_path) or ".", exist_ok=True)

            file_handler = MultilineFileHandler(full_log_path)
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(file_format))
            handlers.append(file_handler)

        logging.basicConfig(
            format="%(message)s",
            level=log_level,
            handlers=handlers,
            force=True,
        )
        logging.getLogger("urllib3").setLevel(logging.WARNING)

    @staticmethod
    def get_logger(name: str):
        return logging.getLogger(name)


class MultilineFileHandler(logging.FileHandler):
    """Writes each line of a multi-line message as its own formatted log line."""

    def __init__(self, filename, mode="a", encoding="utf-8", delay=False):
        super().__init__(filename, mode, encoding, delay)

    def emit(self, record):
        try:
            lines = [line for line in record.getMessage().splitlines() if line.strip()]
            for line in lines:
                super().emit(logging.makeLogRecord({**record.__dict__, "msg": line, "args": None}))
        except Exception:
            self.handleError(record)
