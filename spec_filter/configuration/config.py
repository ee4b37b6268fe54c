import os
from enum import Enum
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class Envs(Enum):
    DEV = "dev"
    PROD = "prod"


class Config(BaseModel):
    """Settings shared by the loader and the logging setup."""

    env: Envs = Envs.PROD
    debug: bool = False
    log_folder: str = "logs"
    log_file_name: Optional[str] = "spec_filter.log"
    request_timeout: int = Field(default=30, gt=0)

    @staticmethod
    def from_env(dotenv_path: Optional[str] = None) -> "Config":
        """Builds a Config from SPEC_FILTER_* environment variables, reading .env first."""
        load_dotenv(dotenv_path, override=False)

        values = {}
        if os.getenv("SPEC_FILTER_ENV"):
            values["env"] = Envs(os.environ["SPEC_FILTER_ENV"].lower())
        if os.getenv("SPEC_FILTER_DEBUG"):
            values["debug"] = os.environ["SPEC_FILTER_DEBUG"].lower() in ("1", "true", "yes")
        if os.getenv("SPEC_FILTER_LOG_FOLDER"):
            values["log_folder"] = os.environ["SPEC_FILTER_LOG_FOLDER"]
        if "SPEC_FILTER_LOG_FILE" in os.environ:
            values["log_file_name"] = os.environ["SPEC_FILTER_LOG_FILE"] or None
        if os.getenv("SPEC_FILTER_REQUEST_TIMEOUT"):
            values["request_timeout"] = int(os.environ["SPEC_FILTER_REQUEST_TIMEOUT"])
        return Config(**values)
