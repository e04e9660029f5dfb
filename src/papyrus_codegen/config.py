import os
from typing import Literal

from pydantic import BaseModel

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"]


class Settings(BaseModel):
    strict: bool = False
    log_level: LogLevel = "WARNING"
    indent: int = 4


def get_settings() -> Settings:
    """Read settings from ``PAPYRUS_CODEGEN_*`` environment variables."""
    return Settings.model_validate(
        {
            "strict": os.getenv("PAPYRUS_CODEGEN_STRICT", "false"),
            "log_level": os.getenv("PAPYRUS_CODEGEN_LOG_LEVEL", "WARNING").upper(),
            "indent": os.getenv("PAPYRUS_CODEGEN_INDENT", "4"),
        }
    )
