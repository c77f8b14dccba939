import logging
import os
from pydantic import BaseModel, Field, field_validator

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class Settings(BaseModel):
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    LOG_DATEFMT: str = "%Y-%m-%d %H:%M:%S"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def validate_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if level not in _LEVELS:
            raise ValueError(
                f"Unknown log level '{value}'. Expected one of {', '.join(_LEVELS)}."
            )
        return level

    @property
    def level(self) -> int:
        return getattr(logging, self.LOG_LEVEL)

    @classmethod
    def load(cls) -> "Settings":
        overrides = {
            name: os.environ[name]
            for name in ("LOG_LEVEL", "LOG_FORMAT", "LOG_DATEFMT")
            if os.environ.get(name)
        }
        return cls(**overrides)


settings = Settings.load()
