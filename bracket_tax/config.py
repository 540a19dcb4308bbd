from __future__ import annotations

import logging
import os
from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic import ConfigDict, field_validator

DEFAULT_TAX_TABLE = "tax_table.csv"
DEFAULT_LOG_LEVEL = "WARNING"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


class Settings(BaseModel):
    tax_table_path: str = Field(default_factory=lambda: _env_str("TAX_TABLE_PATH", DEFAULT_TAX_TABLE))
    log_level: str = Field(default_factory=lambda: _env_str("TAX_LOG_LEVEL", DEFAULT_LOG_LEVEL))

    model_config = ConfigDict(frozen=True, validate_default=True)

    @field_validator("tax_table_path")
    @classmethod
    def _validate_table_path(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("TAX_TABLE_PATH must not be blank")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        upper = (value or DEFAULT_LOG_LEVEL).upper()
        if upper not in _LOG_LEVELS:
            raise ValueError(f"TAX_LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {upper}")
        return upper

    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
