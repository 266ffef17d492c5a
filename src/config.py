from __future__ import annotations

from functools import cache
from pathlib import Path
from typing import Literal, get_args

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CSV_PATH = Path("eBid_Monthly_Sales.csv")
DEFAULT_BID_KEY = "98109"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)


class AppSettings(BaseSettings):
    csv_path: Path = DEFAULT_CSV_PATH
    bid_key: str = DEFAULT_BID_KEY
    log_level: LogLevel = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="BID_LIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        if isinstance(value, str):
            return value.strip().upper()
        return value


@cache
def config() -> AppSettings:
    return AppSettings()
