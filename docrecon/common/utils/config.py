"""
Load configuration from `config.toml`.

Set `DOCRECON_CONFIG` to point at a different file.
"""

import logging
import os
from pathlib import Path

from pydantic import BaseModel, field_validator

THIS_DIR = Path(__file__).parent.resolve()

DEFAULT_CONFIG_FILE_PATH = THIS_DIR / "config.toml"


class Config(BaseModel):
    line_batch_size: int
    same_line_tolerance: float  # normalized page units
    structured_block_limit: int
    max_result_pages: int
    log_level: str = "DEBUG"

    @field_validator("same_line_tolerance", mode="before")
    def between_zero_and_one(cls, value: float) -> float:
        if not (0.0 <= value <= 1.0):
            raise ValueError("Value must be between 0 and 1.")
        return value

    @field_validator("line_batch_size", "max_result_pages", mode="before")
    def positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Value must be positive.")
        return value

    @field_validator("structured_block_limit", mode="before")
    def non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("Value must not be negative.")
        return value

    @field_validator("log_level", mode="before")
    def known_level(cls, value: str) -> str:
        level = str(value).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


def config_path() -> Path:
    override = os.environ.get("DOCRECON_CONFIG")
    return Path(override) if override else DEFAULT_CONFIG_FILE_PATH


def load_config(path: Path | None = None) -> Config:
    import tomli

    with open(path or config_path(), "rb") as f:
        data = tomli.load(f)

    config_data = {k.lower(): v for k, v in data.items()}
    return Config(**config_data)


config = load_config()


def set_config(new_config: Config) -> None:
    global config
    config = new_config


__all__ = ["Config", "config", "load_config", "set_config"]
