# config.py
"""Settings for the interactive shell, read from the environment (and a .env file)."""

import logging
import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, field_validator

ENV_PREFIX = "PRATT_CALC_"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class CalculatorSettings(BaseModel):
    """Model for shell configuration."""
    prompt: str = ">> "
    history_file: Optional[str] = None
    log_level: str = "WARNING"
    show_banner: bool = True

    @field_validator('prompt')
    @classmethod
    def prompt_must_not_be_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('Prompt cannot be empty')
        return v

    @field_validator('history_file')
    @classmethod
    def expand_history_path(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return os.path.expanduser(v.strip())

    @field_validator('log_level')
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def log_level_number(self) -> int:
        return getattr(logging, self.log_level)


def load_settings(dotenv: bool = True) -> CalculatorSettings:
    """Build settings from ``PRATT_CALC_*`` environment variables.

    Raises pydantic.ValidationError for invalid values.
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))
    values = {}
    for field in ('prompt', 'history_file', 'log_level'):
        raw = os.getenv(ENV_PREFIX + field.upper())
        if raw is not None:
            values[field] = raw
    banner = os.getenv(ENV_PREFIX + "BANNER")
    if banner is not None:
        values['show_banner'] = banner
    return CalculatorSettings(**values)
