# config.py

"""
Settings for the command-line front ends.

Values come from LINECALC_* environment variables (a .env file is merged in by
python-dotenv first) and can be overridden by command-line flags.
"""

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "LINECALC_"
DEFAULT_HISTORY_FILE = Path("~/.linecalc_history").expanduser()

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseModel):
    """Front-end configuration."""
    prompt: str = "> "
    history_file: Optional[Path] = Field(default=DEFAULT_HISTORY_FILE,
                                         description="None disables persistent history")
    log_level: str = "WARNING"
    precision: Optional[int] = Field(default=None, ge=1, le=17,
                                     description="Significant digits when printing results")

    @field_validator('history_file', mode='before')
    @classmethod
    def empty_history_disables(cls, v):
        if isinstance(v, str):
            if not v.strip():
                return None
            return Path(v.strip()).expanduser()
        return v

    @field_validator('log_level')
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @field_validator('precision', mode='before')
    @classmethod
    def empty_precision_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)


def load_settings(environ: Optional[Mapping[str, str]] = None, **overrides) -> Settings:
    """
    Builds Settings from the environment plus explicit overrides.

    When `environ` is not given, the process environment is used after loading
    a .env file. Overrides whose value is None are ignored.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ
    values = {}
    for name in Settings.model_fields:
        key = ENV_PREFIX + name.upper()
        if key in environ:
            values[name] = environ[key]
    values.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**values)
