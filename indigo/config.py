"""Validation schema for match configuration."""

from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from .logging_utils import LEVEL_NAMES

_TRUE_WORDS = ("1", "true", "yes", "y", "on")
_FALSE_WORDS = ("0", "false", "no", "n", "off")


class MatchConfig(BaseModel):
    seed: Optional[int] = Field(None, description="Seed for shuffling and opponent tie-breaks.")
    human_first: Optional[bool] = Field(
        None,
        description="Whether the human moves first; ask interactively when unset.",
    )
    matches: int = Field(1, ge=1, description="Number of matches for the bot arena.")
    log_level: str = Field("WARNING", description="Standard logging level name.")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        normalized = value.upper()
        if normalized not in LEVEL_NAMES:
            raise ValueError(f"Unknown log level: {value!r}")
        return normalized

    @field_validator("human_first", mode="before")
    @classmethod
    def parse_yes_no(cls, value):
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUE_WORDS:
                return True
            if lowered in _FALSE_WORDS:
                return False
            raise ValueError(f"Expected yes or no, got {value!r}")
        return value

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> MatchConfig:
        """Build a config from ``INDIGO_*``/``LOG_LEVEL`` variables, then apply overrides."""
        env = os.environ if environ is None else environ
        values = {}
        for key, var in (
            ("seed", "INDIGO_SEED"),
            ("human_first", "INDIGO_HUMAN_FIRST"),
            ("matches", "INDIGO_MATCHES"),
            ("log_level", "LOG_LEVEL"),
        ):
            if env.get(var):
                values[key] = env[var]
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
