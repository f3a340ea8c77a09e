"""
Runtime settings read from the environment.

    NUMERAL_LANGUAGE    default language code        (default: "en")
    NUMERAL_THRESHOLD   replacement threshold, >= 0  (default: 10)
    NUMERAL_LOG_LEVEL   logging level name           (default: "INFO")

Entry points call ``load_dotenv()`` first, so a local ``.env`` file works too.
"""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigurationError, UnknownLanguageError
from .languages import get_language

logger = logging.getLogger(__name__)

_ENV = {
    "language": "NUMERAL_LANGUAGE",
    "threshold": "NUMERAL_THRESHOLD",
    "log_level": "NUMERAL_LOG_LEVEL",
}


class Settings(BaseModel):
    language: str = "en"
    threshold: float = Field(10.0, ge=0)
    log_level: str = "INFO"

    @field_validator("language")
    @classmethod
    def _known_language(cls, value: str) -> str:
        try:
            get_language(value)
        except UnknownLanguageError as exc:
            raise ValueError(str(exc)) from exc
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from ``NUMERAL_*`` variables.

        Raises:
            ConfigurationError: if a variable holds an invalid value.
        """
        raw = {field: os.environ[var] for field, var in _ENV.items() if os.environ.get(var)}
        try:
            settings = cls(**raw)
        except ValidationError as exc:
            raise ConfigurationError(
                "Invalid numeral converter settings",
                {"errors": [e["msg"] for e in exc.errors()], "values": raw},
            ) from exc
        logger.debug("Loaded settings: %s", settings)
        return settings
