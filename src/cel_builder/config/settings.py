"""Environment-backed options for rendering, the ``raw()`` hatch and logging.

Library modules read options through ``get_settings()``; tests swap the
shared instance instead of touching the environment.
"""

from __future__ import annotations

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Options for the expression builder.

    Each field is read from ``CEL_BUILDER_<FIELD>`` (any case) or from a
    ``.env`` file in the working directory, e.g.
    ``CEL_BUILDER_ESCAPE_STRINGS=true``.

    Example::

        settings = Settings()
        if settings.escape_strings:
            ...
    """

    model_config = SettingsConfigDict(
        env_prefix="CEL_BUILDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- Logging -----------------------------------------------------------

    log_level: str | None = None
    """Level forced on the ``cel_builder`` logger. None leaves it to the host app."""

    # -- Rendering ---------------------------------------------------------

    escape_strings: bool = False
    """Escape backslashes and double quotes inside quoted string arguments."""

    # -- Escape hatch ------------------------------------------------------

    warn_on_raw: bool = True
    """Emit a ``DeprecationWarning`` whenever ``raw()`` is called."""

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str | None) -> str | None:
        if value is None:
            return None
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level


def configure_logging(settings: Settings) -> None:
    """Apply ``settings.log_level`` to the package logger, if one was set.

    Without an explicit level the logger stays at ``NOTSET`` and follows
    whatever the host application configures.
    """
    if settings.log_level is not None:
        logging.getLogger("cel_builder").setLevel(settings.log_level)


def get_settings() -> Settings:
    """Return the shared ``Settings`` instance.

    The ``.env`` file is read once, when this module is imported.

    Returns:
        The process-wide ``Settings`` object.
    """
    return _settings


_settings = Settings()
