"""Entry points: the shared ``builder`` and the ``raw`` escape hatch."""

from __future__ import annotations

import logging
import warnings

from .chain import LeftInitializer
from .config.settings import get_settings
from .sealing import construct
from .values import Expression, new_expression

logger = logging.getLogger(__name__)

builder: LeftInitializer[()] = construct(LeftInitializer, [""], [])
"""Shared starting state with no deferred arguments. Immutable, safe to reuse."""


def raw(text: str) -> Expression:
    """Wrap *text* as an ``Expression`` without any grammar checks.

    .. deprecated::
        Unsafe: nothing is quoted or validated. Use ``builder`` instead.
    """
    if get_settings().warn_on_raw:
        warnings.warn(
            "raw() is unsafe and deprecated; use builder instead",
            DeprecationWarning,
            stacklevel=2,
        )
    logger.debug("Creating raw expression: %s", text)
    return new_expression(text)
