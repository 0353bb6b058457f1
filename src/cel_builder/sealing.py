"""Construction-permission protocol for sealed builder types.

Sealed constructors accept a ``_seal`` keyword and refuse any value other
than the module-private capability token. Only ``construct`` passes it,
so external code can obtain instances only through the builder's own
factories.
"""

from __future__ import annotations

from typing import Any, TypeVar

from .errors import IllegalConstructionError

T = TypeVar("T")


class _Seal:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<seal>"


_SEAL = _Seal()


def check_seal(cls: type, token: object) -> None:
    """Raise unless *token* is the internal capability token.

    Args:
        cls: The type being constructed (used in the error message).
        token: Value passed to the constructor's ``_seal`` keyword.

    Raises:
        IllegalConstructionError: If *token* is not the internal token.
    """
    if token is not _SEAL:
        raise IllegalConstructionError(
            f"Illegal constructor: {cls.__name__} instances are created by the builder"
        )


def construct(cls: type[T], *args: Any, **kwargs: Any) -> T:
    """Instantiate a sealed type with the capability token."""
    return cls(*args, _seal=_SEAL, **kwargs)
