"""Leaf values of the expression builder.

``Expression`` wraps finished text. ``Placeholder`` is a one-shot value
cell, and ``Argument`` is the placeholder used for comparison operands,
which quotes string values when rendered.

None of these types can be instantiated directly; use the ``new_*``
factories in this module.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .config.settings import get_settings
from .errors import DoubleAssignmentError, UnassignedValueError
from .sealing import check_seal, construct


def render_value(value: Any) -> str:
    """Render a Python value in its natural expression text form.

    ``None`` becomes ``null`` and booleans become ``true`` / ``false``;
    everything else (numbers, expressions, names) uses ``str()``.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def quote_string(value: str) -> str:
    """Wrap *value* in double quotes, escaping it when configured to."""
    if get_settings().escape_strings:
        value = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{value}"'


class Expression:
    """Immutable wrapper around finished expression text."""

    __slots__ = ("_text",)

    def __init__(self, text: str, *, _seal: object = None) -> None:
        check_seal(type(self), _seal)
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Expression({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Expression):
            return NotImplemented
        return self._text == other._text

    def __hash__(self) -> int:
        return hash((Expression, self._text))


# ---------------------------------------------------------------------------
# Placeholder state
# ---------------------------------------------------------------------------


class _Unset:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<unset>"


_UNSET = _Unset()


@dataclass(frozen=True, slots=True)
class _Assigned:
    value: Any


class Placeholder:
    """A value cell that can be assigned exactly once.

    Reading ``value`` or rendering the placeholder before assignment raises
    ``UnassignedValueError``; assigning a second time raises
    ``DoubleAssignmentError``.
    """

    __slots__ = ("_state",)

    def __init__(self, *, _seal: object = None) -> None:
        check_seal(type(self), _seal)
        self._state: _Unset | _Assigned = _UNSET

    @property
    def is_assigned(self) -> bool:
        return isinstance(self._state, _Assigned)

    @property
    def value(self) -> Any:
        state = self._state
        if not isinstance(state, _Assigned):
            raise UnassignedValueError(
                "Placeholder is not assigned: provide a value before converting to string"
            )
        return state.value

    @value.setter
    def value(self, value: Any) -> None:
        if isinstance(self._state, _Assigned):
            raise DoubleAssignmentError(
                "Placeholder has already been assigned: cannot assign a new value."
            )
        self._state = _Assigned(value)

    def fresh(self) -> Placeholder:
        """Return a new, unassigned placeholder of the same kind."""
        return construct(type(self))

    def render(self) -> str:
        return render_value(self.value)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._state!r})"


class Argument(Placeholder):
    """Placeholder for comparison operands; string values render quoted."""

    __slots__ = ()

    def render(self) -> str:
        value = self.value
        if isinstance(value, str):
            return quote_string(value)
        return render_value(value)


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def new_expression(text: str) -> Expression:
    return construct(Expression, text)


def new_placeholder() -> Placeholder:
    return construct(Placeholder)


def new_argument() -> Argument:
    return construct(Argument)
