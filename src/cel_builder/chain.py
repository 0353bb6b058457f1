"""Grammar chain for comparison / boolean expressions.

Each state exposes only the methods that are legal from it::

    LeftInitializer  --a / the-->            LeftOperand / LeftStatement
    LeftStatement    --s-->                  LeftStatement
    LeftOperand      --is_equal, ...-->      RightInitializer
    RightInitializer --a / the-->            RightOperand / RightStatement
    RightStatement   --s-->                  RightStatement
    RightOperand     --and_ / or_-->         LeftInitializer
    RightOperand     --build(...)-->         Expression

Calling ``a()``, ``the()`` or ``s()`` without a value defers it to
``build()`` and appends its type to the node's ``Ts`` parameters; passing
a value bakes it into the expression text and leaves ``Ts`` unchanged.
A type checker therefore sees ``build()`` with exactly the deferred
argument types, e.g. ``builder.a().is_equal.a()`` is a
``RightOperand[Any, Any]``.
"""

from __future__ import annotations

from typing import Any, overload

from .assembler import DEFERRED, Builder, ChainNode, Ts
from .values import Placeholder, new_argument, new_placeholder

EQUAL = " == "
NOT_EQUAL = " != "
LESS = " < "
LESS_OR_EQUAL = " <= "
GREATER = " > "
GREATER_OR_EQUAL = " >= "
AND = " && "
OR = " || "


def _name_step(name: str | None) -> tuple[Placeholder, Any]:
    return new_placeholder(), DEFERRED if name is None else name


def _property_steps(name: str | None) -> tuple[tuple[Placeholder, Any], ...]:
    # A deferred property still needs its leading dot in the literal text.
    if name is None:
        return (new_placeholder(), "."), (new_placeholder(), DEFERRED)
    return ((new_placeholder(), f".{name}"),)


class LeftInitializer(ChainNode[*Ts]):
    """Start of a clause: expects the left-hand operand."""

    __slots__ = ()

    @overload
    def a(self) -> LeftOperand[*Ts, Any]: ...
    @overload
    def a(self, value: Any) -> LeftOperand[*Ts]: ...

    def a(self, value: Any = DEFERRED) -> LeftOperand[*Ts, Any] | LeftOperand[*Ts]:
        """Left operand value; omit *value* to supply it at build time."""
        return self._step(LeftOperand, (new_argument(), value))

    @overload
    def the(self, name: None = None) -> LeftStatement[*Ts, str]: ...
    @overload
    def the(self, name: str) -> LeftStatement[*Ts]: ...

    def the(self, name: str | None = None) -> LeftStatement[*Ts, str] | LeftStatement[*Ts]:
        """Left operand naming a variable or property root, emitted verbatim."""
        return self._step(LeftStatement, _name_step(name))


class LeftOperand(ChainNode[*Ts]):
    """Left operand in place: expects a comparison operator."""

    __slots__ = ()

    def _compare(self, operator: str) -> RightInitializer[*Ts]:
        return self._step(RightInitializer, (new_placeholder(), operator))

    @property
    def is_equal(self) -> RightInitializer[*Ts]:
        return self._compare(EQUAL)

    @property
    def is_not_equal(self) -> RightInitializer[*Ts]:
        return self._compare(NOT_EQUAL)

    @property
    def is_less(self) -> RightInitializer[*Ts]:
        return self._compare(LESS)

    @property
    def is_less_or_equal(self) -> RightInitializer[*Ts]:
        return self._compare(LESS_OR_EQUAL)

    @property
    def is_greater(self) -> RightInitializer[*Ts]:
        return self._compare(GREATER)

    @property
    def is_greater_or_equal(self) -> RightInitializer[*Ts]:
        return self._compare(GREATER_OR_EQUAL)


class LeftStatement(LeftOperand[*Ts]):
    """Left operand that is a dotted property path."""

    __slots__ = ()

    @overload
    def s(self, name: None = None) -> LeftStatement[*Ts, str]: ...
    @overload
    def s(self, name: str) -> LeftStatement[*Ts]: ...

    def s(self, name: str | None = None) -> LeftStatement[*Ts, str] | LeftStatement[*Ts]:
        """Append ``.name`` to the property path."""
        return self._step(LeftStatement, *_property_steps(name))


class RightInitializer(ChainNode[*Ts]):
    """Operator in place: expects the right-hand operand."""

    __slots__ = ()

    @overload
    def a(self) -> RightOperand[*Ts, Any]: ...
    @overload
    def a(self, value: Any) -> RightOperand[*Ts]: ...

    def a(self, value: Any = DEFERRED) -> RightOperand[*Ts, Any] | RightOperand[*Ts]:
        """Right operand value; omit *value* to supply it at build time."""
        return self._step(RightOperand, (new_argument(), value))

    @overload
    def the(self, name: None = None) -> RightStatement[*Ts, str]: ...
    @overload
    def the(self, name: str) -> RightStatement[*Ts]: ...

    def the(self, name: str | None = None) -> RightStatement[*Ts, str] | RightStatement[*Ts]:
        """Right operand naming a variable or property root, emitted verbatim."""
        return self._step(RightStatement, _name_step(name))


class RightOperand(Builder[*Ts]):
    """A complete comparison: join another clause or ``build()``."""

    __slots__ = ()

    @property
    def and_(self) -> LeftInitializer[*Ts]:
        return self._step(LeftInitializer, (new_placeholder(), AND))

    @property
    def or_(self) -> LeftInitializer[*Ts]:
        return self._step(LeftInitializer, (new_placeholder(), OR))


class RightStatement(RightOperand[*Ts]):
    """Right operand that is a dotted property path."""

    __slots__ = ()

    @overload
    def s(self, name: None = None) -> RightStatement[*Ts, str]: ...
    @overload
    def s(self, name: str) -> RightStatement[*Ts]: ...

    def s(self, name: str | None = None) -> RightStatement[*Ts, str] | RightStatement[*Ts]:
        """Append ``.name`` to the property path."""
        return self._step(RightStatement, *_property_steps(name))
