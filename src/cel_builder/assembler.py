"""Template assembly for the expression builder.

A chain node carries two parallel lists: literal text segments and the
placeholders sitting between them, so that
``len(literals) == len(placeholders) + 1`` always holds. ``concat``
extends those lists by one chain step and ``Builder.build`` merges them
with the caller's positional arguments into a finished ``Expression``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Generic, TypeVar, TypeVarTuple

from .errors import MissingBuildArgumentError, MissingElementError
from .sealing import check_seal, construct
from .values import Expression, Placeholder, new_expression

logger = logging.getLogger(__name__)

E = TypeVar("E")
N = TypeVar("N", bound="ChainNode")
Ts = TypeVarTuple("Ts")
"""Types of the deferred values a chain node still needs, in build order."""


class _Deferred:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<deferred>"


DEFERRED: Any = _Deferred()
"""Marks a chain step whose value is supplied later through ``build()``."""


def element_at(items: Sequence[E], index: int, kind: str) -> E:
    """Return ``items[index]`` or raise ``MissingElementError``."""
    if not 0 <= index < len(items):
        raise MissingElementError(f"Missing {kind} at index {index} (have {len(items)})")
    return items[index]


def concat(
    literals: list[str],
    placeholders: list[Placeholder],
    container: Placeholder,
    value: Any,
) -> None:
    """Extend *literals* and *placeholders* in place by one chain step.

    A ``DEFERRED`` value opens a new slot: *container* is appended to the
    placeholders and an empty literal follows it. Any other value is
    assigned into *container* immediately and its rendered text is spliced
    onto the last literal, so it never becomes a build argument.

    Args:
        literals: Literal segments to extend (mutated).
        placeholders: Deferred placeholders to extend (mutated).
        container: Fresh placeholder that receives the value.
        value: The immediate value, or ``DEFERRED``.
    """
    if value is DEFERRED:
        placeholders.append(container)
        literals.append("")
        return
    container.value = value
    last = len(literals) - 1
    literals[last] = element_at(literals, last, "literal") + container.render()


class ChainNode(Generic[*Ts]):
    """Sealed base for every builder state.

    Each node owns private copies of its literal and placeholder lists;
    chain methods clone them before extending, so a node can be branched
    from any number of times. ``Ts`` lists the types of the values
    ``build()`` will take.
    """

    __slots__ = ("_literals", "_placeholders")

    def __init__(
        self,
        literals: list[str],
        placeholders: list[Placeholder],
        *,
        _seal: object = None,
    ) -> None:
        check_seal(type(self), _seal)
        self._literals = literals
        self._placeholders = placeholders

    @property
    def arity(self) -> int:
        """Number of deferred values ``build()`` still needs."""
        return len(self._placeholders)

    @property
    def literals(self) -> tuple[str, ...]:
        return tuple(self._literals)

    @property
    def placeholders(self) -> tuple[Placeholder, ...]:
        return tuple(self._placeholders)

    def _step(self, node_type: type[N], *steps: tuple[Placeholder, Any]) -> N:
        """Clone this node's lists, apply ``concat`` per step, and seal a *node_type*."""
        literals = list(self._literals)
        placeholders = list(self._placeholders)
        for container, value in steps:
            concat(literals, placeholders, container, value)
        return construct(node_type, literals, placeholders)

    def __repr__(self) -> str:
        text = "{}".join(self._literals)
        return f"<{type(self).__name__} arity={self.arity} {text!r}>"


class Builder(ChainNode[*Ts]):
    """Chain node that can be turned into an ``Expression``."""

    __slots__ = ()

    def build(self, *args: *Ts) -> Expression:
        """Fill the deferred slots with *args* and return the expression.

        Each call fills fresh copies of the deferred placeholders, so the
        same node can be built again with other values. Arguments beyond
        ``arity`` are ignored.

        Raises:
            MissingBuildArgumentError: If fewer than ``arity`` arguments
                are supplied.
        """
        literals = self._literals
        placeholders = self._placeholders
        if len(args) < len(placeholders):
            raise MissingBuildArgumentError(
                f"build() expected {len(placeholders)} argument(s), got {len(args)}"
            )
        if len(args) > len(placeholders):
            logger.debug("Ignoring %d extra build argument(s)", len(args) - len(placeholders))

        parts = [element_at(literals, 0, "literal")]
        for index in range(len(literals) - 1):
            slot = element_at(placeholders, index, "placeholder").fresh()
            slot.value = args[index]
            parts.append(slot.render())
            parts.append(element_at(literals, index + 1, "literal"))

        text = "".join(parts)
        logger.debug("Built expression: %s", text)
        return new_expression(text)
