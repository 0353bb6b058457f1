"""
Typed fluent builder for comparison / boolean expression strings.

Start from ``builder``, chain operands, operators and connectors, and
finish with ``build(...)`` to fill any deferred values::

    from cel_builder import builder

    expr = builder.the("user").s("age").is_greater_or_equal.a().build(18)
    str(expr)  # 'user.age >= 18'
"""

import logging

from .assembler import Builder, ChainNode
from .chain import (
    LeftInitializer,
    LeftOperand,
    LeftStatement,
    RightInitializer,
    RightOperand,
    RightStatement,
)
from .config.settings import configure_logging, get_settings
from .entry import builder, raw
from .errors import (
    CELBuilderError,
    DoubleAssignmentError,
    IllegalConstructionError,
    MissingBuildArgumentError,
    MissingElementError,
    UnassignedValueError,
)
from .values import Argument, Expression, Placeholder

_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())
configure_logging(get_settings())

__all__ = [
    # Entry points
    "builder",
    "raw",
    # Values
    "Expression",
    "Placeholder",
    "Argument",
    # Chain states
    "ChainNode",
    "Builder",
    "LeftInitializer",
    "LeftOperand",
    "LeftStatement",
    "RightInitializer",
    "RightOperand",
    "RightStatement",
    # Errors
    "CELBuilderError",
    "IllegalConstructionError",
    "DoubleAssignmentError",
    "UnassignedValueError",
    "MissingElementError",
    "MissingBuildArgumentError",
]
