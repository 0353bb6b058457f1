"""Error taxonomy for the expression builder.

Every error is a programmer-error signal raised at the point of violation.
Each class also derives from the closest builtin so callers may catch
either the builder-specific type or the builtin one.
"""


class CELBuilderError(Exception):
    """Base class for all builder errors."""


class IllegalConstructionError(CELBuilderError, TypeError):
    """A sealed type was instantiated outside its internal factory."""


class DoubleAssignmentError(CELBuilderError, ValueError):
    """A placeholder was assigned a value more than once."""


class UnassignedValueError(CELBuilderError, ValueError):
    """A placeholder was read or rendered before a value was assigned."""


class MissingElementError(CELBuilderError, LookupError):
    """A literal or placeholder index was out of range (broken chain invariant)."""


class MissingBuildArgumentError(CELBuilderError, TypeError):
    """``build()`` received fewer arguments than there are deferred slots."""
