"""Exception types raised by the plotting pipeline."""


class GraphCalcError(Exception):
    """Base class for graphcalc errors."""


class InvalidViewportError(GraphCalcError, ValueError):
    """Raised when a viewport would have non-finite or non-increasing bounds."""


class EvaluationError(GraphCalcError):
    """Raised by an expression evaluator when an expression has no usable value."""
