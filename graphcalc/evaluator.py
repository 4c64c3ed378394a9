import functools
import logging
import math
import numbers
import re
from typing import Callable, Mapping, Optional, Protocol, Tuple, Union

import sympy as sp
from sympy.parsing.sympy_parser import parse_expr, standard_transformations, implicit_multiplication_application, \
    convert_xor

from .errors import EvaluationError

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

TRANSFORMATIONS = standard_transformations + (implicit_multiplication_application, convert_xor)

# Names the parser should treat as constants rather than free symbols
CONSTANTS = {"e": sp.E, "pi": sp.pi}

# Distinct (expression, variables) pairs kept compiled per evaluator
CACHE_SIZE = 256


class ExpressionEvaluator(Protocol):
    def evaluate(self, expression: str, bindings: Mapping[str, float]) -> float:
        """Value of ``expression`` under ``bindings``; raises on failure."""
        ...


def _as_finite_float(value) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return None
    value = float(value)
    return value if math.isfinite(value) else None


def evaluate_at(evaluator: ExpressionEvaluator, expression: str, x: float) -> Optional[float]:
    """Evaluate ``expression`` at ``x``; ``None`` means undefined there.

    Any failure the evaluator raises, and any non-finite or non-real result,
    is reported the same way.
    """
    try:
        result = evaluator.evaluate(expression, {"x": x})
    except Exception as e:
        logger.debug("evaluation of %r failed at x=%r: %s", expression, x, e)
        return None
    return _as_finite_float(result)


class SympyEvaluator:
    """Expression evaluator backed by sympy's parser and ``lambdify``.

    Accepts the same input style as the grapher pages: ``x^2``, ``2x``,
    ``sin(x)``, optionally prefixed with ``y =``. Compiled callables (and
    parse failures) are kept in an LRU cache of ``cache_size`` entries per
    expression and variable set, since the sampler calls back once per pixel
    column.
    """

    def __init__(self, cache_size: int = CACHE_SIZE):
        self._cached = functools.lru_cache(maxsize=cache_size)(self._compile_or_error)

    def compile(self, expression: str, names: Tuple[str, ...] = ("x",)) -> Callable:
        compiled = self._cached(expression, names)
        if isinstance(compiled, EvaluationError):
            raise compiled.with_traceback(None)
        return compiled

    def _compile_or_error(self, expression: str, names: Tuple[str, ...]) -> Union[Callable, EvaluationError]:
        try:
            return self._compile(expression, names)
        except EvaluationError as e:
            logger.debug("not compiling %r: %s", expression, e)
            return e

    @staticmethod
    def _compile(expression: str, names: Tuple[str, ...]) -> Callable:
        clean_expr = re.sub(r'^\s*y\s*=\s*', '', expression or "")
        if not clean_expr.strip():
            raise EvaluationError("empty expression")
        try:
            expr = parse_expr(clean_expr, local_dict=dict(CONSTANTS), transformations=TRANSFORMATIONS)
        except Exception as e:
            raise EvaluationError(f"could not parse {expression!r}: {e}") from e

        if not isinstance(expr, sp.Expr):
            raise EvaluationError(f"{expression!r} is not a scalar expression")

        unbound = sorted(str(s) for s in expr.free_symbols if str(s) not in names)
        if unbound:
            raise EvaluationError(f"unbound names in {expression!r}: {', '.join(unbound)}")

        symbols = [sp.Symbol(n) for n in names]
        try:
            return sp.lambdify(symbols, expr, modules=['math'])
        except Exception as e:
            raise EvaluationError(f"could not compile {expression!r}: {e}") from e

    def evaluate(self, expression: str, bindings: Mapping[str, float]) -> float:
        names = tuple(sorted(bindings))
        f = self.compile(expression, names)
        try:
            val = f(*(bindings[n] for n in names))
        except Exception as e:
            raise EvaluationError(f"{expression!r} undefined at {dict(bindings)}: {e}") from e

        result = _as_finite_float(val)
        if result is None:
            raise EvaluationError(f"{expression!r} has no finite real value at {dict(bindings)}")
        return result

    def cache_info(self):
        return self._cached.cache_info()

    def clear_cache(self):
        self._cached.cache_clear()
