from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Dict, List, Mapping, Tuple

import pytest

_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_ROOT))

from graphcalc.errors import EvaluationError  # noqa: E402


class FakeEvaluator:
    """Evaluator over plain Python callables keyed by expression text."""

    def __init__(self, funcs: Dict[str, Callable[[float], float]]) -> None:
        self.funcs = funcs
        self.calls: List[Tuple[str, dict]] = []

    def evaluate(self, expression: str, bindings: Mapping[str, float]) -> float:
        self.calls.append((expression, dict(bindings)))
        if expression not in self.funcs:
            raise EvaluationError(f"unknown expression {expression!r}")
        return self.funcs[expression](bindings["x"])


class RecordingSurface:
    """Surface that remembers every call it receives."""

    def __init__(self) -> None:
        self.ops: List[tuple] = []
        self.clears = 0

    def clear(self) -> None:
        self.clears += 1
        self.ops = []

    def fill_rect(self, x, y, width, height, color) -> None:
        self.ops.append(("fill_rect", x, y, width, height, color))

    def stroke_path(self, points, color, width) -> None:
        self.ops.append(("stroke_path", tuple(points), color, width))


@pytest.fixture
def make_evaluator():
    return FakeEvaluator


@pytest.fixture
def recording_surface() -> RecordingSurface:
    return RecordingSurface()
