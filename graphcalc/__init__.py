"""Pannable, zoomable plots of y = f(x) with values under the pointer.

>>> from graphcalc import GraphPlotter, FunctionList  # doctest: +SKIP
"""

from .config import PlotterConfig
from .errors import EvaluationError, GraphCalcError, InvalidViewportError
from .evaluator import ExpressionEvaluator, SympyEvaluator, evaluate_at
from .functions import FunctionEntry, FunctionList
from .grid import GridLayout, compute_grid
from .interaction import InteractionController, Tooltip, WheelEvent
from .plotter import GraphPlotter
from .renderer import FillRect, StrokePath, build_frame, paint
from .sampler import sample_function
from .surfaces import SvgSurface
from .viewport import CoordinateTransform, Point, Viewport

__version__ = "0.1.0"
