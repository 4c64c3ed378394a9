import logging
from typing import Iterable, List, Optional

from .config import PlotterConfig
from .evaluator import ExpressionEvaluator, SympyEvaluator
from .functions import FunctionEntry
from .interaction import InteractionController, Tooltip, WheelEvent
from .renderer import DrawCommand, Surface, build_frame, paint
from .viewport import CoordinateTransform, Viewport

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class GraphPlotter:
    """One plotting widget: view state, the functions it shows, and where it draws.

    Every event that changes the viewport, and every new function list,
    triggers one full synchronous repaint of the attached surface.
    """

    def __init__(self, config: PlotterConfig = PlotterConfig(), evaluator: Optional[ExpressionEvaluator] = None,
                 functions: Iterable[FunctionEntry] = (), surface: Optional[Surface] = None):
        self.cfg = config
        self.evaluator = evaluator or SympyEvaluator()
        self.controller = InteractionController(self.evaluator, config)
        self.functions: List[FunctionEntry] = list(functions)
        self.surface = surface
        self.frames_painted = 0

    @property
    def viewport(self) -> Viewport:
        return self.controller.viewport

    @property
    def tooltip(self) -> Tooltip:
        return self.controller.tooltip

    @property
    def transform(self) -> CoordinateTransform:
        return self.controller.transform

    def frame(self) -> List[DrawCommand]:
        return build_frame(self.viewport, self.functions, self.evaluator, self.cfg)

    def redraw(self) -> bool:
        if self.surface is None:
            logger.debug("redraw requested before a surface was attached")
            return False
        commands = self.frame()
        painted = paint(commands, self.surface)
        if painted:
            self.frames_painted += 1
            logger.debug("painted frame %d (%d commands) for %s", self.frames_painted, len(commands), self.viewport)
        return painted

    def attach(self, surface: Optional[Surface]):
        self.surface = surface
        self.redraw()

    def _after(self, viewport_changed: bool) -> bool:
        if viewport_changed:
            self.redraw()
        return viewport_changed

    # --- Inputs ---
    def set_functions(self, functions: Iterable[FunctionEntry]):
        self.functions = list(functions)
        self.redraw()

    def pointer_down(self, x: float, y: float) -> bool:
        return self._after(self.controller.pointer_down(x, y))

    def pointer_move(self, x: float, y: float) -> bool:
        return self._after(self.controller.pointer_move(x, y, self.functions))

    def pointer_up(self, x: Optional[float] = None, y: Optional[float] = None) -> bool:
        return self._after(self.controller.pointer_up(x, y))

    def pointer_leave(self) -> bool:
        return self._after(self.controller.pointer_leave())

    def wheel(self, x: float, y: float, delta: float) -> WheelEvent:
        event = WheelEvent(x, y, delta)
        self._after(self.controller.wheel(event))
        return event

    def reset_view(self) -> bool:
        return self._after(self.controller.reset_view())

    # --- Convenience gestures built from the primitive events ---
    def drag(self, start_x: float, start_y: float, end_x: float, end_y: float) -> bool:
        self.pointer_down(start_x, start_y)
        changed = self.pointer_move(end_x, end_y)
        self.pointer_up(end_x, end_y)
        return changed
