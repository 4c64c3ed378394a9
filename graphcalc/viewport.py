import math
from dataclasses import dataclass
from typing import NamedTuple

from .errors import InvalidViewportError


class Point(NamedTuple):
    x: float
    y: float


# Same shape, different coordinate spaces
WorldPoint = Point
ScreenPoint = Point

# Usable span of either axis. Outside this range the grid spacing
# (a power of ten derived from the x span) overflows or underflows.
MIN_SPAN = 1e-300
MAX_SPAN = 1e300


@dataclass(frozen=True)
class Viewport:
    """Visible world rectangle.

    Bounds are finite and strictly increasing, and both spans lie within
    ``[MIN_SPAN, MAX_SPAN]``.
    """
    x_min: float = -10.0
    x_max: float = 10.0
    y_min: float = -10.0
    y_max: float = 10.0

    def __post_init__(self):
        bounds = (self.x_min, self.x_max, self.y_min, self.y_max)
        if not all(math.isfinite(b) for b in bounds):
            raise InvalidViewportError(f"viewport bounds must be finite: {bounds}")
        if not (self.x_min < self.x_max and self.y_min < self.y_max):
            raise InvalidViewportError(f"viewport needs min < max on both axes: {bounds}")
        if not all(MIN_SPAN <= span <= MAX_SPAN for span in (self.width, self.height)):
            raise InvalidViewportError(f"viewport spans must lie within [{MIN_SPAN:g}, {MAX_SPAN:g}]: {bounds}")

    @classmethod
    def from_window(cls, window) -> "Viewport":
        x_min, x_max, y_min, y_max = window
        return cls(float(x_min), float(x_max), float(y_min), float(y_max))

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    def translated(self, dx: float, dy: float) -> "Viewport":
        return Viewport(self.x_min + dx, self.x_max + dx, self.y_min + dy, self.y_max + dy)

    def scaled_about(self, anchor: Point, factor: float) -> "Viewport":
        """Rescale by ``factor`` keeping ``anchor`` at the same relative position."""
        ax, ay = anchor
        return Viewport(
            ax - (ax - self.x_min) * factor,
            ax + (self.x_max - ax) * factor,
            ay - (ay - self.y_min) * factor,
            ay + (self.y_max - ay) * factor,
        )


class CoordinateTransform:
    """World <-> pixel mapping for one viewport on a fixed-size surface.

    Screen y grows downwards while world y grows upwards, so the vertical
    axis is flipped in both directions of the mapping.
    """

    def __init__(self, viewport: Viewport, width: int, height: int):
        self.viewport = viewport
        self.width = width
        self.height = height

    @property
    def world_per_pixel_x(self) -> float:
        return self.viewport.width / self.width

    @property
    def world_per_pixel_y(self) -> float:
        return self.viewport.height / self.height

    def world_to_screen(self, wx: float, wy: float) -> ScreenPoint:
        v = self.viewport
        sx = (wx - v.x_min) / v.width * self.width
        sy = (v.y_max - wy) / v.height * self.height
        return ScreenPoint(sx, sy)

    def screen_to_world(self, sx: float, sy: float) -> WorldPoint:
        v = self.viewport
        wx = v.x_min + sx / self.width * v.width
        wy = v.y_max - sy / self.height * v.height
        return WorldPoint(wx, wy)

    def on_screen_y(self, sy: float) -> bool:
        return 0 <= sy <= self.height
