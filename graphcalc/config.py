from dataclasses import dataclass
from typing import Tuple

from .viewport import Viewport

DEFAULT_PALETTE: Tuple[str, ...] = (
    "#00ff00",  # green
    "#ff0000",  # red
    "#0000ff",  # blue
    "#ffff00",  # yellow
    "#ff00ff",  # magenta
    "#00ffff",  # cyan
    "#ffa500",  # orange
    "#800080",  # purple
)

# Largest height / width of the start-up window. Horizontal grid lines use the
# x spacing, so a taller window means proportionally more of them.
MAX_ASPECT = 100.0


# --- Configuration & Defaults ---
@dataclass(frozen=True)
class PlotterConfig:
    width: int = 800
    height: int = 600

    # Colours
    background: str = "#000000"
    grid_color: str = "#333333"
    axis_color: str = "#666666"

    # Stroke widths (pixels)
    grid_thickness: float = 1.0
    axis_thickness: float = 2.0
    curve_thickness: float = 2.0

    # Wheel zoom: >1 widens the window, <1 narrows it
    zoom_out_factor: float = 1.1
    zoom_in_factor: float = 0.9

    # Tooltip
    tooltip_decimals: int = 3
    tooltip_offset: Tuple[int, int] = (10, -10)

    # (x_min, x_max, y_min, y_max) shown at start-up and on reset
    default_window: Tuple[float, float, float, float] = (-10.0, 10.0, -10.0, 10.0)

    palette: Tuple[str, ...] = DEFAULT_PALETTE

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"surface size must be positive, got {self.width}x{self.height}")
        if not self.zoom_out_factor > 1.0:
            raise ValueError("zoom_out_factor must be greater than 1")
        if not 0.0 < self.zoom_in_factor < 1.0:
            raise ValueError("zoom_in_factor must lie strictly between 0 and 1")
        if self.tooltip_decimals < 0:
            raise ValueError("tooltip_decimals must be >= 0")
        if not self.palette:
            raise ValueError("palette must contain at least one colour")

        window = Viewport.from_window(self.default_window)
        if window.height / window.width > MAX_ASPECT:
            raise ValueError(f"default_window is more than {MAX_ASPECT:g} times taller than it is wide")

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height
