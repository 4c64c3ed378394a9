from typing import Sequence, Tuple

import svgwrite


class SvgSurface:
    """Drawing surface backed by an svgwrite document of fixed pixel size."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.dwg = svgwrite.Drawing(size=(width, height), viewBox=f"0 0 {width} {height}")

    def fill_rect(self, x: float, y: float, width: float, height: float, color: str):
        self.dwg.add(self.dwg.rect(insert=(x, y), size=(width, height), fill=color))

    def stroke_path(self, points: Sequence[Tuple[float, float]], color: str, width: float):
        if not points:
            return
        (x0, y0), rest = points[0], points[1:]
        path_data = [f"M {x0:.2f},{y0:.2f}"]
        path_data.extend(f"L {x:.2f},{y:.2f}" for x, y in rest)
        self.dwg.add(self.dwg.path(d=" ".join(path_data), stroke=color, fill="none", stroke_width=width,
                                   stroke_linejoin="round"))

    def clear(self):
        self.dwg = svgwrite.Drawing(size=(self.width, self.height), viewBox=f"0 0 {self.width} {self.height}")

    def tostring(self) -> str:
        return self.dwg.tostring()

    def save(self, filename: str):
        self.dwg.saveas(filename, pretty=True)
