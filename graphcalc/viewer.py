"""Desktop plot viewer: pygame window in front of a GraphPlotter."""

import logging
import os
from typing import Sequence, Tuple

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame

from .interaction import Tooltip
from .plotter import GraphPlotter

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


# =============================================================================
# Constants
# =============================================================================

FONT_SIZE = 16
PADDING = 8
TOOLTIP_BG = (26, 26, 26)
TOOLTIP_ALPHA = 242
TOOLTIP_BORDER = (222, 226, 230)
TOOLTIP_TEXT = (255, 255, 255)

LEFT_BUTTON = 1


class PygameSurface:
    """Drawing surface over a ``pygame.Surface``."""

    def __init__(self, surface: "pygame.Surface"):
        self.surface = surface

    def clear(self):
        self.surface.fill((0, 0, 0))

    def fill_rect(self, x: float, y: float, width: float, height: float, color: str):
        pygame.draw.rect(self.surface, pygame.Color(color), pygame.Rect(x, y, width, height))

    def stroke_path(self, points: Sequence[Tuple[float, float]], color: str, width: float):
        # A lone point has no length to stroke
        if len(points) < 2:
            return
        pygame.draw.lines(self.surface, pygame.Color(color), False, points, max(1, round(width)))


# =============================================================================
# Main Viewer Class
# =============================================================================

class PlotterViewer:
    """Interactive window: drag to pan, scroll to zoom at the cursor, hover for values."""

    def __init__(self, plotter: GraphPlotter, title: str = "graphcalc"):
        self.plotter = plotter
        self.title = title

        self.needs_render = True
        self.running = True

        # Pygame objects (initialized in run())
        self.screen = None
        self.canvas = None
        self.clock = None
        self.font = None

    def run(self):
        """Open the window and process events until it is closed."""
        self._init_pygame()
        logger.info("viewer started (%dx%d, %d function(s))",
                    self.plotter.cfg.width, self.plotter.cfg.height, len(self.plotter.functions))

        while self.running:
            self._handle_events()
            self._render_if_needed()
            self.clock.tick(60)

        logger.info("viewer closed after %d frame(s)", self.plotter.frames_painted)
        pygame.quit()

    def _init_pygame(self):
        pygame.init()
        self.screen = pygame.display.set_mode(self.plotter.cfg.size)
        pygame.display.set_caption(self.title)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("monospace", FONT_SIZE)

        # Curves are painted off-screen and only repainted when the view changes;
        # the tooltip is composited on top every frame.
        self.canvas = pygame.Surface(self.plotter.cfg.size)
        self.plotter.attach(PygameSurface(self.canvas))

    # =========================================================================
    # Event Handling
    # =========================================================================

    def _handle_events(self):
        for event in pygame.event.get():
            handler = self._event_handlers.get(event.type)
            if handler:
                handler(self, event)

    @property
    def _event_handlers(self) -> dict:
        return {
            pygame.QUIT: lambda self, e: setattr(self, 'running', False),
            pygame.KEYDOWN: PlotterViewer._on_keydown,
            pygame.MOUSEBUTTONDOWN: PlotterViewer._on_mouse_down,
            pygame.MOUSEBUTTONUP: PlotterViewer._on_mouse_up,
            pygame.MOUSEMOTION: PlotterViewer._on_mouse_motion,
            pygame.MOUSEWHEEL: PlotterViewer._on_mouse_wheel,
            pygame.WINDOWLEAVE: PlotterViewer._on_window_leave,
        }

    def _on_keydown(self, event):
        if event.key == pygame.K_ESCAPE:
            self.running = False
        elif event.key == pygame.K_r:
            self.plotter.reset_view()
            self.needs_render = True

    def _on_mouse_down(self, event):
        if event.button != LEFT_BUTTON:
            return
        self.plotter.pointer_down(*event.pos)
        self.needs_render = True

    def _on_mouse_up(self, event):
        if event.button == LEFT_BUTTON:
            self.plotter.pointer_up(*event.pos)

    def _on_mouse_motion(self, event):
        self.plotter.pointer_move(*event.pos)
        self.needs_render = True

    def _on_mouse_wheel(self, event):
        # pygame reports wheel-up (towards the screen) as positive y
        mouse_x, mouse_y = pygame.mouse.get_pos()
        self.plotter.wheel(mouse_x, mouse_y, -event.y)
        self.needs_render = True

    def _on_window_leave(self, event):
        self.plotter.pointer_leave()
        self.needs_render = True

    # =========================================================================
    # Rendering
    # =========================================================================

    def _render_if_needed(self):
        if not self.needs_render:
            return

        self.screen.blit(self.canvas, (0, 0))
        self._draw_tooltip(self.plotter.tooltip)
        pygame.display.flip()
        self.needs_render = False

    def _draw_tooltip(self, tooltip: Tooltip):
        if not tooltip.visible or not tooltip.lines:
            return

        line_height = self.font.get_linesize()
        box_w = max(self.font.size(line)[0] for line in tooltip.lines) + PADDING * 2
        box_h = len(tooltip.lines) * line_height + PADDING * 2
        off_x, off_y = self.plotter.cfg.tooltip_offset
        left = tooltip.screen_x + off_x
        top = tooltip.screen_y + off_y

        bg = pygame.Surface((box_w, box_h))
        bg.set_alpha(TOOLTIP_ALPHA)
        bg.fill(TOOLTIP_BG)
        self.screen.blit(bg, (left, top))
        pygame.draw.rect(self.screen, TOOLTIP_BORDER, pygame.Rect(left, top, box_w, box_h), 1)

        for i, line in enumerate(tooltip.lines):
            text_surface = self.font.render(line, True, TOOLTIP_TEXT)
            self.screen.blit(text_surface, (left + PADDING, top + PADDING + i * line_height))
