"""
shape_renderer.py
-----------------
Draws frame-local shapes onto the pygame window.

Responsibilities:
- Map frame-local coordinates to window pixels (zoom + letterbox offset)
- Draw rectangles, ellipses, diamonds, polylines, text and image placeholders
- Apply shape opacity (0-100) as surface alpha
"""

import pygame

from frameshow.core.debug.debug_logger import DebugLogger
from frameshow.core.runtime.settings import Debug, Render


TRANSPARENT = "transparent"
POLYLINE_TYPES = ("line", "arrow", "freedraw")


class ShapeRenderer:
    """Stateless-per-frame shape painter with color and font caches."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self):
        self._colors = {}
        self._fonts = {}
        self._warned_types = set()
        DebugLogger.init_entry("ShapeRenderer")

    # ===========================================================
    # Public API
    # ===========================================================

    def draw(self, surface, shapes, fit):
        """
        Draw `shapes` onto `surface`.

        Args:
            surface: Target pygame surface (the window)
            shapes: Frame-local shapes, drawn in list order
            fit: FitRect of the current frame; fit.scale is the zoom
        """
        for shape in shapes:
            alpha = self._alpha(shape.opacity)
            if alpha <= 0:
                continue

            rect = self._screen_rect(shape, fit)
            stroke = max(1, round(shape.stroke_width * fit.scale))
            pad = stroke
            layer = pygame.Surface((rect.width + 2 * pad, rect.height + 2 * pad), pygame.SRCALPHA)
            local = pygame.Rect(pad, pad, rect.width, rect.height)

            self._draw_shape(layer, shape, local, stroke, fit.scale)

            layer.set_alpha(alpha)
            surface.blit(layer, (rect.x - pad, rect.y - pad))

        if Debug.SHOW_FRAME_OUTLINE:
            outline = pygame.Rect(round(fit.offset_x), round(fit.offset_y),
                                  round(fit.width), round(fit.height))
            pygame.draw.rect(surface, (255, 0, 0), outline, 1)

    # ===========================================================
    # Shape Drawing
    # ===========================================================

    def _draw_shape(self, layer, shape, rect, stroke, scale):
        """Dispatch on shape type."""
        stroke_color = self._color(shape.extra.get("strokeColor")) or Render.DEFAULT_STROKE_COLOR
        fill_color = self._color(shape.extra.get("backgroundColor"))

        if shape.type == "rectangle":
            if fill_color:
                pygame.draw.rect(layer, fill_color, rect)
            pygame.draw.rect(layer, stroke_color, rect, stroke)

        elif shape.type == "ellipse":
            if fill_color:
                pygame.draw.ellipse(layer, fill_color, rect)
            pygame.draw.ellipse(layer, stroke_color, rect, stroke)

        elif shape.type == "diamond":
            points = [rect.midtop, rect.midright, rect.midbottom, rect.midleft]
            if fill_color:
                pygame.draw.polygon(layer, fill_color, points)
            pygame.draw.polygon(layer, stroke_color, points, stroke)

        elif shape.type in POLYLINE_TYPES:
            self._draw_polyline(layer, shape, rect, stroke_color, stroke, scale)

        elif shape.type == "text":
            self._draw_text(layer, shape, rect, stroke_color, scale)

        elif shape.type == "image":
            # File loading belongs to the host application; show the bounds
            pygame.draw.rect(layer, stroke_color, rect, 1)
            pygame.draw.line(layer, stroke_color, rect.topleft, rect.bottomright)
            pygame.draw.line(layer, stroke_color, rect.bottomleft, rect.topright)

        else:
            if shape.type not in self._warned_types:
                self._warned_types.add(shape.type)
                DebugLogger.warn(f"Unknown shape type: {shape.type}", category="render")
            pygame.draw.rect(layer, stroke_color, rect, 1)

    def _draw_polyline(self, layer, shape, rect, color, stroke, scale):
        """Points are relative to the shape origin, which may not be the top-left."""
        points = shape.extra.get("points") or [(0, 0), (shape.width, shape.height)]
        min_x = min(p[0] for p in points)
        min_y = min(p[1] for p in points)
        scaled = [
            (rect.x + (p[0] - min_x) * scale, rect.y + (p[1] - min_y) * scale)
            for p in points
        ]
        if len(scaled) >= 2:
            pygame.draw.lines(layer, color, False, scaled, stroke)

    def _draw_text(self, layer, shape, rect, color, scale):
        text = shape.extra.get("text", "")
        size = max(1, round(shape.extra.get("fontSize", Render.DEFAULT_FONT_SIZE) * scale))
        font = self._font(size)
        y = rect.y
        for line in str(text).splitlines() or [""]:
            rendered = font.render(line, True, color)
            layer.blit(rendered, (rect.x, y))
            y += font.get_linesize()

    # ===========================================================
    # Internal Helpers
    # ===========================================================

    @staticmethod
    def _screen_rect(shape, fit):
        """Window-space bounding rect of a frame-local shape."""
        points = shape.extra.get("points") if shape.type in POLYLINE_TYPES else None
        if points:
            left = shape.x + min(p[0] for p in points)
            top = shape.y + min(p[1] for p in points)
        else:
            left = min(shape.x, shape.x + shape.width)
            top = min(shape.y, shape.y + shape.height)
        x = fit.offset_x + left * fit.scale
        y = fit.offset_y + top * fit.scale
        width = max(1, round(abs(shape.width) * fit.scale))
        height = max(1, round(abs(shape.height) * fit.scale))
        return pygame.Rect(round(x), round(y), width, height)

    @staticmethod
    def _alpha(opacity) -> int:
        """Shape opacity (0-100) to surface alpha (0-255)."""
        ratio = max(0.0, min(opacity / Render.MAX_OPACITY, 1.0))
        return round(ratio * 255)

    def _color(self, value):
        """Cached pygame.Color for a CSS-style color string, None if transparent/invalid."""
        if not value or value == TRANSPARENT:
            return None
        if value not in self._colors:
            try:
                self._colors[value] = pygame.Color(value)
            except ValueError:
                DebugLogger.warn(f"Invalid color '{value}'", category="render")
                self._colors[value] = None
        return self._colors[value]

    def _font(self, size: int):
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]
