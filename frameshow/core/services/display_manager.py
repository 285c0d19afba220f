"""
display_manager.py
------------------
Window management and viewport tracking for the presentation player.

Responsibilities:
- Window creation (resizable) and fullscreen toggling
- Track the viewport size and publish ViewportResizedEvent on change
- Letterbox geometry for the frame being shown
"""

import pygame

from frameshow.core.debug.debug_logger import DebugLogger
from frameshow.core.runtime.settings import Display, Render
from frameshow.core.services.event_manager import ViewportResizedEvent, get_events
from frameshow.scene.fit import fit_rect
from frameshow.scene.model import Viewport


class DisplayManager:
    """
    Owns the pygame window.

    Unlike a fixed-resolution game surface, the whole window is the
    viewport: each frame is fitted to it by uniform scaling, and the space
    outside the fitted frame is painted as letterbox bars.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, window_size=None, fullscreen=None):
        """
        Initialize display system.

        Args:
            window_size: Initial window preset ("small", "medium", "large")
            fullscreen: Start fullscreen (defaults to Display.FULLSCREEN)
        """
        DebugLogger.init_entry("DisplayManager")

        self.window = None
        self.window_size_preset = window_size or Display.DEFAULT_WINDOW_SIZE
        self.is_fullscreen = False
        self.viewport = Viewport(Display.WIDTH, Display.HEIGHT)

        if fullscreen is None:
            fullscreen = Display.FULLSCREEN
        self._create_window(fullscreen=fullscreen, silent=True)

        mode = "Fullscreen" if self.is_fullscreen else (
            f"Windowed ({self.viewport.width:.0f}x{self.viewport.height:.0f})"
        )
        DebugLogger.init_sub(f"Display Mode: {mode}", level=1)

    # ===========================================================
    # Window Management
    # ===========================================================

    def toggle_fullscreen(self):
        """Toggle between windowed and fullscreen modes."""
        self._create_window(fullscreen=not self.is_fullscreen)
        state = "ON" if self.is_fullscreen else "OFF"
        DebugLogger.state(f"Toggled fullscreen → {state}", category="display")

    def handle_resize(self, width: int, height: int) -> Viewport:
        """
        Record a new window size (VIDEORESIZE) and notify subscribers.

        Returns:
            The updated viewport
        """
        if (width, height) == (self.viewport.width, self.viewport.height):
            return self.viewport

        self.viewport = Viewport(width, height)
        DebugLogger.trace(f"Viewport {width}x{height}", category="display")
        get_events().dispatch(ViewportResizedEvent(width=width, height=height))
        return self.viewport

    # ===========================================================
    # Rendering
    # ===========================================================

    def get_window_surface(self):
        return self.window

    def letterbox(self, frame):
        """FitRect placing `frame` centred in the current viewport."""
        return fit_rect(frame, self.viewport)

    def clear(self, fit=None):
        """
        Paint the background and, if given, the fitted frame's canvas area.

        Args:
            fit: FitRect of the frame being shown
        """
        self.window.fill(Render.BACKGROUND_COLOR)
        if fit is not None:
            canvas = pygame.Rect(
                round(fit.offset_x), round(fit.offset_y),
                round(fit.width), round(fit.height)
            )
            self.window.fill(Render.CANVAS_COLOR, canvas)

    def present(self):
        """Flip the display buffer."""
        pygame.display.flip()

    # ===========================================================
    # Internal: Window Creation
    # ===========================================================

    def _create_window(self, fullscreen: bool = False, silent: bool = False):
        """
        Create pygame window with appropriate flags.

        Args:
            fullscreen: Create fullscreen window if True
            silent: Suppress debug logging if True
        """
        if fullscreen:
            self.window = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
            self.is_fullscreen = True
        else:
            window_w, window_h = Display.WINDOW_SIZES.get(
                self.window_size_preset,
                (Display.WIDTH, Display.HEIGHT)
            )
            self.window = pygame.display.set_mode((window_w, window_h), pygame.RESIZABLE)
            self.is_fullscreen = False

        width, height = self.window.get_size()
        self.handle_resize(width, height)

        if not silent:
            DebugLogger.init_sub(
                f"Display Mode: {'Fullscreen' if fullscreen else f'Windowed ({width}x{height})'}",
                level=1
            )
