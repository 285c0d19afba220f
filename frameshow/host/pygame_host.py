"""
pygame_host.py
--------------
RenderHost backed by a pygame window.

Responsibilities:
- Hold the latest shapes and zoom pushed by the engine
- Queue tick callbacks and run them once per loop iteration
- Route viewport and keyboard notifications through the event bus
"""

import pygame

from frameshow.core.debug.debug_logger import DebugLogger
from frameshow.core.services.event_manager import (
    NavigationKeyEvent,
    ViewportResizedEvent,
    get_events,
)
from frameshow.host.base_host import RenderHost
from frameshow.scene.fit import FitRect


class PygameHost(RenderHost):
    """Render host drawing the engine's shapes through a ShapeRenderer."""

    def __init__(self, display_manager, renderer):
        """
        Args:
            display_manager: DisplayManager owning the window and viewport
            renderer: ShapeRenderer painting shapes
        """
        self.display = display_manager
        self.renderer = renderer
        self.events = get_events()

        self.shapes = []
        self.zoom = 1.0
        self._ticks = []

        DebugLogger.init_entry("PygameHost")

    # ===========================================================
    # RenderHost API
    # ===========================================================

    def update_scene(self, shapes=None, viewport_zoom=None):
        if shapes is not None:
            self.shapes = list(shapes)
        if viewport_zoom is not None:
            self.zoom = viewport_zoom

    def subscribe_viewport_size(self, callback):
        def on_resize(event):
            callback(event.width, event.height)

        unsubscribe = self.events.subscribe(ViewportResizedEvent, on_resize)
        # Late subscribers still learn the current size
        callback(self.display.viewport.width, self.display.viewport.height)
        return unsubscribe

    def subscribe_keyboard(self, callback):
        def on_key(event):
            callback(event.action)

        return self.events.subscribe(NavigationKeyEvent, on_key)

    def request_tick(self, callback):
        self._ticks.append(callback)

    # ===========================================================
    # Loop Integration
    # ===========================================================

    def run_ticks(self, timestamp=None):
        """
        Run the callbacks queued for this tick.

        Callbacks queued while running (the next step of an animation) wait
        for the following tick.
        """
        if timestamp is None:
            timestamp = pygame.time.get_ticks()
        pending, self._ticks = self._ticks, []
        for callback in pending:
            callback(timestamp)

    @property
    def pending_ticks(self) -> int:
        return len(self._ticks)

    def render(self, frame):
        """
        Draw the current scene for `frame`.

        The engine-pushed zoom is used as the scale; the letterbox offset
        centres the zoomed frame in the window.
        """
        fit = self.display.letterbox(frame)
        if fit.scale != self.zoom:
            width = frame.width * self.zoom
            height = frame.height * self.zoom
            fit = FitRect(
                scale=self.zoom,
                offset_x=(self.display.viewport.width - width) / 2,
                offset_y=(self.display.viewport.height - height) / 2,
                width=width,
                height=height,
            )

        self.display.clear(fit)
        self.renderer.draw(self.display.get_window_surface(), self.shapes, fit)
        self.display.present()
