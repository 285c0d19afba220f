"""
main_loop.py
------------
Presentation loop orchestrating events, animation ticks and rendering.

Responsibilities:
- Initialize pygame and the display/input/render systems
- Mount the navigation controller on the pygame host
- Route window events (quit, resize, keys) and drain ticks every frame
"""

import pygame

from frameshow.core.debug.debug_logger import DebugLogger
from frameshow.core.runtime.settings import Display
from frameshow.core.services.display_manager import DisplayManager
from frameshow.core.services.event_manager import (
    FrameChangedEvent,
    NavigationKeyEvent,
    get_events,
)
from frameshow.core.services.input_manager import InputManager
from frameshow.graphics.shape_renderer import ShapeRenderer
from frameshow.host.pygame_host import PygameHost
from frameshow.navigation.controller import NavigationController


class MainLoop:
    """Runtime controller for one presentation session."""

    QUIT_ACTION = "quit"

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, snapshot, initial_frame_index=None):
        """
        Args:
            snapshot: SceneSnapshot to present
            initial_frame_index: Start frame (defaults from settings)

        Raises:
            InvalidFrameIndex: raised before any window is opened
        """
        DebugLogger.section("Initializing Presentation")

        self.controller = NavigationController.from_snapshot(
            snapshot,
            initial_frame_index=initial_frame_index,
        )

        self._init_pygame()
        self._init_core_systems()
        self._init_presentation()

    def _init_pygame(self):
        pygame.init()
        pygame.font.init()
        pygame.display.set_caption(Display.CAPTION)
        DebugLogger.init_entry("Pygame")

    def _init_core_systems(self):
        """Initialize display, input, renderer and host."""
        self.events = get_events()
        self.display = DisplayManager()
        self.input_manager = InputManager()
        self.renderer = ShapeRenderer()
        self.host = PygameHost(self.display, self.renderer)

    def _init_presentation(self):
        self.controller.viewport = self.display.viewport
        self._unsubscribe_caption = self.events.subscribe(FrameChangedEvent, self._update_caption)

        self.clock = pygame.time.Clock()
        self.running = True
        DebugLogger.init_entry("Main Loop Runtime")

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self):
        """Present until the window is closed or the quit key is pressed."""
        DebugLogger.section("Presentation")
        self.controller.on_initial_mount(self.host)

        try:
            while self.running:
                self.clock.tick(Display.FPS)
                self._handle_events()
                self.host.run_ticks(pygame.time.get_ticks())
                self.host.render(self.controller.current_frame)
        finally:
            self.controller.detach()
            self._unsubscribe_caption()
            pygame.quit()
            DebugLogger.system("Pygame terminated")

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                break

            if event.type == pygame.VIDEORESIZE:
                self.display.handle_resize(event.w, event.h)
                continue

            if event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                self.display.toggle_fullscreen()
                continue

            action = self.input_manager.handle_event(event)
            if action == self.QUIT_ACTION:
                self.running = False
                DebugLogger.action("Quit key pressed")
                break
            if action:
                self.events.dispatch(NavigationKeyEvent(action=action))

    def _update_caption(self, event):
        pygame.display.set_caption(f"{Display.CAPTION} - {event.index + 1}/{event.total}")
