"""
base_host.py
------------
Interface the presentation engine expects from the drawing surface.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional, Sequence


class RenderHost(ABC):
    """Base interface for render hosts (the canvas that shows the shapes)."""

    @abstractmethod
    def update_scene(self, shapes: Optional[Sequence] = None,
                     viewport_zoom: Optional[float] = None):
        """
        Replace the displayed shapes and/or the viewport zoom.

        Called once per animation tick; either argument may be None to leave
        that part of the scene unchanged.
        """
        pass

    @abstractmethod
    def subscribe_viewport_size(self, callback: Callable[[float, float], None]) -> Callable[[], None]:
        """
        Register for viewport size changes.

        Returns:
            Function removing the subscription
        """
        pass

    @abstractmethod
    def subscribe_keyboard(self, callback: Callable[[str], None]) -> Callable[[], None]:
        """
        Register for navigation input ("advance", "retreat", ...).

        Returns:
            Function removing the subscription
        """
        pass

    @abstractmethod
    def request_tick(self, callback: Callable[[float], None]):
        """Run `callback(timestamp_ms)` once on the next rendering tick."""
        pass
