"""
Core services exports.

Provides the event bus, configuration loading, input mapping and the
display window.
"""

from frameshow.core.services.config_manager import load_config
from frameshow.core.services.event_manager import (
    get_events,
    reset_events,
    BaseEvent,
    ViewportResizedEvent,
    NavigationKeyEvent,
    FrameChangedEvent,
    TransitionFinishedEvent,
)
from frameshow.core.services.input_manager import InputManager
from frameshow.core.services.display_manager import DisplayManager

__all__ = [
    # Config
    'load_config',
    # Events
    'get_events',
    'reset_events',
    'BaseEvent',
    'ViewportResizedEvent',
    'NavigationKeyEvent',
    'FrameChangedEvent',
    'TransitionFinishedEvent',
    # Services
    'InputManager',
    'DisplayManager',
]
