"""
conftest.py
-----------
Shared pytest configuration and fixtures for frameshow tests.

Contains:
- Global pygame mocking (no display needed)
- Shape/frame factories and a recording fake render host
- Pytest markers
"""

import pytest
import sys
import os
from unittest.mock import MagicMock

# Project root on the path for running without an editable install
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Mock pygame globally before any imports that might use it
mock_pygame = MagicMock()
sys.modules["pygame"] = mock_pygame
sys.modules["pygame.font"] = MagicMock()
sys.modules["pygame.display"] = MagicMock()
sys.modules["pygame.key"] = MagicMock()
sys.modules["pygame.event"] = MagicMock()
sys.modules["pygame.time"] = MagicMock()

# Mock pygame constants
mock_pygame.QUIT = 256
mock_pygame.KEYDOWN = 768
mock_pygame.VIDEORESIZE = 32769
mock_pygame.K_LEFT = 1073741904
mock_pygame.K_RIGHT = 1073741903
mock_pygame.K_ESCAPE = 27
mock_pygame.K_F11 = 1073741892
mock_pygame.SRCALPHA = 65536
mock_pygame.RESIZABLE = 16
mock_pygame.FULLSCREEN = -2147483648

from frameshow.core.services.event_manager import reset_events  # noqa: E402
from frameshow.scene.model import Frame, Shape  # noqa: E402


# ===========================================================
# Global State
# ===========================================================

@pytest.fixture(autouse=True)
def fresh_event_bus():
    """Every test gets its own event manager singleton."""
    reset_events()
    yield
    reset_events()


# ===========================================================
# Scene Factories
# ===========================================================

@pytest.fixture
def make_shape():
    """Factory for shapes with sensible defaults."""
    def _make(id="s1", **kwargs):
        kwargs.setdefault("width", 50.0)
        kwargs.setdefault("height", 50.0)
        return Shape(id=id, **kwargs)
    return _make


@pytest.fixture
def three_frames():
    """Three 200x100 frames stacked vertically."""
    return [
        Frame(id="f0", x=0, y=0, width=200, height=100),
        Frame(id="f1", x=0, y=200, width=200, height=100),
        Frame(id="f2", x=0, y=400, width=200, height=100),
    ]


# ===========================================================
# Fake Render Host
# ===========================================================

class FakeHost:
    """
    Records everything the engine pushes; ticks are run by the test.

    Implements the RenderHost protocol without drawing anything.
    """

    def __init__(self, width=800, height=400):
        self.updates = []
        self.ticks = []
        self.viewport_callbacks = []
        self.keyboard_callbacks = []
        self.size = (width, height)

    def update_scene(self, shapes=None, viewport_zoom=None):
        self.updates.append((shapes, viewport_zoom))

    def subscribe_viewport_size(self, callback):
        self.viewport_callbacks.append(callback)
        return lambda: self.viewport_callbacks.remove(callback)

    def subscribe_keyboard(self, callback):
        self.keyboard_callbacks.append(callback)
        return lambda: self.keyboard_callbacks.remove(callback)

    def request_tick(self, callback):
        self.ticks.append(callback)

    # Test helpers
    def run_tick(self, timestamp):
        pending, self.ticks = self.ticks, []
        return [callback(timestamp) for callback in pending]

    def run_until_idle(self, start=0.0, step=16.0, limit=1000):
        timestamp = start
        while self.ticks and limit:
            self.run_tick(timestamp)
            timestamp += step
            limit -= 1
        return timestamp

    def press(self, action):
        for callback in list(self.keyboard_callbacks):
            callback(action)

    def resize(self, width, height):
        self.size = (width, height)
        for callback in list(self.viewport_callbacks):
            callback(width, height)

    @property
    def last_shapes(self):
        for shapes, _ in reversed(self.updates):
            if shapes is not None:
                return shapes
        return None

    @property
    def last_zoom(self):
        for _, zoom in reversed(self.updates):
            if zoom is not None:
                return zoom
        return None


@pytest.fixture
def fake_host():
    return FakeHost()


# ===========================================================
# Pytest configuration
# ===========================================================

def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "regression: marks tests as regression tests")


def pytest_collection_modifyitems(config, items):
    """Add markers automatically based on the test location."""
    for item in items:
        if "integration" in item.nodeid:
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
