"""
test_settings.py
----------------
Unit tests for copying a loaded config onto the settings classes.
"""

import pytest

from frameshow.core.debug.debug_logger import LoggerConfig
from frameshow.core.runtime import settings
from frameshow.core.runtime.settings import Debug, Display, Navigation, Render, Transition


@pytest.fixture(autouse=True)
def restore_settings(monkeypatch):
    """apply_config mutates class attributes; put them back after each test."""
    for cls in (Display, Transition, Navigation, Render, Debug):
        for name, value in list(vars(cls).items()):
            if name.isupper():
                monkeypatch.setattr(cls, name, value)
    monkeypatch.setattr(Display, "WINDOW_SIZES", dict(Display.WINDOW_SIZES))
    monkeypatch.setattr(LoggerConfig, "CATEGORIES", dict(LoggerConfig.CATEGORIES))
    monkeypatch.setattr(LoggerConfig, "LOG_LEVEL", LoggerConfig.LOG_LEVEL)
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", LoggerConfig.ENABLE_LOGGING)


def test_empty_config_changes_nothing():
    settings.apply_config({})

    assert Transition.DURATION_MS == 300.0
    assert Navigation.INITIAL_FRAME_INDEX == 0


def test_sections_are_applied():
    settings.apply_config({
        "display": {"fps": 30, "caption": "Demo", "window_sizes": {"tiny": [320, 180]}},
        "transition": {"duration_ms": 750},
        "navigation": {"initial_frame_index": 2, "key_bindings": {"advance": ["n"]}},
        "render": {"background_color": [10, 20, 30], "show_frame_outline": True},
    })

    assert (Display.FPS, Display.CAPTION) == (30, "Demo")
    assert Display.WINDOW_SIZES["tiny"] == (320, 180)
    assert Transition.DURATION_MS == 750.0
    assert Navigation.INITIAL_FRAME_INDEX == 2
    assert Navigation.KEY_BINDINGS == {"advance": ["n"]}
    assert Render.BACKGROUND_COLOR == (10, 20, 30)
    assert Debug.SHOW_FRAME_OUTLINE is True


def test_partial_section_keeps_other_defaults():
    settings.apply_config({"transition": {}})

    assert Transition.DURATION_MS == 300.0
    assert Display.FPS == 60


def test_logging_section_configures_logger():
    settings.apply_config({
        "logging": {"level": "verbose", "categories": {"keys": True, "render": 1}},
    })

    assert LoggerConfig.LOG_LEVEL == "VERBOSE"
    assert LoggerConfig.CATEGORIES["keys"] is True
    assert LoggerConfig.CATEGORIES["render"] is True


def test_unknown_log_level_is_ignored():
    before = LoggerConfig.LOG_LEVEL

    settings.apply_config({"logging": {"level": "chatty"}})

    assert LoggerConfig.LOG_LEVEL == before
