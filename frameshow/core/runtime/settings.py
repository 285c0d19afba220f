"""
settings.py
-----------
Centralized constants for the presentation player.

Values here are defaults; `apply_config()` overwrites them from the
loaded presentation config (see config/presentation.yaml).
"""

from frameshow.core.debug.debug_logger import DebugLogger, LoggerConfig


# ===========================================================
# Display & Timing
# ===========================================================

class Display:
    """Window configuration."""
    WIDTH: int = 1280
    HEIGHT: int = 720
    FPS: int = 60
    CAPTION: str = "frameshow"

    WINDOW_SIZES = {
        "small": (1280, 720),
        "medium": (1920, 1080),
        "large": (2560, 1440),
    }
    DEFAULT_WINDOW_SIZE: str = "small"
    FULLSCREEN: bool = False


# ===========================================================
# Transitions
# ===========================================================

class Transition:
    """Frame-to-frame animation settings."""
    DURATION_MS: float = 300.0

    # Numeric shape properties that are interpolated; everything else snaps
    ANIMATABLE_PROPERTIES = ("opacity", "x", "y", "width", "height", "stroke_width")


# ===========================================================
# Navigation
# ===========================================================

class Navigation:
    """Play-order and key binding defaults."""
    INITIAL_FRAME_INDEX: int = 0

    # Key names as understood by pygame.key.key_code()
    KEY_BINDINGS = {
        "advance": ["right", "down", "page down", "space"],
        "retreat": ["left", "up", "page up", "backspace"],
        "quit": ["escape"],
    }


# ===========================================================
# Rendering
# ===========================================================

class Render:
    """Colors and fallbacks for the pygame shape renderer."""
    BACKGROUND_COLOR = (0, 0, 0)
    CANVAS_COLOR = (255, 255, 255)
    DEFAULT_STROKE_COLOR = (30, 30, 30)
    DEFAULT_FONT_SIZE: int = 20
    MAX_OPACITY: float = 100.0


# ===========================================================
# Debug Display
# ===========================================================

class Debug:
    """Visual debug toggles -- not related to logging."""
    SHOW_FRAME_OUTLINE: bool = False


# ===========================================================
# Config Application
# ===========================================================

def apply_config(config: dict):
    """
    Copy values from a loaded config dict onto the settings classes.

    Args:
        config: Dict shaped like config/presentation.yaml
    """
    if not config:
        return

    display = config.get("display", {})
    Display.FPS = int(display.get("fps", Display.FPS))
    Display.CAPTION = display.get("caption", Display.CAPTION)
    Display.DEFAULT_WINDOW_SIZE = display.get("window_size", Display.DEFAULT_WINDOW_SIZE)
    Display.FULLSCREEN = bool(display.get("fullscreen", Display.FULLSCREEN))
    for name, size in display.get("window_sizes", {}).items():
        Display.WINDOW_SIZES[name] = tuple(size)

    transition = config.get("transition", {})
    Transition.DURATION_MS = float(transition.get("duration_ms", Transition.DURATION_MS))

    navigation = config.get("navigation", {})
    Navigation.INITIAL_FRAME_INDEX = int(
        navigation.get("initial_frame_index", Navigation.INITIAL_FRAME_INDEX)
    )
    if navigation.get("key_bindings"):
        Navigation.KEY_BINDINGS = {
            action: list(keys) for action, keys in navigation["key_bindings"].items()
        }

    render = config.get("render", {})
    Render.BACKGROUND_COLOR = tuple(render.get("background_color", Render.BACKGROUND_COLOR))
    Render.CANVAS_COLOR = tuple(render.get("canvas_color", Render.CANVAS_COLOR))
    Render.DEFAULT_FONT_SIZE = int(render.get("font_size", Render.DEFAULT_FONT_SIZE))
    Debug.SHOW_FRAME_OUTLINE = bool(render.get("show_frame_outline", Debug.SHOW_FRAME_OUTLINE))

    logging = config.get("logging", {})
    LoggerConfig.configure(
        level=logging.get("level"),
        categories=logging.get("categories"),
        enabled=logging.get("enabled"),
    )

    DebugLogger.system(
        f"Settings applied (duration={Transition.DURATION_MS:.0f}ms, "
        f"start={Navigation.INITIAL_FRAME_INDEX})",
        category="loading"
    )
