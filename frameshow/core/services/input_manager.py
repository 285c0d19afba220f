"""
input_manager.py
----------------
Maps raw keyboard input to presentation actions.

Provides:
- Key name or key code bindings per action ("advance", "retreat", "quit")
- O(1) key -> action lookup for KEYDOWN events
"""

import pygame

from frameshow.core.debug.debug_logger import DebugLogger
from frameshow.core.runtime.settings import Navigation


class InputManager:
    """
    Keyboard action lookup.

    Usage:
        action = input_manager.action_for_key(event.key)
        if action == "advance":
            controller.advance()
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, key_bindings=None):
        """
        Args:
            key_bindings: {action: [key name or code, ...]}
                          (uses Navigation.KEY_BINDINGS if None)
        """
        DebugLogger.init_entry("InputManager")

        self.key_bindings = key_bindings or Navigation.KEY_BINDINGS
        self._init_lookup_tables()
        self._validate_bindings()

    def _init_lookup_tables(self):
        """Build key -> action and action -> keys tables."""
        self._key_to_action = {}
        self._action_to_keys = {}

        for action_name, keys in self.key_bindings.items():
            codes = []
            for key in keys:
                code = self._resolve_key(key)
                if code is None:
                    continue
                codes.append(code)
                # First binding wins when a key is listed twice
                self._key_to_action.setdefault(code, action_name)
            self._action_to_keys[action_name] = tuple(codes)

    def _validate_bindings(self):
        """Warn about actions left without any usable key."""
        for action_name, codes in self._action_to_keys.items():
            if not codes:
                DebugLogger.warn(f"No keys bound to '{action_name}'", category="input")

    @staticmethod
    def _resolve_key(key):
        """Key code for a binding entry (int code or pygame key name)."""
        if isinstance(key, int):
            return key
        try:
            return pygame.key.key_code(str(key))
        except ValueError:
            DebugLogger.warn(f"Unknown key name '{key}'", category="input")
            return None

    # ===========================================================
    # Public API
    # ===========================================================

    def action_for_key(self, key):
        """Action bound to a key code, or None."""
        return self._key_to_action.get(key)

    def keys_for_action(self, action: str) -> tuple:
        """Key codes bound to an action."""
        return self._action_to_keys.get(action, ())

    def handle_event(self, event):
        """
        Translate a pygame event into an action name.

        Returns:
            Action string for a bound KEYDOWN, else None
        """
        if event.type != pygame.KEYDOWN:
            return None

        action = self.action_for_key(event.key)
        if action:
            DebugLogger.trace(f"Key {event.key} -> '{action}'", category="input")
        return action
