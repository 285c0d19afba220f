"""
Runtime configuration exports.

Provides presentation-wide constants. All exports are lightweight class
constants with no initialization overhead.
"""

from frameshow.core.runtime.settings import (
    Display,
    Transition,
    Navigation,
    Render,
    Debug,
    apply_config,
)

__all__ = [
    # Display & Rendering
    'Display',
    'Render',
    # Presentation
    'Transition',
    'Navigation',
    # Debug
    'Debug',
    # Loading
    'apply_config',
]
