"""
Animation exports.

Provides the keyed-shape interpolator that drives frame transitions.
"""

from frameshow.animation.interpolator import (
    SceneInterpolator,
    TransitionToken,
    interpolate_scene,
    numerical_progress,
    progress_shape,
)

__all__ = [
    'SceneInterpolator',
    'TransitionToken',
    'interpolate_scene',
    'numerical_progress',
    'progress_shape',
]
