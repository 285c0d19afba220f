"""
Scene data exports.

Provides the shape/frame model, key resolution, fit scaling and the
engine's exception types.
"""

from frameshow.scene.errors import (
    FrameshowError,
    InvalidFrame,
    InvalidFrameIndex,
    NoActiveHost,
    SnapshotError,
)
from frameshow.scene.fit import FitRect, compute_scale, fit_rect, position_shape
from frameshow.scene.keys import key_for, resolve_keys
from frameshow.scene.model import (
    Frame,
    SceneSnapshot,
    Shape,
    Viewport,
    derive_frames,
    frame_members,
)
from frameshow.scene.naming import assign_default_names, is_presentation_link

__all__ = [
    # Model
    'Shape',
    'Frame',
    'Viewport',
    'SceneSnapshot',
    'derive_frames',
    'frame_members',
    # Keys & naming
    'key_for',
    'resolve_keys',
    'assign_default_names',
    'is_presentation_link',
    # Fit
    'FitRect',
    'compute_scale',
    'fit_rect',
    'position_shape',
    # Errors
    'FrameshowError',
    'InvalidFrame',
    'InvalidFrameIndex',
    'NoActiveHost',
    'SnapshotError',
]
