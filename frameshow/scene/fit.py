"""
fit.py
------
Fit-to-frame scaling and frame-local positioning.

The fit scale is the uniform zoom that shows a frame's full extent inside
the viewport without clipping. Whichever axis is tighter decides; the other
axis gets letterbox (or pillarbox) space, split evenly on both sides.
"""

from dataclasses import dataclass, replace

from frameshow.scene.errors import InvalidFrame


@dataclass(frozen=True)
class FitRect:
    """Scaled frame placement inside a viewport."""
    scale: float
    offset_x: float
    offset_y: float
    width: float
    height: float


def compute_scale(frame, viewport) -> float:
    """
    Uniform scale fitting `frame` into `viewport`.

    Raises:
        InvalidFrame: frame width or height is zero
    """
    if frame.width == 0 or frame.height == 0:
        raise InvalidFrame(frame)

    scale_x = viewport.width / frame.width
    scale_y = viewport.height / frame.height
    return min(scale_x, scale_y)


def fit_rect(frame, viewport) -> FitRect:
    """Scaled frame size centred in the viewport (letterbox geometry)."""
    scale = compute_scale(frame, viewport)
    width = frame.width * scale
    height = frame.height * scale
    return FitRect(
        scale=scale,
        offset_x=(viewport.width - width) / 2,
        offset_y=(viewport.height - height) / 2,
        width=width,
        height=height,
    )


def position_shape(shape, frame):
    """Copy of `shape` translated into the frame's local coordinate space."""
    return replace(shape, x=shape.x - frame.x, y=shape.y - frame.y)
