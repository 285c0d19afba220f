"""
test_fit.py
-----------
Unit tests for fit-to-frame scaling and frame-local positioning.
"""

import pytest

from frameshow.scene.errors import InvalidFrame
from frameshow.scene.fit import compute_scale, fit_rect, position_shape
from frameshow.scene.model import Frame, Viewport


# ===========================================================
# compute_scale
# ===========================================================

def test_scale_uses_tighter_axis():
    frame = Frame(id="f", x=0, y=0, width=200, height=100)
    assert compute_scale(frame, Viewport(800, 300)) == 3


@pytest.mark.parametrize("viewport, expected", [
    (Viewport(400, 200), 2.0),   # same aspect ratio
    (Viewport(400, 1000), 2.0),  # tall viewport: width decides
    (Viewport(1000, 50), 0.5),   # wide viewport: height decides
    (Viewport(100, 50), 0.5),    # shrink
])
def test_scale_preserves_aspect_ratio(viewport, expected):
    frame = Frame(id="f", x=10, y=10, width=200, height=100)

    scale = compute_scale(frame, viewport)

    assert scale == pytest.approx(expected)
    assert frame.width * scale <= viewport.width + 1e-9
    assert frame.height * scale <= viewport.height + 1e-9


@pytest.mark.parametrize("width, height", [(0, 100), (100, 0), (0, 0)])
def test_zero_area_frame_is_rejected(width, height):
    frame = Frame(id="flat", x=0, y=0, width=width, height=height)

    with pytest.raises(InvalidFrame) as exc:
        compute_scale(frame, Viewport(800, 600))

    assert exc.value.frame is frame


# ===========================================================
# fit_rect
# ===========================================================

def test_fit_rect_centres_pillarbox():
    frame = Frame(id="f", x=0, y=0, width=200, height=100)

    fit = fit_rect(frame, Viewport(800, 300))

    assert fit.scale == 3
    assert (fit.width, fit.height) == (600, 300)
    assert (fit.offset_x, fit.offset_y) == (100, 0)


def test_fit_rect_centres_letterbox():
    frame = Frame(id="f", x=0, y=0, width=200, height=100)

    fit = fit_rect(frame, Viewport(400, 400))

    assert (fit.width, fit.height) == (400, 200)
    assert (fit.offset_x, fit.offset_y) == (0, 100)


# ===========================================================
# position_shape
# ===========================================================

def test_position_shape_subtracts_frame_origin(make_shape):
    frame = Frame(id="f", x=100, y=250, width=200, height=100)
    shape = make_shape(x=110, y=260, width=30, height=40, opacity=80)

    local = position_shape(shape, frame)

    assert (local.x, local.y) == (10, 10)
    assert (local.width, local.height, local.opacity) == (30, 40, 80)


def test_position_shape_leaves_source_untouched(make_shape):
    frame = Frame(id="f", x=100, y=100, width=10, height=10)
    shape = make_shape(x=150, y=150)

    position_shape(shape, frame)

    assert (shape.x, shape.y) == (150, 150)
