"""
test_model.py
-------------
Unit tests for the scene model: element conversion, play order, frame
membership, snapshots and default naming.
"""

import pytest

from frameshow.scene.model import (
    Frame,
    SceneSnapshot,
    Shape,
    derive_frames,
    frame_members,
)
from frameshow.scene.naming import assign_default_names, is_presentation_link


# ===========================================================
# Element Conversion
# ===========================================================

def test_from_element_maps_known_fields():
    element = {
        "id": "r1",
        "type": "rectangle",
        "x": 10, "y": 20, "width": 30, "height": 40,
        "opacity": 60,
        "strokeWidth": 2,
        "frameId": "f1",
        "customData": {"name": "logo", "tag": "brand"},
        "strokeColor": "#1e1e1e",
    }

    shape = Shape.from_element(element)

    assert (shape.id, shape.type, shape.frame_id, shape.name) == ("r1", "rectangle", "f1", "logo")
    assert (shape.x, shape.y, shape.width, shape.height) == (10, 20, 30, 40)
    assert (shape.opacity, shape.stroke_width) == (60, 2)
    assert shape.extra["strokeColor"] == "#1e1e1e"
    assert shape.extra["customData"] == {"tag": "brand"}


def test_from_element_defaults():
    shape = Shape.from_element({"id": 7})

    assert shape.id == "7"
    assert shape.name is None
    assert shape.frame_id is None
    assert shape.opacity == 100
    assert not shape.is_deleted


def test_extra_is_read_only(make_shape):
    shape = make_shape(extra={"text": "hi"})

    with pytest.raises(TypeError):
        shape.extra["text"] = "changed"

    assert shape.extra["text"] == "hi"


# ===========================================================
# Play Order
# ===========================================================

def _frame_shape(id, y, width=100, height=100, **kwargs):
    return Shape(id=id, type="frame", x=0, y=y, width=width, height=height, **kwargs)


def test_frames_sorted_by_y():
    shapes = [_frame_shape("c", 300), _frame_shape("a", 0), _frame_shape("b", 150)]

    assert [f.id for f in derive_frames(shapes)] == ["a", "b", "c"]


def test_frame_sort_is_stable_for_equal_y():
    shapes = [_frame_shape("right", 0), _frame_shape("left", 0), _frame_shape("top", -50)]

    assert [f.id for f in derive_frames(shapes)] == ["top", "right", "left"]


def test_non_frames_deleted_and_degenerate_frames_skipped(make_shape):
    shapes = [
        _frame_shape("ok", 0),
        _frame_shape("gone", 10, is_deleted=True),
        _frame_shape("flat", 20, height=0),
        make_shape(id="box", y=5),
    ]

    assert [f.id for f in derive_frames(shapes)] == ["ok"]


# ===========================================================
# Membership
# ===========================================================

def test_frame_members_filters_and_positions(make_shape):
    frame = Frame(id="f1", x=100, y=100, width=400, height=300)
    shapes = [
        make_shape(id="in1", frame_id="f1", x=110, y=120),
        make_shape(id="out", frame_id="f2", x=110, y=120),
        make_shape(id="loose", x=110, y=120),
        make_shape(id="in2", frame_id="f1", x=300, y=100),
    ]

    members = frame_members(frame, shapes)

    assert [s.id for s in members] == ["in1", "in2"]
    assert [(s.x, s.y) for s in members] == [(10, 20), (200, 0)]


# ===========================================================
# Snapshot
# ===========================================================

def test_snapshot_from_elements_separates_frames_and_shapes():
    elements = [
        {"id": "f2", "type": "frame", "x": 0, "y": 500, "width": 100, "height": 50},
        {"id": "f1", "type": "frame", "x": 0, "y": 0, "width": 100, "height": 50},
        {"id": "s1", "type": "ellipse", "frameId": "f1"},
        {"id": "s2", "type": "text", "frameId": "f2", "isDeleted": True},
    ]

    snapshot = SceneSnapshot.from_elements(elements)

    assert [f.id for f in snapshot.frames] == ["f1", "f2"]
    assert [s.id for s in snapshot.shapes] == ["s1"]


# ===========================================================
# Default Naming
# ===========================================================

def test_unnamed_shapes_are_named_by_id(make_shape):
    shapes = [
        make_shape(id="a"),
        make_shape(id="b", name="kept"),
        make_shape(id="img", type="image", status="pending"),
        make_shape(id="img2", type="image", status="saved"),
    ]

    named = assign_default_names(shapes)

    assert [s.name for s in named] == ["a", "kept", None, "img2"]
    assert shapes[0].name is None


def test_presentation_link_detection():
    assert is_presentation_link("https://draw.example.com/#presentation")
    assert not is_presentation_link("https://draw.example.com/#room=abc")
    assert not is_presentation_link("https://draw.example.com/")
