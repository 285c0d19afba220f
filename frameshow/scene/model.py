"""
model.py
--------
Immutable data model for a presentation: shapes, frames, viewport and the
one-shot scene snapshot taken when the presentation starts.

Responsibilities
----------------
- Convert canvas element dicts into typed Shape records.
- Derive the play order of frames (stable sort by y, degenerate frames dropped).
- Select the shapes belonging to one frame in frame-local coordinates.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

from frameshow.core.debug.debug_logger import DebugLogger
from frameshow.scene.fit import position_shape


FRAME_TYPE = "frame"

# Element fields that map onto Shape attributes; everything else goes to `extra`
_ELEMENT_FIELDS = {
    "id", "type", "x", "y", "width", "height", "opacity", "strokeWidth",
    "frameId", "isDeleted", "status", "customData",
}


# ===========================================================
# Shapes & Frames
# ===========================================================

@dataclass(frozen=True)
class Shape:
    """A single drawn object on the canvas."""
    id: str
    type: str = "rectangle"
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    opacity: float = 100.0
    stroke_width: float = 1.0
    frame_id: Optional[str] = None
    name: Optional[str] = None
    is_deleted: bool = False
    status: Optional[str] = None
    extra: Mapping = field(default_factory=dict, compare=False)

    def __post_init__(self):
        # Keep derived copies from sharing a mutable dict with the source
        if not isinstance(self.extra, MappingProxyType):
            object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    @classmethod
    def from_element(cls, element: Mapping) -> "Shape":
        """
        Build a Shape from a canvas element dict.

        Args:
            element: Dict with at least an 'id'; camelCase keys as written
                     by the drawing surface.
        """
        custom = element.get("customData") or {}
        extra = {k: v for k, v in element.items() if k not in _ELEMENT_FIELDS}
        if custom:
            extra["customData"] = {k: v for k, v in custom.items() if k != "name"}
        return cls(
            id=str(element["id"]),
            type=element.get("type", "rectangle"),
            x=float(element.get("x", 0.0)),
            y=float(element.get("y", 0.0)),
            width=float(element.get("width", 0.0)),
            height=float(element.get("height", 0.0)),
            opacity=float(element.get("opacity", 100.0)),
            stroke_width=float(element.get("strokeWidth", 1.0)),
            frame_id=element.get("frameId"),
            name=custom.get("name"),
            is_deleted=bool(element.get("isDeleted", False)),
            status=element.get("status"),
            extra=extra,
        )

    @property
    def is_frame(self) -> bool:
        return self.type == FRAME_TYPE

    @property
    def is_pending_image(self) -> bool:
        return self.type == "image" and self.status == "pending"


@dataclass(frozen=True)
class Frame:
    """A rectangular canvas region shown as one slide."""
    id: str
    x: float
    y: float
    width: float
    height: float
    name: Optional[str] = None

    @classmethod
    def from_shape(cls, shape: Shape) -> "Frame":
        return cls(
            id=shape.id,
            x=shape.x,
            y=shape.y,
            width=shape.width,
            height=shape.height,
            name=shape.extra.get("name") or shape.name,
        )

    @property
    def is_degenerate(self) -> bool:
        return self.width == 0 or self.height == 0


@dataclass(frozen=True)
class Viewport:
    """Current size of the rendering surface."""
    width: float = 1.0
    height: float = 1.0


# ===========================================================
# Frame Order & Membership
# ===========================================================

def derive_frames(shapes: Iterable[Shape]) -> List[Frame]:
    """
    Build the play order from the frame shapes of a collection.

    Frames are sorted ascending by y. The sort is stable, so frames on the
    same row keep their relative order from the shape list. Zero-area frames
    are dropped because they cannot be fitted to a viewport.
    """
    frames = []
    for shape in shapes:
        if not shape.is_frame or shape.is_deleted:
            continue
        frame = Frame.from_shape(shape)
        if frame.is_degenerate:
            DebugLogger.warn(f"Skipping zero-area frame '{frame.id}'", category="snapshot")
            continue
        frames.append(frame)

    frames.sort(key=lambda f: f.y)
    return frames


def frame_members(frame: Frame, shapes: Sequence[Shape]) -> List[Shape]:
    """Shapes owned by `frame`, in list order, translated to frame-local space."""
    return [position_shape(s, frame) for s in shapes if s.frame_id == frame.id]


# ===========================================================
# Snapshot
# ===========================================================

@dataclass(frozen=True)
class SceneSnapshot:
    """Shapes and ordered frames captured once at presentation start."""
    shapes: Tuple[Shape, ...]
    frames: Tuple[Frame, ...]

    @classmethod
    def from_shapes(cls, shapes: Iterable[Shape]) -> "SceneSnapshot":
        live = [s for s in shapes if not s.is_deleted]
        frames = derive_frames(live)
        content = [s for s in live if not s.is_frame]
        return cls(shapes=tuple(content), frames=tuple(frames))

    @classmethod
    def from_elements(cls, elements: Iterable[Mapping]) -> "SceneSnapshot":
        return cls.from_shapes(Shape.from_element(e) for e in elements)
