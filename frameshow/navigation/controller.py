"""
controller.py
-------------
Frame navigation state machine.

Owns the current frame index over the immutable play order, reacts to
navigation keys and viewport resizes, and hands keyed shape sets to the
SceneInterpolator. Moving past either end of the play order is a no-op.
"""

from typing import Sequence

from frameshow.animation.interpolator import SceneInterpolator
from frameshow.core.debug.debug_logger import DebugLogger
from frameshow.core.runtime.settings import Navigation
from frameshow.core.services.event_manager import FrameChangedEvent, get_events
from frameshow.scene.errors import InvalidFrameIndex, NoActiveHost
from frameshow.scene.fit import compute_scale
from frameshow.scene.keys import resolve_keys
from frameshow.scene.model import Viewport, frame_members


class NavigationController:
    """
    Drives frame-to-frame transitions for one presentation session.

    States are the frame indices 0..N-1; there is no terminal state.
    """

    ADVANCE = "advance"
    RETREAT = "retreat"

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, frames: Sequence, shapes: Sequence,
                 initial_frame_index: int = None,
                 interpolator: SceneInterpolator = None,
                 viewport: Viewport = None):
        """
        Args:
            frames: Ordered play order (see derive_frames)
            shapes: Every non-frame shape of the snapshot
            initial_frame_index: Start frame (defaults to Navigation.INITIAL_FRAME_INDEX)
            interpolator: Custom interpolator, e.g. with another duration
            viewport: Initial viewport size

        Raises:
            InvalidFrameIndex: start index outside the play order
        """
        self.frames = tuple(frames)
        self.shapes = tuple(shapes)

        if initial_frame_index is None:
            initial_frame_index = Navigation.INITIAL_FRAME_INDEX
        if not 0 <= initial_frame_index < len(self.frames):
            raise InvalidFrameIndex(initial_frame_index, len(self.frames))

        self.initial_frame_index = initial_frame_index
        self.current_frame_index = initial_frame_index
        self.viewport = viewport or Viewport()

        self.interpolator = interpolator or SceneInterpolator()
        if self.interpolator.zoom_provider is None:
            self.interpolator.zoom_provider = self.current_scale

        self.host = None
        self._unsubscribers = []

        DebugLogger.init_entry("NavigationController")
        DebugLogger.init_sub(f"{len(self.frames)} frame(s), starting at {initial_frame_index}")

    @classmethod
    def from_snapshot(cls, snapshot, **kwargs) -> "NavigationController":
        """Build a controller over a SceneSnapshot."""
        return cls(snapshot.frames, snapshot.shapes, **kwargs)

    # ===========================================================
    # Queries
    # ===========================================================

    @property
    def last_index(self) -> int:
        return len(self.frames) - 1

    @property
    def current_frame(self):
        return self.frames[self.current_frame_index]

    def current_scale(self) -> float:
        """Fit scale of the current frame in the current viewport."""
        return compute_scale(self.current_frame, self.viewport)

    def keyed_shapes(self, index: int) -> dict:
        """Key -> frame-local shape map for the frame at `index`."""
        return resolve_keys(frame_members(self.frames[index], self.shapes))

    # ===========================================================
    # Host Lifecycle
    # ===========================================================

    def on_initial_mount(self, host):
        """
        Attach the render host and fade in the initial frame.

        The first frame is animated from an empty shape set so it appears
        the same way every later frame does.
        """
        if self.host is not None:
            DebugLogger.warn("Render host already attached", category="navigation")
            return

        self.host = host
        self.interpolator.host = host
        self._unsubscribers = [
            host.subscribe_viewport_size(self.on_viewport_resize),
            host.subscribe_keyboard(self.on_key),
        ]
        DebugLogger.state("Render host attached", category="navigation")

        self._render_frame(self.initial_frame_index, from_empty=True)

    def detach(self):
        """Drop host subscriptions and abandon any running transition."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
        self.interpolator.cancel()
        self.interpolator.host = None
        self.host = None
        DebugLogger.state("Render host detached", category="navigation")

    # ===========================================================
    # Navigation
    # ===========================================================

    def advance(self) -> bool:
        """Move to the next frame. Returns True if a transition started."""
        if self.current_frame_index >= self.last_index:
            DebugLogger.trace("Already at last frame", category="navigation")
            return False
        return self._render_frame(self.current_frame_index + 1)

    def retreat(self) -> bool:
        """Move to the previous frame. Returns True if a transition started."""
        if self.current_frame_index <= 0:
            DebugLogger.trace("Already at first frame", category="navigation")
            return False
        return self._render_frame(self.current_frame_index - 1)

    def on_key(self, action: str):
        """Keyboard subscription callback."""
        if action == self.ADVANCE:
            self.advance()
        elif action == self.RETREAT:
            self.retreat()

    def on_viewport_resize(self, width: float, height: float):
        """
        Re-fit the current frame to a new viewport size.

        Only the zoom changes; the displayed shapes and any running
        transition are left alone.

        Returns:
            New scale, or None if no host is attached yet
        """
        self.viewport = Viewport(width, height)
        try:
            host = self._require_host("resize")
        except NoActiveHost as e:
            DebugLogger.trace(f"{e} - viewport stored", category="navigation")
            return None

        scale = self.current_scale()
        host.update_scene(viewport_zoom=scale)
        DebugLogger.state(f"Viewport {width:.0f}x{height:.0f} -> zoom {scale:.3f}", category="display")
        return scale

    # ===========================================================
    # Internal
    # ===========================================================

    def _require_host(self, operation: str):
        if self.host is None:
            raise NoActiveHost(operation)
        return self.host

    def _render_frame(self, new_index: int, from_empty: bool = False) -> bool:
        """Transition from the current frame's shapes (or nothing) to `new_index`."""
        try:
            self._require_host("navigate")
        except NoActiveHost as e:
            DebugLogger.warn(f"{e} - ignored", category="navigation")
            return False

        old_keyed = {} if from_empty else self.keyed_shapes(self.current_frame_index)
        new_keyed = self.keyed_shapes(new_index)

        previous = self.current_frame_index
        self.current_frame_index = new_index
        DebugLogger.state(
            f"Frame {previous} -> {new_index} (zoom {self.current_scale():.3f})",
            category="navigation"
        )

        self.interpolator.begin_transition(old_keyed, new_keyed)
        get_events().dispatch(FrameChangedEvent(index=new_index, total=len(self.frames)))
        return True
