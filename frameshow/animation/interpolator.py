"""
interpolator.py
---------------
Morphs one frame's keyed shape set into the next.

Responsibilities
----------------
- Linear interpolation of the animatable numeric properties of shapes
  present in both frames; discrete properties snap to the target.
- Fade-in of shapes only present in the target frame, fade-out and removal
  of shapes only present in the source frame.
- Drive the transition clock from the host's rendering ticks, one scheduled
  tick at a time, and drop ticks that belong to a superseded transition.
"""

import itertools
from dataclasses import dataclass, replace
from typing import Callable, Dict, List, Mapping, Optional

from frameshow.core.debug.debug_logger import DebugLogger
from frameshow.core.runtime.settings import Transition
from frameshow.core.services.event_manager import TransitionFinishedEvent, get_events
from frameshow.scene.errors import NoActiveHost


# ===========================================================
# Property Interpolation
# ===========================================================

def numerical_progress(old_value: float, new_value: float, progress: float) -> float:
    """Linear interpolation; exact endpoints at progress 0 and 1."""
    if progress >= 1.0:
        return new_value
    return old_value + (new_value - old_value) * progress


def progress_shape(old_shape, new_shape, progress: float):
    """
    Intermediate shape between `old_shape` and `new_shape`.

    Either side may be None:
    - no old shape: fade in from an opacity-0 copy of the new one
    - no new shape: fade out toward an opacity-0 copy of the old one,
      removed entirely (None) once progress reaches 1

    Returns:
        Shape or None
    """
    if old_shape is None:
        if new_shape is None:
            return None
        old_shape = replace(new_shape, opacity=0.0)

    if new_shape is None:
        if progress >= 1.0:
            return None
        new_shape = replace(old_shape, opacity=0.0)

    # Discrete fields come from the target; only whitelisted numerics move
    animated = {
        prop: numerical_progress(getattr(old_shape, prop), getattr(new_shape, prop), progress)
        for prop in Transition.ANIMATABLE_PROPERTIES
    }
    return replace(new_shape, **animated)


def interpolate_scene(old_keyed: Mapping[str, object],
                      new_keyed: Mapping[str, object],
                      progress: float) -> List:
    """
    Shape list for one point of a transition.

    Keys only in the source frame come first (drawn underneath), followed by
    the target frame's keys in target order.
    """
    removed = [k for k in old_keyed if k not in new_keyed]
    shapes = []
    for key in itertools.chain(removed, new_keyed):
        shape = progress_shape(old_keyed.get(key), new_keyed.get(key), progress)
        if shape is not None:
            shapes.append(shape)
    return shapes


# ===========================================================
# Transition Token
# ===========================================================

@dataclass(eq=False)
class TransitionToken:
    """
    One in-flight transition.

    Compared by identity: a tick carrying a token that is no longer the
    interpolator's active token belongs to a superseded transition.
    """
    id: int
    old_keyed: Dict[str, object]
    new_keyed: Dict[str, object]
    duration: float
    start: Optional[float] = None
    scheduled: bool = False
    progress: float = 0.0

    def progress_at(self, timestamp: float) -> float:
        """Normalized elapsed time, clamped to [0, 1]."""
        if self.duration <= 0:
            return 1.0
        elapsed = timestamp - self.start
        return max(0.0, min(elapsed / self.duration, 1.0))


# ===========================================================
# Scene Interpolator
# ===========================================================

class SceneInterpolator:
    """Runs keyed-shape transitions on the host's rendering clock."""

    def __init__(self, host=None, duration_ms: float = None,
                 zoom_provider: Callable[[], float] = None,
                 on_finished: Callable[[TransitionToken], None] = None):
        """
        Args:
            host: RenderHost receiving update_scene() and request_tick() calls
            duration_ms: Transition length (defaults to Transition.DURATION_MS)
            zoom_provider: Returns the viewport zoom to push with each tick
            on_finished: Called with the token when a transition completes
        """
        self.host = host
        self.duration = Transition.DURATION_MS if duration_ms is None else float(duration_ms)
        self.zoom_provider = zoom_provider
        self.on_finished = on_finished

        self._active: Optional[TransitionToken] = None
        self._ids = itertools.count(1)

    # ===========================================================
    # Control
    # ===========================================================

    def begin_transition(self, old_keyed: Mapping, new_keyed: Mapping,
                         now: float = None) -> TransitionToken:
        """
        Start a transition, superseding any transition in flight.

        Args:
            old_keyed: Key -> shape map of the frame being left
            new_keyed: Key -> shape map of the frame being entered
            now: Start timestamp in ms; None starts the clock on the first tick

        Raises:
            NoActiveHost: no host to push frames to
        """
        if self.host is None:
            raise NoActiveHost("begin_transition")

        if self._active is not None:
            DebugLogger.trace(
                f"Transition #{self._active.id} superseded at "
                f"{self._active.progress:.2f}"
            )

        token = TransitionToken(
            id=next(self._ids),
            old_keyed=dict(old_keyed),
            new_keyed=dict(new_keyed),
            duration=self.duration,
            start=now,
        )
        self._active = token
        DebugLogger.state(
            f"Transition #{token.id}: {len(token.old_keyed)} -> {len(token.new_keyed)} shapes "
            f"({self.duration:.0f}ms)",
            category="transition"
        )
        self._schedule(token)
        return token

    def cancel(self):
        """Abandon the active transition; its pending tick becomes stale."""
        if self._active is not None:
            DebugLogger.state(f"Transition #{self._active.id} cancelled", category="transition")
        self._active = None

    @property
    def active_token(self) -> Optional[TransitionToken]:
        return self._active

    @property
    def is_active(self) -> bool:
        return self._active is not None

    # ===========================================================
    # Tick Loop
    # ===========================================================

    def step(self, token: TransitionToken, timestamp: float):
        """
        Advance `token` to `timestamp` and push the shapes to the host.

        Returns:
            The rendered shape list, or None for a stale tick
        """
        token.scheduled = False
        if token is not self._active:
            DebugLogger.trace(f"Dropped stale tick for transition #{token.id}")
            return None

        if token.start is None:
            token.start = timestamp

        progress = token.progress_at(timestamp)
        token.progress = progress
        shapes = interpolate_scene(token.old_keyed, token.new_keyed, progress)

        zoom = self.zoom_provider() if self.zoom_provider else None
        self.host.update_scene(shapes=shapes, viewport_zoom=zoom)
        DebugLogger.trace(f"#{token.id} progress={progress:.3f} shapes={len(shapes)}")

        if progress < 1.0:
            self._schedule(token)
        else:
            self._finish(token)
        return shapes

    def _schedule(self, token: TransitionToken):
        """Request the next tick for `token` unless one is already pending."""
        if token.scheduled:
            return
        token.scheduled = True
        self.host.request_tick(lambda timestamp: self.step(token, timestamp))

    def _finish(self, token: TransitionToken):
        """Return to idle and notify listeners."""
        self._active = None
        DebugLogger.state(f"Transition #{token.id} complete", category="transition")

        if callable(self.on_finished):
            self.on_finished(token)
        get_events().dispatch(TransitionFinishedEvent(token_id=token.id))
