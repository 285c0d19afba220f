"""
errors.py
---------
Exception types raised by the presentation engine.
"""


class FrameshowError(Exception):
    """Base class for all presentation engine errors."""


class InvalidFrame(FrameshowError):
    """A frame with zero width or height reached the fit computation."""

    def __init__(self, frame):
        self.frame = frame
        super().__init__(
            f"Frame '{frame.id}' has degenerate size {frame.width}x{frame.height}"
        )


class InvalidFrameIndex(FrameshowError):
    """A start frame index outside the play order was requested."""

    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        super().__init__(f"Frame index {index} out of range for {count} frame(s)")


class NoActiveHost(FrameshowError):
    """A scene-mutating call was made before the render host attached."""

    def __init__(self, operation: str = "update"):
        self.operation = operation
        super().__init__(f"No render host attached for '{operation}'")


class SnapshotError(FrameshowError):
    """The scene document could not be read or is malformed."""
