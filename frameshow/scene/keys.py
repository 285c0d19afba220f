"""
keys.py
-------
Cross-frame identity for shapes.

A shape's key is its author-assigned display name, or its id when it has
none. Two shapes in different frames sharing a key are the same visual
object, so the transition moves/resizes/fades it instead of cutting.
"""

from typing import Dict, Iterable

from frameshow.core.debug.debug_logger import DebugLogger


def key_for(shape) -> str:
    """Base key of a shape: display name, falling back to id."""
    return shape.name if shape.name is not None else shape.id


def resolve_keys(shapes: Iterable) -> Dict[str, object]:
    """
    Map each shape of one frame to a key unique within that frame.

    Repeated base keys are suffixed in list order: `box`, `box-1`, `box-2`.
    A suffixed key that is already taken (a shape literally named `box-1`)
    moves on to the next free number.

    Args:
        shapes: Shapes of a single frame, in their natural order

    Returns:
        Dict with one entry per input shape, in input order
    """
    keyed = {}
    counts = {}

    for shape in shapes:
        base = key_for(shape)
        key = base
        if key in keyed:
            count = counts.get(base, 0)
            while key in keyed:
                count += 1
                key = f"{base}-{count}"
            counts[base] = count
            DebugLogger.trace(f"Duplicate key '{base}' -> '{key}'", category="keys")
        keyed[key] = shape

    return keyed
