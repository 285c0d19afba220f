"""
snapshot_loader.py
------------------
Reads a scene document from disk into a SceneSnapshot.

Accepted layouts:
- {"elements": [...], ...}  (canvas export)
- [...]                     (bare element list)
"""

import json
import os

from frameshow.core.debug.debug_logger import DebugLogger
from frameshow.scene.errors import SnapshotError
from frameshow.scene.model import SceneSnapshot, Shape
from frameshow.scene.naming import assign_default_names


def load_elements(path: str) -> list:
    """
    Load the raw element dicts of a scene document.

    Raises:
        SnapshotError: file missing, not JSON, or without an element list
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise SnapshotError(f"Cannot read scene '{path}': {e}") from e

    elements = data.get("elements") if isinstance(data, dict) else data
    if not isinstance(elements, list):
        raise SnapshotError(f"Scene '{path}' has no element list")

    for element in elements:
        if not isinstance(element, dict) or "id" not in element:
            raise SnapshotError(f"Scene '{path}' contains an element without an id")
    return elements


def load_snapshot(path: str, name_shapes: bool = True) -> SceneSnapshot:
    """
    Load a scene document and take the presentation snapshot.

    Args:
        path: Scene file path
        name_shapes: Give unnamed shapes their id as display name

    Returns:
        SceneSnapshot with deleted elements removed and frames in play order

    Raises:
        SnapshotError: unreadable document or an element with non-numeric geometry
    """
    elements = load_elements(path)
    try:
        shapes = [Shape.from_element(e) for e in elements]
    except (TypeError, ValueError) as e:
        raise SnapshotError(f"Scene '{path}' has a malformed element: {e}") from e
    if name_shapes:
        shapes = assign_default_names(shapes)

    snapshot = SceneSnapshot.from_shapes(shapes)
    DebugLogger.system(
        f"Loaded {os.path.basename(path)}: {len(snapshot.frames)} frame(s), "
        f"{len(snapshot.shapes)} shape(s)",
        category="snapshot"
    )
    return snapshot
