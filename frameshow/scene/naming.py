"""
naming.py
---------
Default display names for shapes and presentation link detection.

Giving every unnamed shape its own id as display name freezes its key:
renaming or re-ordering other shapes later no longer changes which
shapes are matched across frames. Images still waiting for their file are
left alone until they load.
"""

from dataclasses import replace
from typing import Iterable, List
from urllib.parse import urlparse

PRESENTATION_FRAGMENT = "presentation"


def assign_default_names(shapes: Iterable) -> List:
    """Return shapes where every unnamed, non-pending shape is named by its id."""
    named = []
    for shape in shapes:
        if shape.name is None and not shape.is_pending_image:
            shape = replace(shape, name=shape.id)
        named.append(shape)
    return named


def is_presentation_link(link: str) -> bool:
    """True when the URL fragment is exactly '#presentation'."""
    return urlparse(link).fragment == PRESENTATION_FRAGMENT
