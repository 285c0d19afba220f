"""
Scene document loading.
"""

from frameshow.data.snapshot_loader import load_elements, load_snapshot

__all__ = [
    'load_elements',
    'load_snapshot',
]
