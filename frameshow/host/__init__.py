"""
Render host exports.
"""

from frameshow.host.base_host import RenderHost
from frameshow.host.pygame_host import PygameHost

__all__ = [
    'RenderHost',
    'PygameHost',
]
