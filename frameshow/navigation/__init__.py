"""
Navigation exports.
"""

from frameshow.navigation.controller import NavigationController

__all__ = [
    'NavigationController',
]
