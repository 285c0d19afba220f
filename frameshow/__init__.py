"""
frameshow
---------
Slideshow player for frame-organised vector drawings: plays the frames of a
scene one at a time and animates shared shapes between them.
"""

__version__ = "0.1.0"
