"""Shading models.

Components:
    normal: Maps a unit surface normal to an RGB color in [0, 1]
"""

from .normal import BACKGROUND_COLOR, shade_normal

__all__ = [
    "BACKGROUND_COLOR",
    "shade_normal",
]
