"""Output utilities.

Components:
    export: PNG export via Pillow
"""

from spheretrace.preview.export import load_png, save_png, save_png_from_array

__all__ = [
    "save_png",
    "save_png_from_array",
    "load_png",
]
