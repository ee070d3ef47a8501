"""Report modules: font scaling, ordering and HTML output."""

from .font_scaler import MINFONT, MAXFONT, FontScaler, font_shift, font_size
from .renderer import TagEntry, render

__all__ = [
    "MINFONT",
    "MAXFONT",
    "FontScaler",
    "font_shift",
    "font_size",
    "TagEntry",
    "render",
]
