"""Utility helpers shared across etiqueta modules."""

from etiqueta.utils.logger import get_logger
from etiqueta.utils.text import collapse_blank_lines, escape_html

__all__ = [
    "collapse_blank_lines",
    "escape_html",
    "get_logger",
]
