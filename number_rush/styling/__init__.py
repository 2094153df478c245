"""Styling module for Number Rush."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
