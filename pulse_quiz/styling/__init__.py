"""Styling module for PulseQuiz."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
