"""Shared layout and typography constants for card rendering."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from reportlab.lib.units import cm, inch, mm

# Points per page unit. Plans are expressed in one of these units.
UNITS: Dict[str, float] = {
    "pt": 1.0,
    "in": inch,
    "mm": mm,
    "cm": cm,
}

# Font tiers offered by the form, in points
FONT_TIERS: Dict[str, float] = {
    "small": 11.0,
    "medium": 14.0,
    "large": 18.0,
}
DEFAULT_FONT_TIER = "medium"

# Line height relative to the font point size
LINE_HEIGHT_FACTOR: float = 1.4

# Landscape sheets that fold in half to a card: (width, height, unit)
PAGE_FORMATS: Dict[str, Tuple[float, float, str]] = {
    "a5": (210.0, 148.0, "mm"),     # folds to A6
    "letter": (11.0, 8.5, "in"),    # folds to 5.5 x 8.5
}
DEFAULT_PAGE_FORMAT = "a5"

# Truncation ellipsis sits at a fixed height above the inside-right panel's bottom edge
ELLIPSIS_OFFSET_PT: float = 0.5 * inch

BRANDING_TEXT = "made with AnyCard"
BRANDING_FONT_SIZE: float = 8.0

# Stroke colors (0-255 RGB) and widths used when drawing a plan
FOLD_LINE_RGB = (230, 230, 230)
FOLD_DASH_PT = (2 * mm, 2 * mm)
BRANDING_RGB = (200, 200, 200)
FLOURISH_RGB = (245, 200, 200)
FLOURISH_LINE_WIDTH_PT: float = 0.3 * mm
WRITING_LINE_RGB = (240, 240, 240)
WRITING_LINE_WIDTH_PT: float = 0.2 * mm
MESSAGE_RGB = (60, 60, 60)


@dataclass(frozen=True)
class LayoutConfig:
    """Engine knobs. Distances are in points so they mean the same in every page unit."""

    writing_line_count: int = 10
    writing_line_spacing_pt: float = 10 * mm
    writing_top_margin_pt: float = 30 * mm
    text_margin_pt: float = 1 * inch        # top and bottom margin of the message panel
    message_inset_pt: float = 20 * mm       # left and right inset when MessageSpec gives none
    branding_offset_pt: Tuple[float, float] = (10 * mm, 8 * mm)
    flourish_vertex_pt: float = 5 * mm
    flourish_reach_pt: float = 20 * mm
    message_font_name: str = "Times-Italic"

    def __post_init__(self):
        if self.writing_line_count < 1:
            raise ValueError("writing_line_count must be at least 1")
        if self.writing_line_spacing_pt <= 0:
            raise ValueError("writing_line_spacing_pt must be positive")


DEFAULT_CONFIG = LayoutConfig()
