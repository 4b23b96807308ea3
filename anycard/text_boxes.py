"""Layout of the inside-right message panel."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .constants import DEFAULT_CONFIG, DEFAULT_FONT_TIER, FONT_TIERS, LINE_HEIGHT_FACTOR, LayoutConfig
from .errors import InvalidMessageSpec
from .layout import Rect, inner_rect, points_per_unit
from .text_utils import wrap_text_to_width

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MessageSpec:
    text: str = ""
    font_tier: str = DEFAULT_FONT_TIER
    margin_inset: Optional[float] = None  # page units; None uses LayoutConfig.message_inset_pt

    @property
    def point_size(self) -> float:
        return FONT_TIERS[self.font_tier]

    @property
    def is_blank(self) -> bool:
        return not self.text or not self.text.strip()

    def validate(self) -> None:
        if self.font_tier not in FONT_TIERS:
            raise InvalidMessageSpec(
                f"Unrecognized font tier: {self.font_tier!r} (expected one of {', '.join(FONT_TIERS)})"
            )
        if self.margin_inset is not None and not (math.isfinite(self.margin_inset) and self.margin_inset >= 0):
            raise InvalidMessageSpec(f"Margin inset must be zero or positive, got {self.margin_inset!r}")


@dataclass(frozen=True)
class TextBlock:
    """Wrapped message lines, vertically centered in the panel.

    start_y is the top of the first line; line i spans
    [start_y + i * line_height, start_y + (i + 1) * line_height].
    left/width describe the horizontal area lines are centered in.
    """

    lines: Tuple[str, ...]
    start_y: float
    line_height: float
    font_name: str
    font_size: float
    left: float
    width: float
    truncated: bool = False


@dataclass(frozen=True)
class WritingLines:
    """Ruled guide lines for a handwritten message."""

    ys: Tuple[float, ...]
    x_start: float
    x_end: float
    line_spacing: float


PanelContent = Union[TextBlock, WritingLines]


def _writing_lines(panel: Rect, inset: float, margin: float, ppu: float, config: LayoutConfig) -> WritingLines:
    count = config.writing_line_count
    top = config.writing_top_margin_pt / ppu
    spacing = config.writing_line_spacing_pt / ppu
    bottom_limit = panel.height - margin

    # Squeeze the pattern when the configured spacing would run past the bottom margin
    if count > 1 and top + (count - 1) * spacing > bottom_limit:
        if bottom_limit > top:
            spacing = (bottom_limit - top) / (count - 1)
        else:
            spacing = panel.height / (count + 1)
            top = spacing
        logger.debug("Writing lines compressed to spacing %.3f on a %.3f tall panel", spacing, panel.height)
    elif count == 1 and top >= panel.height:
        top = panel.height / 2

    ys = tuple(panel.y + top + i * spacing for i in range(count))
    return WritingLines(ys=ys, x_start=panel.x + inset, x_end=panel.right - inset, line_spacing=spacing)


def layout_message(
    message: MessageSpec,
    panel: Rect,
    unit: str = "in",
    config: LayoutConfig = DEFAULT_CONFIG,
) -> PanelContent:
    """Lay out the inside message for a panel.

    Blank text yields WritingLines. Otherwise the text is wrapped to the
    panel width minus the inset on both sides, centered vertically between the
    top and bottom margins, and cut to the lines that fit (truncated=True).

    Raises:
        InvalidMessageSpec: for an unrecognized font tier or a negative inset.
    """
    message.validate()
    ppu = points_per_unit(unit)
    inset = message.margin_inset if message.margin_inset is not None else config.message_inset_pt / ppu
    # Narrow panels: never let the insets cross
    inset = min(inset, panel.width / 2)
    margin = config.text_margin_pt / ppu

    if message.is_blank:
        return _writing_lines(panel, inset, margin, ppu, config)

    font_size = message.point_size
    line_height = font_size * LINE_HEIGHT_FACTOR / ppu
    text_area = inner_rect(panel, inset)
    lines = wrap_text_to_width(message.text, config.message_font_name, font_size, text_area.width, ppu)

    total_height = len(lines) * line_height
    available_height = panel.height - 2 * margin
    start_y = max(margin, (panel.height - total_height) / 2)

    max_lines = max(0, math.floor(available_height / line_height))
    truncated = len(lines) > max_lines
    if truncated:
        logger.debug("Message wraps to %d lines; keeping the first %d", len(lines), max_lines)
        lines = lines[:max_lines]

    return TextBlock(
        lines=tuple(lines),
        start_y=panel.y + start_y,
        line_height=line_height,
        font_name=config.message_font_name,
        font_size=font_size,
        left=text_area.x,
        width=text_area.width,
        truncated=truncated,
    )
