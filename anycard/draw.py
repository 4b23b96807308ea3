"""Drawing of a LayoutPlan on the ReportLab canvas."""
from __future__ import annotations

from typing import Tuple

from PIL import Image
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen.canvas import Canvas

from . import fonts
from .constants import (
    BRANDING_FONT_SIZE,
    BRANDING_RGB,
    BRANDING_TEXT,
    ELLIPSIS_OFFSET_PT,
    FLOURISH_LINE_WIDTH_PT,
    FLOURISH_RGB,
    FOLD_DASH_PT,
    FOLD_LINE_RGB,
    MESSAGE_RGB,
    WRITING_LINE_RGB,
    WRITING_LINE_WIDTH_PT,
)
from .layout import Rect, Segment
from .plan import LayoutPlan
from .text_boxes import TextBlock, WritingLines


def _rgb(color: Tuple[int, int, int]) -> Tuple[float, float, float]:
    r, g, b = color
    return (r / 255.0, g / 255.0, b / 255.0)


class _PageMapper:
    """Convert top-left page-unit coordinates into ReportLab points."""

    def __init__(self, plan: LayoutPlan):
        self.ppu = plan.page.points_per_unit
        self.page_height = plan.page.height

    def point(self, x: float, y: float) -> Tuple[float, float]:
        return (x * self.ppu, (self.page_height - y) * self.ppu)

    def rect(self, r: Rect) -> Tuple[float, float, float, float]:
        x, y = self.point(r.x, r.bottom)
        return (x, y, r.width * self.ppu, r.height * self.ppu)


def _line(c: Canvas, m: _PageMapper, segment: Segment) -> None:
    (x1, y1), (x2, y2) = segment
    c.line(*m.point(x1, y1), *m.point(x2, y2))


def draw_fold_line(c: Canvas, m: _PageMapper, segment: Segment) -> None:
    c.saveState()
    c.setStrokeColorRGB(*_rgb(FOLD_LINE_RGB))
    c.setDash(list(FOLD_DASH_PT), 0)
    _line(c, m, segment)
    c.restoreState()


def draw_image_in_rect(c: Canvas, pil_img, x: float, y: float, width: float, height: float) -> None:
    """Draw a PIL image into the rectangle (ReportLab points). The caller keeps the aspect ratio."""
    if pil_img.mode not in ("RGB", "L"):
        # Flatten transparency onto the white card stock
        rgba = pil_img.convert("RGBA")
        flat = Image.new("RGBA", rgba.size, (255, 255, 255, 255))
        pil_img = Image.alpha_composite(flat, rgba).convert("RGB")
    img_reader = ImageReader(pil_img)
    c.drawImage(img_reader, x, y, width=width, height=height)


def draw_text_block(c: Canvas, m: _PageMapper, block: TextBlock, panel: Rect) -> None:
    c.saveState()
    c.setFillColorRGB(*_rgb(MESSAGE_RGB))
    c.setFont(block.font_name, block.font_size)
    center_x = block.left + block.width / 2
    font_height = block.font_size / m.ppu
    for idx, line in enumerate(block.lines):
        # Baseline centered in the line box, glyph ascent ~0.8 em
        top = block.start_y + idx * block.line_height
        baseline = top + (block.line_height - font_height) / 2 + font_height * 0.8
        c.drawCentredString(*m.point(center_x, baseline), line)
    if block.truncated:
        # Fixed position near the bottom margin regardless of where the last line ended
        c.drawCentredString(*m.point(center_x, panel.bottom - ELLIPSIS_OFFSET_PT / m.ppu), "…")
    c.restoreState()


def draw_writing_lines(c: Canvas, m: _PageMapper, guides: WritingLines) -> None:
    c.saveState()
    c.setStrokeColorRGB(*_rgb(WRITING_LINE_RGB))
    c.setLineWidth(WRITING_LINE_WIDTH_PT)
    for y in guides.ys:
        _line(c, m, ((guides.x_start, y), (guides.x_end, y)))
    c.restoreState()


def draw_layout_plan(
    c: Canvas,
    plan: LayoutPlan,
    artwork,
    branding_text: str = BRANDING_TEXT,
) -> None:
    """Draw both pages of the card, ending each with showPage()."""
    m = _PageMapper(plan)

    # PAGE 1: outside, back on the left and front cover on the right
    draw_fold_line(c, m, plan.outside.fold_line)
    if branding_text:
        c.saveState()
        c.setFont(fonts.FONT_BRANDING_NAME, BRANDING_FONT_SIZE)
        c.setFillColorRGB(*_rgb(BRANDING_RGB))
        c.drawString(*m.point(*plan.branding_anchor), branding_text)
        c.restoreState()
    draw_image_in_rect(c, artwork, *m.rect(plan.front_image))
    c.showPage()

    # PAGE 2: inside, flourishes on the left and the message on the right
    draw_fold_line(c, m, plan.inside.fold_line)
    c.saveState()
    c.setStrokeColorRGB(*_rgb(FLOURISH_RGB))
    c.setLineWidth(FLOURISH_LINE_WIDTH_PT)
    for flourish in plan.flourishes:
        for stroke in flourish.strokes:
            _line(c, m, stroke)
    c.restoreState()

    content = plan.inside_right
    if isinstance(content, TextBlock):
        draw_text_block(c, m, content, plan.inside.right_panel)
    else:
        draw_writing_lines(c, m, content)
    c.showPage()
