"""PDF generation orchestrator for foldable greeting cards."""
from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional

from reportlab.pdfgen import canvas

from . import fonts
from .constants import BRANDING_TEXT, DEFAULT_CONFIG, DEFAULT_FONT_TIER, DEFAULT_PAGE_FORMAT
from .draw import draw_layout_plan
from .image_utils import image_spec_for, load_artwork
from .layout import get_page_geometry
from .plan import LayoutPlan, build_layout_plan
from .text_boxes import MessageSpec, TextBlock

logger = logging.getLogger(__name__)


def default_output_path(image_source: str, output_dir: Optional[Path] = None) -> Path:
    """Path under repo-root/output named after the artwork file."""
    if output_dir is None:
        output_dir = Path(__file__).resolve().parents[1] / "output"
    output_dir.mkdir(parents=True, exist_ok=True)
    # URLs may carry a query string; only the last path segment names the card
    stem = Path(image_source.split("?", 1)[0].rstrip("/")).stem or "card"
    return output_dir / f"{stem}.pdf"


def main(
    image_source: str,
    output_pdf_path: Optional[str] = None,
    message: str = "",
    font_tier: str = DEFAULT_FONT_TIER,
    page_format: str = DEFAULT_PAGE_FORMAT,
    message_font_path: Optional[str] = None,
    branding_text: str = BRANDING_TEXT,
) -> LayoutPlan:
    # Reject bad presentation choices before touching the network or disk
    page = get_page_geometry(page_format)
    message_spec = MessageSpec(text=message or "", font_tier=font_tier)
    message_spec.validate()

    font_name = fonts.setup_message_font(message_font_path)
    config = replace(DEFAULT_CONFIG, message_font_name=font_name)

    artwork = load_artwork(image_source)
    image_spec = image_spec_for(artwork)
    logger.info("Loaded artwork %s (%dx%d px)", image_source, image_spec.intrinsic_width, image_spec.intrinsic_height)

    plan = build_layout_plan(page, image_spec, message_spec, config)

    if not output_pdf_path:
        output_pdf_path = default_output_path(image_source)
    else:
        Path(output_pdf_path).parent.mkdir(parents=True, exist_ok=True)

    # Ensure the path is a string for reportlab
    c = canvas.Canvas(str(output_pdf_path), pagesize=page.size_points)
    c.setTitle("Greeting card")
    draw_layout_plan(c, plan, artwork, branding_text=branding_text)
    c.save()

    content = plan.inside_right
    if isinstance(content, TextBlock):
        inside = f"{len(content.lines)} message line(s), {font_tier} ({content.font_name})"
        if content.truncated:
            logger.warning("Message did not fit the inside panel and was truncated to %d line(s).", len(content.lines))
    else:
        inside = f"{len(content.ys)} writing guide(s)"

    logger.info(
        "🎉 Card PDF complete!\n\n"
        "📥 Artwork: %s\n"
        "📤 Output: %s\n"
        "📄 Format: %s (%g x %g %s, 2 pages)\n"
        "✍️  Inside: %s",
        image_source,
        output_pdf_path,
        page_format,
        page.width,
        page.height,
        page.unit,
        inside,
    )
    return plan
