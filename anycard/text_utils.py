"""Text utilities relying on ReportLab width metrics."""
from typing import List

from reportlab.pdfbase.pdfmetrics import stringWidth


def measure_text(text: str, font_name: str, font_size: float, points_per_unit: float = 1.0) -> float:
    """Width of text set in the given font, in page units."""
    return stringWidth(text, font_name, font_size) / points_per_unit


def wrap_text_to_width(
    text: str,
    font_name: str,
    font_size: float,
    max_width: float,
    points_per_unit: float = 1.0,
) -> List[str]:
    """Wrap text into lines that do not exceed max_width using ReportLab width metrics.

    Breaks only on whitespace. A word wider than max_width is placed on its
    own line unsplit. Newlines are hard breaks; blank lines are kept as
    empty strings. max_width is in page units (points_per_unit converts).
    Returns a list of lines (strings).
    """
    if text is None or str(text).strip() == "":
        return []
    lines: List[str] = []
    for paragraph in str(text).strip().splitlines():
        words = paragraph.split()
        if not words:
            lines.append("")
            continue
        current = ""
        for w in words:
            candidate = (current + " " + w).strip()
            if current == "" or measure_text(candidate, font_name, font_size, points_per_unit) <= max_width:
                current = candidate
            else:
                lines.append(current)
                current = w
        lines.append(current)
    return lines
