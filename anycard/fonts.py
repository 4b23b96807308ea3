import logging
import os
from typing import Iterable, Optional

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont, TTFError

logger = logging.getLogger(__name__)

# Public font names used across the document. The message face starts as a
# built-in italic serif and is switched to a script TrueType font when one
# can be registered.
FONT_MESSAGE_NAME = "Times-Italic"
FONT_BRANDING_NAME = "Helvetica"

# Candidate script-like faces: (registered name, possible file names)
MESSAGE_FONT_CANDIDATES = [
    ("SegoeScript", ["segoesc.ttf", "SEGOESC.TTF"]),
    ("GeorgiaItalic", ["georgiai.ttf", "GEORGIAI.TTF", "Georgia Italic.ttf"]),
    ("DejaVuSerifItalic", ["DejaVuSerif-Italic.ttf"]),
    ("NotoSerifItalic", ["NotoSerif-Italic.ttf"]),
]


def default_font_dirs() -> list:
    dirs = [os.path.join(os.environ.get("WINDIR", r"C:\Windows"), "Fonts")]
    dirs.extend([
        "/usr/share/fonts/truetype/dejavu",
        "/usr/share/fonts/truetype/noto",
        "/Library/Fonts",
    ])
    # Also allow fonts dropped next to the project
    dirs.append(os.path.abspath("."))
    return dirs


def register_ttf_font(name: str, path: str) -> str:
    """Register a TrueType font with ReportLab under name and return the name."""
    pdfmetrics.registerFont(TTFont(name, path))
    return name


def _find_file(font_dirs: Iterable[str], possible_names: Iterable[str]) -> Optional[str]:
    for d in font_dirs:
        for file_name in possible_names:
            p = os.path.join(d, file_name)
            if os.path.isfile(p):
                return p
    return None


def setup_message_font(font_path: Optional[str] = None, font_dirs: Optional[Iterable[str]] = None) -> str:
    """Best-effort registration of a handwritten-style font for the inside message.

    An explicit font_path wins; otherwise the candidates are searched in
    font_dirs. If nothing can be registered the built-in Times-Italic is kept.
    Returns the font name to use for measuring and drawing the message.
    """
    global FONT_MESSAGE_NAME
    if font_path:
        name = os.path.splitext(os.path.basename(font_path))[0]
        try:
            FONT_MESSAGE_NAME = register_ttf_font(name, font_path)
            logger.info("Using message font %s from %s", name, font_path)
            return FONT_MESSAGE_NAME
        except (OSError, TTFError) as exc:
            logger.warning("Could not register font %s (%s); falling back to %s", font_path, exc, FONT_MESSAGE_NAME)
            return FONT_MESSAGE_NAME

    dirs = list(font_dirs) if font_dirs is not None else default_font_dirs()
    for family, file_names in MESSAGE_FONT_CANDIDATES:
        path = _find_file(dirs, file_names)
        if not path:
            continue
        try:
            FONT_MESSAGE_NAME = register_ttf_font(family, path)
            logger.debug("Registered message font %s from %s", family, path)
            return FONT_MESSAGE_NAME
        except (OSError, TTFError) as exc:
            logger.debug("Skipping font %s (%s)", path, exc)
            continue
    # Keep the built-in face
    return FONT_MESSAGE_NAME
