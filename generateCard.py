import argparse
import os
import sys
import logging


# Ensure anycard/ is importable when running as a script
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))
from anycard.constants import BRANDING_TEXT, DEFAULT_FONT_TIER, DEFAULT_PAGE_FORMAT, FONT_TIERS, PAGE_FORMATS
from anycard.errors import ArtworkLoadError, CardLayoutError
from anycard.generator import main


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Lay out a generated artwork as a printable foldable greeting card (PDF)")
    parser.add_argument("image", help="Path or http(s) URL of the generated artwork")
    parser.add_argument("output_pdf", nargs="?", default=None, help="Path to the output PDF file (default: output/<image name>.pdf)")
    parser.add_argument("--message", default="", help="Message printed inside the card. Leave empty for handwriting guide lines")
    parser.add_argument("--message-file", help="Read the inside message from a UTF-8 text file instead of --message", required=False)
    parser.add_argument("--font-tier", choices=sorted(FONT_TIERS), default=DEFAULT_FONT_TIER, help="Size of the inside message text")
    parser.add_argument("--format", dest="page_format", choices=sorted(PAGE_FORMATS), default=DEFAULT_PAGE_FORMAT, help="Sheet size; a5 folds to A6, letter folds to 5.5x8.5in")
    parser.add_argument("--font", help="Path to a TrueType font for the inside message (e.g. a script face)", required=False)
    parser.add_argument("--branding", default=BRANDING_TEXT, help="Small text printed on the back of the card. Pass an empty string to omit it")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log layout details")
    args = parser.parse_args()

    # configure basic logging to console so users are kept up-to-date
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s")
    try:
        message = args.message
        if args.message_file:
            with open(args.message_file, encoding="utf-8") as f:
                message = f.read()
        main(
            args.image,
            args.output_pdf,
            message=message,
            font_tier=args.font_tier,
            page_format=args.page_format,
            message_font_path=args.font,
            branding_text=args.branding,
        )
    except (CardLayoutError, ArtworkLoadError, OSError, UnicodeDecodeError) as exc:
        logging.getLogger(__name__).error("Could not create card: %s", exc)
        sys.exit(2)
