"""Panel geometry helpers: fold lines, panel rectangles and aspect-fit placement.

All rectangles use a top-left origin with y growing downwards, measured in the
page's linear unit. The drawing code flips them into ReportLab coordinates.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Tuple

from .constants import PAGE_FORMATS, UNITS
from .errors import InvalidGeometry, InvalidImageSpec

logger = logging.getLogger(__name__)

Point = Tuple[float, float]
Segment = Tuple[Point, Point]


def _positive(value) -> bool:
    try:
        return math.isfinite(value) and value > 0
    except TypeError:
        return False


def points_per_unit(unit: str) -> float:
    """Return how many PDF points make up one page unit."""
    try:
        return UNITS[unit]
    except KeyError:
        raise InvalidGeometry(f"Unknown page unit: {unit!r} (expected one of {sorted(UNITS)})") from None


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class FitRect(Rect):
    """Placement of an image inside a target rect (aspect-fit, centered)."""


@dataclass(frozen=True)
class PageGeometry:
    """Landscape sheet that folds in half along its vertical midline."""

    width: float
    height: float
    unit: str = "in"

    @property
    def panel_width(self) -> float:
        return self.width / 2

    @property
    def points_per_unit(self) -> float:
        return points_per_unit(self.unit)

    @property
    def size_points(self) -> Tuple[float, float]:
        ppu = self.points_per_unit
        return (self.width * ppu, self.height * ppu)

    def validate(self) -> None:
        if not (_positive(self.width) and _positive(self.height)):
            raise InvalidGeometry(
                f"Page dimensions must be positive, got {self.width!r} x {self.height!r}"
            )
        points_per_unit(self.unit)


@dataclass(frozen=True)
class ImageSpec:
    """Native pixel size of the artwork."""

    intrinsic_width: float
    intrinsic_height: float

    @property
    def aspect_ratio(self) -> float:
        return self.intrinsic_width / self.intrinsic_height

    def validate(self) -> None:
        if not (_positive(self.intrinsic_width) and _positive(self.intrinsic_height)):
            raise InvalidImageSpec(
                f"Image dimensions must be positive, got {self.intrinsic_width!r} x {self.intrinsic_height!r}"
            )


@dataclass(frozen=True)
class FoldGeometry:
    fold_x: float
    left_panel: Rect
    right_panel: Rect

    @property
    def fold_line(self) -> Segment:
        return ((self.fold_x, 0.0), (self.fold_x, self.left_panel.height))


def get_page_geometry(name: str) -> PageGeometry:
    """Resolve a named page format (see PAGE_FORMATS) into a PageGeometry."""
    try:
        width, height, unit = PAGE_FORMATS[name.lower()]
    except KeyError:
        raise InvalidGeometry(f"Unknown page format: {name!r} (expected one of {sorted(PAGE_FORMATS)})") from None
    return PageGeometry(width, height, unit)


def compute_fold_geometry(page: PageGeometry) -> FoldGeometry:
    """Split a page into its two panels at the vertical fold line.

    The same geometry serves the outside (back | front) and the inside
    (inside-left | inside-right) of the card.

    Raises:
        InvalidGeometry: if the page dimensions are not positive.
    """
    page.validate()
    fold_x = page.width / 2
    return FoldGeometry(
        fold_x=fold_x,
        left_panel=Rect(0.0, 0.0, fold_x, page.height),
        right_panel=Rect(fold_x, 0.0, fold_x, page.height),
    )


def compute_fit_rect(image: ImageSpec, target: Rect) -> FitRect:
    """Scale the image to fit entirely within target, preserving aspect ratio.

    The image fills one dimension of the target and is centered along the
    other. Nothing is cropped.

    Args:
        image: Intrinsic pixel size of the artwork
        target: Rectangle to place the image in
    Returns:
        FitRect in the same coordinates as target
    Raises:
        InvalidImageSpec: if either intrinsic dimension is not positive.
        InvalidGeometry: if the target has no area.
    """
    image.validate()
    if not (_positive(target.width) and _positive(target.height)):
        raise InvalidGeometry(f"Target rect must have positive size, got {target.width!r} x {target.height!r}")
    img_ratio = image.aspect_ratio
    target_ratio = target.width / target.height

    if img_ratio > target_ratio:
        # Relatively wider than the target: width-constrained
        draw_width = target.width
        draw_height = target.width / img_ratio
        offset_x = 0.0
        offset_y = (target.height - draw_height) / 2
    else:
        draw_height = target.height
        draw_width = target.height * img_ratio
        offset_x = (target.width - draw_width) / 2
        offset_y = 0.0

    logger.debug(
        "Fit %sx%s image into %.3fx%.3f target -> %.3fx%.3f",
        image.intrinsic_width, image.intrinsic_height, target.width, target.height, draw_width, draw_height,
    )
    return FitRect(target.x + offset_x, target.y + offset_y, draw_width, draw_height)


def inner_rect(rect: Rect, inset_x: float, inset_y: float = 0.0) -> Rect:
    """Return the content rectangle inset by the given amounts on each side."""
    return Rect(rect.x + inset_x, rect.y + inset_y, rect.width - 2 * inset_x, rect.height - 2 * inset_y)
