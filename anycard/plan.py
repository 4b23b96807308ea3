"""Assembly of the complete two-page layout plan for a folded card.

Page 1 is the outside of the card (back | front), page 2 the inside
(inside-left | inside-right). The plan is a pure function of its inputs and
holds everything the drawing code needs.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from .constants import DEFAULT_CONFIG, LayoutConfig
from .layout import FitRect, FoldGeometry, ImageSpec, PageGeometry, Point, Segment, Rect, compute_fit_rect, compute_fold_geometry
from .text_boxes import MessageSpec, PanelContent, TextBlock, layout_message

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Flourish:
    """L-shaped corner mark: one stroke along each axis from vertex towards reach."""

    vertex: Point
    reach: Point

    @property
    def strokes(self) -> Tuple[Segment, Segment]:
        vx, vy = self.vertex
        rx, ry = self.reach
        return (((vx, ry), (vx, vy)), ((vx, vy), (rx, vy)))


@dataclass(frozen=True)
class LayoutPlan:
    page: PageGeometry
    outside: FoldGeometry
    inside: FoldGeometry
    front_image: FitRect
    branding_anchor: Point
    flourishes: Tuple[Flourish, Flourish]
    inside_right: PanelContent

    @property
    def fold_lines(self) -> Tuple[Segment, Segment]:
        """Fold line of page 1 and page 2."""
        return (self.outside.fold_line, self.inside.fold_line)

    @property
    def flourish_anchors(self) -> Tuple[Point, ...]:
        return tuple(p for f in self.flourishes for p in (f.vertex, f.reach))

    @property
    def has_message(self) -> bool:
        return isinstance(self.inside_right, TextBlock)


def _branding_anchor(back: Rect, ppu: float, config: LayoutConfig) -> Point:
    dx, dy = config.branding_offset_pt
    return (back.x + dx / ppu, back.bottom - dy / ppu)


def _corner_flourishes(panel: Rect, ppu: float, config: LayoutConfig) -> Tuple[Flourish, Flourish]:
    near = config.flourish_vertex_pt / ppu
    far = config.flourish_reach_pt / ppu
    top_left = Flourish(vertex=(panel.x + near, panel.y + near), reach=(panel.x + far, panel.y + far))
    bottom_right = Flourish(
        vertex=(panel.right - near, panel.bottom - near),
        reach=(panel.right - far, panel.bottom - far),
    )
    return (top_left, bottom_right)


def build_layout_plan(
    page: PageGeometry,
    image: ImageSpec,
    message: MessageSpec,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> LayoutPlan:
    """Compute the full card layout.

    All inputs are validated before any geometry is computed.

    Raises:
        InvalidGeometry, InvalidImageSpec, InvalidMessageSpec
    """
    page.validate()
    image.validate()
    message.validate()
    ppu = page.points_per_unit

    outside = compute_fold_geometry(page)
    front_image = compute_fit_rect(image, outside.right_panel)
    branding_anchor = _branding_anchor(outside.left_panel, ppu, config)

    inside = compute_fold_geometry(page)
    flourishes = _corner_flourishes(inside.left_panel, ppu, config)
    inside_right = layout_message(message, inside.right_panel, page.unit, config)

    logger.debug("Built layout plan for %sx%s %s page", page.width, page.height, page.unit)
    return LayoutPlan(
        page=page,
        outside=outside,
        inside=inside,
        front_image=front_image,
        branding_anchor=branding_anchor,
        flourishes=flourishes,
        inside_right=inside_right,
    )
