import pytest

from anycard.errors import InvalidGeometry, InvalidImageSpec
from anycard.layout import (
    ImageSpec,
    PageGeometry,
    Rect,
    compute_fit_rect,
    compute_fold_geometry,
    get_page_geometry,
    inner_rect,
)


@pytest.mark.parametrize("width,height", [(11, 8.5), (210, 148), (5, 7), (1, 1), (0.3, 100.0)])
def test_fold_geometry_panels_split_the_page(width, height):
    fold = compute_fold_geometry(PageGeometry(width, height))
    assert fold.fold_x == pytest.approx(width / 2)
    assert fold.left_panel.width + fold.right_panel.width == pytest.approx(width)
    assert fold.left_panel.height == height
    assert fold.right_panel.height == height
    assert fold.left_panel.x == 0
    assert fold.right_panel.x == pytest.approx(fold.fold_x)
    assert fold.fold_line == ((width / 2, 0.0), (width / 2, height))


@pytest.mark.parametrize("width,height", [(0, 8.5), (11, 0), (-11, 8.5), (float("nan"), 8.5), (float("inf"), 8.5)])
def test_fold_geometry_rejects_bad_pages(width, height):
    with pytest.raises(InvalidGeometry):
        compute_fold_geometry(PageGeometry(width, height))


def test_unknown_unit_is_invalid_geometry():
    with pytest.raises(InvalidGeometry):
        compute_fold_geometry(PageGeometry(11, 8.5, unit="furlong"))


def test_named_page_formats():
    a5 = get_page_geometry("a5")
    assert (a5.width, a5.height, a5.unit) == (210.0, 148.0, "mm")
    letter = get_page_geometry("LETTER")
    assert (letter.width, letter.height, letter.unit) == (11.0, 8.5, "in")
    assert letter.size_points == pytest.approx((792.0, 612.0))
    with pytest.raises(InvalidGeometry):
        get_page_geometry("tabloid")


def test_portrait_artwork_on_letter_front_panel_is_width_constrained():
    # 2:3 artwork is still relatively wider than a 5.5 x 8.5 panel
    rect = compute_fit_rect(ImageSpec(1000, 1500), Rect(5.5, 0, 5.5, 8.5))
    assert rect.width == pytest.approx(5.5)
    assert rect.height == pytest.approx(8.25)
    assert rect.x == pytest.approx(5.5)
    assert rect.y == pytest.approx(0.125)


def test_tall_artwork_is_height_constrained_and_centered_horizontally():
    rect = compute_fit_rect(ImageSpec(500, 1500), Rect(5.5, 0, 5.5, 8.5))
    assert rect.height == pytest.approx(8.5)
    assert rect.width == pytest.approx(8.5 / 3)
    assert rect.x == pytest.approx(5.5 + (5.5 - 8.5 / 3) / 2)
    assert rect.y == 0


def test_equal_ratio_fills_the_target():
    rect = compute_fit_rect(ImageSpec(55, 85), Rect(5.5, 0, 5.5, 8.5))
    assert (rect.x, rect.y) == pytest.approx((5.5, 0))
    assert (rect.width, rect.height) == pytest.approx((5.5, 8.5))


@pytest.mark.parametrize("iw,ih", [(1, 1), (1024, 1024), (1000, 1500), (3000, 200), (7, 9000)])
@pytest.mark.parametrize("target", [Rect(5.5, 0, 5.5, 8.5), Rect(105, 0, 105, 148), Rect(2, 3, 10, 1)])
def test_fit_rect_is_contained_and_keeps_ratio(iw, ih, target):
    rect = compute_fit_rect(ImageSpec(iw, ih), target)
    tol = 1e-9
    assert rect.width <= target.width + tol
    assert rect.height <= target.height + tol
    assert rect.x >= target.x - tol and rect.right <= target.right + tol
    assert rect.y >= target.y - tol and rect.bottom <= target.bottom + tol
    assert rect.width / rect.height == pytest.approx(iw / ih)
    # one dimension is always filled
    assert rect.width == pytest.approx(target.width) or rect.height == pytest.approx(target.height)


@pytest.mark.parametrize("iw,ih", [(1000, 0), (0, 1000), (-5, 10), (10, -5)])
def test_fit_rect_rejects_bad_image(iw, ih):
    with pytest.raises(InvalidImageSpec):
        compute_fit_rect(ImageSpec(iw, ih), Rect(5.5, 0, 5.5, 8.5))


def test_inner_rect_insets_each_side():
    assert inner_rect(Rect(5.5, 0, 5.5, 8.5), 1.0, 0.5) == Rect(6.5, 0.5, 3.5, 7.5)


@pytest.mark.parametrize("target", [Rect(0, 0, 5, 0), Rect(0, 0, 0, 5), Rect(0, 0, -1, 5)])
def test_fit_rect_rejects_empty_target(target):
    with pytest.raises(InvalidGeometry):
        compute_fit_rect(ImageSpec(10, 10), target)
