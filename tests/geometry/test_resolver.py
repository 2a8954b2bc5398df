"""Tests for the geometry resolver.

Covers every Limit axis combination, Fit/Fill/Pad/Resample arithmetic,
gravity placement, rounding and validation errors.
"""

from fractions import Fraction

import pytest

from cl_image_tools.geometry import (
    UNCONSTRAINED,
    Bound,
    Exact,
    Fill,
    Fit,
    GeometryError,
    Gravity,
    InvalidDimension,
    Limit,
    MissingDimension,
    Offset,
    Pad,
    Resample,
    Size,
    UnknownGravity,
    resolve,
)
from cl_image_tools.geometry.resolver import fill_scale, fit_scale, round_dimension

PORTRAIT = Size(600, 800)
LANDSCAPE = Size(800, 600)


# ============================================================================
# ARITHMETIC HELPERS
# ============================================================================


def test_round_dimension_half_away_from_zero():
    """Halves round up, everything else to nearest."""
    assert round_dimension(Fraction(5, 2)) == 3
    assert round_dimension(Fraction(7, 2)) == 4
    assert round_dimension(Fraction(1600, 3)) == 533
    assert round_dimension(Fraction(1999, 1000)) == 2


def test_round_dimension_floor_of_one():
    assert round_dimension(Fraction(1, 100)) == 1
    assert round_dimension(Fraction(0)) == 1


def test_fit_and_fill_scale():
    box = Size(400, 400)
    assert fit_scale(PORTRAIT, box) == Fraction(1, 2)
    assert fill_scale(PORTRAIT, box) == Fraction(2, 3)


# ============================================================================
# LIMIT
# ============================================================================


def test_limit_both_bounds_shrinks_preserving_aspect():
    geometry = resolve(PORTRAIT, Limit(400, 400))

    assert geometry.size == Size(300, 400)
    assert geometry.scaled == geometry.size
    assert geometry.crop is None
    assert geometry.offset is None


def test_limit_never_enlarges():
    assert resolve(PORTRAIT, Limit(1000, 1000)).size == PORTRAIT
    assert resolve(PORTRAIT, Limit(600, 800)).size == PORTRAIT


def test_limit_width_only():
    assert resolve(PORTRAIT, Limit(400, None)).size == Size(400, 800)


def test_limit_height_only():
    assert resolve(PORTRAIT, Limit(None, 400)).size == Size(600, 400)


def test_limit_both_unconstrained():
    assert resolve(PORTRAIT, Limit()).size == PORTRAIT
    assert resolve(PORTRAIT, Limit(UNCONSTRAINED, UNCONSTRAINED)).size == PORTRAIT


def test_limit_bang_token_is_unconstrained():
    assert resolve(PORTRAIT, Limit("!", "400")).size == Size(600, 400)


def test_limit_bound_with_unreachable_exact():
    """An exact height beyond the source is clamped; the width bound stands alone."""
    assert resolve(PORTRAIT, Limit(300, "1000!")).size == Size(300, 800)


def test_limit_exact_with_unconstrained():
    assert resolve(PORTRAIT, Limit("300!", None)).size == Size(300, 800)
    assert resolve(PORTRAIT, Limit(Exact(300), UNCONSTRAINED)).size == Size(300, 800)


def test_limit_exact_with_bound():
    assert resolve(PORTRAIT, Limit(Exact(1000), Bound(400))).size == Size(600, 400)


def test_limit_both_exact():
    assert resolve(PORTRAIT, Limit("300!", "400!")).size == Size(300, 400)
    assert resolve(PORTRAIT, Limit("900!", "900!")).size == PORTRAIT


def test_limit_result_never_exceeds_source():
    tokens = [None, "!", 200, 700, 1200, "200!", "700!", "1200!"]
    for width in tokens:
        for height in tokens:
            size = resolve(PORTRAIT, Limit(width, height)).size
            assert size.fits_within(PORTRAIT), (width, height, size)


# ============================================================================
# FIT
# ============================================================================


def test_fit_shrinks():
    assert resolve(PORTRAIT, Fit(400, 400)).size == Size(300, 400)


def test_fit_enlarges():
    assert resolve(PORTRAIT, Fit(1200, 1200)).size == Size(900, 1200)


def test_fit_rounds_to_nearest():
    assert resolve(PORTRAIT, Fit(400, 1000)).size == Size(400, 533)


def test_fit_rounding_half_up():
    assert resolve(Size(5, 4), Fit(100, 2)).size == Size(3, 2)


def test_fit_rounding_floor_of_one():
    assert resolve(Size(1000, 1), Fit(10, 10)).size == Size(10, 1)


def test_fit_accepts_string_tokens():
    assert resolve(PORTRAIT, Fit("400", "400")).size == Size(300, 400)


def test_fit_is_idempotent():
    sources = [PORTRAIT, LANDSCAPE, Size(1, 1), Size(333, 777), Size(1920, 1080)]
    boxes = [Size(400, 400), Size(400, 1000), Size(7, 3), Size(1200, 900)]
    for source in sources:
        for box in boxes:
            once = resolve(source, Fit(box.width, box.height)).size
            twice = resolve(once, Fit(box.width, box.height)).size
            assert once == twice, (source, box)
            assert once.fits_within(box)


# ============================================================================
# FILL
# ============================================================================


def test_fill_portrait_center():
    geometry = resolve(PORTRAIT, Fill(400, 400))

    assert geometry.size == Size(400, 400)
    assert geometry.scaled == Size(400, 533)
    assert geometry.crop is not None
    assert geometry.crop.offset == Offset(0, 66)
    assert geometry.crop.size == Size(400, 400)


def test_fill_portrait_north_and_south():
    north = resolve(PORTRAIT, Fill(400, 400, Gravity.NORTH))
    south = resolve(PORTRAIT, Fill(400, 400, "south"))

    assert north.crop is not None and north.crop.offset == Offset(0, 0)
    assert south.crop is not None and south.crop.offset == Offset(0, 133)


def test_fill_landscape_gravity():
    center = resolve(LANDSCAPE, Fill(400, 400))
    east = resolve(LANDSCAPE, Fill(400, 400, "East"))
    west = resolve(LANDSCAPE, Fill(400, 400, "West"))

    assert center.scaled == Size(533, 400)
    assert center.crop is not None and center.crop.offset == Offset(66, 0)
    assert east.crop is not None and east.crop.offset == Offset(133, 0)
    assert west.crop is not None and west.crop.offset == Offset(0, 0)


def test_fill_crop_in_bounds_for_every_gravity():
    sources = [PORTRAIT, LANDSCAPE, Size(1, 1000), Size(999, 3)]
    boxes = [Size(400, 400), Size(100, 700), Size(5, 2)]
    for source in sources:
        for box in boxes:
            for gravity in Gravity:
                geometry = resolve(source, Fill(box.width, box.height, gravity))
                assert geometry.size == box
                assert geometry.crop is not None
                left, upper, right, lower = geometry.crop.box
                assert left >= 0 and upper >= 0
                assert right <= geometry.scaled.width
                assert lower <= geometry.scaled.height


# ============================================================================
# PAD
# ============================================================================


def test_pad_center():
    geometry = resolve(PORTRAIT, Pad(400, 400, "red"))

    assert geometry.size == Size(400, 400)
    assert geometry.scaled == Size(300, 400)
    assert geometry.offset == Offset(50, 0)
    assert geometry.background == "red"
    assert geometry.crop is None


def test_pad_west_and_east():
    west = resolve(PORTRAIT, Pad(400, 400, "red", Gravity.WEST))
    east = resolve(PORTRAIT, Pad(400, 400, "red", "east"))

    assert west.offset == Offset(0, 0)
    assert east.offset == Offset(100, 0)


def test_pad_transparent_kept_with_alpha():
    geometry = resolve(PORTRAIT, Pad(400, 400), alpha=True)
    assert geometry.background == "transparent"


def test_pad_transparent_falls_back_without_alpha():
    assert resolve(PORTRAIT, Pad(400, 400), alpha=False).background == "white"

    geometry = resolve(PORTRAIT, Pad(400, 400), alpha=False, opaque_background="black")
    assert geometry.background == "black"


def test_pad_explicit_colour_ignores_alpha():
    assert resolve(PORTRAIT, Pad(400, 400, "#336699"), alpha=False).background == "#336699"


def test_pad_scaled_image_stays_on_canvas():
    sources = [PORTRAIT, LANDSCAPE, Size(1, 1000), Size(999, 3)]
    boxes = [Size(400, 400), Size(100, 700), Size(5, 2)]
    for source in sources:
        for box in boxes:
            for gravity in Gravity:
                geometry = resolve(source, Pad(box.width, box.height, "white", gravity))
                assert geometry.size == box
                assert geometry.offset is not None
                assert geometry.offset.x + geometry.scaled.width <= box.width
                assert geometry.offset.y + geometry.scaled.height <= box.height


# ============================================================================
# RESAMPLE
# ============================================================================


def test_resample_sets_density_only():
    geometry = resolve(PORTRAIT, Resample(72, "300"))

    assert geometry.size == PORTRAIT
    assert geometry.scaled == PORTRAIT
    assert geometry.density == (72, 300)


def test_resample_requires_both_values():
    with pytest.raises(MissingDimension):
        _ = resolve(PORTRAIT, Resample(72, None))


# ============================================================================
# ERRORS
# ============================================================================


@pytest.mark.parametrize(
    "token", [0, -5, "-5", "abc", "1.5", 1.5, True, "\u00b2", "+-5", "1" * 5000]
)
def test_invalid_dimension(token):
    with pytest.raises(InvalidDimension):
        _ = resolve(PORTRAIT, Fit(token, 400))


@pytest.mark.parametrize("mode", [Fit(None, 400), Fill(400, None), Pad("", 400)])
def test_missing_dimension(mode):
    with pytest.raises(MissingDimension):
        _ = resolve(PORTRAIT, mode)


def test_limit_invalid_tokens():
    with pytest.raises(InvalidDimension):
        _ = resolve(PORTRAIT, Limit("abc!", 400))
    with pytest.raises(InvalidDimension):
        _ = resolve(PORTRAIT, Limit("0", 400))


def test_unknown_gravity():
    with pytest.raises(UnknownGravity):
        _ = resolve(PORTRAIT, Fill(400, 400, "Middle"))
    with pytest.raises(UnknownGravity):
        _ = resolve(PORTRAIT, Pad(400, 400, "white", "up"))


def test_geometry_errors_are_value_errors():
    with pytest.raises(ValueError):
        _ = resolve(PORTRAIT, Fit(None, None))
    assert issubclass(GeometryError, ValueError)


def test_resolve_accepts_tuple_source():
    assert resolve((600, 800), Fit(400, 400)).size == Size(300, 400)


def test_resolve_rejects_unknown_mode():
    with pytest.raises(TypeError):
        _ = resolve(PORTRAIT, "fit")  # type: ignore[arg-type]


def test_resolve_is_deterministic():
    mode = Fill(400, 300, Gravity.SOUTH_EAST)
    assert resolve(PORTRAIT, mode) == resolve(PORTRAIT, mode)
