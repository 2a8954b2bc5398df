"""Geometry resolver: pure size/crop/placement arithmetic for resize modes.

Scale factors are kept as exact fractions; a scaled dimension is rounded
half away from zero with a floor of one pixel.
"""

from fractions import Fraction
from math import floor

from .errors import MissingDimension
from .parse import parse_axis, parse_dimension
from .types import (
    UNCONSTRAINED,
    Axis,
    Bound,
    DimensionToken,
    Fill,
    Fit,
    Gravity,
    Limit,
    Offset,
    Pad,
    Rect,
    Resample,
    ResizeMode,
    ResolvedGeometry,
    Size,
    Unconstrained,
)

TRANSPARENT = "transparent"

_HALF = Fraction(1, 2)


def round_dimension(value: Fraction) -> int:
    return max(1, floor(value + _HALF))


def scale_size(source: Size, factor: Fraction) -> Size:
    return Size(
        round_dimension(source.width * factor),
        round_dimension(source.height * factor),
    )


def fit_scale(source: Size, box: Size) -> Fraction:
    """Largest uniform scale that keeps `source` inside `box`."""
    return min(Fraction(box.width, source.width), Fraction(box.height, source.height))


def fill_scale(source: Size, box: Size) -> Fraction:
    """Smallest uniform scale that makes `source` cover `box`."""
    return max(Fraction(box.width, source.width), Fraction(box.height, source.height))


def _require_box(mode_name: str, width: DimensionToken, height: DimensionToken) -> Size:
    box_width = parse_dimension(width, "width")
    box_height = parse_dimension(height, "height")
    if box_width is None:
        raise MissingDimension(mode_name, "width")
    if box_height is None:
        raise MissingDimension(mode_name, "height")
    return Size(box_width, box_height)


# ─────────────────────────────────────────────────────────────
# Per-mode resolution
# ─────────────────────────────────────────────────────────────


def _limit_axis(constraint: Axis, current: int) -> int:
    if isinstance(constraint, Unconstrained):
        return current
    return min(constraint.value, current)


def _resolve_limit(source: Size, mode: Limit) -> ResolvedGeometry:
    width = parse_axis(mode.width, "width")
    height = parse_axis(mode.height, "height")

    if isinstance(width, Bound) and isinstance(height, Bound):
        factor = fit_scale(source, Size(width.value, height.value))
        size = source if factor >= 1 else scale_size(source, factor)
        return ResolvedGeometry(size=size, scaled=size)

    if width is UNCONSTRAINED and height is UNCONSTRAINED:
        return ResolvedGeometry(size=source, scaled=source)

    # An unconstrained or exact axis switches off aspect preservation: each
    # axis takes its own value, shrink-only.
    size = Size(_limit_axis(width, source.width), _limit_axis(height, source.height))
    return ResolvedGeometry(size=size, scaled=size)


def _resolve_fit(source: Size, mode: Fit) -> ResolvedGeometry:
    box = _require_box("fit", mode.width, mode.height)
    size = scale_size(source, fit_scale(source, box))
    return ResolvedGeometry(size=size, scaled=size)


def _resolve_fill(source: Size, mode: Fill) -> ResolvedGeometry:
    box = _require_box("fill", mode.width, mode.height)
    gravity = Gravity.parse(mode.gravity)

    scaled = scale_size(source, fill_scale(source, box))
    offset = gravity.place(scaled.width - box.width, scaled.height - box.height)
    return ResolvedGeometry(size=box, scaled=scaled, crop=Rect(offset, box))


def _resolve_pad(
    source: Size,
    mode: Pad,
    alpha: bool,
    opaque_background: str,
) -> ResolvedGeometry:
    box = _require_box("pad", mode.width, mode.height)
    gravity = Gravity.parse(mode.gravity)

    scaled = scale_size(source, fit_scale(source, box))
    offset = gravity.place(box.width - scaled.width, box.height - scaled.height)

    background = mode.background or TRANSPARENT
    if not alpha and background.lower() == TRANSPARENT:
        background = opaque_background

    return ResolvedGeometry(size=box, scaled=scaled, offset=offset, background=background)


def _resolve_resample(source: Size, mode: Resample) -> ResolvedGeometry:
    dpi_width = parse_dimension(mode.dpi_width, "dpi_width")
    dpi_height = parse_dimension(mode.dpi_height, "dpi_height")
    if dpi_width is None:
        raise MissingDimension("resample", "dpi_width")
    if dpi_height is None:
        raise MissingDimension("resample", "dpi_height")
    density = (dpi_width, dpi_height)
    return ResolvedGeometry(size=source, scaled=source, density=density)


# ─────────────────────────────────────────────────────────────
# Public entry point
# ─────────────────────────────────────────────────────────────


def resolve(
    source: Size | tuple[int, int],
    mode: ResizeMode,
    *,
    alpha: bool = True,
    opaque_background: str = "white",
) -> ResolvedGeometry:
    """Resolve the output geometry of `mode` applied to an image of `source` size.

    Args:
        source: Pixel size of the source image
        mode: One of Limit, Fit, Fill, Pad, Resample
        alpha: Whether the output format can store transparency
        opaque_background: Pad background used instead of "transparent"
            when `alpha` is False

    Returns:
        ResolvedGeometry describing the output canvas and, for Fill/Pad,
        the crop rectangle or placement offset

    Raises:
        InvalidDimension: A requested dimension is not a positive integer
        MissingDimension: Fit, Fill or Pad is missing width or height
        UnknownGravity: The gravity token is not one of the nine anchors
    """
    if isinstance(source, tuple):
        source = Size(*source)
    if not isinstance(source, Size):
        raise TypeError(f"source must be a Size, got {type(source).__name__}")

    if isinstance(mode, Limit):
        return _resolve_limit(source, mode)
    if isinstance(mode, Fit):
        return _resolve_fit(source, mode)
    if isinstance(mode, Fill):
        return _resolve_fill(source, mode)
    if isinstance(mode, Pad):
        return _resolve_pad(source, mode, alpha, opaque_background)
    if isinstance(mode, Resample):
        return _resolve_resample(source, mode)

    raise TypeError(f"Unsupported resize mode: {type(mode).__name__}")
