"""Geometry resolver for the limit / fit / fill / pad / resample verbs."""

from .errors import GeometryError, InvalidDimension, MissingDimension, UnknownGravity
from .parse import parse_axis, parse_dimension
from .resolver import TRANSPARENT, fill_scale, fit_scale, resolve
from .types import (
    UNCONSTRAINED,
    Axis,
    Bound,
    Exact,
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

__all__ = [
    "GeometryError",
    "InvalidDimension",
    "MissingDimension",
    "UnknownGravity",
    "parse_axis",
    "parse_dimension",
    "resolve",
    "fit_scale",
    "fill_scale",
    "TRANSPARENT",
    "UNCONSTRAINED",
    "Axis",
    "Bound",
    "Exact",
    "Unconstrained",
    "Gravity",
    "Size",
    "Offset",
    "Rect",
    "Limit",
    "Fit",
    "Fill",
    "Pad",
    "Resample",
    "ResizeMode",
    "ResolvedGeometry",
]
