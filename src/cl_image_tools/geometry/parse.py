"""Parsing of raw geometry tokens (route segments, form fields)."""

from .errors import InvalidDimension
from .types import (
    UNCONSTRAINED,
    Axis,
    Bound,
    DimensionToken,
    Exact,
    Unconstrained,
    check_dimension,
)

EXACT_SUFFIX = "!"


def parse_dimension(token: DimensionToken, axis: str | None = None) -> int | None:
    """Parse an optional positive dimension.

    None and blank strings mean "absent". Anything that is not a positive
    whole number raises InvalidDimension.
    """
    if token is None:
        return None
    if isinstance(token, str):
        text = token.strip()
        if not text:
            return None
        digits = text.lstrip("+-")
        if not (digits.isascii() and digits.isdigit()):
            raise InvalidDimension(token, axis)
        try:
            value = int(text)
        except ValueError as exc:
            raise InvalidDimension(token, axis) from exc
        return check_dimension(value, axis)
    return check_dimension(token, axis)


def parse_axis(token: Axis | DimensionToken, axis: str | None = None) -> Axis:
    """Parse a Limit axis: absent/"!" → unconstrained, "n!" → exact, "n" → bound."""
    if isinstance(token, (Unconstrained, Bound, Exact)):
        return token
    if isinstance(token, str):
        text = token.strip()
        if text in ("", EXACT_SUFFIX):
            return UNCONSTRAINED
        if text.endswith(EXACT_SUFFIX):
            value = parse_dimension(text[: -len(EXACT_SUFFIX)], axis)
            if value is None:
                raise InvalidDimension(token, axis)
            return Exact(value)
    value = parse_dimension(token, axis)
    return UNCONSTRAINED if value is None else Bound(value)
