"""Value types for the geometry resolver.

Everything here is immutable. Modes form a closed union (`ResizeMode`) that
the resolver matches exhaustively.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, TypeAlias, final

from .errors import InvalidDimension, UnknownGravity


def check_dimension(value: object, axis: str | None = None) -> int:
    """Return `value` if it is a positive int, else raise InvalidDimension."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidDimension(value, axis)
    return value


# ─────────────────────────────────────────────────────────────
# Sizes and rectangles
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Size:
    width: int
    height: int

    def __post_init__(self) -> None:
        _ = check_dimension(self.width, "width")
        _ = check_dimension(self.height, "height")

    def __iter__(self) -> Iterator[int]:
        yield self.width
        yield self.height

    def as_tuple(self) -> tuple[int, int]:
        return (self.width, self.height)

    def fits_within(self, other: "Size") -> bool:
        return self.width <= other.width and self.height <= other.height

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class Offset:
    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Offset must be non-negative, got ({self.x}, {self.y})")

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Rect:
    """Rectangle positioned inside a larger image."""

    offset: Offset
    size: Size

    @property
    def box(self) -> tuple[int, int, int, int]:
        """(left, upper, right, lower), the form Pillow's crop() expects."""
        return (
            self.offset.x,
            self.offset.y,
            self.offset.x + self.size.width,
            self.offset.y + self.size.height,
        )


# ─────────────────────────────────────────────────────────────
# Gravity
# ─────────────────────────────────────────────────────────────


class Gravity(StrEnum):
    CENTER = "Center"
    NORTH = "North"
    SOUTH = "South"
    EAST = "East"
    WEST = "West"
    NORTH_EAST = "NorthEast"
    NORTH_WEST = "NorthWest"
    SOUTH_EAST = "SouthEast"
    SOUTH_WEST = "SouthWest"

    @classmethod
    def parse(cls, token: "str | Gravity | None") -> "Gravity":
        """Parse an anchor token such as "center", "NorthWest" or "south_east".

        None means the default anchor (Center).
        """
        if token is None:
            return cls.CENTER
        if isinstance(token, Gravity):
            return token
        if not isinstance(token, str):
            raise UnknownGravity(token)
        key = token.strip().replace("_", "").replace("-", "").lower()
        for gravity in cls:
            if gravity.value.lower() == key:
                return gravity
        raise UnknownGravity(token)

    def place(self, spare_width: int, spare_height: int) -> Offset:
        """Offset for an area with the given spare room along each axis.

        For cropping the spare room is the excess of the image over the box;
        for padding it is the deficit of the image under the canvas.
        """
        value = self.value
        if value.endswith("West"):
            x = 0
        elif value.endswith("East"):
            x = spare_width
        else:
            x = spare_width // 2

        if value.startswith("North"):
            y = 0
        elif value.startswith("South"):
            y = spare_height
        else:
            y = spare_height // 2

        return Offset(x, y)


# ─────────────────────────────────────────────────────────────
# Per-axis constraints (Limit)
# ─────────────────────────────────────────────────────────────


@final
class Unconstrained:
    """Axis left free. Use the UNCONSTRAINED singleton."""

    _instance: ClassVar["Unconstrained | None"] = None

    def __new__(cls) -> "Unconstrained":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNCONSTRAINED"


UNCONSTRAINED = Unconstrained()


@dataclass(frozen=True)
class Bound:
    """Upper bound; the axis may shrink to it but never grows."""

    value: int

    def __post_init__(self) -> None:
        _ = check_dimension(self.value)


@dataclass(frozen=True)
class Exact:
    """Hard-exact value; written with a trailing "!" in route segments."""

    value: int

    def __post_init__(self) -> None:
        _ = check_dimension(self.value)


Axis: TypeAlias = Unconstrained | Bound | Exact

# Raw value as it arrives from a caller: an int, a route segment or nothing.
DimensionToken: TypeAlias = int | str | None


# ─────────────────────────────────────────────────────────────
# Resize modes
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Limit:
    width: Axis | DimensionToken = UNCONSTRAINED
    height: Axis | DimensionToken = UNCONSTRAINED


@dataclass(frozen=True)
class Fit:
    width: DimensionToken
    height: DimensionToken


@dataclass(frozen=True)
class Fill:
    width: DimensionToken
    height: DimensionToken
    gravity: Gravity | str = Gravity.CENTER


@dataclass(frozen=True)
class Pad:
    width: DimensionToken
    height: DimensionToken
    background: str = "transparent"
    gravity: Gravity | str = Gravity.CENTER


@dataclass(frozen=True)
class Resample:
    dpi_width: DimensionToken
    dpi_height: DimensionToken


ResizeMode: TypeAlias = Limit | Fit | Fill | Pad | Resample


# ─────────────────────────────────────────────────────────────
# Result
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ResolvedGeometry:
    """Geometry the pixel backend has to realise.

    The source is resampled to `scaled`, then cropped to `crop` (Fill) or
    placed on a `size` canvas at `offset` filled with `background` (Pad).
    """

    size: Size
    scaled: Size
    crop: Rect | None = None
    offset: Offset | None = None
    background: str | None = None
    density: tuple[int, int] | None = None

