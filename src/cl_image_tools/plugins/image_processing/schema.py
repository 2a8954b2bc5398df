"""Parameter schemas for the image processing verbs.

Dimension fields accept raw tokens ("400", "1000!", None) and are validated
by the geometry resolver, so bad values surface as geometry errors.
"""

from typing import ClassVar

from pydantic import Field

from ...common.schema_processor import BaseProcessorParams, ImageFormat

DimensionField = int | str | None


class ConvertParams(BaseProcessorParams):
    """Change the encoding format."""

    positional: ClassVar[tuple[str, ...]] = ("format",)

    format: ImageFormat = Field(description="Format to convert to")


class LimitParams(BaseProcessorParams):
    """Shrink to fit within the bounds; never enlarge.

    A missing axis (or "!") is unconstrained; "n!" requests an exact value.
    """

    positional: ClassVar[tuple[str, ...]] = ("width", "height")

    width: DimensionField = Field(default=None, description="Maximum width")
    height: DimensionField = Field(default=None, description="Maximum height")


class FitParams(BaseProcessorParams):
    """Scale to the largest size that fits within the box."""

    positional: ClassVar[tuple[str, ...]] = ("width", "height")

    width: DimensionField = Field(default=None, description="Width to fit into")
    height: DimensionField = Field(default=None, description="Height to fit into")


class FillParams(BaseProcessorParams):
    """Scale to cover the box, then crop the excess."""

    positional: ClassVar[tuple[str, ...]] = ("width", "height", "gravity")

    width: DimensionField = Field(default=None, description="Width to fill out")
    height: DimensionField = Field(default=None, description="Height to fill out")
    gravity: str = Field(default="Center", description="Which part of the image to keep")


class PadParams(BaseProcessorParams):
    """Scale to fit the box, then pad the remaining area."""

    positional: ClassVar[tuple[str, ...]] = ("width", "height", "background", "gravity")

    width: DimensionField = Field(default=None, description="Width to pad out")
    height: DimensionField = Field(default=None, description="Height to pad out")
    background: str = Field(
        default="transparent",
        description="Background colour; transparent falls back to an opaque colour "
        "for formats without alpha",
    )
    gravity: str = Field(default="Center", description="Where to place the image")


class QualityParams(BaseProcessorParams):
    """Re-encode at the given quality level."""

    positional: ClassVar[tuple[str, ...]] = ("quality",)

    quality: int = Field(ge=0, le=100, description="JPEG/WEBP/PNG quality level")


class ResampleParams(BaseProcessorParams):
    """Change the stored resolution; pixel size is kept."""

    positional: ClassVar[tuple[str, ...]] = ("width", "height")

    width: DimensionField = Field(default=None, description="Horizontal DPI")
    height: DimensionField = Field(default=None, description="Vertical DPI")
