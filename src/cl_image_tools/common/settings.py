"""Processing settings shared by processors and routes."""

from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field

ResampleFilter = Literal["nearest", "bilinear", "bicubic", "lanczos"]


class ProcessingSettings(BaseModel):
    """Tunables injected into processors and the HTTP router."""

    opaque_background: str = Field(
        default="white",
        description="Pad colour used when the output format has no alpha channel",
    )
    resample_filter: ResampleFilter = Field(
        default="lanczos",
        description="Pillow resampling filter used for scaling",
    )
    png_optimize: bool = Field(
        default=True,
        description="Pass optimize=True when encoding PNG",
    )
    default_quality: int | None = Field(
        default=None,
        ge=0,
        le=100,
        description="Encoder quality applied when a request does not set one",
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")
