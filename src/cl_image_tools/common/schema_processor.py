"""Base parameter and output schemas for image processors."""

from collections.abc import Sequence
from typing import ClassVar, Literal, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

ImageFormat = Literal["png", "jpg", "jpeg", "webp", "gif", "bmp", "tiff"]

ArgToken = int | str | None


class ProcessorArgumentError(ValueError):
    """Raised when a processor receives more positional arguments than it takes."""

    def __init__(self, processor: str, expected: int, received: int):
        self.processor: str = processor
        self.expected: int = expected
        self.received: int = received
        super().__init__(
            f"'{processor}' takes at most {expected} argument(s), got {received}"
        )


class BaseProcessorParams(BaseModel):
    """Encode options every processor accepts, plus positional-argument mapping.

    Subclasses list their verb arguments, in order, in `positional`.
    """

    positional: ClassVar[tuple[str, ...]] = ()

    format: ImageFormat | None = Field(
        default=None,
        description="Target format; defaults to the output file suffix or the source format",
    )
    quality: int | None = Field(
        default=None,
        ge=0,
        le=100,
        description="Encoder quality (0-100)",
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    @field_validator("format", mode="before")
    @classmethod
    def normalize_format(cls, v: object) -> object:
        if isinstance(v, str):
            v = v.strip().lower()
            return v or None
        return v

    @classmethod
    def from_args(
        cls,
        args: Sequence[ArgToken],
        *,
        processor: str | None = None,
        **options: object,
    ) -> Self:
        """Build params from positional verb arguments plus keyword options.

        Positional arguments that are None are left at their defaults.
        """
        if len(args) > len(cls.positional):
            raise ProcessorArgumentError(processor or cls.__name__, len(cls.positional), len(args))

        values: dict[str, object] = {k: v for k, v in options.items() if v is not None}
        for name, value in zip(cls.positional, args):
            if value is not None:
                values[name] = value
        return cls.model_validate(values)


class ProcessorOutput(BaseModel):
    """Metadata describing a processed image."""

    output_path: str = Field(description="Path of the written file")
    format: str = Field(description="Pillow format name of the written file")
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    density: tuple[int, int] | None = Field(
        default=None,
        description="Stored resolution in DPI, when set",
    )
