"""Image processing plugin: convert, limit, fit, fill, pad, quality, resample."""

from .routes import create_router
from .schema import (
    ConvertParams,
    FillParams,
    FitParams,
    LimitParams,
    PadParams,
    QualityParams,
    ResampleParams,
)
from .task import (
    BUILTIN_PROCESSORS,
    ConvertProcessor,
    FillProcessor,
    FitProcessor,
    LimitProcessor,
    PadProcessor,
    PillowProcessor,
    QualityProcessor,
    ResampleProcessor,
)

__all__ = [
    "create_router",
    "BUILTIN_PROCESSORS",
    "PillowProcessor",
    "ConvertProcessor",
    "LimitProcessor",
    "FitProcessor",
    "FillProcessor",
    "PadProcessor",
    "QualityProcessor",
    "ResampleProcessor",
    "ConvertParams",
    "LimitParams",
    "FitParams",
    "FillParams",
    "PadParams",
    "QualityParams",
    "ResampleParams",
]
