"""Image processor implementations for the convert / limit / fit / fill / pad /
quality / resample verbs."""

from abc import abstractmethod
from pathlib import Path
from typing import TypeVar, override

from loguru import logger
from PIL import Image, ImageOps, UnidentifiedImageError

from ...common.processor import ImageProcessor, PostProcess, UnsupportedImageError
from ...common.schema_processor import BaseProcessorParams, ProcessorOutput
from ...geometry import Fill, Fit, Limit, Pad, Resample, ResizeMode, Size, resolve
from .algo.image_encode import image_encode, resolve_format, stores_density, supports_alpha
from .algo.image_geometry import apply_geometry
from .schema import (
    ConvertParams,
    FillParams,
    FitParams,
    LimitParams,
    PadParams,
    QualityParams,
    ResampleParams,
)

P = TypeVar("P", bound=BaseProcessorParams)


class PillowProcessor(ImageProcessor[P]):
    """Shared run(): decode → resolve geometry → apply → post-process → encode.

    Subclasses only describe their verb as a ResizeMode (or None when the
    verb does not change geometry).
    """

    @abstractmethod
    def mode(self, params: P) -> ResizeMode | None: ...

    @override
    def run(
        self,
        input_path: str | Path,
        output_path: str | Path,
        params: P,
        post_process: PostProcess | None = None,
    ) -> ProcessorOutput:
        input_path = Path(input_path)
        output_path = Path(output_path)

        if not input_path.exists():
            raise FileNotFoundError(f"Input file not found: {input_path}")

        try:
            img = Image.open(input_path)
        except UnidentifiedImageError as exc:
            raise UnsupportedImageError(input_path) from exc

        with img:
            target_format = resolve_format(params.format, output_path, img.format)
            # Geometry applies to the image as displayed, not as stored.
            oriented = ImageOps.exif_transpose(img)
            mode = self.mode(params)

            geometry = None
            if mode is not None:
                geometry = resolve(
                    Size(*oriented.size),
                    mode,
                    alpha=supports_alpha(target_format),
                    opaque_background=self.settings.opaque_background,
                )
                logger.debug(f"'{self.name}' {oriented.width}x{oriented.height} -> {geometry}")

            result = apply_geometry(oriented, geometry, resample=self.settings.resample_filter)

            if post_process is not None:
                result = post_process(result, geometry)

            quality = params.quality if params.quality is not None else self.settings.default_quality
            density = geometry.density if geometry is not None else None
            if density is not None and not stores_density(target_format):
                logger.warning(f"{target_format} cannot store a resolution; dropping {density} DPI")
                density = None

            _ = image_encode(
                result,
                output_path=output_path,
                format=target_format,
                quality=quality,
                dpi=density,
                optimize=self.settings.png_optimize,
            )

            return ProcessorOutput(
                output_path=str(output_path),
                format=target_format,
                width=result.width,
                height=result.height,
                density=density,
            )


class ConvertProcessor(PillowProcessor[ConvertParams]):
    """Changes the image encoding format to the given format."""

    schema: type[ConvertParams] = ConvertParams

    @property
    @override
    def name(self) -> str:
        return "convert"

    @override
    def mode(self, params: ConvertParams) -> ResizeMode | None:
        return None


class LimitProcessor(PillowProcessor[LimitParams]):
    """Resizes to fit within the given dimensions, only ever shrinking.

    The result may be narrower or shorter than requested but never larger.
    """

    schema: type[LimitParams] = LimitParams

    @property
    @override
    def name(self) -> str:
        return "limit"

    @override
    def mode(self, params: LimitParams) -> ResizeMode:
        return Limit(params.width, params.height)


class FitProcessor(PillowProcessor[FitParams]):
    """Resizes to the largest size that fits within the given dimensions.

    Enlarges as well as shrinks; aspect ratio is retained.
    """

    schema: type[FitParams] = FitParams

    @property
    @override
    def name(self) -> str:
        return "fit"

    @override
    def mode(self, params: FitParams) -> ResizeMode:
        return Fit(params.width, params.height)


class FillProcessor(PillowProcessor[FillParams]):
    """Resizes to cover the given dimensions and crops what sticks out.

    The result is always exactly as large as requested. The centre is kept
    unless another gravity is given.
    """

    schema: type[FillParams] = FillParams

    @property
    @override
    def name(self) -> str:
        return "fill"

    @override
    def mode(self, params: FillParams) -> ResizeMode:
        return Fill(params.width, params.height, params.gravity)


class PadProcessor(PillowProcessor[PadParams]):
    """Resizes to fit within the given dimensions and pads the rest.

    The padding is transparent where the output format supports it and the
    configured opaque colour (white by default) otherwise.
    """

    schema: type[PadParams] = PadParams

    @property
    @override
    def name(self) -> str:
        return "pad"

    @override
    def mode(self, params: PadParams) -> ResizeMode:
        return Pad(params.width, params.height, params.background, params.gravity)


class QualityProcessor(PillowProcessor[QualityParams]):
    """Re-encodes a JPEG/WEBP/PNG image at the given quality level."""

    schema: type[QualityParams] = QualityParams

    @property
    @override
    def name(self) -> str:
        return "quality"

    @override
    def mode(self, params: QualityParams) -> ResizeMode | None:
        return None


class ResampleProcessor(PillowProcessor[ResampleParams]):
    """Sets the stored resolution (DPI) while keeping the pixel size."""

    schema: type[ResampleParams] = ResampleParams

    @property
    @override
    def name(self) -> str:
        return "resample"

    @override
    def mode(self, params: ResampleParams) -> ResizeMode:
        return Resample(params.width, params.height)


BUILTIN_PROCESSORS: tuple[type[PillowProcessor[BaseProcessorParams]], ...] = (
    ConvertProcessor,
    LimitProcessor,
    FitProcessor,
    FillProcessor,
    PadProcessor,
    QualityProcessor,
    ResampleProcessor,
)
