"""ImageProcessor - Abstract base class for image processors."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Generic, TypeVar

from loguru import logger
from PIL import Image

from ..geometry import ResolvedGeometry
from .schema_processor import ArgToken, BaseProcessorParams, ProcessorOutput
from .settings import ProcessingSettings

P = TypeVar("P", bound=BaseProcessorParams)

# Receives the in-progress image and its resolved geometry (None for verbs
# that do not touch geometry); returns the image to encode.
PostProcess = Callable[[Image.Image, ResolvedGeometry | None], Image.Image]


class UnsupportedImageError(Exception):
    """Input could not be decoded as an image."""

    def __init__(self, path: str | Path, reason: str | None = None):
        self.path: str = str(path)
        message = f"Cannot identify image file: {self.path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class ImageProcessor(ABC, Generic[P]):
    """
    Stateless, template-method based image processor.

    - call() maps positional verb arguments onto the params schema
    - run() reads the input, writes the output, returns metadata only
    """

    schema: type[P]

    def __init__(self, settings: ProcessingSettings | None = None):
        self.settings: ProcessingSettings = settings or ProcessingSettings()

    @property
    @abstractmethod
    def name(self) -> str: ...

    def setup(self) -> None:
        """Optional per-call setup."""
        pass

    def parse_args(self, args: tuple[ArgToken, ...] | list[ArgToken], **options: object) -> P:
        return self.schema.from_args(args, processor=self.name, **options)

    @abstractmethod
    def run(
        self,
        input_path: str | Path,
        output_path: str | Path,
        params: P,
        post_process: PostProcess | None = None,
    ) -> ProcessorOutput:
        """
        Process one image.

        - Must write the result to output_path
        - Must return metadata only
        """
        ...

    def process(
        self,
        input_path: str | Path,
        output_path: str | Path,
        params: P,
        post_process: PostProcess | None = None,
    ) -> ProcessorOutput:
        """Run with already-validated params."""
        self.setup()

        logger.info(f"Processing {input_path} with '{self.name}'")
        try:
            output = self.run(input_path, output_path, params, post_process)
        except Exception as exc:
            logger.error(f"'{self.name}' failed on {input_path}: {exc}")
            raise

        logger.info(
            f"'{self.name}' wrote {output.output_path} ({output.width}x{output.height} {output.format})"
        )
        return output

    def call(
        self,
        input_path: str | Path,
        output_path: str | Path,
        *args: ArgToken,
        format: str | None = None,
        quality: int | None = None,
        post_process: PostProcess | None = None,
    ) -> ProcessorOutput:
        """Process `input_path` into `output_path` with this processor's verb.

        Args:
            input_path: Source image file
            output_path: Destination file
            *args: Positional verb arguments (e.g. width, height, gravity)
            format: Optional target format to convert to
            quality: Optional encoder quality level
            post_process: Optional callable applied to the image after
                geometry and before encoding

        Returns:
            ProcessorOutput describing the written file
        """
        params = self.parse_args(args, format=format, quality=quality)
        return self.process(input_path, output_path, params, post_process)
