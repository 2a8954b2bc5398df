"""Processor registry - discovers image processors from entry points."""

from importlib.metadata import entry_points
from typing import cast

from loguru import logger

from .common.processor import ImageProcessor
from .common.schema_processor import BaseProcessorParams
from .common.settings import ProcessingSettings

PROCESSOR_GROUP = "cl_image_tools.processors"

ProcessorRegistry = dict[str, ImageProcessor[BaseProcessorParams]]


def get_processor_registry(settings: ProcessingSettings | None = None) -> ProcessorRegistry:
    """Dynamically load all processors from entry points.

    Discovers processors from [project.entry-points."cl_image_tools.processors"]
    in pyproject.toml.

    Args:
        settings: Settings passed to every processor instance

    Returns:
        Dict mapping processor name -> ImageProcessor instance

    Raises:
        RuntimeError: If a plugin fails to load (missing dependency, etc.)
    """
    registry: ProcessorRegistry = {}

    for ep in entry_points(group=PROCESSOR_GROUP):
        try:
            processor_class = cast(type[ImageProcessor[BaseProcessorParams]], ep.load())
            processor = processor_class(settings=settings)
        except Exception as e:
            # Plugin dependency missing = exception (fail fast)
            raise RuntimeError(f"Failed to load processor '{ep.name}': {e}") from e
        registry[processor.name] = processor

    logger.info(f"Loaded image processors: {', '.join(sorted(registry)) or '(none)'}")
    return registry


def build_registry(
    processors: list[type[ImageProcessor[BaseProcessorParams]]],
    settings: ProcessingSettings | None = None,
) -> ProcessorRegistry:
    """Registry from explicit processor classes (no entry-point lookup)."""
    instances = [processor_class(settings=settings) for processor_class in processors]
    return {processor.name: processor for processor in instances}


def get_available_processors() -> list[str]:
    """Names of processors registered as entry points."""
    return [ep.name for ep in entry_points(group=PROCESSOR_GROUP)]
