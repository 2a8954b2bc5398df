"""cl_image_tools - Image processors (convert, limit, fit, fill, pad, quality, resample)."""

from .common.file_storage import FileStorage, SavedFile
from .common.file_storage_impl import LocalFileStorage
from .common.processor import ImageProcessor, UnsupportedImageError
from .common.schema_processor import BaseProcessorParams, ProcessorOutput
from .common.settings import ProcessingSettings
from .master import create_master_router
from .registry import build_registry, get_available_processors, get_processor_registry

__version__ = "0.1.0"

__all__ = [
    "BaseProcessorParams",
    "FileStorage",
    "ImageProcessor",
    "LocalFileStorage",
    "ProcessingSettings",
    "ProcessorOutput",
    "SavedFile",
    "UnsupportedImageError",
    "__version__",
    "build_registry",
    "create_master_router",
    "get_available_processors",
    "get_processor_registry",
]
