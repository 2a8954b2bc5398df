"""Common module - protocols, schemas, and base classes."""

from .file_storage import FileStorage, FileStorageError, SavedFile, ScopeCreationError
from .file_storage_impl import LocalFileStorage
from .processor import ImageProcessor, PostProcess, UnsupportedImageError
from .schema_processor import BaseProcessorParams, ProcessorArgumentError, ProcessorOutput
from .settings import ProcessingSettings

__all__ = [
    "BaseProcessorParams",
    "FileStorage",
    "FileStorageError",
    "ImageProcessor",
    "LocalFileStorage",
    "PostProcess",
    "ProcessingSettings",
    "ProcessorArgumentError",
    "ProcessorOutput",
    "SavedFile",
    "ScopeCreationError",
    "UnsupportedImageError",
]
