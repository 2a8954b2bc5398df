"""Pillow-backed pixel operations for the image processors."""

from .image_encode import (
    get_pil_format,
    image_encode,
    resolve_format,
    stores_density,
    supports_alpha,
)
from .image_geometry import apply_geometry

__all__ = [
    "apply_geometry",
    "image_encode",
    "get_pil_format",
    "resolve_format",
    "stores_density",
    "supports_alpha",
]
