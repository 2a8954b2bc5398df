"""Public algorithm API for cl_image_tools.

This module exports the geometry resolver and the Pillow operations for
direct use without processors or the FastAPI routes.

Example:
    Resolve geometry only::

        from cl_image_tools.algorithms import Fill, Gravity, Size, resolve

        geometry = resolve(Size(600, 800), Fill(400, 400, Gravity.NORTH))
        print(geometry.size, geometry.crop)

    Apply it with Pillow::

        from PIL import Image
        from cl_image_tools.algorithms import apply_geometry, image_encode

        with Image.open("portrait.jpg") as img:
            out = apply_geometry(img, geometry)
            image_encode(out, output_path="square.png", format="png")
"""

# Geometry
from .geometry import (
    UNCONSTRAINED,
    Bound,
    Exact,
    Fill,
    Fit,
    GeometryError,
    Gravity,
    InvalidDimension,
    Limit,
    MissingDimension,
    Pad,
    Resample,
    ResolvedGeometry,
    Size,
    UnknownGravity,
    parse_axis,
    parse_dimension,
    resolve,
)

# Pixel operations
from .plugins.image_processing.algo.image_encode import (
    get_pil_format,
    image_encode,
    supports_alpha,
)
from .plugins.image_processing.algo.image_geometry import (
    apply_geometry,
)

__all__ = [
    # Geometry
    "resolve",
    "parse_axis",
    "parse_dimension",
    "Size",
    "Gravity",
    "Limit",
    "Fit",
    "Fill",
    "Pad",
    "Resample",
    "ResolvedGeometry",
    "Bound",
    "Exact",
    "UNCONSTRAINED",
    # Errors
    "GeometryError",
    "InvalidDimension",
    "MissingDimension",
    "UnknownGravity",
    # Pixel operations
    "apply_geometry",
    "image_encode",
    "get_pil_format",
    "supports_alpha",
]
