"""Image encoding: target format, quality level and stored density."""

from pathlib import Path

from PIL import Image

FORMAT_MAP: dict[str, str] = {
    "jpg": "JPEG",
    "jpeg": "JPEG",
    "png": "PNG",
    "webp": "WEBP",
    "gif": "GIF",
    "bmp": "BMP",
    "tiff": "TIFF",
    "tif": "TIFF",
}

# Formats where a padded "transparent" background survives encoding.
ALPHA_FORMATS = frozenset({"PNG", "WEBP", "TIFF"})

DPI_FORMATS = frozenset({"PNG", "JPEG", "TIFF", "BMP"})


def get_pil_format(format_str: str) -> str:
    """Convert format string to PIL format name."""
    return FORMAT_MAP.get(format_str.lower(), format_str.upper())


def supports_alpha(format_str: str) -> bool:
    return get_pil_format(format_str) in ALPHA_FORMATS


def stores_density(format_str: str) -> bool:
    return get_pil_format(format_str) in DPI_FORMATS


def resolve_format(
    requested: str | None,
    output_path: str | Path,
    source_format: str | None,
) -> str:
    """Pick the output format: explicit request, then file suffix, then source."""
    if requested:
        return get_pil_format(requested)

    suffix = Path(output_path).suffix.lstrip(".").lower()
    if suffix in FORMAT_MAP:
        return FORMAT_MAP[suffix]

    if source_format:
        return source_format.upper()

    return "PNG"


def image_encode(
    img: Image.Image,
    *,
    output_path: str | Path,
    format: str,
    quality: int | None = None,
    dpi: tuple[int, int] | None = None,
    optimize: bool = True,
) -> str:
    """
    Encode an image to `output_path`.

    Args:
        img: Image to write
        output_path: Path to output image
        format: Target format (jpg, png, webp, ... or a PIL format name)
        quality: Optional quality level 0-100. JPEG/WEBP use it directly;
            PNG maps the tens digit onto the zlib compression level.
        dpi: Optional resolution to store in the file's metadata
        optimize: Pass optimize=True to the PNG encoder

    Returns:
        Output file path as string

    Raises:
        FileNotFoundError: If the output directory does not exist
        OSError: If Pillow fails to write the image
    """
    output_path = Path(output_path)
    pil_format = get_pil_format(format)

    if not output_path.parent.exists():
        raise FileNotFoundError(f"Output directory does not exist: {output_path.parent}")

    # JPEG and BMP do not support an alpha channel
    if pil_format in ("JPEG", "BMP") and img.mode not in ("RGB", "L"):
        img = img.convert("RGB")

    save_kwargs: dict[str, object] = {}

    if quality is not None:
        if pil_format in ("JPEG", "WEBP"):
            save_kwargs["quality"] = quality
        elif pil_format == "PNG":
            save_kwargs["compress_level"] = min(9, quality // 10)

    if pil_format == "PNG" and optimize and "compress_level" not in save_kwargs:
        save_kwargs["optimize"] = True

    if dpi is not None and pil_format in DPI_FORMATS:
        save_kwargs["dpi"] = dpi

    img.save(output_path, format=pil_format, **save_kwargs)

    return str(output_path)
