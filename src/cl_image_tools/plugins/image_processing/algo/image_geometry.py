"""Apply a resolved geometry to a Pillow image."""

from PIL import Image, ImageColor

from ....geometry import TRANSPARENT, ResolvedGeometry

RESAMPLE_FILTERS: dict[str, Image.Resampling] = {
    "nearest": Image.Resampling.NEAREST,
    "bilinear": Image.Resampling.BILINEAR,
    "bicubic": Image.Resampling.BICUBIC,
    "lanczos": Image.Resampling.LANCZOS,
}


def has_alpha(img: Image.Image) -> bool:
    return img.mode in ("RGBA", "LA", "PA") or "transparency" in img.info


def background_color(background: str, mode: str) -> int | tuple[int, ...]:
    """Colour value for a named/hex background in the given canvas mode.

    Raises:
        ValueError: If Pillow does not recognise the colour
    """
    if background.lower() == TRANSPARENT:
        return (0, 0, 0, 0)
    try:
        return ImageColor.getcolor(background, mode)
    except ValueError as exc:
        raise ValueError(f"Unknown background colour: {background!r}") from exc


def _pad(img: Image.Image, geometry: ResolvedGeometry) -> Image.Image:
    background = geometry.background or TRANSPARENT
    transparent = background.lower() == TRANSPARENT
    mode = "RGBA" if transparent or has_alpha(img) else "RGB"

    if img.mode != mode:
        img = img.convert(mode)

    canvas = Image.new(mode, geometry.size.as_tuple(), background_color(background, mode))
    offset = geometry.offset.as_tuple() if geometry.offset is not None else (0, 0)
    # Paste with the image as its own mask so transparent source pixels
    # show the background rather than replacing it.
    canvas.paste(img, offset, img if mode == "RGBA" else None)
    return canvas


def apply_geometry(
    img: Image.Image,
    geometry: ResolvedGeometry | None,
    *,
    resample: str = "lanczos",
) -> Image.Image:
    """
    Resample, crop and pad `img` as described by `geometry`.

    Framework-agnostic, single-image operation. Returns `img` untouched when
    there is nothing to do (no geometry, or a pure density change).

    Args:
        img: Decoded source image
        geometry: Output of the geometry resolver, or None
        resample: Name of the Pillow resampling filter

    Returns:
        The transformed image (a new object unless nothing changed)
    """
    if geometry is None:
        return img

    if img.size != geometry.scaled.as_tuple():
        img = img.resize(geometry.scaled.as_tuple(), RESAMPLE_FILTERS[resample])

    if geometry.crop is not None:
        img = img.crop(geometry.crop.box)

    if geometry.offset is not None:
        img = _pad(img, geometry)

    return img
