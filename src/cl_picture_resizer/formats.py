from enum import StrEnum


class ImageFormat(StrEnum):
    """Output formats understood by the default codec."""

    PNG = "PNG"
    JPEG = "JPEG"
    BMP = "BMP"
    GIF = "GIF"
    WEBP = "WEBP"
    TIFF = "TIFF"


_FORMAT_MAP = {
    "jpg": ImageFormat.JPEG,
    "jpeg": ImageFormat.JPEG,
    "png": ImageFormat.PNG,
    "webp": ImageFormat.WEBP,
    "gif": ImageFormat.GIF,
    "bmp": ImageFormat.BMP,
    "tif": ImageFormat.TIFF,
    "tiff": ImageFormat.TIFF,
}


def get_pil_format(format_str: str) -> str:
    """Convert format string to PIL format name.

    Unknown tags are upper-cased and passed through, the codec decides
    whether it can encode them.
    """
    return str(_FORMAT_MAP.get(format_str.strip().lower(), format_str.strip().upper()))
