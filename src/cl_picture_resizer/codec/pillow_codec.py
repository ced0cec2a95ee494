"""Pillow-backed implementation of the ImageCodec protocol."""

from io import BytesIO

from loguru import logger
from PIL import Image

from ..formats import get_pil_format
from ..schema import PillowCodecConfig

_RESAMPLE_FILTERS: dict[str, Image.Resampling] = {
    "nearest": Image.Resampling.NEAREST,
    "box": Image.Resampling.BOX,
    "bilinear": Image.Resampling.BILINEAR,
    "hamming": Image.Resampling.HAMMING,
    "bicubic": Image.Resampling.BICUBIC,
    "lanczos": Image.Resampling.LANCZOS,
}

# Modes the JPEG encoder cannot write directly
_JPEG_CONVERT_MODES = ("RGBA", "LA", "P", "PA")


class PillowCodec:
    """Decode, resample and encode images in memory with Pillow.

    Errors raised by Pillow (UnidentifiedImageError, OSError, KeyError for
    unknown encoders) are propagated unchanged.
    """

    def __init__(self, config: PillowCodecConfig | None = None):
        self.config: PillowCodecConfig = config or PillowCodecConfig()

    @property
    def resample(self) -> Image.Resampling:
        return _RESAMPLE_FILTERS[self.config.resample]

    def decode(self, data: bytes) -> Image.Image:
        image = Image.open(BytesIO(data))
        try:
            # Image.open is lazy, force decoding so corrupt data fails here
            image.load()
        except Exception:
            image.close()
            raise

        logger.debug(f"Decoded {image.format} image {image.width}x{image.height} ({image.mode})")
        return image

    def scale(self, image: Image.Image, width: int, height: int) -> Image.Image:
        return image.resize((width, height), self.resample)

    def encode(self, image: Image.Image, output_format: str) -> bytes:
        fmt = get_pil_format(output_format)
        save_kwargs: dict[str, object] = {}

        if fmt == "PNG" and self.config.optimize_png:
            save_kwargs["optimize"] = True

        converted: Image.Image | None = None
        if fmt == "JPEG" and image.mode in _JPEG_CONVERT_MODES:
            converted = image.convert("RGB")
        target = converted if converted is not None else image

        buffer = BytesIO()
        try:
            target.save(buffer, format=fmt, **save_kwargs)
        finally:
            if converted is not None:
                converted.close()

        data = buffer.getvalue()
        logger.debug(f"Encoded {image.width}x{image.height} image as {fmt} ({len(data)} bytes)")
        return data
