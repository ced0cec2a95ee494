"""cl_picture_resizer - Aspect-ratio preserving resize of in-memory images."""

from .algo.aspect_ratio import height_for_width, width_for_height
from .codec import ImageCodec, ImageLike, PillowCodec
from .errors import (
    DegenerateImageError,
    DimensionNotSetError,
    DimensionOutOfRangeError,
    InvalidArgumentError,
    ResizerError,
)
from .formats import ImageFormat, get_pil_format
from .resizer import PictureResizer
from .schema import PillowCodecConfig

__version__ = "0.1.0"

__all__ = [
    "PictureResizer",
    "ImageCodec",
    "ImageLike",
    "PillowCodec",
    "PillowCodecConfig",
    "ImageFormat",
    "get_pil_format",
    "height_for_width",
    "width_for_height",
    "ResizerError",
    "InvalidArgumentError",
    "DimensionOutOfRangeError",
    "DimensionNotSetError",
    "DegenerateImageError",
    "__version__",
]
