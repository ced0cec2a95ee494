"""Codec capability used by the resizer."""

from .base import ImageCodec, ImageLike
from .pillow_codec import PillowCodec

__all__ = ["ImageCodec", "ImageLike", "PillowCodec"]
