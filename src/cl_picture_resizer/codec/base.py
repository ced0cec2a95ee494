"""
ImageCodec Protocol - the decode / scale / encode capability the resizer
delegates to.

Any object providing these three operations can be injected into
PictureResizer; the default is PillowCodec.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ImageLike(Protocol):
    """A decoded raster image owned by a codec."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def close(self) -> None:
        """Release the pixel buffer."""
        ...


@runtime_checkable
class ImageCodec(Protocol):
    def decode(self, data: bytes) -> ImageLike:
        """Decode encoded bytes, auto-detecting the source format."""
        ...

    def scale(self, image: ImageLike, width: int, height: int) -> ImageLike:
        """Resample image to exactly width x height, returning a new image."""
        ...

    def encode(self, image: ImageLike, output_format: str) -> bytes:
        """Encode image with the encoder named by output_format."""
        ...
