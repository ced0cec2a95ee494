"""PictureResizer - aspect-ratio preserving resize of in-memory images."""

import operator
from contextlib import closing

from loguru import logger

from .algo.aspect_ratio import height_for_width, width_for_height
from .codec.base import ImageCodec, ImageLike
from .codec.pillow_codec import PillowCodec
from .errors import DimensionNotSetError, DimensionOutOfRangeError, InvalidArgumentError
from .formats import ImageFormat, get_pil_format


class PictureResizer:
    """
    Builder holding source bytes, output format and target dimension(s).

    - Arguments are validated eagerly (constructor, setters)
    - Setters overwrite and return the same instance for chaining
    - resize_by_width() / resize_by_height() never mutate the request and
      may be called any number of times, in any order

    Instances are not synchronized; share one across threads only with
    external locking.
    """

    def __init__(
        self,
        source: bytes | bytearray | memoryview,
        output_format: ImageFormat | str,
        codec: ImageCodec | None = None,
    ):
        if source is None:
            raise InvalidArgumentError("source", "Source picture bytes are required.")
        if not isinstance(source, (bytes, bytearray, memoryview)):
            raise InvalidArgumentError(
                "source",
                f"Source picture must be bytes-like, not {type(source).__name__}.",
            )
        if len(source) == 0:
            raise InvalidArgumentError("source", "Source picture bytes cannot be empty.")
        if output_format is None:
            raise InvalidArgumentError("output_format", "Output format is required.")
        if not isinstance(output_format, str) or not output_format.strip():
            raise InvalidArgumentError("output_format", "Output format must be a non-empty string.")

        self._source: bytes = bytes(source)
        self._output_format: str = get_pil_format(output_format)
        self._codec: ImageCodec = codec if codec is not None else PillowCodec()
        self._required_width: int | None = None
        self._required_height: int | None = None

    @classmethod
    def create(
        cls,
        source: bytes | bytearray | memoryview,
        output_format: ImageFormat | str,
        codec: ImageCodec | None = None,
    ) -> "PictureResizer":
        return cls(source, output_format, codec)

    @property
    def source(self) -> bytes:
        return self._source

    @property
    def output_format(self) -> str:
        return self._output_format

    @property
    def codec(self) -> ImageCodec:
        return self._codec

    @property
    def required_width(self) -> int | None:
        return self._required_width

    @property
    def required_height(self) -> int | None:
        return self._required_height

    def set_required_width(self, width: int) -> "PictureResizer":
        self._required_width = _validate_dimension("width", width)
        return self

    def set_required_height(self, height: int) -> "PictureResizer":
        self._required_height = _validate_dimension("height", height)
        return self

    def resize_by_width(self) -> bytes:
        """
        Resize to the required width, deriving the height from the source
        aspect ratio.

        Returns:
            Encoded image bytes in the output format

        Raises:
            DimensionNotSetError: If set_required_width() was never called
            DegenerateImageError: If the source width is zero or the derived
                height truncates to zero
        """
        if self._required_width is None:
            raise DimensionNotSetError("width")

        width = self._required_width
        with closing(self._codec.decode(self._source)) as image:
            height = height_for_width(image.width, image.height, width)
            logger.debug(
                f"Resizing by width: {image.width}x{image.height} -> {width}x{height} "
                f"({self._output_format})"
            )
            return self._scale_and_encode(image, width, height)

    def resize_by_height(self) -> bytes:
        """
        Resize to the required height, deriving the width from the source
        aspect ratio.

        Returns:
            Encoded image bytes in the output format

        Raises:
            DimensionNotSetError: If set_required_height() was never called
            DegenerateImageError: If the source height is zero or the derived
                width truncates to zero
        """
        if self._required_height is None:
            raise DimensionNotSetError("height")

        height = self._required_height
        with closing(self._codec.decode(self._source)) as image:
            width = width_for_height(image.width, image.height, height)
            logger.debug(
                f"Resizing by height: {image.width}x{image.height} -> {width}x{height} "
                f"({self._output_format})"
            )
            return self._scale_and_encode(image, width, height)

    def _scale_and_encode(self, image: ImageLike, width: int, height: int) -> bytes:
        with closing(self._codec.scale(image, width, height)) as scaled:
            return self._codec.encode(scaled, self._output_format)

    def __repr__(self) -> str:
        return (
            f"PictureResizer(source=<{len(self._source)} bytes>, "
            f"output_format={self._output_format!r}, "
            f"required_width={self._required_width}, "
            f"required_height={self._required_height})"
        )


def _validate_dimension(argument: str, value: int) -> int:
    # bool is an int subclass but never a pixel count
    if isinstance(value, bool):
        raise InvalidArgumentError(argument, f"Required {argument} must be an integer, not bool.")
    try:
        value = operator.index(value)
    except TypeError as exc:
        raise InvalidArgumentError(
            argument, f"Required {argument} must be an integer, not {type(value).__name__}."
        ) from exc
    if value <= 0:
        raise DimensionOutOfRangeError(argument, value)
    return value
