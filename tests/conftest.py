"""Test configuration and fixtures for cl_picture_resizer.

This module provides:
- In-memory image fixtures generated with PIL (no files on disk)
- A recording fake codec for exercising the resizer without Pillow
"""

from io import BytesIO
from typing import Callable

import pytest
from PIL import Image, ImageDraw

# ============================================================================
# Image Fixtures
# ============================================================================


def encode_image(image: Image.Image, fmt: str = "PNG") -> bytes:
    buffer = BytesIO()
    image.save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def make_image_bytes() -> Callable[..., bytes]:
    """Factory for solid-colour encoded images of a given size."""

    def _make(
        width: int,
        height: int,
        fmt: str = "PNG",
        mode: str = "RGB",
        color: object = (73, 109, 137),
    ) -> bytes:
        return encode_image(Image.new(mode, (width, height), color=color), fmt)

    return _make


@pytest.fixture
def synthetic_image() -> bytes:
    """Generate synthetic 800x600 JPEG test image using PIL."""
    img = Image.new("RGB", (800, 600), color=(73, 109, 137))
    draw = ImageDraw.Draw(img)

    # Add some patterns to make it interesting
    for i in range(0, 800, 50):
        draw.line([(i, 0), (i, 600)], fill=(255, 255, 255), width=2)
    for i in range(0, 600, 50):
        draw.line([(0, i), (800, i)], fill=(255, 255, 255), width=2)

    draw.ellipse([300, 200, 500, 400], fill=(200, 100, 100))

    buffer = BytesIO()
    img.save(buffer, "JPEG", quality=85)
    return buffer.getvalue()


@pytest.fixture
def landscape_png(make_image_bytes: Callable[..., bytes]) -> bytes:
    """200x100 PNG."""
    return make_image_bytes(200, 100)


@pytest.fixture
def portrait_png(make_image_bytes: Callable[..., bytes]) -> bytes:
    """100x200 PNG."""
    return make_image_bytes(100, 200)


# ============================================================================
# Fake Codec
# ============================================================================


class FakeImage:
    def __init__(self, width: int, height: int):
        self.width: int = width
        self.height: int = height
        self.closed: bool = False

    def close(self) -> None:
        self.closed = True


class RecordingCodec:
    """Codec double: decodes to a fixed size and records every call."""

    def __init__(self, width: int, height: int, fail_encode: bool = False):
        self.width: int = width
        self.height: int = height
        self.fail_encode: bool = fail_encode
        self.decoded: list[FakeImage] = []
        self.scaled: list[FakeImage] = []
        self.encoded: list[tuple[int, int, str]] = []

    def decode(self, data: bytes) -> FakeImage:
        image = FakeImage(self.width, self.height)
        self.decoded.append(image)
        return image

    def scale(self, image: FakeImage, width: int, height: int) -> FakeImage:
        scaled = FakeImage(width, height)
        self.scaled.append(scaled)
        return scaled

    def encode(self, image: FakeImage, output_format: str) -> bytes:
        if self.fail_encode:
            raise OSError(f"cannot write mode for {output_format}")
        self.encoded.append((image.width, image.height, output_format))
        return f"{image.width}x{image.height}:{output_format}".encode()


@pytest.fixture
def recording_codec() -> Callable[..., RecordingCodec]:
    """Factory for RecordingCodec instances."""

    def _make(width: int, height: int, fail_encode: bool = False) -> RecordingCodec:
        return RecordingCodec(width, height, fail_encode=fail_encode)

    return _make
