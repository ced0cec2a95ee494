"""Exceptions raised by the picture resizer.

Codec failures (Pillow decode/encode errors) are not wrapped here; they
reach the caller unmodified.
"""


class ResizerError(Exception):
    """Base class for resizer errors."""


class InvalidArgumentError(ResizerError, ValueError):
    def __init__(self, argument: str, message: str):
        self.argument: str = argument
        super().__init__(f"{message} (argument: {argument})")


class DimensionOutOfRangeError(ResizerError, ValueError):
    def __init__(self, argument: str, value: int):
        self.argument: str = argument
        self.value: int = value
        super().__init__(
            f"Required {argument} cannot be negative or zero (got {value})."
        )


class DimensionNotSetError(ResizerError, RuntimeError):
    def __init__(self, dimension: str):
        self.dimension: str = dimension
        super().__init__(f"Required {dimension} not set.")


class DegenerateImageError(ResizerError, ValueError):
    """Source image or computed target has a zero-sized dimension."""

    def __init__(self, message: str):
        self.message: str = message
        super().__init__(message)
