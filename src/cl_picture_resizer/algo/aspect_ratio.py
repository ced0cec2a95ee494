"""Aspect-ratio preserving target size computation (codec independent)."""

import numpy as np

from ..errors import DegenerateImageError


def _scale_dimension(
    *,
    source_fixed: int,
    source_free: int,
    required_fixed: int,
    fixed_name: str,
    free_name: str,
) -> int:
    """
    Compute the free dimension from the fixed one.

    The ratio is taken in single precision and the result is truncated
    toward zero, never rounded.

    Raises:
        DegenerateImageError: If the source fixed dimension is not positive,
            or the computed free dimension truncates to zero
    """
    if source_fixed <= 0:
        raise DegenerateImageError(
            f"Source image {fixed_name} is {source_fixed}, cannot compute a scale ratio"
        )

    ratio = np.float32(source_fixed) / np.float32(required_fixed)
    result = np.float32(source_free) / ratio
    truncated = int(result)

    if truncated <= 0:
        raise DegenerateImageError(
            f"Computed {free_name} {float(result)} truncates to {truncated} "
            f"for source {fixed_name} {source_fixed} scaled to {required_fixed}"
        )

    return truncated


def height_for_width(source_width: int, source_height: int, required_width: int) -> int:
    """Height that keeps the aspect ratio when the width becomes required_width.

    >>> height_for_width(200, 100, 50)
    25
    """
    return _scale_dimension(
        source_fixed=source_width,
        source_free=source_height,
        required_fixed=required_width,
        fixed_name="width",
        free_name="height",
    )


def width_for_height(source_width: int, source_height: int, required_height: int) -> int:
    """Width that keeps the aspect ratio when the height becomes required_height.

    >>> width_for_height(100, 200, 50)
    25
    """
    return _scale_dimension(
        source_fixed=source_height,
        source_free=source_width,
        required_fixed=required_height,
        fixed_name="height",
        free_name="width",
    )
