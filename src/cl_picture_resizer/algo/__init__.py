"""Pure scaling-ratio computations."""

from .aspect_ratio import height_for_width, width_for_height

__all__ = ["height_for_width", "width_for_height"]
