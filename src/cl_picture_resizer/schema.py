"""Configuration schema for the default Pillow codec."""

from typing import Literal

from pydantic import BaseModel, Field

ResampleFilter = Literal["nearest", "box", "bilinear", "hamming", "bicubic", "lanczos"]


class PillowCodecConfig(BaseModel):
    """Settings applied by PillowCodec when scaling and encoding.

    Attributes:
        resample: Resampling filter used when scaling (default: lanczos)
        optimize_png: Pass optimize=True to the PNG encoder (default: True)
    """

    resample: ResampleFilter = Field(
        default="lanczos", description="Resampling filter used by scale()"
    )
    optimize_png: bool = Field(
        default=True, description="Run the PNG encoder with optimize=True"
    )
