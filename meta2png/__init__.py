"""Convert material metadata (.meta JSON) into square RGBA PNG textures."""

from .colors import Pixel, decode_color
from .errors import (
    EmptyInputError,
    IndexOutOfRangeError,
    MalformedColorError,
    Meta2PngError,
    MetadataError,
)
from .rasterize import rasterize, source_index

__all__ = [
    "EmptyInputError",
    "IndexOutOfRangeError",
    "MalformedColorError",
    "Meta2PngError",
    "MetadataError",
    "Pixel",
    "decode_color",
    "rasterize",
    "source_index",
]
