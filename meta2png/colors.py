"""
Hex color codes -> RGBA pixels.

Codes are RRGGBB (no leading '#'). Alpha is always 255.

Lenient decoding never raises: each channel pair is read like a
prefix-tolerant integer parser would ("F" -> 15, "1Z" -> 1) and a pair with
no hex digits at all decodes to nan. Writers store nan channels as 0.
"""

import math
import re
from typing import NamedTuple, Union

from .errors import MalformedColorError

ALPHA = 255

_HEX_PREFIX = re.compile(r"\s*([0-9a-fA-F]+)")
_HEX_CODE = re.compile(r"[0-9a-fA-F]{6}")

Channel = Union[int, float]


class Pixel(NamedTuple):
    r: Channel
    g: Channel
    b: Channel
    a: Channel = ALPHA


def _parse_channel(pair: str) -> Channel:
    m = _HEX_PREFIX.match(pair)
    if not m:
        return math.nan
    return int(m.group(1), 16)


def decode_color(code: str, strict: bool = False) -> Pixel:
    """
    Decode RRGGBB into a Pixel.

    With strict=True anything but exactly six hex digits raises
    MalformedColorError instead of producing nan channels.
    """
    if strict and not _HEX_CODE.fullmatch(code):
        raise MalformedColorError(f"Invalid color code {code!r} (expected RRGGBB)")
    r = _parse_channel(code[0:2])
    g = _parse_channel(code[2:4])
    b = _parse_channel(code[4:6])
    return Pixel(r, g, b, ALPHA)


def channel_byte(value: Channel) -> int:
    """Value as stored in an 8-bit buffer: nan -> 0, otherwise wrapped to 0..255."""
    if isinstance(value, float):
        if math.isnan(value):
            return 0
        value = int(value)
    return value & 0xFF
