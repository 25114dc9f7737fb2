"""Color input resolution and channel normalization."""

import numbers
import re
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from loguru import logger
from PIL import ImageColor

from .constants import DEFAULT_COLOR
from .errors import ColorParseError, InvalidParameterError

Channels = tuple[float, float, float, float]


@dataclass(frozen=True)
class TextColor:
    """Color given as text: a CSS name, ``#rrggbb[aa]``, ``rgb()``, ``hsl()``..."""

    text: str


@dataclass(frozen=True)
class ChannelColor:
    """Color given as channels: RGB in 0-255, alpha in 0-1."""

    r: float
    g: float
    b: float
    a: float = 1

    def as_tuple(self) -> Channels:
        return (self.r, self.g, self.b, self.a)


ColorInput = TextColor | ChannelColor | str | Sequence[float] | None


# CSS functional notation with a 0-1 alpha, which Pillow reads as 0-255
_ALPHA_FUNCTION = re.compile(
    r"^\s*(rgb|hsl)a\((.+),\s*(\d*\.?\d+)\s*\)\s*$", re.IGNORECASE
)


def parse_color(text: str) -> Channels:
    """Resolve a text color through Pillow's color table.

    ``rgba()`` and ``hsla()`` alpha is read as 0-1, as in CSS. Hex alpha
    (``#rrggbbaa``) is reported by Pillow in 0-255 and rescaled to 0-1.
    """
    match = _ALPHA_FUNCTION.match(text)
    try:
        if match:
            function, channels, alpha = match.groups()
            r, g, b = ImageColor.getrgb(f"{function.lower()}({channels})")[:3]
            return (r, g, b, float(alpha))
        rgba = ImageColor.getrgb(text)
    except ValueError as e:
        logger.error(f"Failed to parse color {text!r}: {e}")
        raise ColorParseError(text) from e

    if len(rgba) == 4:
        r, g, b, a = rgba
        return (r, g, b, a / 255)
    r, g, b = rgba
    return (r, g, b, 1)


def resolve_color(color: ColorInput) -> Channels:
    """Resolve any accepted color input to a raw RGBA channel tuple."""
    if color is None:
        return DEFAULT_COLOR
    if isinstance(color, str):
        return parse_color(color)
    if isinstance(color, TextColor):
        return parse_color(color.text)

    if isinstance(color, ChannelColor):
        channels = color.as_tuple()
    else:
        try:
            channels = tuple(color)
        except TypeError as e:
            msg = f"color must be text or 4 channels, got {type(color).__name__}"
            logger.error(msg)
            raise InvalidParameterError(msg) from e
    if len(channels) != 4:
        msg = f"color must have 4 channels, got {len(channels)}"
        logger.error(msg)
        raise InvalidParameterError(msg, context=channels)
    if any(isinstance(c, bool) or not isinstance(c, numbers.Real) for c in channels):
        msg = f"color channels must be numbers: {channels!r}"
        logger.error(msg)
        raise InvalidParameterError(msg)
    return channels


def normalize_color(channels: Sequence[float]) -> Channels:
    """Map R, G, B from 0-255 into 0-1; alpha is kept as-is.

    Values are not clamped.
    """
    try:
        normalized = np.asarray(channels, dtype=np.float64)
    except (TypeError, ValueError) as e:
        msg = f"color channels must be numbers: {channels!r}"
        logger.error(msg)
        raise InvalidParameterError(msg) from e
    normalized[:3] /= 255
    r, g, b, a = normalized.tolist()
    return (r, g, b, a)
