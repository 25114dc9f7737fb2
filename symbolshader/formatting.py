"""
GLSL literal formatting.

GLSL ES 1.00 has no implicit int-to-float conversion, so every number embedded
in generated source must be written as a float literal.
"""

import math
import numbers
from typing import Any

import numpy as np
from loguru import logger

from .errors import LiteralFormatError


def format_number(value: Any) -> str:
    """Format a number as a GLSL float literal.

    The number's default text representation is used as-is when it already
    reads as a float (it has a decimal point or an exponent), otherwise ``.0``
    is appended.

    Args:
        value: Finite real number (Python or NumPy scalar)

    Returns:
        The literal text, e.g. ``"1.0"``, ``"-0.5"``, ``"1e-07"``

    Raises:
        LiteralFormatError: If the value is not a finite real number
    """
    if isinstance(value, bool | np.bool_) or not isinstance(value, numbers.Real):
        msg = f"expected a real number, got {type(value).__name__}"
        logger.error(f"Failed to format {value!r}: {msg}")
        raise LiteralFormatError(value, msg)

    if isinstance(value, np.generic):
        value = value.item()

    if isinstance(value, numbers.Integral):
        return f"{int(value)}.0"

    if not math.isfinite(value):
        logger.error(f"Failed to format {value!r}: not finite")
        raise LiteralFormatError(value, "value is not finite")

    text = repr(float(value))
    if "." in text or "e" in text:
        return text
    return text + ".0"


def format_vector(values) -> str:
    """Format a sequence of numbers as comma separated float literals."""
    return ", ".join(format_number(v) for v in values)
