"""Symbol style parameters and their normalization."""

import numbers
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields
from typing import Any

from loguru import logger

from .color import Channels, ColorInput, resolve_color
from .constants import DEFAULT_OFFSET, DEFAULT_OPACITY, DEFAULT_TEXTURE_COORD
from .errors import InvalidParameterError, MissingRequiredFieldError

# Literal style keys as written in style objects -> dataclass field names
_KEY_ALIASES: dict[str, str] = {
    "rotateWithView": "rotate_with_view",
    "textureCoord": "texture_coord",
}


@dataclass(frozen=True)
class SymbolShaderParameters:
    """Style of one point symbol.

    Attributes:
        size: Square size, or (width, height), in local units
        rotate_with_view: Rotate the offset with the view as well as scale it
        offset: (x, y) offset of the quad from the point
        texture_coord: Atlas region as (u0, v0, u1, v1)
        opacity: Symbol opacity
        color: Channel tuple (RGB 0-255, alpha 0-1) or text color
    """

    size: float | Sequence[float] | None = None
    rotate_with_view: bool = False
    offset: Sequence[float] | None = None
    texture_coord: Sequence[float] | None = None
    opacity: float | None = None
    color: ColorInput = None

    @classmethod
    def from_dict(cls, style: Mapping[str, Any]) -> "SymbolShaderParameters":
        """Build parameters from a literal style mapping.

        Both ``rotateWithView``/``textureCoord`` and snake_case keys are accepted.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in style.items():
            name = _KEY_ALIASES.get(key, key)
            if name not in known:
                msg = f"unknown style key: {key}"
                logger.error(msg)
                raise InvalidParameterError(msg, context=dict(style))
            if name in kwargs:
                msg = f"style key {key} repeats {name} under another spelling"
                logger.error(msg)
                raise InvalidParameterError(msg, context=dict(style))
            kwargs[name] = value
        return cls(**kwargs)


@dataclass(frozen=True)
class ResolvedSymbolParameters:
    """Fully populated parameters, ready for code generation."""

    size: tuple[float, float]
    rotate_with_view: bool
    offset: tuple[float, float]
    texture_coord: tuple[float, float, float, float]
    opacity: float
    color: Channels


def _as_tuple(name: str, value: Any, length: int) -> tuple:
    try:
        items = tuple(value)
    except TypeError as e:
        msg = f"{name} must be a sequence of {length} numbers, got {type(value).__name__}"
        logger.error(msg)
        raise InvalidParameterError(msg) from e
    if len(items) != length:
        msg = f"{name} must have {length} components, got {len(items)}"
        logger.error(msg)
        raise InvalidParameterError(msg, context=items)
    for item in items:
        _require_number(name, item)
    return items


def _require_number(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        msg = f"{name} values must be numbers, got {value!r}"
        logger.error(msg)
        raise InvalidParameterError(msg)


def _resolve_size(size: Any) -> tuple[float, float]:
    if size is None:
        logger.error("Symbol size is required")
        raise MissingRequiredFieldError("size")
    if isinstance(size, numbers.Real) and not isinstance(size, bool):
        return (size, size)
    return _as_tuple("size", size, 2)


def normalize_parameters(parameters: SymbolShaderParameters) -> ResolvedSymbolParameters:
    """Apply defaults and resolve every optional field.

    Raises:
        MissingRequiredFieldError: If size is missing
        InvalidParameterError: If a field has the wrong shape
        ColorParseError: If a text color cannot be parsed
    """
    offset = parameters.offset if parameters.offset is not None else DEFAULT_OFFSET
    texture_coord = (
        parameters.texture_coord
        if parameters.texture_coord is not None
        else DEFAULT_TEXTURE_COORD
    )
    opacity = parameters.opacity if parameters.opacity is not None else DEFAULT_OPACITY
    _require_number("opacity", opacity)

    resolved = ResolvedSymbolParameters(
        size=_resolve_size(parameters.size),
        rotate_with_view=bool(parameters.rotate_with_view),
        offset=_as_tuple("offset", offset, 2),
        texture_coord=_as_tuple("texture_coord", texture_coord, 4),
        opacity=opacity,
        color=resolve_color(parameters.color),
    )
    logger.debug(f"Resolved symbol parameters: {resolved}")
    return resolved
