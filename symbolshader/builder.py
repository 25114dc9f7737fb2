"""
Symbol vertex shader generation.

A symbol is drawn as a quad expanded from a single point: the four vertices
of a symbol share ``a_position`` and differ by ``a_index`` (0 to 3), which
selects the corner of both the quad and the texture region.
"""

from collections.abc import Mapping
from typing import Any

from loguru import logger

from .color import normalize_color
from .constants import (
    ATTRIBUTES,
    MIN_X_INDICES,
    MIN_Y_INDICES,
    OFFSET_MATRIX_SCALE,
    OFFSET_MATRIX_SCALE_ROTATE,
    PRECISION,
    VARYINGS,
    symbol_vertex_uniforms,
)
from .errors import InvalidParameterError
from .formatting import format_number, format_vector
from .models import (
    ResolvedSymbolParameters,
    SymbolShaderParameters,
    normalize_parameters,
)

Bounds = tuple[tuple[float, float], tuple[float, float]]


def quad_bounds(resolved: ResolvedSymbolParameters) -> Bounds:
    """Return ((minX, maxX), (minY, maxY)) of the quad around the point.

    Raises:
        InvalidParameterError: If size or offset does not fit in a float
    """
    width, height = resolved.size
    x, y = resolved.offset
    try:
        return (
            (x - width / 2, x + width / 2),
            (y - height / 2, y + height / 2),
        )
    except OverflowError as e:
        msg = f"size {resolved.size} or offset {resolved.offset} is too large"
        logger.error(msg)
        raise InvalidParameterError(msg) from e


def texture_bounds(resolved: ResolvedSymbolParameters) -> Bounds:
    """Return ((u0, u1), (v0, v1)) of the sampled texture region."""
    u0, v0, u1, v1 = resolved.texture_coord
    return ((u0, u1), (v0, v1))


def _corner_select(indices: tuple[int, int], low: float, high: float) -> str:
    """Ternary picking ``low`` for the given corner indices, ``high`` otherwise."""
    first, second = indices
    return (
        f"a_index == {format_number(first)} || a_index == {format_number(second)}"
        f" ? {format_number(low)} : {format_number(high)}"
    )


def _declarations(rotate_with_view: bool) -> list[str]:
    uniforms = symbol_vertex_uniforms(rotate_with_view)
    return [
        PRECISION,
        *[f"uniform {type_} {name};" for name, type_ in uniforms.items()],
        *[f"attribute {type_} {name};" for name, type_ in ATTRIBUTES.items()],
        *[f"varying {type_} {name};" for name, type_ in VARYINGS.items()],
    ]


def _main_body(resolved: ResolvedSymbolParameters) -> list[str]:
    (min_x, max_x), (min_y, max_y) = quad_bounds(resolved)
    (u0, u1), (v0, v1) = texture_bounds(resolved)
    offset_matrix = (
        OFFSET_MATRIX_SCALE_ROTATE if resolved.rotate_with_view else OFFSET_MATRIX_SCALE
    )
    color = normalize_color(resolved.color)
    return [
        offset_matrix,
        f"float offsetX = {_corner_select(MIN_X_INDICES, min_x, max_x)};",
        f"float offsetY = {_corner_select(MIN_Y_INDICES, min_y, max_y)};",
        "vec4 offsets = offsetMatrix * vec4(offsetX, offsetY, 0.0, 0.0);",
        "gl_Position = u_projectionMatrix * vec4(a_position, 0.0, 1.0) + offsets;",
        f"float u = {_corner_select(MIN_X_INDICES, u0, u1)};",
        f"float v = {_corner_select(MIN_Y_INDICES, v0, v1)};",
        "v_texCoord = vec2(u, v);",
        f"v_opacity = {format_number(resolved.opacity)};",
        f"v_color = vec4({format_vector(color)});",
    ]


def get_symbol_vertex_shader(
    parameters: SymbolShaderParameters | Mapping[str, Any],
) -> str:
    """Generate the vertex shader for a point symbol.

    Expects the attributes ``vec2 a_position`` and ``float a_index`` (the
    corner of the quad, 0 to 3) and passes ``vec2 v_texCoord``,
    ``float v_opacity`` and ``vec4 v_color`` to the fragment shader.

    Args:
        parameters: Symbol style, as parameters or a literal style mapping

    Returns:
        The complete shader source

    Raises:
        MissingRequiredFieldError: If no size is given
        InvalidParameterError: If a parameter has the wrong shape or type
        ColorParseError: If a text color cannot be parsed
        LiteralFormatError: If a value is not a finite number
    """
    if isinstance(parameters, Mapping):
        parameters = SymbolShaderParameters.from_dict(parameters)
    resolved = normalize_parameters(parameters)

    # All literals are formatted before any text is assembled
    declarations = _declarations(resolved.rotate_with_view)
    body = _main_body(resolved)

    logger.debug(
        f"Generating symbol vertex shader: size={resolved.size}, "
        f"rotate_with_view={resolved.rotate_with_view}"
    )
    components = [
        *declarations,
        "",
        "void main(void) {",
        *[f"  {line}" for line in body],
        "}",
    ]
    return "\n".join(components)
