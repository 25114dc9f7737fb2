from symbolshader.builder import get_symbol_vertex_shader, quad_bounds, texture_bounds
from symbolshader.color import ChannelColor, TextColor, normalize_color, parse_color
from symbolshader.constants import (
    symbol_varyings,
    symbol_vertex_attributes,
    symbol_vertex_uniforms,
)
from symbolshader.errors import (
    ColorParseError,
    InvalidParameterError,
    LiteralFormatError,
    MissingRequiredFieldError,
    ShaderBuilderError,
)
from symbolshader.formatting import format_number
from symbolshader.models import (
    ResolvedSymbolParameters,
    SymbolShaderParameters,
    normalize_parameters,
)

__version__ = "0.1.0"


__all__ = [
    "get_symbol_vertex_shader",
    "quad_bounds",
    "texture_bounds",
    "format_number",
    "SymbolShaderParameters",
    "ResolvedSymbolParameters",
    "normalize_parameters",
    "ChannelColor",
    "TextColor",
    "parse_color",
    "normalize_color",
    "symbol_vertex_attributes",
    "symbol_vertex_uniforms",
    "symbol_varyings",
    "ShaderBuilderError",
    "MissingRequiredFieldError",
    "InvalidParameterError",
    "LiteralFormatError",
    "ColorParseError",
]
