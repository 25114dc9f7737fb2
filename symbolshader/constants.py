"""
Constants for the symbol vertex shader.

This module holds the naming contract shared with vertex buffer setup and
fragment shaders, the default style values and the fixed template fragments.
"""

PRECISION = "precision mediump float;"

# Vertex attributes: name -> GLSL type
ATTRIBUTES: dict[str, str] = {
    "a_position": "vec2",
    "a_index": "float",
}

# Uniforms declared by every symbol shader
UNIFORMS: dict[str, str] = {
    "u_projectionMatrix": "mat4",
    "u_offsetScaleMatrix": "mat4",
}

# Only declared when the symbol rotates with the view
ROTATE_UNIFORMS: dict[str, str] = {
    "u_offsetRotateMatrix": "mat4",
}

# Outputs consumed by the paired fragment shader
VARYINGS: dict[str, str] = {
    "v_texCoord": "vec2",
    "v_opacity": "float",
    "v_color": "vec4",
}

DEFAULT_OFFSET: tuple[float, float] = (0, 0)
DEFAULT_TEXTURE_COORD: tuple[float, float, float, float] = (0, 0, 1, 1)
DEFAULT_OPACITY: float = 1
DEFAULT_COLOR: tuple[float, float, float, float] = (255, 255, 255, 1)

OFFSET_MATRIX_SCALE = "mat4 offsetMatrix = u_offsetScaleMatrix;"
OFFSET_MATRIX_SCALE_ROTATE = (
    "mat4 offsetMatrix = u_offsetScaleMatrix * u_offsetRotateMatrix;"
)

# Corner indices on the min side of each axis:
# 0 -> (minX, minY), 1 -> (minX, maxY), 2 -> (maxX, maxY), 3 -> (maxX, minY)
MIN_X_INDICES: tuple[int, int] = (0, 3)
MIN_Y_INDICES: tuple[int, int] = (0, 1)


def symbol_vertex_attributes() -> dict[str, str]:
    """Vertex attributes a symbol vertex buffer must provide."""
    return dict(ATTRIBUTES)


def symbol_vertex_uniforms(rotate_with_view: bool = False) -> dict[str, str]:
    """Uniforms a symbol shader declares for the given rotation mode."""
    uniforms = dict(UNIFORMS)
    if rotate_with_view:
        uniforms.update(ROTATE_UNIFORMS)
    return uniforms


def symbol_varyings() -> dict[str, str]:
    """Varyings passed to the fragment shader."""
    return dict(VARYINGS)
