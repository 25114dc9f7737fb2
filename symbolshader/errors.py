"""Symbol shader builder - errors"""


class ShaderBuilderError(Exception):
    """Base class for all shader builder errors"""

    def __init__(self, message: str, context=None):
        super().__init__(message)
        self.context = context
        self.message = message

    def __str__(self):
        if self.context:
            return f"{self.message}\nContext: {self.context}"
        return self.message


class MissingRequiredFieldError(ShaderBuilderError):
    """A required symbol parameter was not supplied"""

    def __init__(self, field: str, context=None):
        super().__init__(f"Missing required field: {field}", context)
        self.field = field


class InvalidParameterError(ShaderBuilderError):
    """A symbol parameter has the wrong type or shape"""

    def __init__(self, message: str, context=None):
        super().__init__(f"Invalid parameter: {message}", context)


class LiteralFormatError(ShaderBuilderError):
    """A value cannot be written as a GLSL float literal"""

    def __init__(self, value, reason: str):
        super().__init__(f"Cannot format {value!r} as a GLSL float literal: {reason}")
        self.value = value


class ColorParseError(ShaderBuilderError):
    """A text color could not be resolved to channels"""

    def __init__(self, text: str, context=None):
        super().__init__(f"Cannot parse color: {text!r}", context)
        self.text = text
