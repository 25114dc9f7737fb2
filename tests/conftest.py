"""Fixtures and configuration for pytest."""

import re

import pytest

from symbolshader import SymbolShaderParameters

_SELECT = re.compile(
    r"float (\w+) = a_index == [\d.]+ \|\| a_index == [\d.]+ \? (\S+) : (\S+);"
)


@pytest.fixture
def default_parameters() -> SymbolShaderParameters:
    return SymbolShaderParameters(size=(2, 4))


@pytest.fixture
def selected_literals():
    """Map each corner-selected variable of a shader to its (low, high) literals."""

    def extract(source: str) -> dict[str, tuple[str, str]]:
        return {name: (low, high) for name, low, high in _SELECT.findall(source)}

    return extract
