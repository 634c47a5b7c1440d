"""
Public API.
"""

from . import grammar, lexers
from .grammar import (
    Property, parse_identifier, parse_property, parse_string_value
)
from .parser import Parser
from .types import ParseError, Span

__all__ = (
    "grammar", "lexers",
    "Parser", "ParseError", "Span",
    "Property", "parse_identifier", "parse_property", "parse_string_value",
)

__version__ = "0.1.0"
