"""
Grammar of ``key: "value"`` properties::

    property   := identifier ws ':' ws string
    identifier := (ALNUM | '-' | '_')*
    string     := '"' (any-char-except '"')* '"'
    ws         := (' ' | '\\t' | '\\n' | '\\r')*

>>> from propparse.grammar import parse_property

>>> parse_property('first_name: "Michael"')
Property(key='first_name', value='Michael', span=Span(start=0, end=21))
"""

from dataclasses import dataclass
from typing import Tuple, TypeVar

from .lexers import eof, literal, take_while
from .parser import Parser
from .types import Span

__all__ = (
    "Property", "identifier", "string_value", "ws", "property_",
    "parse_identifier", "parse_string_value", "parse_property"
)

A = TypeVar("A")


@dataclass(frozen=True)
class Property:
    """
    :param key: Identifier on the left of the colon
    :param value: Text between the quotes, as written
    :param span: UTF-8 byte span from the key through the closing quote
    """

    key: str
    value: str
    span: Span


def _is_identifier_char(c: str) -> bool:
    return c.isalnum() or c == "-" or c == "_"


# May match nothing; the next step reports the failure.
identifier: Parser[str] = take_while(_is_identifier_char).label("identifier")

string_value: Parser[str] = take_while(lambda c: c != '"').between(
    literal('"'), literal('"')
).label("string")

_blank = take_while(lambda c: c in " \t\r\n")


def ws(parser: Parser[A]) -> Parser[A]:
    """
    Skips blank space on both sides of ``parser``.

    >>> from propparse.grammar import ws
    >>> from propparse.lexers import literal

    >>> (ws(literal(":")) + literal("a")).parse(" \\t:\\n a")
    (':', 'a')
    """

    return parser.between(_blank, _blank)


def _make_property(v: Tuple[Tuple[str, str], Span]) -> Property:
    (key, value), span = v
    return Property(key, value, span)


property_: Parser[Property] = (
    (identifier << ws(literal(":"))) + string_value
).with_span().fmap(_make_property)


_whole_identifier = identifier << eof()
_whole_string_value = string_value << eof()
_whole_property = property_ << eof()


def parse_identifier(src: str) -> str:
    return _whole_identifier.parse(src)


def parse_string_value(src: str) -> str:
    """
    >>> from propparse.grammar import parse_string_value

    >>> parse_string_value('"No ending quote')
    Traceback (most recent call last):
      ...
    propparse.types.ParseError: at 1:17: expected '"', found end of input
    """

    return _whole_string_value.parse(src)


def parse_property(src: str) -> Property:
    """
    Parses ``src`` as exactly one property; trailing input is an error.

    :raise: :exc:`propparse.ParseError`
    """

    return _whole_property.parse(src)
