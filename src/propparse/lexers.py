"""
Leaf parsers that read characters directly.
"""

from typing import Callable

from .parser import Parser
from .result import Error, Ok, Result

__all__ = ("literal", "take_while", "eof")


def literal(s: str) -> Parser[str]:
    """
    Matches exactly ``s``.

    >>> from propparse.lexers import literal

    >>> literal(":").parse("x")
    Traceback (most recent call last):
      ...
    propparse.types.ParseError: at 1:1: expected ':', found 'x'
    """

    if not s:
        raise ValueError("Expected non-empty value")
    size = len(s)
    expected = (repr(s),)

    def literal(stream: str, pos: int) -> Result[str]:
        if stream.startswith(s, pos):
            return Ok(s, pos + size, consumed=True)
        return Error(pos, expected)

    return Parser(literal)


def take_while(test: Callable[[str], bool]) -> Parser[str]:
    """
    Matches the longest run of characters accepted by ``test``; the run may
    be empty, so this never fails.

    >>> from propparse.lexers import take_while

    >>> take_while(str.isdigit).parse("12a")
    '12'
    >>> take_while(str.isdigit).parse("a12")
    ''
    """

    def take_while(stream: str, pos: int) -> Result[str]:
        end = pos
        while end < len(stream) and test(stream[end]):
            end += 1
        return Ok(stream[pos:end], end, consumed=end != pos)

    return Parser(take_while)


def eof() -> Parser[None]:
    def eof(stream: str, pos: int) -> Result[None]:
        if pos == len(stream):
            return Ok(None, pos)
        return Error(pos, ("end of input",))

    return Parser(eof)
