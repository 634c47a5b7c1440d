"""
Parser combinators over strings.

A parser wraps a function ``fn(stream, pos)`` that returns :class:`Ok` with
the position after the match, or :class:`Error` with the position of the
failure. Sequencing stops at the first failure; there is no backtracking.
"""

from typing import Callable, Generic, Tuple, TypeVar

from .result import Error, Ok, ParseFn, Result
from .types import ParseError, Span

A = TypeVar("A")
A_co = TypeVar("A_co", covariant=True)
B = TypeVar("B")
C = TypeVar("C")


class Parser(Generic[A_co]):
    def __init__(self, fn: ParseFn[A_co]):
        self._fn = fn

    def __call__(self, stream: str, pos: int) -> Result[A_co]:
        return self._fn(stream, pos)

    def parse(self, stream: str) -> A_co:
        """
        Runs the parser from the start of ``stream`` and returns its' value.
        Input left after the match is ignored.

        >>> from propparse.lexers import literal

        >>> (literal("a") + literal("b")).parse("abc")
        ('a', 'b')
        >>> (literal("a") + literal("b")).parse("a\\nc")
        Traceback (most recent call last):
          ...
        propparse.types.ParseError: at 1:2: expected 'b', found '\\n'

        :param stream: Input to parse
        :raise: :exc:`propparse.ParseError`
        """

        r = self._fn(stream, 0)
        if type(r) is Error:
            raise ParseError(stream, r.pos, list(r.expected))
        return r.value

    def fmap(self, fn: Callable[[A_co], B]) -> "Parser[B]":
        parse_fn = self._fn

        def fmap(stream: str, pos: int) -> Result[B]:
            return parse_fn(stream, pos).map(fn)

        return Parser(fmap)

    def __add__(self, other: "Parser[B]") -> "Parser[Tuple[A_co, B]]":
        return _seq(self, other, lambda l, r: (l, r))

    def __lshift__(self, other: "Parser[B]") -> "Parser[A_co]":
        return _seq(self, other, lambda l, _: l)

    def __rshift__(self, other: "Parser[B]") -> "Parser[B]":
        return _seq(self, other, lambda _, r: r)

    def label(self, name: str) -> "Parser[A_co]":
        """
        Reports ``name`` instead of the parser's own expectations when it
        stops without consuming input.
        """

        parse_fn = self._fn
        expected = (name,)

        def label(stream: str, pos: int) -> Result[A_co]:
            return parse_fn(stream, pos).expecting(expected)

        return Parser(label)

    def between(
            self, open: "Parser[B]", close: "Parser[C]") -> "Parser[A_co]":
        return open >> (self << close)

    def with_span(self) -> "Parser[Tuple[A_co, Span]]":
        """
        Pairs the value with the UTF-8 byte span of the matched input.

        >>> from propparse.lexers import literal

        >>> (literal("é") >> literal("ab").with_span()).parse("éab")
        ('ab', Span(start=2, end=4))
        """

        parse_fn = self._fn

        def with_span(stream: str, pos: int) -> Result[Tuple[A_co, Span]]:
            r = parse_fn(stream, pos)
            if type(r) is Error:
                return r
            span = Span.of(stream, pos, r.pos)
            return r.map(lambda v: (v, span))

        return Parser(with_span)


def _seq(
        first: Parser[A], second: Parser[B],
        merge: Callable[[A, B], C]) -> Parser[C]:
    def seq(stream: str, pos: int) -> Result[C]:
        ra = first(stream, pos)
        if type(ra) is Error:
            return ra
        va = ra.value
        return second(stream, ra.pos).after(ra).map(lambda vb: merge(va, vb))

    return Parser(seq)
