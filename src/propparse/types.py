from typing import List, NamedTuple


class Span(NamedTuple):
    """
    Half-open range of UTF-8 byte offsets into the source text.
    """

    start: int
    end: int

    @classmethod
    def of(cls, src: str, start: int, end: int) -> "Span":
        """
        Builds the byte span of ``src[start:end]``.
        """

        offset = len(src[:start].encode("utf-8"))
        return cls(offset, offset + len(src[start:end].encode("utf-8")))

    def text(self, src: str) -> str:
        return src.encode("utf-8")[self.start:self.end].decode("utf-8")


class ParseError(Exception):
    """
    Raised when the input does not match the grammar.

    :param src: Source text
    :param pos: Index of the offending character in ``src``
    :param expected: Descriptions of what would have been accepted
    """

    def __init__(self, src: str, pos: int, expected: List[str]):
        super().__init__(pos, expected)
        self.pos = pos
        self.offset = len(src[:pos].encode("utf-8"))
        self.line = src.count("\n", 0, pos) + 1
        self.col = pos - src.rfind("\n", 0, pos)
        self.expected = expected
        self.found = repr(src[pos]) if pos < len(src) else "end of input"

    def __str__(self) -> str:
        where = "at {}:{}: ".format(self.line, self.col)
        if not self.expected:
            return where + "unexpected " + self.found
        if len(self.expected) == 1:
            what = self.expected[0]
        else:
            what = "{} or {}".format(
                ", ".join(self.expected[:-1]), self.expected[-1]
            )
        return where + "expected {}, found {}".format(what, self.found)
