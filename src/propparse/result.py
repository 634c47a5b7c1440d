from typing import Callable, Generic, Tuple, TypeVar, Union

from typing_extensions import final

A_co = TypeVar("A_co", covariant=True)
B = TypeVar("B")

Expected = Tuple[str, ...]


@final
class Ok(Generic[A_co]):
    """
    Successful step: the value, the position right after it, and what else
    could have been accepted at that position.
    """

    __slots__ = "value", "pos", "expected", "consumed"

    def __init__(
            self, value: A_co, pos: int, expected: Expected = (),
            consumed: bool = False):
        self.value = value
        self.pos = pos
        self.expected = expected
        self.consumed = consumed

    def map(self, fn: Callable[[A_co], B]) -> "Ok[B]":
        return Ok(fn(self.value), self.pos, self.expected, self.consumed)

    def expecting(self, expected: Expected) -> "Ok[A_co]":
        if self.consumed:
            return self
        return Ok(self.value, self.pos, expected)

    def after(self, first: "Ok[object]") -> "Ok[A_co]":
        if self.consumed:
            return self
        return Ok(
            self.value, self.pos, first.expected + self.expected,
            first.consumed
        )


@final
class Error:
    """
    Failed step at ``pos``.
    """

    __slots__ = "pos", "expected", "consumed"

    def __init__(
            self, pos: int, expected: Expected = (), consumed: bool = False):
        self.pos = pos
        self.expected = expected
        self.consumed = consumed

    def map(self, fn: object) -> "Error":
        return self

    def expecting(self, expected: Expected) -> "Error":
        if self.consumed:
            return self
        return Error(self.pos, expected)

    def after(self, first: Ok[object]) -> "Error":
        if self.consumed:
            return self
        return Error(
            self.pos, first.expected + self.expected, first.consumed
        )


Result = Union[Ok[A_co], Error]
ParseFn = Callable[[str, int], Result[A_co]]
