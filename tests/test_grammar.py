from dataclasses import FrozenInstanceError
from typing import List, Tuple

import pytest

from propparse import (
    ParseError, Property, Span, parse_identifier, parse_property,
    parse_string_value
)
from propparse.grammar import identifier, property_, string_value, ws
from propparse.lexers import literal

IDENTIFIERS = [
    "valid",
    "with-dashes",
    "with_underscores",
    "with-numbers-23",
    "ValidIdentifier",
    "42",
    "-_-",
    "ключ",
]


@pytest.mark.parametrize("data", IDENTIFIERS)
def test_identifier(data: str) -> None:
    assert parse_identifier(data) == data
    assert identifier.with_span().parse(data) == (
        data, Span(0, len(data.encode("utf-8")))
    )


def test_identifier_stops() -> None:
    assert identifier.parse("key: value") == "key"
    assert identifier.parse("?invalid") == ""


IDENTIFIERS_NEGATIVE = [
    ("?invalid", "at 1:1: expected identifier or end of input, found '?'"),
    ("not-including-colon:", "at 1:20: expected end of input, found ':'"),
    ("with space", "at 1:5: expected end of input, found ' '"),
]


@pytest.mark.parametrize("data, expected", IDENTIFIERS_NEGATIVE)
def test_identifier_negative(data: str, expected: str) -> None:
    with pytest.raises(ParseError) as err:
        parse_identifier(data)
    assert str(err.value) == expected


STRINGS: List[Tuple[str, str]] = [
    ('"Michael"', "Michael"),
    ('"$"', "$"),
    ('"1234"', "1234"),
    ('""', ""),
    ('"key: value"', "key: value"),
    ('"multi\nline"', "multi\nline"),
    ('"back\\slash"', "back\\slash"),
]


@pytest.mark.parametrize("data, expected", STRINGS)
def test_string_value(data: str, expected: str) -> None:
    assert parse_string_value(data) == expected
    assert string_value.parse(data) == expected


STRINGS_NEGATIVE = [
    ('No begging quote"', "at 1:1: expected string, found 'N'"),
    ('"No ending quote', "at 1:17: expected '\"', found end of input"),
    ("", "at 1:1: expected string, found end of input"),
    ('"a"b"', "at 1:4: expected end of input, found 'b'"),
]


@pytest.mark.parametrize("data, expected", STRINGS_NEGATIVE)
def test_string_value_negative(data: str, expected: str) -> None:
    with pytest.raises(ParseError) as err:
        parse_string_value(data)
    assert str(err.value) == expected


PROPERTIES: List[Tuple[str, str, str]] = [
    ('first_name: "Michael"', "first_name", "Michael"),
    ('name:\t"Jack"', "name", "Jack"),
    ('name:"Jack"', "name", "Jack"),
    ('name \r\n:\n\t "Jack"', "name", "Jack"),
    ('a-b_1 : "x y"', "a-b_1", "x y"),
    ('url: "http://example.com"', "url", "http://example.com"),
    (':"orphan"', "", "orphan"),
    ('ключ: "значение"', "ключ", "значение"),
]


@pytest.mark.parametrize("data, key, value", PROPERTIES)
def test_property(data: str, key: str, value: str) -> None:
    prop = parse_property(data)
    encoded = data.encode("utf-8")
    assert prop == Property(key, value, Span(0, len(encoded)))
    assert encoded[prop.span.start:prop.span.end] == encoded


WHITESPACE = ["", " ", "  ", "\t", "\n", "\r", "\r\n", " \t\r\n "]


@pytest.mark.parametrize("before", WHITESPACE)
@pytest.mark.parametrize("after", WHITESPACE)
def test_property_whitespace(before: str, after: str) -> None:
    data = 'key{}:{}"value"'.format(before, after)
    prop = parse_property(data)
    assert (prop.key, prop.value) == ("key", "value")
    assert prop.span == Span(0, len(data))


def test_property_span() -> None:
    data = '  key : "v"  rest'
    prop = ws(property_).parse(data)
    assert prop == Property("key", "v", Span(2, 11))
    assert prop.span.text(data) == 'key : "v"'


def test_property_span_bytes() -> None:
    data = ' ключ: "значение" '
    prop = ws(property_).parse(data)
    assert prop.span == Span(1, 29)
    assert data.encode("utf-8")[1:29].decode("utf-8") == 'ключ: "значение"'
    assert prop.span.text(data) == 'ключ: "значение"'


def test_property_in_sequence() -> None:
    parser = (literal("{") >> ws(property_)) + (
        literal(",") >> ws(property_) << literal("}")
    )
    first, second = parser.parse('{a: "1", b:"2" }')
    assert first == Property("a", "1", Span(1, 7))
    assert second == Property("b", "2", Span(9, 14))


def test_property_frozen() -> None:
    prop = parse_property('name: "Jack"')
    with pytest.raises(FrozenInstanceError):
        prop.value = "John"  # type: ignore


PROPERTIES_NEGATIVE = [
    ("", "at 1:1: expected identifier or ':', found end of input"),
    ("?invalid", "at 1:1: expected identifier or ':', found '?'"),
    (' name: "Jack"', "at 1:2: expected ':', found 'n'"),
    ('name "Jack"', "at 1:6: expected ':', found '\"'"),
    ("name: Jack", "at 1:7: expected string, found 'J'"),
    ('name: "Jack', "at 1:12: expected '\"', found end of input"),
    ('name: "Jack" ', "at 1:13: expected end of input, found ' '"),
    (
        'name: "Jack"\nage: "3"',
        "at 1:13: expected end of input, found '\\n'"
    ),
    ("name:\n  Jack", "at 2:3: expected string, found 'J'"),
    ('name: "Ja"ck"', "at 1:11: expected end of input, found 'c'"),
]


@pytest.mark.parametrize("data, expected", PROPERTIES_NEGATIVE)
def test_property_negative(data: str, expected: str) -> None:
    with pytest.raises(ParseError) as err:
        parse_property(data)
    assert str(err.value) == expected
