"""
Pytest configuration and shared fixtures for mason tests.

Provides immutable test data fixtures and a small test-only encoder used to
check that values survive a trip through MASON text.
"""

from dataclasses import dataclass
from typing import Any

import pytest

import mason


@dataclass(frozen=True)
class MasonTestCase:
    """
    Immutable container for MASON test case data.

    Holds test input and expected behavior for consistent test execution.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: Any = None
    expected_kind: mason.ErrorKind | None = None


def encode(value: Any) -> str:
    """Writes a parsed tree back out as MASON text."""
    if value is None:
        return "null"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, str):
        return _encode_string(value)
    if isinstance(value, bytes):
        return _encode_bytes(value)
    if isinstance(value, list):
        return "[" + ", ".join(encode(item) for item in value) + "]"
    if isinstance(value, dict):
        pairs = (f"{_encode_string(k)}: {encode(v)}" for k, v in value.items())
        return "{\n" + "\n".join(pairs) + "\n}"
    raise TypeError(f"cannot encode {type(value).__name__}")


def _encode_string(s: str) -> str:
    out = ['"']
    for char in s:
        if char in ('"', "\\"):
            out.append("\\" + char)
        elif ord(char) < 0x20:
            out.append(f"\\u{ord(char):04x}")
        else:
            out.append(char)
    out.append('"')
    return "".join(out)


def _encode_bytes(data: bytes) -> str:
    out = ['b"']
    for byte in data:
        if byte in (0x22, 0x5C) or byte < 0x20 or byte > 0x7E:
            out.append(f"\\x{byte:02x}")
        else:
            out.append(chr(byte))
    out.append('"')
    return "".join(out)


@pytest.fixture
def mason_fail_cases() -> list[MasonTestCase]:
    """
    Provides documents that must fail, paired with the expected condition.
    """
    kind = mason.ErrorKind
    return [
        MasonTestCase("empty document", "", True, None, kind.UNEXPECTED_END_OF_INPUT),
        MasonTestCase("unclosed array", "[1,2", True, None, kind.UNEXPECTED_END_OF_INPUT),
        MasonTestCase("unclosed object", '{"a": 1', True, None, kind.UNEXPECTED_END_OF_INPUT),
        MasonTestCase("unterminated comment", "/* unterminated", True, None, kind.UNTERMINATED_COMMENT),
        MasonTestCase("trailing garbage", "1 2", True, None, kind.TRAILING_GARBAGE),
        MasonTestCase("extra close", "[1]]", True, None, kind.TRAILING_GARBAGE),
        MasonTestCase("missing array separator", "[1 2]", True, None, kind.EXPECTED_SEPARATOR_OR_CLOSE),
        MasonTestCase("missing object separator", "{a: 1 b: 2}", True, None, kind.EXPECTED_SEPARATOR),
        MasonTestCase("missing colon", '{"a" 1}', True, None, kind.EXPECTED_COLON),
        MasonTestCase("unknown keyword", "[truth]", True, None, kind.UNKNOWN_KEYWORD),
        MasonTestCase("unexpected character", "[@]", True, None, kind.UNEXPECTED_CHARACTER),
        MasonTestCase("double comma", "[1,,2]", True, None, kind.UNEXPECTED_CHARACTER),
        MasonTestCase("single quote string", "['x']", True, None, kind.UNEXPECTED_CHARACTER),
        MasonTestCase("unpaired surrogate", '"\\uD83D"', True, None, kind.UNPAIRED_SURROGATE),
        MasonTestCase("lone low surrogate", '"\\uDE00"', True, None, kind.UNEXPECTED_LOW_SURROGATE),
        MasonTestCase("surrogate codepoint", '"\\U00D800"', True, None, kind.SURROGATE_CODEPOINT_NOT_ALLOWED),
        MasonTestCase("non-ascii hex escape", '"\\xFF"', True, None, kind.NON_ASCII_ESCAPE),
        MasonTestCase("unknown escape", '"\\q"', True, None, kind.UNKNOWN_ESCAPE),
        MasonTestCase("raw tab in string", '"a\tb"', True, None, kind.UNEXPECTED_CONTROL_CHARACTER),
        MasonTestCase("non-ascii byte", 'b"\u00e9"', True, None, kind.NON_ASCII_BYTE),
        MasonTestCase("unicode escape in bytes", 'b"\\u0041"', True, None, kind.UNKNOWN_ESCAPE),
        MasonTestCase("bad hex digit", '"\\xZZ"', True, None, kind.INVALID_DIGIT),
        MasonTestCase("bad binary digit", "0b2", True, None, kind.INVALID_DIGIT),
        MasonTestCase("dangling exponent", "1e", True, None, kind.UNEXPECTED_END_OF_INPUT),
        MasonTestCase("dot without digits", "[1.]", True, None, kind.INVALID_DIGIT),
        MasonTestCase("unterminated raw string", 'r#"abc"', True, None, kind.UNEXPECTED_END_OF_INPUT),
        MasonTestCase("stray brace after implicit object", "a: 1 }", True, None, kind.TRAILING_GARBAGE),
    ]


@pytest.fixture
def mason_pass_cases() -> list[MasonTestCase]:
    """
    Provides documents that must parse, together with their expected values.
    """
    return [
        MasonTestCase(
            description="configuration file with comments",
            input_data="""
// service configuration
name: "edge-1"
enabled: true
/* listening ports */ ports: [
    80
    443,
    8'080,
]
limits: {
    max-connections: 0x10'00
    timeout: 2.5e1 // seconds
}
""",
            expected_output={
                "name": "edge-1",
                "enabled": True,
                "ports": [80.0, 443.0, 8080.0],
                "limits": {"max-connections": 4096.0, "timeout": 25.0},
            },
        ),
        MasonTestCase(
            description="plain JSON document",
            input_data='{"a": [1, 2, {"b": null}], "c": "d", "e": -1.5E-3}',
            expected_output={
                "a": [1.0, 2.0, {"b": None}],
                "c": "d",
                "e": -0.0015,
            },
        ),
        MasonTestCase(
            description="CRLF separated array",
            input_data="[\r\n  1\r\n  2\r\n]",
            expected_output=[1.0, 2.0],
        ),
        MasonTestCase(
            description="deep nesting",
            input_data='[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
            expected_output=[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]],
        ),
        MasonTestCase(
            description="mixed literals",
            input_data='[null, false, r"C:\\path", b"\\x00\\xff", "\\U01F600"]',
            expected_output=[None, False, "C:\\path", b"\x00\xff", "\U0001f600"],
        ),
    ]
