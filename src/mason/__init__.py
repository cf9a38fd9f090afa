"""
Recursive-descent parser for MASON documents.

MASON is a JSON superset for configuration and data files. On top of JSON it
accepts comments, bare keys, newline and trailing separators, raw strings,
binary strings, radix-prefixed numbers with digit grouping, and a brace-less
top-level object. Only the reading direction is provided.
"""

import math
import os
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import IO
from typing import Any

__version__ = "0.1.0"

# Type aliases for domain concepts - recursive definition
MasonValue = (
    str
    | float
    | bool
    | bytes
    | None
    | dict[str, "MasonValue"]
    | list["MasonValue"]
)
Position = int
CharPredicate = Callable[[str], bool]

# Profiling infrastructure - zero-cost when disabled
PROFILE_HOT_PATHS = __debug__ and "MASON_PROFILE" in os.environ

DEFAULT_MAX_DEPTH = 256

_SIMPLE_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_KEYWORDS: dict[str, MasonValue] = {"null": None, "true": True, "false": False}

_RADIX_PREFIXES = {"x": 16, "o": 8, "b": 2}

_DIGIT_VALUES = {char: value for value, char in enumerate("0123456789abcdef")}
_DIGIT_VALUES.update(
    {char: value for value, char in enumerate("ABCDEF", start=10)}
)

# Largest bit length a finite double can round to
_MAX_FLOAT_BITS = 1024


@dataclass
class HotPathStats:
    """Statistics for profiling hot paths during parsing."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_processed: int = 0

    def record_call(self, duration_ns: int, chars: int = 0) -> None:
        """Records a function call with timing and character processing info."""
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_processed += chars


if PROFILE_HOT_PATHS:
    _hot_path_stats: dict[str, HotPathStats] = {}

    class ProfileContext:
        """Context manager for profiling hot paths."""

        def __init__(self, func_name: str, chars_to_process: int = 0):
            self.func_name = func_name
            self.chars = chars_to_process
            self.start_time = 0

        def __enter__(self) -> "ProfileContext":
            self.start_time = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            duration = time.perf_counter_ns() - self.start_time
            if self.func_name not in _hot_path_stats:
                _hot_path_stats[self.func_name] = HotPathStats(self.func_name)
            _hot_path_stats[self.func_name].record_call(duration, self.chars)

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        """Returns current profiling statistics."""
        return _hot_path_stats.copy()

    def clear_hot_path_stats() -> None:
        """Clears profiling statistics."""
        _hot_path_stats.clear()

else:
    # Zero-cost in production - ignore arguments to nullcontext
    class ProfileContext:  # type: ignore[no-redef]
        def __init__(self, func_name: str, chars: int = 0) -> None:
            pass

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        return {}

    def clear_hot_path_stats() -> None:
        pass


class ErrorKind(Enum):
    """
    Distinguishable failure conditions of a MASON parse.

    Every failure surfaces as MasonDecodeError; the kind tells callers which
    rule of the grammar was violated.
    """

    UNEXPECTED_END_OF_INPUT = "unexpected_end_of_input"
    UNEXPECTED_CHARACTER = "unexpected_character"
    INVALID_DIGIT = "invalid_digit"
    NON_ASCII_ESCAPE = "non_ascii_escape"
    UNPAIRED_SURROGATE = "unpaired_surrogate"
    UNEXPECTED_LOW_SURROGATE = "unexpected_low_surrogate"
    SURROGATE_CODEPOINT_NOT_ALLOWED = "surrogate_codepoint_not_allowed"
    CODEPOINT_OUT_OF_RANGE = "codepoint_out_of_range"
    UNKNOWN_ESCAPE = "unknown_escape"
    UNEXPECTED_CONTROL_CHARACTER = "unexpected_control_character"
    UNTERMINATED_COMMENT = "unterminated_comment"
    NON_ASCII_BYTE = "non_ascii_byte"
    EXPECTED_COLON = "expected_colon"
    EXPECTED_SEPARATOR = "expected_separator"
    EXPECTED_SEPARATOR_OR_CLOSE = "expected_separator_or_close"
    UNKNOWN_KEYWORD = "unknown_keyword"
    TRAILING_GARBAGE = "trailing_garbage"
    NESTING_TOO_DEEP = "nesting_too_deep"


class MasonDecodeError(ValueError):
    """
    Handles MASON parsing failures with precise position information.

    Carries the message, the failing condition, the source document, and the
    character position of the failure along with derived line and column
    numbers so users can locate the problem in their file.
    """

    def __init__(
        self,
        msg: str,
        doc: str = "",
        pos: Position = 0,
        kind: ErrorKind = ErrorKind.UNEXPECTED_CHARACTER,
    ) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.doc = doc
        self.pos = pos
        self.kind = kind

        # Compute line and column numbers from position
        self.lineno = doc.count("\n", 0, pos) + 1 if doc else 1
        self.colno = pos - doc.rfind("\n", 0, pos) if doc else pos + 1

        super().__init__(
            f"{msg} at line {self.lineno}, column {self.colno} (char {pos})"
        )

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.msg, self.doc, self.pos, self.kind)


ParseError = MasonDecodeError


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures MASON parsing behavior with immutable settings.

    max_depth bounds the nesting of objects and arrays so hostile input
    fails with a parse error instead of exhausting the interpreter stack.
    None disables the bound.
    """

    max_depth: int | None = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if self.max_depth is None:
            return
        if not isinstance(self.max_depth, int) or isinstance(
            self.max_depth, bool
        ):
            raise TypeError("max_depth must be an integer or None")
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")


def _is_identifier_start(char: str) -> bool:
    return char == "_" or ("a" <= char <= "z") or ("A" <= char <= "Z")


def _is_identifier_char(char: str) -> bool:
    return _is_identifier_start(char) or char == "-" or "0" <= char <= "9"


def _is_decimal_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _satisfies(char: str, expected: str | CharPredicate) -> bool:
    if isinstance(expected, str):
        return char == expected
    return expected(char)


class Reader:
    """
    Positioned cursor over the source text of a single parse.

    Lookahead never moves the position; it only advances through consume,
    skip and take, so the cursor never retreats.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.length = len(text)

    def peek(self) -> str | None:
        """Returns current character without advancing."""
        return self.text[self.pos] if self.pos < self.length else None

    def peek_next(self) -> str | None:
        """Returns the character after the current one without advancing."""
        ahead = self.pos + 1
        return self.text[ahead] if ahead < self.length else None

    def matches(self, expected: str | CharPredicate) -> bool:
        """Tests the current character, never failing at end of input."""
        char = self.peek()
        if char is None:
            return False
        return _satisfies(char, expected)

    def expect(
        self, expected: str | CharPredicate, what: str | None = None
    ) -> str:
        """Returns the current character, failing if it is not the expected one."""
        if what is None:
            what = repr(expected) if isinstance(expected, str) else "character"

        char = self.peek()
        if char is None:
            raise self.error(
                f"Got unexpected end of input, expected {what}",
                ErrorKind.UNEXPECTED_END_OF_INPUT,
            )
        if not _satisfies(char, expected):
            raise self.error(
                f"Got unexpected {char!r}, expected {what}",
                ErrorKind.UNEXPECTED_CHARACTER,
            )
        return char

    def consume(self) -> None:
        self.pos += 1

    def skip(
        self, expected: str | CharPredicate, what: str | None = None
    ) -> str:
        """Expects the current character and advances past it."""
        char = self.expect(expected, what)
        self.pos += 1
        return char

    def take(self) -> str | None:
        """Returns current character and advances position."""
        char = self.peek()
        if char is not None:
            self.pos += 1
        return char

    def error(
        self, msg: str, kind: ErrorKind, pos: Position | None = None
    ) -> MasonDecodeError:
        """Builds a decode error anchored at the cursor or at *pos*."""
        return MasonDecodeError(
            msg, self.text, self.pos if pos is None else pos, kind
        )


def _skip_line_comment(reader: Reader) -> None:
    reader.skip("/")
    reader.skip("/")
    while True:
        char = reader.take()
        if char is None or char == "\n":
            return


def skip_block_comment(reader: Reader) -> None:
    """Skips a /* ... */ comment; comments do not nest."""
    start = reader.pos
    reader.skip("/")
    reader.skip("*")
    while True:
        char = reader.take()
        if char is None:
            raise reader.error(
                "Unterminated block comment",
                ErrorKind.UNTERMINATED_COMMENT,
                start,
            )
        if char == "*" and reader.peek() == "/":
            reader.consume()
            return


def skip_whitespace(reader: Reader) -> None:
    """Skips whitespace, line breaks and both comment styles."""
    with ProfileContext("skip_whitespace"):
        while True:
            char = reader.peek()
            if char in (" ", "\t", "\r", "\n"):
                reader.consume()
            elif char == "/" and reader.peek_next() == "/":
                _skip_line_comment(reader)
            elif char == "/" and reader.peek_next() == "*":
                skip_block_comment(reader)
            else:
                return


def skip_space(reader: Reader) -> None:
    """Skips spaces, tabs and block comments, stopping at a line break."""
    while True:
        char = reader.peek()
        if char in (" ", "\t"):
            reader.consume()
        elif char == "/" and reader.peek_next() == "*":
            skip_block_comment(reader)
        else:
            return


def skip_separator(reader: Reader) -> bool:
    """
    Skips one element separator and any blank lines or comments after it.

    A separator is a comma, a line break (LF or CRLF) or a line comment.
    Returns whether one was found.
    """
    skip_space(reader)
    char = reader.peek()
    if char in (",", "\n"):
        reader.consume()
    elif char == "\r" and reader.peek_next() == "\n":
        reader.consume()
        reader.consume()
    elif char == "/" and reader.peek_next() == "/":
        _skip_line_comment(reader)
    else:
        return False

    skip_whitespace(reader)
    return True


def _read_hex(reader: Reader, count: int) -> int:
    """Reads exactly *count* hex digits."""
    value = 0
    for _ in range(count):
        char = reader.peek()
        if char is None:
            raise reader.error(
                "Got unexpected end of input, expected hex digit",
                ErrorKind.UNEXPECTED_END_OF_INPUT,
            )
        digit = _DIGIT_VALUES.get(char)
        if digit is None:
            raise reader.error(
                f"Invalid hex digit: {char!r}", ErrorKind.INVALID_DIGIT
            )
        value = value * 16 + digit
        reader.consume()
    return value


def parse_identifier(reader: Reader) -> str:
    """Identifier: [a-zA-Z_][a-zA-Z0-9_-]*"""
    start = reader.pos
    reader.skip(_is_identifier_start, "identifier")
    while reader.matches(_is_identifier_char):
        reader.consume()
    return reader.text[start : reader.pos]


def _parse_unicode_escape(reader: Reader, start: Position) -> str:
    """Decodes the digits of a \\u escape, pairing UTF-16 surrogates."""
    codepoint = _read_hex(reader, 4)
    if 0xDC00 <= codepoint <= 0xDFFF:
        raise reader.error(
            "Unexpected low UTF-16 surrogate",
            ErrorKind.UNEXPECTED_LOW_SURROGATE,
            start,
        )
    if codepoint < 0xD800 or codepoint > 0xDBFF:
        return chr(codepoint)

    if reader.peek() != "\\" or reader.peek_next() != "u":
        raise reader.error(
            "Unpaired UTF-16 surrogate", ErrorKind.UNPAIRED_SURROGATE, start
        )
    reader.consume()
    reader.consume()

    low = _read_hex(reader, 4)
    if low < 0xDC00 or low > 0xDFFF:
        raise reader.error(
            "Unpaired UTF-16 surrogate", ErrorKind.UNPAIRED_SURROGATE, start
        )
    return chr(0x10000 + ((codepoint - 0xD800) << 10) + (low - 0xDC00))


def _parse_string_escape(reader: Reader) -> str:
    """Decodes one escape sequence; the backslash is already consumed."""
    start = reader.pos - 1
    char = reader.take()
    if char is None:
        raise reader.error(
            "Got unexpected end of input in escape sequence",
            ErrorKind.UNEXPECTED_END_OF_INPUT,
        )

    if char in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[char]

    if char == "x":
        codepoint = _read_hex(reader, 2)
        if codepoint > 0x7F:
            raise reader.error(
                "'\\x' escapes can only be used for 7-bit ASCII characters",
                ErrorKind.NON_ASCII_ESCAPE,
                start,
            )
        return chr(codepoint)

    if char == "u":
        return _parse_unicode_escape(reader, start)

    if char == "U":
        codepoint = _read_hex(reader, 6)
        if 0xD800 <= codepoint <= 0xDFFF:
            raise reader.error(
                "UTF-16 surrogate codepoints are not allowed in '\\U' escapes",
                ErrorKind.SURROGATE_CODEPOINT_NOT_ALLOWED,
                start,
            )
        if codepoint > 0x10FFFF:
            raise reader.error(
                f"Codepoint out of range: U+{codepoint:X}",
                ErrorKind.CODEPOINT_OUT_OF_RANGE,
                start,
            )
        return chr(codepoint)

    raise reader.error(
        f"Unknown escape character: {char!r}", ErrorKind.UNKNOWN_ESCAPE, start
    )


def parse_string(reader: Reader) -> str:
    """String: '"' string-char* '"'"""
    with ProfileContext("parse_string"):
        start = reader.pos
        reader.skip('"')
        chunks: list[str] = []
        while True:
            char = reader.take()
            if char is None:
                raise reader.error(
                    "Unterminated string starting at",
                    ErrorKind.UNEXPECTED_END_OF_INPUT,
                    start,
                )
            if char == '"':
                return "".join(chunks)
            if char == "\\":
                chunks.append(_parse_string_escape(reader))
                continue
            if ord(char) < 0x20:
                raise reader.error(
                    "Unexpected control character in string",
                    ErrorKind.UNEXPECTED_CONTROL_CHARACTER,
                    reader.pos - 1,
                )
            chunks.append(char)


def parse_raw_string(reader: Reader) -> str:
    """
    Raw String: 'r' hashes '"' rstring-char* '"' hashes

    The content is copied verbatim. It ends at the first quote followed by
    as many hashes as opened the literal, so an embedded quote only needs
    one more hash than any quote-hash run inside it.
    """
    with ProfileContext("parse_raw_string"):
        start = reader.pos
        reader.skip("r")
        hashes = 0
        while reader.peek() == "#":
            hashes += 1
            reader.consume()
        reader.skip('"')

        content_start = reader.pos
        # -1 while not inside a quote-hash run
        hash_state = -1
        while True:
            char = reader.take()
            if char is None:
                raise reader.error(
                    "Unterminated raw string starting at",
                    ErrorKind.UNEXPECTED_END_OF_INPUT,
                    start,
                )
            if char == '"':
                hash_state = 0
            elif char == "#" and hash_state >= 0:
                hash_state += 1
            else:
                hash_state = -1

            if hash_state == hashes:
                return reader.text[content_start : reader.pos - hashes - 1]


def parse_binary_string(reader: Reader) -> bytes:
    """Binary String: 'b"' bstring-char* '"'"""
    with ProfileContext("parse_binary_string"):
        start = reader.pos
        reader.skip("b")
        reader.skip('"')
        data = bytearray()
        while True:
            char = reader.take()
            if char is None:
                raise reader.error(
                    "Unterminated binary string starting at",
                    ErrorKind.UNEXPECTED_END_OF_INPUT,
                    start,
                )
            if char == '"':
                return bytes(data)

            if char == "\\":
                escape_start = reader.pos - 1
                char = reader.take()
                if char is None:
                    raise reader.error(
                        "Got unexpected end of input in escape sequence",
                        ErrorKind.UNEXPECTED_END_OF_INPUT,
                    )
                if char in _SIMPLE_ESCAPES:
                    data.append(ord(_SIMPLE_ESCAPES[char]))
                elif char == "x":
                    data.append(_read_hex(reader, 2))
                else:
                    raise reader.error(
                        f"Unknown escape character: {char!r}",
                        ErrorKind.UNKNOWN_ESCAPE,
                        escape_start,
                    )
                continue

            point = ord(char)
            if point > 0x7F:
                raise reader.error(
                    f"Binary strings can only contain ASCII literals, got: {char!r}",
                    ErrorKind.NON_ASCII_BYTE,
                    reader.pos - 1,
                )
            if point < 0x20:
                raise reader.error(
                    "Unexpected control character in binary string",
                    ErrorKind.UNEXPECTED_CONTROL_CHARACTER,
                    reader.pos - 1,
                )
            data.append(point)


def _scan_digits(reader: Reader, radix: int) -> str:
    """
    Scans a run of digits valid in *radix*, dropping ' grouping separators.

    The first character must be a digit. The run ends silently at the first
    character that is not a digit of the radix; the caller decides what
    comes next.
    """
    first = reader.peek()
    if first is None:
        raise reader.error(
            "Got unexpected end of input, expected digit",
            ErrorKind.UNEXPECTED_END_OF_INPUT,
        )
    value = _DIGIT_VALUES.get(first)
    if value is None or value >= radix:
        raise reader.error(
            f"Invalid digit for base {radix}: {first!r}",
            ErrorKind.INVALID_DIGIT,
        )

    digits: list[str] = []
    while True:
        char = reader.peek()
        if char == "'":
            reader.consume()
            continue
        if char is None:
            break
        value = _DIGIT_VALUES.get(char)
        if value is None or value >= radix:
            break
        digits.append(char)
        reader.consume()
    return "".join(digits)


def parse_number(reader: Reader) -> float:
    """
    Number: sign? ('0x' | '0o' | '0b')? digits ('.' digits)? (('e'|'E') sign? digits)?

    Fractions and exponents only exist in base 10. The scanned pieces are
    reassembled into a canonical decimal literal and handed to float(),
    which rounds correctly; no float arithmetic happens here.
    """
    with ProfileContext("parse_number"):
        sign = ""
        char = reader.peek()
        if char in ("-", "+"):
            if char == "-":
                sign = "-"
            reader.consume()
            char = reader.peek()

        radix = 10
        if char == "0" and reader.peek_next() in _RADIX_PREFIXES:
            radix = _RADIX_PREFIXES[reader.peek_next()]  # type: ignore[index]
            reader.consume()
            reader.consume()
            char = reader.peek()

        if radix != 10:
            value = int(_scan_digits(reader, radix), radix)
            if value.bit_length() > _MAX_FLOAT_BITS:
                return -math.inf if sign else math.inf
            return float(f"{sign}{value}")

        integral = "0"
        if char != ".":
            integral = _scan_digits(reader, 10)

        fractional = ""
        if reader.peek() == ".":
            reader.consume()
            fractional = "." + _scan_digits(reader, 10)

        exponent = "0"
        if reader.peek() in ("e", "E"):
            reader.consume()
            exponent_sign = ""
            if reader.peek() in ("-", "+"):
                exponent_sign = reader.take()  # type: ignore[assignment]
            exponent = exponent_sign + _scan_digits(reader, 10)

        return float(f"{sign}{integral}{fractional}e{exponent}")


def parse_key(reader: Reader) -> str:
    """Key: Identifier | String"""
    if reader.peek() == '"':
        return parse_string(reader)
    return parse_identifier(reader)


class MasonParser:
    """
    Recursive descent parser producing Python values from a MASON document.

    Object, array and value grammar are mutually recursive methods; literal
    decoders are module-level functions over the shared Reader.
    """

    def __init__(self, reader: Reader, config: ParseConfig):
        self.reader = reader
        self.config = config
        self.depth = 0

    def parse_document(self) -> MasonValue:
        """Parses one top-level value and rejects anything after it."""
        reader = self.reader
        with ProfileContext("parse_document", reader.length):
            skip_whitespace(reader)
            value = self.parse_value(top_level=True)

            skip_whitespace(reader)
            if reader.peek() is not None:
                raise reader.error(
                    "Trailing garbage after document",
                    ErrorKind.TRAILING_GARBAGE,
                )
            return value

    def _at_implicit_colon(self) -> bool:
        skip_space(self.reader)
        return self.reader.peek() == ":"

    def parse_value(self, top_level: bool = False) -> MasonValue:  # noqa: PLR0911
        """
        Parses any value, choosing the decoder from one or two characters.

        At the top level a string or identifier followed by ':' starts a
        brace-less object that runs until end of input.
        """
        reader = self.reader
        char = reader.peek()
        if char is None:
            raise reader.error(
                "Got unexpected end of input, expected value",
                ErrorKind.UNEXPECTED_END_OF_INPUT,
            )

        if char == "[":
            return self.parse_array()
        if char == "{":
            return self.parse_object()
        if char == '"':
            text = parse_string(reader)
            if top_level and self._at_implicit_colon():
                return self.parse_members(text, implicit=True)
            return text

        ahead = reader.peek_next()
        if char == "r" and ahead in ('"', "#"):
            return parse_raw_string(reader)
        if char in "+-." or _is_decimal_digit(char):
            return parse_number(reader)
        if char == "b" and ahead == '"':
            return parse_binary_string(reader)

        if not _is_identifier_start(char):
            raise reader.error(
                f"Unexpected character: {char!r}",
                ErrorKind.UNEXPECTED_CHARACTER,
            )

        start = reader.pos
        ident = parse_identifier(reader)
        if top_level and self._at_implicit_colon():
            return self.parse_members(ident, implicit=True)
        if ident in _KEYWORDS:
            return _KEYWORDS[ident]
        raise reader.error(
            f"Unexpected keyword: {ident!r}", ErrorKind.UNKNOWN_KEYWORD, start
        )

    def _descend(self) -> None:
        self.depth += 1
        limit = self.config.max_depth
        if limit is not None and self.depth > limit:
            raise self.reader.error(
                f"Maximum nesting depth of {limit} exceeded",
                ErrorKind.NESTING_TOO_DEEP,
            )

    def parse_members(
        self, key: str, implicit: bool = False
    ) -> dict[str, MasonValue]:
        """
        Parses key/value pairs starting at the colon after *key*.

        Braced objects stop at and consume '}'. The implicit top-level object
        stops at end of input; a stray '}' is left for the trailing check.
        """
        reader = self.reader
        obj: dict[str, MasonValue] = {}
        while True:
            skip_whitespace(reader)
            if reader.peek() != ":":
                raise reader.error(
                    f"Expected ':' after key {key!r}", ErrorKind.EXPECTED_COLON
                )
            reader.consume()
            skip_whitespace(reader)
            obj[key] = self.parse_value()

            has_separator = skip_separator(reader)
            skip_whitespace(reader)
            char = reader.peek()
            if char is None:
                if implicit:
                    return obj
                raise reader.error(
                    "Got unexpected end of input, expected '}'",
                    ErrorKind.UNEXPECTED_END_OF_INPUT,
                )
            if char == "}":
                if not implicit:
                    reader.consume()
                return obj
            if not has_separator:
                raise reader.error(
                    f"Expected separator, '}}' or end of input, got: {char!r}",
                    ErrorKind.EXPECTED_SEPARATOR,
                )
            key = parse_key(reader)

    def parse_object(self) -> dict[str, MasonValue]:
        """Object: '{' (key ':' value (separator key ':' value)* separator?)? '}'"""
        with ProfileContext("parse_object"):
            reader = self.reader
            self._descend()
            reader.skip("{")
            skip_whitespace(reader)

            if reader.peek() == "}":
                reader.consume()
                obj: dict[str, MasonValue] = {}
            else:
                obj = self.parse_members(parse_key(reader))

            self.depth -= 1
            return obj

    def parse_array(self) -> list[MasonValue]:
        """Array: '[' (value (separator value)* separator?)? ']'"""
        with ProfileContext("parse_array"):
            reader = self.reader
            self._descend()
            reader.skip("[")
            skip_whitespace(reader)

            values: list[MasonValue] = []
            if reader.peek() == "]":
                reader.consume()
                self.depth -= 1
                return values

            while True:
                values.append(self.parse_value())

                has_separator = skip_separator(reader)
                char = reader.peek()
                if char == "]":
                    reader.consume()
                    break
                if char is None:
                    raise reader.error(
                        "Got unexpected end of input, expected ']'",
                        ErrorKind.UNEXPECTED_END_OF_INPUT,
                    )
                if not has_separator:
                    raise reader.error(
                        f"Expected separator or ']', got: {char!r}",
                        ErrorKind.EXPECTED_SEPARATOR_OR_CLOSE,
                    )

            self.depth -= 1
            return values


def loads(s: str, **kwargs: Any) -> MasonValue:
    """
    Parses a MASON document held in memory into Python objects.

    Validates input type and delegates to the parser with immutable
    configuration. The first error aborts the parse.
    """
    if not isinstance(s, str):
        raise TypeError(
            f"the MASON document must be str, not {type(s).__name__}"
        )

    config = ParseConfig(**kwargs)
    return MasonParser(Reader(s), config).parse_document()


parse = loads


def load(fp: IO[str], **kwargs: Any) -> MasonValue:
    """
    Parses a MASON document from a file-like object, reading it whole first.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return loads(fp.read(), **kwargs)


__all__ = [
    "ErrorKind",
    "HotPathStats",
    "MasonDecodeError",
    "MasonParser",
    "MasonValue",
    "ParseConfig",
    "ParseError",
    "Reader",
    "clear_hot_path_stats",
    "get_hot_path_stats",
    "load",
    "loads",
    "parse",
    "parse_binary_string",
    "parse_identifier",
    "parse_key",
    "parse_number",
    "parse_raw_string",
    "parse_string",
    "skip_separator",
    "skip_space",
    "skip_whitespace",
]
