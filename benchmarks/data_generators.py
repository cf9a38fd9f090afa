"""
Test data generators for parsing benchmarks.

JSON documents are also MASON documents, so most generators emit JSON
through the standard library and can be fed to every parser. The
"mason_config" generator uses syntax only mason accepts.
"""

import json
import random
import string
from typing import Any

JSON_DATA_TYPES = [
    "small_object",
    "mixed_array",
    "nested_structure",
    "string_heavy",
]

MASON_DATA_TYPES = [
    "mason_config",
    "raw_string_heavy",
    "binary_string_heavy",
    "grouped_numbers",
]

_ESCAPE_PROBABILITY = 0.3


def generate_test_data(data_type: str) -> str:
    """Generates test data based on specified type."""
    generators = {
        "small_object": _generate_small_object,
        "mixed_array": _generate_mixed_array,
        "nested_structure": _generate_nested_structure,
        "string_heavy": _generate_string_heavy,
        "mason_config": _generate_mason_config,
        "raw_string_heavy": _generate_raw_string_heavy,
        "binary_string_heavy": _generate_binary_string_heavy,
        "grouped_numbers": _generate_grouped_numbers,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type]()


def _generate_small_object() -> str:
    """Generates a small object (< 1KB) with basic key-value pairs."""
    data = {
        "id": 12345,
        "name": "Alice Johnson",
        "active": True,
        "balance": 1234.56,
        "tags": ["admin", "ops"],
        "metadata": {"created": "2024-01-15T10:30:00Z", "source": None},
    }
    return json.dumps(data)


def _generate_mixed_array() -> str:
    """Generates a large array with mixed scalar and object entries."""
    choices = [
        lambda i: random.randint(-1000, 1000),
        lambda i: round(random.uniform(-100.0, 100.0), 3),
        lambda i: _random_string(random.randint(5, 30)),
        lambda i: random.choice([True, False, None]),
        lambda i: {"index": i, "value": _random_string(10)},
    ]
    array: list[Any] = [random.choice(choices)(i) for i in range(500)]
    return json.dumps(array)


def _generate_nested_structure() -> str:
    """Generates a deeply nested structure."""

    def create_nested(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _random_string(10)}

        return {
            "level": depth,
            "items": [create_nested(depth - 1) for _ in range(3)],
            "nested": create_nested(depth - 1),
        }

    return json.dumps(create_nested(7))


def _generate_string_heavy() -> str:
    """Generates strings dense with escape sequences."""

    def create_escaped_string() -> str:
        chars = []
        for _ in range(50):
            if random.random() < _ESCAPE_PROBABILITY:
                chars.append(
                    random.choice(
                        ['\\"', "\\\\", "\\/", "\\n", "\\t", "\\u00e9"]
                    )
                )
            else:
                chars.append(
                    random.choice(string.ascii_letters + string.digits + " ")
                )
        return '"' + "".join(chars) + '"'

    # Built by hand so the escapes reach the parser unchanged
    items = ", ".join(create_escaped_string() for _ in range(200))
    return "{\"strings\": [" + items + "]}"


def _generate_mason_config() -> str:
    """Generates a brace-less document using comments, radixes and raw strings."""
    lines = ["// generated service inventory"]
    for i in range(100):
        lines.append(f"service_{i}: {{")
        lines.append(f"    name: \"{_random_string(12)}\"")
        lines.append(f"    port: 0x{random.randint(1024, 65535):X}")
        lines.append(f"    quota: {random.randint(1, 999)}'000'000")
        lines.append(f"    pattern: r#\"^{_random_string(6)}\"[0-9]+$\"#")
        lines.append(f"    key: b\"\\x{random.randint(0, 255):02x}{_random_string(4)}\"")
        lines.append("    /* flags */ enabled: true")
        lines.append("}")
    return "\n".join(lines)


def _random_string(length: int) -> str:
    """Generates a random string of specified length."""
    return "".join(random.choices(string.ascii_letters, k=length))


def _generate_raw_string_heavy() -> str:
    """Generates regex-like payloads in hash-guarded raw strings."""
    patterns = []
    for _ in range(200):
        body = "".join(
            random.choice([r"\d+", r"\s*", '"', "[a-z]", _random_string(4)])
            for _ in range(12)
        )
        patterns.append(f'    r#"{body}"#')
    return "patterns: [\n" + "\n".join(patterns) + "\n]"


def _generate_binary_string_heavy() -> str:
    """Generates binary strings mixing ASCII literals and \\x escapes."""
    blobs = []
    for _ in range(200):
        parts = []
        for _ in range(32):
            byte = random.randint(0, 255)
            if 0x20 <= byte < 0x7F and chr(byte) not in '"\\':
                parts.append(chr(byte))
            else:
                parts.append(f"\\x{byte:02x}")
        blobs.append('    b"' + "".join(parts) + '"')
    return "blobs: [\n" + "\n".join(blobs) + "\n]"


def _generate_grouped_numbers() -> str:
    """Generates numbers in every radix with ' digit grouping."""
    lines = []
    for i in range(500):
        value = random.randint(0, 2**32)
        choice = i % 4
        if choice == 0:
            lines.append(f"n{i}: {value:_d}".replace("_", "'"))
        elif choice == 1:
            lines.append(f"n{i}: 0x{value:_X}".replace("_", "'"))
        elif choice == 2:
            lines.append(f"n{i}: 0b{value:_b}".replace("_", "'"))
        else:
            lines.append(f"n{i}: -{value}.{random.randint(0, 999):03d}e-3")
    return "\n".join(lines)
