"""
Command-line front end printing a MASON document as JSON.

Reads the named file, or standard input when no file is given, and prints
the parsed tree as indented JSON. Binary strings are printed as base64.
"""

import base64
import json
import sys
from collections.abc import Sequence
from typing import Any

import mason

USAGE = "Usage: mason [--help] [file]"

_MAX_SAFE_INTEGER = 2**53


def to_json_compatible(value: mason.MasonValue) -> Any:
    """Recursively converts a parsed tree into values json.dumps accepts."""
    if isinstance(value, bytes):
        return base64.b64encode(value).decode("ascii")
    if isinstance(value, list):
        return [to_json_compatible(item) for item in value]
    if isinstance(value, dict):
        return {key: to_json_compatible(item) for key, item in value.items()}
    # Whole numbers print without a trailing .0 while they are exact integers
    if (
        isinstance(value, float)
        and value.is_integer()
        and abs(value) < _MAX_SAFE_INTEGER
    ):
        return int(value)
    return value


def main(argv: Sequence[str] | None = None) -> int:
    """Runs the front end and returns the process exit status."""
    if argv is None:
        argv = sys.argv[1:]

    path: str | None = None
    for arg in argv:
        if arg == "--help":
            print(USAGE)
            return 0
        if arg.startswith("-"):
            print(f"Unknown option: {arg}", file=sys.stderr)
            print(USAGE, file=sys.stderr)
            return 1
        if path is None:
            path = arg
        else:
            print(f"Unexpected parameter: {arg}", file=sys.stderr)

    try:
        if path is None:
            if hasattr(sys.stdin, "reconfigure"):
                sys.stdin.reconfigure(encoding="utf-8")
            value = mason.load(sys.stdin)
        else:
            with open(path, encoding="utf-8") as fp:
                value = mason.load(fp)
    except OSError as e:
        print(f"{path or '<stdin>'}: {e.strerror}", file=sys.stderr)
        return 1
    except (UnicodeDecodeError, mason.MasonDecodeError) as e:
        print(f"{path or '<stdin>'}: {e}", file=sys.stderr)
        return 1

    print(json.dumps(to_json_compatible(value), indent=4, ensure_ascii=False))
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
