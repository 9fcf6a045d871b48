"""Command line entry point that writes a Karabiner layout file."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

from .generator import generate_karabiner_config
from .mappings_parser import ParseError, parse_mappings_from_rust_file

DEFAULT_OUTPUT = "./layout.json"
DEFAULT_DESCRIPTION = "JIS配列から自作配列への変換"

_VALUE_OPTIONS = {
    "--input-rs": ("input_path", "a file path"),
    "--output": ("output_path", "a file path"),
    "--description": ("description", "a value"),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    options: dict[str, str | None] = {
        "input_path": None,
        "output_path": DEFAULT_OUTPUT,
        "description": DEFAULT_DESCRIPTION,
    }

    remaining = iter(args)
    for arg in remaining:
        if arg not in _VALUE_OPTIONS:
            continue
        key, what = _VALUE_OPTIONS[arg]
        value = next(remaining, None)
        if value is None:
            print(f"Error: {arg} requires {what}", file=sys.stderr)
            return 1
        options[key] = value

    input_path = options["input_path"]
    if input_path is None:
        print(
            "Error: Input Rust file path must be specified with --input-rs <path>",
            file=sys.stderr,
        )
        return 1
    output_path = options["output_path"] or DEFAULT_OUTPUT
    description = options["description"] or ""

    print(f"Reading mappings from: {input_path}")
    print(f"Outputting to: {output_path}")
    print(f"Using description: {description}")

    try:
        mappings = parse_mappings_from_rust_file(input_path)
    except ParseError as exc:
        print(
            f"Error parsing mappings from Rust file '{input_path}': {exc}",
            file=sys.stderr,
        )
        return 1

    config = generate_karabiner_config(description, mappings)
    json_text = config.to_json()

    try:
        Path(output_path).write_bytes(json_text.encode("utf-8"))
    except OSError as exc:
        print(f"Failed to write to {output_path}: {exc}", file=sys.stderr)
        return 1
    print(f"Successfully wrote to {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())