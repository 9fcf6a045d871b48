"""Read the ``MAPPINGS`` constant out of a Rust layout source file."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

LAYOUT_MAPPINGS: tuple[tuple[str, str], ...] = (
    ("q", "k"), ("w", "y"), ("e", "o"), ("r", "."), ("t", "="), ("y", "f"),
    ("u", "c"), ("i", "l"), ("o", "p"), ("p", "q"), ("@", "z"),
    ("a", "h"), ("s", "i"), ("d", "e"), ("f", "a"), ("g", "u"), ("h", "d"),
    ("j", "s"), ("k", "t"), ("l", "n"), (";", "r"), (":", "v"),
    ("z", "j"), ("x", ";"), ("c", ","), ("v", "'"), ("b", "/"), ("n", "w"),
    ("m", "g"), (",", "m"), (".", "b"), ("/", "x"),
)

MODIFIERS_LAYOUT_MAPPINGS: tuple[tuple[str, str], ...] = (
    ("japanese_eisuu", "left_control"),
    ("japanese_kana", "left_shift"),
)


class ParseError(Exception):
    """Base class of errors met while reading mappings."""

    prefix = "Parse error"

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.prefix}: {self.detail}"


class FileReadError(ParseError):
    prefix = "File read error"


class SourceParseError(ParseError):
    prefix = "Rust code parse error"


class MappingsNotFound(ParseError):
    def __str__(self) -> str:
        return "'MAPPINGS' constant not found"


class InvalidMappingsFormat(ParseError):
    prefix = "Invalid 'MAPPINGS' format"


class _Kind(Enum):
    IDENT = "ident"
    STR = "str"
    LITERAL = "literal"
    LIFETIME = "lifetime"
    PUNCT = "punct"


@dataclass(frozen=True)
class _Token:
    kind: _Kind
    text: str
    value: str | None = None

    @property
    def opens(self) -> bool:
        return self.kind is _Kind.PUNCT and self.text in "([{"

    def is_punct(self, char: str) -> bool:
        return self.kind is _Kind.PUNCT and self.text == char

    def is_ident(self, name: str) -> bool:
        return self.kind is _Kind.IDENT and self.text == name


_RAW_STRING = re.compile(r'(br|cr|r)(#*)"')
_QUOTED_STRING = re.compile(r'(b|c)?"')
_NUMBER = re.compile(r"\d\w*(?:\.\d\w*)?")
_IDENT = re.compile(r"(?:r#)?[^\W\d]\w*")
_SUFFIX = re.compile(r"[^\W\d]\w*")
_UNICODE_ESCAPE = re.compile(r"\{([0-9A-Fa-f_]{1,8})\}")
_SIMPLE_ESCAPES = {"n": "\n", "r": "\r", "t": "\t", "\\": "\\", "0": "\0", "'": "'", '"': '"'}
_CLOSERS = {")": "(", "]": "[", "}": "{"}

_NOT_ARRAY_REFERENCE = "MAPPINGS contant expression in not an array reference `&[...]`"


def _skip_suffix(source: str, pos: int) -> int:
    match = _SUFFIX.match(source, pos)
    return match.end() if match else pos


def _skip_block_comment(source: str, pos: int) -> int:
    depth = 0
    while pos < len(source):
        if source.startswith("/*", pos):
            depth += 1
            pos += 2
        elif source.startswith("*/", pos):
            depth -= 1
            pos += 2
            if depth == 0:
                return pos
        else:
            pos += 1
    raise SourceParseError("unterminated block comment")


def _read_escaped(source: str, pos: int, quote: str) -> tuple[str, int]:
    """Read an escaped literal body up to its closing quote."""
    parts: list[str] = []
    while pos < len(source):
        char = source[pos]
        if char == quote:
            return "".join(parts), pos + 1
        if char != "\\":
            parts.append(char)
            pos += 1
            continue
        escape = source[pos + 1 : pos + 2]
        if escape and escape in "\r\n":
            pos += 2
            while pos < len(source) and source[pos].isspace():
                pos += 1
        elif escape in _SIMPLE_ESCAPES:
            parts.append(_SIMPLE_ESCAPES[escape])
            pos += 2
        elif escape == "x":
            digits = source[pos + 2 : pos + 4]
            if not re.fullmatch(r"[0-9A-Fa-f]{2}", digits):
                raise SourceParseError("invalid hexadecimal escape")
            parts.append(chr(int(digits, 16)))
            pos += 4
        elif escape == "u":
            match = _UNICODE_ESCAPE.match(source, pos + 2)
            if match is None:
                raise SourceParseError("invalid unicode escape")
            try:
                parts.append(chr(int(match.group(1).replace("_", ""), 16)))
            except ValueError as exc:
                raise SourceParseError("invalid unicode escape") from exc
            pos = match.end()
        else:
            raise SourceParseError(f"unknown character escape `\\{escape}`")
    raise SourceParseError("unterminated literal")


def _tokenize(source: str) -> tuple[list[_Token], dict[int, int]]:
    """Split Rust source into tokens and pair up its delimiters."""
    tokens: list[_Token] = []
    matches: dict[int, int] = {}
    open_stack: list[int] = []
    pos = 0
    length = len(source)

    while pos < length:
        char = source[pos]
        if char.isspace():
            pos += 1
            continue
        if source.startswith("//", pos):
            end = source.find("\n", pos)
            pos = length if end < 0 else end
            continue
        if source.startswith("/*", pos):
            pos = _skip_block_comment(source, pos)
            continue

        raw = _RAW_STRING.match(source, pos)
        if raw:
            closer = '"' + raw.group(2)
            end = source.find(closer, raw.end())
            if end < 0:
                raise SourceParseError("unterminated raw string")
            kind = _Kind.STR if raw.group(1) == "r" else _Kind.LITERAL
            value = source[raw.end() : end]
            pos = _skip_suffix(source, end + len(closer))
            tokens.append(_Token(kind, source[raw.start() : pos], value))
            continue

        quoted = _QUOTED_STRING.match(source, pos)
        if quoted:
            value, end = _read_escaped(source, quoted.end(), '"')
            kind = _Kind.STR if quoted.group(1) is None else _Kind.LITERAL
            start, pos = pos, _skip_suffix(source, end)
            tokens.append(_Token(kind, source[start:pos], value))
            continue

        if source.startswith("b'", pos) or char == "'":
            start = pos
            body = pos + (2 if char == "b" else 1)
            if source[body : body + 1] == "\\":
                _, pos = _read_escaped(source, body, "'")
            elif body + 1 < length and source[body + 1] == "'" and source[body] != "'":
                pos = body + 2
            elif char == "'":
                label = _IDENT.match(source, body)
                if label is None:
                    raise SourceParseError("unexpected `'`")
                pos = label.end()
                tokens.append(_Token(_Kind.LIFETIME, source[start:pos]))
                continue
            else:
                raise SourceParseError("invalid byte literal")
            pos = _skip_suffix(source, pos)
            tokens.append(_Token(_Kind.LITERAL, source[start:pos]))
            continue

        number = _NUMBER.match(source, pos)
        if number:
            tokens.append(_Token(_Kind.LITERAL, number.group()))
            pos = number.end()
            continue

        ident = _IDENT.match(source, pos)
        if ident:
            tokens.append(_Token(_Kind.IDENT, ident.group()))
            pos = ident.end()
            continue

        index = len(tokens)
        tokens.append(_Token(_Kind.PUNCT, char))
        if char in "([{":
            open_stack.append(index)
        elif char in _CLOSERS:
            if not open_stack or tokens[open_stack[-1]].text != _CLOSERS[char]:
                raise SourceParseError(f"unexpected closing delimiter `{char}`")
            matches[open_stack.pop()] = index
        pos += 1

    if open_stack:
        raise SourceParseError(f"unclosed delimiter `{tokens[open_stack[-1]].text}`")
    return tokens, matches


def _find_top_level(
    tokens: list[_Token], matches: dict[int, int], start: int, char: str
) -> int:
    index = start
    while index < len(tokens):
        token = tokens[index]
        if token.opens:
            index = matches[index] + 1
            continue
        if token.is_punct(char):
            return index
        index += 1
    raise SourceParseError(f"expected `{char}`")


def _split_top_level(
    tokens: list[_Token], matches: dict[int, int], start: int, end: int
) -> tuple[list[tuple[int, int]], bool]:
    """Split a token range on top-level commas; report whether any was seen."""
    segments: list[tuple[int, int]] = []
    segment_start = start
    saw_comma = False
    index = start
    while index < end:
        token = tokens[index]
        if token.opens:
            index = matches[index] + 1
            continue
        if token.is_punct(","):
            if segment_start == index:
                raise SourceParseError("unexpected `,`")
            segments.append((segment_start, index))
            saw_comma = True
            segment_start = index + 1
        index += 1
    if segment_start < end:
        segments.append((segment_start, end))
    return segments, saw_comma


def _has_top_level(
    tokens: list[_Token], matches: dict[int, int], start: int, end: int, char: str
) -> bool:
    index = start
    while index < end:
        if tokens[index].opens:
            index = matches[index] + 1
            continue
        if tokens[index].is_punct(char):
            return True
        index += 1
    return False


def _string_value(tokens: list[_Token], start: int, end: int) -> str:
    if end - start != 1:
        raise InvalidMappingsFormat("Tuple element not a literal")
    token = tokens[start]
    if token.kind is _Kind.STR:
        return token.value or ""
    if token.kind is _Kind.LITERAL or token.is_ident("true") or token.is_ident("false"):
        raise InvalidMappingsFormat("Tuple element not a string literal")
    raise InvalidMappingsFormat("Tuple element not a literal")


def _read_pair(
    tokens: list[_Token], matches: dict[int, int], start: int, end: int
) -> tuple[str, str]:
    if not (tokens[start].is_punct("(") and matches[start] == end - 1):
        raise InvalidMappingsFormat("Array element in not a tuple")
    parts, saw_comma = _split_top_level(tokens, matches, start + 1, end - 1)
    if parts and not saw_comma:
        raise InvalidMappingsFormat("Array element in not a tuple")
    if len(parts) != 2:
        raise InvalidMappingsFormat("Tuple does not have 2 elements")
    first = _string_value(tokens, *parts[0])
    second = _string_value(tokens, *parts[1])
    return first, second


def _read_mappings(
    tokens: list[_Token], matches: dict[int, int], start: int
) -> list[tuple[str, str]]:
    equals = _find_top_level(tokens, matches, start, "=")
    semicolon = _find_top_level(tokens, matches, equals + 1, ";")
    expr_start = equals + 1
    if expr_start == semicolon:
        raise SourceParseError("expected an expression")
    if not tokens[expr_start].is_punct("&"):
        raise InvalidMappingsFormat(_NOT_ARRAY_REFERENCE)
    array = expr_start + 1
    if array < semicolon and tokens[array].is_ident("mut"):
        array += 1
    if not (
        array < semicolon
        and tokens[array].is_punct("[")
        and matches[array] == semicolon - 1
    ):
        raise InvalidMappingsFormat(_NOT_ARRAY_REFERENCE)
    close = matches[array]
    if _has_top_level(tokens, matches, array + 1, close, ";"):
        raise InvalidMappingsFormat(_NOT_ARRAY_REFERENCE)
    elements, _ = _split_top_level(tokens, matches, array + 1, close)
    return [_read_pair(tokens, matches, *element) for element in elements]


def parse_mappings(source: str) -> list[tuple[str, str]]:
    """Extract the pairs of the top-level ``const MAPPINGS`` in Rust source."""
    tokens, matches = _tokenize(source)
    index = 0
    while index < len(tokens):
        token = tokens[index]
        if token.opens:
            index = matches[index] + 1
            continue
        if (
            token.is_ident("const")
            and index + 1 < len(tokens)
            and tokens[index + 1].is_ident("MAPPINGS")
        ):
            return _read_mappings(tokens, matches, index + 2)
        index += 1
    raise MappingsNotFound()


def parse_mappings_from_rust_file(file_path: str | Path) -> list[tuple[str, str]]:
    """Read a Rust file and extract its ``MAPPINGS`` pairs."""
    try:
        content = Path(file_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(f"Failed to read file {file_path}: {exc}") from exc
    try:
        return parse_mappings(content)
    except SourceParseError as exc:
        raise SourceParseError(
            f"Failed to parse Rust file {file_path}: {exc.detail}"
        ) from exc