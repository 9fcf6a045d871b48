"""Translation of JIS key symbols into Karabiner key codes."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType

JIS_TO_KARABINER = MappingProxyType(
    {
        "-": "hyphen",
        ",": "comma",
        ".": "period",
        "/": "slash",
        "=": "equal_sign",
        "@": "open_bracket",
        "[": "close_bracket",
        "]": "backslash",
        ";": "semicolon",
        ":": "quote",
        "_": "international1",
    }
)

# Symbols typed on a JIS keyboard as shift plus another key.
_SHIFTED_SYMBOLS = MappingProxyType({"=": "-", "'": "7"})


@dataclass
class TransformedKey:
    """A Karabiner key code together with the modifiers it needs."""

    key_code: str = ""
    mandatory_modifiers: list[str] = field(default_factory=list)


def convert_jis_symbol_to_keycode_str(jis_symbol: str) -> str | None:
    """Return the Karabiner key code for a JIS symbol, or None if unmapped."""
    return JIS_TO_KARABINER.get(jis_symbol)


def process_key_symbol(symbol_str: str) -> TransformedKey:
    """Turn a symbol from a layout table into a key code and modifiers."""
    base = _SHIFTED_SYMBOLS.get(symbol_str)
    if base is not None:
        key_code = convert_jis_symbol_to_keycode_str(base) or base
        return TransformedKey(key_code, ["left_shift"])
    key_code = convert_jis_symbol_to_keycode_str(symbol_str) or symbol_str
    return TransformedKey(key_code)