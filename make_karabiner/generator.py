"""Build a Karabiner configuration from a list of key mappings."""

from __future__ import annotations

from collections.abc import Iterable

from .keycodes import process_key_symbol
from .models import FromEvent, KarabinerFile, Manipulator, Modifiers, Rule, ToEvent

_LEFT_SHIFT = "left_shift"


def _with_left_shift(modifiers: list[str]) -> list[str]:
    if _LEFT_SHIFT in modifiers:
        return list(modifiers)
    return [*modifiers, _LEFT_SHIFT]


def _is_single_lowercase_letter(symbol: str) -> bool:
    return len(symbol) == 1 and "a" <= symbol <= "z"


def generate_karabiner_config(
    description: str, mappings_to_process: Iterable[tuple[str, str]]
) -> KarabinerFile:
    """Create a file with one rule holding a manipulator per mapping.

    Mappings whose source is a single lower-case letter get a second,
    shifted manipulator so that upper-case input is remapped too.
    """
    manipulators: list[Manipulator] = []
    for from_symbol, to_symbol in mappings_to_process:
        source = process_key_symbol(from_symbol)
        target = process_key_symbol(to_symbol)

        from_modifiers = (
            Modifiers(mandatory=list(source.mandatory_modifiers))
            if source.mandatory_modifiers
            else None
        )
        to_modifiers = list(target.mandatory_modifiers) or None
        manipulators.append(
            Manipulator(
                FromEvent(source.key_code, from_modifiers),
                ToEvent(target.key_code, to_modifiers),
            )
        )

        if _is_single_lowercase_letter(from_symbol):
            manipulators.append(
                Manipulator(
                    FromEvent(
                        source.key_code,
                        Modifiers(mandatory=_with_left_shift(source.mandatory_modifiers)),
                    ),
                    ToEvent(target.key_code, _with_left_shift(target.mandatory_modifiers)),
                )
            )

    return KarabinerFile([Rule(description, manipulators)])