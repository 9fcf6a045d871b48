"""Data model of a Karabiner-Elements complex-modification file."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Modifiers:
    """Modifier requirements of a ``from`` event."""

    mandatory: list[str] = field(default_factory=list)
    optional: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.mandatory:
            data["mandatory"] = list(self.mandatory)
        if self.optional:
            data["optional"] = list(self.optional)
        return data


@dataclass
class FromEvent:
    """The key press a manipulator reacts to."""

    key_code: str
    modifiers: Modifiers | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"key_code": self.key_code}
        if self.modifiers is not None:
            data["modifiers"] = self.modifiers.to_dict()
        return data


@dataclass
class ToEvent:
    """The key press a manipulator emits."""

    key_code: str
    modifiers: list[str] | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"key_code": self.key_code}
        if self.modifiers is not None:
            data["modifiers"] = list(self.modifiers)
        return data


@dataclass
class Manipulator:
    """A single remapping from one key event to another."""

    from_event: FromEvent
    to_event: ToEvent
    type: str = "basic"

    def to_dict(self) -> dict[str, Any]:
        return {
            "from": self.from_event.to_dict(),
            "to": self.to_event.to_dict(),
            "type": self.type,
        }


@dataclass
class Rule:
    """A described group of manipulators."""

    description: str
    manipulators: list[Manipulator] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "manipulators": [m.to_dict() for m in self.manipulators],
        }


@dataclass
class KarabinerFile:
    """A whole complex-modification file."""

    rules: list[Rule] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"rules": [rule.to_dict() for rule in self.rules]}

    def to_json(self) -> str:
        """Render the file as pretty-printed JSON."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)