# machine_settings.py
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

from enigma_errors import InvalidConfiguration
from enigma_machine import EnigmaMachine, RotorChoice
from wheel_catalog import DEFAULT_REFLECTOR

REQUIRED_KEYS = {"rotors", "reflector", "plugboard"}


@dataclass(slots=True)
class MachineSettings:
    """Everything needed to build a machine in a known starting state."""

    rotors: List[RotorChoice] = field(
        default_factory=lambda: [(0, "A", "A"), (1, "A", "A"), (2, "A", "A")]
    )
    reflector: str = DEFAULT_REFLECTOR
    plugboard: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "MachineSettings":
        missing = REQUIRED_KEYS - data.keys()
        if missing:
            raise InvalidConfiguration(
                f"Missing keys in config: {', '.join(sorted(missing))}"
            )

        if not isinstance(data["rotors"], list):
            raise InvalidConfiguration(f"rotors must be a list, got {data['rotors']!r}")
        if not isinstance(data["reflector"], str):
            raise InvalidConfiguration(f"reflector must be a string, got {data['reflector']!r}")

        rotors: List[Tuple[int, str, str]] = []
        for entry in data["rotors"]:
            if not isinstance(entry, (list, tuple)) or len(entry) != 3:
                raise InvalidConfiguration(
                    f"Rotor entry {entry!r} must be [index, ring, start]"
                )
            index, ring, start = entry
            rotors.append((index, ring, start))

        plugs = data["plugboard"]
        if isinstance(plugs, list) and all(isinstance(p, str) for p in plugs):
            plugs = " ".join(plugs)          # ["AB", "CD"] is accepted too
        if not isinstance(plugs, str):
            raise InvalidConfiguration(
                f"plugboard must be a string or a list of strings, got {data['plugboard']!r}"
            )

        return cls(rotors=rotors, reflector=data["reflector"], plugboard=plugs)

    def to_dict(self) -> dict:
        return {
            "rotors": [list(r) for r in self.rotors],
            "reflector": self.reflector,
            "plugboard": self.plugboard,
        }

    def build(self) -> EnigmaMachine:
        """Return a fresh machine; never reuse one across messages."""
        return EnigmaMachine(self.rotors, self.reflector, self.plugboard)


def load_config(path: str | Path) -> MachineSettings:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise InvalidConfiguration(f"{path}: not valid JSON ({exc})") from exc
    if not isinstance(data, dict):
        raise InvalidConfiguration(f"{path}: expected a JSON object")
    return MachineSettings.from_dict(data)
