# wheel_catalog.py
from __future__ import annotations

from typing import Dict, List, Tuple

from enigma_debug import debug
from enigma_errors import InvalidConfiguration
from rotor_and_reflector import Rotor, Reflector

# ────────────────────────────────────────────────────────────────────────
#  Wheel database
# ────────────────────────────────────────────────────────────────────────

# Enigma I rotors, indexed by catalog position: (name, wiring, notch)
ROTOR_CATALOG: List[Tuple[str, str, str]] = [
    ("I",   "EKMFLGDQVZNTOWYHXUSPAIBRCJ", "Q"),
    ("II",  "AJDKSIRUXBLHWTMCQGZNPYFVOE", "E"),
    ("III", "BDFHJLCPRTXVZNYEIWGAKMUSQO", "V"),
    ("IV",  "ESOVPZJAYQUIRHXLNFTGKDCMWB", "J"),
    ("V",   "VZBRGITYUPSDNHLXAWMJQOFECK", "Z"),
]

REFLECTOR_CATALOG: Dict[str, str] = {
    "A": "EJMZALYXVBWFCRQUONTSPIKHGD",
    "B": "YRUHQSLDPXNGOKMIEBFZCWVJAT",
    "C": "FVPJIAOYEDRZXWGCTKUQSBNMHL",
}

DEFAULT_REFLECTOR = "B"


# ────────────────────────────────────────────────────────────────────────
#  Lookups – every call hands out a fresh wheel, catalog data is never shared
# ────────────────────────────────────────────────────────────────────────


def new_rotor(index: int) -> Rotor:
    """Build rotor number *index* (0 = I, 1 = II, …) from the catalog."""
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidConfiguration(f"Rotor catalog index must be an integer, got {index!r}")
    if not 0 <= index < len(ROTOR_CATALOG):
        hi = len(ROTOR_CATALOG) - 1
        raise InvalidConfiguration(f"Rotor catalog index {index} out of range 0–{hi}")
    name, wiring, notch = ROTOR_CATALOG[index]
    return Rotor(wiring, notch, name=name)


def new_reflector(selector: str) -> Reflector:
    """Build the reflector for *selector*; unknown selectors get UKW-B."""
    key = selector.upper() if isinstance(selector, str) else ""
    if key not in REFLECTOR_CATALOG:
        debug.log("config", f"unknown reflector {selector!r}, using {DEFAULT_REFLECTOR}")
        key = DEFAULT_REFLECTOR
    return Reflector(REFLECTOR_CATALOG[key], name=key)


def rotor_index(token: str) -> int:
    """Accept either a catalog index ("2") or a rotor name ("III")."""
    token = token.strip()
    if token.isdigit():
        return int(token)
    for idx, (name, _wiring, _notch) in enumerate(ROTOR_CATALOG):
        if name == token.upper():
            return idx
    raise InvalidConfiguration(f"Unknown rotor {token!r}")


__all__ = [
    "ROTOR_CATALOG",
    "REFLECTOR_CATALOG",
    "DEFAULT_REFLECTOR",
    "new_rotor",
    "new_reflector",
    "rotor_index",
]
