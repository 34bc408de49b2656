# rotor_and_reflector.py
from __future__ import annotations

import string

from enigma_debug import debug
from enigma_errors import InvalidConfiguration

ALPHA26 = string.ascii_uppercase


class Rotor:
    def __init__(
        self,
        wiring: str,
        notch: str,
        *,
        name: str = "",
        alphabet: str = ALPHA26,
    ) -> None:
        if sorted(wiring) != sorted(alphabet):
            raise InvalidConfiguration("wiring must be a permutation of alphabet")
        if len(notch) != 1 or notch not in alphabet:
            raise InvalidConfiguration(f"Notch {notch!r} must be one alphabet symbol")

        self.name = name
        self.alphabet = alphabet
        self.size = len(alphabet)
        self.wiring = wiring

        # integer lookup tables
        self._fwd = [alphabet.index(c) for c in wiring]
        self._rev = [wiring.index(c) for c in alphabet]

        self.notch = notch
        self.position = 0
        self.ring_setting = 0

    # ── ring & window helpers ─────────────────────────────────────
    def set_ring(self, letter: str) -> "Rotor":
        self.ring_setting = self._offset_of(letter, "ring setting")
        return self

    def set_window(self, letter: str) -> "Rotor":
        self.position = self._offset_of(letter, "start position")
        return self

    def _offset_of(self, letter: str, what: str) -> int:
        if not isinstance(letter, str) or len(letter) != 1:
            raise InvalidConfiguration(f"{what} must be a single letter, got {letter!r}")
        up = letter.upper()
        if up not in self.alphabet:
            raise InvalidConfiguration(f"{what} {letter!r} not in alphabet")
        return self.alphabet.index(up)

    @property
    def window(self) -> str:
        return self.alphabet[self.position]

    # ── stepping --------------------------------------------------
    def at_notch(self) -> bool:
        return self.alphabet[self.position] == self.notch

    def step(self) -> None:
        self.position = (self.position + 1) % self.size
        debug.log("rotor", f"Rotor {self.name or '?'} -> {self.window}")

    # ── signal paths ---------------------------------------------
    def forward(self, sig: int) -> int:
        offset = (self.position - self.ring_setting) % self.size
        mapped = self._fwd[(sig + offset) % self.size]
        return (mapped - offset) % self.size

    def backward(self, sig: int) -> int:
        offset = (self.position - self.ring_setting) % self.size
        mapped = self._rev[(sig + offset) % self.size]
        return (mapped - offset) % self.size

    # ── niceties --------------------------------------------------
    def __repr__(self) -> str:
        return f"<Rotor {self.name} pos={self.position} ring={self.ring_setting}>"


class Reflector:
    def __init__(self, wiring: str, *, name: str = "", alphabet: str = ALPHA26) -> None:
        if len(wiring) != len(alphabet):
            raise InvalidConfiguration("Reflector wiring length must match alphabet length")

        # ensure involution property (w[i] = j ⇒ w[j] = i) and no self-maps
        for i, c in enumerate(wiring):
            if c not in alphabet:
                raise InvalidConfiguration(f"Reflector symbol {c!r} not in alphabet")
            j = alphabet.index(c)
            if wiring[j] != alphabet[i] or i == j:
                raise InvalidConfiguration("Reflector wiring must be an involution with no fixed points")

        self.name = name
        self.alphabet = alphabet
        self.size = len(alphabet)
        self.wiring = wiring
        self._map = [alphabet.index(c) for c in wiring]

    def reflect(self, sig: int) -> int:
        mapped = self._map[sig]
        debug.log("reflector", f"{self.alphabet[sig]}->{self.alphabet[mapped]}")
        return mapped

    def __repr__(self) -> str:
        return f"<Reflector {self.name}>"
