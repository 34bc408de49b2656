# keyboard_and_plugboard.py
from __future__ import annotations

from enigma_debug import debug
from rotor_and_reflector import ALPHA26


# ── Keyboard ──────────────────────────────────────────────────────
class Keyboard:
    def __init__(self, alphabet: str = ALPHA26) -> None:
        self.alphabet: str = alphabet
        self.alpha_to_index: dict[str, int] = {
            ch: i for i, ch in enumerate(alphabet)
        }

    def accepts(self, ch: str) -> bool:
        """True for letters the machine enciphers; everything else passes through."""
        return ch.isascii() and ch.upper() in self.alpha_to_index

    # letter → integer signal
    def forward(self, letter: str) -> int:
        try:
            sig = self.alpha_to_index[letter]
        except KeyError:
            raise ValueError(
                f"Invalid character {letter!r} for current alphabet."
            )
        debug.log("keyboard", f"{letter}->{sig}")
        return sig

    # integer signal → letter
    def backward(self, signal: int) -> str:
        if not (0 <= signal < len(self.alphabet)):
            hi = len(self.alphabet) - 1
            raise ValueError(f"Signal {signal} out of range 0–{hi}")
        return self.alphabet[signal]


# ── Plugboard ─────────────────────────────────────────────────────
class Plugboard:
    """Letter swaps applied on the way into and out of the rotor stack.

    Built from an operator string such as ``"AB CD"``. Parsing is
    permissive: tokens that are not exactly two symbols, that plug a
    symbol into itself, that leave the alphabet, or that reuse a symbol
    already plugged are dropped without raising.
    """

    def __init__(self, spec: str = "", alphabet: str = ALPHA26) -> None:
        self.alphabet: str = alphabet
        self.mapping: dict[str, str] = {ch: ch for ch in alphabet}
        used: set[str] = set()

        for raw in spec.split():
            token = raw.upper()
            if len(token) != 2:
                debug.log("plugboard", f"dropped {raw!r}: must be exactly 2 symbols")
                continue

            a, b = token
            if a == b:
                debug.log("plugboard", f"dropped {raw!r}: cannot map a symbol to itself")
                continue
            if a not in alphabet or b not in alphabet:
                debug.log("plugboard", f"dropped {raw!r}: symbol not in alphabet")
                continue
            if a in used or b in used:
                debug.log("plugboard", f"dropped {raw!r}: symbol already plugged")
                continue

            self.mapping[a], self.mapping[b] = b, a
            used.update((a, b))

    @property
    def pairs(self) -> list[str]:
        return [a + b for a, b in self.mapping.items() if a < b]

    # one private helper does the job for both directions
    def _map(self, signal: int) -> int:
        letter = self.alphabet[signal]
        mapped = self.mapping[letter]
        debug.log("plugboard", f"{signal}->{letter}->{mapped}")
        return self.alphabet.index(mapped)

    forward = _map        # alias: signal in
    backward = _map       # alias: signal out

    def __repr__(self) -> str:
        return f"<Plugboard {' '.join(self.pairs)}>"
