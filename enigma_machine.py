# enigma_machine.py  ────────────────────────────────────────────────
from __future__ import annotations

from typing import Sequence, Tuple

from enigma_debug import debug
from enigma_errors import InvalidConfiguration
from keyboard_and_plugboard import Keyboard, Plugboard
from wheel_catalog import new_reflector, new_rotor

RotorChoice = Tuple[int, str, str]      # (catalog index, ring letter, start letter)


class EnigmaMachine:
    """Three-rotor Enigma I.

    Rotors are held left-to-right as slots 0, 1, 2; the signal enters at
    slot 2. Enciphering and deciphering are the same operation, so a
    second machine built from identical settings turns ciphertext back
    into plaintext.

    A machine mutates on every letter it processes. Give each independent
    message stream its own instance.
    """

    def __init__(
        self,
        rotors: Sequence[RotorChoice],
        reflector: str = "B",
        plugboard: str = "",
    ) -> None:
        if len(rotors) != 3:
            raise InvalidConfiguration(f"Need exactly 3 rotors, got {len(rotors)}")

        self.kb = Keyboard()
        self.pb = Plugboard(plugboard)
        self.reflector = new_reflector(reflector)
        self.rotors = []
        for choice in rotors:
            try:
                index, ring, start = choice
            except (TypeError, ValueError):
                raise InvalidConfiguration(
                    f"Rotor choice {choice!r} must be (index, ring, start)"
                ) from None
            self.rotors.append(new_rotor(index).set_ring(ring).set_window(start))

        self._start = self.window
        debug.log("config", f"built {self!r}")

    # ── key helpers ─────────────────────────────────────────────

    @property
    def positions(self) -> tuple[int, ...]:
        return tuple(r.position for r in self.rotors)

    @property
    def window(self) -> str:
        """Letters currently showing in the three windows, left to right."""
        return "".join(r.window for r in self.rotors)

    def set_key(self, key: str) -> None:
        """Rotate each rotor to its visible window letter."""
        if len(key) != len(self.rotors):
            raise InvalidConfiguration(f"Key {key!r} must be {len(self.rotors)} letters")
        for rotor, letter in zip(self.rotors, key):
            rotor.set_window(letter)

    def reset(self) -> None:
        """Rewind the rotors to the start positions given at construction."""
        self.set_key(self._start)

    # ── stepping logic  ─────────────────────────────────────────

    def step_rotors(self) -> None:
        """Advance the rotors for one key-press, double step included."""
        left, middle, right = self.rotors

        # decide from the pre-step positions, then move
        step_L = middle.at_notch()
        step_M = step_L or right.at_notch()

        if step_L:
            left.step()
        if step_M:
            middle.step()
        right.step()
        debug.log("stepping", f"window {self.window}")

    # ── encipher  ───────────────────────────────────────────────

    def process_character(self, ch: str) -> str:
        if not self.kb.accepts(ch):
            return ch

        self.step_rotors()

        signal = self.kb.forward(ch.upper())
        signal = self.pb.forward(signal)

        for rotor in reversed(self.rotors):
            signal = rotor.forward(signal)

        signal = self.reflector.reflect(signal)

        for rotor in self.rotors:
            signal = rotor.backward(signal)

        signal = self.pb.backward(signal)
        out_ch = self.kb.backward(signal)
        debug.log("encipher", f"{ch}->{out_ch}")
        return out_ch.lower() if ch.islower() else out_ch

    def process_text(self, text: str) -> str:
        return "".join(self.process_character(ch) for ch in text)

    def __repr__(self) -> str:
        names = "-".join(r.name for r in self.rotors)
        return (
            f"<EnigmaMachine {names} window={self.window} "
            f"reflector={self.reflector.name} plugs={self.pb.pairs}>"
        )
