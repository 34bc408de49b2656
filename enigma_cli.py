# enigma_cli.py
from __future__ import annotations

import argparse
import logging
import sys

from enigma_debug import COMPONENTS, debug
from enigma_errors import InvalidConfiguration
from enigma_machine import EnigmaMachine
from machine_settings import MachineSettings, load_config
from wheel_catalog import DEFAULT_REFLECTOR, rotor_index

# ────────────────────────────────────────────────────────────────────────
#  0. Settings from the command line
# ────────────────────────────────────────────────────────────────────────


def _three_letters(value: str, what: str) -> str:
    if len(value) != 3:
        raise InvalidConfiguration(f"{what} must be 3 letters, got {value!r}")
    return value


def settings_from_args(args: argparse.Namespace) -> MachineSettings:
    if args.config:
        return load_config(args.config)

    indices = [rotor_index(tok) for tok in args.rotors]
    rings = _three_letters(args.rings, "Ring settings")
    starts = _three_letters(args.positions, "Start positions")
    return MachineSettings(
        rotors=list(zip(indices, rings, starts)),
        reflector=args.reflector,
        plugboard=args.plugboard,
    )


# ────────────────────────────────────────────────────────────────────────
#  1. Output helpers
# ────────────────────────────────────────────────────────────────────────


def group_blocks(text: str, block: int) -> str:
    """Classic five-letter groups; non-letters are left out of grouped output."""
    if block <= 0:
        return text
    letters = "".join(ch for ch in text if ch.isascii() and ch.isalpha())
    return " ".join(letters[i : i + block] for i in range(0, len(letters), block))


def run_message(machine: EnigmaMachine, text: str, block: int) -> str:
    """Process *text* from the machine's start positions."""
    machine.reset()
    return group_blocks(machine.process_text(text), block)


# ────────────────────────────────────────────────────────────────────────
#  2. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encrypt or decrypt with an Enigma I")
    p.add_argument("-m", "--message", metavar="TEXT", help="Text to process. If omitted, an interactive REPL starts.")
    p.add_argument("--config", metavar="FILE", help="Load machine settings from JSON instead of the flags below.")
    p.add_argument("--rotors", nargs=3, default=["0", "1", "2"], metavar="ROTOR", help="Three rotors left to right, by catalog index or name (default: 0 1 2).")
    p.add_argument("--rings", default="AAA", help="Ring settings left to right (default: AAA)")
    p.add_argument("--positions", default="AAA", help="Start positions left to right (default: AAA)")
    p.add_argument("--reflector", default=DEFAULT_REFLECTOR, help="Reflector A, B or C (default: B)")
    p.add_argument("--plugboard", default="", metavar="PAIRS", help='Plug pairs, e.g. "AB CD EF"')
    p.add_argument("--groups", type=int, default=0, metavar="N", help="Print output in blocks of N letters (default: 0, raw)")
    p.add_argument("--debug", nargs="+", choices=COMPONENTS, default=[], metavar="COMPONENT", help=f"Log components: {', '.join(COMPONENTS)}")
    p.add_argument("--log-file", metavar="FILE", help="Also write debug output to FILE")
    return p.parse_args(argv)


# ────────────────────────────────────────────────────────────────────────
#  3. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    debug.enable(*args.debug)
    handlers: list[logging.Handler] = []

    try:
        try:
            if args.debug:
                handlers.append(debug.attach(logging.StreamHandler()))
            if args.log_file:
                handlers.append(debug.attach(logging.FileHandler(args.log_file, encoding="utf-8")))
            machine = settings_from_args(args).build()
        except (InvalidConfiguration, OSError) as e:
            sys.exit(f"Failed to load configuration: {e}")
        _run(machine, args)
    finally:
        for handler in handlers:
            debug.detach(handler)
        debug.disable(*args.debug)


def _run(machine: EnigmaMachine, args: argparse.Namespace) -> None:
    # one-shot mode ------------------------------------------------------
    if args.message is not None:
        print(run_message(machine, args.message, args.groups))
        return

    # interactive REPL ---------------------------------------------------
    print(f"Loaded {machine!r}")
    print("Type blank line to quit.\n")
    while True:
        try:
            txt = input("Message > ")
        except EOFError:
            break
        if not txt.strip():
            break
        print(run_message(machine, txt, args.groups))


if __name__ == "__main__":
    main()
