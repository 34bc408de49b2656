# key_sheet.py
from __future__ import annotations

import argparse
import json
from pathlib import Path
from random import Random, SystemRandom
from typing import List

from machine_settings import MachineSettings
from rotor_and_reflector import ALPHA26
from wheel_catalog import REFLECTOR_CATALOG, ROTOR_CATALOG

MAX_PAIRS = 13

# ── helpers ───────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def choose_pairs(alpha: str, k: int, rng: Random | SystemRandom) -> List[str]:
    """Return *k* disjoint plug pairs."""
    k = max(0, min(k, len(alpha) // 2))
    pool = list(alpha)
    rng.shuffle(pool)
    return [a + b for a, b in zip(pool[::2], pool[1::2])][:k]


def generate_settings(rng: Random | SystemRandom, pairs: int = 10) -> MachineSettings:
    """Draw one day's settings: three distinct rotors, rings, key, plugs."""
    indices = rng.sample(range(len(ROTOR_CATALOG)), 3)
    rotors = [(i, rng.choice(ALPHA26), rng.choice(ALPHA26)) for i in indices]
    reflector = rng.choice(sorted(REFLECTOR_CATALOG))
    plugs = choose_pairs(ALPHA26, pairs, rng)
    return MachineSettings(rotors=rotors, reflector=reflector, plugboard=" ".join(plugs))


def parse_cli(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate random Enigma settings")
    p.add_argument("--seed", type=int, help="Deterministic seed (omit for random)")
    p.add_argument(
        "--pairs",
        type=int,
        default=10,
        choices=range(0, MAX_PAIRS + 1),
        metavar=f"0-{MAX_PAIRS}",
        help="Number of plugboard pairs (default: 10)",
    )
    p.add_argument(
        "--outfile",
        type=Path,
        help="Destination JSON file (default: print to stdout)",
    )
    return p.parse_args(argv)


# ── main ─────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> None:
    args = parse_cli(argv)
    settings = generate_settings(build_rng(args.seed), args.pairs)
    text = json.dumps(settings.to_dict(), indent=2)

    if args.outfile is None:
        print(text)
        return

    args.outfile.write_text(text, encoding="utf-8")
    names = " ".join(ROTOR_CATALOG[i][0] for i, _, _ in settings.rotors)
    print(f"Wrote {args.outfile}\n"
        f"   rotors      : {names}\n"
        f"   reflector   : {settings.reflector}\n"
        f"   plug pairs  : {len(settings.plugboard.split())}")


if __name__ == "__main__":
    main()
