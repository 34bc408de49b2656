import pytest

from enigma_errors import InvalidConfiguration
from keyboard_and_plugboard import Keyboard, Plugboard
from rotor_and_reflector import ALPHA26, Reflector, Rotor
from wheel_catalog import (
    REFLECTOR_CATALOG,
    ROTOR_CATALOG,
    new_reflector,
    new_rotor,
    rotor_index,
)


# ── rotor ─────────────────────────────────────────────────────────


def test_rotor_rejects_non_permutation():
    with pytest.raises(InvalidConfiguration):
        Rotor("AACDEFGHIJKLMNOPQRSTUVWXYZ", "A")


def test_rotor_rejects_bad_notch():
    with pytest.raises(InvalidConfiguration):
        Rotor(ALPHA26, "QE")


def test_backward_undoes_forward_at_every_setting():
    rotor = new_rotor(0)
    for ring in "AKZ":
        rotor.set_ring(ring)
        for pos in range(26):
            rotor.position = pos
            assert [rotor.backward(rotor.forward(s)) for s in range(26)] == list(range(26))


def test_forward_at_home_position_is_raw_wiring():
    rotor = new_rotor(0)
    assert "".join(ALPHA26[rotor.forward(i)] for i in range(26)) == ROTOR_CATALOG[0][1]


def test_at_notch_follows_window():
    rotor = new_rotor(1).set_window("D")
    assert not rotor.at_notch()
    rotor.step()
    assert rotor.window == "E" and rotor.at_notch()


# ── reflector ─────────────────────────────────────────────────────


@pytest.mark.parametrize("name", sorted(REFLECTOR_CATALOG))
def test_catalog_reflectors_are_fixed_point_free_involutions(name):
    refl = new_reflector(name)
    for sig in range(26):
        assert refl.reflect(sig) != sig
        assert refl.reflect(refl.reflect(sig)) == sig


def test_reflector_rejects_fixed_point():
    with pytest.raises(InvalidConfiguration):
        Reflector(ALPHA26)


def test_reflector_selector_is_case_insensitive_with_fallback():
    assert new_reflector("c").name == "C"
    assert new_reflector("Q").name == "B"
    assert new_reflector("").name == "B"


# ── catalog ───────────────────────────────────────────────────────


def test_new_rotor_hands_out_fresh_objects():
    a, b = new_rotor(2), new_rotor(2)
    a.step()
    assert a is not b and b.position == 0


@pytest.mark.parametrize("token, index", [("0", 0), ("III", 2), ("iv", 3), (" V ", 4)])
def test_rotor_index_accepts_numbers_and_names(token, index):
    assert rotor_index(token) == index


def test_rotor_index_rejects_unknown_name():
    with pytest.raises(InvalidConfiguration):
        rotor_index("VIII")


# ── plugboard & keyboard ──────────────────────────────────────────


def test_plugboard_swaps_both_ways():
    pb = Plugboard("AB")
    assert pb.forward(0) == 1
    assert pb.backward(1) == 0
    assert pb.forward(2) == 2


def test_plugboard_involution_on_a_and_b():
    pb = Plugboard("AB")
    text = "ABBAAB"
    swapped = "".join(ALPHA26[pb.forward(ALPHA26.index(c))] for c in text)
    assert swapped == "BAABBA"


@pytest.mark.parametrize(
    "spec, pairs",
    [
        ("", []),
        ("AB CD", ["AB", "CD"]),
        ("ab  cd\tef", ["AB", "CD", "EF"]),
        ("AB C DEF GH", ["AB", "GH"]),
        ("AA BC", ["BC"]),
        ("AB BC CD", ["AB", "CD"]),
        ("A1 XY", ["XY"]),
    ],
)
def test_plugboard_parsing_is_permissive(spec, pairs):
    assert Plugboard(spec).pairs == pairs


def test_plugboard_caps_at_thirteen_pairs():
    spec = " ".join(ALPHA26[i : i + 2] for i in range(0, 26, 2)) + " AZ"
    assert len(Plugboard(spec).pairs) == 13


def test_keyboard_rejects_foreign_symbols():
    kb = Keyboard()
    assert kb.accepts("q") and not kb.accepts("!")
    with pytest.raises(ValueError):
        kb.forward("!")
    with pytest.raises(ValueError):
        kb.backward(26)
