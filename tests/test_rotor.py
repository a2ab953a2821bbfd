import sys
from pathlib import Path

import pytest

# Ensure project root is on path for rotorlab imports
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from rotorlab.machine.catalog import ALPHABET, CUSTOM, ROTOR_SEQUENCES
from rotorlab.machine.errors import InvalidPosition, InvalidRotorKind, InvalidStepSize
from rotorlab.machine.rotor import Rotor


ROTOR_I = ROTOR_SEQUENCES["ROTOR_I"]


@pytest.fixture
def rotor():
    return Rotor(ROTOR_I, 20, 1)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

def test_create_with_defaults():
    r = Rotor(ROTOR_I)
    assert r.letters == ROTOR_I
    assert r.position == 0
    assert r.step_size == 1
    assert r.current_letter == "J"
    assert r.wrapped is False


@pytest.mark.parametrize("start", [12, "F"])
def test_create_with_numeric_or_letter_position(start):
    r = Rotor(ROTOR_I, start, 3)
    assert r.position == 12
    assert r.step_size == 3
    assert r.current_letter == "F"


def test_lowercase_letters_are_normalised():
    r = Rotor(ROTOR_I.lower(), "f")
    assert r.letters == ROTOR_I
    assert r.position == 12


@pytest.mark.parametrize("letters", [
    "TOO SHORT",
    ROTOR_I + "X",
    "AACDEFGHIJKLMNOPQRSTUVWXYZ",
    "ABCDEFGHIJKLMNOPQRSTUVWXY1",
])
def test_rejects_bad_letter_sequences(letters):
    with pytest.raises(InvalidRotorKind):
        Rotor(letters)


@pytest.mark.parametrize("step", [0, 26, -1, "2", True])
def test_rejects_bad_step_size(step):
    with pytest.raises(InvalidStepSize):
        Rotor(ROTOR_I, 0, step)


def test_kind_name():
    assert Rotor(ROTOR_SEQUENCES["ROTOR_IIC"]).kind_name == "ROTOR_IIC"
    assert Rotor("QWERTYUIOPLKJHGFDSAZXCVBNM").kind_name == CUSTOM


# ---------------------------------------------------------------------------
# Positioning
# ---------------------------------------------------------------------------

def test_position_numeric(rotor):
    assert rotor.position == 20
    rotor.position = 14
    assert rotor.position == 14


def test_position_by_letter_uses_index_on_rotor(rotor):
    rotor.position = "Q"
    assert rotor.position == 3
    assert rotor.current_letter == "Q"


@pytest.mark.parametrize("bad", [-10, 26, 49, "%", "AB", "", [], None, 3.0, False])
def test_invalid_position_leaves_rotor_unchanged(rotor, bad):
    with pytest.raises(InvalidPosition):
        rotor.position = bad
    assert rotor.position == 20


def test_invalid_position_message(rotor):
    with pytest.raises(InvalidPosition, match="Position 49 is invalid"):
        rotor.position = 49
    with pytest.raises(InvalidPosition, match="% is not a character on the rotor"):
        rotor.position = "%"


# ---------------------------------------------------------------------------
# Stepping
# ---------------------------------------------------------------------------

def test_step(rotor):
    rotor.position = 0
    assert rotor.step() is False
    assert rotor.position == 1


def test_step_wraps_and_reports_carry(rotor):
    rotor.position = 25
    assert rotor.step() is True
    assert rotor.position == 0
    assert rotor.wrapped is True

    rotor.step()
    assert rotor.position == 1
    assert rotor.wrapped is False


def test_step_by_explicit_amount(rotor):
    rotor.position = 0
    rotor.step(2)
    assert rotor.position == 2

    rotor.position = 25
    rotor.step(2)
    assert rotor.position == 1
    assert rotor.wrapped is True


def test_step_uses_step_size(rotor):
    rotor.step_size = 2
    rotor.position = 2
    rotor.step()
    assert rotor.position == 4


@pytest.mark.parametrize("amount", range(1, 26))
def test_wrap_detected_for_every_amount(amount):
    r = Rotor(ROTOR_I, 0, amount)
    wraps = 0
    for _ in range(26):
        if r.step():
            wraps += 1
    # 26 steps of `amount` travel exactly `amount` full turns
    assert wraps == amount
    assert r.position == 0


# ---------------------------------------------------------------------------
# Signal path
# ---------------------------------------------------------------------------

def test_forward_and_reverse(rotor):
    assert rotor.forward("C") == "L"
    assert rotor.reverse("L") == "C"


@pytest.mark.parametrize("kind", sorted(ROTOR_SEQUENCES))
def test_reverse_inverts_forward_at_every_position(kind):
    r = Rotor(ROTOR_SEQUENCES[kind])
    for pos in range(26):
        r.position = pos
        for c in ALPHABET:
            assert r.reverse(r.forward(c)) == c


def test_non_alphabetic_passes_through(rotor):
    for c in "1234567890!@^&* ()":
        assert rotor.forward(c) == c
        assert rotor.reverse(c) == c


# ---------------------------------------------------------------------------
# Misc
# ---------------------------------------------------------------------------

def test_equality():
    assert Rotor(ROTOR_I, 3, 1) == Rotor(ROTOR_I, 3, 1)
    assert Rotor(ROTOR_I, 3, 1) != Rotor(ROTOR_I, 4, 1)
    assert Rotor(ROTOR_I, 3, 1) != Rotor(ROTOR_I, 3, 2)
    assert Rotor(ROTOR_I, 3, 1) != Rotor(ROTOR_SEQUENCES["ROTOR_II"], 3, 1)


def test_describes_itself():
    r = Rotor(ROTOR_I, "A")
    assert str(r) == "a Rotor of type 'ROTOR_I', position=9 (A), step_size=1"
