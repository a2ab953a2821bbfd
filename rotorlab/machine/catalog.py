"""Named historical letter sequences for rotors and reflectors.

Each table maps an identifier to its 26-letter wiring. Lookups in both
directions go through plain dict access; any sequence not in a table is
reported as ``CUSTOM``.
"""
from __future__ import annotations

from typing import Dict, Optional, Union

from .errors import InvalidPosition, InvalidRotorKind

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHABET_SIZE = len(ALPHABET)

CUSTOM = "CUSTOM"


ROTOR_SEQUENCES: Dict[str, str] = {
    "ROTOR_I": "JGDQOXUSCAMIFRVTPNEWKBLZYH",
    "ROTOR_II": "NTZPSFBOKMWRCJDIVLAEYUXHGQ",
    "ROTOR_III": "JVIUBHTCDYAKEQZPOSGXNRMWFL",
    "ROTOR_IC": "DMTWSILRUYQNKFEJCAZBPGXOHV",
    "ROTOR_IIC": "HQZGPJTMOBLNCIFDYAWVEUSRKX",
    "ROTOR_IIIC": "UQNTLSZFMREHDPXKIBVYGJCWOA",
    "ROTOR_UKW": "QYHOGNECVPUZTFDJAXWMKISRBL",
    "ROTOR_ETW": "QWERTZUIOASDFGHJKPYXCVBNML",
}

REFLECTOR_SEQUENCES: Dict[str, str] = {
    "REFLECTOR_A": "EJMZALYXVBWFCRQUONTSPIKHGD",
    "REFLECTOR_B": "YRUHQSLDPXNGOKMIEBFZCWVJAT",
    "REFLECTOR_C": "FVPJIAOYEDRZXWGCTKUQSBNMHL",
    "REFLECTOR_B_THIN": "ENKQAUYWJICOPBLMDXZVFTHRGS",
    "REFLECTOR_C_THIN": "RDOBJNTKVEHMLFCWZAXGYIPSUQ",
    "REFLECTOR_ETW": "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
}

_ROTOR_NAMES: Dict[str, str] = {seq: name for name, seq in ROTOR_SEQUENCES.items()}
_REFLECTOR_NAMES: Dict[str, str] = {seq: name for name, seq in REFLECTOR_SEQUENCES.items()}


def validate_letters(letters: str) -> str:
    """Return ``letters`` upper-cased if it is a permutation of the alphabet."""
    if not isinstance(letters, str):
        raise InvalidRotorKind(f"Invalid letter sequence (invalid type {type(letters).__name__})")
    letters = letters.upper()
    if len(letters) != ALPHABET_SIZE:
        raise InvalidRotorKind(f"Invalid letter sequence (length {len(letters)}, expected {ALPHABET_SIZE})")
    if len(set(letters)) != len(letters):
        raise InvalidRotorKind("Initialization string contains duplicate letters")
    if set(letters) != set(ALPHABET):
        raise InvalidRotorKind(f"Letter sequence {letters!r} is not a permutation of {ALPHABET}")
    return letters


def _resolve(kind: str, table: Dict[str, str], what: str) -> str:
    if not isinstance(kind, str):
        raise InvalidRotorKind(f"Invalid {what} kind (invalid type {type(kind).__name__})")
    if kind in table:
        return table[kind]
    if kind.upper() in table:
        return table[kind.upper()]
    if len(kind) == ALPHABET_SIZE:
        return validate_letters(kind)
    raise InvalidRotorKind(f"Invalid {what} kind ({kind!r} not found)")


def rotor_letters(kind: str) -> str:
    """Resolve a rotor identifier or literal sequence to its letters."""
    return _resolve(kind, ROTOR_SEQUENCES, "rotor")


def reflector_letters(kind: str) -> str:
    """Resolve a reflector identifier or literal sequence to its letters."""
    return _resolve(kind, REFLECTOR_SEQUENCES, "reflector")


def rotor_kind_name(letters: str) -> str:
    return _ROTOR_NAMES.get(letters, CUSTOM)


def reflector_kind_name(letters: str) -> str:
    return _REFLECTOR_NAMES.get(letters, CUSTOM)


def letters_for_kind(kind: str, letters: Optional[str], table: Dict[str, str]) -> str:
    """Letters for a persisted ``kind``/``letters`` pair.

    ``CUSTOM`` entries carry their own letters; named entries must exist in
    ``table``.
    """
    if kind == CUSTOM:
        if letters is None:
            raise InvalidRotorKind("CUSTOM kind requires explicit letters")
        return validate_letters(letters)
    if kind not in table:
        raise InvalidRotorKind(f"Unknown kind {kind!r}")
    return table[kind]


def resolve_position(pos: Union[int, str], letters: str) -> int:
    """Turn a numeric index or a letter on ``letters`` into a 0-based position."""
    if isinstance(pos, bool):
        raise InvalidPosition(f"Invalid argument to position= ({type(pos).__name__})")
    if isinstance(pos, int):
        if not 0 <= pos < ALPHABET_SIZE:
            raise InvalidPosition(f"Position {pos} is invalid")
        return pos
    if isinstance(pos, str):
        if len(pos) != 1 or pos.upper() not in letters:
            raise InvalidPosition(f"{pos} is not a character on the rotor")
        return letters.index(pos.upper())
    raise InvalidPosition(f"Invalid argument to position= ({type(pos).__name__})")
