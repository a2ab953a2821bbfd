"""Rotor: a steppable substitution ring.

The signal enters a rotor twice per character: once on the way to the
reflector (``forward``) and once on the way back (``reverse``). The two
mappings are inverses of each other at every position, which is what makes
the whole machine self-inverse.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

from typing import Optional, Union

from .catalog import ALPHABET, ALPHABET_SIZE, resolve_position, rotor_kind_name, validate_letters
from .errors import InvalidStepSize


def _check_step_size(step_size: int) -> int:
    if isinstance(step_size, bool) or not isinstance(step_size, int):
        raise InvalidStepSize(f"Invalid step size (invalid type {type(step_size).__name__})")
    if not 1 <= step_size < ALPHABET_SIZE:
        raise InvalidStepSize(f"Invalid step size ({step_size} out of range)")
    return step_size


class Rotor:
    def __init__(self, letters: str, start: Union[int, str] = 0, step_size: int = 1) -> None:
        self._letters = validate_letters(letters)
        self._position = resolve_position(start, self._letters)
        self._step_size = _check_step_size(step_size)
        self._wrapped = False

    # -- state ------------------------------------------------------------
    @property
    def letters(self) -> str:
        return self._letters

    @property
    def position(self) -> int:
        return self._position

    @position.setter
    def position(self, pos: Union[int, str]) -> None:
        self._position = resolve_position(pos, self._letters)

    @property
    def step_size(self) -> int:
        return self._step_size

    @step_size.setter
    def step_size(self, step_size: int) -> None:
        self._step_size = _check_step_size(step_size)

    @property
    def wrapped(self) -> bool:
        """True if the last ``step`` carried past the end of the ring."""
        return self._wrapped

    @property
    def current_letter(self) -> str:
        return self._letters[self._position]

    @property
    def kind_name(self) -> str:
        return rotor_kind_name(self._letters)

    # -- signal path ------------------------------------------------------
    def forward(self, symbol: str) -> str:
        idx = ALPHABET.find(symbol) if len(symbol) == 1 else -1
        if idx < 0:
            return symbol
        return self._letters[(idx + self._position) % ALPHABET_SIZE]

    def reverse(self, symbol: str) -> str:
        idx = self._letters.find(symbol) if len(symbol) == 1 else -1
        if idx < 0:
            return symbol
        return ALPHABET[(idx - self._position) % ALPHABET_SIZE]

    # -- stepping ---------------------------------------------------------
    def step(self, amount: Optional[int] = None) -> bool:
        """Advance by ``amount`` (default: the step size) and return the wrap flag.

        A step wraps exactly when the new position is lower than the old one.
        """
        if amount is None:
            amount = self._step_size
        old = self._position
        self._position = (self._position + amount) % ALPHABET_SIZE
        self._wrapped = old > self._position
        return self._wrapped

    # -- niceties ---------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rotor):
            return NotImplemented
        return (
            self._letters == other._letters
            and self._position == other._position
            and self._step_size == other._step_size
        )

    def __str__(self) -> str:
        return (
            f"a Rotor of type '{self.kind_name}', position={self._position} "
            f"({self.current_letter}), step_size={self._step_size}"
        )

    def __repr__(self) -> str:
        return f"<Rotor {self.kind_name} pos={self._position} step={self._step_size}>"
