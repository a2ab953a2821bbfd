from __future__ import annotations

from typing import Union

from .catalog import ALPHABET, ALPHABET_SIZE, reflector_kind_name, resolve_position, validate_letters


class Reflector:
    """Fixed substitution ring that turns the signal back through the rotors.

    The position is a static offset chosen at construction (or set later);
    the machine never advances it.
    """

    def __init__(self, letters: str, start: Union[int, str] = 0) -> None:
        self._letters = validate_letters(letters)
        self._position = resolve_position(start, self._letters)

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
    def current_letter(self) -> str:
        return self._letters[self._position]

    @property
    def kind_name(self) -> str:
        return reflector_kind_name(self._letters)

    def reflect(self, text: str) -> str:
        """Reflect every alphabet character of ``text``; others pass through."""
        out = []
        for ch in text.upper():
            idx = ALPHABET.find(ch)
            out.append(self._letters[(idx + self._position) % ALPHABET_SIZE] if idx >= 0 else ch)
        return "".join(out)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Reflector):
            return NotImplemented
        return self._letters == other._letters and self._position == other._position

    def __str__(self) -> str:
        return f"a Reflector of type '{self.kind_name}'"

    def __repr__(self) -> str:
        return f"<Reflector {self.kind_name} pos={self._position}>"
