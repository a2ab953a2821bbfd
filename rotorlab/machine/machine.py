"""Machine: rotors, reflector and plugboard composed into one cipher.

Signal path for every character::

    plugboard -> rotors (left to right) -> reflector
              -> rotors (right to left) -> plugboard

after which the rotors advance like an odometer: the rightmost rotor steps,
and each rotor to its left steps only when its right-hand neighbour wrapped.
Because the reflector folds the path back through the same rotors, running
ciphertext through a machine set to the same start positions yields the
plaintext.

A Machine is not safe for concurrent use; characters must be processed in
order since each one changes the rotor state seen by the next.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from rotorlab.config import load_settings
from rotorlab.utils.text import in_blocks_of

from . import persistence
from .catalog import CUSTOM, REFLECTOR_SEQUENCES, ROTOR_SEQUENCES, letters_for_kind, resolve_position
from .errors import MachineNotReady
from .plugboard import Plugboard
from .reflector import Reflector
from .rotor import Rotor
from .state import (
    SERIALIZATION_VERSION,
    MachineState,
    PlugboardState,
    ReflectorState,
    RotorState,
)
from .validator import validate_machine

logger = logging.getLogger(__name__)


class Machine:
    def __init__(
        self,
        rotors: Optional[Sequence[Rotor]] = None,
        reflector: Optional[Reflector] = None,
        plugboard: Optional[Plugboard] = None,
    ) -> None:
        # index 0 is the leftmost (slowest) rotor
        self.rotors: List[Rotor] = list(rotors or [])
        self.reflector: Optional[Reflector] = reflector
        self.plugboard: Optional[Plugboard] = plugboard

    # ------------------------------------------------------------------
    # Enciphering
    # ------------------------------------------------------------------

    def encipher(self, text: str) -> str:
        """Encipher (or decipher) ``text`` and return it in letter groups.

        Whitespace is dropped from the output and the rest is grouped by the
        configured block size (5 by default), e.g. ``"QCTBG IJSWI H"``.
        """
        return in_blocks_of(self.encipher_raw(text), load_settings().block_size)

    def encipher_raw(self, text: str) -> str:
        """Encipher ``text`` character by character without regrouping."""
        ok, errs = validate_machine(self)
        if not ok:
            raise MachineNotReady("Cannot encipher; " + ", ".join(errs))

        result = "".join(self.encipher_char(c) for c in text.upper())
        logger.debug(
            "Enciphered %d characters; rotor positions now %s",
            len(text), self.positions(),
        )
        return result

    def encipher_char(self, c: str) -> str:
        ec = c
        if self.plugboard is not None:
            ec = self.plugboard.transpose(ec)
        for rotor in self.rotors:
            ec = rotor.forward(ec)
        ec = self.reflector.reflect(ec)
        for rotor in reversed(self.rotors):
            ec = rotor.reverse(ec)
        if self.plugboard is not None:
            ec = self.plugboard.transpose(ec)

        # characters that come out unchanged (spaces, digits, identity
        # wirings) leave the rotors where they are
        if ec != c:
            self.step_rotors()
        return ec

    def step_rotors(self) -> None:
        for rotor in reversed(self.rotors):
            if not rotor.step():
                break

    # ------------------------------------------------------------------
    # Positions
    # ------------------------------------------------------------------

    def set_rotors(self, init: str) -> None:
        """Set rotor positions from a string of letters, leftmost rotor first.

        Extra letters are ignored; rotors past the end of ``init`` keep their
        position. Nothing changes if any letter is invalid.
        """
        resolved = [(rotor, resolve_position(letter, rotor.letters)) for rotor, letter in zip(self.rotors, init)]
        for rotor, pos in resolved:
            rotor.position = pos

    def positions(self) -> List[int]:
        return [r.position for r in self.rotors]

    def rotor_letters(self) -> str:
        """Current letter of each rotor, leftmost first."""
        return "".join(r.current_letter for r in self.rotors)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def machine_state(self) -> MachineState:
        rotors = []
        for r in self.rotors:
            rotors.append(RotorState(
                kind=r.kind_name,
                position=r.position,
                step_size=r.step_size,
                letters=r.letters if r.kind_name == CUSTOM else None,
            ))

        reflector = None
        if self.reflector is not None:
            reflector = ReflectorState(
                kind=self.reflector.kind_name,
                position=self.reflector.position,
                letters=self.reflector.letters if self.reflector.kind_name == CUSTOM else None,
            )

        plugboard = None
        if self.plugboard is not None:
            plugboard = PlugboardState(connections=self.plugboard.connections)

        return MachineState(
            serialization_version=SERIALIZATION_VERSION,
            rotors=rotors,
            reflector=reflector,
            plugboard=plugboard,
        )

    def apply_state(self, state: MachineState) -> "Machine":
        """Replace every component with the ones described by ``state``.

        All components are built before any is swapped in, so a bad state
        leaves the machine untouched.
        """
        rotors = [
            Rotor(letters_for_kind(rs.kind, rs.letters, ROTOR_SEQUENCES), rs.position, rs.step_size)
            for rs in state.rotors
        ]
        reflector = None
        if state.reflector is not None:
            rf = state.reflector
            reflector = Reflector(letters_for_kind(rf.kind, rf.letters, REFLECTOR_SEQUENCES), rf.position)
        plugboard = None
        if state.plugboard is not None:
            plugboard = Plugboard(state.plugboard.connections)

        self.rotors, self.reflector, self.plugboard = rotors, reflector, plugboard
        return self

    @classmethod
    def from_state(cls, state: MachineState) -> "Machine":
        return cls().apply_state(state)

    def save_machine_state_to(self, path: str | Path) -> bool:
        return persistence.save_machine_state(self, path)

    def load_machine_state_from(self, path: str | Path) -> "Machine":
        return persistence.load_machine_state_into(self, path)

    # ------------------------------------------------------------------
    # Niceties
    # ------------------------------------------------------------------

    def to_text_description(self) -> str:
        lines = [
            "a Machine with the following configuration:",
            f"  Rotors: {len(self.rotors)}",
        ]
        lines.extend(f"    - {r}" for r in self.rotors)
        lines.append(f"  Reflector: {'none' if self.reflector is None else self.reflector}")
        lines.append(f"  Plugboard: {'none' if self.plugboard is None else self.plugboard}")
        return "\n".join(lines)

    __str__ = to_text_description

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Machine):
            return NotImplemented
        return (
            self.rotors == other.rotors
            and self.reflector == other.reflector
            and self.plugboard == other.plugboard
        )

    def __repr__(self) -> str:
        return f"<Machine rotors={len(self.rotors)} positions={self.positions()}>"
