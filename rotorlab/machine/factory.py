"""Builders for rotors, reflectors, plugboards and complete machines.

Kinds may be given either as a catalog identifier (``"ROTOR_I"``) or as a
literal 26-letter sequence; both are resolved once, here.
"""
from __future__ import annotations

from typing import Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from rotorlab.utils.text import tokenize

from .catalog import reflector_letters, rotor_letters
from .errors import PlugboardConflict
from .machine import Machine
from .plugboard import Plugboard
from .reflector import Reflector
from .rotor import Rotor

Position = Union[int, str]
Connections = Union[Mapping[str, str], str, None]


def build_rotor(rotor_kind: str = "ROTOR_I", initial_position: Position = 0, step_size: int = 1) -> Rotor:
    return Rotor(rotor_letters(rotor_kind), initial_position, step_size)


def build_reflector(reflector_kind: str = "REFLECTOR_A", initial_position: Position = 0) -> Reflector:
    return Reflector(reflector_letters(reflector_kind), initial_position)


def parse_connections(text: str) -> List[Tuple[str, str]]:
    """Parse ``"AQ FP"`` (or ``"A-Q 'F P'"``) into letter pairs."""
    pairs = []
    for token in tokenize(text):
        letters = [ch for ch in token if ch.isalpha()]
        if len(letters) != 2:
            raise PlugboardConflict(f"Plugboard pair {token!r} must name exactly 2 letters")
        pairs.append((letters[0], letters[1]))
    return pairs


def build_plugboard(connections: Connections = None) -> Plugboard:
    plugboard = Plugboard()
    if connections is None:
        return plugboard
    if isinstance(connections, str):
        pairs: Iterable = parse_connections(connections)
    else:
        pairs = connections.items()
    for a, b in pairs:
        # mappings may list both directions of the same plug
        if plugboard.connections.get(a.upper()) == b.upper():
            continue
        plugboard.connect(a, b)
    return plugboard


def build_rotor_set(kinds: Sequence[str] = (), initial_positions: Optional[str] = None) -> List[Rotor]:
    rotors = [build_rotor(kind) for kind in kinds]
    if initial_positions is not None:
        for rotor, letter in zip(rotors, initial_positions):
            rotor.position = letter
    return rotors


def build_machine(
    rotors: Optional[Sequence[Union[Rotor, str]]] = None,
    reflector: Union[Reflector, str, None] = None,
    connections: Connections = None,
) -> Machine:
    """Assemble a machine.

    ``rotors`` may mix built :class:`Rotor` objects and kinds; a string
    ``reflector`` is built with :func:`build_reflector`.
    """
    built = [r if isinstance(r, Rotor) else build_rotor(r) for r in (rotors or [])]
    if isinstance(reflector, str):
        reflector = build_reflector(reflector)
    return Machine(rotors=built, reflector=reflector, plugboard=build_plugboard(connections))


def default_machine() -> Machine:
    """Rotors I, II, III set to ``A`` with step 1, reflector A, empty plugboard."""
    m = build_machine(
        rotors=["ROTOR_I", "ROTOR_II", "ROTOR_III"],
        reflector=build_reflector("REFLECTOR_A"),
    )
    m.set_rotors("AAA")
    return m


def empty_machine() -> Machine:
    return build_machine()
