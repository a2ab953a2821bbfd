from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Tuple

from .catalog import ALPHABET
from .errors import PlugboardConflict, PlugboardNotConnected


class Plugboard:
    """Symmetric pairwise letter swap applied before and after the rotor stack.

    ``_connections`` always holds both directions of every plug. All symbols
    are upper-cased on the way in.
    """

    def __init__(self, connections: Optional[Mapping[str, str]] = None) -> None:
        self._connections: Dict[str, str] = {}
        for a, b in (connections or {}).items():
            # reciprocal entries of an already-applied pair are skipped
            if self._connections.get(a.upper()) == b.upper():
                continue
            self.connect(a, b)

    @property
    def connections(self) -> Dict[str, str]:
        return dict(self._connections)

    def pairs(self) -> List[Tuple[str, str]]:
        """Each plug once, as ``(lower, higher)``, sorted."""
        return sorted((a, b) for a, b in self._connections.items() if a < b)

    def is_connected(self, symbol: str) -> bool:
        return symbol.upper() in self._connections

    def connect(self, a: str, b: str) -> None:
        a, b = a.upper(), b.upper()
        for sym in (a, b):
            if len(sym) != 1 or sym not in ALPHABET:
                raise PlugboardConflict(f"{sym!r} is not a plugboard letter")
        if a in self._connections:
            raise PlugboardConflict(f"{a} is already connected")
        if b in self._connections:
            raise PlugboardConflict(f"{b} is already connected")
        if a == b:
            raise PlugboardConflict(f"{a} cannot be connected to itself")
        self._connections[a] = b
        self._connections[b] = a

    def disconnect(self, symbol: str) -> None:
        symbol = symbol.upper()
        if symbol not in self._connections:
            raise PlugboardNotConnected(f"{symbol} is not connected")
        other = self._connections.pop(symbol)
        del self._connections[other]

    def transpose(self, text: str) -> str:
        return "".join(self._connections.get(ch, ch) for ch in text.upper())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Plugboard):
            return NotImplemented
        return self._connections == other._connections

    def __str__(self) -> str:
        pairs = " ".join(a + b for a, b in self.pairs())
        return f"a Plugboard with connections: {pairs or 'none'}"

    def __repr__(self) -> str:
        return f"<Plugboard {' '.join(a + b for a, b in self.pairs())}>"
