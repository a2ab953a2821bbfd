"""Exception taxonomy for the rotor machine engine.

Configuration problems subclass ``ValueError`` so callers that only care
about "bad input" can catch the builtin; persistence problems carry their own
base so a caller can tell a missing file from an incompatible or corrupt one.
"""
from __future__ import annotations


class RotorMachineError(Exception):
    """Base class for every error raised by rotorlab."""


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

class InvalidConfiguration(RotorMachineError, ValueError):
    """A component was built or mutated with invalid arguments."""


class InvalidRotorKind(InvalidConfiguration):
    """Unknown catalog identifier, or a letter sequence that is not a permutation."""


class InvalidPosition(InvalidConfiguration):
    """Wrong type, out-of-range index, or a letter not on the component."""


class InvalidStepSize(InvalidConfiguration):
    """Step size outside 1..25."""


class PlugboardConflict(InvalidConfiguration):
    """Symbol already connected, connected to itself, or not a letter."""


class PlugboardNotConnected(InvalidConfiguration):
    """Disconnect requested for a symbol with no plug."""


# ---------------------------------------------------------------------------
# Runtime
# ---------------------------------------------------------------------------

class MachineNotReady(RotorMachineError, RuntimeError):
    """Encipher attempted without rotors and/or a reflector."""


# ---------------------------------------------------------------------------
# Persistence
# ---------------------------------------------------------------------------

class PersistenceError(RotorMachineError):
    """Base class for load/save failures."""


class PersistenceNotFound(PersistenceError, FileNotFoundError):
    pass


class PersistenceVersionMismatch(PersistenceError):
    def __init__(self, found: int, supported: int):
        super().__init__(
            f"Serialization data version mismatch: file has version {found}, "
            f"this engine supports up to {supported}"
        )
        self.found = found
        self.supported = supported


class PersistenceIOFailure(PersistenceError):
    """The file exists but could not be read or parsed into a machine state."""
