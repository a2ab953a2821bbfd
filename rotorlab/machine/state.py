from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from .catalog import CUSTOM, REFLECTOR_SEQUENCES, ROTOR_SEQUENCES, validate_letters

SERIALIZATION_VERSION = 1


def _check_kind(kind: str, letters: Optional[str], table: Dict[str, str]) -> Optional[str]:
    if kind == CUSTOM:
        if letters is None:
            raise ValueError("CUSTOM kind requires letters")
        return validate_letters(letters)
    if kind not in table:
        raise ValueError(f"unknown kind {kind!r}")
    return None


class RotorState(BaseModel):
    """Persisted rotor. ``letters`` is only present for ``CUSTOM`` rotors."""

    kind: str
    position: int = Field(..., ge=0, le=25)
    step_size: int = Field(default=1, ge=1, le=25)
    letters: Optional[str] = None

    @model_validator(mode="after")
    def _kind_and_letters(self) -> "RotorState":
        self.letters = _check_kind(self.kind, self.letters, ROTOR_SEQUENCES)
        return self


class ReflectorState(BaseModel):
    kind: str
    position: int = Field(default=0, ge=0, le=25)
    letters: Optional[str] = None

    @model_validator(mode="after")
    def _kind_and_letters(self) -> "ReflectorState":
        self.letters = _check_kind(self.kind, self.letters, REFLECTOR_SEQUENCES)
        return self


class PlugboardState(BaseModel):
    connections: Dict[str, str] = Field(default_factory=dict)

    @field_validator("connections")
    @classmethod
    def _reciprocal(cls, v: Dict[str, str]) -> Dict[str, str]:
        v = {a.upper(): b.upper() for a, b in v.items()}
        for a, b in v.items():
            if a == b:
                raise ValueError(f"{a} cannot be connected to itself")
            if v.get(b) != a:
                raise ValueError(f"{a}->{b} has no matching {b}->{a}")
        return v


class MachineState(BaseModel):
    """Structured record of a machine configuration.

    This is the document written by ``save_machine_state`` and the only
    input ``load_machine_state`` accepts.
    """

    serialization_version: int = Field(default=SERIALIZATION_VERSION, ge=0)
    rotors: List[RotorState] = Field(default_factory=list)
    reflector: Optional[ReflectorState] = None
    plugboard: Optional[PlugboardState] = None
