from __future__ import annotations

from typing import TYPE_CHECKING, List, Tuple

if TYPE_CHECKING:
    from .machine import Machine


def validate_machine(machine: "Machine") -> Tuple[bool, List[str]]:
    errs: List[str] = []

    if not machine.rotors:
        errs.append("no rotors loaded")
    if machine.reflector is None:
        errs.append("no reflector loaded")

    return (len(errs) == 0), errs
