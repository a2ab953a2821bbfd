"""Saving and loading machine configurations.

States are stored as JSON documents of :class:`MachineState`. Saving keeps
the historical boolean contract; loading raises typed errors so callers can
tell a bad path from an incompatible version from a corrupt file.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from rotorlab.config import load_settings
from rotorlab.utils.repro import atomic_write_text, read_json, state_path

from .errors import (
    InvalidConfiguration,
    PersistenceIOFailure,
    PersistenceNotFound,
    PersistenceVersionMismatch,
)
from .state import SERIALIZATION_VERSION, MachineState

if TYPE_CHECKING:
    from .machine import Machine

logger = logging.getLogger(__name__)


def dump_state(state: MachineState) -> str:
    return json.dumps(state.model_dump(mode="json", exclude_none=True), indent=2, sort_keys=True)


def parse_state(raw: Any) -> MachineState:
    """Validate a decoded document, checking the version before the schema."""
    if not isinstance(raw, dict):
        raise PersistenceIOFailure(f"Machine state must be a mapping, got {type(raw).__name__}")

    version = raw.get("serialization_version")
    if isinstance(version, bool) or not isinstance(version, int):
        raise PersistenceIOFailure(f"Missing or invalid serialization_version: {version!r}")
    if version > SERIALIZATION_VERSION:
        raise PersistenceVersionMismatch(version, SERIALIZATION_VERSION)

    try:
        return MachineState.model_validate(raw)
    except ValidationError as e:
        raise PersistenceIOFailure(f"Invalid machine state: {e}") from e


def resolve_state_path(path: str | Path) -> Path:
    """Bare names (no directory, no suffix) live in the configured state directory."""
    p = Path(path)
    if isinstance(path, str) and p.parent == Path(".") and not p.suffix:
        return state_path(load_settings().state_dir, path)
    return p


def save_machine_state(machine: "Machine", path: str | Path) -> bool:
    """Write ``machine``'s state to ``path``. Returns False on any failure."""
    path = resolve_state_path(path)
    try:
        atomic_write_text(path, dump_state(machine.machine_state()))
    except (OSError, ValueError, TypeError) as e:
        logger.warning("Saving machine state to %s failed: %s", path, e)
        return False
    logger.info("Machine state saved to %s", path)
    return True


def load_machine_state(path: str | Path) -> MachineState:
    path = resolve_state_path(path)
    if not path.exists():
        raise PersistenceNotFound(f'File path "{path}" not found!')

    try:
        raw = read_json(path)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error("Could not read machine state from %s: %s", path, e)
        raise PersistenceIOFailure(f"Could not read {path}: {e}") from e

    state = parse_state(raw)
    logger.info(
        "Loaded machine state v%d from %s (%d rotors)",
        state.serialization_version, path, len(state.rotors),
    )
    return state


def load_machine_state_into(machine: "Machine", path: str | Path) -> "Machine":
    """Replace ``machine``'s rotors, reflector and plugboard with the file's contents."""
    state = load_machine_state(path)
    try:
        machine.apply_state(state)
    except InvalidConfiguration as e:
        raise PersistenceIOFailure(f"Invalid machine state in {path}: {e}") from e
    return machine
