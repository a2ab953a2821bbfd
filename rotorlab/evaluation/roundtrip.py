"""Involution testing: P == E(E(P, S), S) for a start setting S.

Generates randomized messages and rotor start letters for a machine
configuration and verifies that enciphering the ciphertext from the same
start setting gives back the plaintext.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

from rotorlab.machine.catalog import ALPHABET
from rotorlab.machine.machine import Machine
from rotorlab.machine.state import MachineState
from rotorlab.utils.text import strip_whitespace

logger = logging.getLogger(__name__)


@dataclass
class RoundtripFailure:
    """Details of a single failed roundtrip vector."""
    vector_index: int
    start_letters: str
    plaintext: str
    ciphertext: str
    deciphered: str          # What the second pass returned (should equal plaintext)
    error: Optional[str]     # Exception message if either pass threw


@dataclass
class RoundtripResult:
    """Aggregate result of roundtrip testing for one machine configuration."""
    label: str
    rotor_count: int
    reflector_kind: str
    plug_pairs: int
    total_vectors: int
    passed: int
    failed: int
    failures: List[RoundtripFailure] = field(default_factory=list)
    elapsed_seconds: float = 0.0
    seed: int = 1337

    @property
    def success_rate(self) -> float:
        return self.passed / self.total_vectors if self.total_vectors > 0 else 0.0

    @property
    def is_perfect(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary(self) -> str:
        status = "PASS" if self.is_perfect else "FAIL"
        return (
            f"[{status}] {self.label} ({self.rotor_count} rotors, {self.reflector_kind}): "
            f"{self.passed}/{self.total_vectors} vectors passed "
            f"({self.elapsed_seconds:.2f}s)"
        )


def random_message(rng: random.Random, n: int) -> str:
    # roughly one space per six letters, like running text
    return "".join(" " if rng.random() < 0.15 else rng.choice(ALPHABET) for _ in range(n))


def _rand_start(rng: random.Random, machine: Machine) -> str:
    return "".join(rng.choice(r.letters) for r in machine.rotors)


def run_roundtrip_tests(
    state: MachineState,
    *,
    label: str = "machine",
    num_vectors: int = 200,
    message_length: int = 60,
    seed: int = 1337,
    max_failures_recorded: int = 10,
) -> RoundtripResult:
    """Run roundtrip verification across many random (start, message) vectors.

    Args:
        state: Machine configuration to test. Rotor positions in the state are
            replaced by a random start for every vector.
        label: Name used in the result summary.
        num_vectors: Number of random vectors to test.
        message_length: Characters per random message.
        seed: Random seed for deterministic reproducibility.
        max_failures_recorded: Maximum number of failure details to keep.

    Returns:
        RoundtripResult with pass/fail counts and failure details.
    """
    rng = random.Random(seed)
    passed = 0
    failed = 0
    failures: List[RoundtripFailure] = []

    probe = Machine.from_state(state)
    start = time.perf_counter()

    for i in range(num_vectors):
        pt = random_message(rng, message_length)
        start_letters = _rand_start(rng, probe)
        ct = pt2 = ""

        try:
            sender = Machine.from_state(state)
            sender.set_rotors(start_letters)
            ct = sender.encipher(pt)

            receiver = Machine.from_state(state)
            receiver.set_rotors(start_letters)
            pt2 = receiver.encipher(ct)

            if strip_whitespace(pt2) == strip_whitespace(pt):
                passed += 1
                continue
            error = None
        except Exception as exc:
            error = str(exc)

        failed += 1
        if len(failures) < max_failures_recorded:
            failures.append(RoundtripFailure(
                vector_index=i,
                start_letters=start_letters,
                plaintext=pt,
                ciphertext=ct,
                deciphered=pt2,
                error=error,
            ))

    elapsed = time.perf_counter() - start

    result = RoundtripResult(
        label=label,
        rotor_count=len(state.rotors),
        reflector_kind=state.reflector.kind if state.reflector is not None else "none",
        plug_pairs=len(state.plugboard.connections) // 2 if state.plugboard is not None else 0,
        total_vectors=num_vectors,
        passed=passed,
        failed=failed,
        failures=failures,
        elapsed_seconds=round(elapsed, 4),
        seed=seed,
    )
    logger.info(result.summary())
    return result
