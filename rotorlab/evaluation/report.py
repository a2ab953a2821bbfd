"""Structured evaluation report builder.

Aggregates roundtrip and frequency results into a single serializable
report for export.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np

from rotorlab.config import load_settings
from rotorlab.machine.catalog import ALPHABET
from rotorlab.machine.machine import Machine
from rotorlab.machine.state import MachineState
from rotorlab.utils.repro import set_global_seed, utc_timestamp, write_json

from .frequency import FrequencyResult, analyze_frequency
from .roundtrip import RoundtripResult, run_roundtrip_tests


@dataclass
class EvaluationReport:
    """Complete evaluation report aggregating all analysis results."""
    timestamp: str = ""
    roundtrip_results: List[RoundtripResult] = field(default_factory=list)
    frequency_results: List[FrequencyResult] = field(default_factory=list)

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = utc_timestamp()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize full report for JSON export."""
        return {
            "timestamp": self.timestamp,
            "roundtrip": [r.to_dict() for r in self.roundtrip_results],
            "frequency": [f.to_dict() for f in self.frequency_results],
            "summary": {
                "configurations_tested": len(self.roundtrip_results),
                "roundtrip_all_pass": all(r.is_perfect for r in self.roundtrip_results),
                "frequency_all_flat": all(f.looks_flat for f in self.frequency_results),
                "failing_configurations": self.failing_configurations(),
            },
        }

    def to_summary(self) -> str:
        lines = [f"Evaluation Report - {self.timestamp}", "=" * 50]

        if self.roundtrip_results:
            rt_pass = sum(1 for r in self.roundtrip_results if r.is_perfect)
            lines.append(f"\nRoundtrip Tests: {rt_pass}/{len(self.roundtrip_results)} configurations pass")
            for r in self.roundtrip_results:
                lines.append(f"  {r.summary()}")

        if self.frequency_results:
            flat = sum(1 for f in self.frequency_results if f.looks_flat)
            lines.append(f"\nFrequency Analysis: {flat}/{len(self.frequency_results)} flat")
            for f in self.frequency_results:
                lines.append(f"  {f.summary()}")

        return "\n".join(lines)

    def failing_configurations(self) -> List[str]:
        return [r.label for r in self.roundtrip_results if not r.is_perfect]

    def save(self, path: str | Path) -> None:
        write_json(path, self.to_dict())


def evaluate_machine(
    state: MachineState,
    *,
    label: str = "machine",
    num_vectors: Optional[int] = None,
    sample_length: int = 2000,
    seed: Optional[int] = None,
    report: Optional[EvaluationReport] = None,
) -> EvaluationReport:
    """Run roundtrip and frequency analysis for one configuration.

    ``num_vectors`` and ``seed`` default to the ROTORLAB_ROUNDTRIP_VECTORS and
    GLOBAL_SEED settings. Results are appended to ``report`` if given.
    """
    settings = load_settings()
    vectors = num_vectors if num_vectors is not None else settings.roundtrip_vectors
    actual_seed = seed if seed is not None else settings.global_seed
    set_global_seed(actual_seed)

    report = report or EvaluationReport()
    report.roundtrip_results.append(
        run_roundtrip_tests(state, label=label, num_vectors=vectors, seed=actual_seed)
    )

    # sample text drawn from the seeded global numpy RNG
    plaintext = "".join(ALPHABET[i] for i in np.random.randint(0, len(ALPHABET), size=sample_length))
    ciphertext = Machine.from_state(state).encipher(plaintext)
    report.frequency_results.append(analyze_frequency(ciphertext, plaintext=plaintext, label=label))
    return report
