"""Evaluation helpers for rotor machine configurations.

Provides involution testing (roundtrip verification) and letter-frequency
statistics, aggregated into a serializable report.

Research / education only. Do NOT use in production.
"""

from .roundtrip import RoundtripResult, RoundtripFailure, random_message, run_roundtrip_tests
from .frequency import (
    FrequencyResult,
    analyze_frequency,
    chi_squared_uniform,
    count_self_maps,
    index_of_coincidence,
    letter_counts,
)
from .report import EvaluationReport, evaluate_machine

__all__ = [
    "RoundtripResult",
    "RoundtripFailure",
    "random_message",
    "run_roundtrip_tests",
    "FrequencyResult",
    "analyze_frequency",
    "chi_squared_uniform",
    "count_self_maps",
    "index_of_coincidence",
    "letter_counts",
    "EvaluationReport",
    "evaluate_machine",
]
