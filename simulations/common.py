# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import math
import time

from card_placement import FACILITIES


MAX_OUTCOME = len(FACILITIES)

# Calculator defaults
DEFAULT_TRIALS = 1000
DEFAULT_THRESHOLD = 3
DEFAULT_TRIES = 1
DEFAULT_MULTIPLIER = 1.0
DEFAULT_ADDITIVE = 0.0


@dataclass(frozen=True)
class SimulationParameters:
    """
    The five scalars a simulation run is driven by.
    """
    trial_count: int = DEFAULT_TRIALS
    threshold: int = DEFAULT_THRESHOLD
    tries: int = DEFAULT_TRIES
    weight_multiplier: float = DEFAULT_MULTIPLIER
    weight_additive: float = DEFAULT_ADDITIVE

    def __post_init__(self) -> None:
        if self.trial_count < 1:
            raise ValueError("trial_count must be >= 1")
        if self.tries < 1:
            raise ValueError("tries must be >= 1")
        if not 0 <= self.threshold <= MAX_OUTCOME:
            raise ValueError(f"threshold must be in [0, {MAX_OUTCOME}]")
        if not math.isfinite(self.weight_multiplier) or self.weight_multiplier < 0:
            raise ValueError("weight_multiplier must be a finite number >= 0")
        if not math.isfinite(self.weight_additive):
            raise ValueError("weight_additive must be a finite number")


@dataclass(frozen=True)
class SummaryStats:
    """
    Basic summary stats for trial outcomes.
    """
    min: int
    max: int
    mean: float
    std: float  # population stddev


def summarize_outcomes(outcomes: List[int]) -> SummaryStats:
    """
    Compute min/max/mean/std over trial outcomes (population stddev).
    """
    if not outcomes:
        raise ValueError("outcomes must be non-empty")

    n = len(outcomes)
    mean = sum(outcomes) / n

    var_acc = 0.0
    for c in outcomes:
        d = c - mean
        var_acc += d * d
    std = math.sqrt(var_acc / n)

    return SummaryStats(min=min(outcomes), max=max(outcomes), mean=mean, std=std)


@dataclass
class SimulationResult:
    """
    What a run hands to the presentation layer.
    """
    params: SimulationParameters
    outcomes: List[int]
    distribution: List[int]
    single_trial_probability: float
    compound_probability: float

    stats: SummaryStats = field(init=False)
    runtime_s: Optional[float] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.stats = summarize_outcomes(self.outcomes)

        # Sanity: one outcome per trial, every trial in exactly one bucket
        expected = self.params.trial_count
        if len(self.outcomes) != expected:
            raise ValueError(
                f"outcome count mismatch: expected {expected}, got {len(self.outcomes)}"
            )
        if sum(self.distribution) != expected:
            raise ValueError(
                f"distribution sum mismatch: expected {expected}, got {sum(self.distribution)}"
            )


class Timer:
    """
    Tiny timing helper for simulations.
    Usage:
        with Timer() as t:
            ...
        elapsed = t.elapsed_s
    """
    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is not None:
            self.elapsed_s = time.perf_counter() - self._start


def format_probability_line(r: SimulationResult) -> str:
    p = r.params
    return (
        f"Probability of >= {p.threshold} matching facilities in {p.tries} tries: "
        f"{r.compound_probability * 100:.2f}%"
    )


def format_stats_line(label: str, r: SimulationResult) -> str:
    """
    Human-friendly one-liner for printing in compare tools.
    """
    s = r.stats
    return (
        f"{label}: p_single={r.single_trial_probability:.4f}, "
        f"p_compound={r.compound_probability:.4f}, "
        f"min={s.min}, max={s.max}, mean={s.mean:.3f}, std={s.std:.3f}"
        + (f", runtime={r.runtime_s:.3f}s" if r.runtime_s is not None else "")
    )
