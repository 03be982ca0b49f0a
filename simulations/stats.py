# simulations/stats.py

from __future__ import annotations

from typing import List, Sequence

from .common import MAX_OUTCOME


def distribution(outcomes: Sequence[int]) -> List[int]:
    """
    Frequency of each outcome value; index i holds how many trials scored i.
    """
    buckets = [0] * (MAX_OUTCOME + 1)
    for o in outcomes:
        if not 0 <= o <= MAX_OUTCOME:
            raise ValueError(f"outcome {o} outside [0, {MAX_OUTCOME}]")
        buckets[o] += 1
    return buckets


def single_trial_probability(outcomes: Sequence[int], threshold: int) -> float:
    """
    Fraction of trials scoring at least `threshold`. 0.0 for an empty batch.
    """
    if not outcomes:
        return 0.0
    hits = 0
    for o in outcomes:
        if o >= threshold:
            hits += 1
    return hits / len(outcomes)


def compound_probability(p_single: float, tries: int) -> float:
    """
    Chance of at least one success over `tries` independent attempts, each
    succeeding with probability `p_single`:

        1 - (1 - p_single) ** tries

    This compounds the empirical rate; it does not re-simulate the tries.
    """
    if not 0.0 <= p_single <= 1.0:
        raise ValueError("p_single must be in [0, 1]")
    if tries < 1:
        raise ValueError("tries must be >= 1")
    if tries == 1:
        return p_single
    return 1.0 - (1.0 - p_single) ** tries
