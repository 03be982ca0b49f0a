# simulations/batch.py

from __future__ import annotations

import logging
import random
from concurrent.futures import ProcessPoolExecutor
from typing import Callable, Dict, List, Optional, Tuple

from card_placement import TrialSimulator


logger = logging.getLogger(__name__)

BatchFn = Callable[..., List[int]]


def run_batch(n: int, multiplier: float, additive: float, rng: random.Random) -> List[int]:
    """
    Run `n` independent trials drawing from `rng` and return their outcomes
    in the order they were run.
    """
    if n < 0:
        raise ValueError("n must be >= 0")

    sim = TrialSimulator.from_rng(rng)
    outcomes: List[int] = []
    for _ in range(n):
        outcomes.append(sim.run_trial(multiplier, additive))
    return outcomes


def chunk_sizes(n: int, workers: int) -> List[int]:
    """
    Split n trials into `workers` contiguous chunks whose sizes differ by at
    most one. Earlier chunks take the remainder.
    """
    if workers <= 0:
        raise ValueError("workers must be > 0")
    base, extra = divmod(n, workers)
    return [base + (1 if i < extra else 0) for i in range(workers)]


def chunk_seed(seed: int, index: int) -> int:
    return seed + 1000 * (index + 1)


def _run_chunk(args: Tuple[int, float, float, int]) -> List[int]:
    n, multiplier, additive, seed = args
    return run_batch(n, multiplier, additive, random.Random(seed))


def run_serial(
    n: int,
    multiplier: float,
    additive: float,
    seed: Optional[int] = None,
    workers: int = 1,
) -> List[int]:
    """
    All trials on one random stream seeded with `seed`. `workers` is accepted
    for a uniform runner signature and ignored.
    """
    return run_batch(n, multiplier, additive, random.Random(seed))


def run_pooled(
    n: int,
    multiplier: float,
    additive: float,
    seed: Optional[int] = None,
    workers: int = 2,
) -> List[int]:
    """
    Trials split across a process pool.

    Each chunk owns its own random stream, seeded chunk_seed(seed, i), and
    chunk outcomes are concatenated in chunk order. For a fixed seed and
    worker count the result is therefore reproducible, whatever order the
    workers finish in.
    """
    if seed is None:
        seed = random.randrange(2**32)

    sizes = chunk_sizes(n, workers)
    jobs = [
        (size, multiplier, additive, chunk_seed(seed, i))
        for i, size in enumerate(sizes)
        if size > 0
    ]

    outcomes: List[int] = []
    with ProcessPoolExecutor(max_workers=workers) as executor:
        try:
            for i, chunk in enumerate(executor.map(_run_chunk, jobs)):
                logger.debug("chunk %d/%d done (%d trials)", i + 1, len(jobs), len(chunk))
                outcomes.extend(chunk)
        except KeyboardInterrupt:
            executor.shutdown(wait=False, cancel_futures=True)
            raise
    return outcomes


# --- Registry / dispatch -----------------------------------------------------

def get_runner(name: str) -> BatchFn:
    name = name.strip().lower()
    if name not in RUNNERS:
        raise ValueError(f"unknown runner '{name}'. Available: {sorted(RUNNERS.keys())}")
    return RUNNERS[name]


# RUNNERS maps runner name -> function(n, multiplier, additive, seed, workers).
RUNNERS: Dict[str, BatchFn] = {
    "serial": run_serial,
    "pooled": run_pooled,
}
