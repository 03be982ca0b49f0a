# simulations/run.py

from __future__ import annotations

import logging
from typing import Optional

from .batch import get_runner
from .common import SimulationParameters, SimulationResult, Timer
from .stats import compound_probability, distribution, single_trial_probability


logger = logging.getLogger(__name__)


def simulate(
    params: SimulationParameters,
    seed: Optional[int] = None,
    runner: str = "serial",
    workers: int = 1,
) -> SimulationResult:
    """
    Run a batch of trials and summarize it.

    Parameters
    ----------
    params:
        Trial count, success threshold, tries and the specialty boost.
    seed:
        Base RNG seed. None draws fresh randomness.
    runner:
        Name of the batch runner ('serial' or 'pooled').
    workers:
        Number of worker processes (pooled runner only).

    Returns
    -------
    SimulationResult
    """
    fn = get_runner(runner)

    logger.info(
        "running %d trials (runner=%s, multiplier=%s, additive=%s)",
        params.trial_count,
        runner,
        params.weight_multiplier,
        params.weight_additive,
    )
    with Timer() as t:
        outcomes = fn(
            params.trial_count,
            params.weight_multiplier,
            params.weight_additive,
            seed,
            workers=workers,
        )

    p_single = single_trial_probability(outcomes, params.threshold)
    result = SimulationResult(
        params=params,
        outcomes=outcomes,
        distribution=distribution(outcomes),
        single_trial_probability=p_single,
        compound_probability=compound_probability(p_single, params.tries),
        runtime_s=t.elapsed_s,
        meta={"runner": runner, "workers": workers, "seed": seed},
    )
    logger.info("finished %d trials in %.3fs", params.trial_count, t.elapsed_s)
    return result


def simulate_pair(
    params_a: SimulationParameters,
    params_b: SimulationParameters,
    seed: Optional[int] = None,
    runner: str = "serial",
    workers: int = 1,
):
    """
    Convenience helper: run two parameter sets under the same seed.

    Returns (result_a, result_b).
    """
    ra = simulate(params_a, seed=seed, runner=runner, workers=workers)
    rb = simulate(params_b, seed=seed, runner=runner, workers=workers)
    return ra, rb
