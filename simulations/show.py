# simulations/show.py

from __future__ import annotations

import argparse
import logging
import sys

import matplotlib.pyplot as plt

from .batch import RUNNERS
from .common import (
    DEFAULT_ADDITIVE,
    DEFAULT_MULTIPLIER,
    DEFAULT_THRESHOLD,
    DEFAULT_TRIALS,
    DEFAULT_TRIES,
    SimulationParameters,
    SimulationResult,
    format_probability_line,
    format_stats_line,
)
from .run import simulate


BAR_COLOR = (75 / 255, 192 / 255, 192 / 255, 0.5)


def add_run_arguments(parser: argparse.ArgumentParser) -> None:
    """
    Options shared by every tool that runs a batch.
    """
    parser.add_argument("--trials", type=int, default=DEFAULT_TRIALS, help="number of simulated trials")
    parser.add_argument("--threshold", type=int, default=DEFAULT_THRESHOLD, help="matching facilities needed for a success")
    parser.add_argument("--tries", type=int, default=DEFAULT_TRIES, help="attempts compounded into the final probability")
    parser.add_argument("--seed", type=int, default=None, help="fixed seed for reproducible runs")
    parser.add_argument("--runner", default="serial", choices=sorted(RUNNERS.keys()))
    parser.add_argument("--workers", type=int, default=1, help="worker processes (pooled runner)")
    parser.add_argument("--no-plot", action="store_true", help="print results only")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def plot_distribution(ax, r: SimulationResult, title: str) -> None:
    labels = [str(i) for i in range(len(r.distribution))]
    ax.bar(labels, r.distribution, color=BAR_COLOR, label="Frequency")
    ax.set_title(title)
    ax.set_xlabel("Matching facilities")
    ax.legend()


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(
        description="Estimate how many facilities receive a card of their own specialty."
    )
    add_run_arguments(parser)
    parser.add_argument("--multiplier", type=float, default=DEFAULT_MULTIPLIER, help="specialty weight multiplier")
    parser.add_argument("--additive", type=float, default=DEFAULT_ADDITIVE, help="specialty weight additive")

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        params = SimulationParameters(
            trial_count=args.trials,
            threshold=args.threshold,
            tries=args.tries,
            weight_multiplier=args.multiplier,
            weight_additive=args.additive,
        )
        result = simulate(params, seed=args.seed, runner=args.runner, workers=args.workers)
    except ValueError as e:
        parser.error(str(e))

    print(format_stats_line("result", result))
    print(format_probability_line(result))

    if args.no_plot:
        return 0

    fig, ax = plt.subplots(figsize=(8, 4))
    plot_distribution(
        ax,
        result,
        f"multiplier={params.weight_multiplier}, additive={params.weight_additive}",
    )
    ax.set_ylabel("Trials")
    fig.suptitle(format_probability_line(result))
    fig.tight_layout()
    plt.show()

    return 0


def cli() -> None:
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    cli()
