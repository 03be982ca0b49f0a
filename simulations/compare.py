# simulations/compare.py

from __future__ import annotations

import argparse
import sys

import matplotlib.pyplot as plt

from .common import (
    DEFAULT_ADDITIVE,
    DEFAULT_MULTIPLIER,
    SimulationParameters,
    format_probability_line,
    format_stats_line,
)
from .run import simulate_pair
from .show import add_run_arguments, configure_logging, plot_distribution


def _params(args: argparse.Namespace, multiplier: float, additive: float) -> SimulationParameters:
    return SimulationParameters(
        trial_count=args.trials,
        threshold=args.threshold,
        tries=args.tries,
        weight_multiplier=multiplier,
        weight_additive=additive,
    )


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(
        description="Compare two specialty boost settings via Monte Carlo (same y-axis plots)."
    )
    add_run_arguments(parser)
    parser.add_argument("--multiplier-a", type=float, default=DEFAULT_MULTIPLIER)
    parser.add_argument("--additive-a", type=float, default=DEFAULT_ADDITIVE)
    parser.add_argument("--multiplier-b", type=float, required=True)
    parser.add_argument("--additive-b", type=float, default=DEFAULT_ADDITIVE)

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        params_a = _params(args, args.multiplier_a, args.additive_a)
        params_b = _params(args, args.multiplier_b, args.additive_b)
        # Run both settings under the same seed
        ra, rb = simulate_pair(
            params_a, params_b, seed=args.seed, runner=args.runner, workers=args.workers
        )
    except ValueError as e:
        parser.error(str(e))

    label_a = f"A (x{params_a.weight_multiplier} {params_a.weight_additive:+g})"
    label_b = f"B (x{params_b.weight_multiplier} {params_b.weight_additive:+g})"
    print(format_stats_line(label_a, ra))
    print(format_stats_line(label_b, rb))
    print(f"{label_a}: {format_probability_line(ra)}")
    print(f"{label_b}: {format_probability_line(rb)}")

    if args.no_plot:
        return 0

    fig, (ax_a, ax_b) = plt.subplots(1, 2, figsize=(12, 4), sharey=True)
    plot_distribution(ax_a, ra, label_a)
    ax_a.set_ylabel("Trials")
    plot_distribution(ax_b, rb, label_b)

    fig.suptitle(
        f"Compare: {label_a} vs {label_b}  "
        f"(trials={args.trials}, threshold={args.threshold}, tries={args.tries})"
    )
    fig.tight_layout(rect=[0, 0.02, 1, 0.92])
    plt.show()

    return 0


def cli() -> None:
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    cli()
