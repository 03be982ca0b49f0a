import logging
import random

import pytest

from card_placement import CARDS, TrialSimulator
from simulations import SimulationParameters, simulate
from simulations.common import format_probability_line, format_stats_line, summarize_outcomes


@pytest.mark.parametrize(
    "kwargs",
    [
        {"trial_count": 0},
        {"tries": 0},
        {"threshold": -1},
        {"threshold": 7},
        {"weight_multiplier": -0.5},
        {"weight_multiplier": float("nan")},
        {"weight_multiplier": float("inf")},
        {"weight_additive": float("inf")},
        {"weight_additive": float("-inf")},
        {"weight_additive": float("nan")},
    ],
)
def test_invalid_parameters_rejected(kwargs):
    with pytest.raises(ValueError):
        SimulationParameters(**kwargs)


def test_defaults():
    p = SimulationParameters()

    assert (p.trial_count, p.threshold, p.tries) == (1000, 3, 1)
    assert (p.weight_multiplier, p.weight_additive) == (1.0, 0.0)


def test_negative_additive_allowed():
    assert SimulationParameters(weight_additive=-40.0).weight_additive == -40.0


def test_default_scenario():
    params = SimulationParameters(trial_count=1000, threshold=3, tries=1, weight_multiplier=1, weight_additive=0)

    r = simulate(params, seed=42)

    assert len(r.distribution) == 7
    assert sum(r.distribution) == 1000
    assert 0.0 <= r.single_trial_probability <= 1.0
    assert r.compound_probability == r.single_trial_probability
    assert r.runtime_s is not None
    assert r.meta == {"runner": "serial", "workers": 1, "seed": 42}


def test_compound_grows_with_tries():
    one = simulate(SimulationParameters(trial_count=300, tries=1), seed=8)
    five = simulate(SimulationParameters(trial_count=300, tries=5), seed=8)

    assert one.outcomes == five.outcomes
    assert five.compound_probability >= one.compound_probability


def test_single_trial_seeded_golden():
    # Seed 42 opens with draws 0.639, 0.025, 0.275, 0.223, 0.736, 0.677,
    # 0.892, 0.087; at multiplier 1000 each lands inside the card's own
    # specialty band, so all six facilities are claimed.
    params = SimulationParameters(trial_count=1, weight_multiplier=1000, weight_additive=0)

    r = simulate(params, seed=42)

    assert r.outcomes == [6]
    assert r.distribution == [0, 0, 0, 0, 0, 0, 1]
    assert r.single_trial_probability == 1.0


def test_single_trial_golden_matches_home_specialties():
    placement = TrialSimulator.from_rng(random.Random(42)).place_cards(1000.0, 0.0)
    home = {card.specialty for card in CARDS if card in placement[card.specialty]}

    assert len(home) == 6
    assert simulate(SimulationParameters(trial_count=1, weight_multiplier=1000), seed=42).outcomes == [len(home)]


def test_serial_runner_records_workers():
    r = simulate(SimulationParameters(trial_count=10), seed=3, workers=3)

    assert r.meta["workers"] == 3
    assert r.outcomes == simulate(SimulationParameters(trial_count=10), seed=3).outcomes


def test_pooled_runner():
    params = SimulationParameters(trial_count=40, threshold=2)

    r = simulate(params, seed=1, runner="pooled", workers=2)

    assert sum(r.distribution) == 40
    assert r.meta["workers"] == 2
    assert r.outcomes == simulate(params, seed=1, runner="pooled", workers=2).outcomes


def test_unknown_runner():
    with pytest.raises(ValueError):
        simulate(SimulationParameters(trial_count=5), runner="gpu")


def test_logs_batch(caplog):
    with caplog.at_level(logging.INFO, logger="simulations.run"):
        simulate(SimulationParameters(trial_count=10), seed=3)

    assert "running 10 trials" in caplog.text
    assert "finished 10 trials" in caplog.text


def test_summary_stats():
    s = summarize_outcomes([2, 4, 4, 4, 5, 5, 7, 9])

    assert (s.min, s.max) == (2, 9)
    assert s.mean == pytest.approx(5.0)
    assert s.std == pytest.approx(2.0)


def test_summary_stats_empty():
    with pytest.raises(ValueError):
        summarize_outcomes([])


def test_format_lines():
    r = simulate(SimulationParameters(trial_count=20, threshold=0, tries=2), seed=4)

    assert format_probability_line(r) == "Probability of >= 0 matching facilities in 2 tries: 100.00%"
    assert format_stats_line("x", r).startswith("x: p_single=1.0000, p_compound=1.0000")
