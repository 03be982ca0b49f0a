# simulations/__init__.py
"""
Monte Carlo runs of the card placement simulator.

Run a batch via:
    python -m simulations.show --trials ... --threshold ... --tries ... --multiplier ... --additive ...

Compare two boost settings via:
    python -m simulations.compare --multiplier-a ... --multiplier-b ...
"""

from .common import SimulationParameters, SimulationResult
from .run import simulate

__all__ = ["SimulationParameters", "SimulationResult", "simulate"]
