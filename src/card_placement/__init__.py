"""
Core of the card placement simulator: the fixed catalog, the weighted
facility selector and the single-trial simulator.
"""

from .catalog import BASE_WEIGHTS, CARDS, FACILITIES, FACILITY_CAPACITY, Card, Facility
from .trial_simulator import TrialSimulator
from .weighted_selector import WeightedFacilitySelector

__all__ = [
    "BASE_WEIGHTS",
    "CARDS",
    "FACILITIES",
    "FACILITY_CAPACITY",
    "Card",
    "Facility",
    "TrialSimulator",
    "WeightedFacilitySelector",
]
