import logging
import random
from typing import Dict, Optional, Sequence

from .catalog import (
    BASE_WEIGHTS,
    CARDS,
    FACILITIES,
    FACILITY_CAPACITY,
    Card,
    Facility,
    Placement,
    empty_placement,
)
from .weighted_selector import WeightedFacilitySelector

logger = logging.getLogger(__name__)


def facility_weights(card: Card, multiplier: float, additive: float) -> Dict[Facility, float]:
    """
    Weight map seen by `card`: base weights, with the card's own specialty
    boosted to base * multiplier + additive (floored at zero).
    """
    weights: Dict[Facility, float] = {}
    for f in FACILITIES:
        base = BASE_WEIGHTS[f]
        if f == card.specialty:
            weights[f] = max(0.0, base * multiplier + additive)
        else:
            weights[f] = base
    return weights


def score(placement: Placement) -> int:
    """
    Number of facilities holding at least one card of their own specialty.
    """
    count = 0
    for f in FACILITIES:
        if any(card.specialty == f for card in placement[f]):
            count += 1
    return count


class TrialSimulator:
    """
    Places every catalog card once and scores the result.

    Cards are handled in catalog order. Each card draws a facility from the
    boosted weight map; if that facility already holds FACILITY_CAPACITY
    cards it is excluded and the card draws again. A card that runs out of
    facilities (or of positive weight) is left unplaced.
    """

    def __init__(
        self,
        selector: Optional[WeightedFacilitySelector] = None,
        seed: Optional[int] = None,
    ):
        if selector is None:
            selector = WeightedFacilitySelector(seed=seed)
        elif seed is not None:
            raise ValueError("pass either selector or seed, not both")
        self.selector = selector

    @classmethod
    def from_rng(cls, rng: random.Random) -> "TrialSimulator":
        return cls(selector=WeightedFacilitySelector(rng=rng))

    # ------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------

    def run_trial(self, multiplier: float, additive: float) -> int:
        return score(self.place_cards(multiplier, additive))

    def place_cards(
        self,
        multiplier: float,
        additive: float,
        cards: Sequence[Card] = CARDS,
        capacity: int = FACILITY_CAPACITY,
    ) -> Placement:
        """
        Run the placement pass of one trial and return the fresh placement.
        """
        if capacity <= 0:
            raise ValueError("capacity must be > 0")

        placement = empty_placement()

        for card in cards:
            tried = set()
            while len(tried) < len(FACILITIES):
                # Recomputed every attempt; the boost never decays on retry.
                weights = facility_weights(card, multiplier, additive)
                facility = self.selector.pick(weights, tried)
                if facility is None:
                    logger.debug("no facility with positive weight left for %s", card.name)
                    break

                if len(placement[facility]) < capacity:
                    placement[facility].append(card)
                    break

                tried.add(facility)
            else:
                logger.debug("every facility full, %s left unplaced", card.name)

        return placement
