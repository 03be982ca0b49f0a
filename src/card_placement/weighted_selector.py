import random
from typing import AbstractSet, Mapping, Optional

from .catalog import FACILITIES, Facility


class WeightedFacilitySelector:
    """
    WeightedFacilitySelector

    Picks one facility at random, with probability proportional to its weight,
    among the facilities that have not been excluded:

        P(f) = weights[f] / sum(weights[g] for g not in excluded)

    Candidates are walked in the catalog's fixed facility order, so a given
    random draw always maps to the same facility. This keeps runs reproducible
    under a fixed seed.

    The selector holds no state besides its random source. Pass either a seed
    or an existing random.Random; each worker should own its own selector.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        if seed is not None and rng is not None:
            raise ValueError("pass either seed or rng, not both")

        self._rng = rng if rng is not None else random.Random(seed)

    # ------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------

    def pick(
        self,
        weights: Mapping[Facility, float],
        excluded: AbstractSet[Facility] = frozenset(),
    ) -> Optional[Facility]:
        """
        Sample a facility outside `excluded`.

        Returns None when every facility is excluded or the remaining weights
        do not add up to anything positive.
        """
        candidates = [f for f in FACILITIES if f not in excluded]
        if not candidates:
            return None

        total_weight = 0.0
        for f in candidates:
            total_weight += weights[f]
        if total_weight <= 0:
            return None

        r = self._rng.random() * total_weight
        for f in candidates:
            r -= weights[f]
            if r < 0:
                return f

        # Numerical fallback (rounding left r at or above zero)
        return candidates[-1]
