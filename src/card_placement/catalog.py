from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple


class Facility(str, Enum):
    SPEED = "speed"
    STAMINA = "stamina"
    POWER = "power"
    GUTS = "guts"
    WISDOM = "wisdom"
    BEACH = "beach"


# Iteration order matters: the selector walks candidates in this order.
FACILITIES: Tuple[Facility, ...] = (
    Facility.SPEED,
    Facility.STAMINA,
    Facility.POWER,
    Facility.GUTS,
    Facility.WISDOM,
    Facility.BEACH,
)

BASE_WEIGHTS: Dict[Facility, float] = {
    Facility.SPEED: 100.0,
    Facility.STAMINA: 100.0,
    Facility.POWER: 100.0,
    Facility.GUTS: 100.0,
    Facility.WISDOM: 100.0,
    Facility.BEACH: 50.0,
}

FACILITY_CAPACITY = 5


@dataclass(frozen=True)
class Card:
    name: str
    specialty: Facility


CARDS: Tuple[Card, ...] = (
    Card("Card1", Facility.SPEED),
    Card("Card2", Facility.STAMINA),
    Card("Card3", Facility.POWER),
    Card("Card4", Facility.GUTS),
    Card("Card5", Facility.WISDOM),
    Card("Card6", Facility.SPEED),
    Card("Card7", Facility.POWER),
    Card("Card8", Facility.BEACH),
)


Placement = Dict[Facility, List[Card]]


def empty_placement() -> Placement:
    return {f: [] for f in FACILITIES}
