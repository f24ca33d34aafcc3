"""Riot API constants and enum definitions."""

from enum import Enum
from typing import Dict


class Region(str, Enum):
    """Riot API regions for regional routing."""

    AMERICAS = "americas"
    ASIA = "asia"
    EUROPE = "europe"
    SEA = "sea"


class Platform(str, Enum):
    """Riot API platforms for platform routing."""

    BR1 = "br1"
    EUN1 = "eun1"
    EUW1 = "euw1"
    JP1 = "jp1"
    KR = "kr"
    LA1 = "la1"
    LA2 = "la2"
    NA1 = "na1"
    OC1 = "oc1"
    RU = "ru"
    TR1 = "tr1"


class RankedQueue(str, Enum):
    """Queue type discriminators returned by league-v4 entries."""

    RANKED_SOLO_5X5 = "RANKED_SOLO_5x5"
    RANKED_FLEX_SR = "RANKED_FLEX_SR"


# User-facing server labels accepted by the API
SERVER_PLATFORMS: Dict[str, Platform] = {
    "euw": Platform.EUW1,
    "eune": Platform.EUN1,
}
