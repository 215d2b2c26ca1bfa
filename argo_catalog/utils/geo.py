"""
Indian Ocean geography helpers

Land-exclusion test and named-region lookup over latitude/longitude. Both
tables are evaluated in order and the first match wins; zones overlap on
purpose, so the order is part of the lookup.
"""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class Zone:
    """Open rectangle in degrees; a None bound leaves that side unbounded"""
    name: str
    lat_min: Optional[float] = None
    lat_max: Optional[float] = None
    lon_min: Optional[float] = None
    lon_max: Optional[float] = None

    def contains(self, lat: float, lon: float) -> bool:
        if self.lat_min is not None and not lat > self.lat_min:
            return False
        if self.lat_max is not None and not lat < self.lat_max:
            return False
        if self.lon_min is not None and not lon > self.lon_min:
            return False
        if self.lon_max is not None and not lon < self.lon_max:
            return False
        return True


LAND_EXCLUSION_ZONES: List[Zone] = [
    Zone("Indian subcontinent", 8, 37, 68, 97),
    Zone("Arabian Peninsula", 12, 30, 34, 60),
    Zone("East African coast", -35, 15, 32, 52),
    Zone("Madagascar", -26, -12, 43, 51),
    Zone("Sri Lanka", 5, 10, 79, 82),
    Zone("Maldives", 0, 7, 72, 74),
    Zone("Indonesian archipelago", -11, 6, 95, 141),
    Zone("Australian coast", -44, -10, 110, 155),
    Zone("Persian Gulf", 24, 30, 48, 57),
    Zone("Red Sea", 12, 28, 32, 43),
]

OCEAN_REGIONS: List[Zone] = [
    Zone("Arabian Sea", lat_min=10, lon_min=55, lon_max=75),
    Zone("Bay of Bengal", 5, 22, 80, 95),
    Zone("Central Indian Ocean", -20, 5, 60, 90),
    Zone("Southern Indian Ocean", lat_max=-20, lon_min=30, lon_max=110),
    Zone("Western Indian Ocean", -30, 10, 40, 60),
    Zone("Eastern Indian Ocean", -35, -5, 90, 115),
]

DEFAULT_REGION = "Indian Ocean"


def exclusion_zone(lat: float, lon: float) -> Optional[str]:
    """Name of the first land-exclusion zone containing the point, if any"""
    for zone in LAND_EXCLUSION_ZONES:
        if zone.contains(lat, lon):
            return zone.name
    return None


def is_ocean(lat: float, lon: float) -> bool:
    """True when the point lies outside every land-exclusion zone"""
    return exclusion_zone(lat, lon) is None


def region_name(lat: Optional[float], lon: Optional[float]) -> str:
    """Named ocean region for a position, defaulting to the whole basin"""
    if lat is None or lon is None:
        return DEFAULT_REGION

    for region in OCEAN_REGIONS:
        if region.contains(lat, lon):
            return region.name
    return DEFAULT_REGION
