"""
Synthetic ARGO Float Generator

This module creates an illustrative population of Indian Ocean floats. It is
used as the initial catalog so consumers have data before (or without) any
decoded NetCDF profiles. Values follow simple latitude-dependent curves and
are not measurement grade.
"""

import math
import logging
from datetime import datetime, timedelta, timezone
from typing import List, NamedTuple, Optional, Tuple

import numpy as np

from ..catalog.models import FloatEntry, FloatStatus, FloatType, Scalar
from ..utils.geo import is_ocean, region_name

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SYNTHETIC_ID_BASE = 4900000
DEFAULT_FLOAT_COUNT = 50
MAX_PLACEMENT_ATTEMPTS = 20
ACTIVE_PROBABILITY = 0.85
BGC_PROBABILITY = 0.3
RECENT_PROFILE_WINDOW = timedelta(days=30)
SECONDS_PER_YEAR = 31536000


class SamplingBox(NamedTuple):
    lat_min: float
    lat_max: float
    lon_min: float
    lon_max: float


OCEAN_SAMPLING_BOXES: List[SamplingBox] = [
    SamplingBox(10, 25, 55, 75),      # Arabian Sea
    SamplingBox(5, 22, 80, 95),       # Bay of Bengal
    SamplingBox(-20, 5, 60, 90),      # Central Indian Ocean
    SamplingBox(-40, -20, 30, 110),   # Southern Indian Ocean
    SamplingBox(-30, 10, 40, 60),     # Western Indian Ocean
    SamplingBox(-35, -5, 90, 115),    # Eastern Indian Ocean
]

KNOWN_OCEAN_LOCATIONS: List[Tuple[float, float]] = [
    (15.5, 65.0), (18.2, 67.5), (20.1, 63.8),
    (12.5, 87.0), (15.8, 89.2), (18.0, 85.5),
    (-5.0, 75.0), (-8.5, 82.0), (-12.0, 78.5),
    (-25.0, 70.0), (-30.5, 85.0), (-35.2, 95.0),
    (-15.0, 55.0), (-20.5, 58.0), (-10.0, 52.0),
    (-25.0, 105.0), (-30.0, 100.0), (-20.0, 108.0),
]


def floats_per_box(count: int, n_boxes: int) -> List[int]:
    """Split ``count`` across boxes, giving the remainder to the earliest boxes"""
    base, remainder = divmod(count, n_boxes)
    return [base + (1 if index < remainder else 0) for index in range(n_boxes)]


class SyntheticFloatGenerator:
    """Generate a synthetic float population with ocean-only placement"""

    def __init__(self, rng: Optional[np.random.Generator] = None, seed: Optional[int] = None):
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.sampling_boxes = OCEAN_SAMPLING_BOXES
        self.fallback_locations = KNOWN_OCEAN_LOCATIONS

    def generate(self, count: int = DEFAULT_FLOAT_COUNT,
                 now: Optional[datetime] = None) -> List[FloatEntry]:
        """Generate ``count`` synthetic floats spread across the sampling boxes"""
        now = now or datetime.now(timezone.utc)
        floats = []
        fallbacks = 0

        for box, n_floats in zip(self.sampling_boxes, floats_per_box(count, len(self.sampling_boxes))):
            for _ in range(n_floats):
                position = self.sample_ocean_position(box)
                if position is None:
                    position = self.fallback_position()
                    fallbacks += 1

                floats.append(self._generate_float(len(floats), position, now))

        logger.info(f"Generated {len(floats)} synthetic floats ({fallbacks} placed from fallback table)")
        return floats

    def sample_ocean_position(self, box: SamplingBox) -> Optional[Tuple[float, float]]:
        """Rejection-sample an ocean point inside the box; None after the attempt cap"""
        for _ in range(MAX_PLACEMENT_ATTEMPTS):
            lat = float(self.rng.uniform(box.lat_min, box.lat_max))
            lon = float(self.rng.uniform(box.lon_min, box.lon_max))
            if is_ocean(lat, lon):
                return lat, lon
        return None

    def fallback_position(self) -> Tuple[float, float]:
        index = int(self.rng.integers(len(self.fallback_locations)))
        return self.fallback_locations[index]

    def random_position(self) -> Tuple[float, float]:
        """Uniform point over the basin's bounding box, without a land check"""
        return self.random_latitude(), self.random_longitude()

    def random_latitude(self) -> float:
        return -40 + float(self.rng.random()) * 65

    def random_longitude(self) -> float:
        return 30 + float(self.rng.random()) * 125

    def _generate_float(self, index: int, position: Tuple[float, float], now: datetime) -> FloatEntry:
        lat, lon = position
        platform_number = SYNTHETIC_ID_BASE + index

        temperature = self._realistic_temperature(lat)
        depth = 1500 + float(self.rng.random()) * 500

        return FloatEntry(
            id=f"ARGO_{platform_number}",
            float_id=str(platform_number),
            lat=lat,
            lon=lon,
            last_profile=now - float(self.rng.random()) * RECENT_PROFILE_WINDOW,
            temperature=Scalar(temperature),
            salinity=Scalar(self._realistic_salinity(lat)),
            # dbar and metres are close enough for illustrative data
            pressure=Scalar(depth),
            depth=Scalar(depth),
            status=FloatStatus.ACTIVE if self.rng.random() < ACTIVE_PROBABILITY else FloatStatus.INACTIVE,
            chlorophyll=self._realistic_chlorophyll(lat, now),
            dissolved_oxygen=self._realistic_oxygen(temperature),
            nitrate=self._realistic_nitrate(lat),
            ph=self._realistic_ph(lat),
            float_type=FloatType.BGC if self.rng.random() < BGC_PROBABILITY else FloatType.CORE,
            region=region_name(lat, lon),
            profile_variation=float(self.rng.random())
        )

    def _noise(self, width: float) -> float:
        """Uniform noise centred on zero with total ``width``"""
        return (float(self.rng.random()) - 0.5) * width

    def _realistic_temperature(self, lat: float) -> float:
        # Warm tropics, cooling towards higher latitudes
        return max(2.0, 28 - abs(lat) * 0.4 + self._noise(4))

    def _realistic_salinity(self, lat: float) -> float:
        salinity = 34.5 + abs(lat - 15) * 0.02 + self._noise(0.5)
        return min(37.0, max(33.0, salinity))

    def _realistic_chlorophyll(self, lat: float, now: datetime) -> float:
        base = 0.8 if abs(lat) > 20 else 0.3
        seasonal = math.sin(now.timestamp() / SECONDS_PER_YEAR * 2 * math.pi) * 0.2
        return max(0.1, base + seasonal + float(self.rng.random()) * 0.4)

    def _realistic_oxygen(self, temperature: float) -> float:
        # Colder water holds more oxygen (mg/L)
        oxygen = 8.5 - (temperature - 2) * 0.15 + self._noise(1.5)
        return min(9.0, max(2.0, oxygen))

    def _realistic_nitrate(self, lat: float) -> float:
        upwelling = 1.5 if abs(lat) > 15 else 0.5
        return min(45.0, max(0.0, upwelling + float(self.rng.random()) * 2))

    def _realistic_ph(self, lat: float) -> float:
        ph = 8.1 - abs(lat) * 0.002 + self._noise(0.1)
        return min(8.3, max(7.8, ph))


def generate_synthetic_floats(count: int = DEFAULT_FLOAT_COUNT, seed: Optional[int] = None) -> List[FloatEntry]:
    """Convenience function to generate a synthetic population"""
    generator = SyntheticFloatGenerator(seed=seed)
    return generator.generate(count)
