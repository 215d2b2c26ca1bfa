"""
Float Catalog Models

This module defines the unified in-memory schema shared by decoded ARGO
profiles and synthetic floats. Sensor fields are a tagged variant: synthetic
floats carry a single surface value (Scalar), decoded profiles carry one value
per measurement level (Series).
"""

import numbers
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple, Union

import pandas as pd


@dataclass(frozen=True)
class Scalar:
    """Single sensor value (synthetic floats)"""
    value: float

    is_series = False

    def __post_init__(self):
        object.__setattr__(self, 'value', float(self.value))

    def surface(self, default: float) -> float:
        return self.value

    def maximum(self, default: float) -> float:
        return self.value

    def extrema(self) -> Optional[Tuple[float, float]]:
        return self.value, self.value

    def as_plain(self) -> float:
        return self.value


@dataclass(frozen=True)
class Series:
    """Per-level sensor values (decoded profiles), ordered from first to last level"""
    values: Tuple[float, ...]

    is_series = True

    def __post_init__(self):
        object.__setattr__(self, 'values', tuple(float(v) for v in self.values))

    def __len__(self) -> int:
        return len(self.values)

    def surface(self, default: float) -> float:
        return self.values[0] if self.values else default

    def maximum(self, default: float) -> float:
        return max(self.values) if self.values else default

    def extrema(self) -> Optional[Tuple[float, float]]:
        if not self.values:
            return None
        return min(self.values), max(self.values)

    def as_plain(self) -> List[float]:
        return list(self.values)


SensorValue = Union[Scalar, Series]


def sensor_value(value: Union[float, Sequence[float], SensorValue]) -> SensorValue:
    """Wrap a raw float or sequence in the matching variant"""
    if isinstance(value, (Scalar, Series)):
        return value
    if isinstance(value, numbers.Real):
        return Scalar(float(value))
    return Series(tuple(value))


class FloatStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class FloatType(str, Enum):
    CORE = "Core"
    BGC = "BGC"


@dataclass(frozen=True)
class FloatEntry:
    """One float (or one decoded profile) as presented to consumers"""
    id: str
    float_id: str
    lat: float
    lon: float
    last_profile: datetime
    temperature: SensorValue
    salinity: SensorValue
    pressure: SensorValue
    depth: SensorValue
    status: FloatStatus
    float_type: FloatType
    region: str
    profile_variation: float
    profile_index: Optional[int] = None

    # Biogeochemical values; only BGC floats are expected to display them
    chlorophyll: Optional[float] = None
    dissolved_oxygen: Optional[float] = None
    nitrate: Optional[float] = None
    ph: Optional[float] = None

    @property
    def is_active(self) -> bool:
        return self.status == FloatStatus.ACTIVE

    @property
    def is_decoded(self) -> bool:
        return self.profile_index is not None

    def to_dict(self) -> Dict[str, Any]:
        """Flat, JSON-friendly representation"""
        return {
            'id': self.id,
            'float_id': self.float_id,
            'profile_index': self.profile_index,
            'lat': self.lat,
            'lon': self.lon,
            'last_profile': self.last_profile.isoformat(),
            'temperature': self.temperature.as_plain(),
            'salinity': self.salinity.as_plain(),
            'pressure': self.pressure.as_plain(),
            'depth': self.depth.as_plain(),
            'status': self.status.value,
            'float_type': self.float_type.value,
            'chlorophyll': self.chlorophyll,
            'dissolved_oxygen': self.dissolved_oxygen,
            'nitrate': self.nitrate,
            'ph': self.ph,
            'region': self.region,
            'profile_variation': self.profile_variation,
        }


@dataclass(frozen=True)
class FloatCatalog:
    """Immutable snapshot of every float known to the session"""
    entries: Tuple[FloatEntry, ...]
    data_loaded: bool = False
    version: int = 0
    source_float_ids: Tuple[str, ...] = ()
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        object.__setattr__(self, 'entries', tuple(self.entries))
        object.__setattr__(self, 'source_float_ids', tuple(self.source_float_ids))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[FloatEntry]:
        return iter(self.entries)

    def active_entries(self) -> List[FloatEntry]:
        return [entry for entry in self.entries if entry.is_active]

    def get(self, entry_id: str) -> Optional[FloatEntry]:
        for entry in self.entries:
            if entry.id == entry_id:
                return entry
        return None

    def with_version(self, version: int) -> 'FloatCatalog':
        return FloatCatalog(
            entries=self.entries,
            data_loaded=self.data_loaded,
            version=version,
            source_float_ids=self.source_float_ids,
            created_at=self.created_at
        )

    def to_dataframe(self) -> pd.DataFrame:
        """One row per entry; sensor columns hold floats or lists depending on provenance"""
        return pd.DataFrame([entry.to_dict() for entry in self.entries])

    def __repr__(self):
        provenance = "decoded" if self.data_loaded else "synthetic"
        return f"<FloatCatalog(version={self.version}, entries={len(self.entries)}, {provenance})>"
