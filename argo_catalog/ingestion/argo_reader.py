"""
ARGO NetCDF Profile Decoder

This module decodes ARGO multi-profile NetCDF files (``<float>_prof.nc``)
from raw bytes into per-profile records of temperature, salinity and
pressure, filtering fill values along the way.
"""

import io
import os
import re
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

import numpy as np
import xarray as xr

from ..utils.argo_time import to_calendar
from ..utils.numerics import FILL_VALUE_THRESHOLD, valid_reading

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEFAULT_PROFILES = 1
DEFAULT_LEVELS = 1000
DEFAULT_SALINITY = 35.0
PRESSURE_STEP_PER_LEVEL = 2.0

PROFILE_FILE_PATTERN = re.compile(r'(\d+)_prof\.nc$')


@dataclass
class ProfileRecord:
    """One vertical cast from one float; the four level arrays are index-aligned"""
    latitude: Optional[float]
    longitude: Optional[float]
    timestamp: datetime
    temperature: List[float] = field(default_factory=list)
    salinity: List[float] = field(default_factory=list)
    pressure: List[float] = field(default_factory=list)
    depth: List[float] = field(default_factory=list)

    @property
    def n_levels(self) -> int:
        return len(self.temperature)


class ArgoNetCDFReader:
    """Class to decode ARGO profile files into ProfileRecords"""

    def __init__(self, default_levels: int = DEFAULT_LEVELS):
        self.default_levels = default_levels

    def decode(self, buffer: bytes, float_id: str) -> List[ProfileRecord]:
        """
        Decode one NetCDF buffer into profile records

        Args:
            buffer: Raw bytes of the NetCDF file
            float_id: Identifier of the float the file belongs to

        Returns:
            List of ProfileRecord objects; empty if the buffer cannot be decoded
        """
        try:
            # Raw values are needed so fill values reach the sentinel filter
            with xr.open_dataset(io.BytesIO(buffer), decode_cf=False) as ds:
                n_profiles = self._get_dimension(ds, 'N_PROF', DEFAULT_PROFILES)
                n_levels = self._get_dimension(ds, 'N_LEVELS', self.default_levels)

                latitude = self._get_flat_variable(ds, 'LATITUDE')
                longitude = self._get_flat_variable(ds, 'LONGITUDE')
                juld = self._get_flat_variable(ds, 'JULD')
                temp = self._get_flat_variable(ds, 'TEMP')
                psal = self._get_flat_variable(ds, 'PSAL')
                pres = self._get_flat_variable(ds, 'PRES')

            profiles = []
            for prof_idx in range(n_profiles):
                profile = self._extract_profile(
                    prof_idx, n_levels, latitude, longitude, juld, temp, psal, pres
                )
                if profile:
                    profiles.append(profile)

            logger.info(f"Decoded {len(profiles)} of {n_profiles} profiles for float {float_id}")
            return profiles

        except Exception as e:
            logger.error(f"Error decoding ARGO data for float {float_id}: {str(e)}")
            return []

    def read_file(self, file_path: str, float_id: Optional[str] = None) -> List[ProfileRecord]:
        """Decode a local NetCDF file"""
        float_id = float_id or float_id_from_path(file_path)
        try:
            with open(file_path, 'rb') as f:
                buffer = f.read()
        except OSError as e:
            logger.error(f"Error reading ARGO file {file_path}: {str(e)}")
            return []
        return self.decode(buffer, float_id)

    def _extract_profile(self, prof_idx: int, n_levels: int,
                         latitude: Optional[np.ndarray], longitude: Optional[np.ndarray],
                         juld: Optional[np.ndarray], temp: Optional[np.ndarray],
                         psal: Optional[np.ndarray], pres: Optional[np.ndarray]) -> Optional[ProfileRecord]:
        """Extract profile ``prof_idx`` from the flattened profile-major arrays"""
        start = prof_idx * n_levels

        temperature = self._level_slice(temp, start, n_levels)
        salinity = self._level_slice(psal, start, n_levels)
        pressure = self._level_slice(pres, start, n_levels)

        valid_temp = np.isfinite(temperature) & (temperature < FILL_VALUE_THRESHOLD)
        if not np.any(valid_temp):
            return None

        salinity = np.where(self._is_measured(salinity), salinity, DEFAULT_SALINITY)
        # Missing pressure becomes a synthetic depth surrogate of 2 per level
        pressure = np.where(
            self._is_measured(pressure),
            pressure,
            np.arange(n_levels, dtype='float64') * PRESSURE_STEP_PER_LEVEL
        )

        pressure_levels = pressure[valid_temp].tolist()
        return ProfileRecord(
            latitude=valid_reading(self._value_at(latitude, prof_idx)),
            longitude=valid_reading(self._value_at(longitude, prof_idx)),
            timestamp=to_calendar(self._value_at(juld, prof_idx)),
            temperature=temperature[valid_temp].tolist(),
            salinity=salinity[valid_temp].tolist(),
            pressure=pressure_levels,
            depth=list(pressure_levels)
        )

    @staticmethod
    def _is_measured(values: np.ndarray) -> np.ndarray:
        return np.isfinite(values) & (values < FILL_VALUE_THRESHOLD)

    @staticmethod
    def _get_dimension(ds: xr.Dataset, name: str, default: int) -> int:
        size = ds.sizes.get(name)
        return int(size) if size else default

    @staticmethod
    def _get_flat_variable(ds: xr.Dataset, name: str) -> Optional[np.ndarray]:
        """Flatten a variable in row-major order; None when the file lacks it"""
        if name not in ds.variables:
            return None

        values = np.asarray(ds[name].values)
        if values.dtype.kind not in 'fiu':
            raise TypeError(f"Variable {name} is not numeric (dtype {values.dtype})")
        return values.astype('float64').ravel()

    @staticmethod
    def _level_slice(values: Optional[np.ndarray], start: int, n_levels: int) -> np.ndarray:
        """Levels [start, start + n_levels), NaN where the array is absent or too short"""
        out = np.full(n_levels, np.nan)
        if values is None or start >= values.size:
            return out
        chunk = values[start:start + n_levels]
        out[:chunk.size] = chunk
        return out

    @staticmethod
    def _value_at(values: Optional[np.ndarray], index: int) -> Optional[float]:
        if values is None or index >= values.size:
            return None
        return float(values[index])


def float_id_from_path(file_path: str) -> str:
    """Float identifier from an ARGO ``<float>_prof.nc`` file name, else the file stem"""
    filename = os.path.basename(str(file_path))
    match = PROFILE_FILE_PATTERN.search(filename)
    if match:
        return match.group(1)
    return os.path.splitext(filename)[0]
