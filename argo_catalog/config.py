"""
Configuration for the ARGO float catalog

Settings come from environment variables, optionally loaded from a .env file.
"""

import os
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEFAULT_SOURCE_FILES = [
    '1901766_prof.nc',
    '1902674_prof.nc',
    '3902658_prof.nc',
    '7902242_prof.nc',
    '7902312_prof.nc'
]


@dataclass
class CatalogSettings:
    """Runtime settings for building the float catalog"""
    data_dir: str = './data'
    source_files: List[str] = field(default_factory=lambda: list(DEFAULT_SOURCE_FILES))
    synthetic_floats: int = 50
    random_seed: Optional[int] = None
    http_timeout: float = 30.0
    log_level: str = 'INFO'

    def source_locators(self) -> List[str]:
        """Source files resolved against the data directory; URLs pass through"""
        locators = []
        for name in self.source_files:
            if name.startswith(('http://', 'https://')) or os.path.isabs(name):
                locators.append(name)
            else:
                locators.append(os.path.join(self.data_dir, name))
        return locators


def _get_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid integer for {name}: {raw!r}")
        return default


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid number for {name}: {raw!r}")
        return default


def _get_log_level(name: str, default: str) -> str:
    level = os.getenv(name, default).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning(f"Ignoring unknown log level for {name}: {level!r}")
        return default
    return level


def get_settings() -> CatalogSettings:
    """Build settings from the current environment"""
    source_env = os.getenv('ARGO_SOURCE_FILES')
    if source_env is not None:
        source_files = [name.strip() for name in source_env.split(',') if name.strip()]
    else:
        source_files = list(DEFAULT_SOURCE_FILES)

    return CatalogSettings(
        data_dir=os.getenv('ARGO_DATA_DIR', './data'),
        source_files=source_files,
        synthetic_floats=_get_int('ARGO_SYNTHETIC_FLOATS', 50),
        random_seed=_get_int('ARGO_RANDOM_SEED', None),
        http_timeout=_get_float('ARGO_HTTP_TIMEOUT', 30.0),
        log_level=_get_log_level('ARGO_LOG_LEVEL', 'INFO')
    )
