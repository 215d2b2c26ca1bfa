"""
Catalog Assembly Pipeline

This module builds the session's float catalog: a synthetic population first,
then, source by source, decoded ARGO profiles that replace it in full once at
least one profile has been decoded.
"""

import os
import asyncio
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np
from tqdm import tqdm

from ..catalog.models import FloatCatalog, FloatEntry, FloatStatus, FloatType, Series
from ..catalog.store import CatalogStore, get_catalog_store
from ..exceptions import SourceUnavailableError
from ..ingestion.argo_reader import ArgoNetCDFReader, ProfileRecord
from ..ingestion.sources import Locator, Source, describe_locator, discover_sources, fetch_source
from ..synthetic.generator import DEFAULT_FLOAT_COUNT, SyntheticFloatGenerator
from .geo import region_name

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SourceLike = Union[Source, Tuple[str, Locator]]


@dataclass
class IngestionReport:
    """Outcome of one ingestion run"""
    total_sources: int = 0
    successful_sources: int = 0
    failed_sources: int = 0
    total_entries: int = 0
    replaced: bool = False
    errors: List[str] = field(default_factory=list)

    def record_failure(self, message: str):
        self.failed_sources += 1
        self.errors.append(message)
        logger.error(message)


class CatalogAssembler:
    """Builds and replaces the session catalog"""

    def __init__(self, store: Optional[CatalogStore] = None,
                 reader: Optional[ArgoNetCDFReader] = None,
                 generator: Optional[SyntheticFloatGenerator] = None,
                 rng: Optional[np.random.Generator] = None,
                 http_timeout: float = 30.0,
                 show_progress: bool = False):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.store = store if store is not None else get_catalog_store()
        self.reader = reader or ArgoNetCDFReader()
        self.generator = generator or SyntheticFloatGenerator(rng=self.rng)
        self.http_timeout = http_timeout
        self.show_progress = show_progress
        self.last_report: Optional[IngestionReport] = None

    def initial(self, count: int = DEFAULT_FLOAT_COUNT) -> FloatCatalog:
        """Populate the store with a synthetic catalog"""
        floats = self.generator.generate(count)
        catalog = FloatCatalog(entries=floats, data_loaded=False)
        return self.store.initialize(catalog)

    async def ingest(self, sources: Sequence[SourceLike]) -> FloatCatalog:
        """
        Decode every source in order and replace the catalog if any profile decoded

        Returns:
            The current catalog after ingestion (unchanged when nothing decoded)
        """
        report = IngestionReport(total_sources=len(sources))
        new_float_data: List[FloatEntry] = []
        loaded_float_ids: List[str] = []

        for float_id, locator in tqdm(sources, desc="Decoding profiles", disable=not self.show_progress):
            entries = await self.process_single_source(float_id, locator, report)
            if entries:
                report.successful_sources += 1
                loaded_float_ids.append(float_id)
                new_float_data.extend(entries)

        report.total_entries = len(new_float_data)
        self.last_report = report

        if not new_float_data:
            logger.warning("No profiles decoded from any source; keeping the current catalog")
            return self.store.current()

        candidate = FloatCatalog(
            entries=new_float_data,
            data_loaded=True,
            source_float_ids=loaded_float_ids
        )
        report.replaced = True
        logger.info(
            f"Ingestion complete: {report.successful_sources}/{report.total_sources} sources, "
            f"{report.total_entries} profiles"
        )
        return self.store.replace(candidate)

    async def ingest_directory(self, directory_path: str) -> FloatCatalog:
        """Ingest every ``.nc`` file in a directory"""
        return await self.ingest(discover_sources(directory_path))

    async def process_single_source(self, float_id: str, locator: Locator,
                                    report: IngestionReport) -> List[FloatEntry]:
        """Retrieve and decode one source; failures are logged and yield no entries"""
        description = describe_locator(locator)
        try:
            buffer = await fetch_source(locator, timeout=self.http_timeout)
        except SourceUnavailableError as e:
            report.record_failure(f"Error loading {description}: {e.reason}")
            return []
        except Exception as e:
            report.record_failure(f"Fatal error processing {description}: {str(e)}")
            return []

        try:
            profiles = self.reader.decode(buffer, float_id)
            entries = [self._profile_to_entry(float_id, idx, profile) for idx, profile in enumerate(profiles)]
        except Exception as e:
            report.record_failure(f"Fatal error processing {description}: {str(e)}")
            return []

        if not entries:
            report.failed_sources += 1
            report.errors.append(f"No profiles found in {description}")
            logger.warning(f"No profiles found in {description}")
        else:
            logger.info(f"Loaded {len(entries)} profiles for float {float_id} from {description}")
        return entries

    def _profile_to_entry(self, float_id: str, profile_index: int, profile: ProfileRecord) -> FloatEntry:
        lat = profile.latitude if profile.latitude is not None else self.generator.random_latitude()
        lon = profile.longitude if profile.longitude is not None else self.generator.random_longitude()

        return FloatEntry(
            id=f"ARGO_{float_id}_{profile_index}",
            float_id=float_id,
            profile_index=profile_index,
            lat=lat,
            lon=lon,
            last_profile=profile.timestamp,
            temperature=Series(profile.temperature),
            salinity=Series(profile.salinity),
            pressure=Series(profile.pressure),
            depth=Series(profile.depth),
            status=FloatStatus.ACTIVE,
            float_type=FloatType.CORE,
            region=region_name(lat, lon),
            profile_variation=float(self.rng.random())
        )


def build_catalog(sources: Iterable[SourceLike],
                  synthetic_count: int = DEFAULT_FLOAT_COUNT,
                  store: Optional[CatalogStore] = None,
                  seed: Optional[int] = None,
                  http_timeout: float = 30.0,
                  show_progress: bool = False) -> FloatCatalog:
    """Convenience function: synthetic catalog, then ingestion of ``sources``"""
    assembler = CatalogAssembler(
        store=store if store is not None else CatalogStore(),
        rng=np.random.default_rng(seed),
        http_timeout=http_timeout,
        show_progress=show_progress
    )
    assembler.initial(synthetic_count)
    return asyncio.run(assembler.ingest(list(sources)))


if __name__ == "__main__":
    import sys

    from .catalog_stats import format_summary, summarize

    if len(sys.argv) != 2:
        print("Usage: python -m argo_catalog.utils.data_pipeline <directory_path>")
        sys.exit(1)

    directory_path = sys.argv[1]
    print(f"Building float catalog from: {directory_path}")

    try:
        catalog = build_catalog(discover_sources(os.path.abspath(directory_path)), show_progress=True)
        print(format_summary(summarize(catalog), catalog))
    except Exception as e:
        print(f"Fatal error: {e}")
        sys.exit(1)
