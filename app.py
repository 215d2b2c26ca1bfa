#!/usr/bin/env python3
"""
ARGO Float Catalog - Main Application Entry Point

Builds the float catalog for one session: a synthetic population first, then
the configured ARGO NetCDF profile files, and prints a summary report.
"""

import asyncio
import logging

import numpy as np

from argo_catalog.config import get_settings
from argo_catalog.catalog.store import get_catalog_store
from argo_catalog.ingestion.sources import sources_from_paths
from argo_catalog.utils.data_pipeline import CatalogAssembler
from argo_catalog.utils.catalog_stats import format_summary, summarize


async def run(settings) -> int:
    assembler = CatalogAssembler(
        store=get_catalog_store(),
        rng=np.random.default_rng(settings.random_seed),
        http_timeout=settings.http_timeout,
        show_progress=True
    )

    catalog = assembler.initial(settings.synthetic_floats)
    print(f"🌊 Synthetic catalog ready: {len(catalog)} floats")

    sources = sources_from_paths(settings.source_locators())
    print(f"📂 Loading {len(sources)} NetCDF files from {settings.data_dir}...")
    catalog = await assembler.ingest(sources)

    report = assembler.last_report
    if report and report.replaced:
        print(f"✓ Decoded {report.total_entries} profiles from {report.successful_sources} files")
    else:
        print("⚠ No NetCDF profiles decoded, keeping synthetic floats")

    print(format_summary(summarize(catalog), catalog))
    return 0


def main():
    """Build the catalog and print its summary"""

    try:
        settings = get_settings()
        logging.getLogger().setLevel(settings.log_level)
        return asyncio.run(run(settings))
    except KeyboardInterrupt:
        print("\n👋 ARGO float catalog stopped.")
        return 0
    except Exception as e:
        print(f"❌ Error building float catalog: {e}")
        return 1


if __name__ == "__main__":
    exit(main())
