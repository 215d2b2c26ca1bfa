import asyncio
import logging

import numpy as np
import pytest

from argo_catalog.catalog.models import FloatStatus, FloatType, Scalar, Series
from argo_catalog.catalog.store import CatalogStore
from argo_catalog.exceptions import CatalogNotInitializedError
from argo_catalog.ingestion.sources import Source
from argo_catalog.utils import data_pipeline
from argo_catalog.utils.data_pipeline import CatalogAssembler, build_catalog
from argo_catalog.utils.geo import region_name

from .sample_data_generator import FILL_VALUE


@pytest.fixture
def assembler(store, rng):
    return CatalogAssembler(store=store, rng=rng)


def test_initial_catalog_is_synthetic(assembler, store):
    catalog = assembler.initial()

    assert store.current() is catalog
    assert catalog.data_loaded is False
    assert catalog.version == 1
    assert len(catalog) == 50
    assert all(isinstance(entry.temperature, Scalar) for entry in catalog)


def test_ingesting_no_sources_keeps_synthetic_catalog(assembler, store):
    initial = assembler.initial()
    catalog = asyncio.run(assembler.ingest([]))

    assert catalog is initial
    assert catalog.data_loaded is False
    assert len(catalog) == 50
    assert assembler.last_report.replaced is False


def test_partial_failure_still_replaces_catalog(assembler, store, three_profile_bytes, tmp_path):
    assembler.initial()
    sources = [
        Source("1901766", three_profile_bytes),
        Source("1902674", str(tmp_path / "1902674_prof.nc")),
    ]

    catalog = asyncio.run(assembler.ingest(sources))

    assert catalog.data_loaded is True
    assert catalog.version == 2
    assert len(catalog) == 3
    assert [entry.id for entry in catalog] == ["ARGO_1901766_0", "ARGO_1901766_1", "ARGO_1901766_2"]
    assert catalog.source_float_ids == ("1901766",)
    assert store.current() is catalog

    report = assembler.last_report
    assert report.total_sources == 2
    assert report.successful_sources == 1
    assert report.failed_sources == 1
    assert report.total_entries == 3
    assert "file not found" in report.errors[0]


def test_decoded_entries_carry_profile_data(assembler, three_profile_bytes):
    assembler.initial()
    catalog = asyncio.run(assembler.ingest([("1901766", three_profile_bytes)]))

    for index, entry in enumerate(catalog):
        assert entry.float_id == "1901766"
        assert entry.profile_index == index
        assert entry.float_type == FloatType.CORE
        assert entry.status == FloatStatus.ACTIVE
        assert isinstance(entry.temperature, Series)
        assert len(entry.temperature) == len(entry.salinity) == len(entry.pressure) == len(entry.depth)
        assert entry.region == region_name(entry.lat, entry.lon)
        assert 0.0 <= entry.profile_variation < 1.0
        assert entry.chlorophyll is None

    assert catalog.entries[0].lat == pytest.approx(-20.0)
    assert catalog.entries[2].lon == pytest.approx(71.0)


def test_sources_are_ingested_in_order(assembler, sample_generator):
    first = sample_generator.to_bytes(sample_generator.realistic_dataset(n_prof=2, platform_number="7902242"))
    second = sample_generator.to_bytes(sample_generator.realistic_dataset(n_prof=1, platform_number="3902658"))
    assembler.initial(6)

    catalog = asyncio.run(assembler.ingest([("7902242", first), ("3902658", second)]))

    assert [entry.id for entry in catalog] == ["ARGO_7902242_0", "ARGO_7902242_1", "ARGO_3902658_0"]
    assert catalog.source_float_ids == ("7902242", "3902658")


def test_all_sources_failing_keeps_current_catalog(assembler, sample_generator, caplog):
    initial = assembler.initial(12)
    empty = sample_generator.to_bytes(sample_generator.build_dataset(temperature=[[FILL_VALUE, FILL_VALUE]]))

    with caplog.at_level(logging.WARNING):
        catalog = asyncio.run(assembler.ingest([
            ("1", b"garbage"),
            ("2", empty),
            ("3", "/nonexistent/3_prof.nc"),
        ]))

    assert catalog is initial
    assert catalog.data_loaded is False
    assert assembler.last_report.failed_sources == 3
    assert "No profiles decoded" in caplog.text


def test_unreadable_locators_do_not_abort_the_batch(assembler, three_profile_bytes):
    initial = assembler.initial(8)

    catalog = asyncio.run(assembler.ingest([
        ("1", "/tmp/bad\x00name_prof.nc"),
        ("2", b"garbage"),
        ("3", 3902658),
    ]))

    assert catalog is initial
    report = assembler.last_report
    assert report.total_sources == 3
    assert report.failed_sources == 3
    assert report.replaced is False

    catalog = asyncio.run(assembler.ingest([
        ("1", "/tmp/bad\x00name_prof.nc"),
        ("1901766", three_profile_bytes),
    ]))
    assert catalog.data_loaded is True
    assert catalog.source_float_ids == ("1901766",)


def test_unexpected_fetch_error_is_recorded(assembler, three_profile_bytes, monkeypatch):
    async def broken_fetch(locator, timeout=30.0):
        if locator == "broken":
            raise RuntimeError("connection pool exhausted")
        return bytes(locator)

    monkeypatch.setattr(data_pipeline, "fetch_source", broken_fetch)
    assembler.initial(8)

    catalog = asyncio.run(assembler.ingest([("9", "broken"), ("1901766", three_profile_bytes)]))

    assert len(catalog) == 3
    report = assembler.last_report
    assert report.failed_sources == 1
    assert "connection pool exhausted" in report.errors[0]


def test_missing_position_gets_random_fallback(assembler, sample_generator):
    buffer = sample_generator.to_bytes(sample_generator.build_dataset(
        temperature=[[20.0, 15.0]],
        latitude=[FILL_VALUE],
        longitude=[80.0],
    ))
    assembler.initial(6)

    entry = asyncio.run(assembler.ingest([("5", buffer)])).entries[0]

    assert -40 <= entry.lat < 25
    assert entry.lon == 80.0


def test_ingest_before_initial_raises_when_nothing_decodes(store, rng):
    assembler = CatalogAssembler(store=store, rng=rng)
    with pytest.raises(CatalogNotInitializedError):
        asyncio.run(assembler.ingest([]))


def test_ingest_directory(assembler, sample_generator, tmp_path):
    sample_generator.write_files(str(tmp_path), ["7902312", "1902674"])
    (tmp_path / "notes.txt").write_text("not a profile file")
    assembler.initial()

    catalog = asyncio.run(assembler.ingest_directory(str(tmp_path)))

    assert catalog.source_float_ids == ("1902674", "7902312")
    assert len(catalog) == 6


def test_build_catalog_convenience(three_profile_bytes):
    store = CatalogStore()
    catalog = build_catalog([("1901766", three_profile_bytes)], synthetic_count=10, store=store, seed=3)

    assert catalog.data_loaded is True
    assert len(catalog) == 3
    assert store.current() is catalog


def test_build_catalog_without_sources_is_synthetic():
    catalog = build_catalog([], synthetic_count=7, seed=3)
    assert catalog.data_loaded is False
    assert len(catalog) == 7
