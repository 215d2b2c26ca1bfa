import numpy as np
import pytest

from argo_catalog.catalog.store import CatalogStore

from .sample_data_generator import SampleArgoGenerator


@pytest.fixture
def sample_generator():
    return SampleArgoGenerator(seed=7)


@pytest.fixture
def three_profile_bytes(sample_generator):
    """A float file holding three decodable profiles"""
    return sample_generator.to_bytes(sample_generator.realistic_dataset(n_prof=3))


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def store():
    return CatalogStore()
