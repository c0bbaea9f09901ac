"""Pytest fixtures and configuration."""

import pytest

from pii_processors.config.settings import ProcessorSettings
from pii_processors.core.anonymizer import ColumnAnonymizer
from pii_processors.core.consistency import ConsistencyStore
from pii_processors.core.metadata import ColumnMetadata
from pii_processors.core.processors import ProcessorContext
from pii_processors.core.random_source import RandomSource


TEST_SEED = 20180828


@pytest.fixture
def rng():
    """Seeded random source."""
    return RandomSource(seed=TEST_SEED)


@pytest.fixture
def store():
    """Fresh, empty consistency store."""
    return ConsistencyStore(run_id="test-run")


@pytest.fixture
def settings():
    return ProcessorSettings(seed=TEST_SEED)


@pytest.fixture
def context(settings, store, rng):
    """Processor context wired to the seeded fixtures."""
    return ProcessorContext.create(settings, store=store, rng=rng)


@pytest.fixture
def anonymizer(settings):
    """Seeded anonymizer with its own store."""
    return ColumnAnonymizer(settings=settings, run_id="test-run")


@pytest.fixture
def ssn_column():
    """Column whose values are keyed for consistency."""
    return ColumnMetadata(
        parent_schema="public",
        parent_table="users",
        parent_column="ssn",
        table_schema="public",
        table_name="users",
        column_name="ssn",
    )


@pytest.fixture
def sample_values():
    """Sample cell values for testing."""
    return {
        "ssn": "123-45-6789",
        "token": "ABC-1a2bC",
        "password": "hunter2",
        "date": "2018-08-28",
        "uuid": "1d8f5e3c-8f0e-4c43-9a36-2b6a0f4c9c11",
        "other_uuid": "6f1c2a9e-3d2b-4a1e-8c5d-7e9f0a1b2c3d",
        "empty": "",
    }
