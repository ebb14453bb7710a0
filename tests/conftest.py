"""
Pytest fixtures for inflow-mock tests.

Provides:
- AS_OF: fixed reference instant so dates/timestamps are reproducible
- small_config / small_graph: the small preset at seed 42, built once per session
"""

from datetime import datetime, timezone

import pytest

from inflow_mock import EntityGraphBuilder, resolve_config

AS_OF = datetime(2024, 6, 30, tzinfo=timezone.utc)


@pytest.fixture(scope="session")
def small_config():
    """Resolved small-preset configuration, seed 42."""
    return resolve_config(preset="small", seed=42, as_of=AS_OF)


@pytest.fixture(scope="session")
def small_graph(small_config):
    """Entity graph for the small preset, seed 42 (shared, read-only)."""
    return EntityGraphBuilder(small_config).build()


@pytest.fixture
def small_data(small_graph):
    """Mutable plain copy of the small graph, for corruption tests."""
    return small_graph.to_dict()
