"""
Tests for the collection layout and insert ordering.
"""

import networkx as nx

from inflow_mock.schema import (
    COLLECTIONS,
    FOREIGN_KEYS,
    HEADER_LINES,
    PRIMARY_KEYS,
    dependency_graph,
    insertion_order,
)


class TestLayout:
    """Static layout tables agree with each other."""

    def test_thirty_eight_collections(self):
        assert len(COLLECTIONS) == 38
        assert len(set(COLLECTIONS)) == 38

    def test_every_collection_has_primary_key(self):
        assert set(PRIMARY_KEYS) == set(COLLECTIONS)

    def test_foreign_key_targets_exist(self):
        for name, fks in FOREIGN_KEYS.items():
            assert name in COLLECTIONS
            for _field, target in fks:
                assert target in COLLECTIONS

    def test_header_lines_reference_headers(self):
        for header, (lines, fk) in HEADER_LINES.items():
            assert (fk, header) in FOREIGN_KEYS[lines]


class TestInsertionOrder:
    """Topological insert order over the FK graph."""

    def test_dependency_graph_is_dag(self):
        assert nx.is_directed_acyclic_graph(dependency_graph())

    def test_targets_precede_referrers(self):
        position = {name: i for i, name in enumerate(insertion_order())}
        for name, fks in FOREIGN_KEYS.items():
            for _field, target in fks:
                assert position[target] < position[name]

    def test_ties_follow_generation_order(self):
        """The declared collection order is already FK-safe, so it is kept."""
        assert insertion_order() == list(COLLECTIONS)
