"""
EntityGraph - immutable result of one generation run.

Maps each collection name to a tuple of read-only records. Collections are
also reachable as attributes:

    graph = generate(seed=42)
    graph["products"][0]["sku"]
    graph.products[0]["sku"]
    graph.row_counts()["purchase_orders"]
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Iterator

from .schema import COLLECTIONS

Record = MappingProxyType


def freeze_record(row: dict[str, Any]) -> Record:
    """Return a read-only view over a copy of row."""
    return MappingProxyType(dict(row))


class EntityGraph(Mapping):
    """
    Write-once collection of generated entity records.

    Collections keep generation order. Records are MappingProxyType views,
    collections are tuples, so nothing can be appended or reassigned after
    the builder returns.
    """

    __slots__ = ("_collections", "seed")

    def __init__(self, collections: Mapping[str, Any], seed: int | None = None) -> None:
        missing = [name for name in COLLECTIONS if name not in collections]
        if missing:
            raise ValueError(f"EntityGraph missing collections: {', '.join(missing)}")
        extra = [name for name in collections if name not in COLLECTIONS]
        if extra:
            raise ValueError(f"EntityGraph got unknown collections: {', '.join(extra)}")
        object.__setattr__(
            self,
            "_collections",
            {name: tuple(freeze_record(r) for r in collections[name]) for name in COLLECTIONS},
        )
        object.__setattr__(self, "seed", seed)

    def __getitem__(self, name: str) -> tuple[Record, ...]:
        return self._collections[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._collections)

    def __len__(self) -> int:
        return len(self._collections)

    def __getattr__(self, name: str) -> tuple[Record, ...]:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._collections[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("EntityGraph is immutable")

    def row_counts(self) -> dict[str, int]:
        """Number of records per collection, in collection order."""
        return {name: len(rows) for name, rows in self._collections.items()}

    def total_rows(self) -> int:
        return sum(len(rows) for rows in self._collections.values())

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        """Plain, mutable copy: collection name -> list of dicts."""
        return {name: [dict(r) for r in rows] for name, rows in self._collections.items()}

    def __repr__(self) -> str:
        return (
            f"EntityGraph(seed={self.seed}, collections={len(self)}, "
            f"rows={self.total_rows()})"
        )
