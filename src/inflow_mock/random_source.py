"""
SeededRandom - Deterministic random source for mock data generation.

Every random decision in a generation run is drawn from one SeededRandom,
so identical (seed, options) pairs reproduce an identical entity graph.

The generator is a 31-bit linear congruential generator:

    state = (state * 1103515245 + 12345) & 0x7FFFFFFF
    next() = state / 2**31          # in [0, 1)

All other operations (pick, shuffle, uuid, dates, ...) are composed from
next(). Nothing here consults another entropy source.

Usage:
    rng = SeededRandom(42, unique_ids=True)
    rng.pick(["a", "b", "c"])
    rng.range(1, 5)              # inclusive
    rng.uuid()                   # 00000001-xxxx-4xxx-yxxx-xxxxxxxxxxxx
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone
from typing import Callable, Sequence, TypeVar

import numpy as np

from .exceptions import EmptySequenceError

T = TypeVar("T")

LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345
LCG_MASK = 0x7FFFFFFF
LCG_MODULUS = LCG_MASK + 1

UUID_TEMPLATE = "xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx"
COUNTER_UUID_TEMPLATE = "xxxx-4xxx-yxxx-xxxxxxxxxxxx"


def utc_now() -> datetime:
    """Default clock: current UTC wall-clock time."""
    return datetime.now(timezone.utc)


def frozen_clock(instant: datetime) -> Callable[[], datetime]:
    """Return a clock that always reports the same instant."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)

    def clock() -> datetime:
        return instant

    return clock


def format_timestamp(instant: datetime) -> str:
    """ISO 8601 UTC timestamp with millisecond precision."""
    instant = instant.astimezone(timezone.utc)
    return instant.strftime("%Y-%m-%dT%H:%M:%S.") + f"{instant.microsecond // 1000:03d}Z"


class SeededRandom:
    """
    Stateful seeded random source.

    Attributes:
        seed: Seed the source was created with
        unique_ids: When True, uuid() prefixes a strictly incrementing
            counter so identifiers are unique within the run
        counter: Number of counter-prefixed identifiers issued so far
    """

    def __init__(
        self,
        seed: int,
        unique_ids: bool = False,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """
        Initialize the random source.

        Args:
            seed: Integer seed (any int; reduced to 31 bits)
            unique_ids: Prefix identifiers with a run-local counter
            clock: Callable returning the reference instant for date() and
                timestamp() (defaults to the wall clock)
        """
        self.seed = seed
        self.unique_ids = unique_ids
        self.counter = 0
        self._state = seed & LCG_MASK
        self._clock = clock or utc_now

    # =========================================================================
    # Core
    # =========================================================================

    def next(self) -> float:
        """Advance the LCG and return a value in [0, 1)."""
        self._state = (self._state * LCG_MULTIPLIER + LCG_INCREMENT) & LCG_MASK
        return self._state / LCG_MODULUS

    # =========================================================================
    # Choices
    # =========================================================================

    def pick(self, seq: Sequence[T]) -> T:
        """
        Return one element of a non-empty sequence.

        Raises:
            EmptySequenceError: If seq is empty
        """
        if not seq:
            raise EmptySequenceError()
        return seq[math.floor(self.next() * len(seq))]

    def pick_multiple(self, seq: Sequence[T], count: int) -> list[T]:
        """
        Return min(count, len(seq)) distinct elements in random order.

        Raises:
            EmptySequenceError: If seq is empty
        """
        if not seq:
            raise EmptySequenceError()
        return self.shuffle(seq)[: min(count, len(seq))]

    def weighted_pick(self, seq: Sequence[T], weights: Sequence[float]) -> T:
        """
        Return one element chosen with probability proportional to its weight.

        Consumes exactly one next() draw.
        """
        if not seq:
            raise EmptySequenceError()
        if len(weights) != len(seq):
            raise ValueError(
                f"weights length {len(weights)} != sequence length {len(seq)}"
            )
        cumulative = np.cumsum(np.asarray(weights, dtype=np.float64))
        target = self.next() * cumulative[-1]
        index = int(np.searchsorted(cumulative, target, side="right"))
        return seq[min(index, len(seq) - 1)]

    def shuffle(self, seq: Sequence[T]) -> list[T]:
        """Return a shuffled copy of seq (Fisher-Yates). Input is not mutated."""
        result = list(seq)
        for i in range(len(result) - 1, 0, -1):
            j = math.floor(self.next() * (i + 1))
            result[i], result[j] = result[j], result[i]
        return result

    # =========================================================================
    # Numbers
    # =========================================================================

    def range(self, lo: int, hi: int) -> int:
        """Integer in [lo, hi] inclusive. Callers must ensure lo <= hi."""
        return math.floor(self.next() * (hi - lo + 1)) + lo

    def range_float(self, lo: float, hi: float) -> float:
        """Float in [lo, hi). Callers must ensure lo <= hi."""
        return self.next() * (hi - lo) + lo

    def boolean(self, probability: float = 0.5) -> bool:
        """True with the given probability."""
        return self.next() < probability

    # =========================================================================
    # Derived forms
    # =========================================================================

    def uuid(self) -> str:
        """
        36-char identifier in 8-4-4-4-12 hex grouping.

        Version nibble is fixed to 4 and the variant bits to 10xx. In
        unique_ids mode the first group is the run counter as 8 hex digits.
        """
        if self.unique_ids:
            self.counter += 1
            return f"{self.counter:08x}-{self._fill_hex(COUNTER_UUID_TEMPLATE)}"
        return self._fill_hex(UUID_TEMPLATE)

    def _fill_hex(self, template: str) -> str:
        chars = []
        for c in template:
            if c == "x":
                chars.append(f"{math.floor(self.next() * 16):x}")
            elif c == "y":
                chars.append(f"{(math.floor(self.next() * 16) & 0x3) | 0x8:x}")
            else:
                chars.append(c)
        return "".join(chars)

    def date(self, days_ago: int = 365) -> str:
        """ISO date between the reference instant and days_ago days earlier."""
        day = self._clock() - timedelta(days=self.range(0, days_ago))
        return day.date().isoformat()

    def timestamp(self) -> str:
        """ISO timestamp of the reference instant."""
        return format_timestamp(self._clock())

    def barcode(self) -> str:
        """12-digit numeric string (UPC-A length, no check digit)."""
        return "".join(str(self.range(0, 9)) for _ in range(12))

    def __repr__(self) -> str:
        return (
            f"SeededRandom(seed={self.seed}, unique_ids={self.unique_ids}, "
            f"counter={self.counter})"
        )
