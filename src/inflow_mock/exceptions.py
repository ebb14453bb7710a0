"""
Error taxonomy for mock data generation.

- ConfigurationError: bad input (unknown preset, invalid counts, category
  with no product templates). Raised before or during generation.
- EmptySequenceError: a choice was requested from an empty candidate set.
  Indicates a bug in collection construction, not bad input.
- UniquenessError: a uniqueness index ran out of candidates.

All errors abort the whole generate() call; no partial graph is returned.
"""


class InflowMockError(Exception):
    """Base class for all inflow-mock errors."""


class ConfigurationError(InflowMockError):
    """Raised when generation options are invalid."""


class EmptySequenceError(InflowMockError):
    """Raised when picking from an empty sequence."""

    def __init__(self, what: str = "sequence") -> None:
        self.what = what
        super().__init__(f"Cannot pick from empty {what}")


class UniquenessError(InflowMockError):
    """Raised when a unique value cannot be produced within the retry budget."""

    def __init__(self, field: str, attempts: int) -> None:
        self.field = field
        self.attempts = attempts
        super().__init__(
            f"Could not generate a unique {field} after {attempts} attempts"
        )
