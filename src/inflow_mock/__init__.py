"""
inflow-mock - Deterministic mock data for a manufacturing inventory schema.

Builds a graph of 38 cross-referencing entity collections (reference data,
vendors, customers, products, orders, stock operations, summaries) from a
seeded random source. The same options and seed always produce the same
graph.
"""

__version__ = "0.1.0"

from .builder import EntityGraphBuilder, generate
from .config import PRESETS, GenerateConfig, GenerateOptions, load_config_file, resolve_config
from .exceptions import ConfigurationError, EmptySequenceError, InflowMockError, UniquenessError
from .graph import EntityGraph
from .random_source import SeededRandom
from .validation import GraphValidator
from .writer import write_json, write_sql

__all__ = [
    "__version__",
    # Generation
    "generate",
    "EntityGraphBuilder",
    "EntityGraph",
    "SeededRandom",
    # Configuration
    "PRESETS",
    "GenerateOptions",
    "GenerateConfig",
    "resolve_config",
    "load_config_file",
    # Validation and output
    "GraphValidator",
    "write_sql",
    "write_json",
    # Errors
    "InflowMockError",
    "ConfigurationError",
    "EmptySequenceError",
    "UniquenessError",
]
