"""
Generation configuration: presets, option resolution, YAML config files.

Options arrive as a GenerateOptions, a plain mapping (e.g. loaded from YAML),
or keyword overrides. resolve_config() merges them over a preset and
validates the result into an immutable GenerateConfig.

Precedence (highest first):
    keyword overrides > options > preset defaults

Usage:
    config = resolve_config({"preset": "medium"}, seed=7)
    config = resolve_config(load_config_file("run.yaml"), products=50)
"""

from __future__ import annotations

import time
from dataclasses import dataclass, fields
from datetime import date, datetime, time as dt_time, timezone
from pathlib import Path
from typing import Any, Mapping

import yaml

from .constants import PRODUCT_TEMPLATES
from .exceptions import ConfigurationError

PRESETS: dict[str, dict[str, int]] = {
    "small": {"products": 100, "vendors": 15, "customers": 20, "locations": 3},
    "medium": {"products": 500, "vendors": 50, "customers": 75, "locations": 4},
    "large": {"products": 1000, "vendors": 100, "customers": 150, "locations": 5},
}

DEFAULT_PRESET = "small"

COUNT_FIELDS = ("products", "vendors", "customers", "locations")


@dataclass
class GenerateOptions:
    """Caller-facing options. Every field is optional; None means "use default"."""

    preset: str | None = None
    products: int | None = None
    vendors: int | None = None
    customers: int | None = None
    locations: int | None = None
    seed: int | None = None
    as_of: datetime | date | str | None = None
    product_categories: list[str] | tuple[str, ...] | None = None
    verbose: bool | None = None


@dataclass(frozen=True)
class GenerateConfig:
    """
    Fully resolved, validated configuration for one generation run.

    Attributes:
        preset: Preset the counts were defaulted from
        products: Number of products to generate
        vendors: Requested vendor count (clamped to the name pool)
        customers: Requested customer count (clamped to the name pool)
        locations: Number of locations (clamped to the location pool)
        seed: Random Source seed
        as_of: Reference instant for all generated dates and timestamps
        product_categories: Template categories to draw products from, or
            None for all templates
        verbose: Print per-level progress
    """

    preset: str
    products: int
    vendors: int
    customers: int
    locations: int
    seed: int
    as_of: datetime
    product_categories: tuple[str, ...] | None = None
    verbose: bool = False


_OPTION_NAMES = frozenset(f.name for f in fields(GenerateOptions))


def default_as_of() -> datetime:
    """Midnight UTC of the current day."""
    today = datetime.now(timezone.utc).date()
    return datetime.combine(today, dt_time.min, tzinfo=timezone.utc)


def default_seed() -> int:
    """Current time in milliseconds."""
    return int(time.time() * 1000)


def _options_to_dict(options: GenerateOptions | Mapping[str, Any] | None) -> dict[str, Any]:
    if options is None:
        return {}
    if isinstance(options, GenerateOptions):
        return {f.name: getattr(options, f.name) for f in fields(options)}
    if isinstance(options, Mapping):
        return {str(k).replace("-", "_"): v for k, v in options.items()}
    raise ConfigurationError(
        f"options must be a mapping or GenerateOptions, got {type(options).__name__}"
    )


def _validate_count(name: str, value: Any) -> int:
    # bool is an int subclass but never a meaningful count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ConfigurationError(f"{name} must be non-negative, got {value}")
    return value


def _parse_as_of(value: Any) -> datetime:
    if isinstance(value, datetime):
        instant = value
    elif isinstance(value, date):
        instant = datetime.combine(value, dt_time.min)
    elif isinstance(value, str):
        try:
            instant = datetime.fromisoformat(value)
        except ValueError as e:
            raise ConfigurationError(f"as_of is not an ISO date/datetime: {value!r}") from e
    else:
        raise ConfigurationError(f"as_of must be a date, datetime or ISO string, got {value!r}")
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def select_templates(product_categories: tuple[str, ...] | None) -> tuple:
    """
    Return the product templates for the given categories (all when None).

    Raises:
        ConfigurationError: If the selection is empty or a named category has
            no product template
    """
    if product_categories is None:
        return PRODUCT_TEMPLATES
    if not product_categories:
        raise ConfigurationError("product_categories must name at least one category")
    known = {t["category"] for t in PRODUCT_TEMPLATES}
    missing = [name for name in product_categories if name not in known]
    if missing:
        raise ConfigurationError(
            f"No product templates for categories: {', '.join(missing)} "
            f"(available: {', '.join(sorted(known))})"
        )
    wanted = set(product_categories)
    return tuple(t for t in PRODUCT_TEMPLATES if t["category"] in wanted)


def resolve_config(
    options: GenerateOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> GenerateConfig:
    """
    Merge options and overrides over a preset and validate the result.

    Args:
        options: GenerateOptions or mapping of option names to values
        **overrides: Option values that win over `options`

    Returns:
        Validated GenerateConfig

    Raises:
        ConfigurationError: Unknown option or preset, bad count, bad as_of,
            or a product category with no templates
    """
    merged = _options_to_dict(options)
    for key, value in overrides.items():
        if value is not None:
            merged[key] = value

    unknown = sorted(set(merged) - _OPTION_NAMES)
    if unknown:
        raise ConfigurationError(f"Unknown option(s): {', '.join(unknown)}")

    preset = merged.get("preset") or DEFAULT_PRESET
    if preset not in PRESETS:
        raise ConfigurationError(
            f"Unknown preset {preset!r} (expected one of: {', '.join(PRESETS)})"
        )

    counts = {}
    for name in COUNT_FIELDS:
        value = merged.get(name)
        counts[name] = PRESETS[preset][name] if value is None else _validate_count(name, value)

    seed = merged.get("seed")
    if seed is None:
        seed = default_seed()
    elif isinstance(seed, bool) or not isinstance(seed, int):
        raise ConfigurationError(f"seed must be an integer, got {seed!r}")

    as_of_value = merged.get("as_of")
    as_of = default_as_of() if as_of_value is None else _parse_as_of(as_of_value)

    categories = merged.get("product_categories")
    if categories is not None:
        if isinstance(categories, str):
            categories = (categories,)
        categories = tuple(categories)
        select_templates(categories)

    return GenerateConfig(
        preset=preset,
        seed=seed,
        as_of=as_of,
        product_categories=categories,
        verbose=bool(merged.get("verbose") or False),
        **counts,
    )


def load_config_file(path: str | Path) -> dict[str, Any]:
    """
    Load generation options from a YAML file.

    The file must contain a single mapping of option names to values.
    Hyphenated keys (as-of) are accepted as their underscore form.

    Raises:
        ConfigurationError: If the file cannot be read or parsed, or is not
            a mapping
    """
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {path} must contain a mapping, got {type(data).__name__}"
        )
    return {str(k).replace("-", "_"): v for k, v in data.items()}
