"""
Tests for option resolution and YAML config files.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from inflow_mock.config import (
    PRESETS,
    GenerateConfig,
    GenerateOptions,
    default_as_of,
    load_config_file,
    resolve_config,
    select_templates,
)
from inflow_mock.constants import PRODUCT_TEMPLATES
from inflow_mock.exceptions import ConfigurationError


class TestResolveConfig:
    """Preset defaults, precedence and validation."""

    def test_defaults_to_small(self):
        config = resolve_config(seed=1)
        assert config.preset == "small"
        assert (config.products, config.vendors, config.customers, config.locations) == (
            100, 15, 20, 3,
        )

    @pytest.mark.parametrize("preset", sorted(PRESETS))
    def test_preset_counts(self, preset):
        config = resolve_config(preset=preset, seed=1)
        for name, value in PRESETS[preset].items():
            assert getattr(config, name) == value

    def test_override_wins_over_options(self):
        config = resolve_config({"preset": "large", "products": 5}, products=7, seed=1)
        assert config.products == 7
        assert config.vendors == 100

    def test_none_override_ignored(self):
        config = resolve_config({"products": 5}, products=None, seed=1)
        assert config.products == 5

    def test_options_dataclass(self):
        config = resolve_config(GenerateOptions(preset="medium", seed=3))
        assert config.products == 500
        assert config.seed == 3

    def test_seed_defaults_to_time(self):
        assert resolve_config().seed > 1_600_000_000_000

    def test_config_is_frozen(self):
        config = resolve_config(seed=1)
        assert isinstance(config, GenerateConfig)
        with pytest.raises(AttributeError):
            config.products = 3

    def test_unknown_preset(self):
        with pytest.raises(ConfigurationError, match="Unknown preset"):
            resolve_config(preset="huge")

    def test_unknown_option(self):
        with pytest.raises(ConfigurationError, match="Unknown option"):
            resolve_config({"warehouses": 3})

    @pytest.mark.parametrize("value", [-1, 2.5, "10", True])
    def test_bad_counts(self, value):
        with pytest.raises(ConfigurationError):
            resolve_config(products=value, seed=1)

    def test_bad_seed(self):
        with pytest.raises(ConfigurationError, match="seed"):
            resolve_config(seed="abc")

    def test_bad_options_type(self):
        with pytest.raises(ConfigurationError):
            resolve_config(["products", 3])

    def test_zero_counts_allowed(self):
        assert resolve_config(customers=0, seed=1).customers == 0

    def test_category_string_becomes_tuple(self):
        config = resolve_config(product_categories="Bearings", seed=1)
        assert config.product_categories == ("Bearings",)

    def test_unknown_category(self):
        with pytest.raises(ConfigurationError, match="No product templates"):
            resolve_config(product_categories=["Bearings", "Widgets"], seed=1)

    @pytest.mark.parametrize("value", [[], ()])
    def test_empty_selection_rejected(self, value):
        """An empty selection leaves nothing to build products from."""
        with pytest.raises(ConfigurationError, match="at least one category"):
            resolve_config(product_categories=value, seed=1)


class TestAsOf:
    """Reference instant parsing."""

    def test_default_is_midnight_utc(self):
        as_of = default_as_of()
        assert as_of.tzinfo == timezone.utc
        assert (as_of.hour, as_of.minute, as_of.second) == (0, 0, 0)

    def test_iso_date_string(self):
        config = resolve_config(as_of="2024-06-30", seed=1)
        assert config.as_of == datetime(2024, 6, 30, tzinfo=timezone.utc)

    def test_date_object(self):
        config = resolve_config(as_of=date(2024, 1, 2), seed=1)
        assert config.as_of == datetime(2024, 1, 2, tzinfo=timezone.utc)

    def test_aware_datetime_converted_to_utc(self):
        eastern = timezone(timedelta(hours=-5))
        config = resolve_config(as_of=datetime(2024, 1, 1, 19, tzinfo=eastern), seed=1)
        assert config.as_of == datetime(2024, 1, 2, tzinfo=timezone.utc)

    def test_bad_string(self):
        with pytest.raises(ConfigurationError, match="as_of"):
            resolve_config(as_of="last tuesday", seed=1)

    def test_bad_type(self):
        with pytest.raises(ConfigurationError, match="as_of"):
            resolve_config(as_of=20240630, seed=1)


class TestSelectTemplates:
    """Template filtering by category."""

    def test_none_selects_all(self):
        assert select_templates(None) == PRODUCT_TEMPLATES

    def test_filters_by_category(self):
        templates = select_templates(("Hydraulics",))
        assert {t["prefix"] for t in templates} == {"HC", "HH"}


class TestConfigFile:
    """YAML config files."""

    def test_load_mapping(self, tmp_path):
        path = tmp_path / "run.yaml"
        path.write_text("preset: medium\nseed: 9\nas-of: 2024-06-30\nproducts: 40\n")
        options = load_config_file(path)
        assert options["preset"] == "medium"
        assert options["as_of"] == date(2024, 6, 30)

        config = resolve_config(options)
        assert config.products == 40
        assert config.vendors == 50
        assert config.as_of == datetime(2024, 6, 30, tzinfo=timezone.utc)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config_file(path) == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Cannot read"):
            load_config_file(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("preset: [small\n")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_config_file(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- small\n- medium\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            load_config_file(path)
