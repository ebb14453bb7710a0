"""
Tests for the inflow-mock command line.
"""

import json

import pytest

from inflow_mock import generate
from inflow_mock.cli import build_parser, main, non_negative_int

SIZE_ARGS = ["--products=20", "--vendors=3", "--customers=3", "--as-of=2024-06-30"]


class TestParser:
    """Argument parsing."""

    def test_non_negative_int(self):
        assert non_negative_int("0") == 0
        assert non_negative_int("15") == 15

    @pytest.mark.parametrize("value", ["-1", "abc", "2.5"])
    def test_rejects_bad_counts(self, value, capsys):
        with pytest.raises(SystemExit) as exc:
            build_parser().parse_args([f"--products={value}"])
        assert exc.value.code == 2

    def test_rejects_unknown_preset(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--preset=huge"])
        assert exc.value.code == 2

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.format == "sql"
        assert args.seed is None
        assert not args.validate_only


class TestMain:
    """End-to-end runs."""

    def test_writes_sql(self, tmp_path):
        output = tmp_path / "out.sql"
        assert main(SIZE_ARGS + ["--seed=1", f"--output={output}", "-q"]) == 0
        assert "COPY products (" in output.read_text()

    def test_writes_json_matching_library(self, tmp_path):
        output = tmp_path / "out.json"
        assert main(SIZE_ARGS + ["--seed=3", "--format=json", f"--output={output}", "-q"]) == 0
        data = json.loads(output.read_text())
        graph = generate(products=20, vendors=3, customers=3, seed=3, as_of="2024-06-30")
        assert [p["sku"] for p in data["products"]] == [p["sku"] for p in graph.products]

    def test_default_seed_is_42(self, tmp_path):
        output = tmp_path / "out.json"
        assert main(SIZE_ARGS + ["--format=json", f"--output={output}", "-q"]) == 0
        data = json.loads(output.read_text())
        graph = generate(products=20, vendors=3, customers=3, seed=42, as_of="2024-06-30")
        assert [p["sku"] for p in data["products"]] == [p["sku"] for p in graph.products]

    def test_default_output_path(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert main(SIZE_ARGS + ["--format=json", "-q"]) == 0
        assert (tmp_path / "seed.json").exists()

    def test_validate_only_writes_nothing(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert main(SIZE_ARGS + ["--validate-only", "-q"]) == 0
        assert list(tmp_path.iterdir()) == []

    def test_verbose_output(self, tmp_path, capsys):
        output = tmp_path / "out.sql"
        assert main(SIZE_ARGS + [f"--output={output}"]) == 0
        out = capsys.readouterr().out
        assert "Seed: 42" in out
        assert "Validation Report" in out
        assert "Success!" in out

    def test_skip_validation(self, tmp_path, capsys):
        output = tmp_path / "out.sql"
        assert main(SIZE_ARGS + ["--skip-validation", f"--output={output}"]) == 0
        assert "Validation skipped." in capsys.readouterr().out

    def test_config_file(self, tmp_path):
        config = tmp_path / "run.yaml"
        config.write_text("products: 12\nvendors: 2\ncustomers: 2\nseed: 5\nas-of: 2024-06-30\n")
        output = tmp_path / "out.json"
        assert main([f"--config={config}", "--format=json", f"--output={output}", "-q"]) == 0
        assert len(json.loads(output.read_text())["products"]) == 12

    def test_flags_win_over_config_file(self, tmp_path):
        config = tmp_path / "run.yaml"
        config.write_text("products: 12\nvendors: 2\ncustomers: 2\nseed: 5\n")
        output = tmp_path / "out.json"
        args = [f"--config={config}", "--products=15", "--format=json", f"--output={output}", "-q"]
        assert main(args) == 0
        assert len(json.loads(output.read_text())["products"]) == 15


class TestFailures:
    """Errors exit non-zero and write nothing."""

    def test_generation_error(self, tmp_path, capsys):
        output = tmp_path / "out.sql"
        assert main(SIZE_ARGS + ["--locations=0", f"--output={output}", "-q"]) == 1
        assert "Error:" in capsys.readouterr().err
        assert not output.exists()

    def test_missing_config_file(self, tmp_path, capsys):
        assert main([f"--config={tmp_path / 'missing.yaml'}", "-q"]) == 1
        assert "Cannot read config file" in capsys.readouterr().err

    def test_bad_as_of(self, capsys):
        assert main(["--as-of=yesterday", "-q"]) == 1
        assert "as_of" in capsys.readouterr().err

    def test_unwritable_output(self, tmp_path, capsys):
        """An output path that is a directory is reported, not raised."""
        target = tmp_path / "out"
        target.mkdir()
        assert main(SIZE_ARGS + [f"--output={target}", "-q"]) == 1
        assert "Error: cannot write" in capsys.readouterr().err
        assert sorted(p.name for p in tmp_path.iterdir()) == ["out"]
