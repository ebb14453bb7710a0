"""
Tests for the SQL (COPY) and JSON writers.
"""

import json
from decimal import Decimal

import pytest

from inflow_mock.schema import COLLECTIONS
from inflow_mock.writer import (
    copy_bool,
    copy_num,
    copy_str,
    format_copy_value,
    write_json,
    write_sql,
)


@pytest.fixture(scope="module")
def sql_text(small_graph, tmp_path_factory):
    """SQL seed file for the small graph, as text."""
    path = write_sql(small_graph, tmp_path_factory.mktemp("sql") / "seed.sql")
    return path.read_text(encoding="utf-8")


class TestCopyFormatting:
    """Value formatting for COPY ... FROM stdin."""

    def test_null(self):
        assert copy_str(None) == "\\N"
        assert copy_num(None) == "\\N"
        assert copy_bool(None) == "\\N"
        assert format_copy_value(None) == "\\N"

    def test_string_escapes(self):
        assert copy_str("a\tb\nc\\d\re") == "a\\tb\\nc\\\\d\\re"

    def test_bool(self):
        assert format_copy_value(True) == "t"
        assert format_copy_value(False) == "f"

    def test_decimal_keeps_cents(self):
        assert format_copy_value(Decimal("1.50")) == "1.50"

    def test_int(self):
        assert format_copy_value(42) == "42"


class TestWriteSql:
    """PostgreSQL seed file."""

    def test_replication_role_wrapped(self, sql_text):
        assert "SET session_replication_role = replica;" in sql_text
        assert sql_text.rstrip().endswith("SET session_replication_role = DEFAULT;")

    def test_seed_in_header(self, sql_text):
        assert "-- Seed: 42" in sql_text

    def test_tables_in_fk_order(self, sql_text):
        positions = [sql_text.index(f"COPY {name} (") for name in ("currencies", "vendors", "products", "purchase_orders", "purchase_order_lines")]
        assert positions == sorted(positions)

    def test_every_nonempty_collection_written(self, small_graph, sql_text):
        for name in COLLECTIONS:
            assert (f"COPY {name} (" in sql_text) == bool(small_graph[name])

    def test_row_lines_match_counts(self, small_graph, sql_text):
        block = sql_text.split("COPY products (", 1)[1].split("\\.\n", 1)[0]
        rows = block.split("\n")[1:-1]
        assert len(rows) == len(small_graph.products)

    def test_null_written_for_optional_fields(self, sql_text):
        block = sql_text.split("COPY payment_terms (", 1)[1].split("\\.\n", 1)[0]
        assert "\\N" in block

    def test_output_reproducible(self, small_graph, tmp_path):
        a = write_sql(small_graph, tmp_path / "a.sql").read_bytes()
        b = write_sql(small_graph, tmp_path / "b.sql").read_bytes()
        assert a == b

    def test_creates_parent_dirs(self, small_graph, tmp_path):
        path = write_sql(small_graph, tmp_path / "nested" / "dir" / "seed.sql")
        assert path.exists()


class TestWriteJson:
    """JSON document output."""

    def test_collections_in_order(self, small_graph, tmp_path):
        data = json.loads(write_json(small_graph, tmp_path / "seed.json").read_text())
        assert list(data) == list(COLLECTIONS)
        assert len(data["products"]) == len(small_graph.products)

    def test_decimals_as_strings(self, small_graph, tmp_path):
        data = json.loads(write_json(small_graph, tmp_path / "seed.json").read_text())
        po = data["purchase_orders"][0]
        assert isinstance(po["subtotal"], str)
        assert Decimal(po["subtotal"]) == small_graph.purchase_orders[0]["subtotal"]

    def test_optional_fields_null(self, small_graph, tmp_path):
        data = json.loads(write_json(small_graph, tmp_path / "seed.json").read_text())
        assert data["payment_terms"][0]["discount_days"] is None

    def test_verbose_progress(self, small_graph, tmp_path, capsys):
        write_json(small_graph, tmp_path / "seed.json", verbose=True)
        assert "Writing JSON" in capsys.readouterr().out


class TestFailedWrite:
    """A write that cannot complete leaves no partial output behind."""

    @pytest.mark.parametrize("writer", [write_sql, write_json])
    def test_directory_target_raises(self, small_graph, tmp_path, writer):
        target = tmp_path / "out"
        target.mkdir()
        with pytest.raises(OSError):
            writer(small_graph, target)
        assert target.is_dir()
        assert sorted(p.name for p in tmp_path.iterdir()) == ["out"]

    def test_existing_file_kept_on_error(self, tmp_path):
        """Serialization errors do not clobber the previous file."""
        target = tmp_path / "seed.json"
        target.write_text("previous\n", encoding="utf-8")
        with pytest.raises(TypeError):
            write_json({"products": [{"bad": object()}]}, target)
        assert target.read_text(encoding="utf-8") == "previous\n"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["seed.json"]
