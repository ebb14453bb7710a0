"""
Output writers for a generated entity graph.

- write_sql(): PostgreSQL seed file, one COPY ... FROM stdin block per
  collection, in foreign-key-safe order. Wrapped in
  SET session_replication_role = replica so triggers and FK checks are
  deferred during the bulk load.
- write_json(): one JSON object, collection name -> list of records.
  Decimals are written as strings to keep exact cents.

Both writers produce byte-identical output for identical graphs.
"""

from __future__ import annotations

import json
from contextlib import contextmanager
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path
from typing import Any, Iterator, Mapping, Sequence, TextIO

from .schema import insertion_order


def copy_str(val: str | None) -> str:
    """Format string for COPY format (tab-separated, \\N for NULL)."""
    if val is None:
        return "\\N"
    # Escape tabs, newlines, backslashes
    return val.replace("\\", "\\\\").replace("\t", "\\t").replace("\n", "\\n").replace("\r", "\\r")


def copy_num(val: float | int | Decimal | None) -> str:
    """Format number for COPY format."""
    if val is None:
        return "\\N"
    return str(val)


def copy_bool(val: bool | None) -> str:
    """Format boolean for COPY format."""
    if val is None:
        return "\\N"
    return "t" if val else "f"


def format_copy_value(val: Any) -> str:
    """Auto-detect type and format value for COPY."""
    if val is None:
        return "\\N"
    if isinstance(val, bool):
        return copy_bool(val)
    if isinstance(val, (date, datetime)):
        return val.isoformat()
    if isinstance(val, (int, float, Decimal)):
        return copy_num(val)
    return copy_str(str(val))


@contextmanager
def _atomic_output(output_path: Path) -> Iterator[TextIO]:
    """
    Open a sibling temp file for writing and move it over output_path on success.

    On any error the temp file is removed and the destination is left untouched.
    """
    tmp_path = output_path.with_name(output_path.name + ".tmp")
    try:
        with open(tmp_path, "w", encoding="utf-8") as f:
            yield f
        tmp_path.replace(output_path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


def _write_table_copy(f: TextIO, table_name: str, rows: Sequence[Mapping[str, Any]]) -> None:
    """Write a table's data using COPY format."""
    if not rows:
        return

    # Get columns from first row
    columns = list(rows[0].keys())

    f.write(f"\n-- {table_name}: {len(rows):,} rows\n")
    f.write(f"COPY {table_name} ({', '.join(columns)}) FROM stdin;\n")
    for row in rows:
        f.write("\t".join(format_copy_value(row.get(col)) for col in columns) + "\n")
    f.write("\\.\n")


def write_sql(
    graph: Mapping[str, Sequence[Mapping[str, Any]]],
    output_path: str | Path,
    verbose: bool = False,
) -> Path:
    """
    Write the graph as a PostgreSQL COPY seed file.

    Args:
        graph: EntityGraph (or mapping of collection -> rows)
        output_path: Destination file; parent directories are created and the
            file is replaced only once fully written
        verbose: Print progress

    Returns:
        Path written
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    order = insertion_order()
    total_rows = sum(len(graph[name]) for name in order)

    if verbose:
        print(f"\nWriting SQL to {output_path}...")

    with _atomic_output(output_path) as f:
        f.write("-- ============================================\n")
        f.write("-- inflow-mock seed data\n")
        f.write(f"-- Seed: {getattr(graph, 'seed', None)}\n")
        f.write(f"-- Total rows: {total_rows:,}\n")
        f.write("-- ============================================\n\n")

        f.write("SET client_encoding = 'UTF8';\n")
        f.write("SET standard_conforming_strings = on;\n")
        # Disable triggers and FK checks for bulk load
        f.write("SET session_replication_role = replica;\n")

        tables_written = 0
        for table_name in order:
            rows = graph[table_name]
            if not rows:
                continue
            _write_table_copy(f, table_name, rows)
            tables_written += 1

        f.write("\nSET session_replication_role = DEFAULT;\n")

    if verbose:
        print(f"Done. {total_rows:,} rows in {tables_written} tables")
    return output_path


def _json_default(val: Any) -> Any:
    if isinstance(val, Decimal):
        return str(val)
    if isinstance(val, (date, datetime)):
        return val.isoformat()
    if isinstance(val, Mapping):
        return dict(val)
    raise TypeError(f"Object of type {type(val).__name__} is not JSON serializable")


def write_json(
    graph: Mapping[str, Sequence[Mapping[str, Any]]],
    output_path: str | Path,
    verbose: bool = False,
) -> Path:
    """
    Write the graph as a single JSON document.

    Args:
        graph: EntityGraph (or mapping of collection -> rows)
        output_path: Destination file; parent directories are created and the
            file is replaced only once fully written
        verbose: Print progress

    Returns:
        Path written
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {name: [dict(row) for row in graph[name]] for name in graph}

    if verbose:
        print(f"\nWriting JSON to {output_path}...")

    with _atomic_output(output_path) as f:
        json.dump(payload, f, indent=2, default=_json_default)
        f.write("\n")

    if verbose:
        print(f"Done. {sum(len(rows) for rows in payload.values()):,} rows")
    return output_path
