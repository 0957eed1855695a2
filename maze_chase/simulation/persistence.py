"""Parquet persistence helpers for the tick and event streams."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pyarrow as pa
import pyarrow.parquet as pq


def flush_columns(
    columns: dict[str, list[Any]],
    path: Path,
    writer: pq.ParquetWriter | None,
    schema: pa.Schema,
) -> pq.ParquetWriter | None:
    """Write accumulated rows to Parquet and clear in-memory buffers.

    The writer is opened lazily on the first non-empty flush, so a stream
    that never receives rows leaves no file behind.
    """
    if not next(iter(columns.values())):
        return writer
    table = pa.Table.from_pydict(columns, schema=schema)
    if writer is None:
        writer = pq.ParquetWriter(path, schema)
    writer.write_table(table)
    for values in columns.values():
        values.clear()
    return writer


def empty_columns(schema: pa.Schema) -> dict[str, list[Any]]:
    """Return a column buffer keyed by the schema's field names."""
    return {name: [] for name in schema.names}
