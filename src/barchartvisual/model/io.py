"""
Data View Input (JSON / CSV)
Loads a data view for the host window from disk.
"""
from __future__ import annotations

import csv
import json
import logging
import os
from typing import List, Optional

from barchartvisual.model.data_view import (
    CategoricalSection, CategoryColumn, ColumnSource, DataView, ValueColumn
)

logger = logging.getLogger(__name__)


class DataLoadError(IOError):
    """Raised when a data file cannot be turned into a data view."""


def load_data_view(filepath: str) -> DataView:
    """Dispatch on the file extension (.json or .csv)."""
    ext = os.path.splitext(filepath)[1].lower()
    if ext == ".json":
        return load_json_data_view(filepath)
    if ext == ".csv":
        return load_csv_data_view(filepath)
    raise DataLoadError(f"Unsupported data file type '{ext}'")


def load_json_data_view(filepath: str) -> DataView:
    """
    Read a data view serialized in the host's JSON shape.

    The document is either a single data view object or a list of them; only
    the first is used.
    """
    logger.info(f"Loading data view from: {filepath}")
    try:
        with open(filepath, mode='r', encoding='utf-8') as f:
            payload = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"JSON import failed: {e}")
        raise DataLoadError(f"Failed to read JSON: {e}") from e

    if isinstance(payload, list):
        payload = payload[0] if payload else {}
    if not isinstance(payload, dict):
        raise DataLoadError("Expected a JSON object describing a data view")

    return DataView.from_dict(payload)


def _parse_number(raw: str) -> Optional[float]:
    text = raw.strip().replace(',', '.')
    if not text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def load_csv_data_view(filepath: str) -> DataView:
    """
    Build a data view from a two-column CSV (category, value) with a header row.

    Mirrors what the host's query layer would deliver: the header names become
    the column sources and the maximum of the parsed values is reported as
    `max_local`. Unparseable values are kept as None.
    """
    logger.info(f"Loading CSV data from: {filepath}")
    categories: List[str] = []
    values: List[Optional[float]] = []

    try:
        with open(filepath, mode='r', encoding='utf-8-sig', newline='') as f:
            line = f.readline()
            delimiter = ';' if ';' in line else ','
            f.seek(0)
            reader = csv.reader(f, delimiter=delimiter)
            header = next(reader, None)
            if not header or len(header) < 2:
                raise DataLoadError("CSV needs a header with a category and a value column")

            for row in reader:
                if not row or not row[0].strip():
                    continue
                categories.append(row[0].strip())
                values.append(_parse_number(row[1]) if len(row) > 1 else None)
    except DataLoadError:
        raise
    except (OSError, ValueError) as e:
        logger.error(f"CSV import failed: {e}")
        raise DataLoadError(f"Failed to read CSV: {e}") from e

    numeric = [v for v in values if v is not None]
    category_name, value_name = header[0].strip(), header[1].strip()
    logger.debug(f"Read {len(categories)} rows ({len(numeric)} numeric) from CSV")

    return DataView(
        categorical=CategoricalSection(
            categories=[
                CategoryColumn(
                    source=ColumnSource(display_name=category_name, query_name=category_name, roles=("category",)),
                    values=categories,
                )
            ],
            values=[
                ValueColumn(
                    values=values,
                    max_local=max(numeric) if numeric else None,
                    source=ColumnSource(display_name=value_name, query_name=value_name, roles=("measure",)),
                )
            ],
        )
    )
