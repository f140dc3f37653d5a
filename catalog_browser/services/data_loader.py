"""Conversion between catalog records and pandas dataframes."""

from __future__ import annotations

from dataclasses import asdict, fields
from typing import Iterable, List, Sequence, Type, TypeVar, Union

import pandas as pd

from catalog_browser.config import COMBO_COLUMNS, NUMERIC_COLUMNS, SNACK_COLUMNS
from catalog_browser.models import Combo, Snack
from catalog_browser.utils.helpers import is_missing, normalize_text

CatalogRecord = TypeVar("CatalogRecord", Snack, Combo)

MODEL_COLUMNS = {
    Snack: SNACK_COLUMNS,
    Combo: COMBO_COLUMNS,
}


def normalize_catalog_frame(dataframe: pd.DataFrame, columns: Sequence[str]) -> pd.DataFrame:
    """Return a copy restricted to ``columns`` with numeric columns coerced and text stripped."""
    normalized = dataframe.copy()
    for column in columns:
        if column not in normalized.columns:
            normalized[column] = None if column in NUMERIC_COLUMNS else ""

    normalized = normalized[list(columns)].copy()
    for column in columns:
        if column in NUMERIC_COLUMNS:
            normalized[column] = pd.to_numeric(normalized[column], errors="coerce")
        elif column != "img":
            normalized[column] = normalized[column].apply(normalize_text)
    return normalized.reset_index(drop=True)


def frame_from_records(records: Iterable[Union[Snack, Combo]]) -> pd.DataFrame:
    """Build a dataframe with one row per record, in input order."""
    rows = list(records)
    if not rows:
        return pd.DataFrame(columns=SNACK_COLUMNS)
    columns = MODEL_COLUMNS.get(type(rows[0]), [item.name for item in fields(rows[0])])
    return pd.DataFrame([asdict(row) for row in rows], columns=columns)


def _numeric(value: object, cast: type, default: Union[int, float]) -> Union[int, float]:
    if is_missing(value):
        return default
    return cast(value)


def records_from_frame(dataframe: pd.DataFrame, model: Type[CatalogRecord]) -> List[CatalogRecord]:
    """Convert dataframe rows into catalog records, skipping rows without an id."""
    columns = MODEL_COLUMNS[model]
    normalized = normalize_catalog_frame(dataframe, columns)
    normalized = normalized[normalized["id"].notna()]

    records: List[CatalogRecord] = []
    for row in normalized.to_dict(orient="records"):
        values = dict(row)
        values["id"] = int(values["id"])
        values["price"] = _numeric(values.get("price"), float, 0.0)
        if "quantity" in values:
            values["quantity"] = _numeric(values["quantity"], int, 0)
        values["img"] = None if is_missing(values.get("img")) or not str(values["img"]).strip() else str(values["img"])
        if not values.get("status"):
            values["status"] = "AVAILABLE"
        records.append(model(**values))
    return records
