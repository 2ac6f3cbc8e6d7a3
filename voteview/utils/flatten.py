"""
Flatten lists of JSON records into pandas DataFrames.

The column layout comes from the first record only:

- string values make string (object) columns, every other scalar makes an
  int64 column, so fractional numbers are truncated;
- nested objects and arrays are left out, even when a later record holds a
  scalar under the same name;
- fields that first appear in later records are dropped.

Missing values are filled with '' or 0 rather than NaN, which keeps integer
columns integer.
"""

import logging
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Sequence

import pandas as pd

from voteview.utils.exceptions import EmptyInputError

logger = logging.getLogger(__name__)


class FieldKind(Enum):
    STRING = 'string'
    INTEGER = 'integer'
    NESTED = 'nested'
    MISSING = 'missing'


ZERO_VALUES = {
    FieldKind.STRING: '',
    FieldKind.INTEGER: 0,
}

DTYPES = {
    FieldKind.STRING: object,
    FieldKind.INTEGER: 'int64',
}


def classify(value: Any) -> FieldKind:
    """Tag a decoded JSON value."""
    if value is None:
        return FieldKind.MISSING
    if isinstance(value, str):
        return FieldKind.STRING
    if isinstance(value, (dict, list, tuple)):
        return FieldKind.NESTED
    return FieldKind.INTEGER


def infer_schema(record: Mapping[str, Any]) -> Dict[str, FieldKind]:
    """
    Derive column names and kinds from a single record.

    Args:
        record: First record of the response

    Returns:
        Ordered mapping of field name to STRING or INTEGER
    """
    if not isinstance(record, Mapping):
        raise TypeError(f"Expected a JSON object, got {type(record).__name__}")

    schema = {}
    for name, value in record.items():
        kind = classify(value)
        if kind is FieldKind.NESTED:
            continue
        # a null in the first record is not text, so it gets an integer column
        schema[name] = FieldKind.STRING if kind is FieldKind.STRING else FieldKind.INTEGER
    return schema


def coerce(value: Any, kind: FieldKind) -> Any:
    """Fit a value into a column of the given kind; anything that does not fit becomes the zero value."""
    value_kind = classify(value)
    if value_kind is not kind:
        return ZERO_VALUES[kind]
    if kind is FieldKind.INTEGER:
        try:
            return int(value)
        except (TypeError, ValueError, OverflowError):
            return 0
    return value


def order_columns(columns: Sequence[str], priority: Iterable[str]) -> List[str]:
    """Priority columns that exist go first, in priority order; the rest keep their order."""
    available = set(columns)
    ordered = [name for name in dict.fromkeys(priority) if name in available]
    seen = set(ordered)
    ordered.extend(name for name in columns if name not in seen)
    return ordered


def flatten_records(records: Iterable[Mapping[str, Any]], priority: Iterable[str] = ()) -> pd.DataFrame:
    """
    Build a rectangular table from JSON records.

    Args:
        records: Decoded JSON objects, one per roll call or member
        priority: Column names to put first, in this order

    Returns:
        DataFrame with one row per record, in input order

    Raises:
        EmptyInputError: If there are no records
    """
    records = list(records)
    if not records:
        raise EmptyInputError("Cannot build a table from zero records")

    schema = infer_schema(records[0])

    columns = {name: [] for name in schema}
    for record in records:
        for name, kind in schema.items():
            columns[name].append(coerce(record.get(name), kind))

    df = pd.DataFrame(
        {name: pd.Series(values, dtype=DTYPES[schema[name]]) for name, values in columns.items()},
        index=pd.RangeIndex(len(records)),
    )
    logger.debug("Flattened %d records into %d columns", len(records), len(schema))

    return df[order_columns(list(schema), priority)]


jlist2df = flatten_records
