"""
Read generated files back for inspection and downstream tests.
"""

from pathlib import Path
from typing import Any, Dict, Iterator, Union

import pandas as pd
from fastavro import reader

from .avro_schema import SEPARATOR_TOKEN


def iter_records(path: Union[str, Path]) -> Iterator[Any]:
    """Yield every datum in the file, separator tokens included."""
    with open(path, "rb") as f:
        for datum in reader(f):
            yield datum


def read_schema(path: Union[str, Path]) -> Any:
    """Return the writer schema embedded in the file."""
    with open(path, "rb") as f:
        return reader(f).writer_schema


def read_metadata(path: Union[str, Path]) -> Dict[str, Any]:
    with open(path, "rb") as f:
        return dict(reader(f).metadata)


def load_dataframe(path: Union[str, Path], drop_separators: bool = True) -> pd.DataFrame:
    """
    Load a generated file into a DataFrame.

    Nested records are flattened into dotted columns (address.city, ...);
    list fields stay as lists.

    Args:
        path: Avro file written by the generator
        drop_separators: Skip separator tokens instead of failing on them

    Returns:
        One row per record
    """
    rows = []
    for datum in iter_records(path):
        if isinstance(datum, str):
            if drop_separators and datum == SEPARATOR_TOKEN:
                continue
            raise ValueError(f"Unexpected token {datum!r} in {path}")
        rows.append(datum)
    return pd.json_normalize(rows)
