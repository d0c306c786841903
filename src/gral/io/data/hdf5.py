"""
HDF5 Tables
===========
Stores a table in an HDF5 file: one dataset per column inside the group
`table`, with the column type names and the table name as attributes.

Numeric columns are saved as float64 with NaN for missing values, text
columns as UTF-8 strings with missing values saved as empty strings.
"""
from __future__ import annotations

import logging
import math
from typing import Any

import h5py
import numpy as np

from gral.data.source import DataSource
from gral.data.table import DataTable
from gral.io.data.base import (
    AbstractDataReader,
    AbstractDataWriter,
    DataReaderFactory,
    DataWriterFactory,
    Stream,
)
from gral.io.registry import IOCapabilities

logger = logging.getLogger(__name__)

HDF5 = IOCapabilities("HDF5", "Hierarchical Data Format 5", "application/x-hdf5", ("h5", "hdf5"))

GROUP = "table"

_TYPES: dict[str, type] = {"float": float, "int": int, "str": str, "bool": bool}


def _type_name(column_type: type) -> str:
    for name, t in _TYPES.items():
        if t is column_type:
            return name
    raise ValueError(f"Column type {column_type.__name__} can't be stored in HDF5.")


def _column_data(data: DataSource, col: int) -> np.ndarray:
    column_type = data.column_types[col]
    values = [data.get(col, row) for row in range(data.row_count)]
    if column_type is str:
        return np.array(["" if v is None else v for v in values], dtype=h5py.string_dtype())
    return np.array([np.nan if v is None else float(v) for v in values], dtype=np.float64)


def _from_stored(value: Any, column_type: type) -> Any:
    if column_type is str:
        text = value.decode("utf-8") if isinstance(value, bytes) else str(value)
        return text or None
    value = float(value)
    if math.isnan(value):
        return None
    if column_type is int:
        return int(value)
    if column_type is bool:
        return bool(value)
    return value


@DataWriterFactory.register(HDF5)
class HDF5Writer(AbstractDataWriter):
    def __init__(self, mime_type: str) -> None:
        super().__init__(mime_type)
        self.set_default("compression", "gzip")

    def write(self, data: DataSource, stream: Stream) -> None:
        logger.info(f"Saving {data.row_count} rows to HDF5.")
        try:
            with h5py.File(stream, "w") as f:
                group = f.create_group(GROUP)
                group.attrs["column_types"] = [_type_name(t) for t in data.column_types]
                group.attrs["name"] = data.name or ""
                for col in range(data.column_count):
                    group.create_dataset(
                        f"column_{col}",
                        data=_column_data(data, col),
                        compression=self.get_setting("compression") if data.row_count else None,
                    )
        except Exception as e:
            logger.exception(f"Failed to save HDF5 table: {e}")
            raise


@DataReaderFactory.register(HDF5)
class HDF5Reader(AbstractDataReader):
    def read(self, stream: Stream, *types: type) -> DataTable:
        """
        Read a table written by `HDF5Writer`. Column types are taken from the
        file unless given.

        Raises:
            ValueError: If the file holds no table or the types don't match.
        """
        logger.info("Loading HDF5 table.")
        try:
            with h5py.File(stream, "r") as f:
                if GROUP not in f:
                    raise ValueError(f"HDF5 file has no '{GROUP}' group.")
                group = f[GROUP]
                stored = [
                    n.decode("utf-8") if isinstance(n, bytes) else str(n)
                    for n in group.attrs["column_types"]
                ]
                if not types:
                    unknown = [n for n in stored if n not in _TYPES]
                    if unknown:
                        raise ValueError(f"Unknown column types {unknown}")
                    types = tuple(_TYPES[n] for n in stored)
                elif len(types) != len(stored):
                    raise ValueError(
                        f"Expected {len(types)} columns, file has {len(stored)}."
                    )
                columns = [group[f"column_{col}"][()] for col in range(len(types))]
                name = group.attrs.get("name", "")
                if isinstance(name, bytes):
                    name = name.decode("utf-8")
        except Exception as e:
            logger.exception(f"Failed to load HDF5 table: {e}")
            raise

        table = DataTable(*types, name=str(name) or None)
        row_count = len(columns[0]) if columns else 0
        for row in range(row_count):
            table.add([_from_stored(column[row], t) for column, t in zip(columns, types)])
        logger.info(f"Loaded {row_count} rows from HDF5.")
        return table
