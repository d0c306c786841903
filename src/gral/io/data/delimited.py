"""
Delimited Text
==============
Reading and writing tables as comma or tab separated values.

Values are parsed with the type of their column; empty fields become
missing values (None). Parse errors name the 1-based line of the input.
"""
from __future__ import annotations

import csv
import io
import logging
import os
from contextlib import contextmanager
from typing import IO, Any, Iterator

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

CSV = IOCapabilities("CSV", "Comma separated values", "text/csv", ("csv", "txt"))
TSV = IOCapabilities("TSV", "Tab separated values", "text/tab-separated-values", ("tsv", "tab", "txt"))

_SEPARATORS = {CSV.mime_type: ",", TSV.mime_type: "\t"}


@contextmanager
def open_text(stream: Stream, mode: str) -> Iterator[IO]:
    """Yield a text stream for a path or an already open file object."""
    if isinstance(stream, (str, os.PathLike)):
        with open(stream, mode, encoding="utf-8", newline="") as f:
            yield f
    elif isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        wrapper = io.TextIOWrapper(stream, encoding="utf-8", newline="")
        try:
            yield wrapper
        finally:
            wrapper.detach()
    else:
        yield stream


def parse_value(text: str, column_type: type) -> Any:
    if text == "":
        return None
    if column_type is bool:
        lowered = text.strip().lower()
        if lowered in ("true", "1"):
            return True
        if lowered in ("false", "0"):
            return False
        raise ValueError(f"'{text}' isn't a boolean")
    return column_type(text.strip()) if column_type is not str else text


@DataReaderFactory.register(CSV, TSV)
class CSVReader(AbstractDataReader):
    """
    Settings:
        separator: Field separator, ',' for CSV and a tab for TSV.
        header: Whether the first line holds column names to skip.
    """

    def __init__(self, mime_type: str) -> None:
        super().__init__(mime_type)
        self.set_default("separator", _SEPARATORS.get(mime_type, ","))
        self.set_default("header", False)

    def read(self, stream: Stream, *types: type) -> DataTable:
        """
        Args:
            stream: Path or file object to read from.
            types: Column types; all columns are float if omitted.

        Raises:
            ValueError: If a line has the wrong number of values or a value
                        can't be parsed.
        """
        try:
            with open_text(stream, "r") as f:
                table = self._read(f, types)
        except (OSError, ValueError) as e:
            logger.exception(f"Failed to read {self.mime_type} data: {e}")
            raise
        logger.info(f"Read {table.row_count} rows with {table.column_count} columns ({self.mime_type}).")
        return table

    def _read(self, f: IO, types: tuple[type, ...]) -> DataTable:
        separator = self.get_setting("separator")
        header = self.get_setting("header")
        table: DataTable | None = DataTable(*types) if types else None
        for line_number, fields in enumerate(csv.reader(f, delimiter=separator), start=1):
            if header and line_number == 1:
                continue
            if not fields or fields == [""]:
                continue
            if table is None:
                table = DataTable(*([float] * len(fields)))
            if len(fields) != table.column_count:
                raise ValueError(
                    f"Wrong number of columns in line {line_number}: "
                    f"expected {table.column_count}, got {len(fields)}."
                )
            values = []
            for col, (text, column_type) in enumerate(zip(fields, table.column_types)):
                try:
                    values.append(parse_value(text, column_type))
                except ValueError as e:
                    raise ValueError(
                        f"Invalid value '{text}' in line {line_number}, column {col + 1}: {e}"
                    ) from e
            table.add(values)
        return table if table is not None else DataTable()


@DataWriterFactory.register(CSV, TSV)
class CSVWriter(AbstractDataWriter):
    """
    Settings:
        separator: Field separator, ',' for CSV and a tab for TSV.
        header: Whether to write the column type names as first line.
    """

    def __init__(self, mime_type: str) -> None:
        super().__init__(mime_type)
        self.set_default("separator", _SEPARATORS.get(mime_type, ","))
        self.set_default("header", False)

    def write(self, data: DataSource, stream: Stream) -> None:
        try:
            with open_text(stream, "w") as f:
                writer = csv.writer(f, delimiter=self.get_setting("separator"), lineterminator="\n")
                if self.get_setting("header"):
                    writer.writerow([t.__name__ for t in data.column_types])
                for row in data:
                    writer.writerow(["" if value is None else value for value in row])
        except (OSError, csv.Error) as e:
            logger.exception(f"Failed to write {self.mime_type} data: {e}")
            raise
        logger.info(f"Wrote {data.row_count} rows ({self.mime_type}).")
