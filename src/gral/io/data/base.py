from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import IO, Union

from gral.data.source import DataSource
from gral.data.table import DataTable
from gral.io.registry import IOComponent, IOFactory

# A path or an open file object
Stream = Union[str, os.PathLike, IO]


class DataReaderFactory(IOFactory):
    """Registry of data readers."""


class DataWriterFactory(IOFactory):
    """Registry of data writers."""


class AbstractDataReader(IOComponent, ABC):
    @abstractmethod
    def read(self, stream: Stream, *types: type) -> DataTable:
        """Read a table whose columns have the given types."""


class AbstractDataWriter(IOComponent, ABC):
    @abstractmethod
    def write(self, data: DataSource, stream: Stream) -> None:
        """Write all rows of `data`."""
