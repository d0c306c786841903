from gral.io.data.base import (
    AbstractDataReader,
    AbstractDataWriter,
    DataReaderFactory,
    DataWriterFactory,
)
from gral.io.data.delimited import CSVReader, CSVWriter
from gral.io.data.hdf5 import HDF5Reader, HDF5Writer
from gral.io.data.image import ImageReader

__all__ = [
    "AbstractDataReader",
    "AbstractDataWriter",
    "CSVReader",
    "CSVWriter",
    "DataReaderFactory",
    "DataWriterFactory",
    "HDF5Reader",
    "HDF5Writer",
    "ImageReader",
]
