from __future__ import annotations

import logging
import os

from PySide6.QtGui import QImage

from gral.data.table import DataTable
from gral.io.data.base import AbstractDataReader, DataReaderFactory, Stream
from gral.io.registry import IOCapabilities

logger = logging.getLogger(__name__)

PNG = IOCapabilities("PNG", "Portable Network Graphics", "image/png", ("png",))
JPEG = IOCapabilities("JPEG", "JPEG File Interchange Format", "image/jpeg", ("jpg", "jpeg", "jfif"))
BMP = IOCapabilities("BMP", "Windows Bitmap", "image/bmp", ("bmp", "dib"))

_FORMATS = {PNG.mime_type: "PNG", JPEG.mime_type: "JPEG", BMP.mime_type: "BMP"}


@DataReaderFactory.register(PNG, JPEG, BMP)
class ImageReader(AbstractDataReader):
    """
    Reads a raster image as grey levels in [0, 1]: one float column per
    pixel column and one row per pixel row.
    """

    def read(self, stream: Stream, *types: type) -> DataTable:
        """
        Raises:
            ValueError: If the image can't be decoded.
        """
        if isinstance(stream, (str, os.PathLike)):
            with open(stream, "rb") as f:
                raw = f.read()
        else:
            raw = stream.read()
        image = QImage.fromData(raw, _FORMATS.get(self.mime_type))
        if image.isNull():
            msg = f"Could not decode {self.mime_type} image."
            logger.error(msg)
            raise ValueError(msg)

        grey = image.convertToFormat(QImage.Format.Format_Grayscale8)
        width, height = grey.width(), grey.height()
        table = DataTable(*([float] * width))
        for y in range(height):
            table.add([grey.pixelColor(x, y).red() / 255.0 for x in range(width)])
        logger.info(f"Read {width}x{height} image ({self.mime_type}).")
        return table
