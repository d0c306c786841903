"""
Drawable Export
===============
Renders a drawable into raster (PNG, JPEG, BMP) or vector (SVG, PDF) files.

The drawable is temporarily moved to the requested document rectangle,
painted with the painter of the target device and moved back afterwards.
"""
from __future__ import annotations

import logging
import os
from typing import IO, Union

from PySide6.QtCore import QBuffer, QByteArray, QIODevice, QMarginsF, QRectF, QSize, QSizeF, Qt
from PySide6.QtGui import QColor, QImage, QPageLayout, QPageSize, QPainter, QPdfWriter
from PySide6.QtSvg import QSvgGenerator

from gral import config
from gral.graphics.drawable import Drawable, DrawingContext, Quality, Target
from gral.io.registry import IOCapabilities, IOComponent, IOFactory

logger = logging.getLogger(__name__)

Stream = Union[str, os.PathLike, IO]

PNG = IOCapabilities("PNG", "Portable Network Graphics", "image/png", ("png",))
JPEG = IOCapabilities("JPEG", "JPEG File Interchange Format", "image/jpeg", ("jpg", "jpeg", "jfif"))
BMP = IOCapabilities("BMP", "Windows Bitmap", "image/bmp", ("bmp", "dib"))
SVG = IOCapabilities("SVG", "Scalable Vector Graphics", "image/svg+xml", ("svg", "svgz"))
PDF = IOCapabilities("PDF", "Portable Document Format", "application/pdf", ("pdf",))

_RASTER_FORMATS = {PNG.mime_type: "PNG", JPEG.mime_type: "JPEG", BMP.mime_type: "BMP"}


class DrawableWriterFactory(IOFactory):
    """Registry of drawable writers."""


@DrawableWriterFactory.register(PNG, JPEG, BMP, SVG, PDF)
class DrawableWriter(IOComponent):
    """
    Settings:
        quality: Rendering `Quality`, QUALITY by default.
        background: Fill color for formats without transparency.
    """

    def __init__(self, mime_type: str) -> None:
        super().__init__(mime_type)
        self.set_default("quality", Quality.QUALITY)
        self.set_default("background", QColor(*config.DEFAULT_BACKGROUND))

    def write(self, drawable: Drawable, stream: Stream,
              x: float, y: float, width: float, height: float) -> None:
        """
        Paint the document rectangle (`x`, `y`, `width`, `height`) of
        `drawable` into `stream`, a path or a binary file object.

        Raises:
            ValueError: If the size is not positive.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid document size {width}x{height}")
        logger.info(f"Exporting {type(drawable).__name__} as {self.mime_type} ({width}x{height}).")
        old_bounds = drawable.bounds
        drawable.set_bounds(x, y, width, height)
        try:
            if self.mime_type in _RASTER_FORMATS:
                self._write_raster(drawable, stream, x, y, width, height)
            elif self.mime_type == SVG.mime_type:
                self._write_svg(drawable, stream, x, y, width, height)
            elif self.mime_type == PDF.mime_type:
                self._write_pdf(drawable, stream, x, y, width, height)
            else:
                raise KeyError(f"Unsupported MIME type '{self.mime_type}'")
        except Exception as e:
            logger.exception(f"Export failed: {e}")
            raise
        finally:
            drawable.set_bounds(old_bounds)

    def _paint(self, painter: QPainter, drawable: Drawable, x: float, y: float, target: Target) -> None:
        painter.translate(-x, -y)
        drawable.draw(DrawingContext(painter, self.get_setting("quality"), target))

    def _write_raster(self, drawable: Drawable, stream: Stream,
                      x: float, y: float, width: float, height: float) -> None:
        image = QImage(QSize(round(width), round(height)), QImage.Format.Format_ARGB32)
        if self.mime_type == PNG.mime_type:
            image.fill(Qt.GlobalColor.transparent)
        else:
            image.fill(self.get_setting("background"))
        painter = QPainter(image)
        try:
            self._paint(painter, drawable, x, y, Target.BITMAP)
        finally:
            painter.end()

        image_format = _RASTER_FORMATS[self.mime_type]
        if isinstance(stream, (str, os.PathLike)):
            if not image.save(os.fspath(stream), image_format):
                raise OSError(f"Could not write image to {stream}")
            return
        data = QByteArray()
        buffer = QBuffer(data)
        buffer.open(QIODevice.OpenModeFlag.WriteOnly)
        if not image.save(buffer, image_format):
            raise OSError("Could not encode image")
        buffer.close()
        stream.write(bytes(data.data()))

    def _write_svg(self, drawable: Drawable, stream: Stream,
                   x: float, y: float, width: float, height: float) -> None:
        generator = QSvgGenerator()
        data = QByteArray()
        buffer = QBuffer(data)
        if isinstance(stream, (str, os.PathLike)):
            generator.setFileName(os.fspath(stream))
        else:
            buffer.open(QIODevice.OpenModeFlag.WriteOnly)
            generator.setOutputDevice(buffer)
        generator.setSize(QSize(round(width), round(height)))
        generator.setViewBox(QRectF(0.0, 0.0, width, height))
        generator.setResolution(config.EXPORT_DPI)
        painter = QPainter(generator)
        try:
            self._paint(painter, drawable, x, y, Target.VECTOR)
        finally:
            painter.end()
        if not isinstance(stream, (str, os.PathLike)):
            buffer.close()
            stream.write(bytes(data.data()))

    def _write_pdf(self, drawable: Drawable, stream: Stream,
                   x: float, y: float, width: float, height: float) -> None:
        data = QByteArray()
        buffer = QBuffer(data)
        if isinstance(stream, (str, os.PathLike)):
            pdf = QPdfWriter(os.fspath(stream))
        else:
            buffer.open(QIODevice.OpenModeFlag.WriteOnly)
            pdf = QPdfWriter(buffer)
        # Page size in points so that one document unit is one pixel at EXPORT_DPI
        points = 72.0 / config.EXPORT_DPI
        pdf.setPageSize(QPageSize(QSizeF(width * points, height * points), QPageSize.Unit.Point))
        pdf.setPageMargins(QMarginsF(0.0, 0.0, 0.0, 0.0), QPageLayout.Unit.Point)
        pdf.setResolution(config.EXPORT_DPI)
        painter = QPainter(pdf)
        try:
            self._paint(painter, drawable, x, y, Target.VECTOR)
        finally:
            painter.end()
        if not isinstance(stream, (str, os.PathLike)):
            buffer.close()
            stream.write(bytes(data.data()))
