from gral.io.plots.writer import DrawableWriter, DrawableWriterFactory

__all__ = ["DrawableWriter", "DrawableWriterFactory"]
