from gral.io.registry import IOCapabilities, IOComponent, IOFactory

__all__ = ["IOCapabilities", "IOComponent", "IOFactory"]
