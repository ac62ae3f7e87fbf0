"""Building blocks for IP camera OSD overlays: INI parameters, BMP images, text, borders and geometry."""

__version__ = "0.1.0"