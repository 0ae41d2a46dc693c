"""Small worked programs: text tools, conversions, encoders, images, compression and web helpers."""

__version__ = "0.1.0"