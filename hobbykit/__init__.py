"""Small independent utilities: sorting, curves, path finding, SVG gears, file inspection and tags."""

__version__ = "1.0.0"