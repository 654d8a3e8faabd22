"""Export points, segments, polygons and tetrahedra to the AVS UCD ASCII format."""

__version__ = "1.0.0"
__all__ = ["ucd", "cli"]