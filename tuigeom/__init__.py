"""Integer screen geometry: points, line segments, rectangles, partitions and frames."""

__version__ = "0.1.0"
__all__ = ["errors", "point", "linesegment", "shapes", "partition", "frame"]