"""Content-aware shrinking of PPM images by seam carving."""

__version__ = "0.1.0"
__all__ = ["matrix", "image", "processing", "resize"]