"""Build CommonMark document trees (ast) and serialize them to text (writer)."""

__version__ = "0.1.0"

__all__ = ["ast", "writer"]