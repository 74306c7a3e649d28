"""Small dense vector and matrix arithmetic, with a demonstration command."""

__version__ = "0.1.0"
__all__ = ["vector", "matrix", "cli"]