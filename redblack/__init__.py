"""A red-black tree of integers (``tree``) and a command loop that drives it (``cli``)."""

__version__ = "0.1.0"
__all__ = ["cli", "tree"]