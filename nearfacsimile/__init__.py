"""Find similar or identical text files in a directory."""

__version__ = "1.0.9"
__all__ = ["__version__"]