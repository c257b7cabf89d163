"""SQL operator types with their SQL spellings."""

__version__ = "0.1.0"
__all__ = ["operator"]