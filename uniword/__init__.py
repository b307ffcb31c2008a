"""Find Unicode characters by keywords from their names, their blocks and groups."""

__version__ = "0.2.2"
__all__ = ["universe", "tables", "grid", "picker", "cli"]