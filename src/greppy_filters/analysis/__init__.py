"""Analysis module for symbol exports."""

from .export import SymbolExporter, symbols_to_frame

__all__ = ["SymbolExporter", "symbols_to_frame"]
