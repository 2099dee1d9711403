"""Terminal viewer for tabular data files: widgets, event handling and the datui command."""

__version__ = "0.1.0"