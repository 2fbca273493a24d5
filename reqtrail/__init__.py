"""Build HTTP requests with undo/redo history, save them on disk and submit them."""

__version__ = "0.1.0"