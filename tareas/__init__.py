"""Terminal task manager that orders tasks by deadline priority."""

__version__ = "0.1.0"
__all__ = ["cola", "func", "opciones", "main"]