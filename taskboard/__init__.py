"""Task tracking API: tasks, keywords and the links between them."""

__version__ = "0.1.0"
