"""Terminal C++ editor with syntax colouring, completion, building, and source tools."""

__version__ = "0.1.0"