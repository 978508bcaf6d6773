"""MemoryLens: memories dashboard, capture control and face recognition."""

__version__ = "1.0.0"
