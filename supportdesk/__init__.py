"""Support desk answer engine: keyword retrieval and extractive answers."""

__version__ = "1.0.0"
