"""Ports the core consumes from its collaborators."""

from .document_store_port import DocumentStorePort

__all__ = ["DocumentStorePort"]
