"""
Persistence adapters.

Services depend on the DocumentRepository interface; the local adapter loads
a JSON document into memory and stands in for the remote document database
during development and tests.
"""

from .base import DocumentRepository, ItemNotFoundError, LoadError, RepositoryError
from .local_repository import LocalDocumentRepository

__all__ = [
    "DocumentRepository",
    "ItemNotFoundError",
    "LoadError",
    "LocalDocumentRepository",
    "RepositoryError",
]
