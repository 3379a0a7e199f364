"""State persistence backends."""

from .repository import STORE_KEYS, StateRepository
from .store import BlobStore, FileBlobStore, RedisBlobStore, create_store

__all__ = ["BlobStore", "FileBlobStore", "RedisBlobStore", "STORE_KEYS", "StateRepository", "create_store"]
