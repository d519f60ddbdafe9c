import os

from gallery.config import load_settings

from .filesystem_store import FileSystemObjectStore, filesystem_store_from_env
from .object_store import ObjectStore, StoreUnavailableError, split_listing
from .s3_store import S3ObjectStore


def store_backend_name() -> str:
    """Lower-cased STORE_BACKEND value; unset or blank means 's3'."""
    return os.getenv("STORE_BACKEND", "").strip().lower() or "s3"


def get_store_backend() -> ObjectStore:
    """
    Factory for the object store based on STORE_BACKEND env var.
    Defaults to S3ObjectStore.

    Supported values (case-insensitive):
      - 's3'
      - 'filesystem'
    """
    backend = store_backend_name()
    if backend == "s3":
        return S3ObjectStore(load_settings())
    if backend == "filesystem":
        return filesystem_store_from_env()
    error_message = f"Unknown store backend: {backend}"
    raise ValueError(error_message)


__all__ = [
    "FileSystemObjectStore",
    "ObjectStore",
    "S3ObjectStore",
    "StoreUnavailableError",
    "get_store_backend",
    "split_listing",
    "store_backend_name",
]
