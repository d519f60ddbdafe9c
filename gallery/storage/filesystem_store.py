import os
from pathlib import Path
from urllib.parse import quote

from .object_store import ObjectStore, StoreUnavailableError, split_listing


class FileSystemObjectStore(ObjectStore):
    """
    Object store served from a local directory laid out like the bucket.
    Each directory also shows up as a directory-marker key ending in '/'.
    """

    def __init__(self, base_path: str = ".", base_url: str = "/media") -> None:
        self.base_path = Path(base_path)
        self.base_url = base_url.rstrip("/")

    def _keys(self, prefix: str) -> list[str]:
        """Sorted keys of the deepest directory that contains every key under prefix."""
        if not self.base_path.is_dir():
            error_message = f"Media root {self.base_path} is not a directory"
            raise StoreUnavailableError(error_message)
        parent = prefix[: prefix.rfind("/") + 1]
        start = self.base_path / parent
        if not start.is_dir():
            return []
        keys = [parent] if parent else []
        for path in start.rglob("*"):
            key = path.relative_to(self.base_path).as_posix()
            keys.append(key + "/" if path.is_dir() else key)
        return sorted(keys)

    def list_common_prefixes(self, root_prefix: str, delimiter: str = "/") -> list[str]:
        _, common_prefixes = split_listing(self._keys(root_prefix), root_prefix, delimiter)
        return common_prefixes

    def list_objects(self, prefix: str, max_keys: int | None = None) -> list[str]:
        contents, _ = split_listing(self._keys(prefix), prefix)
        if max_keys is not None:
            return contents[:max_keys]
        return contents

    def public_url(self, key: str) -> str:
        return f"{self.base_url}/{quote(key, safe='/')}"


def filesystem_store_from_env() -> FileSystemObjectStore:
    return FileSystemObjectStore(
        base_path=os.getenv("GALLERY_MEDIA_ROOT", "."),
        base_url=os.getenv("GALLERY_MEDIA_URL", "/media"),
    )
