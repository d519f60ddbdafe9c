from abc import ABC, abstractmethod
from collections.abc import Iterable


class StoreUnavailableError(Exception):
    """The object store could not be listed (network, auth or bad response)."""


class ObjectStore(ABC):
    """
    Read-only interface to an S3-style object store.
    Every listing returns a single page; continuation is never followed.
    """

    @abstractmethod
    def list_common_prefixes(self, root_prefix: str, delimiter: str = "/") -> list[str]:
        """
        Return the "folders" directly under root_prefix, grouped by delimiter.
        """
        error_message = "list_common_prefixes not implemented"
        raise NotImplementedError(error_message)

    @abstractmethod
    def list_objects(self, prefix: str, max_keys: int | None = None) -> list[str]:
        """
        Return object keys starting with prefix, in store order,
        capped at max_keys when given.
        """
        error_message = "list_objects not implemented"
        raise NotImplementedError(error_message)

    @abstractmethod
    def public_url(self, key: str) -> str:
        """
        Return the public URL of the object stored under key.
        """
        error_message = "public_url not implemented"
        raise NotImplementedError(error_message)


def split_listing(
    keys: Iterable[str], prefix: str, delimiter: str | None = None
) -> tuple[list[str], list[str]]:
    """
    Group sorted keys the way S3 does for a delimiter listing.

    Keys under prefix that contain the delimiter after the prefix are rolled
    up into one common prefix each; the rest are returned as plain contents.
    Returns (contents, common_prefixes), both in key order.
    """
    contents: list[str] = []
    common_prefixes: list[str] = []
    for key in keys:
        if not key.startswith(prefix):
            continue
        rest = key[len(prefix):]
        if delimiter and delimiter in rest:
            common = prefix + rest[: rest.index(delimiter) + len(delimiter)]
            if not common_prefixes or common_prefixes[-1] != common:
                common_prefixes.append(common)
        else:
            contents.append(key)
    return contents, common_prefixes
