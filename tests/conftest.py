import logging
from collections.abc import Generator, Iterable

import pytest
from fastapi.testclient import TestClient

from gallery.deps import get_store
from gallery.main import app
from gallery.storage import ObjectStore, StoreUnavailableError, split_listing

# Configure basic logging for tests
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

PUBLIC_ROOT = "https://bucket.example.test/"


class FakeObjectStore(ObjectStore):
    """In-memory object store that records every listing call."""

    def __init__(self, keys: Iterable[str] = (), fail_on: str | None = None) -> None:
        self.keys = sorted(keys)
        self.fail_on = fail_on
        self.calls: list[tuple[str, str, object]] = []

    def _check(self, prefix: str) -> None:
        if self.fail_on is not None and prefix.startswith(self.fail_on):
            msg = f"listing {prefix} failed"
            raise StoreUnavailableError(msg)

    def list_common_prefixes(self, root_prefix: str, delimiter: str = "/") -> list[str]:
        self.calls.append(("prefixes", root_prefix, delimiter))
        self._check(root_prefix)
        return split_listing(self.keys, root_prefix, delimiter)[1]

    def list_objects(self, prefix: str, max_keys: int | None = None) -> list[str]:
        self.calls.append(("objects", prefix, max_keys))
        self._check(prefix)
        contents = split_listing(self.keys, prefix)[0]
        return contents if max_keys is None else contents[:max_keys]

    def public_url(self, key: str) -> str:
        return PUBLIC_ROOT + key


@pytest.fixture
def gallery_keys() -> list[str]:
    return [
        "photos/",
        "photos/20230101_NewYear/",
        "photos/20230101_NewYear/fireworks.jpg",
        "photos/20230101_NewYear/toast.jpg",
        "photos/20230815_Camping/",
        "photos/20230815_Camping/tent.jpg",
        "photos/20220704_Independence/",
        "photos/20220704_Independence/parade.jpg",
        "photos/BADDATE_Party/cake.jpg",
    ]


@pytest.fixture
def store(gallery_keys: list[str]) -> FakeObjectStore:
    return FakeObjectStore(gallery_keys)


@pytest.fixture
def client(store: FakeObjectStore) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    del app.dependency_overrides[get_store]
