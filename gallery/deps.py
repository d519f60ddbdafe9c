from gallery.storage import ObjectStore, get_store_backend


def get_store() -> ObjectStore:
    """
    Dependency that provides the object store for one request.
    A fresh gateway is built per request; nothing is shared between requests.
    """
    return get_store_backend()
