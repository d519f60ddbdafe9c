"""
Album listing over the object store.

Every function issues its listings synchronously and only reads the first
page of each listing. Store errors are not caught here: one failing call,
including a single album's preview lookup, fails the whole operation.
"""

import logging

from gallery.config import ROOT_PREFIX
from gallery.schemas import AlbumSummary
from gallery.storage import ObjectStore
from gallery.titles import parse_slug, slug_from_prefix

logger = logging.getLogger(__name__)

PREVIEW_SCAN_LIMIT = 5
RECENT_ALBUMS_LIMIT = 4
ALBUM_URL_ROOT = "/photos/"

GalleryIndex = dict[str, list[AlbumSummary]]


def is_directory_marker(key: str) -> bool:
    return key.endswith("/")


def resolve_preview(store: ObjectStore, prefix: str) -> str | None:
    """
    URL of the first real object among the first few keys under prefix.

    Only PREVIEW_SCAN_LIMIT keys are scanned, in the order the store
    returns them, so an album whose first keys are all directory markers
    gets no preview even if it holds photos further down.
    """
    for key in store.list_objects(prefix, max_keys=PREVIEW_SCAN_LIMIT):
        if not is_directory_marker(key):
            return store.public_url(key)
    return None


def _summarize(
    store: ObjectStore, prefix: str, include_year: bool, root_prefix: str
) -> tuple[str, AlbumSummary]:
    slug = slug_from_prefix(prefix, root_prefix)
    parsed = parse_slug(slug, include_year=include_year)
    summary = AlbumSummary(
        url=ALBUM_URL_ROOT + slug,
        title=parsed.display_title,
        preview_url=resolve_preview(store, prefix),
        sort_key=slug,
    )
    return parsed.year, summary


def build_gallery_index(store: ObjectStore, root_prefix: str = ROOT_PREFIX) -> GalleryIndex:
    """
    Group every album under root_prefix by year.

    Years come out newest first, and albums within a year are sorted by
    slug, descending. Costs one listing plus one preview listing per album.
    """
    prefixes = store.list_common_prefixes(root_prefix, delimiter="/")
    logger.debug("Found %d album prefixes under %s", len(prefixes), root_prefix)

    by_year: GalleryIndex = {}
    for prefix in prefixes:
        year, summary = _summarize(store, prefix, include_year=True, root_prefix=root_prefix)
        by_year.setdefault(year, []).append(summary)

    return {
        year: sorted(by_year[year], key=lambda album: album.sort_key, reverse=True)
        for year in sorted(by_year, reverse=True)
    }


def build_recent_albums(
    store: ObjectStore, limit: int = RECENT_ALBUMS_LIMIT, root_prefix: str = ROOT_PREFIX
) -> list[AlbumSummary]:
    """
    The `limit` most recent albums, newest first, with previews.
    Titles leave out the year.
    """
    if limit < 0:
        error_message = f"limit must not be negative, got {limit}"
        raise ValueError(error_message)
    prefixes = store.list_common_prefixes(root_prefix, delimiter="/")
    recent = sorted(prefixes, reverse=True)[:limit]
    return [
        _summarize(store, prefix, include_year=False, root_prefix=root_prefix)[1]
        for prefix in recent
    ]


def build_album_photo_list(store: ObjectStore, album_prefix: str) -> list[str]:
    """URLs of every photo under album_prefix (first listing page only)."""
    keys = store.list_objects(album_prefix)
    photos = [store.public_url(key) for key in keys if not is_directory_marker(key)]
    logger.debug("Album %s has %d photos", album_prefix, len(photos))
    return photos
