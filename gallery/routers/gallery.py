import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response

from gallery.albums import (
    RECENT_ALBUMS_LIMIT,
    build_album_photo_list,
    build_gallery_index,
    build_recent_albums,
)
from gallery.config import ROOT_PREFIX
from gallery.deps import get_store
from gallery.schemas import (
    AlbumPhotosResponse,
    GalleryIndexResponse,
    RecentAlbumsResponse,
    YearGroup,
)
from gallery.storage import ObjectStore, StoreUnavailableError
from gallery.titles import page_title

logger = logging.getLogger(__name__)

router = APIRouter()

RECENT_ALBUMS_MAX_AGE = 3600  # seconds


@router.get("/photos", response_model=GalleryIndexResponse)
def get_gallery_index(
    store: Annotated[ObjectStore, Depends(get_store)],
) -> GalleryIndexResponse:
    """
    Overview of every album, grouped by year, newest first.
    """
    index = build_gallery_index(store)
    return GalleryIndexResponse(
        title=page_title(),
        years=[YearGroup(year=year, albums=albums) for year, albums in index.items()],
    )


@router.get("/albums/recent", response_model=RecentAlbumsResponse)
def get_recent_albums(
    store: Annotated[ObjectStore, Depends(get_store)],
    response: Response,
    limit: Annotated[int, Query(ge=1, le=50)] = RECENT_ALBUMS_LIMIT,
) -> RecentAlbumsResponse:
    """
    Teaser of the most recent albums. Store failures leave it empty.
    """
    try:
        albums = build_recent_albums(store, limit=limit)
    except StoreUnavailableError as exc:
        logger.error("Recent albums error: %s", exc)  # noqa: TRY400
        return RecentAlbumsResponse(albums=[])
    response.headers["Cache-Control"] = f"public, max-age={RECENT_ALBUMS_MAX_AGE}"
    return RecentAlbumsResponse(albums=albums)


@router.get(
    "/photos/{slug:path}",
    response_model=GalleryIndexResponse | AlbumPhotosResponse,
)
def get_album(
    slug: str,
    store: Annotated[ObjectStore, Depends(get_store)],
) -> GalleryIndexResponse | AlbumPhotosResponse:
    """
    Photos of one album. The path is already URL-decoded by the router.
    """
    slug = slug.strip("/")
    if not slug:
        return get_gallery_index(store)
    photos = build_album_photo_list(store, f"{ROOT_PREFIX}{slug}/")
    return AlbumPhotosResponse(title=page_title(slug), photos=photos)
