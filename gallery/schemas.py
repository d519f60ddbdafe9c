from pydantic import BaseModel


class AlbumSummary(BaseModel):
    url: str
    title: str
    preview_url: str | None = None
    sort_key: str


class YearGroup(BaseModel):
    year: str
    albums: list[AlbumSummary]


class GalleryIndexResponse(BaseModel):
    title: str
    years: list[YearGroup]


class AlbumPhotosResponse(BaseModel):
    title: str
    photos: list[str]


class RecentAlbumsResponse(BaseModel):
    albums: list[AlbumSummary]
