"""Success payloads of the Kodik endpoints."""

from typing import List, Optional

from pydantic import BaseModel

from kodik.models.media import Release


class PageResponse(BaseModel):
    """Fields shared by every successful response."""

    time: str  # server-side processing time, e.g. "3ms"
    total: int  # size of the whole result set, not of this page


class ReleasePage(PageResponse):
    """One page of releases.

    ``next_page`` is an absolute URL while more pages remain and ``None`` on
    the last one.
    """

    prev_page: Optional[str] = None
    next_page: Optional[str] = None
    results: List[Release]


class ListResponse(ReleasePage):
    pass


class SearchResponse(ReleasePage):
    pass


class TitleCount(BaseModel):
    title: str
    count: int


class CountryResponse(PageResponse):
    prev_page: Optional[str] = None
    next_page: Optional[str] = None
    results: List[TitleCount]


class GenreResponse(PageResponse):
    results: List[TitleCount]


class QualityResponse(PageResponse):
    results: List[TitleCount]


class TranslationResult(BaseModel):
    id: int
    title: str
    count: int


class TranslationResponse(PageResponse):
    results: List[TranslationResult]


class YearResult(BaseModel):
    year: int
    count: int


class YearResponse(PageResponse):
    results: List[YearResult]
