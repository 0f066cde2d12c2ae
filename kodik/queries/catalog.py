"""Aggregate endpoints: counts of releases per country, genre, etc."""

from typing import Optional

from kodik.models.enums import CountSort, GenresType, YearSort
from kodik.models.responses import (
    CountryResponse,
    GenreResponse,
    QualityResponse,
    TranslationResponse,
    YearResponse,
)
from kodik.queries.base import ReleaseFilters


class CountryQuery(ReleaseFilters):
    """Countries of the releases matching the filters."""

    endpoint = "/countries"
    response_model = CountryResponse

    sort: Optional[CountSort] = None


class GenreQuery(ReleaseFilters):
    """Genres of the releases matching the filters."""

    endpoint = "/genres"
    response_model = GenreResponse

    genres_type: Optional[GenresType] = None
    sort: Optional[CountSort] = None


class TranslationQuery(ReleaseFilters):
    """Translation teams of the releases matching the filters."""

    endpoint = "/translations/v2"
    response_model = TranslationResponse

    sort: Optional[CountSort] = None


class YearQuery(ReleaseFilters):
    """Release years of the releases matching the filters."""

    endpoint = "/years"
    response_model = YearResponse

    sort: Optional[YearSort] = None


class QualityQuery(ReleaseFilters):
    """Video qualities of the releases matching the filters."""

    endpoint = "/qualities/v2"
    response_model = QualityResponse

    lgbt: Optional[bool] = None
    sort: Optional[CountSort] = None
