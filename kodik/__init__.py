"""Unofficial async client for the Kodik API."""

from kodik.core.client import Client, OutboundRequest
from kodik.core.config import Settings, get_settings
from kodik.core.errors import (
    HttpError,
    KodikApiError,
    KodikError,
    MalformedResponseError,
    SerializeError,
)
from kodik.models.enums import (
    AnimeKind,
    CountSort,
    GenresType,
    ListSort,
    MaterialDataField,
    MpaaRating,
    ReleaseQuality,
    ReleaseStatus,
    ReleaseType,
    SortOrder,
    TranslationType,
    YearSort,
)
from kodik.models.media import Episode, MaterialData, Release, Season, Translation
from kodik.queries.catalog import (
    CountryQuery,
    GenreQuery,
    QualityQuery,
    TranslationQuery,
    YearQuery,
)
from kodik.queries.list import ListQuery
from kodik.queries.search import SearchQuery
from kodik.services.seasons import UnifiedEpisode, UnifiedSeason, unify_seasons

__version__ = "0.1.0"

__all__ = [
    "AnimeKind",
    "Client",
    "CountSort",
    "CountryQuery",
    "Episode",
    "GenreQuery",
    "GenresType",
    "HttpError",
    "KodikApiError",
    "KodikError",
    "ListQuery",
    "ListSort",
    "MalformedResponseError",
    "MaterialData",
    "MaterialDataField",
    "MpaaRating",
    "OutboundRequest",
    "QualityQuery",
    "Release",
    "ReleaseQuality",
    "ReleaseStatus",
    "ReleaseType",
    "SearchQuery",
    "Season",
    "SerializeError",
    "Settings",
    "SortOrder",
    "Translation",
    "TranslationQuery",
    "TranslationType",
    "UnifiedEpisode",
    "UnifiedSeason",
    "YearQuery",
    "YearSort",
    "get_settings",
    "unify_seasons",
]
