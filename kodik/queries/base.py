"""Query base classes and the filter groups shared between endpoints."""

import logging
from typing import Any, ClassVar, List, Optional, Self, Type

from pydantic import BaseModel, ConfigDict

from kodik.core.client import Client
from kodik.core.serializer import QueryParts, serialize_query
from kodik.models.enums import (
    AnimeKind,
    MaterialDataField,
    MpaaRating,
    ReleaseStatus,
    ReleaseType,
    TranslationType,
)
from kodik.models.responses import PageResponse

logger = logging.getLogger(__name__)


class QueryBase(BaseModel):
    """Abstract base class for Kodik queries.

    A query is a bag of optional filters. Unset filters are not sent.
    Subclasses declare their filters as fields and set ``endpoint`` and
    ``response_model``.
    """

    endpoint: ClassVar[str]
    response_model: ClassVar[Type[PageResponse]]

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    def where(self, **filters: Any) -> Self:
        """Set several filters at once and return the same query.

        Example:
            ListQuery().where(limit=100, types=[ReleaseType.ANIME])
        """
        for name, value in filters.items():
            setattr(self, name, value)
        return self

    def serialize(self) -> QueryParts:
        """Query parameters for this configuration."""
        return serialize_query(self)

    async def execute(self, client: Client) -> PageResponse:
        """Execute the query and fetch the results."""
        params = self.serialize()
        logger.debug("Executing %s against %s", type(self).__name__, self.endpoint)
        request = client.build_request(self.endpoint, params)
        return await client.fetch(request, self.response_model)


class ReleaseFilters(QueryBase):
    """Filters accepted by every endpoint that works over the release catalog.

    Multi-valued filters match a release having at least one of the values.
    Ranges are strings as Kodik expects them, e.g. ``"7-10"`` or ``"7.5"``.
    """

    types: Optional[List[ReleaseType]] = None
    year: Optional[List[int]] = None

    translation_id: Optional[List[int]] = None
    translation_type: Optional[List[TranslationType]] = None

    # Release must have at least one / all of the fields
    has_field: Optional[List[MaterialDataField]] = None
    has_field_and: Optional[List[MaterialDataField]] = None

    countries: Optional[List[str]] = None

    genres: Optional[List[str]] = None
    anime_genres: Optional[List[str]] = None
    drama_genres: Optional[List[str]] = None
    all_genres: Optional[List[str]] = None

    duration: Optional[List[str]] = None

    kinopoisk_rating: Optional[List[str]] = None
    imdb_rating: Optional[List[str]] = None
    shikimori_rating: Optional[List[str]] = None
    mydramalist_rating: Optional[List[str]] = None

    actors: Optional[List[str]] = None
    directors: Optional[List[str]] = None
    producers: Optional[List[str]] = None
    writers: Optional[List[str]] = None
    composers: Optional[List[str]] = None
    editors: Optional[List[str]] = None
    designers: Optional[List[str]] = None
    operators: Optional[List[str]] = None

    rating_mpaa: Optional[List[MpaaRating]] = None
    minimal_age: Optional[List[str]] = None

    anime_kind: Optional[List[AnimeKind]] = None
    mydramalist_tags: Optional[List[str]] = None

    anime_status: Optional[List[ReleaseStatus]] = None
    drama_status: Optional[List[ReleaseStatus]] = None
    all_status: Optional[List[ReleaseStatus]] = None

    anime_studios: Optional[List[str]] = None
    anime_licensed_by: Optional[List[str]] = None


class PlaybackFilters(QueryBase):
    """Filters and response flags of the release-returning endpoints."""

    camrip: Optional[bool] = None
    lgbt: Optional[bool] = None

    # Response shaping: include seasons, episodes, episode data, page links
    with_seasons: Optional[bool] = None
    season: Optional[List[int]] = None
    with_episodes: Optional[bool] = None
    with_episodes_data: Optional[bool] = None
    with_page_links: Optional[bool] = None

    not_blocked_in: Optional[List[str]] = None
    not_blocked_for_me: Optional[List[str]] = None

    with_material_data: Optional[bool] = None
