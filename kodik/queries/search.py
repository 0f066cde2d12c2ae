"""``/search``: look releases up by title or external ID."""

from typing import List, Optional

from pydantic import PositiveInt

from kodik.models.enums import TranslationType
from kodik.models.responses import SearchResponse
from kodik.queries.base import PlaybackFilters, ReleaseFilters


class SearchQuery(PlaybackFilters, ReleaseFilters):
    """Search releases.

    At least one of the title or ID fields should be set, Kodik rejects an
    empty search with an error payload.
    """

    endpoint = "/search"
    response_model = SearchResponse

    title: Optional[str] = None
    title_orig: Optional[str] = None
    strict: Optional[bool] = None  # ignore additions in parentheses
    full_match: Optional[bool] = None

    id: Optional[str] = None
    player_link: Optional[str] = None

    kinopoisk_id: Optional[str] = None
    imdb_id: Optional[str] = None
    mdl_id: Optional[str] = None
    worldart_animation_id: Optional[str] = None
    worldart_cinema_id: Optional[str] = None
    worldart_link: Optional[str] = None
    shikimori_id: Optional[str] = None

    limit: Optional[PositiveInt] = None

    prioritize_translations: Optional[List[str]] = None
    unprioritize_translations: Optional[List[str]] = None
    prioritize_translation_type: Optional[List[TranslationType]] = None
    block_translations: Optional[List[int]] = None

    episode: Optional[List[int]] = None
