"""Release models as returned by Kodik."""

from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from kodik.models.enums import (
    AnimeKind,
    MpaaRating,
    ReleaseQuality,
    ReleaseStatus,
    ReleaseType,
    TranslationType,
)


class Translation(BaseModel):
    """The team that produced a voice-over or subtitle track."""

    id: int
    title: str
    translation_type: TranslationType = Field(alias="type")

    model_config = {"populate_by_name": True}


class Episode(BaseModel):
    """An episode object, present when ``with_episodes_data`` was requested."""

    title: Optional[str] = None  # e.g. marked as special
    link: str
    screenshots: List[str] = []


# Without ``with_episodes_data`` Kodik sends a bare player link per episode
EpisodeUnion = Union[str, Episode]


class Season(BaseModel):
    """A season and its episodes keyed by episode number."""

    title: Optional[str] = None  # recap, special, ...
    link: str
    episodes: Dict[str, EpisodeUnion] = {}


# "all" when everything is blocked, otherwise a list of episode numbers
BlockedSeason = Union[Literal["all"], List[str]]


class MaterialData(BaseModel):
    """Metadata merged by Kodik from KinoPoisk, Shikimori and MyDramaList.

    Every field is optional: which ones are filled depends on the sources
    that know the title.
    """

    title: Optional[str] = None
    anime_title: Optional[str] = None
    title_en: Optional[str] = None
    other_titles: Optional[List[str]] = None
    other_titles_en: Optional[List[str]] = None
    other_titles_jp: Optional[List[str]] = None
    anime_license_name: Optional[str] = None
    anime_licensed_by: Optional[List[str]] = None
    anime_kind: Optional[AnimeKind] = None
    all_status: Optional[ReleaseStatus] = None
    anime_status: Optional[ReleaseStatus] = None
    drama_status: Optional[ReleaseStatus] = None
    year: Optional[int] = None
    tagline: Optional[str] = None
    description: Optional[str] = None
    anime_description: Optional[str] = None
    poster_url: Optional[str] = None
    screenshots: Optional[List[str]] = None
    duration: Optional[int] = None  # minutes
    countries: Optional[List[str]] = None
    all_genres: Optional[List[str]] = None
    genres: Optional[List[str]] = None
    anime_genres: Optional[List[str]] = None
    drama_genres: Optional[List[str]] = None
    anime_studios: Optional[List[str]] = None
    kinopoisk_rating: Optional[float] = None
    kinopoisk_votes: Optional[int] = None
    imdb_rating: Optional[float] = None
    imdb_votes: Optional[int] = None
    shikimori_rating: Optional[float] = None
    shikimori_votes: Optional[int] = None
    mydramalist_rating: Optional[float] = None
    mydramalist_votes: Optional[int] = None
    premiere_ru: Optional[str] = None
    premiere_world: Optional[str] = None
    aired_at: Optional[str] = None
    released_at: Optional[str] = None
    next_episode_at: Optional[str] = None
    rating_mpaa: Optional[MpaaRating] = None
    minimal_age: Optional[int] = None
    episodes_total: Optional[int] = None
    episodes_aired: Optional[int] = None
    actors: Optional[List[str]] = None
    directors: Optional[List[str]] = None
    producers: Optional[List[str]] = None
    writers: Optional[List[str]] = None
    composers: Optional[List[str]] = None
    editors: Optional[List[str]] = None
    designers: Optional[List[str]] = None
    operators: Optional[List[str]] = None


class Release(BaseModel):
    """A catalog entry: a movie, a series or a part of one."""

    id: str  # "movie-452654"
    title: str
    title_orig: str
    other_title: Optional[str] = None
    link: str
    year: int

    kinopoisk_id: Optional[str] = None
    imdb_id: Optional[str] = None
    mdl_id: Optional[str] = None
    worldart_link: Optional[str] = None
    shikimori_id: Optional[str] = None

    release_type: ReleaseType = Field(alias="type")
    quality: ReleaseQuality
    camrip: bool = False
    lgbt: bool = False
    translation: Translation

    created_at: str  # ISO 8601
    updated_at: str  # ISO 8601

    # Series only
    blocked_seasons: Union[Literal["all"], Dict[str, BlockedSeason], None] = None
    seasons: Optional[Dict[str, Season]] = None
    last_season: Optional[int] = None
    last_episode: Optional[int] = None
    episodes_count: Optional[int] = None

    blocked_countries: List[str] = []
    material_data: Optional[MaterialData] = None
    screenshots: List[str] = []

    model_config = {"populate_by_name": True}
