"""Enumerated values used by Kodik filters and responses."""

from enum import Enum


class ReleaseType(str, Enum):
    """Release type on Kodik."""

    FOREIGN_MOVIE = "foreign-movie"
    SOVIET_CARTOON = "soviet-cartoon"
    FOREIGN_CARTOON = "foreign-cartoon"
    RUSSIAN_CARTOON = "russian-cartoon"
    ANIME = "anime"
    RUSSIAN_MOVIE = "russian-movie"
    CARTOON_SERIAL = "cartoon-serial"
    DOCUMENTARY_SERIAL = "documentary-serial"
    RUSSIAN_SERIAL = "russian-serial"
    FOREIGN_SERIAL = "foreign-serial"
    ANIME_SERIAL = "anime-serial"
    MULTI_PART_FILM = "multi-part-film"


class ReleaseQuality(str, Enum):
    """Release quality on Kodik.

    Kodik adds qualities from time to time, anything not listed here
    decodes as ``UNKNOWN`` instead of failing the whole page.
    """

    BD_RIP = "BDRip"
    BD_RIP_1080P = "BDRip 1080p"
    BD_RIP_720P = "BDRip 720p"
    CAM_RIP = "CAMRip"
    D_VHS = "D-VHS"
    DVB_RIP = "DVBRip"
    DVB_RIP_720P = "DVBRip 720p"
    DVD_RIP = "DVDRip"
    DVD_SRC = "DVDSrc"
    HDDVD_RIP = "HDDVDRip"
    HDDVD_RIP_1080P = "HDDVDRip 1080p"
    HDDVD_RIP_720P = "HDDVDRip 720p"
    HD_RIP = "HDRip"
    HD_RIP_1080P = "HDRip 1080p"
    HD_RIP_720P = "HDRip 720p"
    HDTV_RIP = "HDTVRip"
    HDTV_RIP_1080P = "HDTVRip 1080p"
    HDTV_RIP_720P = "HDTVRip 720p"
    IPTV_RIP = "IPTVRip"
    LASERDISC_RIP = "Laserdisc-RIP"
    SAT_RIP = "SATRip"
    SUPER_TS = "SuperTS"
    TS = "TS"
    TS_720P = "TS 720p"
    TV_RIP = "TVRip"
    TV_RIP_720P = "TVRip 720p"
    VHS_RIP = "VHSRip"
    WEB_DL_RIP = "WEB-DLRip"
    WEB_DL_RIP_1080P = "WEB-DLRip 1080p"
    WEB_DL_RIP_720P = "WEB-DLRip 720p"
    WORKPRINT_AVC = "Workprint-AVC"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


class TranslationType(str, Enum):
    """What a translation team produces."""

    SUBTITLES = "subtitles"
    VOICE = "voice"


class AnimeKind(str, Enum):
    TV = "tv"
    MOVIE = "movie"
    OVA = "ova"
    ONA = "ona"
    SPECIAL = "special"
    MUSIC = "music"
    TV_13 = "tv_13"
    TV_24 = "tv_24"
    TV_48 = "tv_48"


class ReleaseStatus(str, Enum):
    """Airing status, shared by the all/anime/drama status filters."""

    ANONS = "anons"
    ONGOING = "ongoing"
    RELEASED = "released"


AllStatus = ReleaseStatus
AnimeStatus = ReleaseStatus
DramaStatus = ReleaseStatus


class MpaaRating(str, Enum):
    G = "G"  # 0+
    PG = "PG"  # 6+
    PG_13 = "PG-13"  # 12+
    R = "R"  # 16+
    R_PLUS = "R+"  # 18+
    RX = "Rx"  # 21+


class MaterialDataField(str, Enum):
    """Fields accepted by the ``has_field`` / ``has_field_and`` filters."""

    KINOPOISK_ID = "kinopoisk_id"
    IMDB_ID = "imdb_id"
    MDL_ID = "mdl_id"
    WORLDART_LINK = "worldart_link"
    SHIKIMORI_ID = "shikimori_id"
    TITLE = "title"
    ANIME_TITLE = "anime_title"
    TITLE_EN = "title_en"
    OTHER_TITLES = "other_titles"
    OTHER_TITLES_EN = "other_titles_en"
    OTHER_TITLES_JP = "other_titles_jp"
    ANIME_LICENSE_NAME = "anime_license_name"
    ANIME_LICENSED_BY = "anime_licensed_by"
    ANIME_KIND = "anime_kind"
    ALL_STATUS = "all_status"
    ANIME_STATUS = "anime_status"
    DRAMA_STATUS = "drama_status"
    YEAR = "year"
    TAGLINE = "tagline"
    DESCRIPTION = "description"
    ANIME_DESCRIPTION = "anime_description"
    POSTER_URL = "poster_url"
    SCREENSHOTS = "screenshots"
    DURATION = "duration"
    COUNTRIES = "countries"
    ALL_GENRES = "all_genres"
    GENRES = "genres"
    ANIME_GENRES = "anime_genres"
    DRAMA_GENRES = "drama_genres"
    ANIME_STUDIOS = "anime_studios"
    KINOPOISK_RATING = "kinopoisk_rating"
    KINOPOISK_VOTES = "kinopoisk_votes"
    IMDB_RATING = "imdb_rating"
    IMDB_VOTES = "imdb_votes"
    SHIKIMORI_RATING = "shikimori_rating"
    SHIKIMORI_VOTES = "shikimori_votes"
    MYDRAMALIST_RATING = "mydramalist_rating"
    MYDRAMALIST_VOTES = "mydramalist_votes"
    PREMIERE_RU = "premiere_ru"
    PREMIERE_WORLD = "premiere_world"
    AIRED_AT = "aired_at"
    RELEASED_AT = "released_at"
    NEXT_EPISODE_AT = "next_episode_at"
    RATING_MPAA = "rating_mpaa"
    MINIMAL_AGE = "minimal_age"
    EPISODES_TOTAL = "episodes_total"
    EPISODES_AIRED = "episodes_aired"
    ACTORS = "actors"
    DIRECTORS = "directors"
    PRODUCERS = "producers"
    WRITERS = "writers"
    COMPOSERS = "composers"
    EDITORS = "editors"
    DESIGNERS = "designers"
    OPERATORS = "operators"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class ListSort(str, Enum):
    YEAR = "year"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    KINOPOISK_RATING = "kinopoisk_rating"
    IMDB_RATING = "imdb_rating"
    SHIKIMORI_RATING = "shikimori_rating"


class CountSort(str, Enum):
    """Sort keys for the aggregate endpoints (countries, genres, ...)."""

    TITLE = "title"
    COUNT = "count"


class YearSort(str, Enum):
    YEAR = "year"
    COUNT = "count"


class GenresType(str, Enum):
    """Which genre catalogue ``/genres`` should report."""

    KINOPOISK = "kinopoisk"
    SHIKIMORI = "shikimori"
    MYDRAMALIST = "mydramalist"
    ALL = "all"
