"""Seasons and episodes in one shape regardless of the release kind."""

from typing import Dict, List, Optional

from pydantic import BaseModel

from kodik.models.media import Episode, Release


class UnifiedEpisode(BaseModel):
    """An episode with its link and screenshots always present."""

    title: Optional[str] = None
    link: str
    screenshots: List[str] = []


class UnifiedSeason(BaseModel):
    """A season whose episodes are all ``UnifiedEpisode``."""

    title: Optional[str] = None
    link: str
    episodes: Dict[str, UnifiedEpisode] = {}


def unify_seasons(release: Release) -> Dict[str, UnifiedSeason]:
    """Return the seasons of a release in a single format.

    Kodik answers movies without ``seasons`` at all, and series with either
    bare episode links or episode objects depending on the request flags.
    A release without seasons becomes season "1" with episode "1" pointing
    at the release itself. Keys are sorted by their string value.
    """
    if release.seasons is None:
        return {
            "1": UnifiedSeason(
                link=release.link,
                episodes={
                    "1": UnifiedEpisode(
                        link=release.link,
                        screenshots=list(release.screenshots),
                    )
                },
            )
        }

    seasons: Dict[str, UnifiedSeason] = {}
    for season_num in sorted(release.seasons):
        kodik_season = release.seasons[season_num]
        episodes: Dict[str, UnifiedEpisode] = {}

        for episode_num in sorted(kodik_season.episodes):
            kodik_episode = kodik_season.episodes[episode_num]
            if isinstance(kodik_episode, Episode):
                episodes[episode_num] = UnifiedEpisode(
                    title=kodik_episode.title,
                    link=kodik_episode.link,
                    screenshots=list(kodik_episode.screenshots),
                )
            else:
                # Bare link: borrow the release screenshots
                episodes[episode_num] = UnifiedEpisode(
                    link=kodik_episode,
                    screenshots=list(release.screenshots),
                )

        seasons[season_num] = UnifiedSeason(
            title=kodik_season.title,
            link=kodik_season.link,
            episodes=episodes,
        )

    return seasons
