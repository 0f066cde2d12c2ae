from conftest import release_payload
from kodik.models.media import Release
from kodik.services.seasons import UnifiedEpisode, UnifiedSeason, unify_seasons

SERIAL_LINK = "//kodik.info/serial/45534/d8619e900d122ea8eff8b55891b09bac/720p"


def test_release_without_seasons_becomes_one_season_one_episode():
    release = Release.model_validate(release_payload())

    seasons = unify_seasons(release)

    assert seasons == {
        "1": UnifiedSeason(
            title=None,
            link=release.link,
            episodes={
                "1": UnifiedEpisode(
                    title=None,
                    link=release.link,
                    screenshots=release.screenshots,
                )
            },
        )
    }


def test_release_with_seasons_mixes_links_and_episode_objects():
    release = Release.model_validate(
        release_payload(
            seasons={
                "1": {
                    "link": SERIAL_LINK,
                    "episodes": {
                        "3": f"{SERIAL_LINK}/3",
                        "1": f"{SERIAL_LINK}/1",
                        "2": {
                            "title": "Special",
                            "link": f"{SERIAL_LINK}/2",
                            "screenshots": ["https://i.kodik.biz/2.jpg"],
                        },
                    },
                }
            }
        )
    )

    seasons = unify_seasons(release)

    assert list(seasons) == ["1"]
    season = seasons["1"]
    assert season.link == SERIAL_LINK
    assert list(season.episodes) == ["1", "2", "3"]
    assert season.episodes["1"] == UnifiedEpisode(
        link=f"{SERIAL_LINK}/1", screenshots=release.screenshots
    )
    assert season.episodes["2"] == UnifiedEpisode(
        title="Special",
        link=f"{SERIAL_LINK}/2",
        screenshots=["https://i.kodik.biz/2.jpg"],
    )
    assert season.episodes["3"].link == f"{SERIAL_LINK}/3"
    assert season.episodes["3"].screenshots == release.screenshots
