import pytest
from unittest.mock import AsyncMock, MagicMock

from kodik.core.client import Client

API_KEY = "q8p5vnf9crt7xfyzke4iwc6r5rvsurv7"


def make_response(payload, status_code=200):
    """A fake niquests response whose ``json()`` returns ``payload``."""
    response = MagicMock(status_code=status_code)
    response.json.return_value = payload
    return response


def release_payload(**overrides):
    release = {
        "id": "serial-45534",
        "title": "Киберпанк: Бегущие по краю",
        "title_orig": "Cyberpunk: Edgerunners",
        "other_title": "サイバーパンク エッジランナーズ",
        "link": "//kodik.info/serial/45534/d8619e900d122ea8eff8b55891b09bac/720p",
        "year": 2022,
        "kinopoisk_id": "2000102",
        "imdb_id": "tt12590266",
        "mdl_id": None,
        "worldart_link": "http://www.world-art.ru/animation/animation.php?id=10534",
        "shikimori_id": "42310",
        "type": "anime-serial",
        "quality": "WEB-DLRip 720p",
        "camrip": False,
        "lgbt": False,
        "translation": {"id": 610, "title": "AniLibria.TV", "type": "voice"},
        "created_at": "2022-09-14T10:54:34Z",
        "updated_at": "2022-09-23T22:31:33Z",
        "blocked_seasons": {},
        "last_season": 1,
        "last_episode": 10,
        "episodes_count": 10,
        "blocked_countries": [],
        "screenshots": ["https://i.kodik.biz/screenshots/seria/104981222/1.jpg"],
    }
    release.update(overrides)
    return release


def page_payload(next_page=None, results=None, total=3):
    return {
        "time": "2ms",
        "total": total,
        "prev_page": None,
        "next_page": next_page,
        "results": results if results is not None else [release_payload()],
    }


@pytest.fixture
def session():
    """Stand-in for ``niquests.AsyncSession``."""
    session = MagicMock()
    session.request = AsyncMock()
    session.close = AsyncMock()
    return session


@pytest.fixture
def client(session):
    return Client(API_KEY, session=session)
