from typing import Dict, Optional

import pytest
from pydantic import BaseModel

from kodik.core.errors import SerializeError
from kodik.core.serializer import serialize_query
from kodik.models.enums import (
    ListSort,
    MaterialDataField,
    ReleaseType,
    SortOrder,
    TranslationType,
)
from kodik.queries.catalog import CountryQuery, GenreQuery, QualityQuery, YearQuery
from kodik.queries.list import ListQuery
from kodik.queries.search import SearchQuery


@pytest.mark.parametrize(
    "query_cls",
    [ListQuery, SearchQuery, CountryQuery, GenreQuery, QualityQuery, YearQuery],
)
def test_empty_query_serializes_to_nothing(query_cls):
    """No filter set means no parameter at all, not empty values."""
    assert serialize_query(query_cls()) == []


def test_list_values_are_comma_joined_in_one_pair():
    query = ListQuery(
        types=[ReleaseType.ANIME, ReleaseType.ANIME_SERIAL, ReleaseType.FOREIGN_MOVIE]
    )

    parts = serialize_query(query)

    assert parts == [("types", "anime,anime-serial,foreign-movie")]


def test_string_list_keeps_a_single_key():
    query = CountryQuery(countries=["Япония", "США", "Корея Южная"])

    parts = serialize_query(query)
    keys = [key for key, _ in parts]

    assert keys.count("countries") == 1
    assert dict(parts)["countries"] == "Япония,США,Корея Южная"


def test_scalars_enums_and_booleans():
    query = ListQuery(
        limit=50,
        sort=ListSort.UPDATED_AT,
        order=SortOrder.DESC,
        with_material_data=True,
        camrip=False,
        year=[2021, 2022],
        translation_type=[TranslationType.VOICE],
        has_field=[MaterialDataField.SHIKIMORI_ID],
    )

    parts = dict(serialize_query(query))

    assert parts == {
        "limit": "50",
        "sort": "updated_at",
        "order": "desc",
        "with_material_data": "true",
        "camrip": "false",
        "year": "2021,2022",
        "translation_type": "voice",
        "has_field": "shikimori_id",
    }


def test_empty_list_is_omitted():
    query = ListQuery(genres=[], limit=10)

    assert serialize_query(query) == [("limit", "10")]


def test_search_fields_serialize():
    query = SearchQuery(title="Cyberpunk: Edgerunners", strict=True, limit=1)

    parts = dict(serialize_query(query))

    assert parts == {
        "title": "Cyberpunk: Edgerunners",
        "strict": "true",
        "limit": "1",
    }


def test_unrepresentable_value_raises_serialize_error():
    class NestedQuery(BaseModel):
        extra: Optional[Dict[str, str]] = None

    with pytest.raises(SerializeError):
        serialize_query(NestedQuery(extra={"a": "b"}))


def test_where_chains_and_validates():
    query = ListQuery().where(limit=10).where(types=["anime"])

    assert query.limit == 10
    assert query.types == [ReleaseType.ANIME]
    assert dict(query.serialize()) == {"types": "anime", "limit": "10"}

    with pytest.raises(ValueError):
        query.where(no_such_filter=True)

    with pytest.raises(ValueError):
        query.where(limit=0)
