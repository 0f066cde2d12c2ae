import pytest

from conftest import page_payload, release_payload
from kodik.core.envelope import ErrorEnvelope, decode_envelope, unwrap_envelope
from kodik.core.errors import KodikApiError, MalformedResponseError
from kodik.models.enums import ReleaseQuality, ReleaseType
from kodik.models.responses import ListResponse, YearResponse


def test_error_payload_decodes_to_error_variant():
    result = decode_envelope({"error": "boom"}, ListResponse)

    assert isinstance(result, ErrorEnvelope)
    assert result.error == "boom"


def test_success_payload_decodes_to_success_variant():
    payload = page_payload(next_page="https://kodikapi.com/list?next=1")

    result = decode_envelope(payload, ListResponse)

    assert isinstance(result, ListResponse)
    assert result.total == 3
    assert result.next_page == "https://kodikapi.com/list?next=1"
    release = result.results[0]
    assert release.release_type == ReleaseType.ANIME_SERIAL
    assert release.quality == ReleaseQuality.WEB_DL_RIP_720P
    assert release.translation.title == "AniLibria.TV"


def test_payload_matching_neither_shape_is_malformed():
    with pytest.raises(MalformedResponseError) as excinfo:
        decode_envelope({"time": "1ms", "results": []}, ListResponse, status_code=502)

    assert excinfo.value.status_code == 502
    assert not isinstance(excinfo.value, KodikApiError)


def test_non_object_payload_is_malformed():
    with pytest.raises(MalformedResponseError):
        decode_envelope(["not", "an", "object"], YearResponse)


def test_unwrap_raises_kodik_error_with_verbatim_message():
    with pytest.raises(KodikApiError) as excinfo:
        unwrap_envelope({"error": "Отсутствует или неверный токен"}, ListResponse)

    assert excinfo.value.message == "Отсутствует или неверный токен"


def test_unknown_quality_does_not_break_decoding():
    payload = page_payload(results=[release_payload(quality="WEB-DL 4K")])

    result = unwrap_envelope(payload, ListResponse)

    assert result.results[0].quality == ReleaseQuality.UNKNOWN


def test_blocked_seasons_shapes():
    payload = page_payload(
        results=[
            release_payload(blocked_seasons="all"),
            release_payload(blocked_seasons={"1": "all", "2": ["1", "2"]}),
        ]
    )

    result = unwrap_envelope(payload, ListResponse)

    assert result.results[0].blocked_seasons == "all"
    assert result.results[1].blocked_seasons == {"1": "all", "2": ["1", "2"]}
