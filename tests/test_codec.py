"""Tests for the diary wire codec."""

import json
import time
from datetime import date, datetime

import pytest

from diary_sync.codec import (
    decode_confirmation,
    decode_date,
    decode_page,
    decode_record,
    decode_status,
    encode_date,
    encode_request,
    encode_status,
    is_null_body,
)
from diary_sync.error_codes import ErrorCode
from diary_sync.exceptions import DecodeError
from diary_sync.models.fields import VisibilityStatus


class TestStatusCodec:
    """Visibility status travels as its symbolic name."""

    @pytest.mark.parametrize("status", list(VisibilityStatus))
    def test_round_trip(self, status) -> None:
        assert decode_status(encode_status(status)) is status

    def test_encodes_name_not_ordinal(self) -> None:
        assert encode_status(VisibilityStatus.FOLLOWERS) == "FOLLOWERS"

    def test_unknown_symbol_fails(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_status("NOT_A_STATUS")
        assert exc_info.value.error_code == ErrorCode.DEC_UNKNOWN_STATUS.value

    def test_ordinal_is_rejected(self) -> None:
        with pytest.raises(DecodeError):
            decode_status(VisibilityStatus.PUBLIC.value)

    def test_lowercase_name_is_rejected(self) -> None:
        with pytest.raises(DecodeError):
            decode_status("public")


class TestDateCodec:
    """Dates travel as ISO calendar strings."""

    @pytest.mark.parametrize(
        "value",
        [date(2024, 1, 1), date(2024, 2, 29), date(1999, 12, 31), date(1, 1, 1)],
    )
    def test_round_trip(self, value) -> None:
        assert decode_date(encode_date(value)) == value

    def test_independent_of_local_timezone(self, monkeypatch) -> None:
        if not hasattr(time, "tzset"):
            pytest.skip("time.tzset not available on this platform")
        value = date(2024, 12, 31)
        try:
            for zone in ("Pacific/Kiritimati", "Pacific/Pago_Pago", "UTC"):
                monkeypatch.setenv("TZ", zone)
                time.tzset()
                assert encode_date(value) == "2024-12-31"
                assert decode_date("2024-12-31") == value
        finally:
            monkeypatch.undo()
            time.tzset()

    def test_datetime_is_rejected(self) -> None:
        with pytest.raises(DecodeError):
            decode_date(datetime(2024, 5, 17, 12, 0))

    def test_garbage_is_rejected(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode_date("17/05/2024")
        assert exc_info.value.error_code == ErrorCode.DEC_INVALID_DATE.value

    def test_timestamp_is_rejected(self) -> None:
        with pytest.raises(DecodeError):
            decode_date(1715904000)


class TestEncodeRequest:
    """Test serialization of diary requests."""

    def test_wire_shape(self, sample_request) -> None:
        payload = json.loads(encode_request(sample_request))

        assert payload == {
            "title": "Harbour walk",
            "content": "Fog over the water, then sun.",
            "date": "2024-05-17",
            "latitude": 35.1028,
            "longitude": 129.0403,
            "status": "PUBLIC",
        }

    def test_is_utf8_bytes(self, sample_request) -> None:
        request = sample_request.model_copy(update={"title": "부산 산책"})
        body = encode_request(request)
        assert isinstance(body, bytes)
        assert json.loads(body.decode("utf-8"))["title"] == "부산 산책"


class TestDecodeRecord:
    """Test decoding of single diary records."""

    def test_decodes_server_record(self, record_payload) -> None:
        record = decode_record(json.dumps(record_payload).encode())

        assert record.diary_id == 42
        assert record.user_id == 7
        assert record.title == "Harbour walk"
        assert record.date == date(2024, 5, 17)
        assert record.status is VisibilityStatus.PUBLIC
        assert record.is_liked is False
        assert record.profile_image is not None
        assert record.profile_image.is_default

    def test_accepts_plain_title_key(self, record_payload) -> None:
        payload = dict(record_payload)
        payload["title"] = payload.pop("diaryTitle")
        assert decode_record(json.dumps(payload)).title == "Harbour walk"

    def test_ignores_unknown_fields(self, record_payload) -> None:
        payload = {**record_payload, "weather": "foggy"}
        assert decode_record(json.dumps(payload)).diary_id == 42

    def test_unknown_status_fails(self, record_payload) -> None:
        payload = {**record_payload, "status": "SECRET"}
        with pytest.raises(DecodeError, match="status"):
            decode_record(json.dumps(payload))

    def test_null_status_fails(self, record_payload) -> None:
        payload = {**record_payload, "status": None}
        with pytest.raises(DecodeError, match="status"):
            decode_record(json.dumps(payload))

    def test_missing_status_fails(self, record_payload) -> None:
        payload = dict(record_payload)
        del payload["status"]
        with pytest.raises(DecodeError, match="status"):
            decode_record(json.dumps(payload))

    def test_missing_content_fails(self, record_payload) -> None:
        payload = dict(record_payload)
        del payload["content"]
        with pytest.raises(DecodeError, match="content"):
            decode_record(json.dumps(payload))

    def test_missing_required_field_fails(self, record_payload) -> None:
        payload = dict(record_payload)
        del payload["diaryId"]
        with pytest.raises(DecodeError, match="diaryId"):
            decode_record(json.dumps(payload))

    def test_invalid_json_fails(self) -> None:
        with pytest.raises(DecodeError, match="Invalid JSON") as exc_info:
            decode_record(b"<html>oops</html>")
        assert exc_info.value.error_code == ErrorCode.DEC_INVALID_JSON.value

    def test_non_object_fails(self) -> None:
        with pytest.raises(DecodeError):
            decode_record(b"[1, 2, 3]")


class TestDecodePage:
    """Test decoding of paginated responses."""

    def test_decodes_page(self, page_payload) -> None:
        page = decode_page(json.dumps(page_payload))

        assert [r.diary_id for r in page.content] == [42, 43]
        assert page.total_elements == 7
        assert page.number == 0
        assert page.has_next

    def test_last_page_has_no_next(self, page_payload) -> None:
        payload = {**page_payload, "number": 3, "last": True}
        assert not decode_page(json.dumps(payload)).has_next

    def test_has_next_from_total_pages(self, record_payload) -> None:
        payload = {"content": [record_payload], "totalElements": 2, "totalPages": 2, "number": 0}
        assert decode_page(json.dumps(payload)).has_next

    def test_bad_item_fails_whole_page(self, page_payload) -> None:
        page_payload["content"][1]["status"] = "EVERYONE"
        with pytest.raises(DecodeError):
            decode_page(json.dumps(page_payload))


class TestDecodeConfirmation:
    def test_keeps_extra_fields(self) -> None:
        confirmation = decode_confirmation(b'{"message": "deleted", "diaryId": 4}')
        assert confirmation.message == "deleted"
        assert confirmation.model_extra == {"diaryId": 4}

    def test_declared_status_and_code(self) -> None:
        confirmation = decode_confirmation(b'{"status": "OK", "code": 200, "message": "liked"}')
        assert confirmation.status == "OK"
        assert confirmation.code == 200
        assert confirmation.model_extra == {}

    def test_numeric_status(self) -> None:
        assert decode_confirmation(b'{"status": 200}').status == 200

    def test_empty_object_is_valid(self) -> None:
        assert decode_confirmation(b"{}").message is None


@pytest.mark.parametrize(
    ("payload", "expected"),
    [(None, True), (b"", True), (b"  \n", True), (b"null", True), (b"{}", False), ("[]", False)],
)
def test_is_null_body(payload, expected) -> None:
    assert is_null_body(payload) is expected
