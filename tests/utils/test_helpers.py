# tests/utils/test_helpers.py
"""Tests for cms/utils/helpers.py."""

from time import perf_counter
from unittest.mock import MagicMock
from uuid import UUID, uuid4

from cms.utils.helpers import epoch_ms, host, parse_uuid, time_taken, utcnow


class TestParseUuid:
    def test_accepts_uuid_instance(self) -> None:
        uid = uuid4()
        assert parse_uuid(uid) is uid

    def test_accepts_string(self) -> None:
        uid = uuid4()
        assert parse_uuid(str(uid)) == uid

    def test_rejects_malformed_value(self) -> None:
        assert parse_uuid("not-a-uuid") is None
        assert parse_uuid("") is None

    def test_result_type(self) -> None:
        assert isinstance(parse_uuid("123e4567-e89b-12d3-a456-426614174000"), UUID)


class TestTimeHelpers:
    def test_utcnow_is_timezone_aware(self) -> None:
        assert utcnow().tzinfo is not None

    def test_epoch_ms_is_milliseconds(self) -> None:
        # 2020-01-01 in milliseconds
        assert epoch_ms() > 1_577_836_800_000

    def test_time_taken_under_one_second(self) -> None:
        assert time_taken(perf_counter()).endswith("ms")

    def test_time_taken_over_one_second(self) -> None:
        assert time_taken(perf_counter() - 61.5).startswith("1m ")


class TestHost:
    def test_client_host(self) -> None:
        request = MagicMock()
        request.client.host = "10.0.0.1"
        assert host(request) == "10.0.0.1"

    def test_missing_client(self) -> None:
        request = MagicMock()
        request.client = None
        assert host(request) == "unknown"
