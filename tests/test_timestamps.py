from datetime import datetime, timedelta, timezone

import pytest

from expense_api.services.timestamps import format_timestamp, parse_timestamp


class TestParseTimestamp:
    def test_date_only_is_midnight_utc(self):
        assert parse_timestamp("2024-01-15") == datetime(2024, 1, 15, tzinfo=timezone.utc)

    def test_zulu_suffix(self):
        assert parse_timestamp("2024-01-15T10:30:00Z") == datetime(
            2024, 1, 15, 10, 30, tzinfo=timezone.utc
        )

    def test_offset_converted_to_utc(self):
        parsed = parse_timestamp("2024-01-15T10:30:00+02:00")
        assert parsed == datetime(2024, 1, 15, 8, 30, tzinfo=timezone.utc)
        assert parsed.utcoffset() == timedelta(0)

    def test_naive_datetime_taken_as_utc(self):
        assert parse_timestamp("2024-01-15T10:30:00").tzinfo == timezone.utc

    @pytest.mark.parametrize("value", ["", "   ", "invalid-date", "2024-02-30", "15/01/2024"])
    def test_unparseable(self, value):
        assert parse_timestamp(value) is None


class TestFormatTimestamp:
    def test_millisecond_precision_with_z(self):
        moment = datetime(2024, 1, 15, 10, 30, 0, 987654, tzinfo=timezone.utc)
        assert format_timestamp(moment) == "2024-01-15T10:30:00.987Z"

    def test_whole_seconds_still_carry_millis(self):
        assert format_timestamp(datetime(2024, 1, 15, tzinfo=timezone.utc)) == "2024-01-15T00:00:00.000Z"

    def test_other_offsets_normalized(self):
        tz = timezone(timedelta(hours=-5))
        assert format_timestamp(datetime(2024, 1, 15, 20, 0, tzinfo=tz)) == "2024-01-16T01:00:00.000Z"

    def test_round_trip_is_stable(self):
        text = format_timestamp(parse_timestamp("2024-01-15"))
        assert format_timestamp(parse_timestamp(text)) == text
