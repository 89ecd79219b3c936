"""Unit tests for token, numeric and label helpers."""

from datetime import datetime, timedelta, timezone

import pytest

from careerpilot.utils.datetime_utils import ensure_utc, is_in_future, local_hour, utc_now
from careerpilot.utils.helpers import (
    clamp,
    format_hour_label,
    js_round,
    normalize_tokens,
    parse_token_list,
    percentage,
)


class TestTokenHelpers:

    def test_parse_comma_separated_string(self):
        assert parse_token_list("Python,  SQL , ,Statistics") == ["Python", "SQL", "Statistics"]

    def test_parse_list_with_embedded_commas(self):
        assert parse_token_list(["Python, SQL", "  ", "Figma"]) == ["Python", "SQL", "Figma"]

    def test_parse_none(self):
        assert parse_token_list(None) == []

    def test_normalize_is_idempotent(self):
        once = normalize_tokens([" Python ", "SQL", "SQL"])
        assert once == ["python", "sql", "sql"]
        assert normalize_tokens(once) == once


class TestNumericHelpers:

    @pytest.mark.parametrize("value,expected", [(0.5, 1), (1.5, 2), (2.5, 3), (2.4, 2), (0, 0)])
    def test_js_round_rounds_half_up(self, value, expected):
        assert js_round(value) == expected

    def test_clamp(self):
        assert clamp(10, 35, 100) == 35
        assert clamp(140, 35, 100) == 100
        assert clamp(60, 35, 100) == 60

    def test_percentage(self):
        assert percentage(1, 3) == 33
        assert percentage(2, 3) == 67
        assert percentage(1, 0) == 0


class TestHourLabels:

    @pytest.mark.parametrize("hour,label", [(0, "12 AM"), (9, "9 AM"), (12, "12 PM"), (14, "2 PM"), (23, "11 PM")])
    def test_twelve_hour_labels(self, hour, label):
        assert format_hour_label(hour) == label

    def test_out_of_range_hour(self):
        with pytest.raises(ValueError):
            format_hour_label(24)


class TestDatetimeUtils:

    def test_naive_treated_as_utc(self):
        naive = datetime(2024, 1, 1, 10, 0)
        assert ensure_utc(naive).tzinfo == timezone.utc
        assert local_hour(naive, "UTC") == 10

    def test_future_check(self):
        assert is_in_future(utc_now() + timedelta(minutes=5))
        assert not is_in_future(utc_now() - timedelta(seconds=1))
