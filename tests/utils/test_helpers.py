"""Tests for blog_api/utils/helpers.py."""

from datetime import UTC, datetime
from unittest.mock import MagicMock

from blog_api.utils.helpers import host, today_str, utc_now


def test_utc_now_is_timezone_aware() -> None:
    now = utc_now()
    assert now.tzinfo is UTC


def test_today_str_format() -> None:
    parsed = datetime.strptime(today_str(), "%Y-%m-%d %H:%M:%S")  # noqa: DTZ007
    assert parsed.year >= 2024


def test_host_with_and_without_client() -> None:
    request = MagicMock()
    request.client.host = "10.0.0.7"
    assert host(request) == "10.0.0.7"

    request.client = None
    assert host(request) == "unknown"
