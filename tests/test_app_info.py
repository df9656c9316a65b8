"""Tests for app-info parsing."""

from __future__ import annotations

import logging

import pytest

from roomwatch.core.app_info import AppInfoParseError, parse_app_info
from roomwatch.models.room import AppInfo


class TestParseAppInfo:
    def test_url_and_bare_segment(self) -> None:
        apps = parse_app_info("Dice|http://x/?slot=2,Solo")

        assert apps == [
            AppInfo(name="Dice", url="http://x/?slot=2", slot="2"),
            AppInfo(),
        ]
        assert apps[1].is_empty

    def test_slot_after_other_parameters(self) -> None:
        apps = parse_app_info("Bot|http://x/app/?room=a&slot=3")

        assert apps[0].slot == "3"

    def test_empty_string_yields_single_empty_record(self) -> None:
        assert parse_app_info("") == [AppInfo()]

    def test_none_is_treated_as_empty(self) -> None:
        assert parse_app_info(None) == [AppInfo()]

    def test_multiple_apps_keep_order(self) -> None:
        apps = parse_app_info("A|http://x/?slot=0,B|http://x/?slot=1")

        assert [a.name for a in apps] == ["A", "B"]
        assert [a.slot for a in apps] == ["0", "1"]

    def test_missing_slot_raises_when_strict(self) -> None:
        with pytest.raises(AppInfoParseError):
            parse_app_info("Dice|http://x/app/")

    def test_missing_slot_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_app_info("Dice|http://x/app/", strict=True)

    def test_missing_slot_kept_when_lenient(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="roomwatch.state"):
            apps = parse_app_info("Dice|http://x/app/", strict=False)

        assert apps == [AppInfo(name="Dice", url="http://x/app/")]
        assert "slot" in caplog.text
