"""Tests for HookTable."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from roomwatch.core.hooks import HookTable
from roomwatch.models.enums import CatalogEvent


class TestHookTable:
    async def test_unhooked_event_passes_through(self) -> None:
        table = HookTable()
        payload = {"message": "hi"}

        outcome = await table.run("room_message", payload)

        assert outcome.payload is payload
        assert outcome.hooked is False
        assert outcome.failed is False

    async def test_unknown_event_name_passes_through(self) -> None:
        table = HookTable()

        outcome = await table.run("not_in_catalog", {"a": 1})

        assert outcome.payload == {"a": 1}
        assert outcome.hooked is False

    async def test_hook_transforms_payload(self) -> None:
        table = HookTable()

        async def upper(event: dict[str, Any]) -> dict[str, Any]:
            event["title"] = event["title"].upper()
            return event

        table.register(CatalogEvent.TITLE_CHANGE, upper)

        outcome = await table.run("title_change", {"title": "hello"})

        assert outcome.hooked is True
        assert outcome.payload == {"title": "HELLO"}

    async def test_failing_hook_forwards_original(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        table = HookTable()
        payload = {"user": {"username": "bob"}}

        async def broken(event: dict[str, Any]) -> dict[str, Any]:
            event["user"]["isHost"] = True
            raise RuntimeError("boom")

        table.register("tip", broken)

        with caplog.at_level(logging.ERROR, logger="roomwatch.hooks"):
            outcome = await table.run("tip", payload)

        assert outcome.payload is payload
        assert payload == {"user": {"username": "bob"}}
        assert isinstance(outcome.error, RuntimeError)
        assert "Hook failed for tip" in caplog.text

    async def test_register_replaces(self) -> None:
        table = HookTable()

        async def first(event: Any) -> Any:
            return "first"

        async def second(event: Any) -> Any:
            return "second"

        table.register(CatalogEvent.AUTH, first)
        table.register("auth", second)

        assert len(table) == 1
        assert (await table.run("auth", {})).payload == "second"

    def test_register_rejects_unknown_event(self) -> None:
        table = HookTable()

        async def hook(event: Any) -> Any:
            return event

        with pytest.raises(ValueError):
            table.register("not_in_catalog", hook)

    def test_unregister_and_contains(self) -> None:
        async def hook(event: Any) -> Any:
            return event

        table = HookTable({CatalogEvent.ROOM_COUNT: hook})

        assert "room_count" in table
        assert table.names == ["room_count"]
        assert table.unregister("room_count") is True
        assert "room_count" not in table
        assert table.unregister("room_count") is False
        assert table.unregister("bogus") is False

    async def test_hook_enriches_payload_in_place(self) -> None:
        table = HookTable()
        payload = {"user": {"username": "bob"}}

        async def stamp(event: dict[str, Any]) -> dict[str, Any]:
            event["user"]["isHost"] = False
            return event

        table.register("room_entry", stamp)

        outcome = await table.run("room_entry", payload)

        assert outcome.payload is payload
        assert payload["user"]["isHost"] is False

    async def test_uncopyable_payload_still_hooked(self) -> None:
        table = HookTable()
        seen: list[Any] = []

        class Opaque:
            def __deepcopy__(self, memo: Any) -> Any:
                raise TypeError("cannot copy")

        async def record(event: dict[str, Any]) -> dict[str, Any]:
            seen.append(event)
            return event

        table.register("room_count", record)
        payload = {"count": 4, "socket": Opaque()}

        outcome = await table.run("room_count", payload)

        assert outcome.failed is False
        assert seen == [payload]
