"""Monitor a room: connection state, shows, tip goal.

Feeds a scripted sequence of room events through a local source and prints
what the controller re-emits. The panel is served by a mock transport, so
no network is needed. Shows:
- Listening to synthetic events (state_change, goal_progress, goal_reached)
- Host stamping on tips
- A custom hook replacing a built-in one

Run with:
    uv run python examples/room_monitor.py
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from roomwatch import LocalEventSource, MockRoomTransport, RoomController, RoomSettings

PANEL = "<table><tr><th>Tip Received / Goal :</th><td>{current} / 500</td></tr></table>"


async def main() -> None:
    logging.basicConfig(level=logging.INFO)

    source = LocalEventSource()
    transport = MockRoomTransport(PANEL.format(current=380))
    controller = RoomController(source, transport)

    @controller.on("init")
    def on_init(settings: RoomSettings) -> None:
        print(f"[init] room={settings.room} subject={settings.subject!r} goal={settings.goal}")

    @controller.on("state_change")
    def on_state(event: dict[str, Any]) -> None:
        print(f"[state] {event['state']}")

    @controller.on("model_status_change")
    def on_status(event: dict[str, Any]) -> None:
        print(f"[status] {event['status']}")

    @controller.on("goal_progress")
    def on_progress(event: dict[str, Any]) -> None:
        print(f"[goal] {event['goal'].goal_current} tokens, {event['goal'].goal_remaining} to go")

    @controller.on("goal_reached")
    def on_reached(event: dict[str, Any]) -> None:
        print("[goal] reached!")

    @controller.on("tip")
    async def on_tip(event: dict[str, Any]) -> None:
        who = "host" if event["user"]["isHost"] else event["user"]["username"]
        print(f"[tip] {event['amount']} from {who}")

    # Replace the built-in title hook: shout every new subject
    async def shout_title(event: dict[str, Any]) -> dict[str, Any]:
        controller.state.subject = event.get("title") or controller.state.subject
        event["title"] = controller.state.subject.upper()
        return event

    controller.hooks.register("title_change", shout_title)
    controller.on("title_change")(lambda event: print(f"[title] {event['title']}"))

    await source.emit(
        "init",
        {
            "hasWebsocket": True,
            "chatSettings": {
                "current_subject": "goal show at 500",
                "app_info_json": "Tip Goal|https://apps.example.com/tipgoal/?slot=0",
                "get_panel_url": "/api/panel/demo/",
            },
            "settings": {"room": "demo", "connecting": True},
            "initializerSettings": {"model_status": "public"},
        },
    )
    await source.emit("socket_open")
    await source.emit("auth", {"success": True})
    await source.emit("joined_room", {"room": "demo"})

    await source.emit("tip", {"user": {"username": "fan1"}, "amount": 100})
    transport.html = PANEL.format(current=480)
    await source.emit("refresh_panel", {})

    await source.emit("tip", {"user": {"username": "fan2"}, "amount": 25})
    transport.html = PANEL.format(current=505)
    await source.emit("refresh_panel", {})

    await source.emit("title_change", {"title": "goal reached, thanks!"})
    await source.emit("private_show_approved", {"tokensPerMinute": 60})
    await source.emit("private_show_cancel", {})
    await source.emit("socket_close")

    print(f"Final settings: {controller.settings.model_dump()}")


if __name__ == "__main__":
    asyncio.run(main())
