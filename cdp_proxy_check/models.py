from __future__ import annotations

from dataclasses import dataclass
from typing import Any

FALLBACK = "N/A"


@dataclass(frozen=True)
class TargetDescriptor:
    """One inspectable browser context as reported by the DevTools ``/json/list`` endpoint."""

    id: str
    type: str
    url: str
    title: str | None = None
    websocket_debugger_url: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TargetDescriptor:
        return cls(
            id=str(data.get("id", "")),
            type=str(data.get("type", "")),
            url=str(data.get("url", "")),
            title=(None if data.get("title") is None else str(data.get("title"))),
            websocket_debugger_url=(
                None
                if data.get("webSocketDebuggerUrl") is None
                else str(data.get("webSocketDebuggerUrl"))
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "url": self.url,
            "title": self.title,
            "webSocketDebuggerUrl": self.websocket_debugger_url,
        }

    @property
    def display_title(self) -> str:
        return self.title or FALLBACK

    @property
    def display_websocket(self) -> str:
        return self.websocket_debugger_url or FALLBACK

    def render_lines(self, index: int) -> list[str]:
        """Return the log block for this target; *index* is 1-based."""
        return [
            f"  Target {index}:",
            f"    ID: {self.id}",
            f"    Type: {self.type}",
            f"    URL: {self.url}",
            f"    Title: {self.display_title}",
            f"    WebSocket: {self.display_websocket}",
        ]
