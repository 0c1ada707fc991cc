from __future__ import annotations

import logging
import time

from websocket import WebSocket, WebSocketException, create_connection

from .chrome_discovery import get_websocket_debug_url, remaining_seconds
from .exceptions import ChromeUnreachableError, DiscoveryError

logger = logging.getLogger(__name__)


class CDPClient:
    def __init__(self, websocket_url: str, timeout_seconds: float = 5.0) -> None:
        self.websocket_url = websocket_url
        self.timeout_seconds = timeout_seconds
        self._ws: WebSocket | None = None

    @property
    def connected(self) -> bool:
        return self._ws is not None

    def connect(self) -> None:
        try:
            self._ws = create_connection(self.websocket_url, timeout=self.timeout_seconds)
        except (WebSocketException, OSError) as exc:
            raise ChromeUnreachableError(
                f"Failed to connect to Chrome DevTools websocket {self.websocket_url}: {exc}"
            ) from exc

    def close(self) -> None:
        if self._ws is not None:
            self._ws.close()
            self._ws = None

    def __enter__(self) -> CDPClient:
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.close()
        return False


def probe_direct_connection(host: str, port: int, timeout_seconds: float = 5.0) -> str:
    """Open a CDP session on *host*:*port* and close it again.

    Discovery and the websocket handshake share a single *timeout_seconds* budget.
    Returns the websocket URL that was used. Raises :class:`ChromeUnreachableError`
    when either step fails or the budget runs out.
    """
    deadline = time.monotonic() + timeout_seconds
    try:
        ws_url = get_websocket_debug_url(host, port, timeout_seconds, deadline=deadline)
        handshake_timeout = remaining_seconds(deadline)
    except DiscoveryError as exc:
        raise ChromeUnreachableError(str(exc)) from exc

    logger.debug("Attaching to %s", ws_url)
    with CDPClient(ws_url, timeout_seconds=handshake_timeout):
        pass
    return ws_url
