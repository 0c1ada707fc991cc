from __future__ import annotations

import json
import time
import urllib.request

from .exceptions import DiscoveryError


def _read_json(url: str, timeout_seconds: float = 5.0) -> list[dict] | dict:
    with urllib.request.urlopen(url, timeout=timeout_seconds) as response:
        return json.loads(response.read().decode("utf-8"))


def list_targets(host: str, port: int, timeout_seconds: float = 5.0) -> list[dict]:
    """Return the raw target records from ``/json/list`` in the order Chrome reports them."""
    endpoint = f"http://{host}:{port}/json/list"
    try:
        data = _read_json(endpoint, timeout_seconds)
    except Exception as exc:  # noqa: BLE001
        raise DiscoveryError(f"Could not reach Chrome DevTools at {endpoint}: {exc}") from exc
    if not isinstance(data, list):
        raise DiscoveryError(f"Unexpected response from {endpoint}: expected a JSON list")
    return data


def browser_version(host: str, port: int, timeout_seconds: float = 5.0) -> dict:
    endpoint = f"http://{host}:{port}/json/version"
    try:
        data = _read_json(endpoint, timeout_seconds)
    except Exception as exc:  # noqa: BLE001
        raise DiscoveryError(f"Could not reach Chrome DevTools at {endpoint}: {exc}") from exc
    if not isinstance(data, dict):
        raise DiscoveryError(f"Unexpected response from {endpoint}: expected a JSON object")
    return data


def remaining_seconds(deadline: float) -> float:
    remaining = deadline - time.monotonic()
    if remaining <= 0:
        raise DiscoveryError("Timed out waiting for Chrome DevTools")
    return remaining


def get_websocket_debug_url(
    host: str, port: int, timeout_seconds: float = 5.0, deadline: float | None = None
) -> str:
    """Pick the websocket to attach to: the first page target, else the browser endpoint.

    When *deadline* (a ``time.monotonic()`` value) is given, both HTTP calls share it.
    """
    if deadline is None:
        deadline = time.monotonic() + timeout_seconds
    for target in list_targets(host, port, remaining_seconds(deadline)):
        if target.get("type") == "page" and target.get("webSocketDebuggerUrl"):
            return str(target["webSocketDebuggerUrl"])

    ws_url = browser_version(host, port, remaining_seconds(deadline)).get("webSocketDebuggerUrl")
    if not ws_url:
        raise DiscoveryError(f"No webSocketDebuggerUrl advertised by Chrome at {host}:{port}")
    return str(ws_url)
