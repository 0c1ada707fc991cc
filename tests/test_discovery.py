import pytest

from cdp_proxy_check.chrome_discovery import get_websocket_debug_url, list_targets
from cdp_proxy_check.exceptions import DiscoveryError


def test_list_targets_uses_json_list_and_keeps_order(monkeypatch):
    called = {}

    def fake_read_json(url, timeout_seconds=5.0):
        called["url"] = url
        called["timeout"] = timeout_seconds
        return [{"id": "2"}, {"id": "1"}]

    monkeypatch.setattr("cdp_proxy_check.chrome_discovery._read_json", fake_read_json)
    targets = list_targets("proxy", 8080, timeout_seconds=3)

    assert called["url"] == "http://proxy:8080/json/list"
    assert called["timeout"] == 3
    assert [t["id"] for t in targets] == ["2", "1"]


def test_list_targets_wraps_connection_errors(monkeypatch):
    def fake_read_json(url, timeout_seconds=5.0):
        raise ConnectionRefusedError("refused")

    monkeypatch.setattr("cdp_proxy_check.chrome_discovery._read_json", fake_read_json)
    with pytest.raises(DiscoveryError, match="refused"):
        list_targets("localhost", 9223)


def test_list_targets_rejects_non_list(monkeypatch):
    monkeypatch.setattr(
        "cdp_proxy_check.chrome_discovery._read_json",
        lambda url, timeout_seconds=5.0: {"Browser": "Chrome"},
    )
    with pytest.raises(DiscoveryError):
        list_targets("localhost", 9223)


def test_get_websocket_debug_url_prefers_first_page(monkeypatch):
    monkeypatch.setattr(
        "cdp_proxy_check.chrome_discovery.list_targets",
        lambda host, port, timeout_seconds=5.0: [
            {"id": "w", "type": "service_worker", "webSocketDebuggerUrl": "ws://worker"},
            {"id": "a", "type": "page", "webSocketDebuggerUrl": "ws://one"},
            {"id": "b", "type": "page", "webSocketDebuggerUrl": "ws://two"},
        ],
    )
    assert get_websocket_debug_url("localhost", 9223) == "ws://one"


def test_get_websocket_debug_url_falls_back_to_browser(monkeypatch):
    monkeypatch.setattr(
        "cdp_proxy_check.chrome_discovery.list_targets",
        lambda host, port, timeout_seconds=5.0: [],
    )
    monkeypatch.setattr(
        "cdp_proxy_check.chrome_discovery.browser_version",
        lambda host, port, timeout_seconds=5.0: {"webSocketDebuggerUrl": "ws://browser"},
    )
    assert get_websocket_debug_url("localhost", 9223) == "ws://browser"


def test_get_websocket_debug_url_raises_without_any_url(monkeypatch):
    monkeypatch.setattr(
        "cdp_proxy_check.chrome_discovery.list_targets",
        lambda host, port, timeout_seconds=5.0: [],
    )
    monkeypatch.setattr(
        "cdp_proxy_check.chrome_discovery.browser_version",
        lambda host, port, timeout_seconds=5.0: {},
    )
    with pytest.raises(DiscoveryError):
        get_websocket_debug_url("localhost", 9223)


def test_get_websocket_debug_url_splits_deadline_between_calls(monkeypatch):
    clock = {"now": 50.0}
    timeouts = []

    def slow_list(host, port, timeout_seconds=5.0):
        timeouts.append(timeout_seconds)
        clock["now"] += 4.0
        return []

    def fake_version(host, port, timeout_seconds=5.0):
        timeouts.append(timeout_seconds)
        return {"webSocketDebuggerUrl": "ws://browser"}

    monkeypatch.setattr("cdp_proxy_check.chrome_discovery.time.monotonic", lambda: clock["now"])
    monkeypatch.setattr("cdp_proxy_check.chrome_discovery.list_targets", slow_list)
    monkeypatch.setattr("cdp_proxy_check.chrome_discovery.browser_version", fake_version)

    assert get_websocket_debug_url("localhost", 9223, deadline=55.0) == "ws://browser"
    assert timeouts == [5.0, 1.0]
