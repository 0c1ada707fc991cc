from cdp_proxy_check.models import TargetDescriptor


def test_from_dict_maps_devtools_record():
    target = TargetDescriptor.from_dict(
        {
            "id": "AAA",
            "type": "page",
            "url": "https://example.com",
            "title": "Example",
            "webSocketDebuggerUrl": "ws://localhost:9223/devtools/page/AAA",
        }
    )
    assert target.id == "AAA"
    assert target.title == "Example"
    assert target.websocket_debugger_url == "ws://localhost:9223/devtools/page/AAA"
    assert target.to_dict()["webSocketDebuggerUrl"] == "ws://localhost:9223/devtools/page/AAA"


def test_missing_optional_fields_render_fallback():
    target = TargetDescriptor.from_dict({"id": "W1", "type": "service_worker", "url": "https://sw"})
    lines = target.render_lines(1)
    assert "    Title: N/A" in lines
    assert "    WebSocket: N/A" in lines


def test_empty_title_renders_fallback():
    target = TargetDescriptor.from_dict({"id": "P1", "type": "page", "url": "about:blank", "title": ""})
    assert target.display_title == "N/A"


def test_render_lines_block():
    target = TargetDescriptor(id="B", type="page", url="https://b", title="Bee", websocket_debugger_url="ws://b")
    assert target.render_lines(2) == [
        "  Target 2:",
        "    ID: B",
        "    Type: page",
        "    URL: https://b",
        "    Title: Bee",
        "    WebSocket: ws://b",
    ]
