from __future__ import annotations

import requests

from .results import ProbeResult


def health_url(host: str, port: int) -> str:
    return f"http://{host}:{port}/health"


def probe_proxy_health(host: str, port: int, timeout_seconds: float = 5.0) -> ProbeResult:
    """GET the proxy's ``/health`` route once. Only a 200 counts as healthy; the body is ignored."""
    url = health_url(host, port)
    try:
        response = requests.get(url, timeout=timeout_seconds, allow_redirects=False)
    except requests.Timeout:
        return ProbeResult(name="proxy", ok=False, detail="Proxy connection timeout")
    except requests.RequestException as exc:
        return ProbeResult(name="proxy", ok=False, detail=f"Proxy connection failed: {exc}")

    if response.status_code == 200:
        return ProbeResult(name="proxy", ok=True, detail="Proxy health check successful", status_code=200)
    return ProbeResult(
        name="proxy",
        ok=False,
        detail=f"Proxy health check failed with status: {response.status_code}",
        status_code=response.status_code,
    )
