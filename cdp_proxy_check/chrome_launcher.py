"""Canonical headless Chrome command line.

The verifier never starts Chrome itself; the command is only shown to the
operator when the direct probe fails.
"""

from __future__ import annotations

import shlex
import shutil

START_SCRIPT = "./start-chrome.sh"

LINUX_BINARIES = [
    "google-chrome",
    "google-chrome-stable",
    "chromium",
    "chromium-browser",
]

HEADLESS_FLAGS = [
    "--headless=new",
    "--no-sandbox",
    "--disable-gpu",
    "--disable-dev-shm-usage",
    "--no-first-run",
    "--no-default-browser-check",
    "--disable-background-networking",
    "--disable-breakpad",
    "--metrics-recording-only",
    "--remote-allow-origins=*",
]


def detect_browser_path() -> str | None:
    for name in LINUX_BINARIES:
        path = shutil.which(name)
        if path:
            return path
    return None


def chrome_command(port: int, browser_path: str | None = None) -> list[str]:
    resolved = browser_path or detect_browser_path() or LINUX_BINARIES[0]
    return [
        resolved,
        *HEADLESS_FLAGS,
        "--remote-debugging-address=0.0.0.0",
        f"--remote-debugging-port={port}",
    ]


def remediation_hint(port: int, browser_path: str | None = None) -> list[str]:
    return [
        "Chrome is not reachable. Please ensure Chrome is running with remote debugging enabled.",
        f"Start Chrome with: {START_SCRIPT}",
        f"  or: {shlex.join(chrome_command(port, browser_path))}",
    ]
