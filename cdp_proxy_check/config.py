from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

from .exceptions import ConfigurationError

DEFAULT_PROXY_HOST = "localhost"
DEFAULT_PROXY_PORT = 80
DEFAULT_TARGET_URL = "https://www.example.com"
DEFAULT_OUTPUT_FILE = "screenshot.png"
DEFAULT_CHROME_HOST = "localhost"
DEFAULT_CHROME_PORT = 9223
DEFAULT_TIMEOUT_SECONDS = 5.0

# (name, default, description) used by the --help epilog.
ENVIRONMENT_VARIABLES = [
    ("PROXY_HOST", DEFAULT_PROXY_HOST, "nginx proxy host"),
    ("PROXY_PORT", str(DEFAULT_PROXY_PORT), "nginx proxy port"),
    ("TARGET_URL", DEFAULT_TARGET_URL, "URL to capture (reserved, unused)"),
    ("OUTPUT_FILE", DEFAULT_OUTPUT_FILE, "Screenshot filename (reserved, unused)"),
    ("CHROME_HOST", DEFAULT_CHROME_HOST, "Direct Chrome host"),
    ("CHROME_PORT", str(DEFAULT_CHROME_PORT), "Direct Chrome port"),
    ("USE_DIRECT", "unset", 'Set to "true" to bypass proxy'),
]


def _env_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = (environ.get(name) or "").strip()
    try:
        value = int(raw)
    except ValueError:
        return default
    if not 0 < value < 65536:
        return default
    return value


def _env_str(environ: Mapping[str, str], name: str, default: str) -> str:
    return environ.get(name) or default


@dataclass(frozen=True)
class VerifierConfig:
    proxy_host: str = DEFAULT_PROXY_HOST
    proxy_port: int = DEFAULT_PROXY_PORT
    target_url: str = DEFAULT_TARGET_URL
    output_file: str = DEFAULT_OUTPUT_FILE
    chrome_host: str = DEFAULT_CHROME_HOST
    chrome_port: int = DEFAULT_CHROME_PORT
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    use_proxy: bool = True

    def __post_init__(self) -> None:
        for name in ("proxy_port", "chrome_port"):
            port = getattr(self, name)
            if not 0 < port < 65536:
                raise ConfigurationError(f"{name} must be between 1 and 65535, got {port}")
        if self.timeout_seconds <= 0:
            raise ConfigurationError(f"timeout_seconds must be positive, got {self.timeout_seconds}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> VerifierConfig:
        env = os.environ if environ is None else environ
        return cls(
            proxy_host=_env_str(env, "PROXY_HOST", DEFAULT_PROXY_HOST),
            proxy_port=_env_int(env, "PROXY_PORT", DEFAULT_PROXY_PORT),
            target_url=_env_str(env, "TARGET_URL", DEFAULT_TARGET_URL),
            output_file=_env_str(env, "OUTPUT_FILE", DEFAULT_OUTPUT_FILE),
            chrome_host=_env_str(env, "CHROME_HOST", DEFAULT_CHROME_HOST),
            chrome_port=_env_int(env, "CHROME_PORT", DEFAULT_CHROME_PORT),
            use_proxy=env.get("USE_DIRECT") != "true",
        )

    def with_direct(self) -> VerifierConfig:
        return replace(self, use_proxy=False)

    @property
    def listing_endpoint(self) -> tuple[str, int]:
        """Host and port used for target enumeration."""
        if self.use_proxy:
            return self.proxy_host, self.proxy_port
        return self.chrome_host, self.chrome_port

    def summary_lines(self) -> list[str]:
        return [
            "Configuration:",
            f"  Proxy: {self.proxy_host}:{self.proxy_port}",
            f"  Target URL: {self.target_url}",
            f"  Output File: {self.output_file}",
            f"  Chrome: {self.chrome_host}:{self.chrome_port}",
            f"  Use Proxy: {str(self.use_proxy).lower()}",
        ]
