from __future__ import annotations


class ProxyCheckError(Exception):
    """Base exception type for library consumers."""


class ConfigurationError(ProxyCheckError):
    pass


class DiscoveryError(ProxyCheckError):
    pass


class ChromeUnreachableError(ProxyCheckError):
    pass
