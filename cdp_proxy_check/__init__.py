"""cdp-proxy-check package."""

from .config import VerifierConfig
from .health import probe_proxy_health
from .models import TargetDescriptor
from .results import ProbeResult, VerificationResult
from .verifier import ConnectivityVerifier, verify_connectivity

__all__ = [
    "ConnectivityVerifier",
    "ProbeResult",
    "TargetDescriptor",
    "VerificationResult",
    "VerifierConfig",
    "probe_proxy_health",
    "verify_connectivity",
]
