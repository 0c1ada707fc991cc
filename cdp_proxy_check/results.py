from __future__ import annotations

from dataclasses import dataclass, field

from .models import TargetDescriptor


@dataclass(frozen=True)
class ProbeResult:
    name: str
    ok: bool
    detail: str = ""
    status_code: int | None = None


@dataclass
class VerificationResult:
    proxy: ProbeResult
    direct: ProbeResult
    targets: list[TargetDescriptor] = field(default_factory=list)
    exit_code: int = 0

    @property
    def proxy_healthy(self) -> bool:
        return self.proxy.ok

    @property
    def chrome_reachable(self) -> bool:
        return self.direct.ok

    @property
    def count(self) -> int:
        return len(self.targets)
