"""Check the nginx proxy and the Chrome DevTools endpoint behind it.

The three steps run strictly one after another:

1. proxy health probe (advisory only),
2. direct CDP probe (gates everything after it),
3. target enumeration through the proxy or directly.

Each blocking network call is handed to a worker thread with
:func:`asyncio.to_thread` and awaited before the next one starts.
"""

from __future__ import annotations

import asyncio
import logging

from .cdp import probe_direct_connection
from .chrome_discovery import list_targets
from .chrome_launcher import remediation_hint
from .config import VerifierConfig
from .exceptions import ChromeUnreachableError, DiscoveryError
from .health import probe_proxy_health
from .models import TargetDescriptor
from .results import ProbeResult, VerificationResult

logger = logging.getLogger(__name__)

TITLE = "Chrome Remote Interface Connection Test"


class ConnectivityVerifier:
    def __init__(self, config: VerifierConfig) -> None:
        self.config = config

    async def check_proxy(self) -> ProbeResult:
        cfg = self.config
        logger.info("Testing proxy connection via %s:%s...", cfg.proxy_host, cfg.proxy_port)
        result = await asyncio.to_thread(
            probe_proxy_health, cfg.proxy_host, cfg.proxy_port, cfg.timeout_seconds
        )
        if result.ok:
            logger.info("%s", result.detail)
        else:
            logger.error("%s", result.detail)
        return result

    async def check_direct(self) -> ProbeResult:
        cfg = self.config
        logger.info("Testing direct connection to Chrome on %s:%s...", cfg.chrome_host, cfg.chrome_port)
        try:
            ws_url = await asyncio.to_thread(
                probe_direct_connection, cfg.chrome_host, cfg.chrome_port, cfg.timeout_seconds
            )
        except ChromeUnreachableError as exc:
            logger.error("Direct Chrome connection failed: %s", exc)
            return ProbeResult(name="direct", ok=False, detail=str(exc))
        logger.info("Direct Chrome connection successful")
        return ProbeResult(name="direct", ok=True, detail=ws_url)

    async def fetch_targets(self) -> list[TargetDescriptor]:
        host, port = self.config.listing_endpoint
        logger.info("Fetching Chrome targets information from %s:%s...", host, port)
        try:
            raw = await asyncio.to_thread(list_targets, host, port, self.config.timeout_seconds)
        except DiscoveryError as exc:
            logger.error("Failed to fetch targets: %s", exc)
            return []

        targets = [TargetDescriptor.from_dict(item) for item in raw if isinstance(item, dict)]
        logger.info("Found %d Chrome target(s):", len(targets))
        for index, target in enumerate(targets, start=1):
            for line in target.render_lines(index):
                logger.info("%s", line)
        return targets

    async def run(self) -> VerificationResult:
        logger.info(TITLE)
        logger.info("=" * len(TITLE))
        for line in self.config.summary_lines():
            logger.info("%s", line)

        proxy = await self.check_proxy()
        direct = await self.check_direct()

        if not direct.ok:
            for line in remediation_hint(self.config.chrome_port):
                logger.error("%s", line)
            return VerificationResult(proxy=proxy, direct=direct, exit_code=1)

        if not proxy.ok:
            logger.warning("Proxy is unhealthy; continuing since the health check is advisory")

        targets = await self.fetch_targets()
        return VerificationResult(proxy=proxy, direct=direct, targets=targets, exit_code=0)


async def verify_connectivity(config: VerifierConfig) -> VerificationResult:
    return await ConnectivityVerifier(config).run()
