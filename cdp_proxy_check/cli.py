from __future__ import annotations

import argparse
import asyncio
import logging
import signal
import sys
from importlib.metadata import PackageNotFoundError, version

from .config import ENVIRONMENT_VARIABLES, VerifierConfig
from .verifier import TITLE, verify_connectivity

logger = logging.getLogger("cdp_proxy_check")

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def _tool_version() -> str:
    try:
        return version("cdp-proxy-check")
    except PackageNotFoundError:
        return "0.0.0"


def _epilog() -> str:
    lines = ["environment variables:"]
    for name, default, description in ENVIRONMENT_VARIABLES:
        lines.append(f"  {name:<14} {description} (default: {default})")
    lines.extend(
        [
            "",
            "examples:",
            "  cdp-proxy-check",
            "  PROXY_PORT=8080 cdp-proxy-check",
            "  USE_DIRECT=true cdp-proxy-check",
            "  cdp-proxy-check --direct",
        ]
    )
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cdp-proxy-check",
        description=f"{TITLE}: check the nginx proxy and list Chrome DevTools targets.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_epilog(),
        allow_abbrev=False,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_tool_version()}")
    parser.add_argument(
        "--direct",
        action="store_true",
        help="List targets over the direct Chrome connection (bypass proxy)",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _cancel_on_signal(sig: signal.Signals, task: asyncio.Task) -> None:
    logger.info("Received %s, shutting down gracefully...", sig.name)
    task.cancel()


def _exit_on_signal(signum: int, frame: object) -> None:
    logger.info("Received %s, shutting down gracefully...", signal.Signals(signum).name)
    sys.exit(0)


def install_signal_handlers(loop: asyncio.AbstractEventLoop, task: asyncio.Task) -> None:
    for sig in SHUTDOWN_SIGNALS:
        try:
            loop.add_signal_handler(sig, _cancel_on_signal, sig, task)
        except NotImplementedError:
            # Event loops on Windows have no signal support.
            signal.signal(sig, _exit_on_signal)


async def _run(config: VerifierConfig) -> int:
    task = asyncio.create_task(verify_connectivity(config))
    install_signal_handlers(asyncio.get_running_loop(), task)
    try:
        result = await task
    except asyncio.CancelledError:
        # A probe already handed to a worker thread keeps running until its own
        # timeout; asyncio.run joins that thread before the process exits.
        return 0
    return result.exit_code


def split_known_args(parser: argparse.ArgumentParser, argv: list[str]) -> tuple[list[str], list[str]]:
    """Separate the exact option strings *parser* knows from everything else."""
    known_flags = {flag for action in parser._actions for flag in action.option_strings}
    known = [arg for arg in argv if arg in known_flags]
    ignored = [arg for arg in argv if arg not in known_flags]
    return known, ignored


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    known, unknown = split_known_args(parser, sys.argv[1:] if argv is None else argv)
    args = parser.parse_args(known)
    _configure_logging(args.verbose)
    if unknown:
        logger.debug("Ignoring unrecognized arguments: %s", " ".join(unknown))

    try:
        config = VerifierConfig.from_env()
        if args.direct:
            config = config.with_direct()
            logger.info("Direct mode enabled - bypassing proxy")
        return asyncio.run(_run(config))
    except Exception:  # noqa: BLE001
        logger.exception("Unexpected error")
        return 1


if __name__ == "__main__":
    sys.exit(main())
