# src/xai_kit/demos/__init__.py

"""Runnable demonstrations of the developer assistant.

Run with ``python -m xai_kit.demos.<name>``:

- ``practical``: every assistant task on a sample function
- ``improve_project``: analyze a source file and write improved output files
- ``tutorial``: step-by-step walkthrough on a small calculator
"""

import argparse
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import TypeVar

from xai_kit.api import ClientConfig, XAIClient, XAIError
from xai_kit.assistant import DEFAULT_MODEL
from xai_kit.observability import LoggingMetricsHook, NoOpMetricsHook

logger = logging.getLogger(__name__)

T = TypeVar("T")

SEPARATOR = "=" * 50


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_parser(description: str) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description=description)
    ap.add_argument("--api-key", help="defaults to $XAI_API_KEY")
    ap.add_argument("--base-url", help="defaults to $XAI_BASE_URL or the hosted API")
    ap.add_argument("--timeout", type=float, help="request timeout in seconds")
    ap.add_argument("--model", default=DEFAULT_MODEL)
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def parse_args(
    ap: argparse.ArgumentParser, argv: Sequence[str] | None
) -> argparse.Namespace:
    args = ap.parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)
    return args


def client_from_args(args: argparse.Namespace) -> XAIClient:
    """Build a client from CLI flags, falling back to the environment."""
    config = ClientConfig.from_env(
        api_key=args.api_key,
        base_url=args.base_url,
        timeout=args.timeout,
    )
    metrics_hook = LoggingMetricsHook() if args.verbose else NoOpMetricsHook()
    return XAIClient(config=config, metrics_hook=metrics_hook)


async def run_step(title: str, step: Callable[[], Awaitable[T]]) -> T | None:
    """Run one demo step; log a client failure and carry on with ``None``."""
    print(f"\n=== {title} ===")
    try:
        return await step()
    except XAIError as exc:
        logger.error("%s failed (%s): %s", title, exc.kind.value, exc)
        return None


__all__ = [
    "SEPARATOR",
    "build_parser",
    "client_from_args",
    "configure_logging",
    "parse_args",
    "run_step",
]
