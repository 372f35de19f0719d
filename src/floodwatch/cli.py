"""
Fetch the dashboard once and print it.

Usage:
    floodwatch-snapshot [--preset full|basic] [--url http://host:5000] [--chart-json]
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

from .config import ClientConfig
from .presets import DashboardPresets
from .render import render_dashboard
from .session import DashboardSession


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="floodwatch-snapshot",
        description="Fetch the flood-monitoring dashboard once and print it.",
    )
    parser.add_argument("--preset", default="full", help="full or basic")
    parser.add_argument("--url", default=None, help="backend base URL")
    parser.add_argument("--timeout", type=float, default=None, help="seconds")
    parser.add_argument(
        "--chart-json",
        action="store_true",
        help="print the chart payload as JSON instead of the text dashboard",
    )
    return parser.parse_args(argv)


async def _snapshot(args: argparse.Namespace) -> int:
    overrides = {}
    if args.url:
        overrides["base_url"] = args.url
    if args.timeout is not None:
        overrides["timeout"] = args.timeout
    config = ClientConfig(**overrides)

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    preset = DashboardPresets.get(args.preset)

    async with DashboardSession(preset, config=config) as session:
        state = await session.wait()

    if args.chart_json and state.model is not None:
        print(json.dumps(state.model.discharge.to_chart_data(), ensure_ascii=False))
    else:
        print(render_dashboard(state))

    return 0 if state.model is not None else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Console entry point."""
    args = _parse_args(argv)
    try:
        return asyncio.run(_snapshot(args))
    except KeyboardInterrupt:
        print("\n  Snapshot interrupted by user")
        return 130
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
