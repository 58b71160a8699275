"""
Journey Suite CLI Entry Point

Runs the critical user journeys against a deployed site.

Usage:
    python -m ui_journeys.main --base-url https://guidelines.example.org
    python -m ui_journeys.main TC-01 TC-04 --viewport mobile --headed
    python -m ui_journeys.main --list
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional

from dotenv import load_dotenv

from ui_journeys.browser import Viewport
from ui_journeys.config import SuiteConfig, configure_logging
from ui_journeys.journeys import all_journeys, select_journeys, with_viewport
from ui_journeys.reporting import ConsoleReporter, JsonLinesReporter
from ui_journeys.runner import ScenarioRunner
from ui_journeys.tui import get_console

load_dotenv()


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Run end-to-end user journeys against the guidelines site",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m ui_journeys.main --base-url https://guidelines.example.org
    python -m ui_journeys.main TC-04 --viewport 375x667
    python -m ui_journeys.main --tag favourites --concurrency 2
        """,
    )

    parser.add_argument(
        "journeys",
        nargs="*",
        help="Journey ids to run (default: all)",
    )

    parser.add_argument(
        "--list",
        action="store_true",
        help="List available journeys and exit",
    )

    parser.add_argument(
        "--tag", "-t",
        action="append",
        default=[],
        help="Only run journeys with this tag (repeatable)",
    )

    parser.add_argument(
        "--base-url", "-u",
        type=str,
        default=None,
        help="Site under test (default: BASE_URL env var)",
    )

    headless = parser.add_mutually_exclusive_group()
    headless.add_argument(
        "--headless",
        dest="headless",
        action="store_true",
        default=None,
        help="Run the browser headless",
    )
    headless.add_argument(
        "--headed",
        dest="headless",
        action="store_false",
        help="Show the browser window",
    )

    parser.add_argument(
        "--viewport",
        type=Viewport.parse,
        default=None,
        help="Starting viewport: mobile, desktop or WIDTHxHEIGHT",
    )

    parser.add_argument(
        "--concurrency", "-c",
        type=int,
        default=1,
        help="Number of journeys run in parallel (default: 1)",
    )

    parser.add_argument(
        "--json-report",
        type=str,
        default=None,
        help="Write one JSON line per journey to this file",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Debug logging with timestamps",
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> SuiteConfig:
    config = SuiteConfig.from_env()
    if args.base_url:
        config.browser.base_url = args.base_url
    if args.headless is not None:
        config.browser.headless = args.headless
    return config


def list_journeys() -> None:
    console = get_console()
    for journey in all_journeys().values():
        tags = ", ".join(journey.tags)
        console.print(f"[label]{journey.name:<7}[/] {journey.description} [dim]({tags})[/]")


async def run(args: argparse.Namespace) -> int:
    """
    Run the selected journeys.

    Returns:
        Process exit code (0 when every journey passed)
    """
    config = build_config(args)
    if not config.browser.base_url:
        get_console().print("[fail]No site to test: pass --base-url or set BASE_URL[/]")
        return 2

    try:
        scenarios = select_journeys(args.journeys, args.tag)
    except KeyError as e:
        get_console().print(f"[fail]{e.args[0]}[/]")
        return 2
    if args.viewport is not None:
        scenarios = with_viewport(scenarios, args.viewport)

    console_reporter = ConsoleReporter()
    sinks = [console_reporter]
    if args.json_report:
        sinks.append(JsonLinesReporter(args.json_report))

    runner = ScenarioRunner(config, sinks=sinks)
    status = f"Running {len(scenarios)} journey(s) against {config.browser.base_url}"
    with console_reporter.console.status(status):
        results = await runner.run_all(scenarios, concurrency=args.concurrency)
    console_reporter.print_summary()

    return 0 if all(r.passed for r in results) else 1


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point."""
    args = parse_args(argv)
    configure_logging(
        level=logging.DEBUG if args.verbose else None,
        verbose=args.verbose,
    )

    if args.list:
        list_journeys()
        return

    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
