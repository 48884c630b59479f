"""CLI entry point for the WAN status report."""

from __future__ import annotations

import argparse
import sys

from loguru import logger

from wanstat.exceptions import WanStatError
from wanstat.formatters import format_json
from wanstat.report import WanStatusReport
from wanstat.transport import PASSWORD_ENV, WanStatusClient, get_password, load_document


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Build argparse parser for the WAN status report."""
    parser = argparse.ArgumentParser(
        description="Query a router's WAN status and report its devices and connectors.",
    )
    parser.add_argument(
        "router",
        nargs="?",
        help="Router host or IP address",
    )
    parser.add_argument(
        "-u",
        "--username",
        default="admin",
        help="Basic-auth user (default: admin)",
    )
    parser.add_argument(
        "-p",
        "--password",
        help=f"Basic-auth password (default: ${PASSWORD_ENV})",
    )
    parser.add_argument(
        "--scheme",
        choices=["http", "https"],
        default="http",
        help="URL scheme (default: http)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=10.0,
        help="HTTP timeout in seconds (default: 10)",
    )
    parser.add_argument(
        "-f",
        "--file",
        help="Render a saved status JSON document instead of querying the router",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Abort the report on the first connector parse error",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print parsed connectors per device as JSON",
    )
    parser.add_argument(
        "--no-sort",
        action="store_true",
        help="Keep device order as returned by the router",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose logging",
    )
    parsed = parser.parse_args(args)
    if not parsed.file and not parsed.router:
        parser.error("router is required unless --file is given")
    return parsed


def main(args: list[str] | None = None) -> None:
    """Main entry point for the WAN status CLI."""
    parsed = parse_args(args)

    logger.enable("wanstat")
    if not parsed.verbose:
        logger.remove()
        logger.add(sys.stderr, level="INFO")

    try:
        if parsed.file:
            document = load_document(parsed.file)
        else:
            password = parsed.password or get_password()
            if not password:
                logger.error(f"unable to find {PASSWORD_ENV} in environment")
                sys.exit(1)
            with WanStatusClient(
                parsed.router,
                password,
                username=parsed.username,
                scheme=parsed.scheme,
                timeout=parsed.timeout,
            ) as client:
                document = client.get_wan_status()

        report = WanStatusReport(document, strict=parsed.strict, sort_devices=not parsed.no_sort)
        if parsed.json and report.success:
            print(format_json(report.parsed_devices()))
        else:
            print(report.render())
    except WanStatError as e:
        logger.error(str(e))
        sys.exit(1)
