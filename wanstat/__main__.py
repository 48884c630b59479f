"""``python -m wanstat`` entry point."""

from __future__ import annotations

import argparse
import os
import sys

from tabulate import tabulate

from wanstat import __version__, configure_logging
from wanstat import glogger
from wanstat.cli import main as cli_main
from wanstat.cli import parse_args
from wanstat.transport import PASSWORD_ENV, WAN_STATUS_PATH


def _startup_rows(parsed: argparse.Namespace) -> list[list[str]]:
    """Banner rows describing what this run will query and how it reports."""
    rows = [["version", __version__]]

    if parsed.file:
        rows.append(["source", parsed.file])
    else:
        if parsed.password:
            password_from = "--password"
        elif os.environ.get(PASSWORD_ENV):
            password_from = f"${PASSWORD_ENV}"
        else:
            password_from = "missing"
        rows.append(["router", f"{parsed.scheme}://{parsed.router}/{WAN_STATUS_PATH}"])
        rows.append(["user", parsed.username])
        rows.append(["password", password_from])
        rows.append(["timeout", f"{parsed.timeout:g}s"])

    rows.append(["connector errors", "abort" if parsed.strict else "per device"])
    rows.append(["device order", "document" if parsed.no_sort else "sorted"])
    rows.append(["output", "json" if parsed.json else "text"])
    return rows


def _print_startup_banner(parsed: argparse.Namespace) -> None:
    table_str = tabulate(_startup_rows(parsed), tablefmt="mixed_grid")
    lines = table_str.split("\n")
    table_width = len(lines[0])
    title = "wanstat starting up"
    title_border = "┍" + "━" * (table_width - 2) + "┑"
    title_row = "│ " + title.center(table_width - 4) + " │"
    separator = lines[0].replace("┍", "┝").replace("┑", "┥").replace("┯", "┿")

    glogger.opt(raw=True).debug(
        "\n{}\n", title_border + "\n" + title_row + "\n" + separator + "\n" + "\n".join(lines[1:])
    )


def main() -> None:
    """Console-script entry point."""
    args = sys.argv[1:]
    configure_logging()
    _print_startup_banner(parse_args(args))
    cli_main(args)


if __name__ == "__main__":
    main()
