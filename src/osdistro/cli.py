"""Command-line interface for osdistro."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass

from osdistro import __version__, config
from osdistro.report import print_json, print_sources, print_summary
from osdistro.resolver import LinuxDistribution


@dataclass
class ParsedArgs:
    """Parsed command-line arguments."""

    as_json: bool
    show_sources: bool
    best: bool
    tui: bool
    os_release_file: str
    distro_release_file: str
    include_lsb: bool
    include_uname: bool
    debug: bool


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the osdistro CLI."""
    parser = argparse.ArgumentParser(
        prog="osdistro",
        description="Show information about the OS distribution.",
    )
    parser.add_argument("--json", "-j", dest="as_json", action="store_true",
                        help="Output in machine readable format")
    parser.add_argument("--sources", action="store_true",
                        help="Show the raw attributes of every data source")
    parser.add_argument("--best", action="store_true",
                        help="Use the most precise version found in any source")
    parser.add_argument("--tui", action="store_true",
                        help="Browse the information in an interactive viewer")

    # Data source selection
    parser.add_argument("--os-release-file", metavar="PATH", default="",
                        help="Read this os-release file instead of the default")
    parser.add_argument("--distro-release-file", metavar="PATH", default="",
                        help="Read this distro release file instead of searching for one")
    parser.add_argument("--no-lsb", dest="include_lsb", action="store_false",
                        help="Do not run lsb_release")
    parser.add_argument("--no-uname", dest="include_uname", action="store_false",
                        help="Do not run uname")

    parser.add_argument("--debug", action="store_true", help="Log data source loading to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv: list[str] | None = None) -> ParsedArgs:
    """Parse command line arguments.

    Args:
        argv: Arguments without the program name; defaults to sys.argv[1:]

    Returns:
        ParsedArgs with output mode and data source options.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # An explicit path that does not exist is a typo, not an absent source
    for flag, path in (
        ("--os-release-file", args.os_release_file),
        ("--distro-release-file", args.distro_release_file),
    ):
        if path and not os.path.isfile(path):
            parser.error(f"{flag}: no such file: {path}")

    return ParsedArgs(
        as_json=args.as_json,
        show_sources=args.sources,
        best=args.best,
        tui=args.tui,
        os_release_file=args.os_release_file,
        distro_release_file=args.distro_release_file,
        include_lsb=args.include_lsb,
        include_uname=args.include_uname,
        debug=args.debug,
    )


def build_distribution(args: ParsedArgs) -> LinuxDistribution:
    """Create the resolver described by the parsed arguments."""
    return LinuxDistribution(
        include_lsb=args.include_lsb,
        os_release_file=args.os_release_file,
        distro_release_file=args.distro_release_file,
        include_uname=args.include_uname,
    )


def run_tui(distribution: LinuxDistribution, best: bool = False) -> None:
    """Launch the interactive viewer, logging to the XDG state directory."""
    from osdistro.app import DistroInfoApp

    logging.basicConfig(
        filename=str(config.get_log_path()),
        level=logging.DEBUG,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    DistroInfoApp(distribution, best=best).run()


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    if args.debug and not args.tui:
        logging.basicConfig(
            stream=sys.stderr,
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    distribution = build_distribution(args)

    if args.tui:
        run_tui(distribution, best=args.best)
    elif args.as_json:
        print_json(distribution, show_sources=args.show_sources, best=args.best)
    elif args.show_sources:
        print_sources(distribution)
    else:
        print_summary(distribution, best=args.best)


if __name__ == "__main__":
    main()
