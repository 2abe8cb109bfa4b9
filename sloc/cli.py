"""CLI entrypoint for the sloc command."""

from __future__ import annotations

import argparse
import codecs
import sys
from pathlib import Path

from .config import CONFIG_FILENAME, SORT_KEYS, ConfigError, load_config
from .logging import configure_logging, get_logger
from .reporter import TableReporter, sort_records
from .runner import SlocRunner

_SORT_HELP = (
    "f=filename, t=language type, c=comments, d=doc comments, "
    "b=blank lines, s=code lines, a=all lines"
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sloc",
        description="Count blank, code, comment and documentation lines in C/C++ sources.",
    )
    parser.add_argument(
        "paths",
        nargs="+",
        metavar="PATH",
        help="Source files or directories to count.",
    )
    parser.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        default=None,
        help="Look for source files in subdirectories as well.",
    )
    sort_group = parser.add_mutually_exclusive_group()
    sort_group.add_argument(
        "-s",
        dest="sort_asc",
        choices=SORT_KEYS,
        metavar="KEY",
        help=f"Sort the table in ascending order by KEY ({_SORT_HELP}).",
    )
    sort_group.add_argument(
        "-S",
        dest="sort_desc",
        choices=SORT_KEYS,
        metavar="KEY",
        help="Sort the table in descending order by KEY.",
    )
    parser.add_argument(
        "--no-totals",
        action="store_true",
        help="Do not print the SUM row.",
    )
    parser.add_argument(
        "--config",
        default=".",
        help=f"Path to {CONFIG_FILENAME} or the directory holding it (defaults to current directory).",
    )
    parser.add_argument(
        "--encoding",
        default=None,
        help="Text encoding used to read sources (defaults to utf-8).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write debug logs to this file.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting.",
    )
    verbosity.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only report errors.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for sloc."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, quiet=args.quiet, log_file=args.log_file)
    logger = get_logger("cli")

    if args.encoding is not None:
        try:
            codecs.lookup(args.encoding)
        except LookupError:
            parser.error(f"unknown encoding: {args.encoding}")

    try:
        config = load_config(Path(args.config))
    except ConfigError as exc:
        parser.exit(1, f"sloc: {exc}\n")

    runner = SlocRunner(config)
    report = runner.run(args.paths, recursive=args.recursive, encoding=args.encoding)
    if not report.records:
        if report.failures:
            parser.exit(
                1,
                f"sloc: none of the {len(report.failures)} C/C++ source file(s) found could be read.\n",
            )
        parser.exit(1, "sloc: no C/C++ source files were found.\n")

    if args.sort_asc is not None:
        records = sort_records(report.records, args.sort_asc)
    elif args.sort_desc is not None:
        records = sort_records(report.records, args.sort_desc, descending=True)
    else:
        records = sort_records(
            report.records, config.sort.key, descending=config.sort.descending
        )

    show_totals = config.show_totals and not args.no_totals
    sys.stdout.write(TableReporter(show_totals=show_totals).render(records))

    if report.failures:
        logger.warning("%d file(s) could not be read", len(report.failures))


if __name__ == "__main__":
    main(sys.argv[1:])
