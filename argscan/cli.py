"""Command-line interface for scanning argument vectors against an option spec."""

from __future__ import annotations

import argparse
import json
import logging
import pathlib
import sys
from typing import List, Sequence, Tuple

from argscan.core import config, reporter
from argscan.core.scanner import ArgumentScanner, ScannerConfig
from argscan.core.sources import UnreadableArgumentFile

ARGUMENT_SEPARATOR = "--"
REPORT_FORMATS = ["json", "md", "html"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="argscan",
        description="Scan arguments given after '--' against a getopt-style option spec",
    )
    parser.add_argument("-o", "--options", help="Option spec such as 'a:hx' (overrides the config file)")
    parser.add_argument("--config", type=pathlib.Path, default=config.DEFAULT_CONFIG_PATH, help="YAML configuration file")
    parser.add_argument("--args-file", type=pathlib.Path, help="Read the arguments to scan from this file, one per line")
    parser.add_argument("--quiet", action="store_true", help="Do not print diagnostics for illegal options")
    parser.add_argument("--format", action="append", choices=REPORT_FORMATS, help="Report formats to emit (defaults to json)")
    parser.add_argument("--out", type=pathlib.Path, help="Write reports next to this JSON path instead of printing")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: List[str] | None = None) -> int:
    raw = list(sys.argv[1:] if argv is None else argv)
    own, scanned = _split_argv(raw)
    args = build_parser().parse_args(own)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        settings = config.load_config(args.config)
    except config.ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    spec = args.options if args.options is not None else settings.options
    scanner_config = ScannerConfig(
        source=args.args_file if args.args_file else scanned,
        spec=spec,
        diagnostics=settings.diagnostics and not args.quiet,
        messages=settings.bundle(),
    )
    try:
        scanner = ArgumentScanner(scanner_config)
    except UnreadableArgumentFile as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    outcomes = scanner.scan()
    summary = reporter.build_summary(outcomes, scanner.remaining_arguments(), spec)
    formats = args.format or ["json"]

    if args.out:
        report_paths = reporter.write_reports(summary, args.out.parent, json_path=args.out, formats=formats)
        print(
            "Generated scan report at "
            f"JSON={report_paths.json_path or 'skipped'} "
            f"MD={report_paths.markdown_path or 'skipped'} "
            f"HTML={report_paths.html_path or 'skipped'}"
        )
    else:
        print(_render(summary, formats[0]))

    return 1 if summary["illegal"] else 0


def _split_argv(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Split the command line at the first '--' into our flags and the scanned arguments."""

    if ARGUMENT_SEPARATOR not in argv:
        return list(argv), []
    index = list(argv).index(ARGUMENT_SEPARATOR)
    return list(argv[:index]), list(argv[index + 1 :])


def _render(summary: dict, fmt: str) -> str:
    if fmt == "md":
        return reporter.render_markdown(summary)
    if fmt == "html":
        return reporter.render_html(summary)
    return json.dumps(summary, indent=2, sort_keys=True)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
