"""
Command-line entry point for table-compare.

Usage:
    table-compare TABLE1 TABLE2                 # summary to stdout
    table-compare TABLE1 TABLE2 -o report.txt   # summary to a file
    table-compare --config tablecompare.yaml    # paths from a YAML config
    table-compare a.csv b.txt --header          # force header on both tables

Each table is detected and parsed independently. The summary lists the
detected dialect, shape and header of each table. Comparing the two
tables is not implemented yet.

Exit codes: 0 on success, 1 when a table cannot be read or parsed,
2 on invalid arguments.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from table_compare._pipeline import ParsedTable, TablePair, run_parse_pair
from table_compare.config import (
    CompareConfig,
    OutputConfig,
    TableSource,
    describe_config,
    load_config,
)
from table_compare.exceptions import ConfigValidationError, TableCompareError

log = logging.getLogger("table_compare")

_LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="table-compare",
        description="Read two ASCII or CSV tables for comparison.",
    )
    parser.add_argument("table1", nargs="?", help="Path to the first table file")
    parser.add_argument("table2", nargs="?", help="Path to the second table file")
    parser.add_argument(
        "-o", "--output", help="Write output to file instead of stdout"
    )
    parser.add_argument("-c", "--config", help="YAML config naming both tables")
    header = parser.add_mutually_exclusive_group()
    header.add_argument(
        "--header",
        dest="header",
        action="store_const",
        const=True,
        help="Treat the first row of both tables as a header",
    )
    header.add_argument(
        "--no-header",
        dest="header",
        action="store_const",
        const=False,
        help="Treat every row as data",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def build_config(args: argparse.Namespace) -> CompareConfig:
    """Merge the YAML config (if any) with command-line arguments.

    Command-line values override the config file.

    Raises:
        ConfigValidationError: If either table path is missing.
    """
    if args.config:
        config = load_config(args.config)
    else:
        if not (args.table1 and args.table2):
            raise ConfigValidationError(
                "Two table paths are required (positional or via --config)"
            )
        config = CompareConfig(
            table1=TableSource(path=args.table1),
            table2=TableSource(path=args.table2),
        )

    updates: dict[str, object] = {}
    if args.table1:
        updates["table1"] = config.table1.model_copy(update={"path": args.table1})
    if args.table2:
        updates["table2"] = config.table2.model_copy(update={"path": args.table2})
    if args.output:
        updates["output"] = OutputConfig(path=args.output)
    config = config.model_copy(update=updates)

    if args.header is not None:
        config = config.model_copy(update={
            "table1": config.table1.model_copy(update={"header": args.header}),
            "table2": config.table2.model_copy(update={"header": args.header}),
        })
    return config


def _summarize_table(label: str, parsed: ParsedTable) -> list[str]:
    rows, cols = parsed.table.shape
    lines = [
        f"{label}: {parsed.source}",
        f"  type: {parsed.table_type.value}",
        f"  rows: {rows}",
        f"  columns: {cols}",
    ]
    if parsed.has_header:
        lines.append(f"  header: {', '.join(parsed.table.header)}")
    return lines


def format_summary(pair: TablePair) -> str:
    """Render the per-table summary written by the CLI."""
    lines = _summarize_table("Table 1", pair.first) + _summarize_table("Table 2", pair.second)
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    arg_parser = _build_arg_parser()
    args = arg_parser.parse_args(argv)
    if not args.config and not (args.table1 and args.table2):
        arg_parser.error("two table paths are required (positional or via --config)")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=_LOG_FORMAT,
        datefmt="%H:%M:%S",
    )

    try:
        config = build_config(args)
        log.debug("%s", describe_config(config))
        pair = run_parse_pair(config)
        summary = format_summary(pair)
        if config.output.path:
            out = Path(config.output.path)
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_text(summary, encoding="utf-8")
            log.info("Wrote summary to %s", out)
        else:
            sys.stdout.write(summary)
    except (
        TableCompareError,
        ValidationError,
        yaml.YAMLError,
        UnicodeDecodeError,
        OSError,
    ) as e:
        log.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
