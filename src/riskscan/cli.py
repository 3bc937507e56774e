"""Command-line entry point.

Usage:
    riskscan --dir ROOT --out report.json
    riskscan --out report.json --dir ROOT --nested --config risk.yaml

Exit codes: 0 success, 1 traversal/output failure, 2 configuration error.
"""

from __future__ import annotations

import argparse
import logging

from riskscan.aggregator import scan_tree
from riskscan.config import load_config
from riskscan.errors import ConfigError, OutputError, RootTraversalError
from riskscan.sink.json_file import JsonFileSink

logger = logging.getLogger(__name__)

MISSING_FLAGS_MESSAGE = "Both '--dir' and '--out' need to be set. Exiting."


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="riskscan",
        description="Score files under a directory and report the riskiest ones per directory.",
    )
    p.add_argument("--dir", help="Root directory to scan.")
    p.add_argument("--out", help="Path of the JSON report to write.")
    p.add_argument("--config", help="Optional YAML config with scoring thresholds.")
    p.add_argument(
        "--nested",
        action="store_true",
        help="Group results by directory instead of emitting one flat list.",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING).",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    args, unknown = build_parser().parse_known_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if unknown:
        logger.debug("Ignoring unrecognized arguments: %s", unknown)

    if not args.dir or not args.out:
        logger.error(MISSING_FLAGS_MESSAGE)
        return 2

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        logger.error("%s", exc)
        return 2

    try:
        report = scan_tree(args.dir, config)
    except RootTraversalError as exc:
        logger.error("%s", exc)
        return 1

    sink = JsonFileSink(
        args.out,
        nested=args.nested or config.output.nested,
        indent=config.output.indent,
    )
    try:
        sink.write(report)
    except OutputError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
