"""
sheetbook — CLI entry point.

Usage:
    sheetbook to-json <file.xlsx> [--output <file.json>] [--version N]
    sheetbook to-xlsx <file.json> [--output <file.xlsx>] [--version N]

``to-json`` reads an Excel workbook, splits every sheet into table and list
blocks, and writes the document as JSON.  ``to-xlsx`` does the reverse.

``--version`` selects the wire shape of list items: below 6 items are
``[key, value]`` pairs, otherwise (or when omitted) ``{key: value}`` objects.
The default comes from ``SHEETBOOK_ITEMS_VERSION``.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from config import get_items_version, get_log_level
from dto.workbook import Workbook
from errors import ConversionError
from extractors.workbook import read_workbook
from writers.workbook import save_workbook

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Commands
# -------------------------------------------------------------------


def xlsx_to_json(excel_path: str, output_path: str, version: Optional[int]) -> None:
    with open(excel_path, "rb") as f:
        workbook = read_workbook(f)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(workbook.to_json_string(version=version))

    logger.info("Output written to %s", output_path)


def json_to_xlsx(json_path: str, output_path: str, version: Optional[int]) -> None:
    with open(json_path, "r", encoding="utf-8") as f:
        workbook = Workbook.from_json_string(f.read(), version=version)

    save_workbook(workbook, output_path)
    logger.info("Output written to %s", output_path)


# -------------------------------------------------------------------
# CLI
# -------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sheetbook",
        description="Convert between Excel workbooks and structured JSON documents.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    to_json = sub.add_parser("to-json", help="Convert an .xlsx file to JSON")
    to_json.add_argument("input", help="Path to the .xlsx file to read")

    to_xlsx = sub.add_parser("to-xlsx", help="Convert a JSON document to .xlsx")
    to_xlsx.add_argument("input", help="Path to the .json file to read")

    for command in (to_json, to_xlsx):
        command.add_argument(
            "-o",
            "--output",
            default=None,
            help="Output file path (default: <input_name>.json / <input_name>.xlsx)",
        )
        command.add_argument(
            "--version",
            type=int,
            default=None,
            help="List-items wire version; below 6 writes/reads [key, value] pairs "
            "(default: SHEETBOOK_ITEMS_VERSION)",
        )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )
    args = _build_parser().parse_args(argv)

    input_path = args.input
    if not os.path.isfile(input_path):
        logger.error("File not found: %s", input_path)
        return 1

    suffix = ".json" if args.command == "to-json" else ".xlsx"
    output_path = args.output or f"{Path(input_path).stem}{suffix}"

    try:
        version = args.version if args.version is not None else get_items_version()
        if args.command == "to-json":
            xlsx_to_json(input_path, output_path, version)
        else:
            json_to_xlsx(input_path, output_path, version)
    except (ConversionError, ValueError) as exc:
        logger.error("%s", exc)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
