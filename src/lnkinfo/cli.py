"""CLI entry point: ``lnkinfo parse`` / ``lnkinfo target``."""

import argparse
import json
import logging
import sys
from dataclasses import asdict

from ._errors import LnkError
from ._types import Attribute
from .parser import ParsedLink, format_lnk, parse_lnk

EXIT_USAGE = 1
EXIT_BAD_FILE = 2


def _serialize_parsed_link(info: ParsedLink) -> dict:
    """Convert ParsedLink to a JSON-friendly dict."""
    d = asdict(info)
    # Enums are rendered by name; the raw value keeps bits with no name
    d["target_attributes"] = [a.name for a in Attribute if info.target_attributes & a]
    d["target_attributes_value"] = int(info.target_attributes)
    d["volume"]["type"] = info.volume_type.name
    d["has_custom_icon"] = info.has_custom_icon
    return d


def _cmd_parse(args: argparse.Namespace) -> int:
    status = 0
    for path in args.files:
        try:
            info = parse_lnk(path)
        except LnkError as exc:
            print(f"lnkinfo: {path}: {exc}", file=sys.stderr)
            status = EXIT_BAD_FILE
            continue
        if args.json:
            d = _serialize_parsed_link(info)
            print(json.dumps(d, indent=2, ensure_ascii=False))
        else:
            header = f"FILE: {path}"
            print(f"\n{'=' * 70}")
            print(header)
            print(f"{'=' * 70}")
            print(format_lnk(info))
            print()
    return status


def _cmd_target(args: argparse.Namespace) -> int:
    status = 0
    for path in args.files:
        try:
            print(parse_lnk(path).target_path)
        except LnkError as exc:
            print(f"lnkinfo: {path}: {exc}", file=sys.stderr)
            status = EXIT_BAD_FILE
    return status


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="lnkinfo",
        description="Inspect Windows .lnk shortcut files",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log decoding details to stderr"
    )
    sub = parser.add_subparsers(dest="command")

    # -- parse --
    pp = sub.add_parser("parse", help="Parse and display .lnk file(s)")
    pp.add_argument("files", nargs="+", help="LNK file(s) to parse")
    pp.add_argument("--json", action="store_true", help="Output as JSON")

    # -- target --
    tp = sub.add_parser("target", help="Print the target path of .lnk file(s)")
    tp.add_argument("files", nargs="+", help="LNK file(s) to resolve")

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(EXIT_USAGE)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(name)s: %(levelname)s: %(message)s"
        )

    handlers = {"parse": _cmd_parse, "target": _cmd_target}
    status = handlers[args.command](args)
    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
