"""Command line entry point for the descrambler."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import load_config
from .exceptions import DescrambleError
from .logging_config import close_debug_logger, configure_debug_file_logger
from .passes.sequence import UnknownCallPolicy
from .pipeline import run_pipeline
from .player_version import parse_player_version
from .urls import decipher_stream_url
from .utils import read_text, write_json

LOG = logging.getLogger(__name__)


def _add_parse_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("script", type=Path, help="player script file")
    parser.add_argument("--config", type=Path, help="JSON or YAML config overriding the defaults")
    parser.add_argument("--signature-key", help="quoted key the entry function is passed with")
    parser.add_argument(
        "--balanced",
        action="store_true",
        help="extract the entry function body by brace depth",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="fail on helper calls that match no known shape",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="descrambler", description="Player script signature descrambler"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--debug-log", type=Path, help="write a debug trace of the run to this file")
    sub = parser.add_subparsers(dest="command", required=True)

    parse_cmd = sub.add_parser("parse", help="print the operation program of a player script")
    _add_parse_options(parse_cmd)
    parse_cmd.add_argument("--json", action="store_true", help="print the program as JSON")
    parse_cmd.add_argument("--report", type=Path, help="write the parse report as JSON")

    decipher_cmd = sub.add_parser("decipher", help="decipher signatures with a player script")
    _add_parse_options(decipher_cmd)
    decipher_cmd.add_argument("signatures", nargs="+", help="scrambled signatures")
    decipher_cmd.add_argument("--url", help="print this stream URL with the signature attached")
    decipher_cmd.add_argument("--param", default="signature", help="query parameter for --url")

    version_cmd = sub.add_parser("version", help="print the player version referenced by a watch page")
    version_cmd.add_argument("html", type=Path, help="watch page HTML file")

    return parser


def _config_from_args(args: argparse.Namespace):
    return load_config(
        args.config,
        signature_key=args.signature_key,
        extraction="balanced" if args.balanced else None,
        unknown_policy=UnknownCallPolicy.FAIL_FAST if args.strict else None,
    )


def _cmd_parse(args: argparse.Namespace) -> int:
    ctx = run_pipeline(read_text(args.script), config=_config_from_args(args))
    source = ctx.player_source()
    if args.report:
        write_json(args.report, ctx.report.to_json())
        LOG.info("report written to %s", args.report)
    if args.json:
        print(json.dumps(source.to_json(), indent=2))
    else:
        print(ctx.report.to_text())
    return 0


def _cmd_decipher(args: argparse.Namespace) -> int:
    ctx = run_pipeline(read_text(args.script), config=_config_from_args(args))
    source = ctx.player_source()
    for signature in args.signatures:
        if args.url:
            print(decipher_stream_url(args.url, signature, source, param=args.param))
        else:
            print(source.decipher(signature))
    return 0


def _cmd_version(args: argparse.Namespace) -> int:
    print(parse_player_version(read_text(args.html)))
    return 0


_COMMANDS = {
    "parse": _cmd_parse,
    "decipher": _cmd_decipher,
    "version": _cmd_version,
}


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s")

    debug_logger = None
    if args.debug_log:
        debug_logger = configure_debug_file_logger("descrambler", args.debug_log)
    try:
        return _COMMANDS[args.command](args)
    except (DescrambleError, ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    finally:
        if debug_logger is not None:
            close_debug_logger(debug_logger)


if __name__ == "__main__":  # pragma: no cover - CLI wrapper
    raise SystemExit(main())
