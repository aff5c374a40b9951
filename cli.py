from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import List

import uvicorn

from crlfstat.aggregate import combine
from crlfstat.classify import DEFAULT_CHUNK_SIZE
from crlfstat.fs_scan import scan_tree
from crlfstat.log import setup_logging
from crlfstat.model import ScanResult, Statistics
from crlfstat.report import format_report


EXIT_OK = 0
EXIT_INVALID_ROOT = 1
EXIT_WALK_FAILED = 3

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
	number = int(value)
	if number < 1:
		raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
	return number


def cmd_analyze(args: argparse.Namespace) -> int:
	setup_logging(args.verbose)
	roots = [os.path.abspath(p) for p in args.paths]
	for root in roots:
		if not os.path.isdir(root):
			print(f"Error! '{root}' is not a valid directory name.")
			return EXIT_INVALID_ROOT

	results: List[ScanResult] = []
	total = Statistics()
	try:
		for root in roots:
			result = scan_tree(
				root,
				verbose=args.verbose,
				chunk_size=args.chunk_size,
				exclude=args.exclude,
			)
			results.append(result)
			total = combine(total, result.statistics)
	except Exception as e:
		logger.debug("Walk aborted", exc_info=True)
		print(f"Error! {e}")
		return EXIT_WALK_FAILED

	if args.json:
		payload = {
			"results": [r.model_dump(mode="json") for r in results],
			"total": total.model_dump(mode="json"),
		}
		print(json.dumps(payload, indent=2))
	else:
		print(format_report(total, details=args.details))
	return EXIT_OK


def cmd_serve(args: argparse.Namespace) -> int:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)
	return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="crlfstat")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pa = sub.add_parser("analyze", help="Report line ending and indentation statistics")
	pa.add_argument("paths", nargs="+", metavar="path", help="Directory to scan")
	pa.add_argument("-v", "--verbose", action="store_true", help="Log files with mixed line endings")
	pa.add_argument("--json", action="store_true", help="Print results as JSON")
	pa.add_argument("--details", action="store_true", help="Also list extensions with mixed styles")
	pa.add_argument("--chunk-size", type=_positive_int, default=DEFAULT_CHUNK_SIZE)
	pa.add_argument(
		"--exclude",
		action="append",
		default=[],
		metavar="NAME",
		help="Directory name to skip (repeatable)",
	)
	pa.set_defaults(func=cmd_analyze)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default="127.0.0.1")
	ps.add_argument("--port", type=int, default=8000)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)
	return parser


def main(argv: List[str] | None = None) -> int:
	args = build_parser().parse_args(argv)
	return args.func(args)


if __name__ == "__main__":
	sys.exit(main())
