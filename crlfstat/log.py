from __future__ import annotations

import logging
import sys


LOG_FORMAT = "%(levelname)-7s  [%(name)s]  %(message)s"


def setup_logging(verbose: bool = False) -> None:
	"""Send log records to stderr so stdout only carries the report."""
	level = logging.INFO if verbose else logging.WARNING

	handler = logging.StreamHandler(sys.stderr)
	handler.setFormatter(logging.Formatter(LOG_FORMAT))

	root = logging.getLogger()
	root.setLevel(level)
	for h in list(root.handlers):
		root.removeHandler(h)
	root.addHandler(handler)
