from __future__ import annotations

import logging
import os
from typing import Iterable, Iterator, List, Optional

from .aggregate import merge
from .classify import DEFAULT_CHUNK_SIZE, classify_file
from .model import EolClass, ScanError, ScanResult, Statistics


logger = logging.getLogger(__name__)


def _listing(directory: str) -> Iterator[os.DirEntry]:
	# Listing failures are not per-file errors and propagate.
	with os.scandir(directory) as it:
		entries = sorted(it, key=lambda e: e.name)
	return iter(entries)


def scan_tree(
	root: str,
	stats: Optional[Statistics] = None,
	*,
	verbose: bool = False,
	chunk_size: int = DEFAULT_CHUNK_SIZE,
	exclude: Iterable[str] = (),
) -> ScanResult:
	"""Classify every regular file below ``root`` and fold the verdicts into ``stats``.

	Entries are visited depth first in name order. Directories are kept on an
	explicit stack, so nesting depth is not bounded by the interpreter's
	recursion limit. Files that cannot be read are logged, listed in
	``ScanResult.errors`` and left out of the counts.
	"""
	if stats is None:
		stats = Statistics()
	errors: List[ScanError] = []
	excluded = set(exclude)

	stack = [_listing(root)]
	while stack:
		entry = next(stack[-1], None)
		if entry is None:
			stack.pop()
			continue

		path = entry.path
		if entry.is_dir(follow_symlinks=False):
			if entry.name in excluded:
				logger.debug("Excluded directory %s", path)
				continue
			stack.append(_listing(path))
			continue
		if entry.is_symlink() and entry.is_dir():
			# Not followed, so link cycles cannot loop forever.
			logger.debug("Skipping directory link %s", path)
			continue
		if not entry.is_file():
			logger.debug("Skipping non-regular entry %s", path)
			continue

		try:
			verdict = classify_file(path, chunk_size)
		except OSError as e:
			logger.error("'%s' cannot be opened: %s", path, e)
			errors.append(ScanError(path=path, message=str(e)))
			continue

		if verbose and verdict.eol_class == EolClass.MIXED:
			logger.info("Mixed EOL: %s", path)
		merge(stats, verdict)

	return ScanResult(root=root, statistics=stats, errors=errors)
