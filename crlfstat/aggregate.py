from __future__ import annotations

from .model import EolClass, FileVerdict, IndentClass, Statistics


def merge(stats: Statistics, verdict: FileVerdict) -> Statistics:
	"""Fold one file verdict into ``stats`` in place and return it."""
	stats.total_files += 1
	if verdict.is_binary:
		stats.binary_files += 1
		stats.binary_extensions.add(verdict.extension)
		return stats

	eol = verdict.eol_class
	if eol == EolClass.MIXED:
		stats.mixed_eol_files += 1
		stats.mixed_eol_extensions.add(verdict.extension)
	elif eol == EolClass.CRLF:
		stats.crlf_only_files += 1
	elif eol == EolClass.LF:
		stats.lf_only_files += 1

	indent = verdict.indent_class
	if indent == IndentClass.MIXED:
		stats.mixed_indent_files += 1
		stats.mixed_indent_extensions.add(verdict.extension)
	elif indent == IndentClass.SPACE:
		stats.space_only_files += 1
	elif indent == IndentClass.TAB:
		stats.tab_only_files += 1
	return stats


def combine(left: Statistics, right: Statistics) -> Statistics:
	"""Return a new aggregate holding the sum of two partial ones."""
	return Statistics(
		total_files=left.total_files + right.total_files,
		binary_files=left.binary_files + right.binary_files,
		lf_only_files=left.lf_only_files + right.lf_only_files,
		crlf_only_files=left.crlf_only_files + right.crlf_only_files,
		mixed_eol_files=left.mixed_eol_files + right.mixed_eol_files,
		space_only_files=left.space_only_files + right.space_only_files,
		tab_only_files=left.tab_only_files + right.tab_only_files,
		mixed_indent_files=left.mixed_indent_files + right.mixed_indent_files,
		binary_extensions=left.binary_extensions | right.binary_extensions,
		mixed_eol_extensions=left.mixed_eol_extensions | right.mixed_eol_extensions,
		mixed_indent_extensions=left.mixed_indent_extensions | right.mixed_indent_extensions,
	)
