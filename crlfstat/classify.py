"""Single-pass byte classifier for line endings, indentation and binary content.

The scanner never holds more than one chunk of a file in memory. Everything
that has to survive a chunk boundary lives in ``ScanState``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import BinaryIO, Optional

from .model import FileVerdict


DEFAULT_CHUNK_SIZE = 64 * 1024

CR = 0x0D
LF = 0x0A
SPACE = 0x20
TAB = 0x09
UTF8_BOM = b"\xef\xbb\xbf"

# TAB, LF, VT, FF, CR and printable ASCII. Every other byte marks a binary file.
TEXT_BYTES = bytes(range(9, 14)) + bytes(range(32, 127))
BLANKS = (SPACE, TAB)


@dataclass
class ScanState:
	previous_byte: Optional[int] = None
	# The start of the file is a line start.
	at_line_start: bool = True
	has_lf: bool = False
	has_crlf: bool = False
	has_space_indent: bool = False
	has_tab_indent: bool = False
	is_binary: bool = False
	consumed: int = 0

	def to_verdict(self, extension: str = "") -> FileVerdict:
		if self.is_binary:
			return FileVerdict(extension=extension, is_binary=True)
		return FileVerdict(
			extension=extension,
			has_lf=self.has_lf,
			has_crlf=self.has_crlf,
			has_space_indent=self.has_space_indent,
			has_tab_indent=self.has_tab_indent,
		)


def feed(state: ScanState, chunk: bytes) -> ScanState:
	"""Advance ``state`` over ``chunk`` and return it.

	A UTF-8 BOM is only recognised when it sits entirely inside the first
	chunk. Once a binary byte has been seen the state stops changing.
	"""
	if state.is_binary or not chunk:
		return state

	data = chunk
	if state.consumed == 0 and chunk[:3] == UTF8_BOM:
		data = chunk[3:]
	state.consumed += len(chunk)

	if data.translate(None, TEXT_BYTES):
		state.is_binary = True
		return state

	size = len(data)
	at_line_start = state.at_line_start
	pos = 0
	while True:
		if at_line_start:
			while pos < size and data[pos] in BLANKS:
				if data[pos] == SPACE:
					state.has_space_indent = True
				else:
					state.has_tab_indent = True
				pos += 1
			if pos == size:
				break
			at_line_start = False
		newline = data.find(b"\n", pos)
		if newline < 0:
			break
		previous = data[newline - 1] if newline else state.previous_byte
		if previous == CR:
			state.has_crlf = True
		else:
			state.has_lf = True
		at_line_start = True
		pos = newline + 1

	if size:
		state.previous_byte = data[-1]
	state.at_line_start = at_line_start
	return state


def _check_chunk_size(chunk_size: int) -> None:
	if chunk_size < 1:
		raise ValueError(f"chunk_size must be positive, got {chunk_size}")


def classify_stream(
	stream: BinaryIO, extension: str = "", chunk_size: int = DEFAULT_CHUNK_SIZE
) -> FileVerdict:
	_check_chunk_size(chunk_size)
	state = ScanState()
	while True:
		chunk = stream.read(chunk_size)
		if not chunk:
			break
		feed(state, chunk)
		if state.is_binary:
			break
	return state.to_verdict(extension)


def classify_bytes(
	data: bytes, extension: str = "", chunk_size: int = DEFAULT_CHUNK_SIZE
) -> FileVerdict:
	_check_chunk_size(chunk_size)
	state = ScanState()
	for offset in range(0, len(data), chunk_size):
		feed(state, data[offset : offset + chunk_size])
		if state.is_binary:
			break
	return state.to_verdict(extension)


def file_extension(path: str) -> str:
	# Dotfiles such as .gitignore have no extension.
	return os.path.splitext(path)[1]


def classify_file(path: str, chunk_size: int = DEFAULT_CHUNK_SIZE) -> FileVerdict:
	# OSError from open() or read() is left to the caller.
	with open(path, "rb") as fh:
		return classify_stream(fh, file_extension(path), chunk_size)
