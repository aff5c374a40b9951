from __future__ import annotations

from typing import Iterable, List

from .model import Statistics


def format_extensions(extensions: Iterable[str]) -> str:
	return "[ " + "".join(f"{ext} " for ext in sorted(extensions)) + "]"


def format_report(stats: Statistics, details: bool = False) -> str:
	lines: List[str] = []
	lines.append(f"Total files analyzed: {stats.total_files}")
	lines.append(
		f"Line endings CRLF/LF/MIX: {stats.crlf_only_files}/{stats.lf_only_files}/{stats.mixed_eol_files}"
	)
	lines.append(
		f"Indents SPACE/TAB/MIX: {stats.space_only_files}/{stats.tab_only_files}/{stats.mixed_indent_files}"
	)
	binary = f"Binary files: {stats.binary_files}"
	if stats.binary_files:
		binary += " " + format_extensions(stats.binary_extensions)
	lines.append(binary)
	if details:
		lines.append(f"Mixed EOL extensions: {format_extensions(stats.mixed_eol_extensions)}")
		lines.append(f"Mixed indent extensions: {format_extensions(stats.mixed_indent_extensions)}")
	return "\n".join(lines)
