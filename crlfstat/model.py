from __future__ import annotations

from enum import Enum
from typing import List, Set

from pydantic import BaseModel, ConfigDict, field_serializer


class EolClass(str, Enum):
	LF = "lf"
	CRLF = "crlf"
	MIXED = "mixed"
	NONE = "none"


class IndentClass(str, Enum):
	SPACE = "space"
	TAB = "tab"
	MIXED = "mixed"
	NONE = "none"


class FileVerdict(BaseModel):
	model_config = ConfigDict(frozen=True)

	extension: str = ""
	is_binary: bool = False
	has_lf: bool = False
	has_crlf: bool = False
	has_space_indent: bool = False
	has_tab_indent: bool = False

	@property
	def eol_class(self) -> EolClass:
		if self.is_binary:
			return EolClass.NONE
		if self.has_lf and self.has_crlf:
			return EolClass.MIXED
		if self.has_crlf:
			return EolClass.CRLF
		if self.has_lf:
			return EolClass.LF
		return EolClass.NONE

	@property
	def indent_class(self) -> IndentClass:
		if self.is_binary:
			return IndentClass.NONE
		if self.has_space_indent and self.has_tab_indent:
			return IndentClass.MIXED
		if self.has_space_indent:
			return IndentClass.SPACE
		if self.has_tab_indent:
			return IndentClass.TAB
		return IndentClass.NONE


class Statistics(BaseModel):
	total_files: int = 0
	binary_files: int = 0
	lf_only_files: int = 0
	crlf_only_files: int = 0
	mixed_eol_files: int = 0
	space_only_files: int = 0
	tab_only_files: int = 0
	mixed_indent_files: int = 0
	binary_extensions: Set[str] = set()
	mixed_eol_extensions: Set[str] = set()
	mixed_indent_extensions: Set[str] = set()

	@field_serializer("binary_extensions", "mixed_eol_extensions", "mixed_indent_extensions")
	def _sorted_extensions(self, value: Set[str]) -> List[str]:
		return sorted(value)


class ScanError(BaseModel):
	path: str
	message: str


class ScanResult(BaseModel):
	root: str
	statistics: Statistics
	errors: List[ScanError] = []
