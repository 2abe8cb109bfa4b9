"""Core data models shared across sloc components."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class LanguageType(Enum):
    """Source languages recognised by file discovery."""

    C = "C"
    CPP = "C++"
    H = "C header"
    HPP = "C++ header"

    @property
    def label(self) -> str:
        return self.value

    @property
    def order(self) -> int:
        return _LANGUAGE_ORDER[self]


_LANGUAGE_ORDER = {language: index for index, language in enumerate(LanguageType)}


@dataclass
class ClassifierState:
    """Cross-line lexer state for a single file."""

    in_block_comment: bool = False
    in_doc_block_comment: bool = False
    in_string_literal: bool = False

    @property
    def in_any_block(self) -> bool:
        return self.in_block_comment or self.in_doc_block_comment

    def reset(self) -> None:
        self.in_block_comment = False
        self.in_doc_block_comment = False
        self.in_string_literal = False


@dataclass(frozen=True)
class LineCounts:
    """Per-line category flags, each 0 or 1."""

    is_blank: int = 0
    has_code: int = 0
    has_comment: int = 0
    has_doc: int = 0


@dataclass(frozen=True)
class DiscoveredFile:
    """A candidate source file produced by discovery."""

    path: Path
    language: LanguageType


@dataclass(frozen=True)
class FileRecord:
    """Line totals for one processed file."""

    path: str
    language: LanguageType | None
    n_blank: int = 0
    n_comments: int = 0
    n_doc: int = 0
    n_loc: int = 0
    n_lines: int = 0


__all__ = [
    "ClassifierState",
    "DiscoveredFile",
    "FileRecord",
    "LanguageType",
    "LineCounts",
]
