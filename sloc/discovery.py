"""Expansion of command-line inputs into C/C++ source files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterator, List, Sequence, Set

from .logging import get_logger
from .models import DiscoveredFile, LanguageType

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    ".venv",
    "__pycache__",
    ".pytest_cache",
    ".mypy_cache",
    ".idea",
    ".vscode",
}

_LANGUAGE_BY_SUFFIX = {
    ".c": LanguageType.C,
    ".cpp": LanguageType.CPP,
    ".h": LanguageType.H,
    ".hpp": LanguageType.HPP,
}


@dataclass
class ExcludeRule:
    """A gitignore-style pattern from ``exclude_paths``."""

    pattern: str
    directory_only: bool
    anchored: bool
    has_slash: bool

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        if not self.pattern:
            return False
        if self.directory_only and not is_dir:
            return False

        if self.anchored or self.has_slash:
            return fnmatchcase(rel_path, self.pattern)

        return any(fnmatchcase(part, self.pattern) for part in rel_path.split("/"))


def build_exclude_rule(pattern: str) -> ExcludeRule | None:
    pattern = pattern.strip()
    if not pattern or pattern.startswith("#"):
        return None

    directory_only = pattern.endswith("/")
    pattern = pattern.rstrip("/")

    anchored = pattern.startswith("/")
    if anchored:
        pattern = pattern.lstrip("/")

    if not pattern:
        return None
    return ExcludeRule(
        pattern=pattern,
        directory_only=directory_only,
        anchored=anchored,
        has_slash="/" in pattern,
    )


def detect_language(path: Path) -> LanguageType | None:
    """Return the language for ``path`` by case-insensitive suffix."""
    return _LANGUAGE_BY_SUFFIX.get(path.suffix.lower())


def _is_excluded(rel_path: str, is_dir: bool, rules: Sequence[ExcludeRule]) -> bool:
    return any(rule.matches(rel_path, is_dir) for rule in rules)


def _iter_directory(
    root: Path, recursive: bool, rules: Sequence[ExcludeRule]
) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(root):
        current_dir = Path(dirpath)
        rel_dir = current_dir.relative_to(root).as_posix() if current_dir != root else ""

        if recursive:
            kept = []
            for name in sorted(dirnames):
                if name in _EXCLUDED_DIRS:
                    continue
                rel_path = f"{rel_dir}/{name}" if rel_dir else name
                if _is_excluded(rel_path, True, rules):
                    continue
                kept.append(name)
            dirnames[:] = kept
        else:
            dirnames[:] = []

        for filename in sorted(filenames):
            rel_path = f"{rel_dir}/{filename}" if rel_dir else filename
            if _is_excluded(rel_path, False, rules):
                continue
            yield current_dir / filename


class FileDiscovery:
    """Turns file and directory arguments into an ordered list of sources."""

    def __init__(self, exclude_paths: Sequence[str] = ()) -> None:
        self.rules: List[ExcludeRule] = []
        for pattern in exclude_paths:
            rule = build_exclude_rule(pattern)
            if rule is not None:
                self.rules.append(rule)
        self.logger = get_logger("discovery")

    def discover(self, inputs: Sequence[str], *, recursive: bool = False) -> List[DiscoveredFile]:
        """Return supported files for ``inputs``, in argument order, without duplicates."""
        found: List[DiscoveredFile] = []
        seen: Set[Path] = set()

        def _add(path: Path, language: LanguageType) -> None:
            key = path.resolve()
            if key in seen:
                return
            seen.add(key)
            found.append(DiscoveredFile(path=path, language=language))

        for raw in inputs:
            path = Path(raw).expanduser()
            if path.is_dir():
                count = 0
                for candidate in _iter_directory(path, recursive, self.rules):
                    language = detect_language(candidate)
                    if language is None:
                        continue
                    _add(candidate, language)
                    count += 1
                self.logger.debug("Found %d source files under %s", count, path)
            elif path.is_file():
                language = detect_language(path)
                if language is None:
                    self.logger.warning("Skipping %s: unsupported file extension", path)
                    continue
                _add(path, language)
            else:
                self.logger.warning("Skipping %s: no such file or directory", path)

        return found


__all__ = ["ExcludeRule", "FileDiscovery", "build_exclude_rule", "detect_language"]
