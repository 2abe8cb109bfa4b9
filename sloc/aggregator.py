"""Per-file line accounting."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

from .classifier import LineClassifier
from .logging import get_logger
from .models import FileRecord, LanguageType

_LOGGER = get_logger("aggregator")


def count_lines(
    lines: Iterable[str],
    path: str = "",
    language: LanguageType | None = None,
) -> FileRecord:
    """Classify ``lines`` in order with a fresh state and sum the results.

    A line that is both code and comment counts towards both kind totals but
    only once towards ``n_lines``.
    """
    classifier = LineClassifier()
    n_blank = n_comments = n_doc = n_loc = n_lines = 0

    for line in lines:
        counts = classifier.classify(line)
        n_blank += counts.is_blank
        n_comments += counts.has_comment
        n_doc += counts.has_doc
        n_loc += counts.has_code
        n_lines += 1

    state = classifier.state
    if state.in_any_block:
        _LOGGER.debug("%s ends inside an unterminated block comment", path or "<lines>")

    return FileRecord(
        path=path,
        language=language,
        n_blank=n_blank,
        n_comments=n_comments,
        n_doc=n_doc,
        n_loc=n_loc,
        n_lines=n_lines,
    )


def iter_source_lines(path: Path, *, encoding: str = "utf-8") -> Iterator[str]:
    """Yield the lines of ``path`` lazily with their terminators removed."""
    with path.open("r", encoding=encoding, errors="replace") as handle:
        for raw in handle:
            yield raw.rstrip("\r\n")


def count_file(
    path: Path,
    language: LanguageType | None = None,
    *,
    display_path: str | None = None,
    encoding: str = "utf-8",
) -> FileRecord:
    """Count the lines of a file on disk.

    Raises :class:`OSError` when the file cannot be opened or read.
    """
    label = display_path if display_path is not None else str(path)
    record = count_lines(iter_source_lines(path, encoding=encoding), label, language)
    _LOGGER.debug(
        "%s: %d lines (%d code, %d comment, %d doc, %d blank)",
        label,
        record.n_lines,
        record.n_loc,
        record.n_comments,
        record.n_doc,
        record.n_blank,
    )
    return record


__all__ = ["count_file", "count_lines", "iter_source_lines"]
