"""Sorting and table rendering for file records."""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence, Tuple

from .models import FileRecord

SUM_LABEL = "SUM"

_SORT_FIELDS: Dict[str, Callable[[FileRecord], object]] = {
    "f": lambda record: record.path,
    "t": lambda record: record.language.order if record.language is not None else -1,
    "c": lambda record: record.n_comments,
    "d": lambda record: record.n_doc,
    "b": lambda record: record.n_blank,
    "s": lambda record: record.n_loc,
    "a": lambda record: record.n_lines,
}

_HEADERS = ("Filename", "Language", "Comments", "Doc Comments", "Blank", "Code", "# of lines")
_MIN_COUNT_WIDTH = 16
_GAP = "  "


def sort_records(
    records: Sequence[FileRecord], key: str | None, *, descending: bool = False
) -> List[FileRecord]:
    """Return ``records`` stably ordered by ``key``; ties keep their input order."""
    if key is None:
        return list(records)
    try:
        field = _SORT_FIELDS[key]
    except KeyError as exc:
        raise ValueError(f"Unknown sort key: {key}") from exc
    # sorted() keeps equal elements in input order even with reverse=True.
    return sorted(records, key=field, reverse=descending)


def summarize(records: Sequence[FileRecord]) -> FileRecord:
    """Build the SUM row for ``records``."""
    return FileRecord(
        path=SUM_LABEL,
        language=None,
        n_blank=sum(record.n_blank for record in records),
        n_comments=sum(record.n_comments for record in records),
        n_doc=sum(record.n_doc for record in records),
        n_loc=sum(record.n_loc for record in records),
        n_lines=sum(record.n_lines for record in records),
    )


def format_share(count: int, total: int) -> str:
    """Render ``count`` with its share of ``total`` lines, e.g. ``12 (40.0%)``."""
    percent = (count / total * 100.0) if total else 0.0
    return f"{count} ({percent:.1f}%)"


def _row_cells(record: FileRecord) -> Tuple[str, ...]:
    language = record.language.label if record.language is not None else ""
    return (
        record.path,
        language,
        format_share(record.n_comments, record.n_lines),
        format_share(record.n_doc, record.n_lines),
        format_share(record.n_blank, record.n_lines),
        format_share(record.n_loc, record.n_lines),
        str(record.n_lines),
    )


class TableReporter:
    """Renders the per-file table printed by the CLI."""

    def __init__(self, *, show_totals: bool = True) -> None:
        self.show_totals = show_totals

    def render(self, records: Sequence[FileRecord]) -> str:
        rows = [_row_cells(record) for record in records]
        totals = None
        if self.show_totals and len(records) > 1:
            totals = _row_cells(summarize(records))

        widths = [len(header) for header in _HEADERS]
        for row in rows + ([totals] if totals else []):
            for index, cell in enumerate(row):
                widths[index] = max(widths[index], len(cell))
        for index in range(2, len(widths)):
            widths[index] = max(widths[index], _MIN_COUNT_WIDTH)

        def _line(cells: Sequence[str]) -> str:
            return _GAP.join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

        rule = "-" * (sum(widths) + len(_GAP) * (len(widths) - 1))

        output: List[str] = [f"Files processed: {len(records)}", rule, _line(_HEADERS), rule]
        output.extend(_line(row) for row in rows)
        output.append(rule)
        if totals is not None:
            output.append(_line(totals))
            output.append(rule)
        return "\n".join(output) + "\n"


__all__ = ["SUM_LABEL", "TableReporter", "format_share", "sort_records", "summarize"]
