"""Pipeline that turns command-line inputs into file records."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence, Tuple

from .aggregator import count_file
from .config import SlocConfig
from .discovery import FileDiscovery
from .logging import get_logger
from .models import FileRecord


@dataclass
class CountReport:
    """Outcome of one counting run."""

    records: List[FileRecord] = field(default_factory=list)
    failures: List[Tuple[Path, str]] = field(default_factory=list)

    @property
    def discovered(self) -> int:
        return len(self.records) + len(self.failures)


class SlocRunner:
    """Coordinates discovery and per-file counting."""

    def __init__(
        self,
        config: SlocConfig | None = None,
        discovery: FileDiscovery | None = None,
    ) -> None:
        self.config = config or SlocConfig(root=Path.cwd())
        self.discovery = discovery or FileDiscovery(self.config.exclude_paths)
        self.logger = get_logger("runner")

    def run(
        self,
        inputs: Sequence[str],
        *,
        recursive: bool | None = None,
        encoding: str | None = None,
    ) -> CountReport:
        """Count every supported file reachable from ``inputs``, in discovery order."""
        recursive = self.config.recursive if recursive is None else recursive
        encoding = encoding or self.config.encoding

        files = self.discovery.discover(inputs, recursive=recursive)
        self.logger.debug("Discovered %d source files", len(files))

        report = CountReport()
        for source in files:
            try:
                record = count_file(
                    source.path,
                    source.language,
                    display_path=str(source.path),
                    encoding=encoding,
                )
            except OSError as exc:
                self.logger.warning("Could not read %s: %s", source.path, exc)
                report.failures.append((source.path, str(exc)))
                continue
            report.records.append(record)
        return report


__all__ = ["CountReport", "SlocRunner"]
