"""Line counting for C/C++ sources with doc-comment awareness."""

from .aggregator import count_file, count_lines
from .classifier import LineClassifier, classify_line
from .models import ClassifierState, FileRecord, LanguageType, LineCounts

__all__ = [
    "ClassifierState",
    "FileRecord",
    "LanguageType",
    "LineClassifier",
    "LineCounts",
    "classify_line",
    "count_file",
    "count_lines",
]
