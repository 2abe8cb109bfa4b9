"""Line classification for C/C++ sources.

Each physical line is reported as blank, or as any combination of code,
comment and documentation comment. Block comments and spliced string
literals carry over to the next line through :class:`ClassifierState`.

Documentation markers (``///``, ``//!``, ``/**``, ``/*!``) win over the plain
markers they begin with, wherever they match: ``////`` is a doc line and
``/**/`` an empty doc block.
"""

from __future__ import annotations

from .models import ClassifierState, LineCounts

_BLOCK_OPEN = "/*"
_BLOCK_CLOSE = "*/"
_LINE_COMMENT = "//"
_DOC_LINE_MARKERS = ("///", "//!")
_DOC_BLOCK_MARKERS = ("/**", "/*!")


class _LineScan:
    """Mutable flags collected while walking one line."""

    __slots__ = ("code", "comment", "doc")

    def __init__(self) -> None:
        self.code = False
        self.comment = False
        self.doc = False

    def to_counts(self) -> LineCounts:
        return LineCounts(
            is_blank=0,
            has_code=int(self.code),
            has_comment=int(self.comment),
            has_doc=int(self.doc),
        )


def _is_doc_line_comment(line: str, pos: int) -> bool:
    return line.startswith(_DOC_LINE_MARKERS, pos)


def _is_doc_block_open(line: str, pos: int) -> bool:
    return line.startswith(_DOC_BLOCK_MARKERS, pos)


def _close_open_block(line: str, state: ClassifierState, scan: _LineScan) -> int:
    """Consume the tail of a block opened on an earlier line.

    Returns the position right after ``*/``, or -1 when the block stays open.
    """
    if state.in_doc_block_comment:
        scan.doc = True
    else:
        scan.comment = True
    end = line.find(_BLOCK_CLOSE)
    if end < 0:
        return -1
    state.in_block_comment = False
    state.in_doc_block_comment = False
    return end + len(_BLOCK_CLOSE)


def _scan_code(line: str, pos: int, state: ClassifierState, scan: _LineScan) -> None:
    """Walk ``line`` from ``pos`` outside of any comment."""
    length = len(line)
    in_string = state.in_string_literal
    in_char = False
    state.in_string_literal = False
    if in_string:
        scan.code = True

    while pos < length:
        char = line[pos]

        if in_string or in_char:
            if char == "\\":
                if pos == length - 1 and in_string:
                    state.in_string_literal = True
                pos += 2
                continue
            if (in_string and char == '"') or (in_char and char == "'"):
                in_string = False
                in_char = False
            pos += 1
            continue

        if char == "/":
            if _is_doc_line_comment(line, pos):
                scan.doc = True
                return
            if line.startswith(_LINE_COMMENT, pos):
                scan.comment = True
                return
            if line.startswith(_BLOCK_OPEN, pos):
                is_doc = _is_doc_block_open(line, pos)
                if is_doc:
                    scan.doc = True
                else:
                    scan.comment = True
                end = line.find(_BLOCK_CLOSE, pos + len(_BLOCK_OPEN))
                if end < 0:
                    state.in_doc_block_comment = is_doc
                    state.in_block_comment = not is_doc
                    return
                pos = end + len(_BLOCK_CLOSE)
                continue

        if char == '"':
            in_string = True
            scan.code = True
        elif char == "'":
            in_char = True
            scan.code = True
        elif not char.isspace():
            scan.code = True
        pos += 1


def classify_line(line: str, state: ClassifierState) -> LineCounts:
    """Classify one line (terminator stripped) and advance ``state``."""
    if not line.strip() and not state.in_any_block:
        # A splice followed by an empty line ends the literal.
        state.in_string_literal = False
        return LineCounts(is_blank=1)

    scan = _LineScan()
    pos = 0
    if state.in_any_block:
        pos = _close_open_block(line, state, scan)
        if pos < 0:
            return scan.to_counts()

    _scan_code(line, pos, state, scan)
    return scan.to_counts()


class LineClassifier:
    """Stateful classifier for the lines of a single file."""

    def __init__(self, state: ClassifierState | None = None) -> None:
        self.state = state if state is not None else ClassifierState()

    def classify(self, line: str) -> LineCounts:
        return classify_line(line, self.state)

    def reset(self) -> None:
        self.state.reset()


__all__ = ["LineClassifier", "classify_line"]
