"""Tests for sloc.classifier."""

from __future__ import annotations

from typing import List, Sequence

import pytest

from sloc.classifier import LineClassifier, classify_line
from sloc.models import ClassifierState, LineCounts

BLANK = LineCounts(is_blank=1)
CODE = LineCounts(has_code=1)
COMMENT = LineCounts(has_comment=1)
DOC = LineCounts(has_doc=1)
CODE_COMMENT = LineCounts(has_code=1, has_comment=1)
CODE_DOC = LineCounts(has_code=1, has_doc=1)


def _classify(lines: Sequence[str]) -> List[LineCounts]:
    classifier = LineClassifier()
    return [classifier.classify(line) for line in lines]


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("", BLANK),
        ("   \t ", BLANK),
        ("int x = 0;", CODE),
        ("/* comment */ int x;", CODE_COMMENT),
        ("int x = 0; // trailing", CODE_COMMENT),
        ("/// doc line", DOC),
        ("//! doc line", DOC),
        ("int y; ///< member doc", CODE_DOC),
        ("//// separator", DOC),
        ("/** brief */", DOC),
        ("/*! brief */", DOC),
        ("/**/ int x;", CODE_DOC),
        ("x = a / b;", CODE),
        ('std::cout << "/* not a comment */";', CODE),
        ('puts("// nor this");', CODE),
        ("char q = '\"'; // quote", CODE_COMMENT),
        ("char s = '/'; char t = '*';", CODE),
        ('printf("\\"/*\\"");', CODE),
        ("/* a */ /* b */", COMMENT),
        ("/* plain */ /** doc */", LineCounts(has_comment=1, has_doc=1)),
    ],
)
def test_single_line_classification(line: str, expected: LineCounts) -> None:
    state = ClassifierState()
    assert classify_line(line, state) == expected
    assert not state.in_block_comment
    assert not state.in_doc_block_comment


def test_block_comment_spanning_lines_ends_with_code() -> None:
    lines = ["/* one", " two", " three */ int x = 0;"]
    assert _classify(lines) == [COMMENT, COMMENT, CODE_COMMENT]


@pytest.mark.parametrize("opener", ["/**", "/*!"])
def test_doc_block_spanning_lines_ends_with_code(opener: str) -> None:
    lines = [f"{opener} one", " two", " three */ int x = 0;"]
    assert _classify(lines) == [DOC, DOC, CODE_DOC]


def test_open_block_sets_state_until_closed() -> None:
    state = ClassifierState()
    classify_line("int a; /* starts here", state)
    assert state.in_block_comment
    assert not state.in_doc_block_comment

    classify_line("still inside", state)
    assert state.in_block_comment

    classify_line("done */", state)
    assert not state.in_block_comment


def test_doc_block_state_is_exclusive() -> None:
    state = ClassifierState()
    classify_line("/** open", state)
    assert state.in_doc_block_comment
    assert not state.in_block_comment


def test_line_comment_inside_block_is_inert() -> None:
    lines = ["/* start", "// still inside", "end */", "int x;"]
    assert _classify(lines) == [COMMENT, COMMENT, COMMENT, CODE]


def test_nested_opener_inside_block_does_not_nest() -> None:
    lines = ["/* outer", "/* inner", "closes */ int z;"]
    assert _classify(lines) == [COMMENT, COMMENT, CODE_COMMENT]


def test_doc_opener_inside_plain_block_stays_plain() -> None:
    lines = ["/* outer", " /** not a doc block */ int q;"]
    assert _classify(lines) == [COMMENT, CODE_COMMENT]


def test_empty_line_inside_block_is_comment_not_blank() -> None:
    lines = ["/* start", "", "   ", "end */"]
    assert _classify(lines) == [COMMENT, COMMENT, COMMENT, COMMENT]


def test_empty_line_inside_doc_block_is_doc() -> None:
    lines = ["/**", "", " */"]
    assert _classify(lines) == [DOC, DOC, DOC]


def test_block_closing_then_reopening_on_same_line() -> None:
    classifier = LineClassifier()
    classifier.classify("/* first")
    counts = classifier.classify("end */ int y; /** next")
    assert counts == LineCounts(has_code=1, has_comment=1, has_doc=1)
    assert classifier.state.in_doc_block_comment
    assert not classifier.state.in_block_comment


def test_slash_star_slash_does_not_close_itself() -> None:
    state = ClassifierState()
    assert classify_line("/*/ still open", state) == COMMENT
    assert state.in_block_comment
    assert classify_line("*/", state) == COMMENT
    assert not state.in_block_comment


def test_unterminated_block_at_end_of_input_is_not_an_error() -> None:
    classifier = LineClassifier()
    results = [classifier.classify(line) for line in ["int a;", "/** never", "closed"]]
    assert results == [CODE, DOC, DOC]
    assert classifier.state.in_doc_block_comment


def test_spliced_string_literal_continues_on_next_line() -> None:
    lines = ['std::cout << ">>> Line:\\', '// " << line;']
    assert _classify(lines) == [CODE, CODE]


def test_blank_line_ends_spliced_string() -> None:
    state = ClassifierState()
    classify_line('const char* s = "abc\\', state)
    assert state.in_string_literal
    assert classify_line("", state) == BLANK
    assert not state.in_string_literal
    assert classify_line("// comment", state) == COMMENT


def test_unterminated_char_literal_does_not_leak() -> None:
    lines = ["char c = 'x;", "// comment"]
    assert _classify(lines) == [CODE, COMMENT]


def test_every_line_is_blank_or_has_a_category() -> None:
    lines = [
        "/*!",
        " * @file main.cpp",
        " */",
        "#include <string>",
        "",
        "//== Enumerations",
        "",
        "/// Supported languages.",
        "enum lang_type_e : std::uint8_t {",
        "  C = 0,  //!< C language",
        "  UNDEF,  //!< Undefined type.",
        "};",
        "inline int f() {",
        "  /* empty*/",
        "  return 0; /* done",
        "",
        "  */ }",
    ]
    for counts in _classify(lines):
        categories = counts.has_code + counts.has_comment + counts.has_doc
        if counts.is_blank:
            assert categories == 0
        else:
            assert categories >= 1


def test_reset_clears_state() -> None:
    classifier = LineClassifier()
    classifier.classify("/* open")
    classifier.reset()
    assert classifier.classify("int x;") == CODE


def test_doc_markers_win_over_plain_markers_they_extend() -> None:
    state = ClassifierState()
    assert classify_line("//////////// banner", state) == DOC
    assert classify_line("/**/ int x;", state) == CODE_DOC
    assert classify_line("/***/", state) == DOC
    assert not state.in_doc_block_comment
    assert not state.in_block_comment
