from wordtarget.core.models import DocumentMetrics, ProgressResult, SelectionMetrics
from wordtarget.services.metrics import (
    compute_document_and_selection_metrics,
    compute_section_progress,
    compute_section_report,
    compute_selection_metrics,
    percent_of,
)


def test_section_progress_example(sample_lines):
    result = compute_section_progress(sample_lines, 1)
    assert result == ProgressResult(percent=3, target=100, words=3)


def test_section_without_target_has_no_result():
    lines = ["### Notes", "many words in this section body"]
    assert compute_section_progress(lines, 1) is None


def test_cursor_above_first_header_has_no_result():
    lines = ["intro text", "", "", "", "", "# First (Target: 10)", "body"]
    assert compute_section_progress(lines, 0) is None


def test_cursor_on_header_line_has_no_result(sample_lines):
    assert compute_section_progress(sample_lines, 0) is None


def test_last_section_leaves_out_final_line():
    lines = ["# A (Target: 4)", "one two", "three four"]
    assert compute_section_progress(lines, 1) == ProgressResult(percent=50, target=4, words=2)
    assert compute_section_progress(lines + [""], 1) == ProgressResult(percent=100, target=4, words=4)
    assert compute_section_progress(["# A (Target: 4)", "only line"], 1) is None


def test_nested_section_stops_at_next_header_of_any_level():
    lines = ["# Top (Target: 10)", "a b", "### Deep", "c d e", "## Mid (Target: 2)", "f", ""]
    assert compute_section_progress(lines, 1) == ProgressResult(percent=20, target=10, words=2)
    assert compute_section_progress(lines, 3) is None
    assert compute_section_progress(lines, 5) == ProgressResult(percent=50, target=2, words=1)


def test_target_annotation_in_body_is_not_counted():
    lines = ["# A (Target: 10)", "see (Target: 5) here", ""]
    assert compute_section_progress(lines, 1).words == 2


def test_zero_target_or_empty_body_has_no_result():
    assert compute_section_progress(["# A (Target: 0)", "text"], 1) is None
    assert compute_section_progress(["# A (Target: 10)", "", "   "], 2) is None


def test_out_of_range_cursor_is_tolerated(sample_lines):
    assert compute_section_progress(sample_lines, -1) is None
    assert compute_section_progress([], 0) is None
    # clamped to the last line, which sits in a section without target
    assert compute_section_progress(sample_lines, 50) is None


def test_percent_rounds_half_away_from_zero():
    assert percent_of(1, 200) == 1
    assert percent_of(1, 400) == 0
    assert percent_of(3, 8) == 38
    assert percent_of(5, 8) == 63
    assert percent_of(250, 100) == 250


def test_selection_metrics():
    assert compute_selection_metrics("  alpha beta\ngamma ") == SelectionMetrics(words=3)
    assert compute_selection_metrics("") == SelectionMetrics(words=0)


def test_document_and_selection_metrics():
    doc = "# Title\nsome words here\n"
    metrics = compute_document_and_selection_metrics(doc, "some words\n")
    assert metrics == DocumentMetrics(document_words=5, selection_words=2, selection_lines=2)
    assert metrics.has_selection


def test_document_metrics_without_selection():
    metrics = compute_document_and_selection_metrics("one two three", "")
    assert metrics == DocumentMetrics(document_words=3)
    assert not metrics.has_selection


def test_section_report_rows():
    lines = [
        "preamble",
        "# Intro (Target: 4)",
        "one two",
        "## Details",
        "three four five",
        "# End (Target: 3)",
    ]
    rows = compute_section_report(lines)
    assert [(r.line, r.level, r.title) for r in rows] == [(1, 1, "Intro"), (3, 2, "Details"), (5, 1, "End")]
    assert [r.words for r in rows] == [2, 3, 0]
    assert [r.percent for r in rows] == [50, None, None]
    assert rows[2].target == 3


def test_section_report_last_row_leaves_out_final_line():
    rows = compute_section_report(["# A (Target: 4)", "one two", "three four"])
    assert rows[0].words == 2
    assert rows[0].percent == 50
