from wordtarget.parse.headers import parse_lines
from wordtarget.parse.sections import (
    find_following_header_line,
    find_preceding_header_line,
    locate_section,
)


def test_scans_around_cursor(sample_lines):
    infos = parse_lines(sample_lines)
    assert find_preceding_header_line(1, infos) == 0
    assert find_following_header_line(1, infos) == 2 + 1


def test_cursor_on_header_is_found_by_both_scans(sample_lines):
    infos = parse_lines(sample_lines)
    assert find_preceding_header_line(2, infos) == 2
    assert find_following_header_line(2, infos) == 3


def test_no_header_above_cursor():
    lines = ["intro", "", "more", "", "", "# First"]
    infos = parse_lines(lines)
    assert find_preceding_header_line(0, infos) == -1
    assert locate_section(0, infos) is None


def test_no_header_below_cursor_returns_length(sample_lines):
    infos = parse_lines(sample_lines)
    assert find_following_header_line(3, infos) == len(infos)


def test_out_of_range_cursor_does_not_raise(sample_lines):
    infos = parse_lines(sample_lines)
    assert find_preceding_header_line(99, infos) == 2
    assert find_preceding_header_line(-3, infos) == -1
    assert find_following_header_line(99, infos) == len(infos)
    assert find_following_header_line(-3, infos) == 1
    assert find_preceding_header_line(0, []) == -1
    assert find_following_header_line(0, []) == 0


def test_locate_section_excludes_header_line(sample_lines):
    section = locate_section(1, parse_lines(sample_lines))
    assert section is not None
    assert (section.header_line, section.start, section.end) == (0, 1, 2)
    assert section.target == 100


def test_last_section_leaves_out_final_line(sample_lines):
    section = locate_section(3, parse_lines(sample_lines))
    assert (section.header_line, section.start, section.end) == (2, 3, 3)
    assert section.line_count == 0
    assert section.target is None

    # a saved file ends in "\n", so the dropped line is the empty trailing piece
    section = locate_section(3, parse_lines(sample_lines + [""]))
    assert (section.start, section.end) == (3, 4)


def test_cursor_on_header_gives_empty_body(sample_lines):
    section = locate_section(0, parse_lines(sample_lines))
    assert section.header_line == 0
    assert section.line_count == 0
