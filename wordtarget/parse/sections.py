from __future__ import annotations

from typing import Optional, Sequence

from wordtarget.core.models import LineInfo, Section
from wordtarget.infra.logging import get_unified_logger


def find_preceding_header_line(cursor_line: int, infos: Sequence[LineInfo]) -> int:
    """Index of the nearest header at or above ``cursor_line``, or -1."""
    if not infos or cursor_line < 0:
        return -1
    current = min(cursor_line, len(infos) - 1)
    while current >= 0:
        if infos[current].is_header:
            return current
        current -= 1
    return -1


def find_following_header_line(cursor_line: int, infos: Sequence[LineInfo]) -> int:
    """One past the first header at or below ``cursor_line``; ``len(infos)`` if none.

    The result is the exclusive bound of the forward scan, so the header itself
    sits at ``result - 1``.
    """
    current = max(cursor_line, 0)
    while current < len(infos):
        if infos[current].is_header:
            return current + 1
        current += 1
    return len(infos)


def locate_section(cursor_line: int, infos: Sequence[LineInfo]) -> Optional[Section]:
    """Body line range of the section containing ``cursor_line``.

    The header's own line is excluded. The body ends one line before the
    forward scan bound, so the last section leaves out the final document line
    (the empty piece after a trailing newline in a saved file). With the
    cursor on a header the forward scan stops at that header and the body is
    empty.
    """
    header_line = find_preceding_header_line(cursor_line, infos)
    if header_line < 0:
        return None
    end = find_following_header_line(cursor_line, infos) - 1
    header = infos[header_line]
    section = Section(
        header_line=header_line,
        start=header_line + 1,
        end=max(end, header_line + 1),
        target=header.target,
    )
    get_unified_logger("parse", "sections").debug(
        "cursor=%s section=[%s, %s) header=%s target=%s",
        cursor_line,
        section.start,
        section.end,
        header_line,
        section.target,
    )
    return section
