"""Section progress and word count metrics.

Every function here is pure: inputs are plain strings, results are frozen
dataclasses, ``None`` means there is nothing to display.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from wordtarget.core.models import (
    DocumentMetrics,
    ProgressResult,
    SectionReport,
    SelectionMetrics,
)
from wordtarget.core.text import count_lines, count_words
from wordtarget.infra.logging import get_unified_logger
from wordtarget.parse.headers import header_title, parse_lines, strip_target
from wordtarget.parse.sections import locate_section


def percent_of(words: int, target: int) -> int:
    """``words * 100 / target`` rounded half away from zero, in integer arithmetic."""
    num = abs(words) * 100
    den = abs(target)
    value = (2 * num + den) // (2 * den)
    return -value if (words < 0) != (target < 0) else value


def _section_words(document_lines: Sequence[str], start: int, end: int) -> int:
    text = " ".join(document_lines[start:end])
    return count_words(strip_target(text))


def compute_section_progress(document_lines: Sequence[str], cursor_line: int) -> Optional[ProgressResult]:
    """Progress of the section around ``cursor_line`` against its header target."""
    logger = get_unified_logger("metrics", "section")
    infos = parse_lines(document_lines)
    section = locate_section(cursor_line, infos)
    if section is None:
        logger.trace("no header above line %s", cursor_line)  # type: ignore[attr-defined]
        return None
    target = section.target if section.target is not None else -1
    words = _section_words(document_lines, section.start, section.end)
    if words > 0 and target > 0:
        result = ProgressResult(percent=percent_of(words, target), target=target, words=words)
        logger.debug("section progress %s", result)
        return result
    logger.trace("nothing to show: words=%s target=%s", words, target)  # type: ignore[attr-defined]
    return None


def compute_selection_metrics(selected_text: str) -> SelectionMetrics:
    return SelectionMetrics(words=count_words(selected_text))


def compute_document_and_selection_metrics(document_text: str, selected_text: str = "") -> DocumentMetrics:
    """Whole document word count plus word/line counts of a non-empty selection."""
    doc_words = count_words(document_text)
    if not selected_text:
        return DocumentMetrics(document_words=doc_words)
    return DocumentMetrics(
        document_words=doc_words,
        selection_words=count_words(selected_text),
        selection_lines=count_lines(selected_text),
    )


def compute_section_report(document_lines: Sequence[str]) -> List[SectionReport]:
    """One row per header: body word count, target and progress."""
    infos = parse_lines(document_lines)
    header_lines = [i for i, info in enumerate(infos) if info.is_header]
    rows: List[SectionReport] = []
    for pos, line_no in enumerate(header_lines):
        end = header_lines[pos + 1] if pos + 1 < len(header_lines) else len(infos) - 1
        info = infos[line_no]
        words = _section_words(document_lines, line_no + 1, end)
        target = info.target if info.has_target else None
        percent = percent_of(words, target) if words > 0 and target else None
        rows.append(
            SectionReport(
                line=line_no,
                level=info.header_level,
                title=header_title(document_lines[line_no]),
                words=words,
                target=target,
                percent=percent,
            )
        )
    return rows
