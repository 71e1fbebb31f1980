"""Word counts and section target progress for markdown documents."""
from .core.models import (
    DocumentMetrics,
    Header,
    LineInfo,
    NonHeader,
    ProgressResult,
    Section,
    SectionReport,
    SelectionMetrics,
    StatusUpdate,
)
from .core.text import count_lines, count_words, normalize_whitespace, split_lines
from .parse.headers import parse_line, parse_lines, render_header, strip_target
from .parse.sections import find_following_header_line, find_preceding_header_line, locate_section
from .services.metrics import (
    compute_document_and_selection_metrics,
    compute_section_progress,
    compute_section_report,
    compute_selection_metrics,
)

__version__ = "0.3.0"

__all__ = [
    "DocumentMetrics",
    "Header",
    "LineInfo",
    "NonHeader",
    "ProgressResult",
    "Section",
    "SectionReport",
    "SelectionMetrics",
    "StatusUpdate",
    "count_lines",
    "count_words",
    "normalize_whitespace",
    "split_lines",
    "parse_line",
    "parse_lines",
    "render_header",
    "strip_target",
    "find_following_header_line",
    "find_preceding_header_line",
    "locate_section",
    "compute_document_and_selection_metrics",
    "compute_section_progress",
    "compute_section_report",
    "compute_selection_metrics",
]
