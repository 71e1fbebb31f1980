from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Union


@dataclass(frozen=True)
class NonHeader:
    """A line that is not a header."""

    is_header = False
    header_level = -1
    has_target = False
    target = None
    target_value = -1


@dataclass(frozen=True)
class Header:
    """A header line: nesting level plus the optional ``(Target: N)`` goal.

    ``target`` is ``None`` without an annotation; ``target_value`` is the flat
    form that uses -1 instead.
    """

    level: int
    target: Optional[int] = None

    is_header = True

    @property
    def header_level(self) -> int:
        return self.level

    @property
    def has_target(self) -> bool:
        return self.target is not None

    @property
    def target_value(self) -> int:
        return self.target if self.target is not None else -1


LineInfo = Union[NonHeader, Header]


@dataclass(frozen=True)
class Section:
    """Body of the section around a cursor: lines ``[start, end)`` below ``header_line``."""

    header_line: int
    start: int
    end: int
    target: Optional[int] = None

    @property
    def line_count(self) -> int:
        return max(0, self.end - self.start)


@dataclass(frozen=True)
class ProgressResult:
    percent: int
    target: int
    words: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SelectionMetrics:
    words: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DocumentMetrics:
    document_words: int
    selection_words: int = 0
    selection_lines: int = 0

    @property
    def has_selection(self) -> bool:
        return self.selection_lines > 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SectionReport:
    line: int
    level: int
    title: str
    words: int
    target: Optional[int] = None
    percent: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class StatusUpdate:
    """What a status display should show; ``visible=False`` means hide it."""

    text: str = ""
    visible: bool = False


HIDDEN = StatusUpdate()
