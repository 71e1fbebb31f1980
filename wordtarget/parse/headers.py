"""Header and ``(Target: N)`` annotation parsing."""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

from wordtarget.core.models import Header, LineInfo, NonHeader

HEADER_RE = re.compile(r"^#+\s")
TARGET_SUFFIX_RE = re.compile(r"\(Target:\s([0-9]+)\)\Z")
TARGET_ANY_RE = re.compile(r"\(Target:\s[0-9]+\)")
_FIRST_SPACE_RE = re.compile(r"\s")

_NON_HEADER = NonHeader()


def parse_line(line: str) -> LineInfo:
    """Classify one line.

    ``### Notes (Target: 500)`` -> ``Header(level=3, target=500)``. Anything that
    does not end in a well formed annotation is a header without target.
    """
    if not line or not HEADER_RE.search(line):
        return _NON_HEADER
    # first whitespace gives the level ("### " = 3)
    level = _FIRST_SPACE_RE.search(line).start()
    m = TARGET_SUFFIX_RE.search(line)
    target: Optional[int] = int(m.group(1)) if m else None
    return Header(level=level, target=target)


def parse_lines(lines: Iterable[str]) -> List[LineInfo]:
    return [parse_line(line) for line in lines]


def render_header(level: int, title: str, target: Optional[int] = None) -> str:
    """Build a header line that ``parse_line`` classifies back as ``(level, target)``."""
    text = f"{'#' * max(1, level)} {title}"
    if target is not None:
        text += f" (Target: {target})"
    return text


def strip_target(text: str) -> str:
    """Remove the first ``(Target: N)`` annotation so it is not counted as prose."""
    return TARGET_ANY_RE.sub("", text or "", count=1)


def header_title(line: str) -> str:
    """Header text without the leading hashes and the trailing annotation."""
    body = HEADER_RE.sub("", line, count=1)
    return TARGET_SUFFIX_RE.sub("", body).strip()
