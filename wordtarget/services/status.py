from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Union

from wordtarget.core.config import DEFAULT_MARKDOWN_EXTENSIONS, DEFAULTS, ConfigError
from wordtarget.core.models import (
    HIDDEN,
    DocumentMetrics,
    ProgressResult,
    SelectionMetrics,
    StatusUpdate,
)


def _render(fmt: str, **values: int) -> str:
    try:
        return fmt.format(**values)
    except (KeyError, IndexError, ValueError) as e:
        raise ConfigError(f"bad status template {fmt!r}: {e}") from e


def is_markdown_document(
    path: Union[str, Path, None], extensions: Optional[Iterable[str]] = None
) -> bool:
    """Only markdown documents get a status; others keep it hidden."""
    if path is None:
        return False
    exts = {e.lower() for e in (extensions or DEFAULT_MARKDOWN_EXTENSIONS)}
    return Path(path).suffix.lower() in exts


def progress_status(result: Optional[ProgressResult], template: Optional[str] = None) -> StatusUpdate:
    if result is None:
        return HIDDEN
    fmt = template or DEFAULTS["status_template"]
    return StatusUpdate(
        text=_render(fmt, percent=result.percent, target=result.target, words=result.words),
        visible=True,
    )


def selection_status(metrics: SelectionMetrics, template: Optional[str] = None) -> StatusUpdate:
    if metrics.words <= 0:
        return HIDDEN
    fmt = template or DEFAULTS["selection_template"]
    return StatusUpdate(text=_render(fmt, words=metrics.words), visible=True)


def document_status(
    metrics: DocumentMetrics,
    template: Optional[str] = None,
    selection_template: Optional[str] = None,
) -> StatusUpdate:
    """``"<n> Words"`` plus the selection counts when something is selected."""
    text = _render(template or DEFAULTS["document_template"], document_words=metrics.document_words)
    if metrics.has_selection:
        text += _render(
            selection_template or DEFAULTS["document_selection_template"],
            selection_words=metrics.selection_words,
            selection_lines=metrics.selection_lines,
        )
    return StatusUpdate(text=text, visible=True)
