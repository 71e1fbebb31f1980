from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from rich.console import Console
from rich.table import Table

from wordtarget.core.config import WordTargetError, load_config_file, load_env, merge_config
from wordtarget.core.models import StatusUpdate
from wordtarget.core.text import split_lines
from wordtarget.infra.logging import (
    get_unified_logger,
    init_logging,
    log_error,
    log_processing_step,
    mdc_put,
)
from wordtarget.services.metrics import (
    compute_document_and_selection_metrics,
    compute_section_progress,
    compute_section_report,
    compute_selection_metrics,
)
from wordtarget.services.status import (
    document_status,
    is_markdown_document,
    progress_status,
    selection_status,
)

app = typer.Typer(help="wordtarget: word counts and section progress for markdown documents")

console = Console(highlight=False)


def _echo(s: str) -> None:
    typer.echo(s)


def _fail(message: str, code: int = 2) -> None:
    typer.secho(message, fg=typer.colors.RED, err=True)
    raise typer.Exit(code=code)


def _load_conf(config: Optional[Path], overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    try:
        return merge_config(load_config_file(config), load_env(), overrides)
    except WordTargetError as e:
        log_error("cli", "config", e)
        _fail(str(e))
    return {}


def _read_lines(path: Path) -> List[str]:
    mdc_put("file", path.name)
    try:
        return split_lines(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        log_error("cli", "read", e, context=str(path))
        _fail(f"Cannot read {path}: {e}")
    return []


def _check_markdown(path: Path, conf: Dict[str, Any], any_file: bool) -> None:
    if any_file or is_markdown_document(path, conf.get("markdown_extensions")):
        return
    typer.secho(f"{path.name} is not a markdown document; nothing to show.", fg=typer.colors.YELLOW, err=True)
    raise typer.Exit(code=1)


def _show(update: StatusUpdate, empty_message: str) -> None:
    if not update.visible:
        typer.secho(empty_message, fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)
    _echo(update.text)


def _selection_text(lines: List[str], start: int, end: Optional[int]) -> str:
    last = start if end is None else end
    if last < start:
        start, last = last, start
    return "\n".join(lines[max(start, 0) : max(last + 1, 0)])


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(None, "--log-level", help="TRACE, DEBUG, INFO, WARN, ERROR"),
    log_json: bool = typer.Option(False, "--log-json", help="JSON log layout on stderr"),
) -> None:
    init_logging(level=log_level, json_layout=log_json or None, force=True)
    mdc_put("command", ctx.invoked_subcommand)


@app.command()
def progress(
    document: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    line: int = typer.Option(..., "--line", "-l", help="0-based cursor line"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    any_file: bool = typer.Option(False, "--any-file", help="Do not require a markdown extension"),
    template: Optional[str] = typer.Option(None, "--template", help="Status text template"),
    config: Optional[Path] = typer.Option(None, "--config", exists=True, dir_okay=False, readable=True),
) -> None:
    """Show progress of the section around a line against its (Target: N)."""
    conf = _load_conf(config, {"status_template": template})
    _check_markdown(document, conf, any_file)
    lines = _read_lines(document)
    result = compute_section_progress(lines, line)
    if as_json and result is not None:
        _echo(json.dumps(result.to_dict(), ensure_ascii=False))
        return
    try:
        update = progress_status(result, conf.get("status_template"))
    except WordTargetError as e:
        _fail(str(e))
    _show(update, "No section progress to show.")


@app.command()
def selection(
    document: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    start: int = typer.Option(..., "--start", "-s", help="First selected line (0-based)"),
    end: Optional[int] = typer.Option(None, "--end", "-e", help="Last selected line, inclusive"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    any_file: bool = typer.Option(True, "--any-file/--markdown-only"),
    config: Optional[Path] = typer.Option(None, "--config", exists=True, dir_okay=False, readable=True),
) -> None:
    """Count words in a line range of the document."""
    conf = _load_conf(config)
    _check_markdown(document, conf, any_file)
    lines = _read_lines(document)
    metrics = compute_selection_metrics(_selection_text(lines, start, end))
    if as_json:
        _echo(json.dumps(metrics.to_dict(), ensure_ascii=False))
        return
    try:
        update = selection_status(metrics, conf.get("selection_template"))
    except WordTargetError as e:
        _fail(str(e))
    _show(update, "No words selected.")


@app.command()
def count(
    document: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    start: Optional[int] = typer.Option(None, "--start", "-s", help="First selected line (0-based)"),
    end: Optional[int] = typer.Option(None, "--end", "-e", help="Last selected line, inclusive"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    any_file: bool = typer.Option(True, "--any-file/--markdown-only"),
    config: Optional[Path] = typer.Option(None, "--config", exists=True, dir_okay=False, readable=True),
) -> None:
    """Count words in the whole document and, optionally, in a selection."""
    conf = _load_conf(config)
    _check_markdown(document, conf, any_file)
    lines = _read_lines(document)
    selected = _selection_text(lines, start, end) if start is not None else ""
    metrics = compute_document_and_selection_metrics("\n".join(lines), selected)
    get_unified_logger("cli", "count").debug("metrics %s", metrics)
    if as_json:
        _echo(json.dumps(metrics.to_dict(), ensure_ascii=False))
        return
    try:
        update = document_status(
            metrics, conf.get("document_template"), conf.get("document_selection_template")
        )
    except WordTargetError as e:
        _fail(str(e))
    _show(update, "Empty document.")


@app.command()
def report(
    document: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    any_file: bool = typer.Option(False, "--any-file", help="Do not require a markdown extension"),
    config: Optional[Path] = typer.Option(None, "--config", exists=True, dir_okay=False, readable=True),
) -> None:
    """Table of every section with its word count and target progress."""
    conf = _load_conf(config)
    _check_markdown(document, conf, any_file)
    rows = compute_section_report(_read_lines(document))
    log_processing_step("cli", "report", "sections computed", {"file": document.name, "sections": len(rows)})
    if not rows:
        typer.secho("No headers found.", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)

    table = Table(title=document.name)
    table.add_column("Line", justify="right")
    table.add_column("Section")
    table.add_column("Words", justify="right")
    table.add_column("Target", justify="right")
    table.add_column("Progress", justify="right")
    for row in rows:
        indent = "  " * max(row.level - 1, 0)
        table.add_row(
            str(row.line),
            f"{indent}{row.title}",
            str(row.words),
            str(row.target) if row.target is not None else "-",
            f"{row.percent}%" if row.percent is not None else "-",
        )
    console.print(table)


def main() -> None:  # console_scripts entrypoint wrapper
    app()


if __name__ == "__main__":
    main()
