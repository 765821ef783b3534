"""Typer-based command line interface for char-ranges."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List, NoReturn, Optional

import structlog
import typer

from ..config import AppConfig, OutputConfig, dump_default_config, load_config
from ..logging import configure_logging
from ..models import CharRange
from ..paths import runtime_config_dir
from ..ranges import char_ranges, char_ranges_offset
from ..utils.text import is_char_boundary, split_at

app = typer.Typer(help="Inspect characters of UTF-8 files together with their byte ranges")

log = structlog.get_logger("char_ranges.cli")


@app.callback()
def main(ctx: typer.Context, config: Optional[Path] = typer.Option(None, "--config", metavar="PATH")) -> None:
    try:
        ctx.obj = load_config(config)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc
    configure_logging(ctx.obj.logging.normalized_level())


def _current_config(ctx: typer.Context) -> AppConfig:
    config: AppConfig | None = ctx.obj
    return config or AppConfig()


def _fail(message: str) -> NoReturn:
    log.warning("command.rejected", reason=message)
    typer.echo(message, err=True)
    raise typer.Exit(code=2)


def _render(items: Iterable[CharRange], output: OutputConfig, fmt: Optional[str]) -> str:
    style = (fmt or output.format).lower()
    records = [item.to_dict() for item in items]
    if style == "json":
        return json.dumps(records, ensure_ascii=output.ensure_ascii, indent=output.indent)
    if style == "jsonl":
        return "\n".join(json.dumps(record, ensure_ascii=output.ensure_ascii) for record in records)
    if style == "table":
        lines: List[str] = []
        for record in records:
            char = json.dumps(record["char"], ensure_ascii=output.ensure_ascii)
            lines.append(f"{record['start']:>8} {record['end']:>8}  {char}")
        return "\n".join(lines)
    _fail(f"Unknown output format '{style}'")


@app.command()
def ranges(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    start: Optional[int] = typer.Option(None, "--start", help="First byte of the slice to iterate"),
    end: Optional[int] = typer.Option(None, "--end", help="Byte after the last one of the slice"),
    reverse: bool = typer.Option(False, "--reverse", help="Iterate from the back"),
    fmt: Optional[str] = typer.Option(None, "--format", help="Override the configured output format"),
) -> None:
    """Print every character of PATH with its byte range."""
    config = _current_config(ctx)
    data = path.read_bytes()
    first = 0 if start is None else start
    last = len(data) if end is None else end
    if first > last:
        _fail(f"Slice start {first} is past its end {last}")
    try:
        head, _tail = split_at(data, last)
        _prefix, window = split_at(head, first)
    except ValueError as exc:
        _fail(str(exc))
    chars = char_ranges_offset(window, first)
    items = list(reversed(chars)) if reverse else list(chars)
    log.info("ranges.emitted", path=str(path), start=first, end=last, items=len(items))
    rendered = _render(items, config.output, fmt)
    if rendered:
        typer.echo(rendered)


@app.command()
def count(path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False)) -> None:
    """Print the number of characters in PATH."""
    total = char_ranges(path.read_bytes()).count()
    log.info("count.done", path=str(path), chars=total)
    typer.echo(str(total))


@app.command()
def locate(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    byte: int = typer.Argument(..., help="Byte offset to resolve"),
    fmt: Optional[str] = typer.Option(None, "--format", help="Override the configured output format"),
) -> None:
    """Print the character whose byte range contains BYTE."""
    config = _current_config(ctx)
    data = path.read_bytes()
    if byte < 0 or byte >= len(data):
        _fail(f"Byte offset {byte} is outside the file ({len(data)} bytes)")
    position = byte
    while not is_char_boundary(data, position):
        position -= 1
    item = next(char_ranges_offset(data[position:], position))
    log.info("locate.done", path=str(path), byte=byte, start=item.start, end=item.end)
    typer.echo(_render([item], config.output, fmt))


@app.command()
def config_init(
    target: Optional[Path] = typer.Argument(None, help="Where to write the default configuration"),
) -> None:
    """Write the default configuration file."""
    destination = target or runtime_config_dir() / "config.yaml"
    dump_default_config(destination)
    typer.echo(f"Default configuration written to {destination}")


@app.command()
def version() -> None:
    from ..version import __version__

    typer.echo(__version__)


if __name__ == "__main__":  # pragma: no cover
    app()
