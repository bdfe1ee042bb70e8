"""Command-line interface for the diary service client."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from datetime import date
from pathlib import Path
from typing import Annotated, Any, TypeVar

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .codec import decode_date, decode_status
from .config import Config, load_config
from .exceptions import ConfigurationError, DecodeError
from .infrastructure.file_content_resolver import FileContentResolver
from .models.diary import Confirmation, DiaryRecord, DiaryRequest, Page
from .models.fields import VisibilityStatus
from .sync.diary_client import DiarySyncClient
from .sync.result import Failure, SyncResult
from .utils.logging import configure_logging

T = TypeVar("T")

app = typer.Typer(
    name="diary-sync",
    help="Command-line client for the diary service.",
    no_args_is_help=True,
)

console = Console()

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to diary-sync.yaml", exists=True, dir_okay=False),
]
BaseUrlOption = Annotated[
    str | None,
    typer.Option("--base-url", help="Diary API base URL (overrides config)"),
]
LogLevelOption = Annotated[
    str | None,
    typer.Option("--log-level", help="Log level (DEBUG, INFO, WARN, ERROR)"),
]


def _load(config_path: Path | None, base_url: str | None, log_level: str | None) -> Config:
    try:
        config = load_config(config_path, base_url=base_url, log_level=log_level)
    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/red] {escape(e.message)}")
        if e.suggestion:
            console.print(e.suggestion, markup=False)
        raise typer.Exit(code=2) from e
    configure_logging(config.log_level, config.log_file)
    return config


def _parse_status(value: str) -> VisibilityStatus:
    try:
        return decode_status(value.upper())
    except DecodeError as e:
        raise typer.BadParameter(e.message, param_hint="--status") from e


def _run(config: Config, operation: Callable[[DiarySyncClient], Awaitable[SyncResult[T]]]) -> T:
    async def runner() -> SyncResult[T]:
        async with DiarySyncClient.from_config(config, FileContentResolver()) as client:
            return await operation(client)

    result = asyncio.run(runner())
    if isinstance(result, Failure):
        console.print(f"[red]{escape(result.message)}[/red]")
        raise typer.Exit(code=1)
    return result.value


def _print_confirmation(action: str, confirmation: Confirmation) -> None:
    detail = f": {escape(confirmation.message)}" if confirmation.message else ""
    console.print(f"[green]{action}[/green]{detail}")


def _render_page(page: Page[DiaryRecord]) -> None:
    table = Table(title=f"Diaries (page {page.number})")
    table.add_column("ID", justify="right")
    table.add_column("Title")
    table.add_column("Date")
    table.add_column("Status")
    table.add_column("Liked", justify="center")
    table.add_column("Location")
    for record in page.content:
        table.add_row(
            str(record.diary_id),
            record.title,
            record.date.isoformat(),
            record.status.name,
            "yes" if record.is_liked else "",
            f"{record.latitude:.5f}, {record.longitude:.5f}",
        )
    console.print(table)
    console.print(f"{len(page.content)} shown, {page.total_elements} total")
    if page.has_next:
        console.print(f"More available: --page {page.number + 1}")


@app.command(name="list")
def list_diaries(
    owner_id: Annotated[int, typer.Argument(help="User whose diaries to list")],
    status: Annotated[
        str, typer.Option("--status", "-s", help="PUBLIC, PRIVATE or FOLLOWERS")
    ] = "PUBLIC",
    page: Annotated[int, typer.Option("--page", min=0, help="Zero-based page index")] = 0,
    size: Annotated[
        int | None, typer.Option("--size", min=1, help="Page size (config default)")
    ] = None,
    config_path: ConfigOption = None,
    base_url: BaseUrlOption = None,
    log_level: LogLevelOption = None,
) -> None:
    """List one page of diaries."""
    visibility = _parse_status(status)
    config = _load(config_path, base_url, log_level)
    result = _run(config, lambda client: client.list_diaries(owner_id, visibility, page, size))
    _render_page(result)


@app.command()
def create(
    owner_id: Annotated[int, typer.Argument(help="User creating the diary")],
    title: Annotated[str, typer.Option("--title", "-t", help="Diary title")],
    content: Annotated[str, typer.Option("--content", "-c", help="Diary text")],
    images: Annotated[
        list[Path] | None,
        typer.Argument(help="Image files, uploaded in the given order"),
    ] = None,
    entry_date: Annotated[
        str | None, typer.Option("--date", help="YYYY-MM-DD (default: today)")
    ] = None,
    latitude: Annotated[float, typer.Option("--lat", help="Latitude")] = 0.0,
    longitude: Annotated[float, typer.Option("--lon", help="Longitude")] = 0.0,
    status: Annotated[
        str, typer.Option("--status", "-s", help="PUBLIC, PRIVATE or FOLLOWERS")
    ] = "PUBLIC",
    config_path: ConfigOption = None,
    base_url: BaseUrlOption = None,
    log_level: LogLevelOption = None,
) -> None:
    """Create a diary, attaching image files in order."""
    visibility = _parse_status(status)
    try:
        when = decode_date(entry_date) if entry_date else date.today()
    except DecodeError as e:
        raise typer.BadParameter(e.message, param_hint="--date") from e

    try:
        request = DiaryRequest(
            title=title,
            content=content,
            date=when,
            latitude=latitude,
            longitude=longitude,
            status=visibility,
        )
    except ValidationError as e:
        reason = e.errors(include_url=False)[0]["msg"]
        console.print(f"[red]Invalid diary:[/red] {escape(reason)}")
        raise typer.Exit(code=2) from e

    config = _load(config_path, base_url, log_level)
    references: list[Any] = list(images or [])
    record = _run(config, lambda client: client.create_diary(owner_id, request, references))
    console.print(f"[green]Created diary {record.diary_id}[/green]: {escape(record.title)}")


@app.command()
def delete(
    owner_id: Annotated[int, typer.Argument(help="Diary owner")],
    diary_id: Annotated[int, typer.Argument(help="Diary to delete")],
    config_path: ConfigOption = None,
    base_url: BaseUrlOption = None,
    log_level: LogLevelOption = None,
) -> None:
    """Delete a diary."""
    config = _load(config_path, base_url, log_level)
    confirmation = _run(config, lambda client: client.delete_diary(owner_id, diary_id))
    _print_confirmation(f"Deleted diary {diary_id}", confirmation)


@app.command()
def like(
    owner_id: Annotated[int, typer.Argument(help="Acting user")],
    diary_id: Annotated[int, typer.Argument(help="Diary to like")],
    config_path: ConfigOption = None,
    base_url: BaseUrlOption = None,
    log_level: LogLevelOption = None,
) -> None:
    """Like a diary."""
    config = _load(config_path, base_url, log_level)
    confirmation = _run(config, lambda client: client.like_diary(owner_id, diary_id))
    _print_confirmation(f"Liked diary {diary_id}", confirmation)


@app.command()
def unlike(
    owner_id: Annotated[int, typer.Argument(help="Acting user")],
    diary_id: Annotated[int, typer.Argument(help="Diary to unlike")],
    config_path: ConfigOption = None,
    base_url: BaseUrlOption = None,
    log_level: LogLevelOption = None,
) -> None:
    """Remove a like from a diary."""
    config = _load(config_path, base_url, log_level)
    confirmation = _run(config, lambda client: client.unlike_diary(owner_id, diary_id))
    _print_confirmation(f"Unliked diary {diary_id}", confirmation)


def cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
