"""Resolve command."""

import json

import rich_click as click
from rich.table import Table

from ._console import console, status_icon


@click.command()
@click.argument("urls", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print results as JSON")
@click.option("--workers", "-w", type=int, default=None, help="Concurrent resolutions (default: from config)")
def resolve(urls: tuple[str, ...], as_json: bool, workers: int | None):
    """Resolve preview metadata for one or more TikTok URLs."""
    from ..models.config import get_settings
    from ..resolver import build_resolver, resolve_many

    cleaned = [url.strip() for url in urls]
    if any(not url for url in cleaned):
        raise click.UsageError("TikTok URL is required.")

    settings = get_settings()
    try:
        resolver = build_resolver(settings)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    max_workers = workers if workers is not None else settings.hydration.max_concurrency
    results = resolve_many(resolver, cleaned, max_workers=max_workers, isolate_errors=True)

    if as_json:
        payload = [
            {"url": url, **(metadata.model_dump() if metadata else {"error": "TikTok metadata not available."})}
            for url, metadata in zip(cleaned, results)
        ]
        click.echo(json.dumps(payload, indent=2))
    else:
        table = Table(title="TikTok metadata")
        table.add_column("", no_wrap=True)
        table.add_column("URL", overflow="fold")
        table.add_column("Title")
        table.add_column("Author")
        table.add_column("Views", justify="right")
        table.add_column("Source")
        for url, metadata in zip(cleaned, results):
            if metadata is None:
                table.add_row(status_icon(False), url, "[dim]not available[/dim]", "", "", "")
                continue
            table.add_row(
                status_icon(True),
                url,
                metadata.title or "",
                metadata.author or "",
                f"{metadata.views:,}" if metadata.views is not None else "",
                metadata.source or "",
            )
        console.print(table)

    missing = sum(1 for metadata in results if metadata is None)
    if missing:
        raise click.ClickException(f"{missing} of {len(results)} URL(s) had no metadata available")
