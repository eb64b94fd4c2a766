"""Catalog hydration command."""

import json
from contextlib import nullcontext

import rich_click as click
from rich.table import Table

from ._console import console


@click.command()
@click.option("--json", "as_json", is_flag=True, default=False, help="Print hydrated catalog as JSON")
@click.option("--placeholders", is_flag=True, default=False, help="Show the catalog without resolving")
def videos(as_json: bool, placeholders: bool):
    """Show the highlight catalog with resolved titles, covers and views."""
    from ..catalog import load_highlights
    from ..hydration import hydrate_videos
    from ..models.config import get_settings
    from ..resolver import build_resolver

    try:
        highlights = load_highlights()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    if not placeholders:
        settings = get_settings()
        try:
            resolver = build_resolver(settings)
        except ValueError as e:
            raise click.ClickException(str(e)) from e

        # Keep stdout clean for --json
        status = nullcontext() if as_json else console.status(f"Resolving {len(highlights)} videos...")
        with status:
            highlights = hydrate_videos(
                highlights,
                resolver,
                max_workers=settings.hydration.max_concurrency,
                platform_name=settings.hydration.platform_name,
                min_title_length=settings.hydration.min_title_length,
            )

    if as_json:
        click.echo(json.dumps([video.model_dump() for video in highlights], indent=2))
        return

    table = Table(title="Video highlights")
    table.add_column("Title")
    table.add_column("Views", justify="right")
    table.add_column("Link", overflow="fold")
    for video in highlights:
        table.add_row(video.title or "[dim](placeholder)[/dim]", video.views, video.link)
    console.print(table)
