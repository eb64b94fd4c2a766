"""Config commands."""

import json

import rich_click as click
from rich.syntax import Syntax

from ..config import get_catalog_path, get_config_path, get_data_dir, load_config, save_config
from ._console import console, status_icon


@click.group()
def config():
    """Manage configuration."""
    pass


@config.command("show")
@click.argument("section", required=False, type=click.Choice(["relay", "resolver", "hydration", "paths"]))
def config_show(section: str | None):
    """Show effective settings (defaults merged with config.json)."""
    from pydantic import ValidationError

    from ..models.config import TokPreviewConfig

    try:
        settings = TokPreviewConfig.model_validate(load_config())
    except ValidationError as e:
        raise click.ClickException(f"Invalid configuration in {get_config_path()}: {e}") from e

    data = settings.model_dump()
    if section:
        data = data[section]
    console.print(Syntax(json.dumps(data, indent=2), "json", theme="monokai"))


@config.command("path")
def config_path():
    """Show config file, data dir and catalog override locations."""
    config_file = get_config_path()
    catalog_file = get_catalog_path()
    console.print(f"{status_icon(config_file.exists())} config:  {config_file}", soft_wrap=True)
    console.print(f"  data:    {get_data_dir()}", soft_wrap=True)
    console.print(f"{status_icon(catalog_file.exists())} catalog: {catalog_file}", soft_wrap=True)


@config.command("set")
@click.argument("key")
@click.argument("value")
def config_set(key: str, value: str):
    """Set a configuration value (e.g., relay.timeout_seconds 10)."""
    from pydantic import ValidationError

    from ..models.config import TokPreviewConfig

    cfg = load_config()

    parts = key.split(".")
    target = cfg
    for part in parts[:-1]:
        if not isinstance(target.get(part), dict):
            target[part] = {}
        target = target[part]

    # Parse value (try as JSON, fall back to string)
    try:
        parsed_value = json.loads(value)
    except json.JSONDecodeError:
        parsed_value = value

    target[parts[-1]] = parsed_value

    try:
        TokPreviewConfig.model_validate(cfg)
    except ValidationError as e:
        raise click.ClickException(f"Invalid value for {key}: {e.errors()[0]['msg']}") from e

    save_config(cfg)
    console.print(f"Set {key} = {parsed_value}")
