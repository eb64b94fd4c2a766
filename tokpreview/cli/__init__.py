"""CLI entry point for tokpreview."""

import rich_click as click

from .. import __version__

# Import command modules; avoid shadowing module names with command objects
# so that `import tokpreview.cli.<module>` still resolves to the module.
from . import config_cmd as _config_mod
from . import resolve as _resolve_mod
from . import videos as _videos_mod
from . import web as _web_mod
from ._logging import configure_logging


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Show debug logs, including strategy misses")
def cli(verbose: bool):
    """TikTok preview metadata proxy."""
    configure_logging(verbose)


# Register commands
cli.add_command(_resolve_mod.resolve)
cli.add_command(_videos_mod.videos)
cli.add_command(_config_mod.config)
cli.add_command(_web_mod.web)


if __name__ == "__main__":
    cli()
