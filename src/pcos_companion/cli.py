"""CLI entry point for pcos-companion."""

import click

from . import __version__
from .commands import content, quotes, serve
from .config import get_settings
from .logging_config import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="pcos-companion")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level (default: PCOS_COMPANION_LOG_LEVEL or INFO)",
)
@click.pass_context
def main(ctx: click.Context, log_level: str | None):
    """pcos-companion: personal PCOS health-tracking backend.

    Serves the tracking API and lets you browse the bundled reference
    content from the terminal.

    Example usage:

        # Start the API server
        pcos-companion serve --port 8000

        # Browse educational content
        pcos-companion content list --category nutrition
        pcos-companion content show 2

        # Get a motivational quote
        pcos-companion quotes random
    """
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level.upper() if log_level else None
    configure_logging(ctx.obj["log_level"] or get_settings().log_level)


# Register commands
main.add_command(serve)
main.add_command(content)
main.add_command(quotes)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
