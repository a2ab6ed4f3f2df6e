"""Motivational quote commands."""

import click

from .base import async_command, echo_info, get_storage


@click.group()
def quotes():
    """Show motivational quotes."""
    pass


@quotes.command(name="list")
@click.pass_context
@async_command
async def list_quotes(ctx: click.Context):
    """List all quotes."""
    all_quotes = await get_storage(ctx).motivational_quotes.list_all()
    for quote in all_quotes:
        click.echo(f"{quote.id}. \"{quote.quote}\" - {quote.author} [{quote.category}]")


@quotes.command()
@click.pass_context
@async_command
async def random(ctx: click.Context):
    """Print one quote at random."""
    quote = await get_storage(ctx).motivational_quotes.get_random()
    if quote is None:
        echo_info("No quotes available")
        return
    click.echo(f"\"{quote.quote}\"")
    click.echo(f"  - {quote.author}")
