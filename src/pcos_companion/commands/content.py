"""Educational content commands."""

import click

from .base import async_command, echo_error, echo_info, format_table, get_storage


@click.group()
def content():
    """Browse the bundled educational content."""
    pass


@content.command(name="list")
@click.option("--category", "-c", help="Only show this category (case-insensitive)")
@click.pass_context
@async_command
async def list_content(ctx: click.Context, category: str | None):
    """List educational content."""
    repo = get_storage(ctx).educational_content

    if category:
        items = await repo.list_by_category(category)
    else:
        items = await repo.list_all()

    if not items:
        echo_info(f"No content found in category '{category}'" if category else "No content found")
        return

    headers = ["ID", "Title", "Type", "Category"]
    rows = [
        [
            str(item.id),
            item.title[:40] + "..." if len(item.title) > 40 else item.title,
            item.content_type.value,
            item.category,
        ]
        for item in items
    ]

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(items)} item(s)")


@content.command()
@click.argument("content_id", type=int)
@click.pass_context
@async_command
async def show(ctx: click.Context, content_id: int):
    """Show one content item."""
    item = await get_storage(ctx).educational_content.get(content_id)
    if not item:
        echo_error(f"Content ID {content_id} not found")
        ctx.exit(1)

    click.echo()
    click.echo(click.style(item.title, bold=True))
    click.echo("=" * 60)
    click.echo(item.description)
    click.echo()
    click.echo(f"Type: {item.content_type.value}")
    click.echo(f"Category: {item.category}")
    if item.tags:
        click.echo(f"Tags: {', '.join(item.tags)}")
    click.echo(f"Image: {item.image_url}")
    if item.video_url:
        click.echo(f"Video: {item.video_url}")
