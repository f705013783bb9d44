"""CLI entry point for traveljournal."""

import asyncio
from pathlib import Path
from typing import Optional
from uuid import UUID

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from traveljournal.config import load_config
from traveljournal.models.block import EditorBlock
from traveljournal.models.config import Config
from traveljournal.models.content import EditorContent
from traveljournal.models.enums import BlockType, RecommendationCategory
from traveljournal.models.theme import JournalTheme
from traveljournal.services.api_client import APIClient
from traveljournal.services.draft_service import DraftService
from traveljournal.services.exceptions import APIError
from traveljournal.services.journal_service import JournalService
from traveljournal.services.theme_service import ThemeService
from traveljournal.themes.presets import DEFAULT_THEME, SYSTEM_THEMES, get_system_theme
from traveljournal.themes.resolver import badge_style, resolve_block_style
from traveljournal.utils.logging import configure_logging, get_logger


logger = get_logger(__name__)
console = Console()


def _load_config(ctx: click.Context) -> Config:
    """
    Load configuration for the current invocation.

    Raises:
        click.ClickException: If the config file is invalid
    """
    try:
        return load_config(ctx.obj.get("config_path"))
    except ValueError as e:
        raise click.ClickException(str(e))


def _run(coro):
    """Run an API coroutine, turning API errors into a clean CLI failure."""
    try:
        return asyncio.run(coro)
    except APIError as e:
        logger.error("cli_api_error", error=str(e), status_code=e.status_code)
        raise click.ClickException(str(e))


def _parse_trip_id(value: str) -> UUID:
    try:
        return UUID(value)
    except ValueError:
        raise click.BadParameter(f"Not a valid trip id: {value}")


def _swatch(color: str) -> Text:
    text = Text("  ", style=f"on {color}")
    text.append(f" {color}")
    return text


def summarize_block(block: EditorBlock) -> str:
    """One-line description of a block for tabular output."""
    data = block.data
    if block.type is BlockType.MOMENT:
        parts = [p for p in (data.date, data.title) if p]
        summary = " - ".join(parts) or "(untitled moment)"
    elif block.type is BlockType.RECOMMENDATION:
        summary = data.name or "(unnamed)"
        if data.category is not None:
            summary += f" [{data.category.display_name}]"
        if data.rating is not None:
            summary += f" {data.rating.display_name}"
        if data.price_level:
            summary += " " + "$" * data.price_level
    elif block.type is BlockType.PHOTO:
        summary = data.caption or data.image_url or "(no image)"
    elif block.type is BlockType.TIP:
        summary = data.title or data.content or "(empty tip)"
    else:
        summary = "-" * 10

    if block.location is not None:
        summary += f" @ {block.location.name}"
    return summary


def _print_content(title: str, content: EditorContent, theme: JournalTheme) -> None:
    table = Table(title=f"{title} ({theme.name} theme)")
    table.add_column("#", justify="right")
    table.add_column("Type")
    table.add_column("Content")
    table.add_column("Style")

    for block in content.blocks:
        style = resolve_block_style(block, theme)
        if style.badge is not None:
            accent = style.badge.background
        else:
            accent = (
                style.stamp_color
                or style.icon_color
                or style.border_color
                or style.line_color
                or theme.colors.accent
            )
        table.add_row(
            str(block.order),
            block.type.value,
            summarize_block(block),
            _swatch(accent),
        )

    console.print(table)


def _select_theme(slug: Optional[str]) -> JournalTheme:
    if slug is None:
        return DEFAULT_THEME
    theme = get_system_theme(slug)
    if theme is None:
        raise click.BadParameter(
            f"Unknown theme '{slug}'. Built-in themes: "
            + ", ".join(t.slug for t in SYSTEM_THEMES)
        )
    return theme


@click.group()
@click.version_option(version="0.1.0", prog_name="traveljournal")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file (default: ~/.config/traveljournal/config.yaml)",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="TRAVELJOURNAL_LOG_FILE",
    help="JSON log file (default: ~/.cache/traveljournal/logs/traveljournal.log)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], log_file: Optional[Path]):
    """traveljournal: inspect travel journal drafts, published journals and themes."""
    configure_logging(log_file=log_file)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


@cli.command()
@click.option("--offline", is_flag=True, help="List the built-in themes without calling the API")
@click.pass_context
def themes(ctx: click.Context, offline: bool):
    """List available journal themes."""
    if offline:
        available = list(SYSTEM_THEMES)
    else:
        service = ThemeService(APIClient(_load_config(ctx).api))
        available = _run(service.get_system_themes())

    table = Table(title="Journal themes")
    table.add_column("Slug")
    table.add_column("Name")
    table.add_column("System")
    table.add_column("Description")
    for theme in available:
        table.add_row(theme.slug, theme.name, "yes" if theme.is_system else "no", theme.description or "")
    console.print(table)


@cli.command()
@click.argument("slug")
@click.option("--offline", is_flag=True, help="Only look at the built-in themes")
@click.pass_context
def theme(ctx: click.Context, slug: str, offline: bool):
    """Show the palette and block styles of theme SLUG."""
    if offline:
        selected = _select_theme(slug)
    else:
        service = ThemeService(APIClient(_load_config(ctx).api))
        selected = _run(service.get_theme_by_slug(slug))

    click.echo(f"{selected.name} ({selected.slug})")
    if selected.description:
        click.echo(selected.description)

    palette = Table(title="Colors")
    palette.add_column("Role")
    palette.add_column("Color")
    for role, color in selected.colors.model_dump().items():
        palette.add_row(role, _swatch(color))
    console.print(palette)

    badges = Table(title="Recommendation badges")
    badges.add_column("Category")
    badges.add_column("Background")
    badges.add_column("Text")
    for category in RecommendationCategory:
        badge = badge_style(selected.blocks.recommendation, category)
        badges.add_row(category.display_name, _swatch(badge.background), _swatch(badge.text))
    console.print(badges)

    typography = selected.typography
    click.echo(
        f"Fonts: heading={typography.heading_font} body={typography.body_font} "
        f"label={typography.label_font}"
    )


@cli.command()
@click.argument("trip_id")
@click.option("--theme", "theme_slug", help="Built-in theme used to resolve block styles")
@click.pass_context
def draft(ctx: click.Context, trip_id: str, theme_slug: Optional[str]):
    """Show the draft blocks of trip TRIP_ID."""
    trip_uuid = _parse_trip_id(trip_id)
    selected = _select_theme(theme_slug)
    service = DraftService(APIClient(_load_config(ctx).api))

    logger.info("draft_command_started", trip_id=trip_id)
    response = _run(service.get_draft(trip_uuid))

    if not response.blocks:
        click.echo("Draft is empty.")
        return

    _print_content(f"Draft {trip_uuid}", response.content, selected)
    if response.last_updated_at is not None:
        click.echo(f"Last updated: {response.last_updated_at.isoformat()}")


@cli.command()
@click.argument("trip_id")
@click.option("--theme", "theme_slug", help="Built-in theme used to resolve block styles")
@click.pass_context
def journal(ctx: click.Context, trip_id: str, theme_slug: Optional[str]):
    """Show the published journal of trip TRIP_ID."""
    trip_uuid = _parse_trip_id(trip_id)
    selected = _select_theme(theme_slug)
    service = JournalService(APIClient(_load_config(ctx).api))

    logger.info("journal_command_started", trip_id=trip_id)
    content = _run(service.get_journal_content(trip_uuid))

    if not content.blocks:
        click.echo("Journal has no published entries.")
        return

    _print_content(f"Journal {trip_uuid}", content, selected)


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
