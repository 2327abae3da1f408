"""Command line interface for pagewright."""

from collections import Counter
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from pagewright.cli.errorhandler import handle_cli_errors
from pagewright.core.config import PagewrightConfig
from pagewright.core.exceptions import ContentQueryError
from pagewright.core.i18n import LocaleConfig
from pagewright.core.logging import setup_logging
from pagewright.core.pages import group_tags, select_blog_posts, select_released
from pagewright.core.pipeline import create_pages
from pagewright.core.slugs import derive_slug, slug_to_anchor
from pagewright.core.types import ContentQuery
from pagewright.infra.navigation import SidebarNavigation
from pagewright.infra.sinks import ManifestSink
from pagewright.infra.source import FilesystemContentSource

app = typer.Typer(name="pagewright", help="Generate the page list of a documentation and blog site.")

console = Console()

SiteRoot = Annotated[
    Path,
    typer.Option("--site-root", "-s", help="Site root containing .pagewright.toml.", file_okay=False),
]
Debug = Annotated[bool, typer.Option("--debug", help="Show full tracebacks on errors.")]


@app.callback()
def main(
    log_level: Annotated[str, typer.Option("--log-level", help="Logging level.")] = "INFO",
    log_file: Annotated[Path | None, typer.Option("--log-file", help="Also write logs to this file.")] = None,
) -> None:
    """Configure logging for every command."""
    setup_logging(log_level, log_file)


def _page_kind(path: str) -> str:
    if path == "/blog" or path.startswith("/blog/page/"):
        return "blog index"
    if path.startswith("/blog/tags/"):
        return "tag"
    if "/blog/" in path:
        return "blog post"
    return "docs"


@app.command()
def build(
    site_root: SiteRoot = Path("."),
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Manifest file to write.")] = None,
    debug: Debug = False,
) -> None:
    """Query the site's content and write the page manifest."""
    with handle_cli_errors(debug=debug):
        config = PagewrightConfig.load(site_root.resolve())
        locales = LocaleConfig.load(config.paths.abs_i18n_file)
        source = FilesystemContentSource.from_config(config, locales)
        navigation = SidebarNavigation.load(config.paths.abs_nav_file)
        sink = ManifestSink(output or config.paths.abs_manifest_file)

        pages = create_pages(source, sink, navigation, config)
        manifest = sink.flush()

    table = Table(title="Registered pages")
    table.add_column("Kind", style="bold cyan")
    table.add_column("Pages", justify="right")
    for kind, count in sorted(Counter(_page_kind(page.path) for page in pages).items()):
        table.add_row(kind, str(count))
    console.print(table)
    console.print(f"[bold green]Wrote {len(pages)} pages to {manifest}[/bold green]")


@app.command()
def slug(
    relative_path: Annotated[str, typer.Argument(help="File path relative to its collection root.")],
    collection: Annotated[str, typer.Option("--collection", "-c", help="Source collection name.")] = "docs",
    locale: Annotated[
        list[str] | None, typer.Option("--locale", "-l", help="Configured locale code (repeatable).")
    ] = None,
) -> None:
    """Show the slug, locale, and anchor derived for a file."""
    result = derive_slug(relative_path, collection, LocaleConfig.from_codes(locale or []))
    if result.slug is None:
        console.print(f"[yellow]No slug: {relative_path!r} in {collection!r} is not published.[/yellow]")
        raise typer.Exit(1)

    table = Table(show_header=False)
    table.add_column("Field", style="bold cyan")
    table.add_column("Value")
    table.add_row("slug", result.slug)
    table.add_row("anchor", slug_to_anchor(result.slug) or "")
    table.add_row("locale", result.locale or "")
    if result.package:
        table.add_row("title", result.title or "")
        table.add_row("package", "yes")
    console.print(table)


@app.command()
def tags(site_root: SiteRoot = Path("."), debug: Debug = False) -> None:
    """List the tag groups of released blog posts."""
    with handle_cli_errors(debug=debug):
        config = PagewrightConfig.load(site_root.resolve())
        locales = LocaleConfig.load(config.paths.abs_i18n_file)
        result = FilesystemContentSource.from_config(config, locales).query(ContentQuery(limit=config.query.limit))
        if not result.ok:
            raise ContentQueryError(result.errors)

    groups = group_tags(select_released(select_blog_posts(result.items)))
    table = Table(title="Tag groups")
    table.add_column("Key", style="bold cyan")
    table.add_column("Tags")
    for group in groups:
        table.add_row(group.key, ", ".join(group.tags))
    console.print(table)


if __name__ == "__main__":
    app()
