"""CLI error handling utilities."""

from collections.abc import Generator
from contextlib import contextmanager

import typer
from rich.console import Console

from pagewright.core.exceptions import ConfigLoadError, ContentQueryError, PagewrightError

console = Console(stderr=True)


@contextmanager
def handle_cli_errors(*, debug: bool = False) -> Generator[None, None, None]:
    """Context manager to handle CLI errors gracefully.

    Args:
        debug: If True, print full traceback. If False, print user-friendly error.

    """
    try:
        yield
    except (KeyboardInterrupt, SystemExit):
        raise
    except ContentQueryError as e:
        if debug:
            raise
        console.print(f"[bold red]Content query failed[/bold red] ({len(e.errors)} error(s)); no pages registered.")
        for err in e.errors:
            console.print(f"  - {err}")
        raise typer.Exit(1) from e
    except ConfigLoadError as e:
        if debug:
            raise
        console.print(f"[bold red]Configuration error:[/bold red] {e}")
        raise typer.Exit(1) from e
    except PagewrightError as e:
        if debug:
            raise
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1) from e
