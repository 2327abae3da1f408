import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(log_level: str = "INFO", log_file: Path | None = None, console: Console | None = None) -> None:
    """
    Configures logging for the application.
    """
    handlers: list[logging.Handler] = [
        RichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    ]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
        handlers.append(file_handler)

    logging.basicConfig(
        level=log_level.upper(),
        format="%(message)s",
        handlers=handlers,
        force=True,
    )

    # Quieten down noisy libraries
    logging.getLogger("pydantic").setLevel(logging.WARNING)

