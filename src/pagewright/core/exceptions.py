"""Core exceptions for pagewright."""


class PagewrightError(Exception):
    """Base exception for all pagewright errors."""


class ContentQueryError(PagewrightError):
    """Raised when the content query fails and the page pass must abort."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        summary = "; ".join(self.errors) if self.errors else "unknown error"
        super().__init__(f"Content query failed with {len(self.errors)} error(s): {summary}")


class ConfigLoadError(PagewrightError):
    """Raised when a configuration file cannot be loaded or parsed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load or parse config at '{path}': {reason}")


class FrontMatterError(PagewrightError):
    """Raised when a document's front matter cannot be parsed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse front matter at '{path}': {reason}")
