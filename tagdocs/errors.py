"""Exception types raised by tagdocs."""

from pathlib import Path


class TagDocsError(Exception):
    """Base class for tagdocs errors."""


class DocumentationParseError(TagDocsError):
    """Raised when an XML documentation file cannot be read or parsed."""

    def __init__(self, path: Path | str) -> None:
        """Record the offending file."""
        super().__init__(f"Could not parse XML documentation file: {path}")
        self.path = Path(path)
