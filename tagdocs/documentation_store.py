"""Logic for caching parsed XML documentation files per component location."""

import logging
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any

from tagdocs.errors import DocumentationParseError
from tagdocs.find_documentation_file import find_documentation_file
from tagdocs.xml_documentation import XmlDocumentation

logger = logging.getLogger(__name__)


class DocumentationStore:
    """Resolves and caches the documentation file of each component location.

    Each location is probed and parsed at most once. Locations without a usable
    documentation file are cached as None so the filesystem is not probed again.
    Entries are never evicted or refreshed.
    """

    def __init__(
        self,
        culture: str | None = None,
        extension: str = ".xml",
        *,
        raise_on_parse_error: bool = False,
        loader: Callable[[Path], XmlDocumentation] = XmlDocumentation,
    ) -> None:
        """Initialize an empty store.

        Raises ValueError for an extension that does not start with a dot.
        """
        if not extension.startswith(".") or extension == ".":
            raise ValueError(f"Invalid documentation extension {extension!r}")
        self.culture = culture
        self.extension = extension
        self.raise_on_parse_error = raise_on_parse_error
        self.loader = loader
        self._cache: dict[str, XmlDocumentation | None] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "DocumentationStore":
        """Build a store from the `documentation` section of a loaded config."""
        section = config.get("documentation", {})
        return cls(
            culture=section.get("culture"),
            extension=section.get("extension", ".xml"),
            raise_on_parse_error=bool(section.get("raise_on_parse_error", False)),
        )

    def get_documentation(self, location: str) -> XmlDocumentation | None:
        """Return the parsed documentation for a component location, or None."""
        with self._lock:
            if location in self._cache:
                logger.debug("Documentation cache hit for %s", location)
                return self._cache[location]

            documentation = self._load(location)
            self._cache[location] = documentation
            return documentation

    def _load(self, location: str) -> XmlDocumentation | None:
        path = find_documentation_file(location, self.culture, self.extension)
        if path is None:
            logger.debug("No documentation file found for %s", location)
            return None

        try:
            return self.loader(path)
        except DocumentationParseError as exc:
            if self.raise_on_parse_error:
                raise
            logger.warning("%s: %s", exc, exc.__cause__)
            return None

    def __contains__(self, location: object) -> bool:
        return location in self._cache

    def __len__(self) -> int:
        return len(self._cache)
