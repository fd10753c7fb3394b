"""Logic for locating the XML documentation file of a component."""

import logging
import os
from pathlib import Path

from tagdocs.culture_fallback import culture_fallback_directories

logger = logging.getLogger(__name__)

if os.name == "nt":
    INVALID_PATH_CHARACTERS = frozenset('"<>|\0' + "".join(chr(c) for c in range(1, 32)))
else:
    INVALID_PATH_CHARACTERS = frozenset("\0")


def has_invalid_path_characters(path: str) -> bool:
    """Return True if the path contains a character the host filesystem rejects."""
    return any(ch in INVALID_PATH_CHARACTERS for ch in path)


def find_documentation_file(
    location: str, culture: str | None = None, extension: str = ".xml"
) -> Path | None:
    """Find the documentation file beside a component, or in a culture subdirectory.

    Returns None when the location is unusable or no candidate exists.
    """
    if not location or not location.strip() or has_invalid_path_characters(location):
        logger.debug("Unusable component location %r", location)
        return None

    component_path = Path(location)
    if not component_path.name:
        # e.g. "/"
        logger.debug("Component location %r names no file", location)
        return None
    directory = component_path.parent
    file_name = component_path.with_suffix(extension).name

    try:
        candidate = directory / file_name
        if candidate.is_file():
            return candidate

        for culture_dir in culture_fallback_directories(culture):
            candidate = directory / culture_dir / file_name
            logger.debug("Probing %s", candidate)
            if candidate.is_file():
                return candidate
    except OSError as exc:
        # e.g. ENAMETOOLONG
        logger.debug("Could not probe documentation file for %s: %s", location, exc)
        return None

    return None
