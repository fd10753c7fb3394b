"""Logic for turning a component description into a filesystem path."""

import logging
import re
from urllib.parse import unquote, urlsplit

from tagdocs.models import ComponentInfo

logger = logging.getLogger(__name__)

# /C:/dir/file.dll as produced by file:///C:/dir/file.dll
_DRIVE_PATH = re.compile(r"^/[A-Za-z]:[/\\]")


def decode_code_base(code_base: str) -> str:
    """Decode an origin descriptor (usually a file: URI) into a path.

    The scheme and authority are stripped and the path is percent-decoded. Bare
    paths are percent-decoded as well.
    """
    parts = urlsplit(code_base)
    # A single letter scheme is a Windows drive, not a URI.
    if not parts.scheme or len(parts.scheme) == 1:
        return unquote(code_base)

    path = unquote(parts.path)
    if _DRIVE_PATH.match(path):
        path = path[1:]
    elif parts.netloc and parts.netloc != "localhost":
        # UNC share
        path = f"//{parts.netloc}{path}"
    return path


def resolve_component_location(component: ComponentInfo) -> str | None:
    """Return the component's on-disk path, or None when it cannot be determined."""
    if component is None:
        raise ValueError("component must not be None")

    location = component.location
    if location.strip():
        return location

    if not component.code_base.strip():
        logger.debug("Component has neither a location nor a code base")
        return None

    location = decode_code_base(component.code_base)
    if not location.strip():
        logger.debug("Could not decode code base %r", component.code_base)
        return None
    return location
