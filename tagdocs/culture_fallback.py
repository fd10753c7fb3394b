"""Logic for enumerating locale fallback directory names."""

import locale
from collections.abc import Iterator

INVARIANT_CULTURE = ""

_POSIX_LOCALES = {"C", "POSIX"}


def normalize_culture_name(name: str | None) -> str:
    """Normalize a POSIX locale name to a BCP-47 style tag.

    `en_US.UTF-8` becomes `en-US`; `C`, `POSIX` and unset locales map to the
    invariant culture.
    """
    if not name:
        return INVARIANT_CULTURE
    name = name.split(".", 1)[0].split("@", 1)[0]
    if name in _POSIX_LOCALES:
        return INVARIANT_CULTURE
    return name.replace("_", "-")


def current_culture_name() -> str:
    """Return the ambient culture name.

    Reads the raw LC_CTYPE setting; `locale.getlocale` would turn `C.UTF-8` into
    `en_US.UTF-8`.
    """
    return normalize_culture_name(locale.setlocale(locale.LC_CTYPE))


def culture_fallback_directories(culture: str | None = None) -> Iterator[str]:
    """Yield culture names from most specific to least, excluding the invariant culture.

    `culture` defaults to the ambient culture, read when iteration starts.
    """
    name = normalize_culture_name(culture) if culture is not None else current_culture_name()
    while name != INVARIANT_CULTURE:
        yield name
        name = name.rpartition("-")[0]
