"""Adapters that build reflection handles from live Python objects."""

import sys
from types import ModuleType

from tagdocs.models import ComponentInfo, PropertyInfo, TypeInfo

# __spec__.origin values that do not point at a file
_NON_FILE_ORIGINS = {"built-in", "frozen"}


def component_of_module(module: ModuleType | None) -> ComponentInfo:
    """Describe the on-disk location of a module.

    Modules that were never loaded (or have no file) produce blank fields.
    """
    if module is None:
        return ComponentInfo(location="", code_base="")

    location = getattr(module, "__file__", None) or ""
    spec = getattr(module, "__spec__", None)
    origin = getattr(spec, "origin", None) or ""
    if origin in _NON_FILE_ORIGINS:
        origin = ""
    return ComponentInfo(location=location, code_base=origin)


def type_info_from_class(cls: type) -> TypeInfo:
    """Build a TypeInfo for a class."""
    if cls is None:
        raise ValueError("cls must not be None")
    full_name = f"{cls.__module__}.{cls.__qualname__}"
    module = sys.modules.get(cls.__module__)
    return TypeInfo(full_name=full_name, component=component_of_module(module))


def property_info_from_class(cls: type, name: str) -> PropertyInfo:
    """Build a PropertyInfo for `name` as seen from `cls`.

    The declaring type is the first class in the MRO that defines the name itself,
    so inherited properties are attributed to the base class.
    """
    if cls is None:
        raise ValueError("cls must not be None")
    for klass in cls.__mro__:
        if name in vars(klass):
            return PropertyInfo(name=name, declaring_type=type_info_from_class(klass))
    raise AttributeError(f"{cls.__qualname__} has no attribute {name!r}")
