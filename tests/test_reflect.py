"""Tests for building reflection handles from Python objects."""

import sys
from types import ModuleType, SimpleNamespace

import pytest

from tagdocs.reflect import component_of_module, property_info_from_class, type_info_from_class


class Widget:
    """Base widget."""

    @property
    def title(self) -> str:
        """Widget title."""
        return "title"

    class Part:
        pass


class Button(Widget):
    @property
    def label(self) -> str:
        return "label"


def test_type_info_full_name() -> None:
    """Verify that the full name combines module and qualified name."""
    info = type_info_from_class(Widget.Part)
    assert info.full_name == f"{__name__}.Widget.Part"


def test_type_info_component_is_module_file() -> None:
    """Verify that the component location is the defining module's file."""
    info = type_info_from_class(Widget)
    assert info.component.location == sys.modules[__name__].__file__


def test_property_declared_on_base_class() -> None:
    """Verify that inherited properties are attributed to the declaring class."""
    prop = property_info_from_class(Button, "title")
    assert prop.name == "title"
    assert prop.declaring_type.full_name == f"{__name__}.Widget"

    own = property_info_from_class(Button, "label")
    assert own.declaring_type.full_name == f"{__name__}.Button"


def test_unknown_property_raises() -> None:
    """Verify that a missing attribute is reported."""
    with pytest.raises(AttributeError, match="missing"):
        property_info_from_class(Button, "missing")


def test_none_class_is_rejected() -> None:
    """Verify that a missing class fails fast."""
    with pytest.raises(ValueError, match="cls"):
        type_info_from_class(None)  # type: ignore[arg-type]


def test_component_of_module_without_file() -> None:
    """Verify that origin markers are not treated as paths."""
    module = ModuleType("fake")
    module.__spec__ = SimpleNamespace(origin="built-in")  # type: ignore[assignment]
    component = component_of_module(module)
    assert component.location == ""
    assert component.code_base == ""


def test_component_of_module_uses_origin() -> None:
    """Verify that __spec__.origin is kept as the code base."""
    module = ModuleType("fake")
    module.__spec__ = SimpleNamespace(origin="file:///opt/lib/fake.py")  # type: ignore[assignment]
    component = component_of_module(module)
    assert component.location == ""
    assert component.code_base == "file:///opt/lib/fake.py"


def test_component_of_missing_module() -> None:
    """Verify that an unloaded module yields blank fields."""
    component = component_of_module(None)
    assert component.location == ""
    assert component.code_base == ""
