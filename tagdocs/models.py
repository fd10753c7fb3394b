"""Data models for reflection handles and usage descriptors."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ComponentInfo:
    """A loaded component (module or assembly) that anchors documentation lookup."""

    location: str  # primary on-disk path, may be blank
    code_base: str = ""  # origin descriptor, e.g. file:///..., may be blank


@dataclass(frozen=True)
class TypeInfo:
    """Represents a documentable type."""

    full_name: str
    component: ComponentInfo


@dataclass(frozen=True)
class PropertyInfo:
    """Represents a documentable property and the type that declares it."""

    name: str
    declaring_type: TypeInfo


@dataclass(frozen=True)
class UsageDescriptor:
    """Summary and remarks text written for one member."""

    summary: str | None
    remarks: str | None
