"""Logic for computing documentation member ids."""

from tagdocs.models import ComponentInfo, PropertyInfo, TypeInfo


def member_id_for_type(type_info: TypeInfo) -> str:
    """Return the `T:` member id of a type."""
    if type_info is None:
        raise ValueError("type_info must not be None")
    return f"T:{type_info.full_name}"


def member_id_for_property(property_info: PropertyInfo) -> str:
    """Return the `P:` member id of a property, qualified by its declaring type."""
    if property_info is None:
        raise ValueError("property_info must not be None")
    return f"P:{property_info.declaring_type.full_name}.{property_info.name}"


def owner_location(member: TypeInfo | PropertyInfo) -> ComponentInfo:
    """Return the component that declares a type or property."""
    if member is None:
        raise ValueError("member must not be None")
    if isinstance(member, PropertyInfo):
        return member.declaring_type.component
    return member.component
