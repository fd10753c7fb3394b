"""Logic for building usage descriptors from XML documentation."""

import logging

from tagdocs.documentation_store import DocumentationStore
from tagdocs.member_id import member_id_for_property, member_id_for_type, owner_location
from tagdocs.models import ComponentInfo, PropertyInfo, TypeInfo, UsageDescriptor
from tagdocs.resolve_component_location import resolve_component_location

logger = logging.getLogger(__name__)


class UsageDescriptorFactory:
    """Creates usage descriptors for types and properties.

    A descriptor is returned whenever the documentation file has an entry for the
    member, even if its summary and remarks are empty.
    """

    def __init__(self, store: DocumentationStore) -> None:
        self.store = store

    def create_descriptor(self, type_info: TypeInfo) -> UsageDescriptor | None:
        """Return the usage descriptor of a type, or None if it is undocumented."""
        member_id = member_id_for_type(type_info)
        return self._create(owner_location(type_info), member_id)

    def create_descriptor_for_property(
        self, property_info: PropertyInfo
    ) -> UsageDescriptor | None:
        """Return the usage descriptor of a property, or None if it is undocumented."""
        member_id = member_id_for_property(property_info)
        return self._create(owner_location(property_info), member_id)

    def _create(self, component: ComponentInfo, member_id: str) -> UsageDescriptor | None:
        location = resolve_component_location(component)
        if location is None:
            return None

        documentation = self.store.get_documentation(location)
        if documentation is None or not documentation.has_documentation(member_id):
            logger.debug("No documentation for %s", member_id)
            return None

        return UsageDescriptor(
            summary=documentation.get_summary(member_id),
            remarks=documentation.get_remarks(member_id),
        )
