"""Logic for reading compiler-generated XML documentation files.

The file layout is::

    <doc>
      <members>
        <member name="T:Foo.Bar">
          <summary>...</summary>
          <remarks>...</remarks>
        </member>
      </members>
    </doc>
"""

import logging
from pathlib import Path

from lxml import etree

from tagdocs.errors import DocumentationParseError

logger = logging.getLogger(__name__)


def _make_parser() -> etree.XMLParser:
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
    )


def element_text(element: etree._Element | None) -> str | None:
    """Return the trimmed text of an element and its descendants."""
    if element is None:
        return None
    return "".join(element.itertext()).strip()


class XmlDocumentation:
    """An index of the `member` entries of one XML documentation file."""

    def __init__(self, path: Path | str) -> None:
        """Parse the file and index its members by name."""
        self.path = Path(path)
        try:
            tree = etree.parse(str(self.path), _make_parser())
        except (etree.XMLSyntaxError, OSError) as exc:
            raise DocumentationParseError(self.path) from exc

        self.members: dict[str, etree._Element] = {}
        members_element = tree.getroot().find("members")
        if members_element is None:
            logger.debug("%s has no members element", self.path)
            return

        for member in members_element.iterchildren("member"):
            name = member.get("name")
            if name is None:
                continue
            # First entry wins.
            self.members.setdefault(name, member)

    def _member(self, member_id: str) -> etree._Element | None:
        return self.members.get(member_id)

    def has_documentation(self, member_id: str) -> bool:
        """Return True if the file has an entry for the member id."""
        return self._member(member_id) is not None

    def get_summary(self, member_id: str) -> str | None:
        """Return the trimmed summary text for the member id, if any."""
        member = self._member(member_id)
        if member is None:
            return None
        return element_text(member.find("summary"))

    def get_remarks(self, member_id: str) -> str | None:
        """Return the trimmed remarks text for the member id, if any."""
        member = self._member(member_id)
        if member is None:
            return None
        return element_text(member.find("remarks"))

    def __len__(self) -> int:
        return len(self.members)
