# ============================================================================
# SCOPE: GLOBAL
# Description: Parser de respuestas XML de Saferpay.
# ============================================================================
"""Saferpay Response Parser.

Saferpay hosting endpoints answer with a single XML element whose attributes
are the result fields, e.g. ``<IDP MSGTYPE="PayConfirm" ID="..." />``.
Pay complete wraps it in a fixed three-character envelope (``OK:``).
Single responsibility: XML attribute extraction.
"""

from xml.etree import ElementTree

from .data.collection import ParameterCollection
from .exceptions import MalformedResponseError


class XmlAttributeParser:
    """Parses Saferpay attribute-only XML messages.

    Attributes:
        envelope_length: Number of leading characters stripped by ``strip_envelope``.
    """

    def __init__(self, envelope_length: int = 3) -> None:
        self.envelope_length = envelope_length

    def parse_attributes(self, xml_text: str) -> dict[str, str]:
        """Parse a message and return its element's attributes.

        Args:
            xml_text: Raw XML text holding a single element.

        Returns:
            Attribute name to value, namespaces removed from names.

        Raises:
            MalformedResponseError: If the text is not well-formed XML.
        """
        try:
            element = ElementTree.fromstring(xml_text.strip())
        except ElementTree.ParseError as e:
            raise MalformedResponseError(f"Saferpay: Invalid xml received from saferpay! ({e})") from e

        return {self._get_local_name(name): value for name, value in element.attrib.items()}

    def fill(self, collection: ParameterCollection, xml_text: str) -> ParameterCollection:
        """Set every attribute of the message on a collection, or none of them.

        Raises:
            MalformedResponseError: If the text is not well-formed XML.
            SchemaViolationError: If an attribute is not part of the collection's schema.
        """
        return collection.update(self.parse_attributes(xml_text))

    def strip_envelope(self, body: str) -> str:
        """Drop the fixed response prefix (``OK:``) of pay complete answers."""
        return body[self.envelope_length :]

    @staticmethod
    def _get_local_name(name: str) -> str:
        """Get local name from qualified XML name.

        Args:
            name: Qualified name, ``{namespace}local`` or plain.

        Returns:
            Local name without namespace.
        """
        return name.split("}")[-1] if "}" in name else name
