"""Validation of XML documents against an XML schema file."""

import os

from lxml import etree


class XSDData:
    """A compiled XML schema that documents can be checked against."""

    def __init__(self, xsd_file):
        source = os.fspath(xsd_file) if isinstance(xsd_file, os.PathLike) else xsd_file
        try:
            self._schema = etree.XMLSchema(etree.parse(source))
        except (OSError, etree.XMLSyntaxError, etree.XMLSchemaParseError) as exc:
            raise ValueError(f"cannot load XML schema {xsd_file}: {exc}") from exc

    def validate_doc(self, doc):
        """Return True if ``doc`` (an element or element tree) conforms to the schema.

        The document is serialised and read back before validation, so what is
        checked is exactly what would be written out.
        """
        dump = etree.tostring(doc)
        try:
            reparsed = etree.fromstring(dump)
        except etree.XMLSyntaxError:
            return False
        return self._schema.validate(reparsed)