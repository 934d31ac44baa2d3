"""Parsing of LastChange event documents from AVTransport and RenderingControl."""

import logging

from lxml import etree

from .value_util import value_from_string
from .xml_util import get_attribute_content, get_element, get_uint_attribute

_log = logging.getLogger(__name__)


class LastChangeParseError(ValueError):
    """The LastChange document is not well-formed XML."""


def _instance_node(root, instance_id):
    for node in root:
        if not isinstance(node.tag, str):
            continue
        if (
            etree.QName(node).localname == "InstanceID"
            and get_uint_attribute(node, "val", 0) == instance_id
        ):
            return node
    return None


def _read_state_variable(instance_node, name, value_type):
    """Return ``(found, value)`` for the state variable ``name``."""
    variable_node = get_element(instance_node, name)
    if variable_node is None:
        return False, None

    text = get_attribute_content(variable_node, "val")
    if text is None:
        _log.warning('No value provided for variable "%s" in LastChange event', name)
        return False, None

    try:
        return True, value_from_string(value_type, text)
    except ValueError as exc:
        _log.warning("Error converting value of %s: %s", name, exc)
        return False, None


class LastChangeParser:
    """Reads state variables out of LastChange event XML."""

    def parse_last_change(self, instance_id, last_change_xml, variables):
        """Read the requested state variables of one AV instance.

        ``variables`` maps state variable names to value types as accepted by
        :func:`avmeta.value_util.value_from_string`; an iterable of
        ``(name, type)`` pairs works too. Returns a dict holding the variables
        that the instance carries, or ``None`` if the event does not mention
        the instance at all. Raises :class:`LastChangeParseError` if the XML
        cannot be parsed.
        """
        if last_change_xml is None:
            raise TypeError("last_change_xml must not be None")

        data = (
            last_change_xml.encode("utf-8")
            if isinstance(last_change_xml, str)
            else last_change_xml
        )
        try:
            root = etree.fromstring(data, etree.XMLParser(resolve_entities=False))
        except etree.XMLSyntaxError as exc:
            raise LastChangeParseError("Could not parse LastChange xml") from exc

        instance_node = _instance_node(root, instance_id)
        if instance_node is None:
            return None

        pairs = variables.items() if hasattr(variables, "items") else variables
        values = {}
        for name, value_type in pairs:
            found, value = _read_state_variable(instance_node, name, value_type)
            if found:
                values[name] = value
        return values