"""Helpers for reading and editing the elements of DIDL-Lite style XML trees."""

import copy
import re
import string

from lxml import etree

from .xml_namespace import get_ns

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_C_INTEGER = re.compile(
    r"[ \t\n\v\f\r]*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)"
)
_DECIMAL = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_UINT64_MAX = (1 << 64) - 1
_BOOLEAN_WORDS = frozenset({"true", "yes", "false", "no", "0", "1"})


def _fold(text):
    return text.translate(_ASCII_LOWER)


def _wrap(value, bits, signed):
    value &= (1 << bits) - 1
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _as_element(node):
    return node.getroot() if hasattr(node, "getroot") else node


def _local_name(name):
    return etree.QName(name).localname


def _is_element(node):
    return isinstance(node.tag, str)


def _c_integer(text):
    """Sign and magnitude of the leading base-0 integer; (1, 0) if none."""
    match = _C_INTEGER.match(text)
    if not match:
        return 1, 0
    sign = -1 if match.group(1) == "-" else 1
    digits = match.group(2)
    if digits[:2] in ("0x", "0X"):
        magnitude = int(digits[2:], 16)
    elif digits.startswith("0"):
        magnitude = int(digits, 8)
    else:
        magnitude = int(digits)
    return sign, magnitude


def _strtoll(text):
    sign, magnitude = _c_integer(text)
    return min(max(sign * magnitude, _INT64_MIN), _INT64_MAX)


def _strtoull(text):
    sign, magnitude = _c_integer(text)
    if magnitude > _UINT64_MAX:
        return _UINT64_MAX
    return (sign * magnitude) & _UINT64_MAX


def _atoi(text):
    match = _DECIMAL.match(text)
    if not match:
        return 0
    value = min(max(int(match.group(1)), _INT64_MIN), _INT64_MAX)
    return _wrap(value, 32, True)


def get_element(node, *args):
    """Descend through children named by ``args`` (ASCII case-insensitive).

    Returns the element reached, or ``None`` if some name is missing. With no
    names the node itself is returned.
    """
    node = _as_element(node)
    for name in args:
        wanted = _fold(name)
        for child in node:
            if _is_element(child) and _fold(_local_name(child)) == wanted:
                node = child
                break
        else:
            return None
    return node


def get_child_elements_by_name(node, name):
    """All direct child elements whose local name is exactly ``name``."""
    return [
        child
        for child in _as_element(node)
        if _is_element(child) and _local_name(child) == name
    ]


def get_child_element_content(node, child_name):
    """Text at the start of the named child, or ``None``."""
    child = get_element(node, child_name)
    if child is None:
        return None
    return child.text or None


def get_uint_child_element(node, child_name, default_value):
    """The named child's content as an unsigned 32-bit integer."""
    content = get_child_element_content(node, child_name)
    if content is None:
        return default_value
    return _wrap(_strtoull(content), 32, False)


def get_uint64_child_element(node, child_name, default_value):
    """The named child's content as an unsigned 64-bit integer."""
    content = get_child_element_content(node, child_name)
    if content is None:
        return default_value
    return _strtoull(content)


def get_attribute_content(node, attribute_name):
    """Value of the first attribute whose local name is ``attribute_name``."""
    for key, value in _as_element(node).attrib.items():
        if _local_name(key) == attribute_name:
            return value
    return None


def get_boolean_attribute(node, attribute_name):
    """Read an attribute as a boolean; ``False`` when it is absent."""
    content = get_attribute_content(node, attribute_name)
    if content is None:
        return False
    folded = _fold(content)
    if folded in ("true", "yes"):
        return True
    if folded in ("false", "no"):
        return False
    return _atoi(content) != 0


def get_int64_attribute(node, attribute_name, default_value):
    """Read an attribute as a signed 64-bit integer (C base-0 notation)."""
    content = get_attribute_content(node, attribute_name)
    if content is None:
        return default_value
    return _strtoll(content)


def get_long_attribute(node, attribute_name, default_value):
    """Read an attribute as a signed long integer."""
    return get_int64_attribute(node, attribute_name, default_value)


def get_int_attribute(node, attribute_name, default_value):
    """Read an attribute as a signed 32-bit integer."""
    content = get_attribute_content(node, attribute_name)
    if content is None:
        return default_value
    return _wrap(_strtoll(content), 32, True)


def get_uint_attribute(node, attribute_name, default_value):
    """Read an attribute as an unsigned 32-bit integer."""
    content = get_attribute_content(node, attribute_name)
    if content is None:
        return default_value
    return _wrap(_strtoll(content), 32, False)


def set_child(parent_node, ns, name, value):
    """Set the text of the named child, creating it in namespace ``ns`` if needed.

    Any existing content of the child is replaced. Returns the child.
    """
    parent_node = _as_element(parent_node)
    node = get_element(parent_node, name)
    if node is None:
        _prefix, uri = get_ns(parent_node, ns)
        node = etree.SubElement(parent_node, etree.QName(uri, name).text)
    for child in list(node):
        node.remove(child)
    node.text = value
    return node


def unset_child(parent_node, name):
    """Remove the named child, keeping any text that followed it."""
    node = get_element(parent_node, name)
    if node is None:
        return
    parent = node.getparent()
    tail = node.tail
    if tail:
        previous = node.getprevious()
        if previous is not None:
            previous.tail = (previous.tail or "") + tail
        else:
            parent.text = (parent.text or "") + tail
    parent.remove(node)


def verify_attribute_is_boolean(node, attribute_name):
    """True if the attribute holds one of true/yes/false/no/0/1."""
    content = get_attribute_content(node, attribute_name)
    if content is None:
        return False
    return _fold(content) in _BOOLEAN_WORDS


def get_child_string(parent_node, name):
    """Serialise the named child without formatting; ``None`` if absent."""
    node = get_element(parent_node, name)
    if node is None:
        return None
    return etree.tostring(node, encoding="unicode", with_tail=False)


def get_attributes_map(node):
    """Map of attribute local names to their values."""
    return {
        _local_name(key): value for key, value in _as_element(node).attrib.items()
    }


def _same_text(first, second):
    return (first or "") == (second or "")


def node_deep_equal(first, second):
    """Compare two nodes by local name, attributes, text and children."""
    if first is None and second is None:
        return True
    if first is None or second is None:
        return False

    if not (_is_element(first) and _is_element(second)):
        return first.tag is second.tag and _same_text(first.text, second.text)

    if _local_name(first) != _local_name(second):
        return False
    if get_attributes_map(first) != get_attributes_map(second):
        return False
    if not _same_text(first.text, second.text):
        return False

    first_children = list(first)
    second_children = list(second)
    if len(first_children) != len(second_children):
        return False
    return all(
        node_deep_equal(a, b) and _same_text(a.tail, b.tail)
        for a, b in zip(first_children, second_children)
    )


def find_node(haystack, needle):
    """First node in ``haystack`` (depth first, itself included) equal to ``needle``."""
    haystack = _as_element(haystack)
    if node_deep_equal(haystack, needle):
        return haystack
    for child in haystack:
        found = find_node(child, needle)
        if found is not None:
            return found
    return None


def copy_node(node):
    """A detached deep copy of ``node``, without its trailing text."""
    duplicate = copy.deepcopy(_as_element(node))
    duplicate.tail = None
    return duplicate


def set_prop(node, name, value):
    """Set attribute ``name``; non-string values are written in decimal form."""
    if isinstance(value, bool):
        text = str(int(value))
    elif isinstance(value, str):
        text = value
    else:
        text = str(value)
    _as_element(node).set(name, text)