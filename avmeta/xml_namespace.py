"""The XML namespaces of DIDL-Lite documents and their declaration on a tree."""

from enum import Enum

from lxml import etree


class XMLNamespace(Enum):
    """Namespaces used in DIDL-Lite documents, with their customary prefixes."""

    DIDL_LITE = ("urn:schemas-upnp-org:metadata-1-0/DIDL-Lite/", None)
    DC = ("http://purl.org/dc/elements/1.1/", "dc")
    DLNA = ("urn:schemas-dlna-org:metadata-1-0/", "dlna")
    PV = ("http://www.pv.com/pvns/", "pv")
    UPNP = ("urn:schemas-upnp-org:metadata-1-0/upnp/", "upnp")

    def __init__(self, uri, prefix):
        self.uri = uri
        self.prefix = prefix


def _ascii_fold(text):
    return "".join(chr(ord(c) + 32) if "A" <= c <= "Z" else c for c in text)


def _document_root(node):
    if hasattr(node, "getroot"):
        return node.getroot()
    return node.getroottree().getroot()


def _own_prefixes(element):
    parent = element.getparent()
    inherited = parent.nsmap if parent is not None else {}
    return {
        prefix
        for prefix, uri in element.nsmap.items()
        if prefix not in inherited or inherited[prefix] != uri
    }


def create_namespace(root, ns):
    """Declare ``ns`` on ``root`` and return its ``(prefix, uri)`` pair.

    With ``root`` set to ``None`` the pair is returned without declaring
    anything. Raises ValueError if ``root`` already declares the prefix.
    A default (unprefixed) namespace that no element uses is not kept.
    """
    if root is None:
        return ns.prefix, ns.uri
    if hasattr(root, "getroot"):
        root = root.getroot()
    if ns.prefix in _own_prefixes(root):
        raise ValueError(f"prefix {ns.prefix!r} is already declared on this element")

    keep = [prefix for prefix in root.nsmap if prefix is not None]
    if ns.prefix is not None:
        keep.append(ns.prefix)
    etree.cleanup_namespaces(root, top_nsmap={ns.prefix: ns.uri}, keep_ns_prefixes=keep)
    return ns.prefix, ns.uri


def lookup_namespace(root, ns):
    """Find ``ns`` among the namespaces declared on the document root.

    A prefixed namespace is matched by prefix alone, the unprefixed DIDL-Lite
    namespace by URI; both comparisons ignore ASCII case. Returns the declared
    ``(prefix, uri)`` pair, or ``None``.
    """
    document_root = _document_root(root)
    for prefix, uri in document_root.nsmap.items():
        if prefix is None:
            if ns.prefix is None and _ascii_fold(uri) == _ascii_fold(ns.uri):
                return prefix, uri
            continue
        if ns.prefix is not None and _ascii_fold(prefix) == _ascii_fold(ns.prefix):
            return prefix, uri
    return None


def get_ns(root, ns):
    """Return the document's declaration of ``ns``, declaring it on the root if absent."""
    found = lookup_namespace(root, ns)
    if found is not None:
        return found
    return create_namespace(_document_root(root), ns)