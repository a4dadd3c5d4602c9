"""
    Streaming access to workspace XML.

    ``XmlPullParser`` turns lxml's ``iterparse`` into a cursor that blocks
    advance one event at a time, so every block reads exactly its own
    subtree and nothing more.
"""
from typing import Optional

from lxml import etree

from .exceptions import BlocklyParserError

XML_NAMESPACE = "http://www.w3.org/1999/xhtml"
ROOT_TAG = "xml"
BLOCK_TAG = "block"


def qname(local: str) -> str:
    """Qualified tag name inside the workspace namespace."""
    return f"{{{XML_NAMESPACE}}}{local}"


def local_name(element) -> Optional[str]:
    """Local part of an element's tag, or None if it cannot be resolved."""
    if element is None or not isinstance(element.tag, str):
        return None
    name = element.tag.rpartition('}')[2]
    # A prefix left in the name was never bound to a namespace
    if not name or ':' in name:
        return None
    return name


class XmlPullParser:
    """
    Cursor over start/end events of an XML document.

    Usage:
        parser = XmlPullParser(stream)
        while parser.next() is not None:
            if parser.event == XmlPullParser.START and parser.name == 'block':
                ...
    """

    START = 'start'
    END = 'end'

    def __init__(self, source, resolve_entities: bool = False,
                 no_network: bool = True, huge_tree: bool = False):
        """
        Args:
            source:           Binary file-like object or file path.
            resolve_entities: Passed through to lxml.
            no_network:       Passed through to lxml.
            huge_tree:        Passed through to lxml.
        """
        self._events = etree.iterparse(
            source,
            events=(self.START, self.END),
            resolve_entities=resolve_entities,
            no_network=no_network,
            huge_tree=huge_tree,
            remove_comments=True,
            remove_pis=True,
        )
        self.event: Optional[str] = None
        self.element = None

    def next(self) -> Optional[str]:
        """Advance to the next event; returns None at the end of the document."""
        try:
            self.event, self.element = next(self._events)
        except StopIteration:
            self.event, self.element = None, None
        return self.event

    @property
    def name(self) -> Optional[str]:
        return local_name(self.element)

    def get_attribute(self, name: str) -> Optional[str]:
        if self.element is None:
            return None
        return self.element.get(name)

    def skip_subtree(self) -> None:
        """Consume events up to the end of the element the cursor starts on."""
        if self.event != self.START:
            raise BlocklyParserError("skip_subtree() must start on an element start.")
        depth = 1
        while depth:
            event = self.next()
            if event is None:
                raise BlocklyParserError("Unexpected end of document.")
            depth += 1 if event == self.START else -1

    def read_text(self) -> str:
        """Consume the current element and return its text content."""
        element = self.element
        self.skip_subtree()
        return element.text or ''

    def release(self) -> None:
        """Drop the finished element and its already-read siblings from memory."""
        element = self.element
        if element is None:
            return
        element.clear()
        while element.getprevious() is not None:
            del element.getparent()[0]
