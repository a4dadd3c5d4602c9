"""
    XML load / save of a workspace's root blocks.

    Loading is a single forward pass over parse events: every top-level
    ``<block>`` element is handed to ``Block.from_xml`` which consumes its
    own subtree, so no document-wide tree is needed. Saving streams the
    root blocks through lxml's incremental writer.

    Document shape:
        <xml xmlns="http://www.w3.org/1999/xhtml">
          <block type="..." id="..." x="..." y="...">...</block>
          ...
        </xml>
"""
import io
import os
import logging
from contextlib import contextmanager
from typing import Callable, Iterable, Optional

from lxml import etree

from blockly_api.exceptions import BlocklyParserError, BlocklySerializerError
from blockly_api.factory import BlockFactory
from blockly_api.models.block import Block
from blockly_api.xml import XmlPullParser, XML_NAMESPACE, ROOT_TAG, BLOCK_TAG, qname

from blockly_workspace.config import ParserConfig, SerializationConfig

logger = logging.getLogger(__name__)


@contextmanager
def _open_source(source):
    """
    Yield a binary stream; paths are opened and closed here, streams are left open.
    A string starting with ``<`` is taken as the document itself.
    """
    if isinstance(source, str) and source.lstrip().startswith('<'):
        # Document text rather than a path
        yield io.BytesIO(source.encode('utf-8'))
    elif isinstance(source, (str, os.PathLike)):
        with open(source, 'rb') as stream:
            yield stream
    elif isinstance(source, (bytes, bytearray)):
        yield io.BytesIO(source)
    else:
        yield source


class WorkspaceXmlCodec:
    """
    Reads and writes workspace documents.

    Usage:
        codec = WorkspaceXmlCodec()
        codec.load('program.xml', factory, workspace.add_root_block)
        codec.serialize(workspace.get_root_blocks(), 'program.xml')
    """

    def __init__(self, parser_config: Optional[ParserConfig] = None,
                 serialization_config: Optional[SerializationConfig] = None):
        self.parser_config = parser_config or ParserConfig()
        self.serialization_config = serialization_config or SerializationConfig()

    # ── Load ─────────────────────────────────────────────────────

    def load(self, source, block_factory: BlockFactory,
             add_root_block: Callable[[Block], None]) -> int:
        """
        Parse a document and pass each top-level block to ``add_root_block``.

        Args:
            source:         File path, document string, bytes, or binary file-like object.
            block_factory:  Factory used to create blocks by type name.
            add_root_block: Receiver of every parsed root block, in document order.

        Returns:
            Number of root blocks loaded.

        Raises:
            BlocklyParserError: Malformed document, unknown block type, or I/O failure.
                The receiver may already hold some blocks when this is raised.
        """
        count = 0
        try:
            with _open_source(source) as stream:
                parser = XmlPullParser(
                    stream,
                    resolve_entities=self.parser_config.resolve_entities,
                    no_network=self.parser_config.no_network,
                    huge_tree=self.parser_config.huge_tree,
                )
                event = parser.next()
                while event is not None:
                    if event == XmlPullParser.START:
                        name = parser.name
                        if name is None:
                            raise BlocklyParserError("Malformed XML; aborting.")
                        if name.lower() == BLOCK_TAG:
                            add_root_block(Block.from_xml(parser, block_factory))
                            parser.release()
                            count += 1
                    event = parser.next()
        except (etree.LxmlError, OSError) as exc:
            raise BlocklyParserError(f"Could not read workspace XML: {exc}") from exc

        logger.info("Loaded %d root blocks", count)
        return count

    # ── Serialize ────────────────────────────────────────────────

    def serialize(self, blocks: Iterable[Block], sink) -> None:
        """
        Write ``blocks`` as root blocks of a new document.

        Args:
            blocks: Root blocks in the order they are written.
            sink:   File path or binary file-like object. Streams are flushed, not closed.

        Raises:
            BlocklySerializerError: On any write or encoding failure. The sink may hold
                a partial document afterwards.
        """
        config = self.serialization_config
        count = 0
        try:
            with etree.xmlfile(sink, encoding=config.encoding) as writer:
                if config.xml_declaration:
                    writer.write_declaration()
                with writer.element(qname(ROOT_TAG), nsmap={None: XML_NAMESPACE}):
                    for block in blocks:
                        block.serialize(writer, True)
                        count += 1
                writer.flush()
        except (etree.LxmlError, OSError, LookupError, ValueError) as exc:
            # ValueError: text lxml refuses to write (control characters);
            # LookupError: unknown output encoding
            raise BlocklySerializerError(f"Could not write workspace XML: {exc}") from exc

        logger.info("Serialized %d root blocks", count)
