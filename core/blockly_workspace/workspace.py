"""
    Workspace — the block graph of one editing session.

    The workspace owns the ordered list of root (top-level) blocks and
    mediates every connection that can change which blocks are roots.

    Invariant
    ─────────
    A root block never hangs beneath another block: its previous
    connection is absent or unconnected. The invariant holds only while
    structural changes go through ``add_root_block``,
    ``remove_root_block`` and ``connect``.

    Each workspace holds:
        • root_blocks  – top-level blocks, insertion / document order
        • config       – parser and serialization options
"""
import io
import uuid
import logging
from typing import Iterator, List, Optional, Tuple

from blockly_api.exceptions import InvalidArgumentError
from blockly_api.factory import BlockFactory
from blockly_api.models.block import Block
from blockly_api.models.connection import Connection, ConnectionType

from blockly_workspace.config import WorkspaceConfig
from blockly_workspace.services.xml_codec import WorkspaceXmlCodec

logger = logging.getLogger(__name__)


class Workspace:
    """
    Keeps track of the root blocks of one workspace document.

    Attributes:
        workspace_id: Unique identifier.
        name:         Human-readable label.
        config:       Parser / serialization / debug options.
    """

    def __init__(self, name: Optional[str] = None,
                 config: Optional[WorkspaceConfig] = None):
        self.workspace_id: str = str(uuid.uuid4())
        self.name: str = name or f"Workspace-{self.workspace_id[:8]}"
        self.config: WorkspaceConfig = config or WorkspaceConfig()

        self._root_blocks: List[Block] = []

    # ── Root blocks ──────────────────────────────────────────────

    def add_root_block(self, block: Block) -> None:
        """
        Add a block to the workspace as a root block.

        Raises:
            InvalidArgumentError: If the block is None, is attached beneath
                another block, or is already a root block.
        """
        if block is None:
            raise InvalidArgumentError("Cannot add a null block as a root block.")
        if block.get_previous_block() is not None:
            raise InvalidArgumentError("Root blocks may not have a previous block.")
        if self._index_of(block) is not None:
            raise InvalidArgumentError("Block is already a root block.")
        self._root_blocks.append(block)

    def remove_root_block(self, block: Block) -> bool:
        """
        Remove a root block.

        Returns:
            True if the block was a root block and has been removed.
        """
        index = self._index_of(block)
        if index is None:
            return False
        del self._root_blocks[index]
        return True

    def get_root_blocks(self) -> Tuple[Block, ...]:
        """Root blocks in order (read-only)."""
        return tuple(self._root_blocks)

    def _index_of(self, block: Optional[Block]) -> Optional[int]:
        # Identity, not equality
        for index, root in enumerate(self._root_blocks):
            if root is block:
                return index
        return None

    # ── Connections ──────────────────────────────────────────────

    def connect(self, a: Connection, b: Connection) -> None:
        """
        Connect two connections, keeping the root set consistent.

        If ``a`` is a previous connection its block stops being a root
        block; otherwise the same applies to ``b``. Only one side is
        checked, ``a`` first.

        Raises:
            InvalidArgumentError: If either connection is None or they
                cannot be connected. Nothing is changed in that case.
        """
        if a is None or b is None:
            raise InvalidArgumentError("Cannot connect a null connection.")
        if not a.can_connect(b):
            raise InvalidArgumentError("Connections may not be connected.")

        if a.get_type() == ConnectionType.PREVIOUS:
            self._detach_root(a.get_block())
        elif b.get_type() == ConnectionType.PREVIOUS:
            self._detach_root(b.get_block())

        a.connect(b)

    def _detach_root(self, block: Optional[Block]) -> None:
        if self.remove_root_block(block) and self.config.debug:
            logger.debug("Workspace %s: removed root block %s before connecting it.",
                         self.workspace_id[:8], block.block_id)

    # ── Traversal ────────────────────────────────────────────────

    def get_all_blocks(self) -> List[Block]:
        """Every block in the workspace, depth-first, root order."""
        return list(self._walk())

    def get_block_by_id(self, block_id: str) -> Optional[Block]:
        for block in self._walk():
            if block.block_id == block_id:
                return block
        return None

    def _walk(self) -> Iterator[Block]:
        stack = list(reversed(self._root_blocks))
        while stack:
            block = stack.pop()
            yield block
            stack.extend(reversed(block.get_children()))

    # ── XML ──────────────────────────────────────────────────────

    def _codec(self) -> WorkspaceXmlCodec:
        return WorkspaceXmlCodec(self.config.parser, self.config.serialization)

    def load_from_xml(self, source, block_factory: BlockFactory) -> None:
        """
        Add every root block of an XML document to this workspace.

        Args:
            source:        File path, bytes, binary file-like object, or the
                           document text itself (see ``load_from_string``).
            block_factory: Factory that creates blocks by type name.

        Raises:
            BlocklyParserError: If the document is malformed or unreadable.
                The workspace may then hold part of the document and should
                be discarded.
        """
        count = self._codec().load(source, block_factory, self.add_root_block)
        logger.info("Workspace %s: loaded %d root blocks (%d total)",
                    self.workspace_id[:8], count, len(self._root_blocks))

    def load_from_string(self, xml: str, block_factory: BlockFactory) -> None:
        """Load from an XML string."""
        self.load_from_xml(xml.encode('utf-8'), block_factory)

    def serialize(self, sink) -> None:
        """
        Write the workspace as XML.

        Args:
            sink: File path or binary file-like object.

        Raises:
            BlocklySerializerError: If writing fails; discard the partial output.
        """
        self._codec().serialize(self._root_blocks, sink)

    def to_xml_string(self) -> str:
        """Serialize the workspace to an XML string."""
        buffer = io.BytesIO()
        self.serialize(buffer)
        return buffer.getvalue().decode(self.config.serialization.encoding)

    # ── Convenience ──────────────────────────────────────────────

    def to_dict(self) -> dict:
        """Serialize workspace metadata (not the blocks)."""
        return {
            'workspace_id': self.workspace_id,
            'name': self.name,
            'root_blocks': len(self._root_blocks),
            'blocks': len(self.get_all_blocks()),
        }

    def __len__(self) -> int:
        return len(self._root_blocks)

    def __contains__(self, block: Block) -> bool:
        return self._index_of(block) is not None

    def __repr__(self) -> str:
        return (
            f"Workspace(id={self.workspace_id[:8]}, "
            f"name='{self.name}', "
            f"root_blocks={len(self._root_blocks)})"
        )
