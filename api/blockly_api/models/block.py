"""
    Block model - a node of the workspace graph.
"""
import uuid
from typing import Any, Dict, List, Optional, Sequence, TYPE_CHECKING

from .connection import Connection, ConnectionType
from .field import Field
from .input import Input, InputType
from ..exceptions import BlocklyParserError
from ..xml import XmlPullParser, qname

if TYPE_CHECKING:
    from ..factory import BlockFactory


class Block:
    """
    A typed node with optional previous/next/output connections and an
    ordered list of inputs.

    A block is attached beneath another block when its previous (or output)
    connection is connected; otherwise it is top-level.
    """

    def __init__(
            self,
            block_type: str,
            block_id: Optional[Any] = None,
            inputs: Optional[Sequence[Input]] = None,
            previous_connection: Optional[Connection] = None,
            next_connection: Optional[Connection] = None,
            output_connection: Optional[Connection] = None,
    ):
        """
        Initialize a block.

        Args:
            block_type: Name of the block definition
            block_id: Unique identifier (uuid4 when omitted, converted to str)
            inputs: Ordered inputs of the block
            previous_connection: Connection of type PREVIOUS, if any
            next_connection: Connection of type NEXT, if any
            output_connection: Connection of type OUTPUT, if any
        """
        if not block_type:
            raise ValueError("Block type cannot be empty")
        if previous_connection is not None and output_connection is not None:
            raise ValueError("A block cannot have both a previous and an output connection")

        self.block_type = block_type
        self.block_id = str(block_id) if block_id is not None else str(uuid.uuid4())
        self.x = 0
        self.y = 0

        self._previous = self._own(previous_connection, ConnectionType.PREVIOUS)
        self._next = self._own(next_connection, ConnectionType.NEXT)
        self._output = self._own(output_connection, ConnectionType.OUTPUT)

        self._inputs: List[Input] = list(inputs or [])
        for block_input in self._inputs:
            block_input.set_block(self)

    def _own(self, connection: Optional[Connection],
             expected: ConnectionType) -> Optional[Connection]:
        if connection is None:
            return None
        if connection.get_type() != expected:
            raise ValueError(f"Expected a {expected.value} connection, got {connection.get_type().value}")
        connection.set_block(self)
        return connection

    # ── Connections ──────────────────────────────────────────────

    def get_previous_connection(self) -> Optional[Connection]:
        return self._previous

    def get_next_connection(self) -> Optional[Connection]:
        return self._next

    def get_output_connection(self) -> Optional[Connection]:
        return self._output

    def get_previous_block(self) -> Optional['Block']:
        """Block this one is stacked beneath, if any"""
        if self._previous is None:
            return None
        return self._previous.get_target_block()

    def get_next_block(self) -> Optional['Block']:
        if self._next is None:
            return None
        return self._next.get_target_block()

    def get_parent_block(self) -> Optional['Block']:
        """Block owning the connection this block hangs from"""
        parent = self.get_previous_block()
        if parent is None and self._output is not None:
            parent = self._output.get_target_block()
        return parent

    def get_children(self) -> List['Block']:
        """Blocks attached to inputs (in input order) followed by the next block"""
        children = [child for child in
                    (block_input.get_connected_block() for block_input in self._inputs)
                    if child is not None]
        next_block = self.get_next_block()
        if next_block is not None:
            children.append(next_block)
        return children

    # ── Inputs / fields ──────────────────────────────────────────

    def get_inputs(self) -> List[Input]:
        return list(self._inputs)

    def get_input(self, name: str) -> Optional[Input]:
        for block_input in self._inputs:
            if block_input.name == name:
                return block_input
        return None

    def get_fields(self) -> List[Field]:
        return [field for block_input in self._inputs for field in block_input.fields]

    def get_field(self, name: str) -> Optional[Field]:
        for block_input in self._inputs:
            field = block_input.get_field(name)
            if field is not None:
                return field
        return None

    def get_field_value(self, name: str) -> Any:
        field = self.get_field(name)
        return field.value if field is not None else None

    def set_field_value(self, name: str, value: Any) -> None:
        field = self.get_field(name)
        if field is None:
            raise KeyError(f"Block '{self.block_type}' has no field '{name}'")
        field.set_value(value)

    def set_position(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    # ── XML ──────────────────────────────────────────────────────

    def serialize(self, writer, is_root: bool) -> None:
        """
        Write this block and its whole subtree.

        Args:
            writer: lxml incremental writer (``etree.xmlfile`` context)
            is_root: Top-level write; adds the workspace position
        """
        attrib = {'type': self.block_type, 'id': self.block_id}
        if is_root:
            attrib['x'] = str(self.x)
            attrib['y'] = str(self.y)

        with writer.element(qname("block"), attrib):
            for field in self.get_fields():
                field.serialize(writer)
            for block_input in self._inputs:
                block_input.serialize(writer)
            next_block = self.get_next_block()
            if next_block is not None:
                with writer.element(qname("next")):
                    next_block.serialize(writer, False)

    @classmethod
    def from_xml(cls, parser: XmlPullParser, factory: 'BlockFactory') -> 'Block':
        """
        Build a block from the ``<block>`` start event the parser is on.
        Consumes events up to and including the matching end event.

        Raises:
            BlocklyParserError: On malformed block markup.
        """
        block_type = parser.get_attribute('type')
        if not block_type:
            raise BlocklyParserError("Block is missing its 'type' attribute.")

        block = factory.obtain_block(block_type, parser.get_attribute('id'))
        if block is None:
            raise BlocklyParserError(f"Unknown block type '{block_type}'.")

        x, y = parser.get_attribute('x'), parser.get_attribute('y')
        try:
            block.set_position(int(x or 0), int(y or 0))
        except ValueError:
            raise BlocklyParserError(f"Invalid position ({x}, {y}) for block '{block.block_id}'.")

        while True:
            event = parser.next()
            if event is None:
                raise BlocklyParserError("Unexpected end of document inside a block.")
            if event == XmlPullParser.END:
                return block

            name = parser.name
            if name is None:
                raise BlocklyParserError("Malformed XML; aborting.")
            name = name.lower()

            if name == 'field':
                block._read_field(parser)
            elif name in ('value', 'statement'):
                block._read_input(parser, factory, InputType(name))
            elif name == 'next':
                block._read_next(parser, factory)
            else:
                # mutation, comment, shadow, data...
                parser.skip_subtree()

    def _read_field(self, parser: XmlPullParser) -> None:
        name = parser.get_attribute('name')
        field = self.get_field(name) if name else None
        if field is None:
            raise BlocklyParserError(f"Block '{self.block_type}' has no field '{name}'.")
        text = parser.read_text()
        try:
            field.set_from_text(text)
        except ValueError as exc:
            raise BlocklyParserError(f"Invalid value for field '{name}': {exc}") from exc

    def _read_input(self, parser: XmlPullParser, factory: 'BlockFactory',
                    input_type: InputType) -> None:
        name = parser.get_attribute('name')
        block_input = self.get_input(name) if name else None
        if block_input is None or block_input.input_type != input_type:
            raise BlocklyParserError(
                f"Block '{self.block_type}' has no {input_type.value} input '{name}'."
            )
        for child in self._read_child_blocks(parser, factory):
            self._attach(block_input.connection, block_input.get_child_connection(child), child)

    def _read_next(self, parser: XmlPullParser, factory: 'BlockFactory') -> None:
        if self._next is None:
            raise BlocklyParserError(f"Block '{self.block_type}' has no next connection.")
        for child in self._read_child_blocks(parser, factory):
            self._attach(self._next, child.get_previous_connection(), child)

    @staticmethod
    def _read_child_blocks(parser: XmlPullParser, factory: 'BlockFactory'):
        """Yield every block directly inside the current element."""
        while True:
            event = parser.next()
            if event is None:
                raise BlocklyParserError("Unexpected end of document.")
            if event == XmlPullParser.END:
                return
            name = parser.name
            if name is None:
                raise BlocklyParserError("Malformed XML; aborting.")
            if name.lower() == 'block':
                yield Block.from_xml(parser, factory)
            else:
                parser.skip_subtree()

    def _attach(self, parent_connection: Optional[Connection],
                child_connection: Optional[Connection], child: 'Block') -> None:
        if parent_connection is None or child_connection is None \
                or not parent_connection.can_connect(child_connection):
            raise BlocklyParserError(
                f"Block '{child.block_type}' cannot be connected to '{self.block_type}'."
            )
        parent_connection.connect(child_connection)

    # ── Convenience ──────────────────────────────────────────────

    def to_dict(self) -> Dict[str, Any]:
        """Structural description of the block and its subtree."""
        inputs = {}
        for block_input in self._inputs:
            child = block_input.get_connected_block()
            if child is not None:
                inputs[block_input.name] = child.to_dict()

        next_block = self.get_next_block()
        return {
            'type': self.block_type,
            'id': self.block_id,
            'fields': {field.name: field.get_text() for field in self.get_fields()},
            'inputs': inputs,
            'next': next_block.to_dict() if next_block is not None else None,
        }

    def __repr__(self) -> str:
        return f"Block({self.block_type}, id={self.block_id})"
