"""
    Input model - a slot on a block holding fields and, optionally,
    a connection to a child block.
"""
from typing import List, Optional, Sequence, TYPE_CHECKING
from enum import Enum

from .connection import Connection, ConnectionType
from .field import Field
from ..xml import qname

if TYPE_CHECKING:
    from .block import Block


class InputType(Enum):
    """Input kind"""
    VALUE = "value"
    STATEMENT = "statement"
    DUMMY = "dummy"


class Input:
    """
        Slot on a block.

        VALUE inputs accept a block through its output connection,
        STATEMENT inputs accept a stack through its previous connection,
        DUMMY inputs only carry fields.
    """

    def __init__(self, name: str, input_type: InputType = InputType.DUMMY,
                 fields: Optional[Sequence[Field]] = None,
                 check: Optional[Sequence[str]] = None):
        self.name = name
        self.input_type = input_type
        self.fields: List[Field] = list(fields or [])
        self.block: Optional['Block'] = None

        if input_type == InputType.VALUE:
            self.connection: Optional[Connection] = Connection(ConnectionType.INPUT, check)
        elif input_type == InputType.STATEMENT:
            self.connection = Connection(ConnectionType.NEXT, check)
        else:
            self.connection = None

    def set_block(self, block: 'Block') -> None:
        self.block = block
        if self.connection is not None:
            self.connection.set_block(block)

    def get_field(self, name: str) -> Optional[Field]:
        for field in self.fields:
            if field.name == name:
                return field
        return None

    def get_connected_block(self) -> Optional['Block']:
        if self.connection is None:
            return None
        return self.connection.get_target_block()

    def get_child_connection(self, child: 'Block') -> Optional[Connection]:
        """Connection of ``child`` that would plug into this input."""
        if self.input_type == InputType.VALUE:
            return child.get_output_connection()
        if self.input_type == InputType.STATEMENT:
            return child.get_previous_connection()
        return None

    def serialize(self, writer) -> None:
        """Write the attached child block, if any. Fields are written by the block."""
        child = self.get_connected_block()
        if child is None:
            return
        with writer.element(qname(self.input_type.value), name=self.name):
            child.serialize(writer, False)

    def __repr__(self) -> str:
        return f"Input({self.name}, {self.input_type.value})"
