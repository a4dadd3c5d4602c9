"""
    Block definitions - immutable descriptions of block types that
    produce fresh Block instances.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .block import Block
from .connection import Connection, ConnectionType
from .field import Field
from .input import Input, InputType
from ..types import FieldType


def _as_check(value: Any) -> Optional[Tuple[str, ...]]:
    """Blockly allows a single type name or a list of them."""
    if value is None:
        return None
    if isinstance(value, str):
        return (value,)
    return tuple(value)


@dataclass(frozen=True)
class FieldDefinition:
    name: str
    field_type: FieldType = FieldType.TEXT
    default: Any = None
    options: Optional[Tuple[str, ...]] = None

    def build(self) -> Field:
        return Field(self.name, self.field_type, self.default, self.options)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FieldDefinition':
        options = data.get('options')
        return cls(
            name=data['name'],
            field_type=FieldType(data.get('type', FieldType.TEXT.value)),
            default=data.get('value'),
            options=tuple(options) if options is not None else None,
        )


@dataclass(frozen=True)
class InputDefinition:
    name: str
    input_type: InputType = InputType.DUMMY
    fields: Tuple[FieldDefinition, ...] = ()
    check: Optional[Tuple[str, ...]] = None

    def build(self) -> Input:
        return Input(self.name, self.input_type,
                     [field.build() for field in self.fields], self.check)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'InputDefinition':
        return cls(
            name=data['name'],
            input_type=InputType(data.get('type', InputType.DUMMY.value)),
            fields=tuple(FieldDefinition.from_dict(f) for f in data.get('fields', [])),
            check=_as_check(data.get('check')),
        )


@dataclass(frozen=True)
class BlockDefinition:
    """
    Description of one block type.

    Attributes:
        type_name:      Registry key, written as the ``type`` attribute.
        inputs:         Ordered input definitions.
        has_previous:   Whether blocks get a previous connection.
        has_next:       Whether blocks get a next connection.
        has_output:     Whether blocks get an output connection.
        previous_check: Type check of the previous connection.
        next_check:     Type check of the next connection.
        output_check:   Type check of the output connection.
    """
    type_name: str
    inputs: Tuple[InputDefinition, ...] = ()
    has_previous: bool = False
    has_next: bool = False
    has_output: bool = False
    previous_check: Optional[Tuple[str, ...]] = None
    next_check: Optional[Tuple[str, ...]] = None
    output_check: Optional[Tuple[str, ...]] = None

    def __post_init__(self):
        if not self.type_name:
            raise ValueError("Block definition needs a type name")
        if self.has_previous and self.has_output:
            raise ValueError(
                f"Block definition '{self.type_name}' cannot have both a previous and an output connection"
            )

    def build(self, block_id: Optional[Any] = None) -> Block:
        """Create a new, unconnected block of this type."""
        return Block(
            self.type_name,
            block_id,
            inputs=[input_def.build() for input_def in self.inputs],
            previous_connection=Connection(ConnectionType.PREVIOUS, self.previous_check)
            if self.has_previous else None,
            next_connection=Connection(ConnectionType.NEXT, self.next_check)
            if self.has_next else None,
            output_connection=Connection(ConnectionType.OUTPUT, self.output_check)
            if self.has_output else None,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BlockDefinition':
        """
        Build a definition from a JSON-style dict.

        Keys ``previousStatement``, ``nextStatement`` and ``output`` follow
        Blockly's JSON format: present means the connection exists, the
        value is its check (null for "any").
        """
        return cls(
            type_name=data['type'],
            inputs=tuple(InputDefinition.from_dict(i) for i in data.get('inputs', [])),
            has_previous='previousStatement' in data,
            has_next='nextStatement' in data,
            has_output='output' in data,
            previous_check=_as_check(data.get('previousStatement')),
            next_check=_as_check(data.get('nextStatement')),
            output_check=_as_check(data.get('output')),
        )
