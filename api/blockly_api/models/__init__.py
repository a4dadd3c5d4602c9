from .connection import Connection, ConnectionType
from .field import Field
from .input import Input, InputType
from .block import Block
from .definition import BlockDefinition, InputDefinition, FieldDefinition

__all__ = [
    'Connection',
    'ConnectionType',
    'Field',
    'Input',
    'InputType',
    'Block',
    'BlockDefinition',
    'InputDefinition',
    'FieldDefinition',
]
