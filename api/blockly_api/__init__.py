"""
Blockly Workspace API — block models, factory and plugin contracts.
"""
from .types import FieldType, FieldValueConverter
from .exceptions import (
    BlocklyError,
    InvalidArgumentError,
    BlocklyParserError,
    BlocklySerializerError,
)
from .models.connection import Connection, ConnectionType
from .models.field import Field
from .models.input import Input, InputType
from .models.block import Block
from .models.definition import BlockDefinition, InputDefinition, FieldDefinition
from .plugins.base import BlockDefinitionPlugin
from .factory import BlockFactory
from .xml import XmlPullParser, XML_NAMESPACE

__all__ = [
    'FieldType',
    'FieldValueConverter',
    'BlocklyError',
    'InvalidArgumentError',
    'BlocklyParserError',
    'BlocklySerializerError',
    'Connection',
    'ConnectionType',
    'Field',
    'Input',
    'InputType',
    'Block',
    'BlockDefinition',
    'InputDefinition',
    'FieldDefinition',
    'BlockDefinitionPlugin',
    'BlockFactory',
    'XmlPullParser',
    'XML_NAMESPACE',
]
