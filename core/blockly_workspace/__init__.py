"""
Blockly Workspace — core package.

Public API:
    Workspace             – root block set, connections, XML load / save
    WorkspaceXmlCodec     – streaming XML reader / writer
    WorkspaceConfig       – top-level configuration
    ParserConfig          – lxml parser options
    SerializationConfig   – output options
    BlockDefinitionLoader – installed block definition plugins
"""
from .config import WorkspaceConfig, ParserConfig, SerializationConfig
from .services.xml_codec import WorkspaceXmlCodec
from .workspace import Workspace
from .plugin_loader import (
    BlockDefinitionLoader,
    TypeConflict,
    build_block_factory,
)

__all__ = [
    'Workspace',
    'WorkspaceXmlCodec',
    'WorkspaceConfig',
    'ParserConfig',
    'SerializationConfig',
    'BlockDefinitionLoader',
    'TypeConflict',
    'build_block_factory',
]
