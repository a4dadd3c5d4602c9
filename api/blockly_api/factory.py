"""
    BlockFactory — creates blocks by type name from registered definitions.

    Design Pattern: Registry
    ────────────────────────
    Block variants are selected by their type name; no subclass per
    block type is needed.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional

from .models.block import Block
from .models.definition import BlockDefinition
from .plugins.base import BlockDefinitionPlugin

logger = logging.getLogger(__name__)


class BlockFactory:
    """
    Registry of block definitions keyed by type name.

    Usage:
        factory = BlockFactory([math_number_def])
        factory.register_plugin(CoreBlockDefinitionsPlugin())
        block = factory.obtain_block('math_number')
    """

    def __init__(self, definitions: Optional[Iterable[BlockDefinition]] = None):
        self._definitions: Dict[str, BlockDefinition] = {}
        for definition in definitions or []:
            self.register(definition)

    def register(self, definition: BlockDefinition, replace: bool = False) -> None:
        """
        Add a definition to the registry.

        Raises:
            ValueError: If the type name is taken and ``replace`` is False.
        """
        if definition.type_name in self._definitions and not replace:
            raise ValueError(f"Block type '{definition.type_name}' is already registered")
        self._definitions[definition.type_name] = definition

    def register_plugin(self, plugin: BlockDefinitionPlugin) -> int:
        """Register every definition a plugin provides; returns how many."""
        definitions = list(plugin.get_block_definitions())
        for definition in definitions:
            self.register(definition)
        logger.info("Registered %d block types from '%s'",
                    len(definitions), plugin.get_plugin_name())
        return len(definitions)

    def has_definition(self, type_name: str) -> bool:
        return type_name in self._definitions

    def get_definition(self, type_name: str) -> Optional[BlockDefinition]:
        return self._definitions.get(type_name)

    def get_type_names(self) -> List[str]:
        """Sorted list of registered block types."""
        return sorted(self._definitions.keys())

    def obtain_block(self, type_name: str, block_id: Optional[Any] = None) -> Optional[Block]:
        """
        Create a new block of the given type.

        Returns:
            The block, or None if the type is not registered.
        """
        definition = self._definitions.get(type_name)
        if definition is None:
            logger.warning("No definition for block type '%s'", type_name)
            return None
        return definition.build(block_id)

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, type_name: str) -> bool:
        return type_name in self._definitions

    def __repr__(self) -> str:
        return f"BlockFactory(types={len(self._definitions)})"
