"""
    Abstract base class for plugins.
    Defines the "Contract" that all block definition plugins must follow.
"""
from abc import ABC, abstractmethod
from typing import List

from ..models.definition import BlockDefinition


class BlockDefinitionPlugin(ABC):
    """
        Abstract base class for plugins that contribute block types.
        Pattern: Strategy (for block definition sources).
    """

    @abstractmethod
    def get_plugin_name(self) -> str:
        """
            Returns the unique name of the plugin.
            Example: "Core Blocks"
        """
        pass

    @abstractmethod
    def get_block_definitions(self) -> List[BlockDefinition]:
        """
        Main method: returns the block definitions this plugin provides.

        Returns:
            List[BlockDefinition]: Definitions ready to register in a BlockFactory.
        """
        pass
