"""
    Discovery of block definition plugins via entry_points.

    Plugin distributions register a ``BlockDefinitionPlugin`` subclass under
    the ``blockly.block_definitions`` group (see block_definitions_core/setup.py).
    ``BlockDefinitionLoader`` instantiates every one of them and fills a
    ``BlockFactory`` with their block types; a type name offered by two
    plugins keeps the first definition and the clash is recorded.
"""
import importlib.metadata
import logging
from typing import Dict, List, NamedTuple, Optional

from blockly_api.factory import BlockFactory
from blockly_api.plugins.base import BlockDefinitionPlugin

logger = logging.getLogger(__name__)

# Entry-point group name (must match setup.py)
BLOCK_DEFINITIONS_EP_GROUP = 'blockly.block_definitions'


class TypeConflict(NamedTuple):
    """A block type a plugin offered but could not register."""
    type_name: str
    plugin: str
    registered_by: str


class BlockDefinitionLoader:
    """
    Loads installed block definition plugins into block factories.

    Usage:
        loader = BlockDefinitionLoader()
        factory = BlockFactory()
        loader.populate(factory)
        loader.get_conflicts()               # [TypeConflict(...), ...]
    """

    def __init__(self, group: str = BLOCK_DEFINITIONS_EP_GROUP):
        self._group = group
        self._plugins: Optional[Dict[str, BlockDefinitionPlugin]] = None
        self._conflicts: List[TypeConflict] = []

    @property
    def plugins(self) -> Dict[str, BlockDefinitionPlugin]:
        """Entry-point name -> plugin instance, discovered on first access."""
        if self._plugins is None:
            self._plugins = self._discover()
        return self._plugins

    def _discover(self) -> Dict[str, BlockDefinitionPlugin]:
        plugins: Dict[str, BlockDefinitionPlugin] = {}
        entry_points = importlib.metadata.entry_points(group=self._group)
        for ep in sorted(entry_points, key=lambda ep: ep.name):
            try:
                plugin_cls = ep.load()
                if not isinstance(plugin_cls, type) or not issubclass(plugin_cls, BlockDefinitionPlugin):
                    logger.warning("Entry point '%s' is not a BlockDefinitionPlugin, skipped.", ep.name)
                    continue
                plugins[ep.name] = plugin_cls()
            except Exception as exc:
                logger.error("Failed to load block definition plugin '%s': %s", ep.name, exc)
                continue
            logger.info("Loaded block definition plugin: %s (%s)", ep.name, plugin_cls.__name__)
        return plugins

    def populate(self, factory: BlockFactory) -> Dict[str, str]:
        """
        Register the block types of every plugin in ``factory``.

        Plugins are visited in entry-point name order. A type name that is
        already in the factory, or was taken by an earlier plugin, is skipped
        and reported by ``get_conflicts``.

        Returns:
            Dict mapping each newly registered type name -> entry-point name.
        """
        registered: Dict[str, str] = {}
        for name, plugin in self.plugins.items():
            for definition in plugin.get_block_definitions():
                type_name = definition.type_name
                if type_name in factory:
                    owner = registered.get(type_name, '<factory>')
                    logger.warning("Block type '%s' from plugin '%s' is already registered by '%s', skipped.",
                                   type_name, name, owner)
                    self._conflicts.append(TypeConflict(type_name, name, owner))
                    continue
                factory.register(definition)
                registered[type_name] = name
        logger.info("Registered %d block types from %d plugins", len(registered), len(self.plugins))
        return registered

    def get_conflicts(self) -> List[TypeConflict]:
        """Type names skipped by ``populate`` calls so far."""
        return list(self._conflicts)

    def __repr__(self) -> str:
        loaded = len(self._plugins) if self._plugins is not None else 0
        return f"BlockDefinitionLoader(group='{self._group}', plugins={loaded})"


def build_block_factory(loader: Optional[BlockDefinitionLoader] = None) -> BlockFactory:
    """Create a BlockFactory holding the block types of every installed plugin."""
    factory = BlockFactory()
    (loader or BlockDefinitionLoader()).populate(factory)
    return factory
