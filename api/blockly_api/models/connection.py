"""
    Connection model - a typed attachment point on a block.
"""
from typing import Optional, Sequence, Tuple, TYPE_CHECKING
from enum import Enum

from ..exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from .block import Block


class ConnectionType(Enum):
    """Role of a connection on its block"""
    PREVIOUS = "previous"
    NEXT = "next"
    INPUT = "input"
    OUTPUT = "output"


_OPPOSITE_TYPES = {
    ConnectionType.PREVIOUS: ConnectionType.NEXT,
    ConnectionType.NEXT: ConnectionType.PREVIOUS,
    ConnectionType.INPUT: ConnectionType.OUTPUT,
    ConnectionType.OUTPUT: ConnectionType.INPUT,
}


class Connection:
    """
        A typed attachment point belonging to exactly one block.
        Two connections pair up when their types are opposite
        (previous/next, input/output) and their checks overlap.
    """

    def __init__(self, connection_type: ConnectionType,
                 check: Optional[Sequence[str]] = None):
        """
        Initialize a connection.

        Args:
            connection_type: Role of the connection on its block
            check: Accepted type names; None accepts any partner
        """
        self.connection_type = connection_type
        self.check: Optional[Tuple[str, ...]] = tuple(check) if check is not None else None
        self._block: Optional['Block'] = None
        self._target: Optional['Connection'] = None

    def get_type(self) -> ConnectionType:
        return self.connection_type

    def get_block(self) -> Optional['Block']:
        return self._block

    def set_block(self, block: 'Block') -> None:
        """Bind the owning block. Only the block itself should call this."""
        self._block = block

    @property
    def target_connection(self) -> Optional['Connection']:
        return self._target

    def get_target_block(self) -> Optional['Block']:
        """Block on the other side of this connection, if connected"""
        if self._target is None:
            return None
        return self._target.get_block()

    def is_connected(self) -> bool:
        return self._target is not None

    def checks_match(self, other: 'Connection') -> bool:
        if self.check is None or other.check is None:
            return True
        return any(name in other.check for name in self.check)

    def can_connect(self, other: Optional['Connection']) -> bool:
        """Check whether this connection may be paired with ``other``."""
        if other is None or other is self:
            return False
        if self._block is not None and self._block is other.get_block():
            return False
        if _OPPOSITE_TYPES[self.connection_type] != other.get_type():
            return False
        if self.is_connected() or other.is_connected():
            return False
        return self.checks_match(other)

    def connect(self, other: 'Connection') -> None:
        """Pair both connections with each other."""
        if not self.can_connect(other):
            raise InvalidArgumentError(f"{self!r} cannot be connected to {other!r}.")
        self._target = other
        other._target = self

    def disconnect(self) -> Optional['Connection']:
        """Unpair this connection; returns the former partner."""
        target = self._target
        if target is not None:
            target._target = None
            self._target = None
        return target

    def __repr__(self) -> str:
        owner = self._block.block_type if self._block is not None else None
        return f"Connection({self.connection_type.value}, block={owner})"
