# blockly_api/exceptions.py

class BlocklyError(Exception):
    """Base class for every error raised by the workspace packages."""
    pass

class InvalidArgumentError(BlocklyError, ValueError):
    """Raised when a precondition on an argument is violated."""
    pass

class BlocklyParserError(BlocklyError):
    """Raised when a persisted workspace document is malformed or unreadable."""
    pass

class BlocklySerializerError(BlocklyError):
    """Raised when writing a workspace document fails."""
    pass
