from .plugin import CoreBlockDefinitionsPlugin

__all__ = ['CoreBlockDefinitionsPlugin']
