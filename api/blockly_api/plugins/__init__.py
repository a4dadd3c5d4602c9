"""
Plugin contracts — abstract base class for block definition plugins.
"""
from .base import BlockDefinitionPlugin

__all__ = ['BlockDefinitionPlugin']
