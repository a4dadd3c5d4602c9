"""
Workspace services — XML load / save.
"""
from .xml_codec import WorkspaceXmlCodec

__all__ = ['WorkspaceXmlCodec']
