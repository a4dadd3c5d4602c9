"""
    Workspace configuration — parser safety options, serialization output.

    Plain dataclasses so callers can override single settings:
        WorkspaceConfig(serialization=SerializationConfig(xml_declaration=True))
"""
from dataclasses import dataclass, field


@dataclass
class ParserConfig:
    """
    Options handed to lxml when reading workspace documents.

    Attributes:
        resolve_entities: Expand custom entities (off: untrusted input).
        no_network:       Forbid network access while parsing.
        huge_tree:        Lift libxml2's depth limit of 256; every stacked
                          statement adds two levels (<next><block>).
    """
    resolve_entities: bool = False
    no_network: bool = True
    huge_tree: bool = True


@dataclass
class SerializationConfig:
    """
    Controls the written document.

    Attributes:
        encoding:        Output encoding.
        xml_declaration: Whether to write ``<?xml ...?>`` first.
    """
    encoding: str = "utf-8"
    xml_declaration: bool = False


@dataclass
class WorkspaceConfig:
    """
    Top-level configuration of a Workspace.

    Attributes:
        parser:        Options for ``load_from_xml``.
        serialization: Options for ``serialize``.
        debug:         Log root-set changes made by ``connect``.
    """
    parser: ParserConfig = field(default_factory=ParserConfig)
    serialization: SerializationConfig = field(default_factory=SerializationConfig)
    debug: bool = True
