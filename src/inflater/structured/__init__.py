"""Declarative pipeline configuration.

Build producers from JSON documents validated with pydantic:

    from inflater.structured import build_producer

    expand = build_producer('{"kind": "prefix", "values": ["1st ", "2nd "]}')
    list(expand("item"))  # ["1st item", "2nd item"]
"""

from .build import build_producer, compile_node, parse_pipeline
from .errors import ConfigError
from .parser import parse_json_if_needed
from .registry import TransformRegistry, default_registry
from .schema import (
    ChainNode,
    ConcatNode,
    EmptyNode,
    FilterNode,
    IdentityNode,
    ListNode,
    MapNode,
    Node,
    PrefixNode,
    SuffixNode,
    TakeNode,
)

__all__ = [
    "build_producer",
    "compile_node",
    "parse_pipeline",
    "ConfigError",
    "parse_json_if_needed",
    "TransformRegistry",
    "default_registry",
    # Nodes
    "Node",
    "EmptyNode",
    "IdentityNode",
    "ListNode",
    "PrefixNode",
    "SuffixNode",
    "MapNode",
    "FilterNode",
    "ConcatNode",
    "ChainNode",
    "TakeNode",
]
