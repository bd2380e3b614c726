"""Compile pipeline documents into producers."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from inflater.combinators import (
    chain_many,
    concat_many,
    empty,
    filter_values,
    from_list,
    identity,
    map_values,
    take,
    with_prefixes,
    with_suffixes,
)
from inflater.kernel import Producer

from .errors import ConfigError
from .parser import parse_json_if_needed
from .registry import TransformRegistry, default_registry
from .schema import (
    NODE_TYPES,
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
    node_adapter,
)

logger = logging.getLogger(__name__)


def parse_pipeline(document: str | bytes | dict[str, Any] | Node) -> Node:
    """Validate a pipeline document into a node tree.

    Args:
        document: JSON text, a decoded JSON object, or an already built node

    Returns:
        The validated root node

    Raises:
        ConfigError: If the document is not valid JSON or does not match the schema
    """
    if isinstance(document, NODE_TYPES):
        return document  # type: ignore[return-value]
    parsed = parse_json_if_needed(document)
    try:
        return node_adapter.validate_python(parsed)
    except ValidationError as e:
        first = e.errors()[0]
        raise ConfigError(
            f"Invalid pipeline document: {e.error_count()} error(s), first: {first['msg']}",
            parsed,
            location=tuple(first["loc"]),
        ) from e


def compile_node(node: Node, registry: TransformRegistry) -> Producer[str]:
    """Turn a validated node into a producer."""
    match node:
        case EmptyNode():
            return empty()
        case IdentityNode():
            return identity()
        case ListNode(items=items):
            return from_list(items)
        case PrefixNode(values=values):
            return with_prefixes(values)
        case SuffixNode(values=values):
            return with_suffixes(values)
        case MapNode(name=name):
            return map_values(registry.transform(name))
        case FilterNode(name=name):
            return filter_values(registry.predicate(name))
        case ConcatNode(children=children):
            return concat_many(*(compile_node(child, registry) for child in children))
        case ChainNode(children=children):
            return chain_many(*(compile_node(child, registry) for child in children))
        case TakeNode(count=count, child=child):
            return take(count, compile_node(child, registry))
    raise ConfigError(f"Unsupported node: {type(node).__name__}", node)


def build_producer(
    document: str | bytes | dict[str, Any] | Node,
    registry: TransformRegistry | None = None,
) -> Producer[str]:
    """Build a string producer from a pipeline document.

    Args:
        document: JSON text, a decoded JSON object, or an already built node
        registry: Names available to ``map``/``filter`` nodes;
            defaults to default_registry()

    Returns:
        The compiled producer

    Raises:
        ConfigError: On invalid JSON, schema violations, or unknown names
    """
    registry = registry or default_registry()
    node = parse_pipeline(document)
    logger.debug("Compiling pipeline rooted at %r node", node.kind)
    producer = compile_node(node, registry)
    logger.debug("Compiled pipeline into %s", type(producer).__name__)
    return producer
