"""Pipeline document schema.

A pipeline document is a tree of nodes, each tagged by ``kind``:

    {"kind": "chain", "children": [
        {"kind": "prefix", "values": ["1st ", "2nd "]},
        {"kind": "suffix", "values": ["-san"]}
    ]}
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class _NodeBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class EmptyNode(_NodeBase):
    """Yields nothing."""
    kind: Literal["empty"]


class IdentityNode(_NodeBase):
    """Yields the seed."""
    kind: Literal["identity"]


class ListNode(_NodeBase):
    """Yields fixed items, ignoring the seed."""
    kind: Literal["list"]
    items: list[str] = Field(default_factory=list)


class PrefixNode(_NodeBase):
    """Prepends each value to the seed."""
    kind: Literal["prefix"]
    values: list[str] = Field(default_factory=list)


class SuffixNode(_NodeBase):
    """Appends each value to the seed."""
    kind: Literal["suffix"]
    values: list[str] = Field(default_factory=list)


class MapNode(_NodeBase):
    """Applies a registered transform to the seed."""
    kind: Literal["map"]
    name: str


class FilterNode(_NodeBase):
    """Keeps the seed when a registered predicate accepts it."""
    kind: Literal["filter"]
    name: str


class ConcatNode(_NodeBase):
    """Fans the seed out to every child."""
    kind: Literal["concat"]
    children: list[Node] = Field(default_factory=list)


class ChainNode(_NodeBase):
    """Feeds each child's values into the next child."""
    kind: Literal["chain"]
    children: list[Node] = Field(default_factory=list)


class TakeNode(_NodeBase):
    """Truncates a child's values."""
    kind: Literal["take"]
    count: int = Field(ge=0)
    child: Node


Node = Annotated[
    EmptyNode
    | IdentityNode
    | ListNode
    | PrefixNode
    | SuffixNode
    | MapNode
    | FilterNode
    | ConcatNode
    | ChainNode
    | TakeNode,
    Field(discriminator="kind"),
]

ConcatNode.model_rebuild()
ChainNode.model_rebuild()
TakeNode.model_rebuild()

node_adapter: TypeAdapter[Node] = TypeAdapter(Node)

NODE_TYPES: tuple[type[BaseModel], ...] = (
    EmptyNode,
    IdentityNode,
    ListNode,
    PrefixNode,
    SuffixNode,
    MapNode,
    FilterNode,
    ConcatNode,
    ChainNode,
    TakeNode,
)
