"""Combinators - higher-order producer composition primitives."""

from inflater.combinators.ops import (
    chain,
    chain_many,
    concat,
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

__all__ = [
    "empty",
    "identity",
    "from_list",
    "map_values",
    "filter_values",
    "concat",
    "concat_many",
    "chain",
    "chain_many",
    "with_prefixes",
    "with_suffixes",
    "take",
]
