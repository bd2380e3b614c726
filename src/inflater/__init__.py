from .combinators import (
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
from .kernel import Evidence, FuncProducer, ListProducer, Producer, Trace, producer, traced

__all__ = [
    # Core
    "Producer",
    "FuncProducer",
    "ListProducer",
    "producer",
    # Combinators
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
    # Tracing
    "Evidence",
    "Trace",
    "traced",
]
