"""Combinator primitives: empty, identity, from_list, map/filter, concat, chain, prefix/suffix."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from itertools import islice
from typing import TypeVar

from inflater.kernel import FuncProducer, ListProducer, Producer

V = TypeVar("V")
T = TypeVar("T", str, bytes)


def empty() -> Producer[V]:
    """Producer that yields nothing for any seed.

    Identity element for concat, absorbing element for chain.
    """
    return ListProducer()


def identity() -> Producer[V]:
    """Producer that yields the seed itself, once.

    Identity element for chain.
    """
    def _produce(seed: V) -> Iterator[V]:
        yield seed

    return FuncProducer(_produce)


def from_list(items: Iterable[V]) -> Producer[V]:
    """Producer that yields ``items`` in order, ignoring the seed."""
    return ListProducer(tuple(items))


def map_values(
    transform: Callable[[V], V] | None,
    source: Producer[V] | None = None,
) -> Producer[V]:
    """Transform values one-to-one.

    Semantics:
        - Without ``source``: yields ``transform(seed)``
        - With ``source``: yields ``transform(v)`` for each ``v`` of ``source``
        - ``transform=None`` passes values through unchanged

    Args:
        transform: Function applied to every value, or None.
        source: Optional upstream producer.

    Returns:
        Producer[V]: A producer with the same cardinality as its input.
    """
    upstream: Producer[V] = identity() if source is None else source
    return upstream.map(transform)


def filter_values(
    predicate: Callable[[V], bool] | None,
    source: Producer[V] | None = None,
) -> Producer[V]:
    """Keep only values accepted by ``predicate``, preserving order.

    Semantics:
        - Without ``source``: yields the seed if ``predicate(seed)`` holds
        - With ``source``: yields the values of ``source`` that pass
        - ``predicate=None`` keeps everything

    Args:
        predicate: Function deciding whether a value is kept, or None.
        source: Optional upstream producer.

    Returns:
        Producer[V]: A producer yielding the surviving values.
    """
    upstream: Producer[V] = identity() if source is None else source
    return upstream.filter(predicate)


def concat(first: Producer[V], second: Producer[V]) -> Producer[V]:
    """Fan out one seed to two producers and concatenate their outputs."""
    return first.plus(second)


def concat_many(*producers: Producer[V]) -> Producer[V]:
    """Fan out one seed to every producer, concatenating outputs left to right.

    Zero producers yield nothing; a single producer is returned unchanged.
    """
    match len(producers):
        case 0:
            return empty()
        case 1:
            return producers[0]

    def _produce(seed: V) -> Iterator[V]:
        for p in producers:
            yield from p.produce(seed)

    return FuncProducer(_produce)


def chain(first: Producer[V], second: Producer[V]) -> Producer[V]:
    """Feed every value of ``first`` as a seed into ``second``, in nested order."""
    return first.then(second)


def chain_many(*producers: Producer[V]) -> Producer[V]:
    """Pipe each stage's values into the next stage as seeds.

    Zero producers yield nothing; a single producer is returned unchanged.
    Any stage yielding nothing for a value ends that branch.

    Stages are walked with an explicit stack of iterators (one per active
    stage), so pipeline length does not grow the call stack.
    """
    match len(producers):
        case 0:
            return empty()
        case 1:
            return producers[0]

    last = len(producers) - 1

    def _produce(seed: V) -> Iterator[V]:
        # stack[i] iterates the values of producers[i]
        stack: list[Iterator[V]] = [producers[0].produce(seed)]
        try:
            while stack:
                try:
                    value = next(stack[-1])
                except StopIteration:
                    stack.pop()
                    continue
                depth = len(stack)
                if depth > last:
                    yield value
                else:
                    stack.append(producers[depth].produce(value))
        finally:
            for it in reversed(stack):
                close = getattr(it, "close", None)
                if close is not None:
                    close()

    return FuncProducer(_produce)


def with_prefixes(prefixes: Iterable[T], source: Producer[T] | None = None) -> Producer[T]:
    """Yield ``prefix + seed`` for each prefix, in order.

    Args:
        prefixes: Strings (or bytes) prepended to the seed.
        source: Optional upstream producer whose values are used as seeds.

    Returns:
        Producer[T]: Empty when no prefixes are given.
    """
    values = tuple(prefixes)
    if not values:
        return empty()

    def _produce(seed: T) -> Iterator[T]:
        for prefix in values:
            yield prefix + seed

    stage: Producer[T] = FuncProducer(_produce)
    return stage if source is None else chain(source, stage)


def with_suffixes(suffixes: Iterable[T], source: Producer[T] | None = None) -> Producer[T]:
    """Yield ``seed + suffix`` for each suffix, in order.

    Args:
        suffixes: Strings (or bytes) appended to the seed.
        source: Optional upstream producer whose values are used as seeds.

    Returns:
        Producer[T]: Empty when no suffixes are given.
    """
    values = tuple(suffixes)
    if not values:
        return empty()

    def _produce(seed: T) -> Iterator[T]:
        for suffix in values:
            yield seed + suffix

    stage: Producer[T] = FuncProducer(_produce)
    return stage if source is None else chain(source, stage)


def take(count: int, source: Producer[V]) -> Producer[V]:
    """Yield at most the first ``count`` values of ``source``.

    ``source`` is not pulled past its ``count``-th value.
    """
    if count < 0:
        raise ValueError("count must not be negative")

    def _produce(seed: V) -> Iterator[V]:
        if count == 0:
            return
        yield from islice(source.produce(seed), count)

    return FuncProducer(_produce)
