"""Producer - core expansion primitive."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

V = TypeVar("V")


class Producer(ABC, Generic[V]):
    """Inflates one seed value into an ordered, lazy sequence of values.

    Producers are immutable. Every ``produce`` call is independent of the
    previous ones, so a composed producer may be reused with any number of
    seeds. The returned iterator is lazy: a consumer that stops pulling
    stops the whole composition, and ``close()`` unwinds nested producers.
    """

    @abstractmethod
    def produce(self, seed: V) -> Iterator[V]:
        """Inflate a seed value to a sequence of values."""
        ...

    def __call__(self, seed: V) -> Iterator[V]:
        return self.produce(seed)

    def then(self, other: Producer[V]) -> Producer[V]:
        """Feed every value of this producer as a seed into ``other``.

        Args:
            other: Producer applied to each value this producer yields

        Returns:
            New producer yielding the flattened, nested-order results
        """
        def _produce(seed: V) -> Iterator[V]:
            for value in self.produce(seed):
                yield from other.produce(value)

        return FuncProducer(_produce)

    def plus(self, other: Producer[V]) -> Producer[V]:
        """Produce this producer's values, then ``other``'s, for the same seed."""
        def _produce(seed: V) -> Iterator[V]:
            yield from self.produce(seed)
            yield from other.produce(seed)

        return FuncProducer(_produce)

    def map(self, func: Callable[[V], V] | None) -> Producer[V]:
        """Apply ``func`` to every produced value. ``None`` passes values through."""
        if func is None:
            return self

        def _produce(seed: V) -> Iterator[V]:
            for value in self.produce(seed):
                yield func(value)

        return FuncProducer(_produce)

    def filter(self, check: Callable[[V], bool] | None) -> Producer[V]:
        """Drop produced values for which ``check`` is false. ``None`` keeps all."""
        if check is None:
            return self

        def _produce(seed: V) -> Iterator[V]:
            for value in self.produce(seed):
                if check(value):
                    yield value

        return FuncProducer(_produce)


@dataclass(frozen=True)
class FuncProducer(Producer[V]):
    """Adapter that lets a plain function act as a Producer.

    The wrapped function receives the seed and returns any iterable; generator
    functions are the usual choice since they keep production lazy.
    """

    _produce: Callable[[V], Iterable[V]]

    def produce(self, seed: V) -> Iterator[V]:
        return iter(self._produce(seed))


@dataclass(frozen=True)
class ListProducer(Producer[V]):
    """Producer that yields fixed items in order and ignores its seed."""

    items: tuple[V, ...] = ()

    def produce(self, seed: V) -> Iterator[V]:
        _ = seed
        yield from self.items


def producer(func: Callable[[V], Iterable[V]]) -> Producer[V]:
    """Decorator turning a (generator) function into a Producer.

    Example:
        @producer
        def hyphenate(seed: str):
            yield seed.replace(" ", "-")
    """
    return FuncProducer(func)
