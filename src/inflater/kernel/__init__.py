"""Kernel layer - pure abstractions for Inflater."""

from inflater.kernel.producer import FuncProducer, ListProducer, Producer, producer
from inflater.kernel.trace import Evidence, Trace, traced

__all__ = [
    "Producer",
    "FuncProducer",
    "ListProducer",
    "producer",
    # Tracing
    "Evidence",
    "Trace",
    "traced",
]
