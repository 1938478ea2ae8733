"""In-memory registry of string queues addressed by integer handles."""

from strqueue.model import Ordering
from strqueue.registry import QueueRegistry, get_registry
from strqueue.tracing import LogTracer, Tracer

__version__ = "0.1.0"

__all__ = [
    "Ordering",
    "QueueRegistry",
    "get_registry",
    "LogTracer",
    "Tracer",
]
