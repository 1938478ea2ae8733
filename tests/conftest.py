from typing import Any

import pytest

from strqueue.registry import QueueRegistry, get_registry
from strqueue.tracing import Tracer


class RecordingTracer(Tracer):
    """Collect trace events as tuples"""

    def __init__(self) -> None:
        self.events: list[tuple[Any, ...]] = []

    def call(self, name, *args):
        self.events.append(("call", name, *args))

    def returns(self, name, value):
        self.events.append(("returns", name, value))

    def done(self, name):
        self.events.append(("done", name))

    def does_not_exist(self, name, handle):
        self.events.append(("does_not_exist", name, handle))

    def does_not_contain(self, name, handle, position):
        self.events.append(("does_not_contain", name, handle, position))

    def failed(self, name):
        self.events.append(("failed", name))


@pytest.fixture(scope="function")
def tracer() -> RecordingTracer:
    return RecordingTracer()


@pytest.fixture(scope="function")
def registry(tracer) -> QueueRegistry:
    return QueueRegistry(tracer=tracer)


@pytest.fixture(autouse=True, scope="function")
def cache_clear():
    get_registry.cache_clear()
    yield
