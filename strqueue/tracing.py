"""Diagnostic collaborator for registry operations.

The registry reports every call, its result and the reason an operation was
rejected to a [Tracer][strqueue.tracing.Tracer]. The base class does nothing,
so an untraced registry carries no formatting or output concerns at all.
[LogTracer][strqueue.tracing.LogTracer] renders the events as structlog
messages:

    insert_at(0, 100, "c")
    insert_at done
    get_at(0, 7)
    get_at: queue 0 does not contain string at position 7
    get_at returns NULL
"""

from typing import Any

from anystore.logging import BoundLogger, get_logger


def format_value(value: Any) -> str:
    if value is None:
        return "NULL"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, int):
        return str(int(value))
    return repr(value)


def format_args(*args: Any) -> str:
    return ", ".join(map(format_value, args))


class Tracer:
    """No-op tracer, subclasses decide what to do with the events."""

    def call(self, name: str, *args: Any) -> None:
        pass

    def returns(self, name: str, value: Any) -> None:
        pass

    def done(self, name: str) -> None:
        pass

    def does_not_exist(self, name: str, handle: int) -> None:
        pass

    def does_not_contain(self, name: str, handle: int, position: int) -> None:
        pass

    def failed(self, name: str) -> None:
        pass


class LogTracer(Tracer):
    """Emit every event to a struct logger"""

    def __init__(self, log: BoundLogger | None = None) -> None:
        self.log = log or get_logger(__name__)

    def call(self, name: str, *args: Any) -> None:
        self.log.debug(f"{name}({format_args(*args)})", op=name)

    def returns(self, name: str, value: Any) -> None:
        self.log.debug(f"{name} returns {format_value(value)}", op=name)

    def done(self, name: str) -> None:
        self.log.debug(f"{name} done", op=name)

    def does_not_exist(self, name: str, handle: int) -> None:
        self.log.warning(
            f"{name}: queue {handle} does not exist", op=name, handle=handle
        )

    def does_not_contain(self, name: str, handle: int, position: int) -> None:
        self.log.warning(
            f"{name}: queue {handle} does not contain string at position {position}",
            op=name,
            handle=handle,
            position=position,
        )

    def failed(self, name: str) -> None:
        self.log.warning(f"{name} failed", op=name)
