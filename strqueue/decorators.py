import inspect
from functools import wraps
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])


def traced(returns: bool = False) -> Callable[[F], F]:
    """
    Wrap a registry operation: serialize it via the registry lock and report
    the call (and its return value if `returns`) to the registry tracer.

    Void operations report `done` themselves, as only a successful mutation
    counts as done.

    Example:
        ```python
        class QueueRegistry:
            @traced(returns=True)
            def size(self, handle: int) -> int:
                ...
        ```
    """

    def decorator(func: F) -> F:
        name = func.__name__
        signature = inspect.signature(func)

        @wraps(func)
        def _inner(self, *args, **kwargs):
            with self._lock:
                bound = signature.bind(self, *args, **kwargs)
                params = list(bound.arguments.values())[1:]
                self.tracer.call(name, *params)
                res = func(self, *args, **kwargs)
                if returns:
                    self.tracer.returns(name, res)
                return res

        return _inner  # type: ignore[return-value]

    return decorator
