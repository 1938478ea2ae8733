"""
Replay line-based operation scripts against a registry.

One operation per line, arguments split shell-style:

    new
    insert_at 0 0 "hello world"
    insert_at 0 5         # absent value, rejected
    get_at 0 0
    comp 0 1
"""

import shlex
from typing import Any, Callable, Generator, Iterable, NamedTuple

from strqueue.exceptions import ScriptError
from strqueue.registry import QueueRegistry
from strqueue.tracing import format_args, format_value


class Command(NamedTuple):
    op: str
    args: tuple[Any, ...]
    lineno: int | None = None


# op -> (registry method, number of integer arguments, takes optional value)
OPS: dict[str, tuple[str, int, bool]] = {
    "new": ("create", 0, False),
    "create": ("create", 0, False),
    "delete": ("delete", 1, False),
    "size": ("size", 1, False),
    "insert_at": ("insert_at", 2, True),
    "remove_at": ("remove_at", 2, False),
    "get_at": ("get_at", 2, False),
    "clear": ("clear", 1, False),
    "comp": ("compare", 2, False),
    "compare": ("compare", 2, False),
}

RETURNING = {"create", "size", "get_at", "compare"}


def parse_line(line: str, lineno: int | None = None) -> Command | None:
    """
    Parse a script line into a command

    Returns:
        The command or `None` for blank and comment lines

    Raises:
        ScriptError: Unknown operation, wrong arguments
    """
    try:
        tokens = shlex.split(line, comments=True)
    except ValueError as e:
        raise ScriptError(str(e), lineno)
    if not tokens:
        return None
    name, *params = tokens
    if name not in OPS:
        raise ScriptError(f"Unknown operation: `{name}`", lineno)
    op, n_ints, with_value = OPS[name]
    max_params = n_ints + int(with_value)
    if not n_ints <= len(params) <= max_params:
        raise ScriptError(
            f"Invalid number of arguments for `{name}`: {len(params)}", lineno
        )
    args: list[Any] = []
    for param in params[:n_ints]:
        try:
            value = int(param)
        except ValueError:
            raise ScriptError(f"Not an integer: `{param}`", lineno)
        if value < 0:
            raise ScriptError(f"Negative value: `{param}`", lineno)
        args.append(value)
    if with_value:
        args.append(params[n_ints] if len(params) > n_ints else None)
    return Command(op, tuple(args), lineno)


def parse(lines: Iterable[str]) -> Generator[Command, None, None]:
    for lineno, line in enumerate(lines, 1):
        command = parse_line(line, lineno)
        if command is not None:
            yield command


def execute(
    registry: QueueRegistry, lines: Iterable[str]
) -> Generator[tuple[Command, Any], None, None]:
    """
    Run the script against `registry`, yield each command with its result
    (`None` for void operations)
    """
    for command in parse(lines):
        func: Callable[..., Any] = getattr(registry, command.op)
        yield command, func(*command.args)


def format_result(command: Command, result: Any) -> str:
    return f"{command.op}({format_args(*command.args)}) = {format_value(result)}"
