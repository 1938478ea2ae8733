from typing import Annotated, Optional

import typer
from anystore.cli import ErrorHandler
from anystore.io import smart_stream, smart_write
from anystore.logging import configure_logging
from anystore.util import dump_json_model
from rich.console import Console

from strqueue import __version__
from strqueue.registry import QueueRegistry
from strqueue.script import RETURNING, execute, format_result
from strqueue.settings import Settings
from strqueue.tracing import LogTracer, Tracer

settings = Settings()
cli = typer.Typer(
    no_args_is_help=True,
    pretty_exceptions_enable=settings.debug,
    name="strqueue",
)
console = Console(stderr=True)


@cli.callback(invoke_without_command=True)
def cli_strqueue(
    version: Annotated[Optional[bool], typer.Option(..., help="Show version")] = False,
    settings: Annotated[
        Optional[bool], typer.Option(..., help="Show current settings")
    ] = False,
):
    if version:
        console.print(__version__)
        raise typer.Exit()
    settings_ = Settings()
    configure_logging(level=settings_.log_level)
    if settings:
        console.print(settings_)
        raise typer.Exit()


@cli.command("run")
def cli_run(
    in_uri: Annotated[
        str, typer.Argument(help="Script uri (file or `-` for stdin)")
    ] = "-",
    out_uri: Annotated[
        str, typer.Option("-o", help="Output uri for results (default: stdout)")
    ] = "-",
    trace: Annotated[
        Optional[bool], typer.Option(help="Log every operation (default: debug mode)")
    ] = None,
    dump: Annotated[
        Optional[bool], typer.Option(help="Print final registry state as json")
    ] = False,
):
    """
    Replay an operation script against a fresh, in-memory registry and print
    the results of the value-returning operations
    """
    with ErrorHandler():
        if trace is None:
            trace = Settings().debug
        if trace:
            configure_logging(level="DEBUG")
        registry = QueueRegistry(tracer=LogTracer() if trace else Tracer())
        results = [
            format_result(command, result)
            for command, result in execute(registry, smart_stream(in_uri, "r"))
            if command.op in RETURNING
        ]
        output = "\n".join(results) + "\n" if results else ""
        if dump:
            data = dump_json_model(registry.dump_all(), newline=True)
            output += data.decode()
        if out_uri == "-":
            typer.echo(output, nl=False)
        else:
            smart_write(out_uri, output.encode())
