"""
Module that contains the command line app.

Why does this file exist, and why not put this in __main__?

  You might be tempted to import things from __main__ later, but that will cause
  problems: the code will get executed twice:

  - When you run `python -mregistry_http` python will execute
    ``__main__.py`` as a script. That means there won't be any
    ``registry_http.__main__`` in ``sys.modules``.
  - When you import __main__ it will get executed again (as a module) because
    there's no ``registry_http.__main__`` in ``sys.modules``.

  Also see (1) from http://click.pocoo.org/5/setuptools/#setuptools-integration
"""

from typing import List

import typer
from typing_extensions import Annotated

from registry_http.exceptions import InternalError
from registry_http.utils.log import configure_logging
from registry_http.utils.process import exec_command

# Create the Typer app
#   `no_args_is_help=True` will show the help message when no arguments are passed
app = typer.Typer(name="registry-admin", no_args_is_help=True)


def version_callback(value: bool):
    if value:
        from registry_http import __version__

        typer.echo(f"registry-admin {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show version information",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
):
    """
    Administrative commands for the registry
    """
    configure_logging()


@app.command(
    name="exec",
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def exec_(
    command: Annotated[
        List[str], typer.Argument(help="Program to run, followed by its arguments")
    ],
):
    """Run COMMAND, reporting its captured output if it fails"""
    try:
        output = exec_command(list(command))
    except InternalError as exc:
        typer.echo(f"Error: {exc.description}", err=True)
        if exc.detail:
            typer.echo(exc.detail, err=True, nl=False)
        raise typer.Exit(code=1)

    typer.echo(output.stdout.decode("utf-8", errors="replace"), nl=False)
