from __future__ import annotations

import os
from pathlib import Path

import typer

from buildconf import __version__
from buildconf.cli.commands.check import check
from buildconf.cli.commands.configure import configure
from buildconf.cli.commands.decide import decide
from buildconf.cli.commands.run_cmd import run
from buildconf.cli.commands.targets import targets
from buildconf.core.errors import ErrorCode


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command()(configure)
app.command()(decide)
app.command()(run)
app.command()(targets)
app.command()(check)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    project: Path | None = typer.Option(
        None,
        "--project",
        help="Project directory or manifest (default: current directory)",
    ),
    secrets: Path | None = typer.Option(
        None,
        "--secrets",
        help="TOML file with project properties (internalUrl, signingInMemoryKey, ...)",
    ),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if project is not None:
        if not project.exists():
            typer.echo(f"error: --project '{project}' does not exist", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))
        os.environ["BUILDCONF_PROJECT"] = str(project.expanduser().resolve())

    if secrets is not None:
        os.environ["BUILDCONF_SECRETS"] = str(secrets.expanduser().resolve())


def main() -> None:
    app()
