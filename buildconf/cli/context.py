from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import typer

from buildconf.core.environment import Environment, load_environment
from buildconf.core.errors import ErrorCode
from buildconf.core.manifest import Project, load_project
from buildconf.core.result import Err
from buildconf.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    project: Project
    environment: Environment
    console: ConsoleProtocol


def project_path() -> Path:
    """Manifest location: ``BUILDCONF_PROJECT`` if set, else the current directory."""
    env = os.environ.get("BUILDCONF_PROJECT")
    if env:
        return Path(env).expanduser()
    return Path.cwd()


def secrets_path() -> Path | None:
    env = os.environ.get("BUILDCONF_SECRETS")
    if env:
        return Path(env).expanduser()
    return None


def build_context(console: ConsoleProtocol | None = None) -> CLIContext:
    console = console or RichConsole()

    project_result = load_project(project_path())
    if isinstance(project_result, Err):
        console.error(project_result.error.message)
        if project_result.error.hint:
            console.print(f"hint: {project_result.error.hint}")
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    env_result = load_environment(secrets_path())
    if isinstance(env_result, Err):
        console.error(env_result.error.message)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    return CLIContext(
        project=project_result.value,
        environment=env_result.value,
        console=console,
    )
