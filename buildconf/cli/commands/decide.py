from __future__ import annotations

import typer

from buildconf.cli.context import project_path, secrets_path
from buildconf.core.config import VersionMarkers, load_settings
from buildconf.core.environment import load_environment
from buildconf.core.errors import ErrorCode
from buildconf.core.manifest import MANIFEST_FILE
from buildconf.core.result import Err
from buildconf.output.console import RichConsole, Style
from buildconf.services.release import decide as decide_release


def decide(
    version: str = typer.Argument(..., help="Version string, e.g. 5.3.0 or 5.3.0-SNAPSHOT"),
    internal: bool = typer.Option(False, "--internal", help="Treat as an internal build."),
) -> None:
    """Print the release decision for a version.

    Uses the project's version markers when a manifest is found, and treats
    ``INTERNAL_BUILD=true`` like ``--internal``.
    """
    console = RichConsole()

    markers = VersionMarkers()
    path = project_path()
    manifest = path / MANIFEST_FILE if path.is_dir() else path
    if manifest.is_file():
        settings = load_settings(manifest)
        if isinstance(settings, Err):
            console.error(settings.error.message)
            raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))
        markers = settings.value.versions

    env = load_environment(secrets_path())
    if isinstance(env, Err):
        console.error(env.error.message)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    decision = decide_release(version, internal or env.value.is_internal_build, markers)
    style = Style.SUCCESS if decision.should_publish else Style.WARNING
    console.print(str(decision), style)
