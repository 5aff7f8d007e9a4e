"""Publishing for allow-listed modules.

Each step stands on its own: a missing internal repository or signing key
only drops that feature. The publish tasks are registered for every
publishable module and carry a release gate that is evaluated when the task
runs.
"""

from __future__ import annotations

from dataclasses import dataclass

from buildconf.core.model import Module, ModuleState, PublishingConfig, ReleaseDecision, Task
from buildconf.services.appliers.base import ApplyContext
from buildconf.services.release import PluginPortalGate, ReleaseGate

from .metadata import api_validation_for, docs_for, pom_for
from .repositories import internal_target, local_targets
from .signing import signing_enabled

__all__ = [
    "PublishOutcome",
    "configure_publishing",
    "PUBLISH_TASK",
    "PLUGIN_PORTAL_TASK",
    "CENTRAL_PUBLISH_TASK",
    "PUBLISH_PLUGINS",
]

PUBLISH_TASK = "publishIfRelease"
CENTRAL_PUBLISH_TASK = "publishAllPublicationsToMavenCentralRepository"
PLUGIN_PORTAL_TASK = "publishPluginToGradlePortalIfRelease"
PUBLISH_PLUGINS = (
    "com.vanniktech.maven.publish",
    "org.jetbrains.dokka",
    "binary-compatibility-validator",
)


@dataclass(frozen=True, slots=True)
class PublishOutcome:
    repositories: tuple[str, ...]
    signing_enabled: bool
    documented: bool
    decision: ReleaseDecision
    tasks: tuple[str, ...]


def _is_bom(module: Module, ctx: ApplyContext) -> bool:
    return ctx.settings.publishing.bom_module in module.name


def _is_build_plugin(module: Module, ctx: ApplyContext) -> bool:
    return ctx.settings.publishing.build_plugin_module in module.name


def _register_once(module: Module, task: Task) -> None:
    # An existing task keeps its gate; configuration may run again.
    if task.name not in module.tasks:
        module.tasks[task.name] = task


def configure_publishing(module: Module, ctx: ApplyContext) -> PublishOutcome:
    """Register publishing for ``module`` and gate its publish tasks.

    Moves the module from CONCERNS_APPLIED through PUBLISH_REGISTERED to
    PUBLISH_GATED.
    """
    settings = ctx.settings
    env = ctx.environment

    repositories = {t.name: t for t in local_targets(module, settings)}
    internal = internal_target(env)
    if internal is not None:
        repositories[internal.name] = internal

    current = module.config.publishing
    publishing = PublishingConfig(
        repositories=repositories,
        central_portal=True,
        automatic_release=True,
        signing_enabled=signing_enabled(env),
        pom=pom_for(module, settings),
    )
    if not _is_bom(module, ctx):
        publishing.docs = docs_for(module, settings)
        publishing.api_validation = api_validation_for(
            settings, current.api_validation if current else None
        )

    module.config.publishing = publishing
    module.config.applied_plugins = tuple(
        dict.fromkeys((*module.config.applied_plugins, *PUBLISH_PLUGINS))
    )
    module.state = ModuleState.PUBLISH_REGISTERED

    gate = ReleaseGate(
        version=lambda: module.version,
        is_internal_build=env.is_internal_build,
        markers=settings.versions,
    )
    registered = [PUBLISH_TASK]
    _register_once(
        module,
        Task(name=PUBLISH_TASK, kind="gated", depends_on=(CENTRAL_PUBLISH_TASK,), gate=gate),
    )
    if _is_build_plugin(module, ctx):
        # Created in all cases so CI can invoke it on every build.
        _register_once(
            module,
            Task(
                name=PLUGIN_PORTAL_TASK,
                kind="gated",
                depends_on=(f"{module.path}:publishPlugins",),
                gate=PluginPortalGate(gate),
            ),
        )
        registered.append(PLUGIN_PORTAL_TASK)
    module.state = ModuleState.PUBLISH_GATED

    return PublishOutcome(
        repositories=tuple(repositories),
        signing_enabled=publishing.signing_enabled,
        documented=publishing.docs is not None,
        decision=gate(),
        tasks=tuple(registered),
    )
