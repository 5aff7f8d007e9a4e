"""Orchestrator entry point.

For every module: probe capabilities, run the concern appliers in their fixed
order, verify the compiler targets agree, and configure publishing when the
module is on the allow-list. Modules share no mutable state, so the order in
which modules are configured does not matter.
"""

from __future__ import annotations

from dataclasses import dataclass

from buildconf.core.environment import Environment
from buildconf.core.manifest import Project
from buildconf.core.model import Capability, Module, ModuleState
from buildconf.core.result import Err, Ok, Result
from buildconf.services.appliers import (
    DEFAULT_APPLIERS,
    ApplyContext,
    ConcernApplier,
    ConcernOutcome,
)
from buildconf.services.probe import probe
from buildconf.services.publishing import PublishOutcome, configure_publishing

__all__ = [
    "AllowListEntryMissing",
    "CompilerTargetMismatch",
    "AlreadyConfigured",
    "OrchestrationError",
    "ModuleReport",
    "ProjectReport",
    "verify_compiler_targets",
    "validate_allow_list",
    "configure_module",
    "configure_project",
]


@dataclass(frozen=True, slots=True)
class AllowListEntryMissing:
    names: tuple[str, ...]

    @property
    def message(self) -> str:
        return f"publish allow-list names unknown module(s): {', '.join(self.names)}"

    @property
    def hint(self) -> str:
        return "Fix publish_allow_list in [settings] or add the module to the manifest"


@dataclass(frozen=True, slots=True)
class CompilerTargetMismatch:
    module: str
    targets: tuple[tuple[str, str], ...]

    @property
    def message(self) -> str:
        found = ", ".join(f"{k}={v}" for k, v in self.targets)
        return f"{self.module}: JVM targets disagree ({found})"

    @property
    def hint(self) -> str:
        return "All JVM targets come from [settings.compiler] jvm_target"


@dataclass(frozen=True, slots=True)
class AlreadyConfigured:
    module: str
    state: ModuleState

    @property
    def message(self) -> str:
        return f"{self.module} was already configured ({self.state})"

    @property
    def hint(self) -> str | None:
        return None


OrchestrationError = AllowListEntryMissing | CompilerTargetMismatch | AlreadyConfigured


@dataclass(frozen=True, slots=True)
class ModuleReport:
    module: str
    path: str
    capabilities: frozenset[Capability]
    concerns: tuple[ConcernOutcome, ...]
    publishing: PublishOutcome | None
    state: ModuleState

    @property
    def applied(self) -> tuple[str, ...]:
        return tuple(c.concern for c in self.concerns if c.applied)


@dataclass(frozen=True, slots=True)
class ProjectReport:
    modules: tuple[ModuleReport, ...]

    def find(self, name: str) -> ModuleReport | None:
        for report in self.modules:
            if report.module == name:
                return report
        return None

    @property
    def published(self) -> tuple[str, ...]:
        return tuple(r.module for r in self.modules if r.publishing is not None)


def verify_compiler_targets(module: Module) -> Result[None, CompilerTargetMismatch]:
    """Fail fast when the Kotlin and Java compile targets diverge."""
    found: dict[str, str | None] = {}
    compiler = module.config.compiler
    if compiler is not None:
        found["kotlin.jvmTarget"] = compiler.jvm_target
        found["java.sourceCompatibility"] = compiler.java_source
        found["java.targetCompatibility"] = compiler.java_target
    android = module.config.android
    if android is not None:
        found["android.sourceCompatibility"] = android.source_compatibility
        found["android.targetCompatibility"] = android.target_compatibility

    # Modules without a JVM compile leave the compiler targets unset.
    targets = {key: value for key, value in found.items() if value is not None}
    if len(set(targets.values())) > 1:
        return Err(CompilerTargetMismatch(module=module.name, targets=tuple(targets.items())))
    return Ok(None)


def validate_allow_list(project: Project) -> Result[None, AllowListEntryMissing]:
    missing = sorted(
        name for name in project.settings.publish_allow_list if name not in project.modules
    )
    if missing:
        return Err(AllowListEntryMissing(names=tuple(missing)))
    return Ok(None)


def configure_module(
    module: Module,
    ctx: ApplyContext,
    *,
    publishable: bool,
    appliers: tuple[ConcernApplier, ...] = DEFAULT_APPLIERS,
) -> Result[ModuleReport, OrchestrationError]:
    """Configure one module. A module is configured at most once per invocation."""
    if module.state is not ModuleState.UNCONFIGURED:
        return Err(AlreadyConfigured(module=module.name, state=module.state))

    capabilities = probe(module)
    module.state = ModuleState.CAPABILITIES_PROBED

    outcomes = tuple(applier.apply(module, capabilities, ctx) for applier in appliers)

    verified = verify_compiler_targets(module)
    if isinstance(verified, Err):
        return verified
    module.state = ModuleState.CONCERNS_APPLIED

    published: PublishOutcome | None = None
    if publishable:
        published = configure_publishing(module, ctx)

    return Ok(
        ModuleReport(
            module=module.name,
            path=module.path,
            capabilities=capabilities,
            concerns=outcomes,
            publishing=published,
            state=module.state,
        )
    )


def configure_project(
    project: Project,
    environment: Environment,
    *,
    appliers: tuple[ConcernApplier, ...] = DEFAULT_APPLIERS,
) -> Result[ProjectReport, OrchestrationError]:
    """Configure every module of ``project``.

    The allow-list is checked against the module graph before any module is
    touched. Any error stops the run; nothing is retried.
    """
    valid = validate_allow_list(project)
    if isinstance(valid, Err):
        return valid

    ctx = ApplyContext(settings=project.settings, environment=environment)

    reports: list[ModuleReport] = []
    for module in project.modules.values():
        result = configure_module(
            module,
            ctx,
            publishable=project.settings.is_publishable(module.name),
            appliers=appliers,
        )
        if isinstance(result, Err):
            return result
        reports.append(result.value)

    return Ok(ProjectReport(modules=tuple(reports)))
