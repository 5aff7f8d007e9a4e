"""Domain model: modules, capabilities and the configuration record.

A ``Module`` is created once per build invocation from the project manifest.
Its identity and declared plugins are frozen; ``config`` and ``tasks`` are the
mutable parts that concern appliers write to.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path

__all__ = [
    "Capability",
    "ModuleState",
    "ReleaseDecision",
    "Artifact",
    "Task",
    "FormatRuleSet",
    "ReportLogging",
    "ReportEvent",
    "AndroidConfig",
    "LintOptions",
    "CompilerConfig",
    "RepositoryTarget",
    "Credentials",
    "PomMetadata",
    "DocsConfig",
    "ApiValidation",
    "PublishingConfig",
    "ModuleConfig",
    "Module",
    "ROOT_PATH",
]

ROOT_PATH = ":"


class Capability(Enum):
    """What kind of module a module is."""

    MOBILE = auto()
    MULTI_TARGET = auto()
    PRODUCES_DISTRIBUTION = auto()
    JVM = auto()

    def __str__(self) -> str:
        return self.name.lower().replace("_", "-")


class ModuleState(Enum):
    """Lifecycle of one module inside one build invocation."""

    UNCONFIGURED = auto()
    CAPABILITIES_PROBED = auto()
    CONCERNS_APPLIED = auto()
    PUBLISH_REGISTERED = auto()
    PUBLISH_GATED = auto()

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")


class ReleaseDecision(Enum):
    PUBLISH = "publish"
    SKIP_SNAPSHOT = "skip-snapshot"
    SKIP_INTERNAL = "skip-internal"

    @property
    def should_publish(self) -> bool:
        return self is ReleaseDecision.PUBLISH

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Artifact:
    """An archive registered by the host (e.g. ``build/distributions/x.zip``)."""

    file: Path

    @property
    def file_name(self) -> str:
        return self.file.name


@dataclass(slots=True)
class Task:
    """A task registered on a module.

    ``gate`` is only set on always-present, conditionally-active tasks. It is
    called when the task executes, never at registration.
    """

    name: str
    kind: str = "default"
    enabled: bool = True
    depends_on: tuple[str, ...] = ()
    manifest_attributes: dict[str, str] = field(default_factory=dict[str, str])
    gate: Callable[[], ReleaseDecision] | None = None


@dataclass(frozen=True, slots=True)
class FormatRuleSet:
    """A named formatting rule set. Re-adding one with the same name replaces it."""

    name: str
    targets: tuple[str, ...]
    target_excludes: tuple[str, ...] = ()
    exclude_if_content_contains: str | None = None
    steps: tuple[str, ...] = ()
    line_endings: str = "UNIX"
    license_header: Path | None = None
    license_delimiter: str | None = None


class ReportEvent(Enum):
    FAILED = "failed"
    SKIPPED = "skipped"
    PASSED = "passed"


@dataclass(frozen=True, slots=True)
class ReportLogging:
    events: frozenset[ReportEvent] = frozenset()
    exception_format: str = "FULL"
    show_standard_streams: bool = False


@dataclass(frozen=True, slots=True)
class LintOptions:
    check_dependencies: bool = True
    check_release_builds: bool = False


@dataclass(frozen=True, slots=True)
class AndroidConfig:
    compile_sdk: int
    min_sdk: int
    target_sdk: int
    version_code: int
    version_name: str
    source_compatibility: str
    target_compatibility: str
    application_id: str | None = None
    lint: LintOptions = field(default_factory=LintOptions)


@dataclass(frozen=True, slots=True)
class CompilerConfig:
    """Kotlin and Java compile settings.

    ``jvm_target``, ``java_source`` and ``java_target`` must always agree.
    They stay ``None`` for modules without a JVM compile.
    """

    free_args: tuple[str, ...]
    jvm_free_args: tuple[str, ...] = ()
    jvm_target: str | None = None
    java_source: str | None = None
    java_target: str | None = None
    opt_ins: dict[str, tuple[str, ...]] = field(default_factory=dict[str, tuple[str, ...]])


@dataclass(frozen=True, slots=True)
class Credentials:
    username: str
    password: str = field(repr=False)


@dataclass(frozen=True, slots=True)
class RepositoryTarget:
    name: str
    url: str
    credentials: Credentials | None = None


@dataclass(frozen=True, slots=True)
class PomMetadata:
    name: str
    description: str
    inception_year: str
    url: str
    license_name: str
    license_url: str
    license_distribution: str
    developer_id: str
    developer_name: str
    developer_url: str
    scm_url: str
    scm_connection: str
    scm_developer_connection: str


@dataclass(frozen=True, slots=True)
class DocsConfig:
    output_dir: Path
    suppressed_package_pattern: str
    report_undocumented: bool = False
    skip_deprecated: bool = True
    jdk_version: int = 8
    suppress_generated_files: bool = False


@dataclass(frozen=True, slots=True)
class ApiValidation:
    ignored_packages: frozenset[str]


@dataclass(slots=True)
class PublishingConfig:
    repositories: dict[str, RepositoryTarget] = field(default_factory=dict[str, RepositoryTarget])
    central_portal: bool = False
    automatic_release: bool = False
    signing_enabled: bool = False
    pom: PomMetadata | None = None
    docs: DocsConfig | None = None
    api_validation: ApiValidation | None = None


@dataclass(slots=True)
class ModuleConfig:
    """Configuration accumulated by concern appliers.

    Every field starts at the host default (``None``/empty) so a concern that
    never ran leaves no trace.
    """

    formatting: dict[str, FormatRuleSet] = field(default_factory=dict[str, FormatRuleSet])
    test_logging: ReportLogging | None = None
    android: AndroidConfig | None = None
    compiler: CompilerConfig | None = None
    publishing: PublishingConfig | None = None
    applied_plugins: tuple[str, ...] = ()


@dataclass(slots=True)
class Module:
    """One independently configurable unit of the project."""

    name: str
    path: str
    group: str
    version: str
    directory: Path
    root_dir: Path
    plugins: tuple[str, ...] = ()
    declared_capabilities: tuple[str, ...] = ()
    source_sets: tuple[str, ...] = ()
    tasks: dict[str, Task] = field(default_factory=dict[str, Task])
    archives: list[Artifact] = field(default_factory=list[Artifact])
    config: ModuleConfig = field(default_factory=ModuleConfig)
    state: ModuleState = ModuleState.UNCONFIGURED

    @property
    def is_root(self) -> bool:
        return self.path == ROOT_PATH

    def find_task(self, name: str) -> Task | None:
        return self.tasks.get(name)
