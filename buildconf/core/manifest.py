"""Project manifest: the module graph handed over by the host build.

Example ``buildconf.toml``::

    [project]
    name = "wire"
    group = "com.squareup.wire"
    version = "5.3.0-SNAPSHOT"

    [[modules]]
    name = "wire-compiler"
    plugins = ["org.jetbrains.kotlin.jvm", "application"]
    archives = ["build/distributions/wire-compiler.zip"]

Tasks the host registers by default for a plugin are added automatically;
``tasks`` entries in the manifest are registered on top.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .config import ConfigError, GlobalSettings, parse_toml, settings_from_table
from .model import ROOT_PATH, Artifact, Module, Task
from .result import Err, Ok, Result
from .structured import StrDict, get_str, get_str_tuple, get_table, get_tables

__all__ = [
    "MANIFEST_FILE",
    "Project",
    "load_project",
    "project_from_dict",
    "host_default_tasks",
]

MANIFEST_FILE = "buildconf.toml"

_JVM_PLUGINS = ("java", "java-library", "org.jetbrains.kotlin.jvm", "application")
_KOTLIN_PLUGINS = ("org.jetbrains.kotlin.jvm", "org.jetbrains.kotlin.multiplatform")
_DISTRIBUTION_PLUGINS = ("application", "distribution")


@dataclass(slots=True)
class Project:
    root_dir: Path
    settings: GlobalSettings
    modules: dict[str, Module] = field(default_factory=dict[str, Module])

    @property
    def root(self) -> Module | None:
        for module in self.modules.values():
            if module.is_root:
                return module
        return None

    def find(self, name_or_path: str) -> Module | None:
        if name_or_path in self.modules:
            return self.modules[name_or_path]
        for module in self.modules.values():
            if module.path == name_or_path:
                return module
        return None


def host_default_tasks(plugins: tuple[str, ...]) -> list[Task]:
    """Tasks the host registers on its own when these plugins are applied."""
    tasks: list[Task] = []
    if any(p in _JVM_PLUGINS for p in plugins):
        tasks.append(Task(name="jar", kind="jar"))
        tasks.append(Task(name="compileJava", kind="javaCompile"))
        tasks.append(Task(name="test", kind="test"))
    if any(p in _KOTLIN_PLUGINS for p in plugins):
        tasks.append(Task(name="compileKotlin", kind="kotlinCompile"))
    if "org.jetbrains.kotlin.multiplatform" in plugins:
        tasks.append(Task(name="jvmJar", kind="jar"))
        tasks.append(Task(name="jvmTest", kind="test"))
    if any(p in _DISTRIBUTION_PLUGINS for p in plugins):
        tasks.append(Task(name="distTar", kind="distTar"))
        tasks.append(Task(name="distZip", kind="distZip"))
    return tasks


def _module_from_table(
    table: StrDict,
    *,
    root_dir: Path,
    default_group: str,
    default_version: str,
    is_root: bool,
) -> Module | None:
    name = get_str(table, "name")
    if name is None:
        return None

    path = ROOT_PATH if is_root else (get_str(table, "path") or f":{name}")
    directory = root_dir if is_root else root_dir / (get_str(table, "directory") or name)
    plugins = get_str_tuple(table, "plugins") or ()

    module = Module(
        name=name,
        path=path,
        group=get_str(table, "group") or default_group,
        version=get_str(table, "version") or default_version,
        directory=directory,
        root_dir=root_dir,
        plugins=plugins,
        declared_capabilities=get_str_tuple(table, "capabilities") or (),
        source_sets=get_str_tuple(table, "source_sets") or (),
    )

    for task in host_default_tasks(plugins):
        module.tasks[task.name] = task
    for task_table in get_tables(table, "tasks"):
        task_name = get_str(task_table, "name")
        if task_name is None:
            continue
        module.tasks[task_name] = Task(
            name=task_name,
            kind=get_str(task_table, "kind") or "default",
            depends_on=get_str_tuple(task_table, "depends_on") or (),
        )

    for archive in get_str_tuple(table, "archives") or ():
        module.archives.append(Artifact(file=directory / archive))

    return module


def project_from_dict(data: StrDict, root_dir: Path) -> Result[Project, ConfigError]:
    """Build a Project from a parsed manifest."""
    project_table = get_table(data, "project")
    if project_table is None:
        return Err(ConfigError("Missing [project] table", hint="Add [project] with a name"))

    group = get_str(project_table, "group") or ""
    version = get_str(project_table, "version") or "unspecified"
    settings = settings_from_table(get_table(data, "settings") or {})
    project = Project(root_dir=root_dir, settings=settings)

    root = _module_from_table(
        project_table,
        root_dir=root_dir,
        default_group=group,
        default_version=version,
        is_root=True,
    )
    if root is None:
        return Err(ConfigError("[project] requires a name"))
    project.modules[root.name] = root

    for table in get_tables(data, "modules"):
        module = _module_from_table(
            table,
            root_dir=root_dir,
            default_group=group,
            default_version=version,
            is_root=False,
        )
        if module is None:
            return Err(ConfigError("Every [[modules]] entry requires a name"))
        if module.name in project.modules:
            return Err(ConfigError(f"Duplicate module name: {module.name}"))
        project.modules[module.name] = module

    return Ok(project)


def load_project(path: Path) -> Result[Project, ConfigError]:
    """Load the manifest at ``path`` (a file or a directory holding one)."""
    manifest = path / MANIFEST_FILE if path.is_dir() else path
    parsed = parse_toml(manifest)
    if isinstance(parsed, Err):
        return parsed

    result = project_from_dict(parsed.value, manifest.parent.resolve())
    if isinstance(result, Err):
        return Err(ConfigError(result.error.message, path=manifest, hint=result.error.hint))
    return result
