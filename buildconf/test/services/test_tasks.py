"""Tests for execution-time task resolution."""

from __future__ import annotations

from pathlib import Path

from buildconf.core.config import GlobalSettings
from buildconf.core.environment import Environment
from buildconf.core.manifest import Project
from buildconf.core.model import ReleaseDecision
from buildconf.core.result import Err, Ok
from buildconf.services.orchestrator import configure_project
from buildconf.services.tasks import execute_task, split_task_path
from buildconf.test.conftest import ModuleFactory


def _configured(tmp_path: Path, make_module: ModuleFactory, version: str) -> Project:
    project = Project(
        root_dir=tmp_path,
        settings=GlobalSettings(publish_allow_list=frozenset({"wire-gradle-plugin"})),
    )
    root = make_module("wire", root=True, version=version)
    plugin = make_module("wire-gradle-plugin", version=version, plugins=("application",))
    project.modules = {"wire": root, "wire-gradle-plugin": plugin}
    assert isinstance(configure_project(project, Environment.of()), Ok)
    return project


class TestSplitTaskPath:
    def test_module_task(self) -> None:
        assert split_task_path(":wire-runtime:jar") == (":wire-runtime", "jar")

    def test_nested_module(self) -> None:
        assert split_task_path(":samples:app:lint") == (":samples:app", "lint")

    def test_root_task(self) -> None:
        assert split_task_path(":publishIfRelease") == (":", "publishIfRelease")

    def test_invalid(self) -> None:
        assert split_task_path("jar") is None
        assert split_task_path(":wire-runtime:") is None


class TestExecuteTask:
    def test_release_triggers_publish(self, tmp_path: Path, make_module: ModuleFactory) -> None:
        project = _configured(tmp_path, make_module, "5.3.0")

        result = execute_task(project, ":wire-gradle-plugin:publishIfRelease")

        assert isinstance(result, Ok)
        assert result.value.active
        assert result.value.decision is ReleaseDecision.PUBLISH
        assert result.value.triggers == (
            ":wire-gradle-plugin:publishAllPublicationsToMavenCentralRepository",
        )

    def test_plugin_portal_task(self, tmp_path: Path, make_module: ModuleFactory) -> None:
        project = _configured(tmp_path, make_module, "5.3.0")

        execution = execute_task(
            project, ":wire-gradle-plugin:publishPluginToGradlePortalIfRelease"
        ).unwrap()

        assert execution is not None
        assert execution.triggers == (":wire-gradle-plugin:publishPlugins",)

    def test_snapshot_task_exists_but_is_inactive(
        self, tmp_path: Path, make_module: ModuleFactory
    ) -> None:
        project = _configured(tmp_path, make_module, "5.3.0-SNAPSHOT")

        execution = execute_task(
            project, ":wire-gradle-plugin:publishPluginToGradlePortalIfRelease"
        ).unwrap()

        assert execution is not None
        assert not execution.active
        assert execution.decision is ReleaseDecision.SKIP_SNAPSHOT
        assert execution.triggers == ()

    def test_gate_evaluated_at_execution(self, tmp_path: Path, make_module: ModuleFactory) -> None:
        project = _configured(tmp_path, make_module, "5.3.0-SNAPSHOT")
        project.modules["wire-gradle-plugin"].version = "5.3.0"

        execution = execute_task(project, ":wire-gradle-plugin:publishIfRelease").unwrap()

        assert execution is not None
        assert execution.active

    def test_disabled_task(self, tmp_path: Path, make_module: ModuleFactory) -> None:
        project = _configured(tmp_path, make_module, "5.3.0")

        execution = execute_task(project, ":wire-gradle-plugin:distZip").unwrap()

        assert execution is not None
        assert not execution.active
        assert execution.decision is None

    def test_unknown_task(self, tmp_path: Path, make_module: ModuleFactory) -> None:
        project = _configured(tmp_path, make_module, "5.3.0")

        result = execute_task(project, ":publishIfRelease")

        assert isinstance(result, Err)
        assert result.error.kind == "unknown_task"

    def test_unknown_module(self, tmp_path: Path, make_module: ModuleFactory) -> None:
        project = _configured(tmp_path, make_module, "5.3.0")
        result = execute_task(project, ":nope:jar")
        assert isinstance(result, Err)
        assert result.error.kind == "unknown_module"
