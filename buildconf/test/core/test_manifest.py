"""Tests for buildconf.core.manifest module."""

from __future__ import annotations

from pathlib import Path

from buildconf.core.manifest import host_default_tasks, load_project, project_from_dict
from buildconf.core.result import Err, Ok

MANIFEST = """
[project]
name = "wire"
group = "com.squareup.wire"
version = "5.3.0-SNAPSHOT"

[settings]
publish_allow_list = ["wire-compiler"]

[[modules]]
name = "wire-compiler"
plugins = ["org.jetbrains.kotlin.jvm", "application"]
archives = ["build/distributions/wire-compiler.zip", "build/libs/wire-compiler.jar"]

[[modules]]
name = "samples-android-app"
path = ":samples:android-app"
directory = "samples/android-app"
version = "1.0.0"
plugins = ["com.android.application"]
tasks = [{ name = "lintDebug", kind = "lint", depends_on = ["compileDebug"] }]
"""


class TestHostDefaultTasks:
    def test_jvm_plugin(self) -> None:
        names = [t.name for t in host_default_tasks(("java-library",))]
        assert names == ["jar", "compileJava", "test"]

    def test_application_plugin_adds_distribution_tasks(self) -> None:
        names = {t.name for t in host_default_tasks(("application",))}
        assert {"distTar", "distZip", "jar"} <= names

    def test_no_plugins(self) -> None:
        assert host_default_tasks(()) == []


class TestLoadProject:
    def test_loads_modules(self, tmp_path: Path) -> None:
        (tmp_path / "buildconf.toml").write_text(MANIFEST, encoding="utf-8")

        result = load_project(tmp_path)

        assert isinstance(result, Ok)
        project = result.value
        assert list(project.modules) == ["wire", "wire-compiler", "samples-android-app"]
        assert project.root is not None and project.root.name == "wire"
        assert project.settings.publish_allow_list == frozenset({"wire-compiler"})

    def test_module_identity(self, tmp_path: Path) -> None:
        (tmp_path / "buildconf.toml").write_text(MANIFEST, encoding="utf-8")
        project = load_project(tmp_path).unwrap()
        assert project is not None

        compiler = project.modules["wire-compiler"]
        assert compiler.path == ":wire-compiler"
        assert compiler.group == "com.squareup.wire"
        assert compiler.version == "5.3.0-SNAPSHOT"
        assert compiler.directory == tmp_path.resolve() / "wire-compiler"
        assert [a.file_name for a in compiler.archives] == ["wire-compiler.zip", "wire-compiler.jar"]

        app = project.modules["samples-android-app"]
        assert app.path == ":samples:android-app"
        assert app.version == "1.0.0"
        assert app.tasks["lintDebug"].depends_on == ("compileDebug",)

    def test_find_by_path(self, tmp_path: Path) -> None:
        (tmp_path / "buildconf.toml").write_text(MANIFEST, encoding="utf-8")
        project = load_project(tmp_path).unwrap()
        assert project is not None

        found = project.find(":samples:android-app")
        assert found is not None and found.name == "samples-android-app"
        assert project.find(":") is project.root
        assert project.find(":nope") is None

    def test_missing_project_table(self, tmp_path: Path) -> None:
        result = project_from_dict({"modules": []}, tmp_path)
        assert isinstance(result, Err)
        assert "[project]" in result.error.message

    def test_duplicate_module(self, tmp_path: Path) -> None:
        data: dict[str, object] = {
            "project": {"name": "wire"},
            "modules": [{"name": "a"}, {"name": "a"}],
        }
        result = project_from_dict(data, tmp_path)
        assert isinstance(result, Err)
        assert "Duplicate" in result.error.message

    def test_manifest_file_path_accepted(self, tmp_path: Path) -> None:
        manifest = tmp_path / "custom.toml"
        manifest.write_text(MANIFEST, encoding="utf-8")
        assert isinstance(load_project(manifest), Ok)
