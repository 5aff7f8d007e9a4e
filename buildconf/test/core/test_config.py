"""Tests for buildconf.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from buildconf.core.config import (
    DEFAULT_PUBLISH_ALLOW_LIST,
    CompilerSettings,
    ConfigError,
    GlobalSettings,
    load_settings,
    settings_from_table,
)
from buildconf.core.result import Err, Ok


class TestDefaults:
    """Defaults mirror the project's own build logic."""

    def test_allow_list(self) -> None:
        settings = GlobalSettings()
        assert settings.publish_allow_list == DEFAULT_PUBLISH_ALLOW_LIST
        assert "wire-compiler" in settings.publish_allow_list
        assert len(settings.publish_allow_list) == 15

    def test_version_markers(self) -> None:
        settings = GlobalSettings()
        assert settings.versions.snapshot_suffix == "-SNAPSHOT"
        assert settings.versions.internal_marker == "square"

    def test_compiler(self) -> None:
        compiler = CompilerSettings()
        assert compiler.jvm_target == "1.8"
        assert compiler.free_args == ("-progressive", "-Xexpect-actual-classes")
        assert compiler.jvm_free_args == ("-Xjvm-default=all",)

    def test_android(self) -> None:
        android = GlobalSettings().android
        assert (android.compile_sdk, android.min_sdk, android.target_sdk) == (35, 28, 33)

    def test_frozen(self) -> None:
        settings = GlobalSettings()
        with pytest.raises(AttributeError):
            settings.publish_allow_list = frozenset()  # type: ignore[misc]

    def test_is_publishable(self) -> None:
        settings = GlobalSettings()
        assert settings.is_publishable("wire-runtime")
        assert not settings.is_publishable("samples")


class TestSettingsFromTable:
    def test_empty_table_keeps_defaults(self) -> None:
        assert settings_from_table({}) == GlobalSettings()

    def test_overrides(self) -> None:
        settings = settings_from_table(
            {
                "publish_allow_list": ["core", "cli"],
                "versions": {"internal_marker": "acme"},
                "android": {"compile_sdk": 34},
                "compiler": {"jvm_target": "11", "free_args": ["-Werror"]},
            }
        )
        assert settings.publish_allow_list == frozenset({"core", "cli"})
        assert settings.versions.internal_marker == "acme"
        assert settings.versions.snapshot_suffix == "-SNAPSHOT"
        assert settings.android.compile_sdk == 34
        assert settings.android.target_sdk == 33
        assert settings.compiler.jvm_target == "11"
        assert settings.compiler.free_args == ("-Werror",)

    def test_empty_allow_list_is_honoured(self) -> None:
        settings = settings_from_table({"publish_allow_list": []})
        assert settings.publish_allow_list == frozenset()

    def test_wrong_types_fall_back(self) -> None:
        settings = settings_from_table({"android": {"compile_sdk": "35", "min_sdk": True}})
        assert settings.android.compile_sdk == 35
        assert settings.android.min_sdk == 28

    def test_explicit_zero_is_kept(self) -> None:
        settings = settings_from_table({"android": {"version_code": 0, "min_sdk": 0}})
        assert settings.android.version_code == 0
        assert settings.android.min_sdk == 0
        assert settings.android.compile_sdk == 35

    def test_explicit_empty_flags_are_kept(self) -> None:
        settings = settings_from_table({"compiler": {"jvm_free_args": []}})
        assert settings.compiler.jvm_free_args == ()
        assert settings.compiler.free_args == ("-progressive", "-Xexpect-actual-classes")


class TestLoadSettings:
    def test_load_valid(self, tmp_path: Path) -> None:
        path = tmp_path / "buildconf.toml"
        path.write_text('[settings.docs]\njdk_version = 11\n', encoding="utf-8")

        result = load_settings(path)

        assert isinstance(result, Ok)
        assert result.value.docs.jdk_version == 11

    def test_missing_settings_table(self, tmp_path: Path) -> None:
        path = tmp_path / "buildconf.toml"
        path.write_text('[project]\nname = "x"\n', encoding="utf-8")

        result = load_settings(path)

        assert isinstance(result, Ok)
        assert result.value == GlobalSettings()

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_settings(tmp_path / "nope.toml")

        assert isinstance(result, Err)
        assert isinstance(result.error, ConfigError)
        assert "not found" in result.error.message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "buildconf.toml"
        path.write_text("[settings\n", encoding="utf-8")

        result = load_settings(path)

        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message
        assert result.error.path == path
