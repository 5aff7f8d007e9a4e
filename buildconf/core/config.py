"""Typed global settings for the orchestrator.

Everything here is fixed data: SDK levels, compiler flags, POM text and the
publish allow-list. Defaults reproduce the project's own build logic; a
``[settings]`` table in the project manifest may override any of them.
Settings are built once before any module is configured and never mutated.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeVar

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_int, get_str, get_str_tuple, get_table

__all__ = [
    "ConfigError",
    "GlobalSettings",
    "VersionMarkers",
    "FormattingSettings",
    "AndroidSettings",
    "CompilerSettings",
    "PomSettings",
    "DocsSettings",
    "PublishingSettings",
    "DEFAULT_PUBLISH_ALLOW_LIST",
    "load_settings",
    "settings_from_table",
]

DEFAULT_PUBLISH_ALLOW_LIST: frozenset[str] = frozenset(
    {
        "wire-bom",
        "wire-compiler",
        "wire-gradle-plugin",
        "wire-grpc-client",
        "wire-grpc-mockwebserver",
        "wire-gson-support",
        "wire-java-generator",
        "wire-kotlin-generator",
        "wire-moshi-adapter",
        "wire-reflector",
        "wire-runtime",
        "wire-runtime-swift",
        "wire-schema",
        "wire-schema-tests",
        "wire-swift-generator",
    }
)

GENERATED_CODE_MARKER = "// Code generated by Wire protocol buffer compiler"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when settings cannot be loaded or parsed."""

    message: str
    path: Path | None = None
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class VersionMarkers:
    """Plain-text conventions carried by version strings."""

    snapshot_suffix: str = "-SNAPSHOT"
    internal_marker: str = "square"


@dataclass(frozen=True, slots=True)
class FormattingSettings:
    generated_marker: str = GENERATED_CODE_MARKER
    license_header: str = "gradle/license-header.txt"
    google_java_format_version: str = "1.27.0"
    ktlint_version: str = "0.48.2"
    swift_license_delimiter: str = "(@propertyWrapper|public |import |enum )"
    test_fixture_exclude: str = "src/test/projects/**"


@dataclass(frozen=True, slots=True)
class AndroidSettings:
    compile_sdk: int = 35
    min_sdk: int = 28
    target_sdk: int = 33
    version_code: int = 1
    version_name: str = "1.0"
    application_marker: str = "app"


@dataclass(frozen=True, slots=True)
class CompilerSettings:
    """Compiler flags shared by every module.

    ``jvm_target`` is the single source for both the Kotlin JVM target and the
    Java source/target compatibility.
    """

    jvm_target: str = "1.8"
    free_args: tuple[str, ...] = ("-progressive", "-Xexpect-actual-classes")
    jvm_free_args: tuple[str, ...] = ("-Xjvm-default=all",)
    multiplatform_opt_ins: tuple[str, ...] = (
        "kotlin.experimental.ExperimentalObjCName",
        "kotlinx.cinterop.BetaInteropApi",
        "kotlinx.cinterop.ExperimentalForeignApi",
    )


@dataclass(frozen=True, slots=True)
class PomSettings:
    description: str = "gRPC and protocol buffers for Android, Kotlin, and Java."
    inception_year: str = "2017"
    url: str = "https://github.com/square/wire/"
    license_name: str = "Apache-2.0"
    license_url: str = "https://www.apache.org/licenses/LICENSE-2.0"
    license_distribution: str = "repo"
    developer_id: str = "cashapp"
    developer_name: str = "CashApp"
    developer_url: str = "https://github.com/cashapp"
    scm_url: str = "https://github.com/square/wire/"
    scm_connection: str = "scm:git:https://github.com/square/wire.git"
    scm_developer_connection: str = "scm:git:ssh://git@github.com/square/wire.git"


@dataclass(frozen=True, slots=True)
class DocsSettings:
    output_dir: str = "docs/3.x"
    suppressed_package_pattern: str = r"com\.squareup\.wire.*\.internal.*"
    jdk_version: int = 8
    api_ignored_packages: tuple[str, ...] = ("grpc.reflection.v1alpha",)


@dataclass(frozen=True, slots=True)
class PublishingSettings:
    bom_module: str = "wire-bom"
    build_plugin_module: str = "wire-gradle-plugin"
    local_repository_dir: str = "build/localMaven"


@dataclass(frozen=True, slots=True)
class GlobalSettings:
    """Process-wide, read-only configuration injected into the orchestrator."""

    publish_allow_list: frozenset[str] = DEFAULT_PUBLISH_ALLOW_LIST
    versions: VersionMarkers = field(default_factory=VersionMarkers)
    formatting: FormattingSettings = field(default_factory=FormattingSettings)
    android: AndroidSettings = field(default_factory=AndroidSettings)
    compiler: CompilerSettings = field(default_factory=CompilerSettings)
    pom: PomSettings = field(default_factory=PomSettings)
    docs: DocsSettings = field(default_factory=DocsSettings)
    publishing: PublishingSettings = field(default_factory=PublishingSettings)

    def is_publishable(self, module_name: str) -> bool:
        return module_name in self.publish_allow_list


T = TypeVar("T")


def _or_default(value: T | None, default: T) -> T:
    # Falsy overrides (0, an empty list) are kept.
    return default if value is None else value


def settings_from_table(data: Mapping[str, object]) -> GlobalSettings:
    """Create GlobalSettings from a parsed ``[settings]`` table.

    Missing keys keep their defaults.
    """
    versions: StrDict = get_table(data, "versions") or {}
    formatting: StrDict = get_table(data, "formatting") or {}
    android: StrDict = get_table(data, "android") or {}
    compiler: StrDict = get_table(data, "compiler") or {}
    pom: StrDict = get_table(data, "pom") or {}
    docs: StrDict = get_table(data, "docs") or {}
    publishing: StrDict = get_table(data, "publishing") or {}

    d_versions = VersionMarkers()
    d_formatting = FormattingSettings()
    d_android = AndroidSettings()
    d_compiler = CompilerSettings()
    d_pom = PomSettings()
    d_docs = DocsSettings()
    d_publishing = PublishingSettings()

    allow_list = get_str_tuple(data, "publish_allow_list")

    return GlobalSettings(
        publish_allow_list=(
            frozenset(allow_list) if allow_list is not None else DEFAULT_PUBLISH_ALLOW_LIST
        ),
        versions=VersionMarkers(
            snapshot_suffix=get_str(versions, "snapshot_suffix") or d_versions.snapshot_suffix,
            internal_marker=get_str(versions, "internal_marker") or d_versions.internal_marker,
        ),
        formatting=FormattingSettings(
            generated_marker=get_str(formatting, "generated_marker")
            or d_formatting.generated_marker,
            license_header=get_str(formatting, "license_header") or d_formatting.license_header,
            google_java_format_version=get_str(formatting, "google_java_format_version")
            or d_formatting.google_java_format_version,
            ktlint_version=get_str(formatting, "ktlint_version") or d_formatting.ktlint_version,
            swift_license_delimiter=get_str(formatting, "swift_license_delimiter")
            or d_formatting.swift_license_delimiter,
            test_fixture_exclude=get_str(formatting, "test_fixture_exclude")
            or d_formatting.test_fixture_exclude,
        ),
        android=AndroidSettings(
            compile_sdk=_or_default(get_int(android, "compile_sdk"), d_android.compile_sdk),
            min_sdk=_or_default(get_int(android, "min_sdk"), d_android.min_sdk),
            target_sdk=_or_default(get_int(android, "target_sdk"), d_android.target_sdk),
            version_code=_or_default(get_int(android, "version_code"), d_android.version_code),
            version_name=get_str(android, "version_name") or d_android.version_name,
            application_marker=get_str(android, "application_marker")
            or d_android.application_marker,
        ),
        compiler=CompilerSettings(
            jvm_target=get_str(compiler, "jvm_target") or d_compiler.jvm_target,
            free_args=_or_default(get_str_tuple(compiler, "free_args"), d_compiler.free_args),
            jvm_free_args=_or_default(
                get_str_tuple(compiler, "jvm_free_args"), d_compiler.jvm_free_args
            ),
            multiplatform_opt_ins=_or_default(
                get_str_tuple(compiler, "multiplatform_opt_ins"), d_compiler.multiplatform_opt_ins
            ),
        ),
        pom=PomSettings(
            description=get_str(pom, "description") or d_pom.description,
            inception_year=get_str(pom, "inception_year") or d_pom.inception_year,
            url=get_str(pom, "url") or d_pom.url,
            license_name=get_str(pom, "license_name") or d_pom.license_name,
            license_url=get_str(pom, "license_url") or d_pom.license_url,
            license_distribution=get_str(pom, "license_distribution")
            or d_pom.license_distribution,
            developer_id=get_str(pom, "developer_id") or d_pom.developer_id,
            developer_name=get_str(pom, "developer_name") or d_pom.developer_name,
            developer_url=get_str(pom, "developer_url") or d_pom.developer_url,
            scm_url=get_str(pom, "scm_url") or d_pom.scm_url,
            scm_connection=get_str(pom, "scm_connection") or d_pom.scm_connection,
            scm_developer_connection=get_str(pom, "scm_developer_connection")
            or d_pom.scm_developer_connection,
        ),
        docs=DocsSettings(
            output_dir=get_str(docs, "output_dir") or d_docs.output_dir,
            suppressed_package_pattern=get_str(docs, "suppressed_package_pattern")
            or d_docs.suppressed_package_pattern,
            jdk_version=_or_default(get_int(docs, "jdk_version"), d_docs.jdk_version),
            api_ignored_packages=_or_default(
                get_str_tuple(docs, "api_ignored_packages"), d_docs.api_ignored_packages
            ),
        ),
        publishing=PublishingSettings(
            bom_module=get_str(publishing, "bom_module") or d_publishing.bom_module,
            build_plugin_module=get_str(publishing, "build_plugin_module")
            or d_publishing.build_plugin_module,
            local_repository_dir=get_str(publishing, "local_repository_dir")
            or d_publishing.local_repository_dir,
        ),
    )


def parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, mapping read and syntax failures to ConfigError."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("TOML root must be a table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"File not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading {path}: {e}", path=path))


def load_settings(path: Path) -> Result[GlobalSettings, ConfigError]:
    """Load GlobalSettings from the ``[settings]`` table of a TOML file.

    Args:
        path: Path to the project manifest

    Returns:
        Ok(GlobalSettings) on success, Err(ConfigError) on failure
    """
    result = parse_toml(path)
    if isinstance(result, Err):
        return result

    table = get_table(result.value, "settings") or {}
    try:
        return Ok(settings_from_table(table))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid settings structure: {e}", path=path))
