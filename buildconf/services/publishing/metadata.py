"""POM metadata, API docs and API compatibility settings."""

from __future__ import annotations

from buildconf.core.config import GlobalSettings
from buildconf.core.model import ApiValidation, DocsConfig, Module, PomMetadata

__all__ = ["pom_for", "docs_for", "api_validation_for"]


def pom_for(module: Module, settings: GlobalSettings) -> PomMetadata:
    pom = settings.pom
    return PomMetadata(
        name=module.name,
        description=pom.description,
        inception_year=pom.inception_year,
        url=pom.url,
        license_name=pom.license_name,
        license_url=pom.license_url,
        license_distribution=pom.license_distribution,
        developer_id=pom.developer_id,
        developer_name=pom.developer_name,
        developer_url=pom.developer_url,
        scm_url=pom.scm_url,
        scm_connection=pom.scm_connection,
        scm_developer_connection=pom.scm_developer_connection,
    )


def docs_for(module: Module, settings: GlobalSettings) -> DocsConfig:
    docs = settings.docs
    return DocsConfig(
        output_dir=module.root_dir / docs.output_dir / module.name,
        suppressed_package_pattern=docs.suppressed_package_pattern,
        report_undocumented=False,
        skip_deprecated=True,
        jdk_version=docs.jdk_version,
        # Generated code is documented too.
        suppress_generated_files=False,
    )


def api_validation_for(
    settings: GlobalSettings, current: ApiValidation | None = None
) -> ApiValidation:
    ignored = current.ignored_packages if current else frozenset[str]()
    return ApiValidation(ignored_packages=ignored | frozenset(settings.docs.api_ignored_packages))
