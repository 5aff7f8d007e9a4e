from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from buildconf.core.config import GlobalSettings
from buildconf.core.environment import Environment
from buildconf.core.manifest import host_default_tasks
from buildconf.core.model import Artifact, Module
from buildconf.services.appliers import ApplyContext

ModuleFactory = Callable[..., Module]


@pytest.fixture
def make_module(tmp_path: Path) -> ModuleFactory:
    """Build a Module the way the manifest loader would."""

    def factory(
        name: str = "wire-runtime",
        *,
        version: str = "5.3.0",
        group: str = "com.squareup.wire",
        plugins: tuple[str, ...] = (),
        capabilities: tuple[str, ...] = (),
        source_sets: tuple[str, ...] = (),
        archives: tuple[str, ...] = (),
        root: bool = False,
    ) -> Module:
        directory = tmp_path if root else tmp_path / name
        module = Module(
            name=name,
            path=":" if root else f":{name}",
            group=group,
            version=version,
            directory=directory,
            root_dir=tmp_path,
            plugins=plugins,
            declared_capabilities=capabilities,
            source_sets=source_sets,
        )
        for task in host_default_tasks(plugins):
            module.tasks[task.name] = task
        module.archives.extend(Artifact(file=directory / a) for a in archives)
        return module

    return factory


@pytest.fixture
def ctx() -> ApplyContext:
    return ApplyContext(settings=GlobalSettings(), environment=Environment.of())


def context_with(
    variables: dict[str, str] | None = None,
    properties: dict[str, str] | None = None,
    settings: GlobalSettings | None = None,
) -> ApplyContext:
    return ApplyContext(
        settings=settings or GlobalSettings(),
        environment=Environment.of(variables=variables, properties=properties),
    )
