"""Tests for repository targets and signing."""

from __future__ import annotations

import itertools

import pytest

from buildconf.core.config import GlobalSettings
from buildconf.core.environment import Environment
from buildconf.services.publishing import (
    INTERNAL_TARGET,
    LOCAL_TARGET,
    TEST_TARGET,
    internal_target,
    local_targets,
    signing_enabled,
)
from buildconf.test.conftest import ModuleFactory

INTERNAL = {
    "internalUrl": "https://maven.internal.example/releases",
    "internalUsername": "ci-bot",
    "internalPassword": "hunter2",
}

PARTIAL = [
    dict(subset)
    for size in range(len(INTERNAL))
    for subset in itertools.combinations(INTERNAL.items(), size)
]


class TestLocalTargets:
    def test_two_names_one_location(self, make_module: ModuleFactory) -> None:
        module = make_module()

        targets = local_targets(module, GlobalSettings())

        assert [t.name for t in targets] == [LOCAL_TARGET, TEST_TARGET]
        assert targets[0].url == targets[1].url
        assert targets[0].url.startswith("file://")
        assert targets[0].url.endswith("/build/localMaven")
        assert all(t.credentials is None for t in targets)


class TestInternalTarget:
    def test_all_present(self) -> None:
        target = internal_target(Environment.of(properties=INTERNAL))

        assert target is not None
        assert target.name == INTERNAL_TARGET
        assert target.url == INTERNAL["internalUrl"]
        assert target.credentials is not None
        assert target.credentials.username == "ci-bot"
        assert target.credentials.password == "hunter2"

    def test_password_not_in_repr(self) -> None:
        target = internal_target(Environment.of(properties=INTERNAL))
        assert "hunter2" not in repr(target)

    def test_from_environment_variables(self) -> None:
        variables = {f"ORG_GRADLE_PROJECT_{k}": v for k, v in INTERNAL.items()}
        assert internal_target(Environment.of(variables=variables)) is not None

    @pytest.mark.parametrize("properties", PARTIAL, ids=lambda p: "+".join(p) or "none")
    def test_any_missing_value_suppresses_target(self, properties: dict[str, str]) -> None:
        assert len(PARTIAL) == 7
        assert internal_target(Environment.of(properties=properties)) is None

    def test_blank_value_counts_as_missing(self) -> None:
        properties = {**INTERNAL, "internalPassword": ""}
        assert internal_target(Environment.of(properties=properties)) is None


class TestSigning:
    def test_enabled_with_key(self) -> None:
        env = Environment.of(properties={"signingInMemoryKey": "-----BEGIN PGP-----"})
        assert signing_enabled(env)

    def test_disabled_without_key(self) -> None:
        assert not signing_enabled(Environment.of())

    def test_disabled_with_empty_key(self) -> None:
        assert not signing_enabled(Environment.of(properties={"signingInMemoryKey": ""}))
