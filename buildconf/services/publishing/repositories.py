"""Repository targets for publishable modules.

``LocalMaven`` and ``test`` deliberately point at the same directory: CI picks
a target by name. The ``internal`` target exists only when URL, username and
password are all set.

To push to an internal repository, put these in the secrets file (or export
them as ``ORG_GRADLE_PROJECT_<name>``)::

    internalUrl = "https://repo.example.com/maven"
    internalUsername = "me"
    internalPassword = "secret"
"""

from __future__ import annotations

from buildconf.core.config import GlobalSettings
from buildconf.core.environment import Environment
from buildconf.core.model import Credentials, Module, RepositoryTarget

__all__ = [
    "LOCAL_TARGET",
    "TEST_TARGET",
    "INTERNAL_TARGET",
    "local_targets",
    "internal_target",
]

LOCAL_TARGET = "LocalMaven"
TEST_TARGET = "test"
INTERNAL_TARGET = "internal"


def local_targets(module: Module, settings: GlobalSettings) -> list[RepositoryTarget]:
    url = (module.root_dir / settings.publishing.local_repository_dir).resolve().as_uri()
    return [
        RepositoryTarget(name=LOCAL_TARGET, url=url),
        RepositoryTarget(name=TEST_TARGET, url=url),
    ]


def internal_target(env: Environment) -> RepositoryTarget | None:
    url = env.project_property("internalUrl")
    username = env.project_property("internalUsername")
    password = env.project_property("internalPassword")
    if url is None or username is None or password is None:
        return None
    return RepositoryTarget(
        name=INTERNAL_TARGET,
        url=url,
        credentials=Credentials(username=username, password=password),
    )
