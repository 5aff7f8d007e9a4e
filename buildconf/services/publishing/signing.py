from __future__ import annotations

from buildconf.core.environment import Environment

__all__ = ["SIGNING_KEY_PROPERTY", "signing_enabled"]

SIGNING_KEY_PROPERTY = "signingInMemoryKey"


def signing_enabled(env: Environment) -> bool:
    """All publications of a module are signed iff the in-memory key is set."""
    return env.project_property(SIGNING_KEY_PROPERTY) is not None
