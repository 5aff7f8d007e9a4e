"""Read-only snapshot of environment variables and project secrets.

Project properties follow the host's convention: a value set directly in the
secrets file wins, otherwise ``ORG_GRADLE_PROJECT_<name>`` from the process
environment is used.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from .config import ConfigError, parse_toml
from .result import Err, Ok, Result

__all__ = ["Environment", "load_environment", "PROJECT_PROPERTY_ENV_PREFIX"]

PROJECT_PROPERTY_ENV_PREFIX = "ORG_GRADLE_PROJECT_"


def _frozen(data: Mapping[str, str] | None) -> Mapping[str, str]:
    return MappingProxyType(dict(data or {}))


@dataclass(frozen=True, slots=True)
class Environment:
    """Inputs read once per invocation, never mutated."""

    variables: Mapping[str, str] = field(default_factory=lambda: _frozen(None))
    properties: Mapping[str, str] = field(default_factory=lambda: _frozen(None))

    @classmethod
    def of(
        cls,
        variables: Mapping[str, str] | None = None,
        properties: Mapping[str, str] | None = None,
    ) -> Environment:
        return cls(variables=_frozen(variables), properties=_frozen(properties))

    def variable(self, name: str) -> str | None:
        value = self.variables.get(name)
        if value is None or not value.strip():
            return None
        return value

    def project_property(self, name: str) -> str | None:
        """Look up a project property. Blank values count as unset."""
        value = self.properties.get(name)
        if value is None or not value.strip():
            value = self.variables.get(PROJECT_PROPERTY_ENV_PREFIX + name)
        if value is None or not value.strip():
            return None
        return value

    @property
    def is_ci(self) -> bool:
        return self.variable("CI") == "true"

    @property
    def is_internal_build(self) -> bool:
        return self.variable("INTERNAL_BUILD") == "true"


def load_environment(secrets: Path | None = None) -> Result[Environment, ConfigError]:
    """Snapshot ``os.environ`` and, if given, a TOML secrets file.

    Only top-level string values of the secrets file become properties.
    """
    properties: dict[str, str] = {}
    if secrets is not None:
        parsed = parse_toml(secrets)
        if isinstance(parsed, Err):
            return parsed
        for key, value in parsed.value.items():
            if isinstance(value, str):
                properties[key] = value

    return Ok(Environment.of(variables=dict(os.environ), properties=properties))
