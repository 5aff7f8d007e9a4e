"""Publishing orchestration for allow-listed modules."""

from .repositories import (
    INTERNAL_TARGET,
    LOCAL_TARGET,
    TEST_TARGET,
    internal_target,
    local_targets,
)
from .service import (
    CENTRAL_PUBLISH_TASK,
    PLUGIN_PORTAL_TASK,
    PUBLISH_TASK,
    PublishOutcome,
    configure_publishing,
)
from .signing import signing_enabled

__all__ = [
    "INTERNAL_TARGET",
    "LOCAL_TARGET",
    "TEST_TARGET",
    "internal_target",
    "local_targets",
    "CENTRAL_PUBLISH_TASK",
    "PLUGIN_PORTAL_TASK",
    "PUBLISH_TASK",
    "PublishOutcome",
    "configure_publishing",
    "signing_enabled",
]
