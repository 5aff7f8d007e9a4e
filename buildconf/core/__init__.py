"""Core domain types and logic."""

from .config import ConfigError, GlobalSettings, load_settings
from .environment import Environment
from .errors import ErrorCode
from .model import Capability, Module, ModuleConfig, ModuleState, Task
from .result import Err, Ok, Result, is_err, is_ok

__all__ = [
    # config
    "ConfigError",
    "GlobalSettings",
    "load_settings",
    # environment
    "Environment",
    # errors
    "ErrorCode",
    # model
    "Capability",
    "Module",
    "ModuleConfig",
    "ModuleState",
    "Task",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
]
