"""Utility modules for sandbox-guard."""

from sandbox_guard.utils.errors import (
    BlockedApparmorProfileError,
    BlockedBindError,
    BlockedCoverError,
    BlockedNetworkModeError,
    BlockedScalarError,
    BlockedSeccompProfileError,
    BlockedTargetError,
    ConfigurationError,
    NonAbsoluteSourceError,
    SandboxGuardError,
    SandboxSecurityError,
)
from sandbox_guard.utils.logger import get_logger, setup_logger

__all__ = [
    "BlockedApparmorProfileError",
    "BlockedBindError",
    "BlockedCoverError",
    "BlockedNetworkModeError",
    "BlockedScalarError",
    "BlockedSeccompProfileError",
    "BlockedTargetError",
    "ConfigurationError",
    "NonAbsoluteSourceError",
    "SandboxGuardError",
    "SandboxSecurityError",
    "get_logger",
    "setup_logger",
]
