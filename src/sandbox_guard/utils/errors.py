"""Custom exceptions for sandbox-guard."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sandbox_guard.safety.binds import BlockedBindReason


class SandboxGuardError(Exception):
    """Base exception for all sandbox-guard errors."""


class ConfigurationError(SandboxGuardError):
    """Raised when a sandbox configuration cannot be loaded or parsed."""


class SandboxSecurityError(SandboxGuardError):
    """Raised when a sandbox configuration violates the security policy."""


class BlockedBindError(SandboxSecurityError):
    """Raised when a bind mount exposes a blocked host path."""

    def __init__(self, message: str, bind: str, reason: "BlockedBindReason") -> None:
        super().__init__(message)
        self.bind = bind
        self.reason = reason


class BlockedTargetError(BlockedBindError):
    """Raised when a bind mount source is, or is inside, a blocked path."""


class BlockedCoverError(BlockedBindError):
    """Raised when a bind mount source is an ancestor of a blocked path."""


class NonAbsoluteSourceError(BlockedBindError):
    """Raised when a bind mount source is relative or a named volume."""


class BlockedScalarError(SandboxSecurityError):
    """Raised when a blocked network mode or security profile is selected."""

    def __init__(self, message: str, value: str) -> None:
        super().__init__(message)
        self.value = value


class BlockedNetworkModeError(BlockedScalarError):
    """Raised when a blocked network mode (e.g. host) is requested."""


class BlockedSeccompProfileError(BlockedScalarError):
    """Raised when seccomp filtering would be disabled."""


class BlockedApparmorProfileError(BlockedScalarError):
    """Raised when AppArmor confinement would be disabled."""
