"""Pre-flight security gate for sandbox container configurations."""

from sandbox_guard.audit import CheckName, SecurityFinding, audit_sandbox_security
from sandbox_guard.models import SandboxSecurityConfig, load_sandbox_config
from sandbox_guard.safety import (
    BLOCKED_APPARMOR_PROFILES,
    BLOCKED_HOST_PATHS,
    BLOCKED_NETWORK_MODES,
    BLOCKED_SECCOMP_PROFILES,
    BindBlockKind,
    BlockedBindReason,
    SandboxSecurityEnforcer,
    get_blocked_bind_reason,
    get_blocked_bind_reason_string_only,
    normalize_host_path,
    parse_bind_source_path,
    validate_apparmor_profile,
    validate_bind_mounts,
    validate_network_mode,
    validate_sandbox_security,
    validate_seccomp_profile,
)
from sandbox_guard.utils.errors import (
    BlockedApparmorProfileError,
    BlockedBindError,
    BlockedCoverError,
    BlockedNetworkModeError,
    BlockedSeccompProfileError,
    BlockedTargetError,
    ConfigurationError,
    NonAbsoluteSourceError,
    SandboxGuardError,
    SandboxSecurityError,
)
from sandbox_guard.version import __version__

__all__ = [
    "BLOCKED_APPARMOR_PROFILES",
    "BLOCKED_HOST_PATHS",
    "BLOCKED_NETWORK_MODES",
    "BLOCKED_SECCOMP_PROFILES",
    "BindBlockKind",
    "BlockedApparmorProfileError",
    "BlockedBindError",
    "BlockedBindReason",
    "BlockedCoverError",
    "BlockedNetworkModeError",
    "BlockedSeccompProfileError",
    "BlockedTargetError",
    "CheckName",
    "ConfigurationError",
    "NonAbsoluteSourceError",
    "SandboxGuardError",
    "SandboxSecurityConfig",
    "SandboxSecurityEnforcer",
    "SandboxSecurityError",
    "SecurityFinding",
    "__version__",
    "audit_sandbox_security",
    "get_blocked_bind_reason",
    "get_blocked_bind_reason_string_only",
    "load_sandbox_config",
    "normalize_host_path",
    "parse_bind_source_path",
    "validate_apparmor_profile",
    "validate_bind_mounts",
    "validate_network_mode",
    "validate_sandbox_security",
    "validate_seccomp_profile",
]
