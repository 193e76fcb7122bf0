"""Sandbox security checks.

This package provides the host path denylist, the bind mount and profile
validators, and the composite pre-flight entry point.
"""

from sandbox_guard.safety.binds import (
    BLOCKED_HOST_PATHS,
    BindBlockKind,
    BlockedBindReason,
    get_blocked_bind_reason,
    get_blocked_bind_reason_string_only,
    match_blocked_path,
    resolve_real_path,
    validate_bind_mounts,
)
from sandbox_guard.safety.core import SandboxSecurityEnforcer, validate_sandbox_security
from sandbox_guard.safety.paths import normalize_host_path, parse_bind_source_path
from sandbox_guard.safety.profiles import (
    BLOCKED_APPARMOR_PROFILES,
    BLOCKED_NETWORK_MODES,
    BLOCKED_SECCOMP_PROFILES,
    validate_apparmor_profile,
    validate_network_mode,
    validate_seccomp_profile,
)

__all__ = [
    "BLOCKED_APPARMOR_PROFILES",
    "BLOCKED_HOST_PATHS",
    "BLOCKED_NETWORK_MODES",
    "BLOCKED_SECCOMP_PROFILES",
    "BindBlockKind",
    "BlockedBindReason",
    "SandboxSecurityEnforcer",
    "get_blocked_bind_reason",
    "get_blocked_bind_reason_string_only",
    "match_blocked_path",
    "normalize_host_path",
    "parse_bind_source_path",
    "resolve_real_path",
    "validate_apparmor_profile",
    "validate_bind_mounts",
    "validate_network_mode",
    "validate_sandbox_security",
    "validate_seccomp_profile",
]
