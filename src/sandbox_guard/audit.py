"""Non-raising sandbox security audit.

Security audit and reporting tools need every violation in a configuration,
not just the first one. ``audit_sandbox_security`` runs the same checks as
``validate_sandbox_security`` but collects each failure as a
``SecurityFinding`` instead of stopping.
"""

from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from sandbox_guard.models import SandboxSecurityConfig, coerce_sandbox_config
from sandbox_guard.safety.binds import validate_bind_mounts
from sandbox_guard.safety.profiles import (
    validate_apparmor_profile,
    validate_network_mode,
    validate_seccomp_profile,
)
from sandbox_guard.utils.errors import SandboxSecurityError
from sandbox_guard.utils.logger import get_logger

logger = get_logger(__name__)


class CheckName(str, Enum):
    """Sandbox security check dimensions."""

    BIND_MOUNT = "bind_mount"
    NETWORK_MODE = "network_mode"
    SECCOMP_PROFILE = "seccomp_profile"
    APPARMOR_PROFILE = "apparmor_profile"


class SecurityFinding(BaseModel):
    """A single sandbox security violation."""

    check: CheckName = Field(description="Which check failed")
    value: str = Field(description="The offending bind string or setting value")
    error: str = Field(description="Exception class the validator raises for this finding")
    message: str = Field(description="Human-readable diagnosis and remedy")

    @classmethod
    def from_error(
        cls, check: CheckName, value: str, exc: SandboxSecurityError
    ) -> "SecurityFinding":
        return cls(check=check, value=value, error=type(exc).__name__, message=str(exc))


def _collect(
    findings: list[SecurityFinding],
    check: CheckName,
    value: str,
    validator: Callable[[], None],
) -> None:
    try:
        validator()
    except SandboxSecurityError as e:
        findings.append(SecurityFinding.from_error(check, value, e))


def audit_sandbox_security(
    config: SandboxSecurityConfig | Mapping[str, Any],
    resolve_symlinks: bool = True,
) -> list[SecurityFinding]:
    """Collect every security violation in a sandbox configuration.

    Findings are returned in the order ``validate_sandbox_security`` would
    encounter them: each bind mount in input order, then network mode,
    seccomp profile and AppArmor profile.

    Args:
        config: Sandbox configuration model or mapping
        resolve_symlinks: If False, skip the filesystem pass (dry run)

    Returns:
        List of findings (empty if the configuration passes)

    Raises:
        ConfigurationError: If a mapping does not match the schema
    """
    cfg = coerce_sandbox_config(config)
    findings: list[SecurityFinding] = []

    for raw_bind in cfg.binds or []:
        bind = raw_bind.strip()
        if not bind:
            continue
        _collect(
            findings,
            CheckName.BIND_MOUNT,
            bind,
            lambda bind=bind: validate_bind_mounts([bind], resolve_symlinks=resolve_symlinks),
        )

    scalar_checks: list[tuple[CheckName, str | None, Callable[[str | None], None]]] = [
        (CheckName.NETWORK_MODE, cfg.network, validate_network_mode),
        (CheckName.SECCOMP_PROFILE, cfg.seccomp_profile, validate_seccomp_profile),
        (CheckName.APPARMOR_PROFILE, cfg.apparmor_profile, validate_apparmor_profile),
    ]
    for check, value, validator in scalar_checks:
        if value is None:
            continue
        _collect(findings, check, value, lambda v=value, fn=validator: fn(v))

    logger.debug(f"Sandbox audit produced {len(findings)} finding(s)")
    return findings
