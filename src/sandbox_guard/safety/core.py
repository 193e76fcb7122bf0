"""Composite sandbox security validation.

``validate_sandbox_security`` is the single pre-flight check run before a
sandbox container is created. ``SandboxSecurityEnforcer`` binds it to a
``GuardConfig`` so a sandbox-creation pipeline can hold one configured
instance.
"""

from collections.abc import Mapping
from typing import Any

from sandbox_guard.config import GuardConfig
from sandbox_guard.models import SandboxSecurityConfig, coerce_sandbox_config
from sandbox_guard.safety.binds import validate_bind_mounts
from sandbox_guard.safety.profiles import (
    validate_apparmor_profile,
    validate_network_mode,
    validate_seccomp_profile,
)
from sandbox_guard.utils.logger import get_logger

logger = get_logger(__name__)


def validate_sandbox_security(
    config: SandboxSecurityConfig | Mapping[str, Any],
    resolve_symlinks: bool = True,
) -> None:
    """Validate a sandbox configuration against the security denylists.

    Checks run in order (bind mounts, network mode, seccomp profile, AppArmor
    profile) and the first violation aborts the remaining checks.

    Args:
        config: Sandbox configuration model or mapping
        resolve_symlinks: Whether bind sources are resolved to real paths

    Raises:
        ConfigurationError: If a mapping does not match the schema
        SandboxSecurityError: If any check fails
    """
    cfg = coerce_sandbox_config(config)
    validate_bind_mounts(cfg.binds, resolve_symlinks=resolve_symlinks)
    validate_network_mode(cfg.network)
    validate_seccomp_profile(cfg.seccomp_profile)
    validate_apparmor_profile(cfg.apparmor_profile)


class SandboxSecurityEnforcer:
    """Configured entry point for sandbox pre-flight checks.

    Example:
        ```python
        enforcer = SandboxSecurityEnforcer(Config().guard)
        enforcer.check({"binds": ["/home/user/src:/src:rw"], "network": "none"})
        ```
    """

    def __init__(self, guard_config: GuardConfig | None = None):
        """Initialize enforcer with configuration.

        Args:
            guard_config: Check settings (defaults loaded from environment)
        """
        self.config = guard_config if guard_config is not None else GuardConfig()
        logger.debug(f"Initialized SandboxSecurityEnforcer with config: {self.config}")

    def check(self, config: SandboxSecurityConfig | Mapping[str, Any]) -> None:
        """Run all sandbox security checks.

        Raises:
            ConfigurationError: If a mapping does not match the schema
            SandboxSecurityError: If any check fails
        """
        validate_sandbox_security(config, resolve_symlinks=self.config.resolve_symlinks)
        logger.debug("Sandbox security checks passed")

    def check_binds(self, binds: list[str] | None) -> None:
        """Run only the bind mount check."""
        validate_bind_mounts(binds, resolve_symlinks=self.config.resolve_symlinks)
