"""Network mode, seccomp and AppArmor profile validation."""

from sandbox_guard.utils.errors import (
    BlockedApparmorProfileError,
    BlockedNetworkModeError,
    BlockedSeccompProfileError,
)
from sandbox_guard.utils.logger import get_logger

logger = get_logger(__name__)

# Lower-case values compared after strip().lower()
BLOCKED_NETWORK_MODES = frozenset({"host"})
BLOCKED_SECCOMP_PROFILES = frozenset({"unconfined"})
BLOCKED_APPARMOR_PROFILES = frozenset({"unconfined"})


def _is_blocked(value: str | None, blocked: frozenset[str]) -> bool:
    return value is not None and value.strip().lower() in blocked


def validate_network_mode(network: str | None) -> None:
    """Validate the container network mode.

    Args:
        network: Network mode (None means runtime default)

    Raises:
        BlockedNetworkModeError: If the mode bypasses network isolation
    """
    if _is_blocked(network, BLOCKED_NETWORK_MODES):
        logger.warning(f"Blocked network mode {network!r}")
        raise BlockedNetworkModeError(
            f'Sandbox security: network mode "{network}" is blocked. '
            'Network "host" mode bypasses container network isolation. '
            'Use "bridge" or "none" instead.',
            value=network,
        )


def validate_seccomp_profile(profile: str | None) -> None:
    """Validate the seccomp profile reference.

    Args:
        profile: Seccomp profile name or path (None means runtime default)

    Raises:
        BlockedSeccompProfileError: If the profile disables syscall filtering
    """
    if _is_blocked(profile, BLOCKED_SECCOMP_PROFILES):
        logger.warning(f"Blocked seccomp profile {profile!r}")
        raise BlockedSeccompProfileError(
            f'Sandbox security: seccomp profile "{profile}" is blocked. '
            "Disabling seccomp removes syscall filtering and weakens sandbox isolation. "
            "Use a custom seccomp profile file or omit this setting.",
            value=profile,
        )


def validate_apparmor_profile(profile: str | None) -> None:
    """Validate the AppArmor profile name.

    Raises:
        BlockedApparmorProfileError: If the profile disables AppArmor
    """
    if _is_blocked(profile, BLOCKED_APPARMOR_PROFILES):
        logger.warning(f"Blocked apparmor profile {profile!r}")
        raise BlockedApparmorProfileError(
            f'Sandbox security: apparmor profile "{profile}" is blocked. '
            "Disabling AppArmor removes mandatory access controls and weakens sandbox "
            "isolation. Use a named AppArmor profile or omit this setting.",
            value=profile,
        )
