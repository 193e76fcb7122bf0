"""Bind mount validation against the host path denylist.

Validation runs in two passes:

1. A string-only check (no filesystem I/O) that rejects relative sources,
   sources that are or sit under a blocked path ("targets"), and sources that
   are ancestors of a blocked path ("covers", e.g. mounting /var exposes
   /var/run/docker.sock).
2. A symlink pass that resolves existing sources to their real path and
   repeats the targets/covers check, so a link at an innocuous location
   cannot point into a blocked directory.
"""

import os
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from sandbox_guard.safety.paths import normalize_host_path, parse_bind_source_path
from sandbox_guard.utils.errors import (
    BlockedBindError,
    BlockedCoverError,
    BlockedTargetError,
    NonAbsoluteSourceError,
)
from sandbox_guard.utils.logger import get_logger

logger = get_logger(__name__)

# Host paths that must never be reachable from inside a sandbox container.
# Entries are independent literals; platform aliases are listed explicitly.
BLOCKED_HOST_PATHS: tuple[str, ...] = (
    "/etc",
    "/private/etc",  # macOS alias of /etc
    "/proc",
    "/sys",
    "/dev",
    "/root",
    "/boot",
    "/var/run/docker.sock",
    "/private/var/run/docker.sock",  # macOS alias of /var/run
    "/run/docker.sock",
)


class BindBlockKind(str, Enum):
    """Why a bind mount was rejected."""

    TARGETS = "targets"  # Source is, or is inside, a blocked path
    COVERS = "covers"  # Source is an ancestor of a blocked path
    NON_ABSOLUTE = "non_absolute"  # Relative path or named volume


@dataclass(frozen=True)
class BlockedBindReason:
    """Result of a failed bind mount check.

    ``path`` is the matching blocked path for TARGETS/COVERS and the offending
    source string for NON_ABSOLUTE.
    """

    kind: BindBlockKind
    path: str

    @classmethod
    def targets(cls, blocked_path: str) -> "BlockedBindReason":
        return cls(BindBlockKind.TARGETS, blocked_path)

    @classmethod
    def covers(cls, blocked_path: str) -> "BlockedBindReason":
        return cls(BindBlockKind.COVERS, blocked_path)

    @classmethod
    def non_absolute(cls, source_path: str) -> "BlockedBindReason":
        return cls(BindBlockKind.NON_ABSOLUTE, source_path)


_ERROR_TYPES: dict[BindBlockKind, type[BlockedBindError]] = {
    BindBlockKind.TARGETS: BlockedTargetError,
    BindBlockKind.COVERS: BlockedCoverError,
    BindBlockKind.NON_ABSOLUTE: NonAbsoluteSourceError,
}


def match_blocked_path(
    path: str,
    blocked_paths: Iterable[str] = BLOCKED_HOST_PATHS,
) -> BlockedBindReason | None:
    """Check a normalized absolute path against the denylist.

    For each blocked entry, in order, the targets relation is tested before
    the covers relation; the first matching entry wins.

    Args:
        path: Normalized absolute path
        blocked_paths: Denylist to check against

    Returns:
        The reason the path is blocked, or None if it is allowed
    """
    for blocked in blocked_paths:
        if path == blocked or path.startswith(blocked + "/"):
            return BlockedBindReason.targets(blocked)
        # Ancestor mounts: mounting /run exposes /run/docker.sock
        if path == "/" or blocked.startswith(path + "/"):
            return BlockedBindReason.covers(blocked)
    return None


def get_blocked_bind_reason_string_only(bind: str) -> BlockedBindReason | None:
    """Check a bind mount without any filesystem access.

    Blocks:
    - binds that target blocked paths (equal or under)
    - binds that cover blocked paths (ancestor mounts like /run or /var)
    - non-absolute source paths (relative paths and named volumes), because
      their effective host location cannot be verified here

    Args:
        bind: Raw bind mount specification

    Returns:
        The reason the bind is blocked, or None if it passes
    """
    source_raw = parse_bind_source_path(bind)
    if not source_raw.startswith("/"):
        return BlockedBindReason.non_absolute(source_raw)
    return match_blocked_path(normalize_host_path(source_raw))


def resolve_real_path(path: str) -> str:
    """Resolve symlinks in an existing absolute path.

    Non-absolute and non-existent paths are returned unchanged. Resolution
    errors (permission denied, symlink loops, races) also return the input
    unchanged; the string-only check has already run on it.

    Args:
        path: Normalized path to resolve

    Returns:
        Normalized real path, or the input path if it cannot be resolved
    """
    if not path.startswith("/") or not os.path.exists(path):
        return path
    try:
        return normalize_host_path(os.path.realpath(path, strict=True))
    except (OSError, RuntimeError, ValueError) as e:
        logger.debug(f"Could not resolve real path for {path}: {e}")
        return path


def get_blocked_bind_reason(bind: str, resolve_symlinks: bool = True) -> BlockedBindReason | None:
    """Check a bind mount, including the symlink-escape pass.

    Args:
        bind: Raw bind mount specification
        resolve_symlinks: If False, only run the string-only check

    Returns:
        The reason the bind is blocked, or None if it passes
    """
    blocked = get_blocked_bind_reason_string_only(bind)
    if blocked is not None or not resolve_symlinks:
        return blocked

    source_normalized = normalize_host_path(parse_bind_source_path(bind))
    source_real = resolve_real_path(source_normalized)
    if source_real == source_normalized:
        return None

    logger.debug(f"Bind source {source_normalized} resolves to {source_real}")
    return match_blocked_path(source_real)


def format_bind_blocked_message(bind: str, reason: BlockedBindReason) -> str:
    """Build the user-facing message for a blocked bind mount."""
    if reason.kind == BindBlockKind.NON_ABSOLUTE:
        return (
            f'Sandbox security: bind mount "{bind}" uses a non-absolute source path '
            f'"{reason.path}". Only absolute POSIX paths are supported for sandbox binds.'
        )
    return (
        f'Sandbox security: bind mount "{bind}" {reason.kind.value} blocked path '
        f'"{reason.path}". '
        "Mounting system directories (or Docker socket paths) into sandbox containers "
        "is not allowed. Use project-specific paths instead (e.g. /home/user/myproject)."
    )


def bind_blocked_error(bind: str, reason: BlockedBindReason) -> BlockedBindError:
    """Create the typed exception for a blocked bind mount."""
    error_type = _ERROR_TYPES[reason.kind]
    return error_type(format_bind_blocked_message(bind, reason), bind=bind, reason=reason)


def validate_bind_mounts(
    binds: Iterable[str] | None,
    resolve_symlinks: bool = True,
) -> None:
    """Validate bind mounts, stopping at the first dangerous source path.

    Args:
        binds: Bind mount specifications (None or empty is valid)
        resolve_symlinks: Whether to run the symlink-escape pass

    Raises:
        BlockedTargetError: If a source is or is inside a blocked path
        BlockedCoverError: If a source is an ancestor of a blocked path
        NonAbsoluteSourceError: If a source is relative or a named volume
    """
    if not binds:
        return

    for raw_bind in binds:
        bind = raw_bind.strip()
        if not bind:
            continue

        reason = get_blocked_bind_reason(bind, resolve_symlinks=resolve_symlinks)
        if reason is not None:
            logger.warning(f"Blocked bind mount {bind!r}: {reason.kind.value} {reason.path}")
            raise bind_blocked_error(bind, reason)
