"""Host path normalization and bind mount parsing.

Both functions are purely lexical: they never touch the filesystem and never
raise, so they are safe to use in dry-run audits.
"""

import posixpath


def parse_bind_source_path(bind: str) -> str:
    """Extract the host (source) path from a Docker bind mount string.

    Bind format is ``source:target[:mode]``. A string with no colon, or one
    that starts with a colon, is returned whole so that later checks can
    classify it.

    Args:
        bind: Raw bind mount specification

    Returns:
        The trimmed source segment

    Examples:
        >>> parse_bind_source_path("/home/user/src:/src:rw")
        '/home/user/src'
        >>> parse_bind_source_path("myvol")
        'myvol'
    """
    trimmed = bind.strip()
    first_colon = trimmed.find(":")
    if first_colon <= 0:
        return trimmed
    return trimmed[:first_colon]


def normalize_host_path(raw: str) -> str:
    """Normalize a POSIX host path without consulting the filesystem.

    Resolves ``.`` and ``..`` segments, collapses repeated separators and
    strips the trailing separator. A path that collapses to nothing becomes
    the root. Normalizing an already-normalized path returns it unchanged.

    Args:
        raw: Path to normalize

    Returns:
        Normalized path

    Examples:
        >>> normalize_host_path("//etc//")
        '/etc'
        >>> normalize_host_path("/home/x/../../etc")
        '/etc'
    """
    normalized = posixpath.normpath(raw.strip())
    # POSIX allows an implementation-defined leading "//"; treat it as "/"
    if normalized.startswith("//"):
        normalized = "/" + normalized.lstrip("/")
    return normalized.rstrip("/") or "/"
