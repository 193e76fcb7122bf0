"""Property-based tests for bind mount checks using hypothesis."""

import posixpath

from hypothesis import given
from hypothesis import strategies as st

from sandbox_guard.safety.binds import (
    BLOCKED_HOST_PATHS,
    BindBlockKind,
    BlockedBindReason,
    get_blocked_bind_reason_string_only,
)
from sandbox_guard.safety.paths import normalize_host_path
from sandbox_guard.safety.profiles import validate_network_mode
from sandbox_guard.utils.errors import BlockedNetworkModeError

path_segment = st.from_regex(r"[A-Za-z0-9_-]{1,12}", fullmatch=True)
raw_segment = st.one_of(path_segment, st.sampled_from([".", "..", ""]))


def _strict_ancestors(path: str) -> list[str]:
    ancestors = []
    while path != "/":
        path = posixpath.dirname(path)
        ancestors.append(path)
    return ancestors


class TestNormalizeProperties:
    """Property-based tests for normalize_host_path."""

    @given(st.booleans(), st.lists(raw_segment, max_size=8), st.booleans())
    def test_idempotent(self, absolute: bool, segments: list[str], trailing: bool) -> None:
        """Test that normalizing an already-normalized path is a no-op."""
        raw = ("/" if absolute else "") + "/".join(segments) + ("/" if trailing else "")
        once = normalize_host_path(raw)
        assert normalize_host_path(once) == once

    @given(st.lists(raw_segment, max_size=8))
    def test_absolute_stays_absolute(self, segments: list[str]) -> None:
        """Test that absolute input never normalizes to a relative path."""
        normalized = normalize_host_path("/" + "/".join(segments))
        assert normalized.startswith("/")
        assert normalized == "/" or not normalized.endswith("/")
        assert "//" not in normalized


class TestDenylistProperties:
    """Property-based tests for targets/covers/non_absolute classification."""

    @given(
        st.sampled_from(BLOCKED_HOST_PATHS),
        st.lists(path_segment, max_size=4),
        st.sampled_from(["", ":/mnt", ":/mnt:ro"]),
    )
    def test_blocked_path_and_descendants_targeted(
        self, blocked: str, suffix: list[str], target: str
    ) -> None:
        """Test that a blocked path or anything under it is targeted."""
        source = "/".join([blocked, *suffix])
        reason = get_blocked_bind_reason_string_only(source + target)
        assert reason == BlockedBindReason.targets(blocked)

    @given(st.sampled_from(BLOCKED_HOST_PATHS))
    def test_strict_ancestors_cover(self, blocked: str) -> None:
        """Test that every ancestor of a blocked path, including /, covers it."""
        for ancestor in _strict_ancestors(blocked):
            reason = get_blocked_bind_reason_string_only(f"{ancestor}:/host")
            assert reason is not None
            assert reason.kind == BindBlockKind.COVERS

    @given(st.from_regex(r"[A-Za-z0-9._~-][A-Za-z0-9._~/-]{0,30}", fullmatch=True))
    def test_non_absolute_sources_rejected(self, source: str) -> None:
        """Test that any source without a leading / is rejected."""
        reason = get_blocked_bind_reason_string_only(f"{source}:/mnt")
        assert reason == BlockedBindReason.non_absolute(source)

    @given(
        st.sampled_from(BLOCKED_HOST_PATHS),
        st.sampled_from(["/home/x/../..", "/", "//", "/./"]),
    )
    def test_equivalent_spellings_match_identically(self, blocked: str, prefix: str) -> None:
        """Test that lexically equivalent sources give the same reason."""
        spelled = prefix.rstrip("/") + blocked.replace("/", "//") + "/"
        assert get_blocked_bind_reason_string_only(spelled) == (
            get_blocked_bind_reason_string_only(blocked)
        )


class TestNetworkModeProperties:
    """Property-based tests for case-insensitive scalar checks."""

    @given(st.lists(st.booleans(), min_size=4, max_size=4))
    def test_host_blocked_in_any_casing(self, upper: list[bool]) -> None:
        """Test that every casing of host is rejected with its original spelling."""
        mode = "".join(c.upper() if u else c for c, u in zip("host", upper, strict=True))
        try:
            validate_network_mode(mode)
            raise AssertionError("Should have raised BlockedNetworkModeError")
        except BlockedNetworkModeError as e:
            assert f'network mode "{mode}"' in str(e)
