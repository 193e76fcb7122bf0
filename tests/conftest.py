"""Pytest configuration and shared fixtures."""

from collections.abc import Generator
from pathlib import Path

import pytest
from hypothesis import HealthCheck, settings
from loguru import logger

from sandbox_guard.config import GuardConfig, ServerConfig
from sandbox_guard.models import SandboxSecurityConfig

# The autouse logger fixture holds no per-example state
settings.register_profile(
    "sandbox_guard", suppress_health_check=[HealthCheck.function_scoped_fixture]
)
settings.load_profile("sandbox_guard")


@pytest.fixture(autouse=True)
def _quiet_logger() -> Generator[None, None, None]:
    """Keep validator warnings out of test output."""
    logger.remove()
    yield
    logger.remove()


@pytest.fixture
def guard_config() -> GuardConfig:
    """Create test guard configuration with symlink resolution enabled."""
    return GuardConfig(resolve_symlinks=True)


@pytest.fixture
def dry_run_guard_config() -> GuardConfig:
    """Create guard configuration that skips the filesystem pass."""
    return GuardConfig(resolve_symlinks=False)


@pytest.fixture
def server_config() -> ServerConfig:
    """Create test logging configuration."""
    return ServerConfig(
        log_level="DEBUG",
        log_format="<level>{level}</level> - {message}",
    )


@pytest.fixture
def safe_sandbox_config() -> SandboxSecurityConfig:
    """Create a sandbox configuration that passes every check."""
    return SandboxSecurityConfig(
        binds=["/home/user/src:/src:rw"],
        network="none",
        seccomp_profile="/tmp/seccomp.json",
        apparmor_profile="sandbox-profile",
    )


@pytest.fixture
def etc_symlink(tmp_path: Path) -> Path:
    """Create a symlink inside tmp_path that points at /etc."""
    link = tmp_path / "etc-link"
    link.symlink_to("/etc")
    return link
