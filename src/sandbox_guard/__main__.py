"""sandbox-guard command line entry point.

Exit codes:
    0: configuration passed
    1: configuration violates the sandbox security policy
    2: configuration could not be loaded
"""

import json
import os
from pathlib import Path

import typer

from sandbox_guard.audit import audit_sandbox_security
from sandbox_guard.config import Config
from sandbox_guard.models import SandboxSecurityConfig, load_sandbox_config
from sandbox_guard.safety.binds import BLOCKED_HOST_PATHS
from sandbox_guard.safety.core import SandboxSecurityEnforcer
from sandbox_guard.utils.errors import ConfigurationError, SandboxSecurityError
from sandbox_guard.utils.logger import get_logger, setup_logger
from sandbox_guard.version import __version__

EXIT_VIOLATION = 1
EXIT_CONFIG_ERROR = 2

app = typer.Typer(
    name="sandbox-guard",
    help="Pre-flight security checks for sandbox container configurations",
    add_completion=False,
    no_args_is_help=True,
)

logger = get_logger(__name__)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"sandbox-guard {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(  # noqa: ARG001
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Check sandbox container configurations against the security denylists."""
    config = Config()
    log_path = os.getenv("SANDBOX_GUARD_LOG_PATH")
    setup_logger(config.server, Path(log_path) if log_path else None)


def _build_sandbox_config(
    config_file: Path | None,
    binds: list[str] | None,
    network: str | None,
    seccomp_profile: str | None,
    apparmor_profile: str | None,
) -> SandboxSecurityConfig:
    """Merge a config file with command line overrides."""
    try:
        base = load_sandbox_config(config_file) if config_file else SandboxSecurityConfig()
    except ConfigurationError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from e

    overrides = {
        "binds": binds or None,
        "network": network,
        "seccomp_profile": seccomp_profile,
        "apparmor_profile": apparmor_profile,
    }
    return base.model_copy(update={k: v for k, v in overrides.items() if v is not None})


@app.command()
def check(  # noqa: PLR0913
    binds: list[str] | None = typer.Option(
        None, "--bind", "-b", help="Bind mount (source:target[:mode]); repeatable"
    ),
    network: str | None = typer.Option(None, "--network", help="Network mode"),
    seccomp_profile: str | None = typer.Option(
        None, "--seccomp-profile", help="Seccomp profile name or path"
    ),
    apparmor_profile: str | None = typer.Option(
        None, "--apparmor-profile", help="AppArmor profile name"
    ),
    config_file: Path | None = typer.Option(
        None, "--config", "-c", help="YAML or JSON sandbox configuration file"
    ),
    resolve_symlinks: bool = typer.Option(
        True,
        "--resolve-symlinks/--no-resolve-symlinks",
        help="Resolve existing bind sources to real paths before checking",
    ),
) -> None:
    """Validate a sandbox configuration, failing on the first violation."""
    sandbox_config = _build_sandbox_config(
        config_file, binds, network, seccomp_profile, apparmor_profile
    )
    guard_config = Config().guard.model_copy(update={"resolve_symlinks": resolve_symlinks})
    try:
        SandboxSecurityEnforcer(guard_config).check(sandbox_config)
    except SandboxSecurityError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=EXIT_VIOLATION) from e
    typer.echo("OK")


@app.command()
def audit(  # noqa: PLR0913
    binds: list[str] | None = typer.Option(
        None, "--bind", "-b", help="Bind mount (source:target[:mode]); repeatable"
    ),
    network: str | None = typer.Option(None, "--network", help="Network mode"),
    seccomp_profile: str | None = typer.Option(
        None, "--seccomp-profile", help="Seccomp profile name or path"
    ),
    apparmor_profile: str | None = typer.Option(
        None, "--apparmor-profile", help="AppArmor profile name"
    ),
    config_file: Path | None = typer.Option(
        None, "--config", "-c", help="YAML or JSON sandbox configuration file"
    ),
    resolve_symlinks: bool = typer.Option(
        True,
        "--resolve-symlinks/--no-resolve-symlinks",
        help="Resolve existing bind sources to real paths before checking",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print findings as JSON"),
) -> None:
    """Report every violation in a sandbox configuration."""
    sandbox_config = _build_sandbox_config(
        config_file, binds, network, seccomp_profile, apparmor_profile
    )
    findings = audit_sandbox_security(sandbox_config, resolve_symlinks=resolve_symlinks)

    if as_json:
        typer.echo(json.dumps([f.model_dump(mode="json") for f in findings], indent=2))
    elif findings:
        for finding in findings:
            typer.echo(f"[{finding.check.value}] {finding.message}")
    else:
        typer.echo("No findings")

    if findings:
        logger.info(f"Audit found {len(findings)} violation(s)")
        raise typer.Exit(code=EXIT_VIOLATION)


@app.command("blocked-paths")
def blocked_paths() -> None:
    """List host paths that may never be bind mounted into a sandbox."""
    for path in BLOCKED_HOST_PATHS:
        typer.echo(path)


if __name__ == "__main__":
    app()
