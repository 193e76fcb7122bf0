"""Sandbox security configuration model and loaders."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from sandbox_guard.utils.errors import ConfigurationError


class SandboxSecurityConfig(BaseModel):
    """Security-relevant subset of a sandbox container configuration.

    Every field is optional; an absent value means the container runtime
    default, which is always accepted. Both snake_case names and the camelCase
    keys used by sandbox config files (``seccompProfile``, ``apparmorProfile``)
    are accepted.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    binds: list[str] | None = Field(
        default=None,
        description="Bind mount specifications (source:target[:mode])",
    )
    network: str | None = Field(default=None, description="Container network mode")
    seccomp_profile: str | None = Field(
        default=None,
        alias="seccompProfile",
        description="Seccomp profile name or path",
    )
    apparmor_profile: str | None = Field(
        default=None,
        alias="apparmorProfile",
        description="AppArmor profile name",
    )

    @field_validator("binds", mode="before")
    @classmethod
    def parse_binds(cls, value: Any) -> Any:
        """Accept a single bind string as a one-element list."""
        if isinstance(value, str):
            return [value]
        return value


def coerce_sandbox_config(
    config: SandboxSecurityConfig | Mapping[str, Any],
) -> SandboxSecurityConfig:
    """Return ``config`` as a SandboxSecurityConfig.

    Raises:
        ConfigurationError: If a mapping does not match the schema
    """
    if isinstance(config, SandboxSecurityConfig):
        return config
    try:
        return SandboxSecurityConfig.model_validate(dict(config))
    except ValidationError as e:
        raise ConfigurationError(f"Invalid sandbox configuration: {e}") from e


def load_sandbox_config(path: Path) -> SandboxSecurityConfig:
    """Load a sandbox configuration from a YAML or JSON file.

    A top-level ``sandbox`` key, if present, is used as the configuration
    section.

    Args:
        path: Path to the configuration file

    Returns:
        Parsed configuration

    Raises:
        ConfigurationError: If the file cannot be read, parsed or validated
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML/JSON in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {path} must contain a mapping, got {type(data).__name__}"
        )
    if isinstance(data.get("sandbox"), dict):
        data = data["sandbox"]

    return coerce_sandbox_config(data)
