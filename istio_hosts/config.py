"""
Mesh settings.

Environment variables (prefix ``ISTIO_HOSTS_``) override defaults, and a
YAML file passed to :func:`load_settings` overrides both.
"""

import logging
from typing import Any, Literal

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_IDENTITY_DOMAIN = "svc.cluster.local"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class MeshSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ISTIO_HOSTS_", extra="ignore")

    istio_identity_domain: str = Field(
        default=DEFAULT_IDENTITY_DOMAIN,
        description="Cluster DNS suffix used to recognize in-mesh hostnames",
    )
    log_level: LogLevel = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


def load_settings(path: str | None = None) -> MeshSettings:
    if path is None:
        return MeshSettings()

    with open(path, encoding="utf-8") as f:
        data: Any = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    logger.debug("Loaded mesh settings from %s: %s", path, list(data))
    return MeshSettings(**data)


def default_identity_domain() -> str:
    # Read on every call so environment changes are honoured
    return MeshSettings().istio_identity_domain
