from typing import Any, List, Optional, Tuple, Union
from pathlib import Path
import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict, SettingsError
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from .exceptions import ConfigurationError


def _as_url_list(value: Any) -> Any:
    # A single connection string is the common case
    if isinstance(value, str):
        return [value]
    return value


class ProbeConfig(BaseModel):
    """
    Immutable probe configuration.
    Built once at startup and shared read-only by every check invocation.
    """
    model_config = ConfigDict(frozen=True)

    urls: Tuple[str, ...]
    database: Optional[str] = None

    # Secured clusters only
    certificate_pem_path: Optional[str] = None
    trust_store_path: Optional[str] = None

    @field_validator("urls", mode="before")
    @classmethod
    def _validate_urls(cls, value: Any) -> Tuple[str, ...]:
        if value is None:
            raise ValueError("connection string is required")

        urls = []
        for url in _as_url_list(value):
            if not isinstance(url, str) or not url.strip():
                raise ValueError("connection string must be a non-empty string")
            urls.append(url.strip())

        if not urls:
            raise ValueError("at least one connection string is required")
        return tuple(urls)

    @field_validator("database", mode="before")
    @classmethod
    def _normalize_database(cls, value: Any) -> Optional[str]:
        # Blank means "cluster reachability only"
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        return value

    @classmethod
    def create(
        cls,
        urls: Union[str, List[str], None],
        database: Optional[str] = None,
        certificate_pem_path: Optional[str] = None,
        trust_store_path: Optional[str] = None,
    ) -> "ProbeConfig":
        try:
            return cls(
                urls=urls,
                database=database,
                certificate_pem_path=certificate_pem_path,
                trust_store_path=trust_store_path,
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid probe configuration: {e}")


class ProbeSettings(BaseSettings):
    """
    Loads probe settings from RAVENDB_* environment variables or a YAML file.
    RAVENDB_URLS is a JSON list, e.g. '["http://raven.local:8080"]'.
    """
    model_config = SettingsConfigDict(env_prefix="RAVENDB_")

    urls: List[str] = []
    database: Optional[str] = None
    certificate_pem_path: Optional[str] = None
    trust_store_path: Optional[str] = None

    @field_validator("urls", mode="before")
    @classmethod
    def _wrap_single_url(cls, value: Any) -> Any:
        return _as_url_list(value)

    @classmethod
    def from_env(cls) -> "ProbeSettings":
        try:
            return cls()
        except (ValidationError, SettingsError) as e:
            raise ConfigurationError(f"Invalid environment configuration: {e}")

    @classmethod
    def from_yaml(cls, config_path: Path) -> "ProbeSettings":
        if not config_path.exists():
            raise ConfigurationError(f"Config file not found: {config_path}")

        try:
            with open(config_path, "r") as f:
                raw_config = yaml.safe_load(f) or {}
            if not isinstance(raw_config, dict):
                raise ConfigurationError(f"Config file must contain a mapping: {config_path}")
            return cls(**raw_config)
        except (ValidationError, SettingsError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Invalid configuration format: {e}")

    def to_probe_config(self) -> ProbeConfig:
        return ProbeConfig.create(
            urls=self.urls,
            database=self.database,
            certificate_pem_path=self.certificate_pem_path,
            trust_store_path=self.trust_store_path,
        )
