"""Configuration loader for influxtemplate.

Reads ``config.yaml`` and lets environment variables (optionally from a ``.env``
file) override the connection settings, so credentials never have to live in YAML.

Example ``config.yaml``::

    influxdb:
      url: http://localhost:8086
      username: root
      password: root
      database: metrics
      retention_policy: autogen
      timeout: 10
"""

import logging
import os
from typing import Any, Optional
from urllib.parse import urlparse

import yaml
from dotenv import load_dotenv

from .exceptions import ConfigurationError

DEFAULT_URL = "http://localhost:8086"
DEFAULT_RETENTION_POLICY = "autogen"

# Environment variable -> (influxdb key, converter)
_ENV_OVERRIDES = {
    "INFLUXDB_URL": ("url", str),
    "INFLUXDB_USERNAME": ("username", str),
    "INFLUXDB_PASSWORD": ("password", str),
    "INFLUXDB_DATABASE": ("database", str),
    "INFLUXDB_RETENTION_POLICY": ("retention_policy", str),
    "INFLUXDB_TIMEOUT": ("timeout", float),
}


def _find_config_file() -> Optional[str]:
    """Return path to `config.yaml` in current directory if present, else None."""
    if os.path.isfile("config.yaml"):
        return "config.yaml"
    return None


def _load_env_file() -> None:
    """Load environment variables from ./.env if present (best-effort)."""
    if os.path.isfile(".env"):
        try:
            load_dotenv(".env")
            logging.debug("Loaded environment from .env")
        except OSError as e:
            logging.warning(f"Failed to load .env: {e}")


def _apply_env_overrides(config: dict[str, Any]) -> None:
    influx = config.setdefault("influxdb", {})
    for env_name, (key, cast) in _ENV_OVERRIDES.items():
        raw = os.environ.get(env_name)
        if not raw:
            continue
        try:
            influx[key] = cast(raw)
        except ValueError:
            logging.warning(f"Invalid {env_name} value: {raw}")


def load_config(config_path: Optional[str] = None) -> dict[str, Any]:
    """Load configuration from a YAML file, merging environment overrides.

    Args:
        config_path: Optional path to config.yaml. Defaults to ./config.yaml.

    Returns:
        Dict with config from the YAML file, env vars overriding ``influxdb.*`` keys.

    Raises:
        FileNotFoundError: If the config file is not found.
        ValueError: If the YAML is invalid or has no ``influxdb.database``.
    """
    _load_env_file()

    if config_path is None:
        config_path = _find_config_file()

    if not config_path or not os.path.isfile(config_path):
        raise FileNotFoundError(f"Configuration file not found: {config_path or 'config.yaml'}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise ValueError(f"{config_path} must contain a YAML dictionary")
    if "influxdb" in config and not isinstance(config["influxdb"], dict):
        raise ValueError(f"{config_path}: 'influxdb' must be a mapping of connection settings")

    _apply_env_overrides(config)

    if not config["influxdb"].get("database"):
        raise ValueError(
            f"{config_path} must specify 'influxdb.database' (the target InfluxDB database name)"
        )

    logging.info(f"Loaded configuration from {config_path}")
    return config


def get(config: dict[str, Any], key_path: str, default: Any = None) -> Any:
    """Return config value at dot-separated path or `default` if missing.

    Examples:
            get(cfg, 'influxdb.database') -> 'metrics'
            get(cfg, 'nonexistent', 'fallback') -> 'fallback'
    """
    val: Any = config
    for key in key_path.split("."):
        if isinstance(val, dict) and key in val:
            val = val[key]
        else:
            return default
    return val


class InfluxDBProperties:
    """Connection settings for one InfluxDB database."""

    def __init__(
        self,
        url: str = DEFAULT_URL,
        username: str = "root",
        password: str = "root",
        database: Optional[str] = None,
        retention_policy: str = DEFAULT_RETENTION_POLICY,
        timeout: Optional[float] = None,
        verify_ssl: bool = True,
        gzip: bool = False,
    ) -> None:
        self.url = url
        self.username = username
        self.password = password
        self.database = database
        self.retention_policy = retention_policy
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.gzip = gzip

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "InfluxDBProperties":
        """Build properties from a loaded config dict (see :func:`load_config`)."""
        return cls(
            url=get(config, "influxdb.url", DEFAULT_URL),
            username=get(config, "influxdb.username", "root"),
            password=get(config, "influxdb.password", "root"),
            database=get(config, "influxdb.database"),
            retention_policy=get(config, "influxdb.retention_policy", DEFAULT_RETENTION_POLICY),
            timeout=get(config, "influxdb.timeout"),
            verify_ssl=get(config, "influxdb.verify_ssl", True),
            gzip=get(config, "influxdb.gzip", False),
        )

    def validate(self) -> None:
        """Raise ConfigurationError if a required setting is missing or malformed."""
        if not self.url:
            raise ConfigurationError("InfluxDB url is required")
        try:
            parsed = urlparse(self.url)
            parsed.port
        except ValueError as e:
            raise ConfigurationError(f"Invalid InfluxDB url {self.url}: {e}") from e
        if parsed.scheme not in ("http", "https") or not parsed.hostname:
            raise ConfigurationError(f"InfluxDB url must be http(s)://host[:port], got {self.url}")
        if not self.database:
            raise ConfigurationError("InfluxDB database is required")
        if not self.retention_policy:
            raise ConfigurationError("InfluxDB retention policy is required")

    def __repr__(self) -> str:
        return (
            f"InfluxDBProperties(url={self.url!r}, username={self.username!r}, "
            f"database={self.database!r}, retention_policy={self.retention_policy!r})"
        )
