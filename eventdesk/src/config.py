"""
Client configuration module.

The YAML file is parsed into a ConfigFile model; environment variables
override the server URL and log level at read time. A malformed file
surfaces as ConfigError, never as a raw parsing exception.
"""

import os
import re
from pathlib import Path
from typing import Any, Optional

import yaml
from platformdirs import user_config_dir
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator


APP_NAME = "eventdesk"
APP_AUTHOR = "EventDesk"
CONFIG_FILENAME = "client-config.yaml"

ENV_SERVER_URL = "EVENTDESK_SERVER_URL"
ENV_LOG_LEVEL = "EVENTDESK_LOG_LEVEL"
ENV_CONFIG_PATH = "EVENTDESK_CONFIG_PATH"

DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_LOG_LEVEL = "INFO"

URL_PATTERN = re.compile(
    r"^https?://"
    r"(?:(?:[A-Z0-9](?:[A-Z0-9-]{0,61}[A-Z0-9])?\.)+[A-Z]{2,6}\.?|"  # domain
    r"localhost|"
    r"\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3})"  # ipv4
    r"(?::\d+)?"
    r"(?:/?|[/?]\S+)$",
    re.IGNORECASE,
)


class ConfigError(Exception):
    """Base exception for configuration errors."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when a configuration value is out of range or malformed."""

    pass


def get_default_config_path() -> Path:
    """Platform-appropriate location of the client config file."""
    return Path(user_config_dir(APP_NAME, APP_AUTHOR)) / CONFIG_FILENAME


def check_server_url(url: str) -> None:
    """
    Raise ConfigValidationError unless url is an http(s) address.

    An empty url is accepted; it means "not configured".
    """
    if url and not URL_PATTERN.match(url):
        raise ConfigValidationError(f"Invalid server_url format: {url}")


class ConfigFile(BaseModel):
    """On-disk shape of client-config.yaml. Unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore")

    server_url: str = ""
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("server_url", "log_level", mode="before")
    @classmethod
    def scalar_to_str(cls, v: Any) -> Any:
        if v is None:
            return ""
        if isinstance(v, (int, float, bool)):
            return str(v)
        return v


class ClientConfig:
    """
    Client configuration: file values, overridden by environment.

    Lookup order for the file: explicit ``config_path``, then
    ``config_dir``, then ``$EVENTDESK_CONFIG_PATH``, then the platform
    default.

    Raises:
        ConfigError: If the file exists but cannot be parsed
    """

    def __init__(
        self,
        config_path: Optional[Path] = None,
        config_dir: Optional[Path] = None,
    ):
        if config_path:
            path = Path(config_path)
        elif config_dir:
            path = Path(config_dir) / CONFIG_FILENAME
        elif os.environ.get(ENV_CONFIG_PATH):
            path = Path(os.environ[ENV_CONFIG_PATH])
        else:
            path = get_default_config_path()

        self._config_path = path
        self._file = self._read(path)

    @staticmethod
    def _read(path: Path) -> ConfigFile:
        if not path.exists():
            return ConfigFile()

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse config file: {e}")

        if data is None:
            return ConfigFile()
        if not isinstance(data, dict):
            raise ConfigError(f"Config file must contain a mapping: {path}")

        try:
            return ConfigFile.model_validate(data)
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors())
            raise ConfigError(f"Invalid value for {fields} in {path}")

    @property
    def config_path(self) -> Path:
        return self._config_path

    @property
    def server_url(self) -> str:
        return os.environ.get(ENV_SERVER_URL, self._file.server_url)

    @server_url.setter
    def server_url(self, value: str) -> None:
        self._file.server_url = value

    @property
    def stored_server_url(self) -> str:
        """Server URL as written in the file, ignoring the environment."""
        return self._file.server_url

    @property
    def timeout_seconds(self) -> float:
        return self._file.timeout_seconds

    @timeout_seconds.setter
    def timeout_seconds(self, value: float) -> None:
        self._file.timeout_seconds = value

    @property
    def log_level(self) -> str:
        return os.environ.get(ENV_LOG_LEVEL, self._file.log_level)

    @log_level.setter
    def log_level(self, value: str) -> None:
        self._file.log_level = value

    @property
    def is_configured(self) -> bool:
        return bool(self.server_url)

    def save(self) -> None:
        """Write file values (not environment overrides) back to disk."""
        self._config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._config_path, "w") as f:
            yaml.dump(self._file.model_dump(), f, default_flow_style=False)

    def validate(self) -> None:
        """
        Validate the effective configuration.

        Raises:
            ConfigValidationError: If configuration is invalid
        """
        check_server_url(self.server_url)

        if self.timeout_seconds <= 0:
            raise ConfigValidationError(
                f"timeout_seconds must be positive, got: {self.timeout_seconds}"
            )
