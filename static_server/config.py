"""
Server configuration.

Values come from (lowest priority first) the defaults below, an optional
JSON settings file and environment variables using the same key names.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_FILE = "appsettings.json"


class ServerConfig(BaseModel):
    """Immutable server settings, keyed by their external names"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    listen_port: int = Field(8080, ge=1, le=65535, alias="HttpListenerPort")
    listen_host: str = Field("localhost", min_length=1, alias="HttpListenerHost")
    static_root: str = Field("wwwroot", min_length=1, alias="ServerStaticFilesDirectory")
    bootstrap_if_missing: bool = Field(True, alias="GenServerFiles")

    @property
    def listener_address(self) -> str:
        return f"http://{self.listen_host}:{self.listen_port}/"

    def static_files_path(self, content_root: Union[str, Path, None] = None) -> Path:
        """Static root resolved against the content root (cwd by default)"""
        root = Path(content_root) if content_root is not None else Path.cwd()
        return root / self.static_root


CONFIG_KEYS = [field.alias for field in ServerConfig.model_fields.values()]


def _read_settings_file(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read settings file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {path} must contain a JSON object")
    return {key: data[key] for key in CONFIG_KEYS if key in data}


def load_config(
    config_file: Union[str, Path, None] = None,
    environ: Optional[Mapping[str, str]] = None,
    overrides: Optional[Dict[str, Any]] = None,
    content_root: Union[str, Path, None] = None,
) -> ServerConfig:
    """Build a ServerConfig from settings file, environment and explicit overrides

    Without an explicit config_file, appsettings.json is looked up in the
    content root (cwd by default).
    """
    values: Dict[str, Any] = {}

    default_file = (Path(content_root) if content_root is not None else Path.cwd()) / DEFAULT_SETTINGS_FILE
    if config_file is not None:
        values.update(_read_settings_file(Path(config_file)))
    elif default_file.is_file():
        values.update(_read_settings_file(default_file))

    env = os.environ if environ is None else environ
    for key in CONFIG_KEYS:
        if key in env:
            values[key] = env[key]

    # Overrides are given by field name (e.g. from the command line)
    for name, value in (overrides or {}).items():
        if value is not None:
            values[ServerConfig.model_fields[name].alias] = value

    try:
        config = ServerConfig.model_validate(values)
    except ValidationError as e:
        raise ConfigError(str(e)) from e

    logger.debug("Loaded configuration: %s", config.model_dump(by_alias=True))
    return config
