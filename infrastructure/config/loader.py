"""Configuration loading from YAML files and the environment."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from infrastructure.config.models import ClientConfig, TransportKind
from infrastructure.constants import CLIENT_FILE, ENV_LOGIN, ENV_PASSWORD, ENV_TIMEOUT, ENV_URL

logger = logging.getLogger(__name__)

# Environment variable -> ClientConfig field
_ENV_OVERRIDES = {
    ENV_URL: "base_url",
    ENV_LOGIN: "login",
    ENV_PASSWORD: "password",
    ENV_TIMEOUT: "timeout_s",
}


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def load_client_config(path: Path = CLIENT_FILE, env_file: Path | None = None) -> ClientConfig:
    """
    Load terra.yaml and construct a ClientConfig.

    Args:
        path: YAML file with at least `base_url` (default: configs/terra.yaml)
        env_file: Optional .env file loaded (with override) before reading TERRA_* variables

    Returns:
        ClientConfig with environment overrides applied

    Raises:
        FileNotFoundError: If the YAML file does not exist
        ValueError: If the YAML is not a mapping, names an unknown transport, or fails validation
    """
    data = _load_yaml(path)

    if env_file is not None:
        load_dotenv(env_file, override=True)

    for env_name, field in _ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            logger.debug("Config field %s overridden from %s", field, env_name)
            data[field] = value

    if "base_url" not in data:
        raise ValueError(f"{path} missing required key: base_url (or set {ENV_URL})")

    if "transport" in data:
        try:
            data["transport"] = TransportKind(str(data["transport"]).strip().lower())
        except ValueError as e:
            raise ValueError(f"Invalid transport value {data.get('transport')!r} in {path}") from e

    # pydantic.ValidationError is a ValueError subclass
    cfg = ClientConfig(**data)
    logger.info("Loaded Terra config from %s (url=%s, transport=%s)", path, cfg.base_url, cfg.transport.value)
    return cfg
