"""SDK settings read from ``config.json``.

Only the ``sdk`` section is consulted. The file is located through
``RHEO_CONFIG_PATH`` (or ``RHEO_CONFIG``), falling back to ``config.json`` in
the working directory; a missing file means an empty config.
"""

import json
import os
from pathlib import Path
from typing import Any

from loguru import logger

from rheo_sdk.core.constants.base import DEFAULT_MAX_DECODE_DEPTH, DEFAULT_VERSION

_CONFIG_ENV_KEYS = ("RHEO_CONFIG_PATH", "RHEO_CONFIG")
_DEFAULT_CONFIG_FILENAME = "config.json"
_SDK_SECTION = "sdk"


def resolve_config_path(path: str | Path | None = None) -> Path:
    if path is not None:
        return Path(path).expanduser()
    for key in _CONFIG_ENV_KEYS:
        env_path = os.getenv(key, "").strip()
        if env_path:
            return Path(env_path).expanduser()
    return Path.cwd() / _DEFAULT_CONFIG_FILENAME


def load_config_json(
    path: str | Path | None = None, *, require_exists: bool = False
) -> dict[str, Any]:
    cfg_path = resolve_config_path(path)
    if not cfg_path.exists():
        if require_exists:
            raise FileNotFoundError(f"Config file not found: {cfg_path}")
        return {}
    try:
        return json.loads(cfg_path.read_text())
    except json.JSONDecodeError as exc:
        logger.warning(f"Ignoring unreadable config {cfg_path}: {exc}")
        return {}


CONFIG: dict[str, Any] = load_config_json()


def set_config(config: dict[str, Any]) -> None:
    """Swap the contents of CONFIG without rebinding it."""
    CONFIG.clear()
    CONFIG.update(config)


def load_config(
    path: str | Path | None = None, *, require_exists: bool = False
) -> None:
    set_config(load_config_json(path, require_exists=require_exists))


def _sdk_section() -> dict[str, Any]:
    section = CONFIG.get(_SDK_SECTION, {})
    return section if isinstance(section, dict) else {}


def get_factory_address() -> str | None:
    factory = _sdk_section().get("factory")
    if factory:
        return str(factory).strip()
    return os.environ.get("RHEO_FACTORY_ADDRESS")


def get_protocol_version() -> str:
    version = _sdk_section().get("version")
    if version:
        return str(version).strip()
    return os.environ.get("RHEO_PROTOCOL_VERSION", DEFAULT_VERSION)


def get_labels() -> dict[str, str]:
    labels = _sdk_section().get("labels", {})
    if not isinstance(labels, dict):
        return {}
    return {str(k): str(v) for k, v in labels.items()}


def get_max_decode_depth() -> int:
    raw = _sdk_section().get("max_decode_depth", DEFAULT_MAX_DECODE_DEPTH)
    try:
        return int(raw)
    except (TypeError, ValueError):
        logger.warning(f"Invalid max_decode_depth {raw!r}; using default")
        return DEFAULT_MAX_DECODE_DEPTH
