"""
/**
 * @file translate_relay/config/settings.py
 * @description 中继服务配置加载与合并（config.json + config.local.json + 环境变量）。
 */
"""

from __future__ import annotations

import json
import logging
import os
import threading
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional


PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
CONFIG_PATH = os.path.join(PACKAGE_ROOT, "config.json")
CONFIG_LOCAL_PATH = os.path.join(PACKAGE_ROOT, "config.local.json")
CONFIG_EXAMPLE_PATH = os.path.join(PACKAGE_ROOT, "config.example.json")

DEFAULT_GROQ_BASE_URL = "https://api.groq.com/openai/v1"
DEFAULT_TRANSLATION_MODEL = "llama-3.3-70b-versatile"
DEFAULT_TEMPERATURE = 0.3
DEFAULT_REQUEST_TIMEOUT = 60.0
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 5000

logger = logging.getLogger("config_loader")


def _load_json(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r") as f:
            value = json.load(f)
            return value if isinstance(value, dict) else {}
    except FileNotFoundError:
        return {}


def _merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            base[key] = _merge_dicts(base[key], value)
        else:
            base[key] = value
    return base


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = raw.get(name, {})
    return value if isinstance(value, dict) else {}


@dataclass(frozen=True)
class Settings:
    raw: Dict[str, Any]

    @property
    def endpoints(self) -> Dict[str, str]:
        return _section(self.raw, "endpoints")

    @property
    def models(self) -> Dict[str, str]:
        return _section(self.raw, "models")

    @property
    def api_keys(self) -> Dict[str, str]:
        return _section(self.raw, "api_keys")

    @property
    def parameters(self) -> Dict[str, Any]:
        return _section(self.raw, "parameters")

    @property
    def groq_base_url(self) -> str:
        value = self.endpoints.get("groq")
        if isinstance(value, str) and value:
            return value.rstrip("/")
        return DEFAULT_GROQ_BASE_URL

    @property
    def translation_model(self) -> str:
        value = self.models.get("translation")
        return value if isinstance(value, str) and value else DEFAULT_TRANSLATION_MODEL

    @property
    def temperature(self) -> float:
        value = self.parameters.get("temperature")
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
        return DEFAULT_TEMPERATURE

    @property
    def request_timeout(self) -> float:
        value = self.parameters.get("request_timeout")
        if isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0:
            return float(value)
        return DEFAULT_REQUEST_TIMEOUT

    @property
    def host(self) -> str:
        value = _section(self.raw, "server").get("host")
        return value if isinstance(value, str) and value else DEFAULT_HOST

    @property
    def port(self) -> int:
        value = os.getenv("PORT") or _section(self.raw, "server").get("port")
        try:
            return int(value) if value else DEFAULT_PORT
        except (TypeError, ValueError):
            logger.warning(f"Invalid port {value!r}, falling back to {DEFAULT_PORT}")
            return DEFAULT_PORT

    def resolve_groq_key(self) -> Optional[str]:
        return os.getenv("GROQ_API_KEY") or (
            self.api_keys.get("groq") if isinstance(self.api_keys.get("groq"), str) else None
        )


_CACHED_SETTINGS: Optional[Settings] = None
_LAST_LOAD_TIME = 0.0
_SETTINGS_LOCK = threading.Lock()

# editors fire several modified events per save
RELOAD_DEBOUNCE_SECONDS = 0.5


def _changed_sections(old: Dict[str, Any], new: Dict[str, Any]) -> List[str]:
    return sorted(k for k in set(old) | set(new) if old.get(k) != new.get(k))


def reload_settings(
    base_path: str = CONFIG_PATH,
    local_path: str = CONFIG_LOCAL_PATH,
    example_path: str = CONFIG_EXAMPLE_PATH,
    force: bool = False,
) -> Settings:
    global _CACHED_SETTINGS, _LAST_LOAD_TIME

    with _SETTINGS_LOCK:
        now = time.time()
        if not force and _CACHED_SETTINGS and (now - _LAST_LOAD_TIME < RELOAD_DEBOUNCE_SECONDS):
            return _CACHED_SETTINGS
        _LAST_LOAD_TIME = now

        try:
            base_cfg = _load_json(base_path)
            if not base_cfg.get("endpoints") and os.path.exists(example_path):
                base_cfg = _load_json(example_path)
            merged = _merge_dicts(base_cfg, _load_json(local_path))
        except (OSError, ValueError) as e:
            logger.error(f"Failed to reload config: {e}. Keeping old config.")
            if not _CACHED_SETTINGS:
                _CACHED_SETTINGS = Settings(raw={})
            return _CACHED_SETTINGS

        if _CACHED_SETTINGS is not None:
            changed = _changed_sections(_CACHED_SETTINGS.raw, merged)
            if not changed:
                return _CACHED_SETTINGS
            # section names only, api_keys values stay out of the log
            logger.info(f"Config reloaded, changed sections: {', '.join(changed)}")
        _CACHED_SETTINGS = Settings(raw=merged)

    return _CACHED_SETTINGS


def load_settings() -> Settings:
    """
    Get current settings. Lazy loads on first call.
    Subsequent reloads are handled by the file watcher calling reload_settings().
    """
    if _CACHED_SETTINGS is None:
        return reload_settings()
    return _CACHED_SETTINGS
