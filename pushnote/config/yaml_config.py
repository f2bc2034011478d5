from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv

from pushnote.domain.sounds import PushoverSound
from pushnote.notification.pushover_notifier import PUSHOVER_API_URL

CONFIG_ENV_VAR = "PUSHNOTE_CONFIG"
USER_KEY_ENV_VAR = "PUSHOVER_USER_KEY"
APP_TOKEN_ENV_VAR = "PUSHOVER_APP_TOKEN"


@dataclass(frozen=True)
class PushoverApiConfig:
    """Credentials and HTTP settings for the Pushover API."""
    user_key: str
    app_token: str
    api_url: str = PUSHOVER_API_URL
    timeout_s: float = 5.0
    verify_tls: bool = True


@dataclass(frozen=True)
class MessageDefaults:
    """Values applied to every new message before the caller's own setters."""
    title: Optional[str] = None
    url: Optional[str] = None
    url_title: Optional[str] = None
    priority: Optional[int] = None
    sound: Optional[PushoverSound] = None
    devices: Optional[List[str]] = None


@dataclass(frozen=True)
class AppConfig:
    """
    Root configuration loaded from YAML.

    Secrets may live in a ``.env`` file next to the YAML document instead of
    the document itself.
    """
    pushover: PushoverApiConfig
    defaults: MessageDefaults


def _read_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError("config.yaml must contain a YAML mapping at the root")
    return data


def _resolve_default_config_path() -> Path:
    """
    Resolve config.yaml location.

    Priority:
    1) PUSHNOTE_CONFIG env var if provided
    2) ./config.yaml in current working directory
    """
    env = os.getenv(CONFIG_ENV_VAR)
    if env:
        return Path(env).expanduser().resolve()
    return Path("config.yaml").resolve()


def _credential(section: Dict[str, Any], key: str, env_var: str) -> str:
    value = section.get(key) or os.getenv(env_var)
    if not value or not str(value).strip():
        raise ValueError(f"Missing pushover.{key} (or {env_var} in the environment)")
    return str(value)


def _optional_str(section: Dict[str, Any], key: str) -> Optional[str]:
    # YAML turns values like `title: 2024` into ints
    value = section.get(key)
    return str(value) if value is not None else None


def load_app_config(path: Optional[str] = None) -> AppConfig:
    """
    Load configuration from YAML and convert it into typed config objects.

    Parameters
    ----------
    path
        Explicit path to config.yaml. If None, uses default resolution.

    Returns
    -------
    AppConfig
        Parsed and validated configuration.

    Raises
    ------
    FileNotFoundError
        If config file does not exist.
    ValueError
        If required fields are missing or invalid. An unknown default sound
        raises ``InvalidSoundError``, a ``ValueError`` subclass.
    """
    cfg_path = Path(path).expanduser().resolve() if path else _resolve_default_config_path()
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config not found: {cfg_path}")

    # .env values never override variables already set in the environment
    load_dotenv(cfg_path.parent / ".env")

    raw = _read_yaml(cfg_path)

    # ---- pushover ----
    p = raw.get("pushover") or {}
    pushover = PushoverApiConfig(
        user_key=_credential(p, "user_key", USER_KEY_ENV_VAR),
        app_token=_credential(p, "app_token", APP_TOKEN_ENV_VAR),
        api_url=str(p.get("api_url", PUSHOVER_API_URL)),
        timeout_s=float(p.get("timeout_s", 5.0)),
        verify_tls=bool(p.get("verify_tls", True)),
    )

    # ---- defaults ----
    d = raw.get("defaults") or {}
    devices_raw = d.get("devices")
    if devices_raw is not None and not isinstance(devices_raw, list):
        raise ValueError("defaults.devices must be a list of device names")

    defaults = MessageDefaults(
        title=_optional_str(d, "title"),
        url=_optional_str(d, "url"),
        url_title=_optional_str(d, "url_title"),
        priority=int(d["priority"]) if d.get("priority") is not None else None,
        sound=PushoverSound.from_token(d["sound"]) if d.get("sound") is not None else None,
        devices=[str(x) for x in devices_raw] if devices_raw is not None else None,
    )

    return AppConfig(pushover=pushover, defaults=defaults)
