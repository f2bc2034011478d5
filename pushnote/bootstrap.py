from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pushnote.config.yaml_config import AppConfig, load_app_config
from pushnote.core.message_builder import MessageBuilder
from pushnote.notification.pushover_notifier import PushoverConfig, PushoverNotifier


@dataclass(frozen=True)
class AppWiring:
    """Everything a caller needs to build and send messages."""
    config: AppConfig
    notifier: PushoverNotifier


def build_notifier(cfg: AppConfig) -> PushoverNotifier:
    """Notifier using the configured endpoint and HTTP settings."""
    return PushoverNotifier(
        PushoverConfig(
            api_url=cfg.pushover.api_url,
            timeout_s=cfg.pushover.timeout_s,
            verify_tls=cfg.pushover.verify_tls,
        )
    )


def new_message(cfg: AppConfig, text: str) -> MessageBuilder:
    """
    Start a builder with the configured credentials and defaults applied.

    Defaults go through the builder's setters, so they are normalized the same
    way as caller input (blank title ignored, priority clamped, devices deduped).
    """
    builder = MessageBuilder(cfg.pushover.user_key, cfg.pushover.app_token, text)
    d = cfg.defaults

    if d.title is not None:
        builder.set_title(d.title)
    if d.url is not None:
        builder.set_url(d.url, d.url_title)
    if d.priority is not None:
        builder.set_priority(d.priority)
    if d.sound is not None:
        builder.set_sound(d.sound)
    if d.devices is not None:
        builder.merge_devices(d.devices)

    return builder


def build_app_system(config_path: Optional[str] = None) -> AppWiring:
    """Load configuration and wire the notifier."""
    cfg = load_app_config(config_path)
    return AppWiring(config=cfg, notifier=build_notifier(cfg))
