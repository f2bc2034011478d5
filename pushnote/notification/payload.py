from __future__ import annotations

from typing import Any, Dict

from pushnote.domain.message import Message


def build_pushover_payload(message: Message) -> Dict[str, Any]:
    """
    Map a built message onto the Pushover form fields.

    Optional fields left unset (``None``) are omitted so the service applies
    its own defaults. Devices are sent as a single comma-separated ``device``
    field.

    Parameters
    ----------
    message
        Finalized message from ``MessageBuilder.build()``.

    Returns
    -------
    dict
        Form fields ready to be POSTed to the messages endpoint.
    """
    payload: Dict[str, Any] = {
        "token": message.app_token,
        "user": message.user_key,
        "message": message.message,
    }

    optional = {
        "title": message.title,
        "url": message.url,
        "url_title": message.url_title,
        "priority": message.priority,
        "sound": message.sound,
        "timestamp": message.timestamp,
    }
    for key, value in optional.items():
        if value is not None:
            payload[key] = value

    if message.devices:
        payload["device"] = ",".join(message.devices)

    return payload
