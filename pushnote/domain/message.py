"""
Finalized Pushover message.

A ``Message`` is the value produced by ``MessageBuilder.build()`` and the only
thing the transport layer consumes. It is frozen so a built message cannot
drift after it has been handed off.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Message:
    """
    One push notification request.

    Parameters
    ----------
    user_key
        Recipient user (or group) key.
    app_token
        Sending application's API token.
    message
        Notification body.
    title
        Optional title. ``None`` lets the service use the application name.
    url
        Optional supplementary URL.
    url_title
        Optional label shown instead of the raw URL. Only meaningful with ``url``.
    priority
        Priority in [-2, 2]; 0 is normal.
    sound
        Canonical sound token, or ``None`` for the user's default sound.
    timestamp
        Unix timestamp (seconds) shown to the user instead of the receive time.
    devices
        Device names to target. ``None`` sends to all of the user's devices.
    """

    user_key: str
    app_token: str
    message: str
    title: Optional[str] = None
    url: Optional[str] = None
    url_title: Optional[str] = None
    priority: Optional[int] = 0
    sound: Optional[str] = None
    timestamp: Optional[int] = None
    devices: Optional[Tuple[str, ...]] = None
