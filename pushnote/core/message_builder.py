"""
Fluent builder for Pushover messages.

Every setter normalizes its input instead of failing: blank text is ignored or
clears the field, an out-of-range priority falls back to normal, duplicate
devices are skipped. The only input that is rejected outright is an unknown
sound token (see ``PushoverSound.from_token``).
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import replace
from typing import Iterable, Optional, Sequence, Union

from pushnote.domain.message import Message
from pushnote.domain.sounds import PushoverSound

logger = logging.getLogger(__name__)

PRIORITY_MIN = -2
PRIORITY_MAX = 2
PRIORITY_NORMAL = 0


def _is_blank(text: str) -> bool:
    return len(text.strip()) == 0


class MessageBuilder:
    """
    Builds a correct Pushover ``Message``.

    The builder holds a frozen ``Message`` and replaces it on every call, so
    a message returned by ``build()`` is never affected by later calls.

    Examples
    --------
    >>> msg = (
    ...     MessageBuilder("user", "token", "Backup finished")
    ...     .set_title("nightly")
    ...     .set_priority(1)
    ...     .add_device("phone")
    ...     .build()
    ... )
    >>> msg.devices
    ('phone',)
    """

    def __init__(self, user_key: str, app_token: str, message: str):
        """
        Parameters
        ----------
        user_key
            Recipient user key.
        app_token
            Application API token.
        message
            Initial message body, stored verbatim.
        """
        self._build = Message(
            user_key=user_key,
            app_token=app_token,
            message=message,
            priority=PRIORITY_NORMAL,
        )

    @classmethod
    def create(cls, user_key: str, app_token: str, message: str) -> "MessageBuilder":
        """Alternate constructor reading like the rest of the chain."""
        return cls(user_key, app_token, message)

    def _update(self, **changes) -> "MessageBuilder":
        self._build = replace(self._build, **changes)
        return self

    # ---- message ----

    def set_message(self, message: str) -> "MessageBuilder":
        """Replace the body. Blank text keeps the current body."""
        if _is_blank(message):
            logger.debug("Ignoring blank message body")
            return self
        return self._update(message=message)

    # ---- title ----

    def set_title(self, title: str) -> "MessageBuilder":
        """
        Set the title. Blank text clears it so the service falls back to the
        application name.
        """
        if _is_blank(title):
            return self._update(title=None)
        return self._update(title=title)

    def add_title(self, title: str) -> "MessageBuilder":
        """Deprecated, use ``set_title``."""
        warnings.warn(
            "add_title is deprecated, use set_title instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.set_title(title)

    def remove_title(self) -> "MessageBuilder":
        return self._update(title=None)

    # ---- url ----

    def set_url(self, url: str, url_title: Optional[str] = None) -> "MessageBuilder":
        """
        Attach a URL and optionally its label.

        Parameters
        ----------
        url
            Supplementary URL. Blank text removes both the URL and its label,
            whatever ``url_title`` is.
        url_title
            Label shown instead of the URL, stored verbatim. When omitted the
            current label is kept, even if it belonged to a previous URL.
        """
        if _is_blank(url):
            return self._update(url=None, url_title=None)

        if url_title is None:
            return self._update(url=url)
        return self._update(url=url, url_title=url_title)

    def add_url(self, url: str, url_title: Optional[str] = None) -> "MessageBuilder":
        """Deprecated, use ``set_url``."""
        warnings.warn(
            "add_url is deprecated, use set_url instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.set_url(url, url_title)

    def remove_url(self) -> "MessageBuilder":
        """Remove both the URL and its label."""
        return self._update(url=None, url_title=None)

    # ---- priority ----

    def set_priority(self, priority: int) -> "MessageBuilder":
        """
        Set the priority.

        -2 sends no alert, -1 a quiet notification, 1 bypasses quiet hours and
        2 also requires confirmation. Anything outside [-2, 2] is replaced by
        normal priority (0).
        """
        if priority < PRIORITY_MIN or priority > PRIORITY_MAX:
            logger.debug(f"Priority {priority} out of range, using {PRIORITY_NORMAL}")
            return self._update(priority=PRIORITY_NORMAL)
        return self._update(priority=priority)

    def remove_priority(self) -> "MessageBuilder":
        """Reset to normal priority (0)."""
        return self._update(priority=PRIORITY_NORMAL)

    # ---- sound ----

    def set_sound(self, sound: Union[PushoverSound, str]) -> "MessageBuilder":
        """
        Set the notification sound.

        Raises
        ------
        InvalidSoundError
            If ``sound`` is a string that names no supported sound.
        """
        return self._update(sound=str(PushoverSound.from_token(sound)))

    def remove_sound(self) -> "MessageBuilder":
        return self._update(sound=None)

    # ---- timestamp ----

    def set_timestamp(self, unix_timestamp: int) -> "MessageBuilder":
        """Show this Unix time to the user instead of the time the API received it."""
        return self._update(timestamp=unix_timestamp)

    def remove_timestamp(self) -> "MessageBuilder":
        return self._update(timestamp=None)

    # ---- devices ----

    def add_device(self, device_name: str) -> "MessageBuilder":
        """Target one more device. Blank and already listed names are ignored."""
        if _is_blank(device_name):
            logger.debug("Ignoring blank device name")
            return self

        devices = self._build.devices or ()
        if device_name in devices:
            return self
        return self._update(devices=devices + (device_name,))

    def set_devices(self, device_names: Sequence[str]) -> "MessageBuilder":
        """
        Replace the device list with ``device_names`` as given.

        Unlike ``add_device`` and ``merge_devices``, no blank or duplicate
        filtering happens here. A bare string is one device name.
        """
        if isinstance(device_names, str):
            device_names = [device_names]
        return self._update(devices=tuple(device_names))

    def merge_devices(self, device_names: Iterable[str]) -> "MessageBuilder":
        """Add each name in order, skipping blanks and duplicates."""
        if isinstance(device_names, str):
            device_names = [device_names]
        for name in device_names:
            self.add_device(name)
        return self

    def clear_devices_list(self) -> "MessageBuilder":
        """Send to all of the user's devices again."""
        return self._update(devices=None)

    def build(self) -> Message:
        """Return the finished message."""
        return self._build
