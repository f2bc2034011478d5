"""
Pushover notification sounds.

The Pushover API only understands a fixed set of sound tokens. Modelling them
as an enum means an unsupported sound is rejected when the value is created,
not when the request reaches the service.
"""

from __future__ import annotations

from enum import Enum
from typing import Union


class InvalidSoundError(ValueError):
    """Raised when a token does not name a supported Pushover sound."""

    def __init__(self, token: str):
        super().__init__(f"Unsupported Pushover sound: {token!r}")
        self.token = token


class PushoverSound(str, Enum):
    """
    Sound played on the receiving device.

    Members mirror the tokens documented at https://pushover.net/api#sounds.
    ``NONE`` is the explicit "silent" sound, which differs from not setting a
    sound at all (the user's default sound).
    """

    PUSHOVER = "pushover"
    BIKE = "bike"
    BUGLE = "bugle"
    CASHREGISTER = "cashregister"
    CLASSICAL = "classical"
    COSMIC = "cosmic"
    FALLING = "falling"
    GAMELAN = "gamelan"
    INCOMING = "incoming"
    INTERMISSION = "intermission"
    MAGIC = "magic"
    MECHANICAL = "mechanical"
    PIANOBAR = "pianobar"
    SIREN = "siren"
    SPACEALARM = "spacealarm"
    TUGBOAT = "tugboat"
    ALIEN = "alien"
    CLIMB = "climb"
    PERSISTENT = "persistent"
    ECHO = "echo"
    UPDOWN = "updown"
    VIBRATE = "vibrate"
    NONE = "none"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_token(cls, token: Union[str, "PushoverSound"]) -> "PushoverSound":
        """
        Resolve a sound from its token.

        Parameters
        ----------
        token
            Sound token such as ``"magic"``. Case and surrounding whitespace
            are ignored. A ``PushoverSound`` is returned unchanged.

        Returns
        -------
        PushoverSound
            Matching member.

        Raises
        ------
        InvalidSoundError
            If the token is not a string naming one of the supported sounds.
            ``None`` is rejected too; use ``remove_sound`` for the default sound.
        """
        if isinstance(token, cls):
            return token
        if not isinstance(token, str):
            raise InvalidSoundError(repr(token))
        try:
            return cls(token.strip().lower())
        except ValueError:
            raise InvalidSoundError(token) from None
