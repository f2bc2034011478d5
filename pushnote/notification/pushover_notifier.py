from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict

import requests

from pushnote.domain.message import Message
from pushnote.notification.payload import build_pushover_payload

logger = logging.getLogger(__name__)

PUSHOVER_API_URL = "https://api.pushover.net/1/messages.json"


@dataclass(frozen=True)
class PushoverConfig:
    """
    HTTP settings for the Pushover messages endpoint.

    Parameters
    ----------
    api_url
        Messages endpoint URL.
    timeout_s
        HTTP request timeout in seconds.
    verify_tls
        Whether to verify TLS certificates.
    """

    api_url: str = PUSHOVER_API_URL
    timeout_s: float = 5.0
    verify_tls: bool = True


class PushoverNotifier:
    """
    Sends built messages to the Pushover API.

    Notes
    -----
    - This class performs side effects (network I/O).
    - HTTP errors are surfaced via ``raise_for_status()``; the error is
      logged and re-raised, never swallowed.
    """

    def __init__(self, cfg: PushoverConfig | None = None):
        self._cfg = cfg or PushoverConfig()

    def notify(self, message: Message) -> Dict[str, Any]:
        """
        POST a message to the configured endpoint.

        Parameters
        ----------
        message
            Finalized message to send.

        Returns
        -------
        dict
            Decoded JSON response, e.g. ``{"status": 1, "request": "..."}``.

        Raises
        ------
        requests.HTTPError
            If the HTTP response status indicates an error.
        requests.RequestException
            For network-related errors.
        """
        payload = build_pushover_payload(message)
        logger.info(f"Sending Pushover message to {self._cfg.api_url}")

        r = requests.post(
            self._cfg.api_url,
            data=payload,
            timeout=self._cfg.timeout_s,
            verify=self._cfg.verify_tls,
        )
        try:
            r.raise_for_status()
        except requests.HTTPError as e:
            logger.error(f"Pushover rejected the message: {e}")
            raise

        body = r.json()
        logger.info(f"Pushover accepted message, request={body.get('request')}")
        return body
