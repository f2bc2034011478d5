from __future__ import annotations

from typing import Any, Dict, Protocol

from pushnote.domain.message import Message


class Notifier(Protocol):
    """
    Protocol interface for message delivery.

    Any object with a matching ``notify(message)`` method can be used, which
    keeps callers independent of the HTTP transport and easy to test with fakes.

    Methods
    -------
    notify(message)
        Deliver a built message and return the service's response body.
    """

    def notify(self, message: Message) -> Dict[str, Any]:
        """
        Deliver a message.

        Parameters
        ----------
        message
            The finalized message to deliver.
        """
        ...
