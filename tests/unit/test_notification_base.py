"""
Unit tests for pushnote.notification.base.

The Notifier protocol supports duck typing: any object with a matching
notify(message) method can deliver messages, no inheritance required.
"""

from __future__ import annotations

from typing import Any, Dict

from pushnote.core.message_builder import MessageBuilder
from pushnote.domain.message import Message
from pushnote.notification.base import Notifier


class _FakeNotifier:
    """
    Minimal notifier implementation for protocol conformance testing.
    """

    def __init__(self) -> None:
        self.seen: list[Message] = []

    def notify(self, message: Message) -> Dict[str, Any]:
        """Record the received message for assertions."""
        self.seen.append(message)
        return {"status": 1, "request": "fake"}


def test_notifier_protocol_duck_typing() -> None:
    n: Notifier = _FakeNotifier()
    msg = MessageBuilder("u", "t", "hello").build()

    assert n.notify(msg) == {"status": 1, "request": "fake"}
    assert n.seen == [msg]  # type: ignore[attr-defined]
