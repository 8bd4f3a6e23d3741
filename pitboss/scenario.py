"""Scripted exchanges: messages to send to a module and the replies expected back."""

from __future__ import annotations

import copy
from collections import deque
from dataclasses import dataclass

from .messaging import Message, MessageSender, Module


@dataclass
class NullMessage(Message):
    """Stands in for a message when a script has run out."""

    recipient: str = ""
    body: str = ""
    name: str = "NullMessage"


class Scenario:
    """A sequence of messages and the responses a target module should give."""

    def __init__(self, name: str = "none", target: Module | None = None) -> None:
        self.name = name
        self.target = target
        self._messages: deque[Message] = deque()
        self._responses: deque[Message] = deque()

    def setup(self, sender: MessageSender) -> None:
        """Prepare the target before the scenario runs; nothing to do by default."""

    def add_message(self, msg: Message) -> None:
        self._messages.append(copy.copy(msg))

    def add_response(self, msg: Message) -> None:
        self._responses.append(copy.copy(msg))

    def next_message(self) -> Message:
        """The next message to send, or a :class:`NullMessage` when none remain."""
        return self._messages.popleft() if self._messages else NullMessage()

    def next_response(self) -> Message:
        """The next expected response, or a :class:`NullMessage` when none remain."""
        return self._responses.popleft() if self._responses else NullMessage()