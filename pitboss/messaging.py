"""Message routing between modules: messages, queues, states and dispatch."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections import defaultdict, deque
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional

log = logging.getLogger(__name__)


@dataclass
class Message:
    """A named envelope addressed to a receiver by name, carrying a text body."""

    recipient: str = "none"
    body: str = ""
    name: str = "message"


class MessageHandler:
    """Reacts to one kind of message.

    The base handler runs the optional ``action`` it was given and otherwise
    ignores the message.
    """

    name: str = ""
    _action: Optional[Callable[[Message], None]] = None

    def __init__(self, action: Callable[[Message], None] | None = None) -> None:
        self._action = action

    def handle(self, msg: Message) -> None:
        """Handle ``msg`` by running the handler's action, if it has one."""
        if self._action is not None:
            self._action(msg)


class MessageQueue:
    """First-in, first-out store of pending messages."""

    def __init__(self) -> None:
        self._items: deque[Message] = deque()

    def push(self, msg: Message) -> None:
        self._items.append(msg)

    def get_message(self) -> Message:
        """Remove and return the oldest message."""
        try:
            return self._items.popleft()
        except IndexError:
            raise IndexError("message queue is empty") from None

    def __len__(self) -> int:
        return len(self._items)


class MessageReceiver(ABC):
    """Anything a :class:`MessageSender` can deliver to."""

    name: str

    @abstractmethod
    def receive_message(self, msg: Message) -> None:
        """Accept delivery of ``msg``."""


class UnknownRecipientError(LookupError):
    """Raised when a message is addressed to a receiver nobody registered."""

    def __init__(self, recipient: str) -> None:
        super().__init__(f"no receiver registered as {recipient!r}")
        self.recipient = recipient


class MessageSender:
    """Routes messages to registered receivers by recipient name."""

    def __init__(self) -> None:
        self._registry: dict[str, MessageReceiver] = {}

    def register_receiver(self, receiver: MessageReceiver) -> None:
        """Register ``receiver`` under its name, replacing any earlier one."""
        self._registry[receiver.name] = receiver

    def send_message(self, msg: Message) -> None:
        log.info("MessageSender::Routing message %s to %s", msg.name, msg.recipient)
        log.info("%s", msg.body)
        try:
            receiver = self._registry[msg.recipient]
        except KeyError:
            raise UnknownRecipientError(msg.recipient) from None
        receiver.receive_message(msg)


class State:
    """A named state that accepts the message names it was given.

    By default it accepts nothing and runs nothing on entry.
    """

    accepts: frozenset = frozenset()
    _entry_action: Optional[Callable[[], None]] = None

    def __init__(
        self,
        name: str = "",
        accepts: Iterable[str] = (),
        on_entry: Callable[[], None] | None = None,
    ) -> None:
        self.name = name
        self.accepts = frozenset(accepts)
        self._entry_action = on_entry

    def accept(self, msg: Message) -> bool:
        """Whether messages named like ``msg`` are handled in this state."""
        return msg.name in self.accepts

    def on_entry(self) -> None:
        """Run when the state machine enters this state."""
        if self._entry_action is not None:
            self._entry_action()


class StateMachine:
    """Holds named states and the one that is current."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.current_state: State | None = None
        self._states: dict[str, State] = {}

    @property
    def states(self) -> Mapping[str, State]:
        return MappingProxyType(self._states)

    def register_state(self, state: State) -> None:
        self._states[state.name] = state

    def transition(self, state: State | str) -> None:
        """Make ``state`` (or the state registered under that name) current and enter it."""
        if isinstance(state, str):
            try:
                state = self._states[state]
            except KeyError:
                raise KeyError(f"{self.name}: unknown state {state!r}") from None
        log.info("%s: transition to %s", self.name, state.name)
        self.current_state = state
        state.on_entry()


class Dispatcher:
    """Passes messages to their handlers when the current state accepts them."""

    def __init__(self, state_machine: StateMachine) -> None:
        self.state_machine = state_machine
        self._handlers: defaultdict[str, list[MessageHandler]] = defaultdict(list)

    def register_handler(self, message_name, handler: MessageHandler) -> None:
        """Add ``handler`` for messages of ``message_name``.

        ``message_name`` may be a name, a message, or a message class.
        """
        if isinstance(message_name, str):
            name = message_name
        elif isinstance(message_name, type):
            name = message_name.__name__
        else:
            name = message_name.name
        self._handlers[name].append(handler)

    def dispatch(self, msg: Message) -> bool:
        """Run the handlers for ``msg``; return whether the current state accepted it."""
        state = self.state_machine.current_state
        if state is None or not state.accept(msg):
            log.error("Dispatcher:: no handler found for %s", msg.name)
            return False
        for handler in list(self._handlers.get(msg.name, ())):
            handler.handle(msg)
        return True


class Module(MessageReceiver):
    """A receiver that queues incoming messages and dispatches them one at a time."""

    def __init__(
        self,
        name: str = "",
        sender: MessageSender | None = None,
        state_machine: StateMachine | None = None,
        dispatcher: Dispatcher | None = None,
    ) -> None:
        self.name = name
        self.sender = sender
        self.state_machine = state_machine
        self.dispatcher = dispatcher
        self._queue = MessageQueue()

    @property
    def pending(self) -> int:
        """Number of messages waiting to be processed."""
        return len(self._queue)

    def send_message(self, msg: Message) -> None:
        if self.sender is None:
            raise RuntimeError(f"module {self.name!r} has no message sender")
        self.sender.send_message(msg)

    def receive_message(self, msg: Message) -> None:
        self._queue.push(msg)

    def process_message(self) -> bool:
        """Dispatch the oldest queued message, if any; return whether one was taken."""
        if not len(self._queue):
            return False
        if self.dispatcher is None:
            raise RuntimeError(f"module {self.name!r} has no dispatcher")
        self.dispatcher.dispatch(self._queue.get_message())
        return True

    def is_quit_state(self) -> bool:
        return False