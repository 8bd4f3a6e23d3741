"""Text-interface handlers and the main-menu state."""

from __future__ import annotations

import sys
from typing import TextIO

from .messages import (
    CashInMessage,
    ChangeWagerMessage,
    CheckBalanceMessage,
    InsuranceMessage,
    PlayHandMessage,
    QuitMessage,
)
from .messaging import Message, MessageHandler, MessageSender, State, StateMachine
from .utils import is_integer, read_command

PLAYER = "Player"
GAME = "Game"

CASH_IN_MIN = 25
CASH_IN_MAX = 10000
WAGER_MIN = 25
WAGER_MAX = 3000

_HELP = (
    'Type "play" to begin a round of blackjack.',
    'Type "check balance" to display player balance.',
    'Type "cash in" to add money to player balance.',
    'Type "change wager" to set a new wager amount per hand.',
    'Type "quit" to exit the game.',
)


class _Console:
    """Reads commands from an input stream and writes lines to an output stream."""

    def __init__(self, input_stream: TextIO | None = None, output: TextIO | None = None) -> None:
        self._input = input_stream
        self._output = output

    def say(self, text: str) -> None:
        print(text, file=self._output if self._output is not None else sys.stdout)

    def ask(self) -> str:
        return read_command(self._input)


class _CliHandler(MessageHandler):
    def __init__(
        self,
        sender: MessageSender,
        state_machine: StateMachine,
        input_stream: TextIO | None = None,
        output: TextIO | None = None,
    ) -> None:
        self.sender = sender
        self.state_machine = state_machine
        self.console = _Console(input_stream, output)


class DisplayTableHandler(_CliHandler):
    """Prints the table description carried in the message body."""

    name = "DisplayTableHandler"

    def handle(self, msg: Message) -> None:
        self.console.say(msg.body)


class PlayHandHandler(_CliHandler):
    """Asks the player to start a hand and waits for the outcome."""

    name = "PlayHandHandler"

    def handle(self, msg: Message) -> None:
        self.sender.send_message(PlayHandMessage(PLAYER, ""))
        self.state_machine.transition("WaitState")


class QuitHandler(_CliHandler):
    """Moves the interface to its quit state."""

    name = "QuitHandler"

    def handle(self, msg: Message) -> None:
        self.state_machine.transition("QuitState")


class RequestInsuranceHandler(_CliHandler):
    """Asks the user whether to take insurance until a yes or no is given."""

    name = "RequestInsuranceHandler"

    def handle(self, msg: Message) -> None:
        while True:
            self.console.say("Insurance?: <Yes> <No>")
            answer = self.console.ask()
            if answer == "yes":
                self.sender.send_message(InsuranceMessage(PLAYER, "Accepted"))
                return
            if answer == "no":
                self.sender.send_message(InsuranceMessage(PLAYER, "Rejected"))
                return
            self.console.say("Invalid option")


class RestartHandler(_CliHandler):
    """Returns the interface to the main menu."""

    name = "RestartHandler"

    def handle(self, msg: Message) -> None:
        self.state_machine.transition("CLIStartState")


class CLIStartState(State):
    """The main menu: play, cash in, change wager, check balance, help or quit."""

    _ACCEPTED = frozenset(
        {
            "RestartMessage",
            "DisplayBalanceMessage",
            "DisplayHandResultMessage",
            "InsufficientFundsMessage",
            "QuitMessage",
        }
    )

    def __init__(
        self,
        sender: MessageSender,
        state_machine: StateMachine,
        input_stream: TextIO | None = None,
        output: TextIO | None = None,
    ) -> None:
        super().__init__("CLIStartState")
        self.sender = sender
        self.state_machine = state_machine
        self.console = _Console(input_stream, output)

    def accept(self, msg: Message) -> bool:
        return msg.name in self._ACCEPTED

    def on_entry(self) -> None:
        while True:
            self.console.say(
                "Main Menu: <play> <cash in> <change wager> <check balance> <quit> <help>"
            )
            choice = self.console.ask()
            if choice == "play":
                self.sender.send_message(PlayHandMessage(PLAYER, ""))
                self.state_machine.transition("WaitState")
                return
            if choice == "cash in":
                self.cash_in()
                return
            if choice == "change wager":
                self.change_wager()
                return
            if choice == "check balance":
                self.sender.send_message(CheckBalanceMessage(PLAYER, ""))
                return
            if choice == "help":
                for line in _HELP:
                    self.console.say(line)
            elif choice == "quit":
                self.sender.send_message(QuitMessage(PLAYER, ""))
                self.sender.send_message(QuitMessage(GAME, ""))
                self.state_machine.transition("QuitState")
                return
            else:
                self.console.say("Invalid option.")

    def _ask_amount(self, prompt: str, low: int, high: int) -> int:
        while True:
            self.console.say(prompt)
            text = self.console.ask()
            amount = None
            if is_integer(text):
                try:
                    amount = int(text)
                except ValueError:
                    amount = None
            if amount is None:
                self.console.say("Input is not a number, try again.")
            elif low <= amount <= high:
                return amount
            else:
                self.console.say(f"Invalid amount. Min is {low}. Max is {high}.")

    def cash_in(self) -> None:
        """Ask for an amount to add to the balance and send it to the player."""
        amount = self._ask_amount(
            f"Enter an amount between {CASH_IN_MIN} and {CASH_IN_MAX} to cash in: ",
            CASH_IN_MIN,
            CASH_IN_MAX,
        )
        self.sender.send_message(CashInMessage(PLAYER, str(amount)))
        self.state_machine.transition("WaitState")

    def change_wager(self) -> None:
        """Ask for a new per-hand wager and send it to the player."""
        amount = self._ask_amount(
            f"Enter an amount between {WAGER_MIN} and {WAGER_MAX} to wager: ",
            WAGER_MIN,
            WAGER_MAX,
        )
        self.sender.send_message(ChangeWagerMessage(PLAYER, str(amount)))
        self.state_machine.transition("WaitState")