"""Player-side handlers and states: money, wagers and relaying between game and interface."""

from __future__ import annotations

import logging

from .bank import Bank, WagerControl
from .messages import (
    CashInResponseMessage,
    CLIRoundCompletedMessage,
    DisplayBalanceMessage,
    DisplayHandResultMessage,
    DisplayInsuranceResultMessage,
    DoubleDownMessage,
    HitMessage,
    InsufficientFundsMessage,
    PlayResponseMessage,
    RequestInputMessage,
    RequestInsuranceMessage,
    SplitMessage,
    StandMessage,
    SurrenderMessage,
)
from .messaging import Message, MessageHandler, MessageSender, State, StateMachine
from .utils import is_integer

log = logging.getLogger(__name__)

GAME = "Game"
INTERFACE = "CLI"


def _parse_int(text: str) -> int | None:
    """The integer in ``text``, or None when it is not one."""
    if not is_integer(text):
        return None
    try:
        return int(text)
    except ValueError:
        return None


class _PlayerHandler(MessageHandler):
    def __init__(self, sender: MessageSender, state_machine: StateMachine) -> None:
        self.sender = sender
        self.state_machine = state_machine


class _BankHandler(_PlayerHandler):
    def __init__(self, sender: MessageSender, state_machine: StateMachine, bank: Bank) -> None:
        super().__init__(sender, state_machine)
        self.bank = bank


class _PayoutHandler(_BankHandler):
    """Credits the payout carried in a message body and reports the new balance."""

    def _credit(self, msg: Message) -> int:
        winnings = _parse_int(msg.body)
        if winnings is None:
            log.error("Player::%s: bad integer.", self.name)
            winnings = 0
        self.bank.add(winnings)
        return winnings

    def _report(self, headline: str) -> None:
        text = f"{headline}\nBalance is {self.bank.balance}\n"
        self.sender.send_message(DisplayHandResultMessage(INTERFACE, text))


class CashInHandler(_BankHandler):
    """Adds cash to the bank and tells the interface whether it was accepted."""

    name = "CashInHandler"

    def handle(self, msg: Message) -> None:
        amount = _parse_int(msg.body)
        if amount is None:
            log.error("Player::CashInHandler: bad integer.")
            self.sender.send_message(CashInResponseMessage(INTERFACE, "Rejected"))
            return
        self.bank.add(amount)
        self.sender.send_message(CashInResponseMessage(INTERFACE, "Accepted"))


class CheckBalanceHandler(_BankHandler):
    """Sends the current balance to the interface."""

    name = "CheckBalanceHandler"

    def handle(self, msg: Message) -> None:
        self.sender.send_message(DisplayBalanceMessage(INTERFACE, str(self.bank.balance)))


class InputMessageHandler(_BankHandler):
    """Turns the player's chosen play into a message for the game."""

    name = "InputMessageHandler"

    def __init__(
        self,
        sender: MessageSender,
        state_machine: StateMachine,
        bank: Bank,
        wager_control: WagerControl,
    ) -> None:
        super().__init__(sender, state_machine, bank)
        self.wager_control = wager_control

    def _stake_more(self, message_type, action: str) -> None:
        wager = self.wager_control.wager
        if self.bank.balance >= wager:
            self.bank.withdraw(wager)
            self.sender.send_message(message_type(GAME, str(wager)))
        else:
            self.sender.send_message(
                InsufficientFundsMessage(INTERFACE, f"Not enough cash to {action}.")
            )
            self.sender.send_message(RequestInputMessage(INTERFACE, ""))

    def handle(self, msg: Message) -> None:
        choice = msg.body
        if choice == "Hit":
            self.sender.send_message(HitMessage(GAME, ""))
        elif choice == "Stand":
            self.sender.send_message(StandMessage(GAME, ""))
        elif choice == "DoubleDown":
            self._stake_more(DoubleDownMessage, "Double Down")
        elif choice == "Split":
            self._stake_more(SplitMessage, "Split")
        elif choice == "Surrender":
            self.sender.send_message(SurrenderMessage(GAME, ""))
        else:
            log.error("Player::InputMessageHandler: bad message received.")
            self.sender.send_message(RequestInputMessage(INTERFACE, ""))


class InsuranceOfferHandler(_BankHandler):
    """Asks the interface whether the player wants insurance."""

    name = "InsuranceOfferHandler"

    def handle(self, msg: Message) -> None:
        self.sender.send_message(RequestInsuranceMessage(INTERFACE, ""))


class InsuranceResultHandler(_BankHandler):
    """Settles the insurance bet against the bank and reports the result."""

    name = "InsuranceResultHandler"

    def __init__(
        self,
        sender: MessageSender,
        state_machine: StateMachine,
        bank: Bank,
        wager_control: WagerControl,
    ) -> None:
        super().__init__(sender, state_machine, bank)
        self.wager_control = wager_control

    def handle(self, msg: Message) -> None:
        if msg.body == "Win":
            self.bank.add(self.wager_control.wager)
        elif msg.body == "Lose":
            self.bank.withdraw(self.wager_control.wager // 2)
        else:
            raise ValueError(f"bad insurance result: {msg.body!r}")
        self.sender.send_message(DisplayInsuranceResultMessage(INTERFACE, msg.body))


class PlayerBlackjackHandler(_PayoutHandler):
    """Credits a blackjack payout."""

    name = "PlayerBlackjackHandler"

    def handle(self, msg: Message) -> None:
        winnings = self._credit(msg)
        self._report(f"Player has Blackjack! Won {winnings}!")


class PlayerChoiceHandler(_PlayerHandler):
    """Asks the interface for the player's next play."""

    name = "PlayerChoiceHandler"

    def handle(self, msg: Message) -> None:
        self.sender.send_message(RequestInputMessage(INTERFACE, msg.body))


class PlayerPushHandler(_PayoutHandler):
    """Returns the stake on a push."""

    name = "PlayerPushHandler"

    def handle(self, msg: Message) -> None:
        winnings = self._credit(msg)
        self._report(f"Player pushed. Returned {winnings}!")


class PlayerSurrenderedHandler(_PayoutHandler):
    """Credits what is returned on a surrender."""

    name = "PlayerSurrenderedHandler"

    def handle(self, msg: Message) -> None:
        self._credit(msg)
        self._report("Player Surrendered")


class RoundCompletedHandler(_BankHandler):
    """Returns the player to its start state and tells the interface the round ended."""

    name = "RoundCompletedHandler"

    def handle(self, msg: Message) -> None:
        self.state_machine.transition("PlayerStartState")
        self.sender.send_message(CLIRoundCompletedMessage(INTERFACE, ""))


class WagerResponseHandler(_PlayerHandler):
    """Passes the game's answer to a wager on to the interface."""

    name = "WagerResponseHandler"

    def handle(self, msg: Message) -> None:
        if msg.body == "Accepted":
            self.sender.send_message(PlayResponseMessage(INTERFACE, "Accepted"))
            self.state_machine.transition("PlayState")
        elif msg.body == "Rejected":
            self.sender.send_message(PlayResponseMessage(INTERFACE, "Rejected"))
            self.state_machine.transition("PlayerStartState")
        else:
            raise ValueError(f"bad wager response: {msg.body!r}")


class PlayState(State):
    """The player is in a round."""

    _ACCEPTED = frozenset(
        {
            "QuitMessage",
            "RestartMessage",
            "RoundCompletedMessage",
            "PlayerWinMessage",
            "PlayerLoseMessage",
            "PlayerBustMessage",
            "PlayerPushMessage",
            "PlayerSurrenderedMessage",
            "PlayerBlackjackMessage",
            "PlayerChoiceMessage",
            "InsuranceOfferMessage",
            "InsuranceMessage",
            "InsuranceResultMessage",
            "InputMessage",
            "TableDataMessage",
        }
    )

    def __init__(self) -> None:
        super().__init__("PlayState")

    def accept(self, msg: Message) -> bool:
        return msg.name in self._ACCEPTED


class PlayerStartState(State):
    """The player is between rounds."""

    _ACCEPTED = frozenset(
        {
            "PlayHandMessage",
            "CashInMessage",
            "ChangeWagerMessage",
            "CheckBalanceMessage",
            "QuitMessage",
            "RestartMessage",
            "WagerResponseMessage",
        }
    )

    def __init__(self) -> None:
        super().__init__("PlayerStartState")

    def accept(self, msg: Message) -> bool:
        return msg.name in self._ACCEPTED