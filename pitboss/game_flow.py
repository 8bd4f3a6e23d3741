"""Game-side handlers and states that drive a round from deal to showdown."""

from __future__ import annotations

from typing import Protocol

from .messages import (
    InsuranceOfferMessage,
    InsuranceResultMessage,
    PlayerBlackjackMessage,
    PlayerBustMessage,
    PlayerLoseMessage,
    PlayerPushMessage,
    PlayerSurrenderedMessage,
    PlayerWinMessage,
    RoundCompletedMessage,
    TableDataMessage,
)
from .messaging import Message, MessageHandler, MessageSender, State, StateMachine

PLAYER = "Player"


class Table(Protocol):
    """What the game flow needs from the table it plays on."""

    player_wager: int

    def reset(self) -> None: ...
    def encode(self) -> str: ...
    def deal_card_to_player(self, face_up: bool) -> None: ...
    def deal_card_to_dealer(self, face_up: bool) -> None: ...
    def set_dealer_hole_card_face_up(self) -> None: ...
    def player_can_insure(self) -> bool: ...
    def dealer_can_draw(self) -> bool: ...
    def poll_hands(self) -> bool: ...
    def surrender_player_hand(self) -> None: ...
    def next_hand(self) -> bool: ...
    def reset_index(self) -> None: ...
    def check_dealer_natural(self) -> bool: ...
    def check_player_natural(self) -> bool: ...
    def check_player_surrendered(self) -> bool: ...
    def check_player_win(self) -> bool: ...
    def check_player_push(self) -> bool: ...
    def check_player_bust(self) -> bool: ...


class _TableHandler(MessageHandler):
    def __init__(self, sender: MessageSender, state_machine: StateMachine, table: Table) -> None:
        self.sender = sender
        self.state_machine = state_machine
        self.table = table

    def _send_table(self) -> None:
        self.sender.send_message(TableDataMessage(PLAYER, self.table.encode()))


class GameQuitHandler(_TableHandler):
    """Returns the game to its start state when the player quits."""

    name = "GameQuitHandler"

    def handle(self, msg: Message) -> None:
        self.state_machine.transition("GameStartState")


class GameRestartHandler(_TableHandler):
    """Clears the table and returns the game to its start state."""

    name = "GameRestartHandler"

    def handle(self, msg: Message) -> None:
        self.table.reset()
        self.state_machine.transition("GameStartState")


class InsuranceResponseHandler(_TableHandler):
    """Settles the insurance side bet and moves the round on."""

    name = "InsuranceResponseHandler"

    def handle(self, msg: Message) -> None:
        if msg.body == "Accepted":
            if self.table.check_dealer_natural():
                self.sender.send_message(InsuranceResultMessage(PLAYER, "Win"))
                self.table.set_dealer_hole_card_face_up()
                self._send_table()
                self.state_machine.transition("ShowdownState")
            else:
                self.sender.send_message(InsuranceResultMessage(PLAYER, "Lose"))
                self.state_machine.transition("PlayerTurnState")
        elif msg.body == "Rejected":
            if self.table.check_dealer_natural():
                self._send_table()
                self.state_machine.transition("ShowdownState")
            else:
                self.state_machine.transition("PlayerTurnState")
        else:
            raise ValueError(f"bad insurance response: {msg.body!r}")


class SurrenderHandler(_TableHandler):
    """Surrenders the current hand and moves to the next hand or the dealer."""

    name = "SurrenderHandler"

    def handle(self, msg: Message) -> None:
        self.table.surrender_player_hand()
        if self.table.next_hand():
            self.state_machine.transition("PlayerTurnState")
        else:
            self.state_machine.transition("DealerTurnState")


class _TableState(State):
    def __init__(
        self, name: str, sender: MessageSender, state_machine: StateMachine, table: Table
    ) -> None:
        super().__init__(name)
        self.sender = sender
        self.state_machine = state_machine
        self.table = table

    def accept(self, msg: Message) -> bool:
        return False

    def _send_table(self) -> None:
        self.sender.send_message(TableDataMessage(PLAYER, self.table.encode()))


class DealState(_TableState):
    """Deals the opening cards and decides where the round goes next."""

    def __init__(self, sender: MessageSender, state_machine: StateMachine, table: Table) -> None:
        super().__init__("DealState", sender, state_machine, table)

    def accept(self, msg: Message) -> bool:
        return False

    def on_entry(self) -> None:
        self.table.deal_card_to_player(True)
        self.table.deal_card_to_dealer(False)
        self.table.deal_card_to_player(True)
        self.table.deal_card_to_dealer(True)
        self._send_table()
        if self.table.player_can_insure():
            self.state_machine.transition("InsuranceState")
        elif self.table.check_player_natural():
            self.state_machine.transition("DealerTurnState")
        else:
            self.state_machine.transition("PlayerTurnState")


class DealerTurnState(_TableState):
    """Reveals the hole card and draws for the dealer while hands remain live."""

    def __init__(self, sender: MessageSender, state_machine: StateMachine, table: Table) -> None:
        super().__init__("DealerTurnState", sender, state_machine, table)

    def accept(self, msg: Message) -> bool:
        return False

    def on_entry(self) -> None:
        self.table.set_dealer_hole_card_face_up()
        if self.table.poll_hands():
            while self.table.dealer_can_draw():
                self.table.deal_card_to_dealer(True)
        self._send_table()
        self.state_machine.transition("ShowdownState")


class InsuranceState(_TableState):
    """Offers insurance and waits for the player's answer."""

    _ACCEPTED = frozenset({"InsuranceResponseMessage", "RestartMessage", "QuitMessage"})

    def __init__(self, sender: MessageSender, state_machine: StateMachine, table: Table) -> None:
        super().__init__("InsuranceState", sender, state_machine, table)

    def accept(self, msg: Message) -> bool:
        return msg.name in self._ACCEPTED

    def on_entry(self) -> None:
        self.sender.send_message(InsuranceOfferMessage(PLAYER, ""))


class ShowdownState(_TableState):
    """Reports the outcome and payout of every player hand, then ends the round."""

    def __init__(self, sender: MessageSender, state_machine: StateMachine, table: Table) -> None:
        super().__init__("ShowdownState", sender, state_machine, table)

    def accept(self, msg: Message) -> bool:
        return False

    def _settle(self) -> Message:
        table = self.table
        wager = table.player_wager
        player_natural = table.check_player_natural()
        dealer_natural = table.check_dealer_natural()
        if table.check_player_surrendered():
            return PlayerSurrenderedMessage(PLAYER, str(wager // 2))
        if player_natural and not dealer_natural:
            return PlayerBlackjackMessage(PLAYER, str(wager + (wager * 3) // 2))
        if table.check_player_win():
            return PlayerWinMessage(PLAYER, str(wager + wager))
        if table.check_player_push() or (player_natural and dealer_natural):
            return PlayerPushMessage(PLAYER, str(wager))
        if table.check_player_bust():
            return PlayerBustMessage(PLAYER, "0")
        return PlayerLoseMessage(PLAYER, "0")

    def on_entry(self) -> None:
        self.table.reset_index()
        while True:
            self.sender.send_message(self._settle())
            if not self.table.next_hand():
                break
        self.sender.send_message(RoundCompletedMessage(PLAYER, ""))
        self.state_machine.transition("GameStartState")