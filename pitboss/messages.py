"""The concrete messages exchanged between the game, the player and the interface."""

from __future__ import annotations

from dataclasses import dataclass

from .messaging import Message

# Game to player.


@dataclass
class HandResultMessage(Message):
    name: str = "HandResultMessage"


@dataclass
class InsuranceOfferMessage(Message):
    name: str = "InsuranceOfferMessage"


@dataclass
class InsuranceResultMessage(Message):
    name: str = "InsuranceResultMessage"


@dataclass
class PlayerBlackjackMessage(Message):
    name: str = "PlayerBlackjackMessage"


@dataclass
class PlayerBustMessage(Message):
    name: str = "PlayerBustMessage"


@dataclass
class PlayerChoiceMessage(Message):
    name: str = "PlayerChoiceMessage"


@dataclass
class PlayerPushMessage(Message):
    name: str = "PlayerPushMessage"


@dataclass
class PlayerWinMessage(Message):
    name: str = "PlayerWinMessage"


@dataclass
class PlayerLoseMessage(Message):
    name: str = "PlayerLoseMessage"


@dataclass
class PlayerSurrenderedMessage(Message):
    name: str = "PlayerSurrenderedMessage"


@dataclass
class RoundCompletedMessage(Message):
    name: str = "RoundCompletedMessage"


@dataclass
class TableDataMessage(Message):
    name: str = "TableDataMessage"


@dataclass
class WagerResponseMessage(Message):
    name: str = "WagerResponseMessage"


# Player to interface.


@dataclass
class CashInResponseMessage(Message):
    name: str = "CashInResponseMessage"


@dataclass
class ChangeWagerResponseMessage(Message):
    name: str = "ChangeWagerResponseMessage"


@dataclass
class CLIRoundCompletedMessage(Message):
    name: str = "CLIRoundCompletedMessage"


@dataclass
class DisplayBalanceMessage(Message):
    name: str = "DisplayBalanceMessage"


@dataclass
class DisplayHandResultMessage(Message):
    name: str = "DisplayHandResultMessage"


@dataclass
class DisplayInsuranceResultMessage(Message):
    name: str = "DisplayInsuranceResultMessage"


@dataclass
class DisplayTableMessage(Message):
    name: str = "DisplayTableMessage"


@dataclass
class InsufficientFundsMessage(Message):
    name: str = "InsufficientFundsMessage"


@dataclass
class PlayResponseMessage(Message):
    name: str = "PlayResponseMessage"


@dataclass
class RequestInputMessage(Message):
    name: str = "RequestInputMessage"


@dataclass
class RequestInsuranceMessage(Message):
    name: str = "RequestInsuranceMessage"


# Interface to player.


@dataclass
class PlayHandMessage(Message):
    name: str = "PlayHandMessage"


@dataclass
class CashInMessage(Message):
    name: str = "CashInMessage"


@dataclass
class ChangeWagerMessage(Message):
    name: str = "ChangeWagerMessage"


@dataclass
class CheckBalanceMessage(Message):
    name: str = "CheckBalanceMessage"


@dataclass
class QuitMessage(Message):
    name: str = "QuitMessage"


@dataclass
class RestartMessage(Message):
    name: str = "RestartMessage"


@dataclass
class InsuranceMessage(Message):
    name: str = "InsuranceMessage"


# Player to game.


@dataclass
class HitMessage(Message):
    name: str = "HitMessage"


@dataclass
class StandMessage(Message):
    name: str = "StandMessage"


@dataclass
class DoubleDownMessage(Message):
    name: str = "DoubleDownMessage"


@dataclass
class SplitMessage(Message):
    name: str = "SplitMessage"


@dataclass
class SurrenderMessage(Message):
    name: str = "SurrenderMessage"