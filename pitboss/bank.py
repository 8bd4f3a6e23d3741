"""The player's money and the amount staked on each hand."""

from __future__ import annotations


class Bank:
    """Holds the player's balance, which never drops below zero."""

    def __init__(self) -> None:
        self._balance = 0

    @property
    def balance(self) -> int:
        return self._balance

    def add(self, amount: int) -> None:
        self._balance += amount

    def withdraw(self, amount: int) -> None:
        """Take ``amount`` out; the balance bottoms out at zero."""
        self._balance = max(self._balance - amount, 0)

    def reset(self) -> None:
        self._balance = 0


class WagerControl:
    """The amount the player stakes per hand; negative amounts become zero."""

    DEFAULT_WAGER = 25

    def __init__(self, name: str = "WagerControl") -> None:
        self.name = name
        self._wager = self.DEFAULT_WAGER

    @property
    def wager(self) -> int:
        return self._wager

    @wager.setter
    def wager(self, amount: int) -> None:
        self._wager = max(amount, 0)