"""Building blocks for a message-driven blackjack table: cards, rules, bankroll, message routing and flows."""

__version__ = "0.1.0"