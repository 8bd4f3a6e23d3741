# pitboss

Building blocks for a blackjack table whose parts talk to each other by
messages. A `Module` queues the messages it receives and hands each one to a
`Dispatcher`. The dispatcher passes it to the handlers registered for its name,
but only when the current `State` of the module's `StateMachine` accepts it.

## What is in the package

- `pitboss.messaging`
  - `Message` is a dataclass with `recipient`, `body` and `name`.
  - `MessageHandler`, `MessageQueue`, `MessageReceiver`, `MessageSender`,
    `State`, `StateMachine`, `Dispatcher` and `Module`.
  - `MessageSender.send_message` delivers a message to the receiver registered
    under its recipient name. It raises `UnknownRecipientError` when no receiver
    has that name.
  - `StateMachine.transition` takes a state or a registered state name. It
    raises `KeyError` for an unknown name.
  - `Dispatcher.dispatch` returns whether the current state accepted the
    message.
  - `Module.process_message` dispatches the oldest queued message. It returns
    whether there was one.
- `pitboss.messages`: the named message types, for example `TableDataMessage`,
  `PlayerWinMessage`, `WagerResponseMessage`, `HitMessage` and `QuitMessage`.
- `pitboss.cards`: `Suit`, `Rank`, `Card` (aces are worth 1 and face cards 10),
  the abstract `Deck`, the 104-card `DoubleDeck`, `Hand` and `Dealer`.
  - `DoubleDeck.shuffle` takes an optional `random.Random`.
  - Drawing from an empty deck, or removing a card from an empty hand, raises
    `IndexError`.
- `pitboss.rules`: the rules as plain functions.
  - Hand values and outcomes: `hand_value`, `is_hard_value`, `up_card_value`,
    `is_21`, `is_natural`, `is_bust`, `is_win`, `is_push`, `is_surrendered`.
  - Allowed plays: `can_hit`, `can_stand`, `can_split`, `can_surrender`,
    `can_insure`, `can_double_down`, and `can_draw` (the dealer draws below 17
    and on a soft 17).
  - `is_time_to_shuffle` is true once fewer than half of a deck's cards remain.
- `pitboss.bank`
  - `Bank`: its balance never goes below zero.
  - `WagerControl`: the wager starts at 25, and a negative wager becomes 0.
- `pitboss.game_flow`: the game-side states and handlers.
  - States: `DealState`, `InsuranceState`, `DealerTurnState` and
    `ShowdownState`. `ShowdownState` computes the payouts: 3:2 on a natural,
    even money on a win, the stake back on a push, half the stake on a
    surrender.
  - Handlers: `InsuranceResponseHandler`, `SurrenderHandler`,
    `GameRestartHandler` and `GameQuitHandler`.
  - They work against any object that has the methods listed in the `Table`
    protocol.
- `pitboss.player_flow`: the player-side handlers.
  - They credit and debit a `Bank` and turn the player's choices into game
    messages.
  - They relay results to the interface.
  - States: `PlayState` and `PlayerStartState`.
- `pitboss.cli_flow`: the console handlers and `CLIStartState`.
  - `CLIStartState` is the main menu: play, cash in (25 to 10000), change wager
    (25 to 3000), check balance, help and quit.
  - Each class takes optional input and output streams. They default to
    standard input and output.
- `pitboss.scenario`: `Scenario` holds a scripted list of messages to send and
  the responses expected back.
  - `next_message` and `next_response` return a `NullMessage` once the script
    is used up.
- `pitboss.stacked_decks`: `StackedDeck` deals in a fixed order, and shuffling
  it does nothing. Prepared decks: `blackjack_win_deck`, `bust_deck`,
  `push_deck` and `surrender_deck`.
- `pitboss.utils`: console input helpers.
  - `normalize_input` strips and lower-cases text.
  - `read_command` reads one normalised line and raises `EOFError` at the end
    of input.
  - `is_integer` checks for an optional sign followed by digits.

## Example

```python
from pitboss import rules
from pitboss.cards import Hand
from pitboss.stacked_decks import push_deck

deck = push_deck()
hand = Hand()
hand.receive_card(deck.draw_card(True))
hand.receive_card(deck.draw_card(True))

print(rules.hand_value(hand))       # 10
print(rules.can_double_down(hand))  # True
```

Aces count as 11 while that keeps the hand at 21 or below, and as 1 otherwise.
A natural is 21 made with exactly two cards.

## What the package does not do

There is no ready-made game to play, and no command to run.

- The package has no table class. The game states and handlers expect one that
  you supply, matching the `Table` protocol in `pitboss.game_flow`.
- It does not assemble the game, player and console modules. You build each
  `Module` yourself from its states, handlers and dispatcher, and register
  them with a `MessageSender`.
- `Scenario` only holds a script. Sending its messages to a module and
  comparing the replies is left to the caller.

## Requirements

Python 3.10 or later. The package uses only the standard library. Install the
`test` extra to run the tests with pytest.