import pytest

from pitboss.bank import Bank, WagerControl
from pitboss.messages import (
    CashInMessage,
    HitMessage,
    InsuranceResultMessage,
    PlayerBlackjackMessage,
    PlayerChoiceMessage,
    PlayerPushMessage,
    PlayerSurrenderedMessage,
    PlayHandMessage,
    RoundCompletedMessage,
    TableDataMessage,
    WagerResponseMessage,
)
from pitboss.messaging import Message, MessageReceiver, MessageSender, StateMachine
from pitboss.player_flow import (
    CashInHandler,
    CheckBalanceHandler,
    InputMessageHandler,
    InsuranceOfferHandler,
    InsuranceResultHandler,
    PlayerBlackjackHandler,
    PlayerChoiceHandler,
    PlayerPushHandler,
    PlayerSurrenderedHandler,
    PlayerStartState,
    PlayState,
    RoundCompletedHandler,
    WagerResponseHandler,
)


class Recorder(MessageReceiver):
    def __init__(self, name):
        self.name = name
        self.received = []

    def receive_message(self, msg):
        self.received.append(msg)

    def summary(self):
        return [(m.name, m.body) for m in self.received]


@pytest.fixture
def env():
    sender = MessageSender()
    cli = Recorder("CLI")
    game = Recorder("Game")
    sender.register_receiver(cli)
    sender.register_receiver(game)
    sm = StateMachine("Player State Machine")
    sm.register_state(PlayState())
    sm.register_state(PlayerStartState())
    sm.current_state = sm.states["PlayerStartState"]
    return sender, sm, cli, game


def test_cash_in_accepted(env):
    sender, sm, cli, _ = env
    bank = Bank()
    CashInHandler(sender, sm, bank).handle(CashInMessage("Player", "500"))
    assert bank.balance == 500
    assert cli.summary() == [("CashInResponseMessage", "Accepted")]


@pytest.mark.parametrize("body", ["abc", "", "-", "12x"])
def test_cash_in_rejected(env, body):
    sender, sm, cli, _ = env
    bank = Bank()
    CashInHandler(sender, sm, bank).handle(CashInMessage("Player", body))
    assert bank.balance == 0
    assert cli.summary() == [("CashInResponseMessage", "Rejected")]


def test_check_balance(env):
    sender, sm, cli, _ = env
    bank = Bank()
    bank.add(75)
    CheckBalanceHandler(sender, sm, bank).handle(Message("Player", ""))
    assert cli.summary() == [("DisplayBalanceMessage", "75")]


@pytest.mark.parametrize(
    "choice, expected",
    [("Hit", "HitMessage"), ("Stand", "StandMessage"), ("Surrender", "SurrenderMessage")],
)
def test_input_simple_choices(env, choice, expected):
    sender, sm, cli, game = env
    InputMessageHandler(sender, sm, Bank(), WagerControl()).handle(Message("Player", choice))
    assert game.summary() == [(expected, "")]
    assert cli.received == []


@pytest.mark.parametrize("choice, expected", [("DoubleDown", "DoubleDownMessage"), ("Split", "SplitMessage")])
def test_input_extra_stake_with_funds(env, choice, expected):
    sender, sm, _, game = env
    bank = Bank()
    bank.add(100)
    InputMessageHandler(sender, sm, bank, WagerControl()).handle(Message("Player", choice))
    assert bank.balance == 75
    assert game.summary() == [(expected, "25")]


@pytest.mark.parametrize(
    "choice, text",
    [("DoubleDown", "Not enough cash to Double Down."), ("Split", "Not enough cash to Split.")],
)
def test_input_extra_stake_without_funds(env, choice, text):
    sender, sm, cli, game = env
    bank = Bank()
    bank.add(10)
    InputMessageHandler(sender, sm, bank, WagerControl()).handle(Message("Player", choice))
    assert bank.balance == 10
    assert game.received == []
    assert cli.summary() == [("InsufficientFundsMessage", text), ("RequestInputMessage", "")]


def test_input_unknown_choice_asks_again(env):
    sender, sm, cli, game = env
    InputMessageHandler(sender, sm, Bank(), WagerControl()).handle(Message("Player", "Dance"))
    assert game.received == []
    assert cli.summary() == [("RequestInputMessage", "")]


def test_insurance_offer(env):
    sender, sm, cli, _ = env
    InsuranceOfferHandler(sender, sm, Bank()).handle(Message("Player", ""))
    assert cli.summary() == [("RequestInsuranceMessage", "")]


def test_insurance_result_win(env):
    sender, sm, cli, _ = env
    bank = Bank()
    bank.add(100)
    InsuranceResultHandler(sender, sm, bank, WagerControl()).handle(
        InsuranceResultMessage("Player", "Win")
    )
    assert bank.balance == 125
    assert cli.summary() == [("DisplayInsuranceResultMessage", "Win")]


def test_insurance_result_lose(env):
    sender, sm, cli, _ = env
    bank = Bank()
    bank.add(100)
    InsuranceResultHandler(sender, sm, bank, WagerControl()).handle(
        InsuranceResultMessage("Player", "Lose")
    )
    assert bank.balance == 88
    assert cli.summary() == [("DisplayInsuranceResultMessage", "Lose")]


def test_insurance_result_bad(env):
    sender, sm, cli, _ = env
    with pytest.raises(ValueError):
        InsuranceResultHandler(sender, sm, Bank(), WagerControl()).handle(
            InsuranceResultMessage("Player", "Maybe")
        )
    assert cli.received == []


def test_blackjack_payout(env):
    sender, sm, cli, _ = env
    bank = Bank()
    PlayerBlackjackHandler(sender, sm, bank).handle(PlayerBlackjackMessage("Player", "62"))
    assert bank.balance == 62
    assert cli.summary() == [
        ("DisplayHandResultMessage", "Player has Blackjack! Won 62!\nBalance is 62\n")
    ]


def test_blackjack_bad_integer_pays_nothing(env):
    sender, sm, cli, _ = env
    bank = Bank()
    bank.add(10)
    PlayerBlackjackHandler(sender, sm, bank).handle(PlayerBlackjackMessage("Player", "x"))
    assert bank.balance == 10
    assert cli.summary() == [
        ("DisplayHandResultMessage", "Player has Blackjack! Won 0!\nBalance is 10\n")
    ]


def test_push_payout(env):
    sender, sm, cli, _ = env
    bank = Bank()
    bank.add(5)
    PlayerPushHandler(sender, sm, bank).handle(PlayerPushMessage("Player", "25"))
    assert bank.balance == 30
    assert cli.summary() == [
        ("DisplayHandResultMessage", "Player pushed. Returned 25!\nBalance is 30\n")
    ]


def test_surrender_payout(env):
    sender, sm, cli, _ = env
    bank = Bank()
    PlayerSurrenderedHandler(sender, sm, bank).handle(PlayerSurrenderedMessage("Player", "12"))
    assert bank.balance == 12
    assert cli.summary() == [("DisplayHandResultMessage", "Player Surrendered\nBalance is 12\n")]


def test_player_choice_forwards_body(env):
    sender, sm, cli, _ = env
    PlayerChoiceHandler(sender, sm).handle(PlayerChoiceMessage("Player", "Hit Stand"))
    assert cli.summary() == [("RequestInputMessage", "Hit Stand")]


def test_round_completed(env):
    sender, sm, cli, _ = env
    sm.current_state = sm.states["PlayState"]
    RoundCompletedHandler(sender, sm, Bank()).handle(RoundCompletedMessage("Player", ""))
    assert sm.current_state.name == "PlayerStartState"
    assert cli.summary() == [("CLIRoundCompletedMessage", "")]


def test_wager_accepted(env):
    sender, sm, cli, _ = env
    WagerResponseHandler(sender, sm).handle(WagerResponseMessage("Player", "Accepted"))
    assert sm.current_state.name == "PlayState"
    assert cli.summary() == [("PlayResponseMessage", "Accepted")]


def test_wager_rejected(env):
    sender, sm, cli, _ = env
    sm.current_state = sm.states["PlayState"]
    WagerResponseHandler(sender, sm).handle(WagerResponseMessage("Player", "Rejected"))
    assert sm.current_state.name == "PlayerStartState"
    assert cli.summary() == [("PlayResponseMessage", "Rejected")]


def test_wager_bad_response(env):
    sender, sm, cli, _ = env
    with pytest.raises(ValueError):
        WagerResponseHandler(sender, sm).handle(WagerResponseMessage("Player", "Huh"))
    assert cli.received == []


def test_play_state_accepts():
    state = PlayState()
    assert state.name == "PlayState"
    assert state.accept(TableDataMessage("Player", ""))
    assert state.accept(RoundCompletedMessage("Player", ""))
    assert not state.accept(PlayHandMessage("Player", ""))
    assert not state.accept(CashInMessage("Player", ""))


def test_player_start_state_accepts():
    state = PlayerStartState()
    assert state.name == "PlayerStartState"
    assert state.accept(PlayHandMessage("Player", ""))
    assert state.accept(WagerResponseMessage("Player", ""))
    assert not state.accept(HitMessage("Game", ""))
    assert not state.accept(TableDataMessage("Player", ""))