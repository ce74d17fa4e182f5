"""Rule-level tests for game creation, guessing and settlement."""

from __future__ import annotations

from ledger.events import EventType

from digiwin.digiwin_state import Decided, GameStatus, UNDECIDED
from digiwin.errors import ErrorCode
from digiwin.randomness import FixedSeedRandomness
from digiwin.simnet import DEPLOYER, WALLET_1, WALLET_2, deploy


def _deploy_fixed(seed: int = 0):
    # Seed 0 puts the secret at min_number.
    return deploy(randomness=FixedSeedRandomness(seed))


def _create(ledger, contract, min_number: int, max_number: int, fee: int, sender: str = DEPLOYER):
    return ledger.call_public(sender, contract, "create_game", min_number, max_number, fee)


def _guess(ledger, contract, game_id: int, number: int, sender: str = WALLET_1):
    return ledger.call_public(sender, contract, "guess", game_id, number)


def test_first_game_gets_id_zero_and_ids_increase() -> None:
    ledger, contract = deploy()

    ids = [_create(ledger, contract, 1, 100, 100000).unwrap() for _ in range(4)]

    assert ids == [0, 1, 2, 3]
    assert ledger.read(contract, "get_total_games") == 4


def test_new_game_record_starts_active_and_empty() -> None:
    ledger, contract = deploy()
    height = ledger.block_height

    game_id = _create(ledger, contract, 1, 100, 100000).unwrap()
    game = ledger.read(contract, "get_game_info", game_id)

    assert game.creator == DEPLOYER
    assert 1 <= game.secret_number <= 100
    assert game.prize_pool == 0
    assert game.guess_count == 0
    assert game.winner == UNDECIDED
    assert game.status is GameStatus.ACTIVE
    assert game.created_at == height


def test_create_game_with_min_above_max_is_rejected() -> None:
    ledger, contract = deploy()
    _create(ledger, contract, 1, 10, 0)

    receipt = _create(ledger, contract, 100, 10, 100000)

    assert receipt.ok is False
    assert receipt.error_code == ErrorCode.INVALID_PARAMS == 105
    assert ledger.read(contract, "get_total_games") == 1
    assert ledger.read(contract, "get_game_info", 1) is None


def test_create_game_accepts_single_value_range() -> None:
    ledger, contract = deploy()

    receipt = _create(ledger, contract, 100, 100, 100000)

    assert receipt.ok is True
    assert ledger.read(contract, "get_game_info", receipt.value).secret_number == 100


def test_secret_stays_in_range_across_many_games() -> None:
    ledger, contract = deploy()
    ranges = [(0, 0), (1, 2), (5, 9), (1, 100), (1000, 1003), (0, 2**64)]

    for min_number, max_number in ranges * 5:
        game_id = _create(ledger, contract, min_number, max_number, 0).unwrap()
        game = ledger.read(contract, "get_game_info", game_id)
        assert min_number <= game.secret_number <= max_number


def test_guess_out_of_range_changes_nothing() -> None:
    ledger, contract = _deploy_fixed()
    game_id = _create(ledger, contract, 10, 20, 50).unwrap()
    balance_before = ledger.bank.balance(WALLET_1)

    for number in (9, 21):
        receipt = _guess(ledger, contract, game_id, number)
        assert receipt.error_code == ErrorCode.INVALID_GUESS

    assert ledger.read(contract, "get_prize_pool", game_id) == 0
    assert ledger.read(contract, "get_guess_count", game_id) == 0
    assert ledger.read(contract, "get_player_guesses", game_id, WALLET_1) == ()
    assert ledger.bank.balance(WALLET_1) == balance_before


def test_guess_on_unknown_game_fails_not_found() -> None:
    ledger, contract = deploy()
    balance_before = ledger.bank.balance(WALLET_1)

    receipt = _guess(ledger, contract, 9999, 50)

    assert receipt.error_code == ErrorCode.GAME_NOT_FOUND == 101
    assert ledger.read(contract, "get_total_games") == 0
    assert ledger.bank.balance(WALLET_1) == balance_before


def test_losing_guesses_grow_pool_and_count() -> None:
    ledger, contract = _deploy_fixed()
    assert _create(ledger, contract, 1, 100, 100000).unwrap() == 0

    assert _guess(ledger, contract, 0, 150).error_code == ErrorCode.INVALID_GUESS

    first = _guess(ledger, contract, 0, 42)
    assert first.ok is True
    assert first.value is False
    assert ledger.read(contract, "get_prize_pool", 0) == 100000
    assert ledger.read(contract, "get_guess_count", 0) == 1

    second = _guess(ledger, contract, 0, 43, sender=WALLET_2)
    assert second.value is False
    assert ledger.read(contract, "get_prize_pool", 0) == 200000
    assert ledger.read(contract, "get_guess_count", 0) == 2
    assert ledger.read(contract, "is_game_active", 0) is True
    assert ledger.bank.balance(contract.principal) == 200000


def test_single_value_game_pays_winner() -> None:
    ledger, contract = deploy()
    game_id = _create(ledger, contract, 42, 42, 1000000).unwrap()
    balance_before = ledger.bank.balance(WALLET_1)

    receipt = _guess(ledger, contract, game_id, 42)

    assert receipt.ok is True
    assert receipt.value is True
    game = ledger.read(contract, "get_game_info", game_id)
    assert game.status is GameStatus.WON
    assert game.winner == Decided(WALLET_1)
    assert game.prize_pool == 0
    assert game.guess_count == 1
    assert ledger.read(contract, "get_game_winner", game_id) == WALLET_1
    # Fee paid in and the full pool paid straight back out.
    assert ledger.bank.balance(WALLET_1) == balance_before
    assert ledger.bank.balance(contract.principal) == 0

    won_events = [event for event in receipt.events if event.payload.get("event") == "game-won"]
    assert len(won_events) == 1
    assert won_events[0].payload["winner"] == WALLET_1
    assert won_events[0].payload["prize"] == 1000000


def test_winner_collects_whole_accumulated_pool() -> None:
    ledger, contract = _deploy_fixed()
    game_id = _create(ledger, contract, 1, 100, 1000).unwrap()
    _guess(ledger, contract, game_id, 50, sender=WALLET_2)
    _guess(ledger, contract, game_id, 60, sender=WALLET_2)
    balance_before = ledger.bank.balance(WALLET_1)

    receipt = _guess(ledger, contract, game_id, 1)

    assert receipt.value is True
    assert ledger.bank.balance(WALLET_1) == balance_before + 2000
    assert ledger.read(contract, "get_guess_count", game_id) == 3
    transfers = [event for event in receipt.events if event.event_type is EventType.STX_TRANSFER]
    assert [event.payload["amount"] for event in transfers] == [1000, 3000]


def test_guess_after_win_is_rejected_and_changes_nothing() -> None:
    ledger, contract = deploy()
    game_id = _create(ledger, contract, 7, 7, 500).unwrap()
    _guess(ledger, contract, game_id, 7)
    snapshot = ledger.read(contract, "get_game_info", game_id)
    balance_before = ledger.bank.balance(WALLET_2)

    receipt = _guess(ledger, contract, game_id, 7, sender=WALLET_2)

    assert receipt.error_code == ErrorCode.GAME_ALREADY_WON == 102
    assert ledger.read(contract, "get_game_info", game_id) == snapshot
    assert ledger.read(contract, "get_player_guesses", game_id, WALLET_2) == ()
    assert ledger.bank.balance(WALLET_2) == balance_before


def test_guess_without_funds_fails_transfer_and_records_nothing() -> None:
    ledger, contract = _deploy_fixed()
    game_id = _create(ledger, contract, 1, 100, 1000).unwrap()
    pauper = "ST3NBRSFKX28FQ2ZJ1MAKX58HKHSDGNV5N7R21XCP"

    receipt = ledger.call_public(pauper, contract, "guess", game_id, 50)

    assert receipt.error_code == ErrorCode.TRANSFER_FAILED == 104
    assert ledger.read(contract, "get_player_guesses", game_id, pauper) == ()
    assert ledger.read(contract, "get_guess_count", game_id) == 0


def test_free_game_can_be_played_and_won() -> None:
    ledger, contract = _deploy_fixed()
    game_id = _create(ledger, contract, 1, 10, 0).unwrap()

    assert _guess(ledger, contract, game_id, 5).value is False
    assert _guess(ledger, contract, game_id, 1).value is True
    assert ledger.read(contract, "get_game_winner", game_id) == WALLET_1
    assert ledger.read(contract, "get_prize_pool", game_id) == 0


def test_guess_history_is_recorded_per_player_and_per_game() -> None:
    ledger, contract = _deploy_fixed()
    game_id = _create(ledger, contract, 1, 100, 10).unwrap()

    _guess(ledger, contract, game_id, 30)
    _guess(ledger, contract, game_id, 40, sender=WALLET_2)
    _guess(ledger, contract, game_id, 30)

    assert ledger.read(contract, "get_player_guesses", game_id, WALLET_1) == (30, 30)
    assert ledger.read(contract, "get_player_guesses", game_id, WALLET_2) == (40,)
    log = ledger.read(contract, "get_game_guesses", game_id)
    assert [(attempt.player, attempt.guess) for attempt in log] == [
        (WALLET_1, 30),
        (WALLET_2, 40),
        (WALLET_1, 30),
    ]
    assert log[0].timestamp < log[1].timestamp < log[2].timestamp


def test_eleventh_guess_by_one_player_is_rejected() -> None:
    ledger, contract = _deploy_fixed()
    game_id = _create(ledger, contract, 1, 100, 1000).unwrap()
    for number in range(2, 12):
        assert _guess(ledger, contract, game_id, number).ok is True
    balance_before = ledger.bank.balance(WALLET_1)

    receipt = _guess(ledger, contract, game_id, 50)

    assert receipt.error_code == ErrorCode.TOO_MANY_GUESSES == 108
    assert ledger.read(contract, "get_player_guesses", game_id, WALLET_1) == tuple(range(2, 12))
    assert ledger.read(contract, "get_prize_pool", game_id) == 10000
    assert ledger.read(contract, "get_guess_count", game_id) == 10
    assert ledger.bank.balance(WALLET_1) == balance_before
    # Other players are unaffected by one player's full history.
    assert _guess(ledger, contract, game_id, 50, sender=WALLET_2).ok is True


def test_eleventh_winning_guess_is_still_rejected() -> None:
    ledger, contract = _deploy_fixed()
    game_id = _create(ledger, contract, 1, 100, 0).unwrap()
    for number in range(2, 12):
        _guess(ledger, contract, game_id, number)

    receipt = _guess(ledger, contract, game_id, 1)

    assert receipt.error_code == ErrorCode.TOO_MANY_GUESSES
    assert ledger.read(contract, "is_game_active", game_id) is True


def test_contract_events_follow_call_order() -> None:
    ledger, contract = deploy()
    game_id = _create(ledger, contract, 3, 3, 0).unwrap()
    _guess(ledger, contract, game_id, 3)

    names = [event.payload["event"] for event in ledger.events if event.event_type is EventType.CONTRACT_EVENT]

    assert names == ["game-created", "guess-made", "game-won"]
