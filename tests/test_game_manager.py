import pytest

from number_rush.constants.game_constants import QUESTIONS_PER_GAME
from number_rush.core.game_manager import GameManager
from number_rush.core.models import Difficulty, GamePhase
from number_rush.core.services.game_session import GameStateError


@pytest.fixture
def manager(ticker, clock):
    return GameManager(ticker=ticker, seed=2024, clock=clock)


def current_answer(manager):
    return manager._session.get_current_question().answer


def test_initial_snapshot(manager):
    snapshot = manager.snapshot()
    assert snapshot.phase is GamePhase.SELECTING_DIFFICULTY
    assert snapshot.difficulty is None
    assert snapshot.question is None
    assert snapshot.total_questions == QUESTIONS_PER_GAME
    assert snapshot.elapsed_text == "0:00"


def test_select_difficulty_accepts_string_values(manager):
    snapshot = manager.select_difficulty("medium")
    assert snapshot.phase is GamePhase.PLAYING
    assert snapshot.difficulty is Difficulty.MEDIUM
    assert snapshot.question_index == 1


def test_unknown_difficulty_is_rejected(manager):
    with pytest.raises(ValueError):
        manager.select_difficulty("impossible")
    assert manager.get_phase() is GamePhase.SELECTING_DIFFICULTY


def test_snapshot_hides_answer_and_options_until_hint(manager):
    snapshot = manager.select_difficulty(Difficulty.EASY)

    assert not hasattr(snapshot.question, "answer")
    assert snapshot.options == ()
    assert not snapshot.hint_revealed

    options = manager.request_hint()
    revealed = manager.snapshot()
    assert revealed.hint_revealed
    assert revealed.options == tuple(options)
    assert current_answer(manager) in revealed.options


def test_update_input_reports_submittable(manager):
    manager.select_difficulty(Difficulty.EASY)
    assert manager.update_input("abc") is False
    assert manager.update_input("12") is True
    assert manager.snapshot().user_input == "12"
    assert manager.snapshot().can_submit


def test_full_game_through_manager(manager, fake_time):
    manager.select_difficulty(Difficulty.EASY)
    for _ in range(QUESTIONS_PER_GAME):
        fake_time.advance(6)
        result = manager.submit_answer(str(current_answer(manager)))
    assert result.game_completed

    snapshot = manager.snapshot()
    assert snapshot.phase is GamePhase.COMPLETED
    assert snapshot.score == QUESTIONS_PER_GAME
    assert snapshot.question is None
    assert snapshot.elapsed_text == "1:00"


def test_hint_option_submission_counts_as_answer(manager):
    manager.select_difficulty(Difficulty.EASY)
    options = manager.request_hint()
    correct = current_answer(manager)

    result = manager.submit_answer(str(correct))

    assert correct in options
    assert result.is_correct
    assert manager.snapshot().score == 1


def test_rejected_submission_leaves_snapshot_unchanged(manager):
    before = manager.select_difficulty(Difficulty.HARD)
    result = manager.submit_answer("abc")
    after = manager.snapshot()

    assert not result.accepted
    assert after.score == before.score
    assert after.question_index == before.question_index
    assert after.question == before.question
    assert after.phase is GamePhase.PLAYING


def test_play_again_clears_game(manager):
    manager.select_difficulty(Difficulty.EASY)
    for _ in range(QUESTIONS_PER_GAME):
        manager.submit_answer("0")

    manager.play_again()

    snapshot = manager.snapshot()
    assert snapshot.phase is GamePhase.SELECTING_DIFFICULTY
    assert snapshot.score == 0
    assert snapshot.question_index == 0


def test_play_again_while_playing_raises(manager):
    manager.select_difficulty(Difficulty.EASY)
    with pytest.raises(GameStateError):
        manager.play_again()


def test_tick_listeners_receive_snapshots(manager, ticker, fake_time):
    received = []
    manager.add_tick_listener(received.append)
    manager.select_difficulty(Difficulty.EASY)

    fake_time.advance(61)
    ticker.fire()

    assert len(received) == 1
    assert received[0].elapsed_text == "1:01"
    assert received[0].phase is GamePhase.PLAYING

    manager.remove_tick_listener(received.append)
    ticker.fire()
    assert len(received) == 1


def test_same_seed_gives_same_first_question(ticker, clock):
    first = GameManager(ticker=ticker, seed=5, clock=clock).select_difficulty(Difficulty.HARD)
    second = GameManager(ticker=ticker, seed=5, clock=clock).select_difficulty(Difficulty.HARD)
    assert first.question == second.question


def test_set_random_seed_reseeds_generation(manager):
    manager.set_random_seed(77)
    first = manager.select_difficulty(Difficulty.MEDIUM).question
    for _ in range(QUESTIONS_PER_GAME):
        manager.submit_answer("0")
    manager.play_again()

    manager.set_random_seed(77)
    second = manager.select_difficulty(Difficulty.MEDIUM).question
    assert first == second


def test_shutdown_stops_ticker(manager, ticker):
    manager.select_difficulty(Difficulty.EASY)
    manager.shutdown()
    assert not ticker.is_active()


def play_game(manager, difficulty):
    manager.select_difficulty(difficulty)
    questions = []
    while manager.get_phase() is GamePhase.PLAYING:
        questions.append(manager._session.get_current_question())
        manager.submit_answer(str(current_answer(manager)))
    return questions


def test_fixed_seed_repeats_questions_after_play_again(ticker, clock):
    manager = GameManager(ticker=ticker, clock=clock)
    manager.set_random_seed(42)

    first = play_game(manager, Difficulty.EASY)
    manager.play_again()
    second = play_game(manager, Difficulty.EASY)

    assert first == second


def test_constructor_seed_applies_to_every_game(manager):
    first = play_game(manager, Difficulty.HARD)
    manager.play_again()
    second = play_game(manager, Difficulty.HARD)

    assert first == second
