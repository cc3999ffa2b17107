import pytest

from pulse_quiz.core.services.game_session import (
    GameSession,
    NextQuestion,
    SessionPhase,
    Start,
    SubmitAnswer,
    Tick,
    calculate_points,
)


def test_calculate_points_bounds():
    assert calculate_points(20, 20) == 1500
    assert calculate_points(0, 20) == 500
    assert calculate_points(15, 20) == 1250


def test_calculate_points_rounds_half_up():
    # 1000 * 1/8 = 125 exactly; 1000 * 1/16 = 62.5 rounds up to 63
    assert calculate_points(1, 8) == 625
    assert calculate_points(1, 16) == 563
    assert calculate_points(1, 3) == 833
    assert calculate_points(2, 3) == 1167


def test_calculate_points_clamps_and_rejects_bad_limit():
    assert calculate_points(30, 20) == 1500
    assert calculate_points(-3, 20) == 500
    with pytest.raises(ValueError):
        calculate_points(5, 0)


def test_new_session_starts_in_lobby(make_quiz):
    session = GameSession(make_quiz(("B", 20)))
    state = session.state
    assert state.phase is SessionPhase.LOBBY
    assert state.score == 0
    assert state.question is None
    assert state.can_start


def test_start_enters_first_question(make_quiz):
    session = GameSession(make_quiz(("B", 12), ("C", 20)))
    state = session.start()
    assert state.phase is SessionPhase.QUESTION
    assert state.current_index == 0
    assert state.time_remaining == 12
    assert state.selected_answer is None


def test_two_question_scenario(make_quiz):
    session = GameSession(make_quiz(("B", 20), ("C", 20)))

    state = session.dispatch(Start())
    assert (state.phase, state.current_index, state.time_remaining) == (SessionPhase.QUESTION, 0, 20)

    for _ in range(5):
        state = session.dispatch(Tick())
    assert state.time_remaining == 15

    state = session.dispatch(SubmitAnswer("B"))
    assert state.score == 1250
    assert state.last_points == 1250
    assert state.phase is SessionPhase.RESULT
    assert state.answered_correctly is True

    state = session.dispatch(NextQuestion())
    assert (state.phase, state.current_index, state.time_remaining) == (SessionPhase.QUESTION, 1, 20)

    state = session.dispatch(SubmitAnswer("A"))
    assert state.score == 1250
    assert state.last_points == 0
    assert state.phase is SessionPhase.RESULT
    assert state.answered_correctly is False
    assert state.is_last_question

    state = session.dispatch(NextQuestion())
    assert state.phase is SessionPhase.GAME_OVER
    assert state.score == 1250


def test_timeout_submits_no_answer(make_quiz):
    session = GameSession(make_quiz(("A", 3)))
    session.start()
    times = [session.tick().time_remaining for _ in range(3)]
    state = session.state
    assert times[:2] == [2, 1]
    assert state.time_remaining == 0
    assert state.phase is SessionPhase.RESULT
    assert state.selected_answer is None
    assert state.score == 0


def test_tick_never_goes_below_zero(make_quiz):
    session = GameSession(make_quiz(("A", 2)))
    session.start()
    for _ in range(10):
        session.tick()
    assert session.state.time_remaining == 0
    assert session.phase is SessionPhase.RESULT


def test_submit_answer_is_idempotent(make_quiz):
    session = GameSession(make_quiz(("B", 20)))
    session.start()
    first = session.submit_answer("B")
    second = session.submit_answer("C")
    assert second == first
    assert second.selected_answer == "B"
    assert second.score == 1500


def test_submit_normalises_and_rejects_unknown_letters(make_quiz):
    session = GameSession(make_quiz(("B", 20), ("A", 20)))
    session.start()
    assert session.submit_answer(" b ").selected_answer == "B"
    session.next_question()
    state = session.submit_answer("Z")
    assert state.selected_answer is None
    assert state.score == 1500


def test_next_question_from_last_result_goes_to_game_over(make_quiz):
    session = GameSession(make_quiz(("A", 5)))
    session.start()
    session.submit_answer("A")
    assert session.next_question().phase is SessionPhase.GAME_OVER
    # GameOver is terminal.
    assert session.next_question().phase is SessionPhase.GAME_OVER
    assert session.start().phase is SessionPhase.GAME_OVER


def test_out_of_phase_events_are_ignored(make_quiz):
    session = GameSession(make_quiz(("A", 5), ("B", 5)))
    lobby = session.state
    assert session.tick() == lobby
    assert session.submit_answer("A") == lobby
    assert session.next_question() == lobby

    question = session.start()
    assert session.start() == question
    assert session.next_question() == question

    result = session.submit_answer("A")
    assert session.tick() == result
    assert session.start() == result


def test_empty_quiz_stays_in_lobby(make_quiz):
    session = GameSession(make_quiz())
    assert not session.state.can_start
    state = session.start()
    assert state.phase is SessionPhase.LOBBY
    assert state.question_count == 0


def test_score_is_monotonic(make_quiz):
    session = GameSession(make_quiz(("A", 10), ("B", 10), ("C", 10)))
    scores = [session.state.score]
    session.start()
    for answer in ("A", "D", None):
        session.tick()
        scores.append(session.submit_answer(answer).score)
        scores.append(session.next_question().score)
    assert scores == sorted(scores)
    assert all(score >= 0 for score in scores)


def test_listeners_are_notified_on_change_only(make_quiz):
    session = GameSession(make_quiz(("A", 5)))
    seen = []
    unsubscribe = session.subscribe(seen.append)

    session.tick()  # ignored in lobby
    assert seen == []

    session.start()
    session.tick()
    assert [state.phase for state in seen] == [SessionPhase.QUESTION, SessionPhase.QUESTION]
    assert seen[-1].time_remaining == 4

    unsubscribe()
    session.submit_answer("A")
    assert len(seen) == 2


def test_dispatch_rejects_unknown_events(make_quiz):
    session = GameSession(make_quiz(("A", 5)))
    with pytest.raises(TypeError):
        session.dispatch("start")
