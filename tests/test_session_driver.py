from pulse_quiz.core.services.game_session import SessionPhase
from pulse_quiz.core.services.session_driver import SessionDriver


class FakeCountdown:
    """Countdown double that records calls and fires ticks on demand."""

    def __init__(self):
        self.on_tick = None
        self.starts = 0
        self.stops = 0

    def start(self, on_tick):
        self.on_tick = on_tick
        self.starts += 1

    def stop(self):
        self.on_tick = None
        self.stops += 1

    def is_running(self):
        return self.on_tick is not None

    def fire(self, times=1):
        for _ in range(times):
            if self.on_tick is not None:
                self.on_tick()


def test_countdown_runs_only_during_questions(make_quiz):
    countdown = FakeCountdown()
    driver = SessionDriver(make_quiz(("A", 10), ("B", 10)), countdown)
    assert not countdown.is_running()

    driver.start()
    assert countdown.is_running()
    assert countdown.starts == 1

    countdown.fire(3)
    assert driver.state.time_remaining == 7
    assert countdown.starts == 1

    driver.submit_answer("A")
    assert not countdown.is_running()
    assert countdown.stops == 1

    driver.next_question()
    assert countdown.is_running()
    assert countdown.starts == 2
    assert driver.state.time_remaining == 10


def test_countdown_stopped_before_listeners_see_result(make_quiz):
    countdown = FakeCountdown()
    driver = SessionDriver(make_quiz(("A", 10)), countdown)
    observed = []
    driver.subscribe(lambda state: observed.append((state.phase, countdown.is_running())))

    driver.start()
    driver.submit_answer("B")

    assert observed == [(SessionPhase.QUESTION, True), (SessionPhase.RESULT, False)]


def test_timeout_via_countdown_reaches_result(make_quiz):
    countdown = FakeCountdown()
    driver = SessionDriver(make_quiz(("A", 2)), countdown)
    driver.start()
    countdown.fire(5)
    state = driver.state
    assert state.phase is SessionPhase.RESULT
    assert state.selected_answer is None
    assert state.time_remaining == 0
    assert countdown.stops == 1


def test_game_over_keeps_countdown_stopped(make_quiz):
    countdown = FakeCountdown()
    driver = SessionDriver(make_quiz(("A", 5)), countdown)
    driver.start()
    driver.submit_answer("A")
    driver.next_question()
    assert driver.state.phase is SessionPhase.GAME_OVER
    assert not countdown.is_running()
    assert (countdown.starts, countdown.stops) == (1, 1)


def test_close_stops_countdown_once(make_quiz):
    countdown = FakeCountdown()
    driver = SessionDriver(make_quiz(("A", 5)), countdown)
    driver.start()

    driver.close()
    driver.close()

    assert driver.is_closed
    assert countdown.stops == 1
    assert not countdown.is_running()


def test_close_in_lobby_never_touches_countdown(make_quiz):
    countdown = FakeCountdown()
    driver = SessionDriver(make_quiz(("A", 5)), countdown)
    driver.close()
    assert (countdown.starts, countdown.stops) == (0, 0)


def test_intents_after_close_are_ignored(make_quiz):
    countdown = FakeCountdown()
    driver = SessionDriver(make_quiz(("A", 5)), countdown)
    seen = []
    driver.subscribe(seen.append)
    driver.close()

    state = driver.start()
    assert state.phase is SessionPhase.LOBBY
    assert seen == []
    assert countdown.starts == 0


def test_empty_quiz_never_starts_countdown(make_quiz):
    countdown = FakeCountdown()
    driver = SessionDriver(make_quiz(), countdown)
    driver.start()
    assert driver.state.phase is SessionPhase.LOBBY
    assert countdown.starts == 0
