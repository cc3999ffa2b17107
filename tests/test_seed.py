from pulse_quiz.core.seed import DEFAULT_QUIZ_TITLE, build_default_quiz, is_seeded, seed_all


def test_default_quiz_has_fifteen_valid_questions():
    draft = build_default_quiz()
    assert draft.title == DEFAULT_QUIZ_TITLE
    assert draft.topic == "General"
    assert len(draft.questions) == 15
    assert all(q.time_limit == 20 for q in draft.questions)
    assert all(q.correct_option in "ABCD" for q in draft.questions)


def test_seed_all_fills_empty_store(store):
    assert not is_seeded(store)
    quiz_id = seed_all(store)
    assert quiz_id is not None
    assert is_seeded(store)
    quiz = store.get_quiz(quiz_id)
    assert quiz.title == DEFAULT_QUIZ_TITLE
    assert quiz.question_count == 15


def test_seed_all_is_idempotent(store):
    seed_all(store)
    assert seed_all(store) is None
    assert store.count_quizzes() == 1


def test_seed_all_leaves_existing_quizzes_alone(store, make_quiz_draft):
    store.create_quiz(make_quiz_draft(title="Mine"))
    assert seed_all(store) is None
    assert [s.title for s in store.list_quizzes()] == ["Mine"]
