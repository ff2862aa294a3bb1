import pytest

from parole.app.logic.lessons import initial_lesson, lesson_for
from parole.app.logic.navigation import (
    Catalog,
    FlashcardView,
    NavigationController,
    WordListView,
)
from parole.app.logic.session import Direction


@pytest.fixture
def controller(store, rng):
    return NavigationController(store, rng=rng)


@pytest.fixture
def events(controller):
    seen = []
    controller.subscribe(lambda c: seen.append(c.state))
    return seen


def test_starts_at_catalog(controller):
    assert controller.state == Catalog()
    assert controller.lesson is None
    assert controller.session is None
    assert controller.lesson_words() == []


def test_end_to_end_walkthrough(controller):
    controller.select_lesson(lesson_for(3))
    assert isinstance(controller.state, WordListView)
    assert controller.lesson.id == 3
    assert controller.lesson.display_range == "201-300"

    controller.start_flashcards()
    assert controller.state == FlashcardView(lesson_for(3))
    assert len(controller.session) == 100
    ranks = sorted(w.rank for w in controller.session.order)
    assert ranks == list(range(201, 301))

    assert controller.next_lesson() is False
    assert controller.state == FlashcardView(lesson_for(3))

    controller.back()
    assert controller.state == WordListView(lesson_for(3))
    assert controller.session is None

    assert controller.next_lesson()
    assert controller.state == WordListView(lesson_for(4))
    assert controller.lesson.display_range == "301-400"


def test_word_list_slice(controller):
    controller.select_lesson(lesson_for(2))
    words = controller.lesson_words()
    assert [w.rank for w in words] == list(range(101, 201))


def test_back_from_word_list_clears_lesson(controller):
    controller.select_lesson(initial_lesson())
    assert controller.back()
    assert controller.state == Catalog()
    assert controller.lesson is None


def test_home_from_flashcards(controller):
    controller.select_lesson(lesson_for(5))
    controller.start_flashcards()
    assert controller.home()
    assert controller.state == Catalog()
    assert controller.session is None


def test_lesson_stepping_stops_at_ends(controller):
    controller.select_lesson(initial_lesson())
    assert controller.has_previous_lesson is False
    assert controller.previous_lesson() is False
    assert controller.lesson.id == 1

    while controller.next_lesson():
        pass
    assert controller.lesson.id == 10
    assert controller.has_next_lesson is False

    assert controller.previous_lesson()
    assert controller.lesson.id == 9
    assert controller.has_next_lesson is True


@pytest.mark.parametrize(
    "intent",
    ["back", "home", "start_flashcards", "next_lesson", "previous_lesson"],
)
def test_undefined_intents_at_catalog_are_noops(controller, events, intent):
    assert getattr(controller, intent)() is False
    assert controller.state == Catalog()
    assert events == []


def test_select_lesson_outside_catalog_is_noop(controller):
    controller.select_lesson(lesson_for(2))
    assert controller.select_lesson(lesson_for(7)) is False
    assert controller.lesson.id == 2


def test_home_from_word_list_is_noop(controller):
    controller.select_lesson(lesson_for(2))
    assert controller.home() is False
    assert controller.state == WordListView(lesson_for(2))


def test_flashcard_intents_outside_flashcards_are_noops(controller, events):
    controller.select_lesson(lesson_for(2))
    events.clear()
    assert controller.flip() is False
    assert controller.advance() is False
    assert controller.retreat() is False
    assert controller.reshuffle() is False
    assert controller.set_direction(Direction.TARGET_TO_SOURCE) is False
    assert events == []


def test_flashcard_intents_drive_session(controller):
    controller.select_lesson(lesson_for(1))
    controller.start_flashcards()
    session = controller.session

    assert controller.flip()
    assert session.flipped
    assert controller.advance()
    assert session.cursor == 1
    assert session.flipped is False
    assert controller.retreat()
    assert session.cursor == 0
    assert controller.set_direction(Direction.TARGET_TO_SOURCE)
    assert session.direction is Direction.TARGET_TO_SOURCE
    controller.advance()
    assert controller.reshuffle()
    assert session.cursor == 0


def test_restarting_flashcards_builds_new_session(controller):
    controller.select_lesson(lesson_for(1))
    controller.start_flashcards()
    first = controller.session
    controller.back()
    controller.start_flashcards()
    assert controller.session is not first


def test_listeners_called_on_changes_only(controller, events):
    controller.select_lesson(initial_lesson())
    controller.previous_lesson()
    controller.start_flashcards()
    controller.retreat()
    controller.advance()
    assert events == [
        WordListView(initial_lesson()),
        FlashcardView(initial_lesson()),
        FlashcardView(initial_lesson()),
    ]


def test_unsubscribe(controller):
    seen = []
    unsubscribe = controller.subscribe(seen.append)
    controller.select_lesson(initial_lesson())
    unsubscribe()
    controller.back()
    assert seen == [controller]


@pytest.mark.parametrize("lesson_id", [11, 42])
def test_select_unknown_lesson_is_noop(controller, events, lesson_id):
    assert controller.select_lesson(lesson_for(lesson_id)) is False
    assert controller.state == Catalog()
    assert events == []
