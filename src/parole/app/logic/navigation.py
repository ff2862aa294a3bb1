import logging
import random
from collections.abc import Callable
from dataclasses import dataclass

from parole.app.logic import lessons
from parole.app.logic.lessons import LessonDescriptor
from parole.app.logic.session import Direction, StudySession
from parole.app.logic.words import WordRecord, WordStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Catalog:
    pass


@dataclass(frozen=True)
class WordListView:
    lesson: LessonDescriptor


@dataclass(frozen=True)
class FlashcardView:
    lesson: LessonDescriptor


ViewState = Catalog | WordListView | FlashcardView

Listener = Callable[["NavigationController"], None]


class NavigationController:
    """
    View state machine: catalog -> word list -> flashcards.

    Intents that are not defined for the current view are no-ops. Listeners
    are called after every intent that changed the state, never on no-ops.
    """

    def __init__(self, store: WordStore, rng: random.Random | None = None):
        self.store = store
        self._rng = rng
        self.state: ViewState = Catalog()
        self.session: StudySession | None = None
        self._listeners: list[Listener] = []

    # ---- Read model ---- #

    @property
    def lesson(self) -> LessonDescriptor | None:
        if isinstance(self.state, (WordListView, FlashcardView)):
            return self.state.lesson
        return None

    @property
    def has_previous_lesson(self) -> bool:
        lesson = self.lesson
        return (
            lesson is not None
            and lessons.previous_lesson(lesson) is not None
        )

    @property
    def has_next_lesson(self) -> bool:
        lesson = self.lesson
        return lesson is not None and lessons.next_lesson(lesson) is not None

    def lesson_words(self) -> list[WordRecord]:
        lesson = self.lesson
        if lesson is None:
            return []
        return self.store.slice(lesson.start_index, lesson.end_index)

    # ---- Observers ---- #

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self):
        for listener in list(self._listeners):
            listener(self)

    def _set_state(self, state: ViewState):
        logger.debug("View: %s -> %s", self.state, state)
        self.state = state
        self._notify()

    # ---- Navigation intents ---- #

    def select_lesson(self, lesson: LessonDescriptor) -> bool:
        if not isinstance(self.state, Catalog):
            return False
        if not 1 <= lesson.id <= lessons.LESSON_COUNT:
            logger.debug("Ignoring unknown lesson %d", lesson.id)
            return False
        self._set_state(WordListView(lesson))
        return True

    def back(self) -> bool:
        if isinstance(self.state, WordListView):
            self._set_state(Catalog())
            return True
        if isinstance(self.state, FlashcardView):
            self.session = None
            self._set_state(WordListView(self.state.lesson))
            return True
        return False

    def home(self) -> bool:
        if not isinstance(self.state, FlashcardView):
            return False
        self.session = None
        self._set_state(Catalog())
        return True

    def start_flashcards(self) -> bool:
        if not isinstance(self.state, WordListView):
            return False
        lesson = self.state.lesson
        self.session = StudySession(
            self.store.slice(lesson.start_index, lesson.end_index),
            rng=self._rng,
        )
        self._set_state(FlashcardView(lesson))
        return True

    def next_lesson(self) -> bool:
        if not isinstance(self.state, WordListView):
            return False
        lesson = lessons.next_lesson(self.state.lesson)
        if lesson is None:
            return False
        self._set_state(WordListView(lesson))
        return True

    def previous_lesson(self) -> bool:
        if not isinstance(self.state, WordListView):
            return False
        lesson = lessons.previous_lesson(self.state.lesson)
        if lesson is None:
            return False
        self._set_state(WordListView(lesson))
        return True

    # ---- Flashcard intents ---- #

    def _on_session(self, action: Callable[[StudySession], bool]) -> bool:
        if not isinstance(self.state, FlashcardView) or self.session is None:
            return False
        changed = action(self.session)
        if changed:
            self._notify()
        return changed

    def flip(self) -> bool:
        return self._on_session(lambda s: s.flip())

    def advance(self) -> bool:
        return self._on_session(lambda s: s.advance())

    def retreat(self) -> bool:
        return self._on_session(lambda s: s.retreat())

    def set_direction(self, direction: Direction) -> bool:
        return self._on_session(lambda s: s.set_direction(direction))

    def reshuffle(self) -> bool:
        return self._on_session(lambda s: s.reshuffle())
