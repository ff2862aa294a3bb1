import logging
import random
from collections.abc import Sequence
from enum import Enum

from parole.app.logic.shuffle import shuffle
from parole.app.logic.words import WordRecord

logger = logging.getLogger(__name__)


class Direction(Enum):
    SOURCE_TO_TARGET = "source-to-target"
    TARGET_TO_SOURCE = "target-to-source"


class StudySession:
    """
    Flashcard drill over the words of one lesson.

    Holds a shuffled order, the cursor into it, whether the current card is
    flipped and which language is shown first. Moving past either end is a
    no-op. Every operation returns True when it changed the session.
    """

    def __init__(
        self,
        words: Sequence[WordRecord],
        rng: random.Random | None = None,
    ):
        self._words = tuple(words)
        self._rng = rng
        self.order: list[WordRecord] = shuffle(self._words, self._rng)
        self.cursor = 0
        self.flipped = False
        self.direction = Direction.SOURCE_TO_TARGET

    def __len__(self) -> int:
        return len(self.order)

    @property
    def position(self) -> int:
        return self.cursor + 1

    @property
    def has_previous(self) -> bool:
        return self.cursor > 0

    @property
    def has_next(self) -> bool:
        return self.cursor < len(self.order) - 1

    @property
    def current_word(self) -> WordRecord | None:
        if not self.order:
            return None
        return self.order[self.cursor]

    def flip(self) -> bool:
        self.flipped = not self.flipped
        return True

    def advance(self) -> bool:
        if not self.has_next:
            return False
        self.cursor += 1
        self.flipped = False
        return True

    def retreat(self) -> bool:
        if not self.has_previous:
            return False
        self.cursor -= 1
        self.flipped = False
        return True

    def set_direction(self, direction: Direction) -> bool:
        self.direction = direction
        self.flipped = False
        return True

    def reshuffle(self) -> bool:
        self.order = shuffle(self._words, self._rng)
        self.cursor = 0
        self.flipped = False
        logger.debug("Reshuffled %d cards", len(self.order))
        return True

    def current_pair(self) -> tuple[str, str] | None:
        word = self.current_word
        if word is None:
            return None
        if self.direction is Direction.SOURCE_TO_TARGET:
            return word.source, word.target
        return word.target, word.source

    def visible_text(self) -> str:
        pair = self.current_pair()
        if pair is None:
            return ""
        front, back = pair
        return back if self.flipped else front
