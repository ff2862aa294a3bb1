from dataclasses import dataclass

LESSON_COUNT = 10
LESSON_SIZE = 100


@dataclass(frozen=True)
class LessonDescriptor:
    id: int
    title: str
    display_range: str
    start_index: int
    end_index: int


def ordinal_suffix(num: int) -> str:
    # Only exact matches, 11 -> "th" and 21 -> "th" as well.
    if num == 1:
        return "st"
    if num == 2:
        return "nd"
    if num == 3:
        return "rd"
    return "th"


def lesson_title(lesson_id: int) -> str:
    if lesson_id == 1:
        return "Most Common 100 Words"
    return f"{lesson_id}{ordinal_suffix(lesson_id)} Most Common"


def lesson_for(lesson_id: int) -> LessonDescriptor:
    """
    Build the descriptor of a lesson from its id alone.

    Indices are derived arithmetically so that any two descriptors built
    here never overlap or leave gaps.
    """
    if lesson_id < 1:
        raise ValueError(f"Lesson id must be positive, got {lesson_id}")

    start_index = (lesson_id - 1) * LESSON_SIZE
    end_index = lesson_id * LESSON_SIZE
    return LessonDescriptor(
        id=lesson_id,
        title=lesson_title(lesson_id),
        display_range=f"{start_index + 1}-{end_index}",
        start_index=start_index,
        end_index=end_index,
    )


def initial_lesson() -> LessonDescriptor:
    return lesson_for(1)


def all_lessons() -> list[LessonDescriptor]:
    return [lesson_for(i) for i in range(1, LESSON_COUNT + 1)]


def next_lesson(current: LessonDescriptor) -> LessonDescriptor | None:
    if current.id >= LESSON_COUNT:
        return None
    return lesson_for(current.id + 1)


def previous_lesson(current: LessonDescriptor) -> LessonDescriptor | None:
    if current.id <= 1:
        return None
    return lesson_for(current.id - 1)
