import logging
from pathlib import Path

import dearpygui.dearpygui as dpg

from parole.app.logic.lessons import all_lessons
from parole.app.logic.loader import DatasetShapeViolation, load_words
from parole.app.logic.navigation import (
    Catalog,
    FlashcardView,
    NavigationController,
    WordListView,
)
from parole.app.logic.session import Direction
from parole.app.logic.state import AppState
from parole.app.logic.words import WordStore

logger = logging.getLogger(__name__)

SOURCE_LANGUAGE = "Italian"
TARGET_LANGUAGE = "English"

WORDS_PATH_TAG = "words_path"
STATUS_TAG = "status"

CATALOG_GROUP = "catalog_group"
WORDLIST_GROUP = "wordlist_group"
FLASHCARDS_GROUP = "flashcards_group"
VIEW_GROUPS = (CATALOG_GROUP, WORDLIST_GROUP, FLASHCARDS_GROUP)


def _set_status(text, ok=True):
    dpg.set_value(STATUS_TAG, text)
    dpg.configure_item(
        STATUS_TAG, color=(0, 200, 0, 255) if ok else (220, 0, 0, 255)
    )


def install_store(store: WordStore, path: str | Path | None = None):
    """
    Replace the loaded dataset and start over from the lesson catalog.
    """
    AppState.store = store
    AppState.words_path = Path(path) if path is not None else None
    AppState.controller = NavigationController(store)
    AppState.controller.subscribe(_render)
    _render(AppState.controller)


def _words_selected(_, app_data):
    path = app_data["file_path_name"]

    try:
        store = load_words(path)
    except (OSError, DatasetShapeViolation) as e:
        logger.warning("Rejected words file %s: %s", path, e)
        _set_status(f"Invalid words file: {e}", ok=False)
        return

    install_store(store, path)
    dpg.set_value(WORDS_PATH_TAG, path)
    _set_status(f"Words loaded successfully ({len(store)} words)", ok=True)


def _controller() -> NavigationController | None:
    if AppState.controller is None:
        _set_status("Words not loaded", ok=False)
    return AppState.controller


def _intent(name, *args):
    """Button callback that forwards to a controller intent."""

    def callback():
        controller = _controller()
        if controller is not None:
            getattr(controller, name)(*args)

    return callback


def _lesson_selected(_sender, _app_data, lesson):
    controller = _controller()
    if controller is not None:
        controller.select_lesson(lesson)


# ---------------------------------------------------------------------#
# Rendering
# ---------------------------------------------------------------------#


def _show_only(group):
    for tag in VIEW_GROUPS:
        if tag == group:
            dpg.show_item(tag)
        else:
            dpg.hide_item(tag)


def _render(controller: NavigationController):
    state = controller.state
    if isinstance(state, Catalog):
        _show_only(CATALOG_GROUP)
    elif isinstance(state, WordListView):
        _render_word_list(controller)
        _show_only(WORDLIST_GROUP)
    elif isinstance(state, FlashcardView):
        _render_flashcards(controller)
        _show_only(FLASHCARDS_GROUP)


def _render_word_list(controller: NavigationController):
    lesson = controller.lesson
    words = controller.lesson_words()

    dpg.set_value("wordlist_title", lesson.title)
    dpg.set_value(
        "wordlist_range",
        f"Words {lesson.display_range} ({len(words)} words)",
    )
    dpg.configure_item(
        "previous_lesson_button", enabled=controller.has_previous_lesson
    )
    dpg.configure_item(
        "next_lesson_button", enabled=controller.has_next_lesson
    )

    dpg.delete_item("word_table", children_only=True, slot=1)
    for word in words:
        with dpg.table_row(parent="word_table"):
            dpg.add_text(str(word.rank))
            dpg.add_text(word.source)
            dpg.add_text(word.target)


def _render_flashcards(controller: NavigationController):
    lesson = controller.lesson
    session = controller.session

    dpg.set_value("flashcards_title", f"{lesson.title} - Flashcards")
    dpg.set_value("card_counter", f"Card {session.position} of {len(session)}")
    dpg.set_item_label("card_button", session.visible_text() or "-")
    dpg.set_value(
        "card_hint",
        "Click to flip back"
        if session.flipped
        else "Click to reveal translation",
    )
    dpg.configure_item("previous_card_button", enabled=session.has_previous)
    dpg.configure_item("next_card_button", enabled=session.has_next)
    dpg.configure_item(
        "source_first_button",
        enabled=session.direction is not Direction.SOURCE_TO_TARGET,
    )
    dpg.configure_item(
        "target_first_button",
        enabled=session.direction is not Direction.TARGET_TO_SOURCE,
    )


# ---------------------------------------------------------------------#
# Layout
# ---------------------------------------------------------------------#


def _build_catalog():
    with dpg.group(tag=CATALOG_GROUP):
        dpg.add_text("Learn the 1000 most common Italian words")
        dpg.add_spacer(height=10)
        for lesson in all_lessons():
            dpg.add_button(
                label=f"{lesson.title}  (words {lesson.display_range})",
                width=400,
                callback=_lesson_selected,
                user_data=lesson,
            )


def _build_word_list():
    with dpg.group(tag=WORDLIST_GROUP, show=False):
        with dpg.group(horizontal=True):
            dpg.add_button(label="<- Home", callback=_intent("back"))
            dpg.add_text("", tag="wordlist_title")

        with dpg.group(horizontal=True):
            dpg.add_text("", tag="wordlist_range")
            dpg.add_spacer(width=20)
            dpg.add_button(
                label="Start Flashcards ->",
                callback=_intent("start_flashcards"),
            )

        dpg.add_spacer(height=5)

        with dpg.table(
            tag="word_table",
            header_row=True,
            borders_innerH=True,
            borders_outerH=True,
            row_background=True,
            height=520,
            scrollY=True,
        ):
            dpg.add_table_column(label="#", width_fixed=True)
            dpg.add_table_column(label=SOURCE_LANGUAGE)
            dpg.add_table_column(label=TARGET_LANGUAGE)

        dpg.add_spacer(height=5)

        with dpg.group(horizontal=True):
            dpg.add_button(
                label="<- Previous Lesson",
                tag="previous_lesson_button",
                callback=_intent("previous_lesson"),
            )
            dpg.add_button(
                label="Next Lesson ->",
                tag="next_lesson_button",
                callback=_intent("next_lesson"),
            )


def _build_flashcards():
    with dpg.group(tag=FLASHCARDS_GROUP, show=False):
        with dpg.group(horizontal=True):
            dpg.add_button(label="Home", callback=_intent("home"))
            dpg.add_text("", tag="flashcards_title")
            dpg.add_button(label="<- Word List", callback=_intent("back"))

        dpg.add_spacer(height=10)

        with dpg.group(horizontal=True):
            dpg.add_button(
                label=f"{SOURCE_LANGUAGE} -> {TARGET_LANGUAGE}",
                tag="source_first_button",
                callback=_intent(
                    "set_direction", Direction.SOURCE_TO_TARGET
                ),
            )
            dpg.add_button(
                label=f"{TARGET_LANGUAGE} -> {SOURCE_LANGUAGE}",
                tag="target_first_button",
                callback=_intent(
                    "set_direction", Direction.TARGET_TO_SOURCE
                ),
            )
            dpg.add_spacer(width=20)
            dpg.add_button(label="Reshuffle", callback=_intent("reshuffle"))

        dpg.add_spacer(height=10)
        dpg.add_text("", tag="card_counter")

        dpg.add_button(
            label="",
            tag="card_button",
            width=600,
            height=300,
            callback=_intent("flip"),
        )
        dpg.add_text("", tag="card_hint")

        dpg.add_spacer(height=10)

        with dpg.group(horizontal=True):
            dpg.add_button(
                label="<- Previous",
                tag="previous_card_button",
                width=150,
                callback=_intent("retreat"),
            )
            dpg.add_button(
                label="Next ->",
                tag="next_card_button",
                width=150,
                callback=_intent("advance"),
            )


def build_ui():
    # ---- File dialogs ---- #
    with dpg.file_dialog(
        directory_selector=False,
        show=False,
        callback=_words_selected,
        tag="words_dialog",
        width=700,
        height=400,
    ):
        dpg.add_file_extension(".json")

    with dpg.window(label="Parole", width=1024, height=720):
        dpg.add_text("", tag=STATUS_TAG)
        dpg.add_spacer(height=5)

        with dpg.group(horizontal=True):
            dpg.add_text("Words file:")
            dpg.add_text("No file selected", tag=WORDS_PATH_TAG)
            dpg.add_spacer(width=20)
            dpg.add_button(
                label="Browse",
                callback=lambda: dpg.show_item("words_dialog"),
            )

        dpg.add_separator()
        dpg.add_spacer(height=5)

        _build_catalog()
        _build_word_list()
        _build_flashcards()

    if AppState.store is not None:
        install_store(AppState.store, AppState.words_path)
        dpg.set_value(WORDS_PATH_TAG, str(AppState.words_path))
