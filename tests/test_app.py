import pytest

from parole.app import app
from parole.app.logic.loader import load_words
from parole.app.logic.state import AppState


@pytest.fixture(autouse=True)
def clean_state():
    yield
    AppState.store = None
    AppState.words_path = None
    AppState.controller = None


def test_bundled_words_load():
    store = load_words(app.DEFAULT_WORDS_FILEPATH)
    assert len(store) == 1000
    assert store.slice(0, 1)[0].source == "di"


def test_default_words_option():
    args = app.build_argparser().parse_args([])
    assert args.words == str(app.DEFAULT_WORDS_FILEPATH)


def test_run_aborts_on_directory(tmp_path):
    assert app.run(["--words", str(tmp_path)]) == 1
    assert AppState.store is None


def test_run_aborts_on_non_utf8_file(tmp_path):
    path = tmp_path / "words.json"
    path.write_bytes(b"[\xff\xfe]")
    assert app.run(["--words", str(path)]) == 1


def test_run_aborts_on_wrong_count(tmp_path):
    path = tmp_path / "words.json"
    path.write_text("[]", encoding="utf-8")
    assert app.run(["--words", str(path)]) == 1
