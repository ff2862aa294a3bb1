from pathlib import Path

from parole.app.logic.navigation import NavigationController
from parole.app.logic.words import WordStore


class AppState:
    store: WordStore | None = None
    words_path: Path | None = None
    controller: NavigationController | None = None
