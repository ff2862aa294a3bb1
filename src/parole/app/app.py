import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

import dearpygui.dearpygui as dpg

from parole.app.logic.loader import DatasetShapeViolation, load_words
from parole.app.logic.state import AppState
from parole.app.ui.main_window import build_ui

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)

DEFAULT_WORDS_FILEPATH = (
    Path(__file__).resolve().parents[1] / "data" / "words.json"
)


@dataclass
class AppOptions:
    words_filepath: Path = DEFAULT_WORDS_FILEPATH
    width: int = 1024
    height: int = 720


def build_argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        "Study the most common Italian words with word lists and flashcards"
    )
    parser.add_argument(
        "-w",
        "--words",
        help="Words dataset JSON filepath (default: bundled 1000 words)",
        default=str(DEFAULT_WORDS_FILEPATH),
    )
    parser.add_argument("--width", type=int, default=1024)
    parser.add_argument("--height", type=int, default=720)
    return parser


def run(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    args = build_argparser().parse_args(argv)

    opts = AppOptions(
        words_filepath=Path(args.words),
        width=args.width,
        height=args.height,
    )
    logger.info("Using: %s", opts)

    try:
        AppState.store = load_words(opts.words_filepath)
    except (OSError, DatasetShapeViolation) as e:
        logger.error("Cannot start: %s", e)
        return 1
    AppState.words_path = opts.words_filepath

    dpg.create_context()

    build_ui()

    dpg.create_viewport(
        title="Parole - Italian vocabulary",
        width=opts.width,
        height=opts.height,
    )
    dpg.setup_dearpygui()
    dpg.show_viewport()
    dpg.start_dearpygui()
    dpg.destroy_context()
    return 0


if __name__ == "__main__":
    sys.exit(run())
