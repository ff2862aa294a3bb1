import json
import logging
from pathlib import Path

from parole.app.logic.lessons import LESSON_COUNT, LESSON_SIZE
from parole.app.logic.words import WordRecord, WordStore

logger = logging.getLogger(__name__)

EXPECTED_WORD_COUNT = LESSON_COUNT * LESSON_SIZE


class DatasetShapeViolation(ValueError):
    pass


def parse_words(
    json_data, expected_count: int = EXPECTED_WORD_COUNT
) -> list[WordRecord]:
    """
    Validate raw dataset entries and turn them into word records.

    Entries look like {"rank": 1, "italian": "di", "english": "of"}. Ranks
    must run 1..N in list order with no gaps or duplicates.
    """
    if not isinstance(json_data, list):
        raise DatasetShapeViolation("Words dataset must be a JSON list")

    if len(json_data) != expected_count:
        raise DatasetShapeViolation(
            f"Expected {expected_count} words, found {len(json_data)}"
        )

    records: list[WordRecord] = []
    for position, entry in enumerate(json_data, start=1):
        try:
            rank = entry["rank"]
            source = entry["italian"]
            target = entry["english"]
        except (KeyError, TypeError) as e:
            raise DatasetShapeViolation(
                f"Malformed entry at position {position}: {entry!r}"
            ) from e

        if not isinstance(rank, int) or isinstance(rank, bool):
            raise DatasetShapeViolation(
                f"Rank must be an integer at position {position}: {rank!r}"
            )
        if rank != position:
            raise DatasetShapeViolation(
                f"Ranks must be dense and increasing: expected {position}, "
                f"found {rank}"
            )
        if not isinstance(source, str) or not isinstance(target, str):
            raise DatasetShapeViolation(
                f"Word texts must be strings at rank {rank}"
            )

        records.append(WordRecord(rank=rank, source=source, target=target))
    return records


def load_words(
    words_filepath: str | Path, expected_count: int = EXPECTED_WORD_COUNT
) -> WordStore:
    json_file = Path(words_filepath)
    if not json_file.is_file():
        raise FileNotFoundError(f"Words file not found at: {words_filepath}")
    with json_file.open("r", encoding="utf-8") as f:
        try:
            json_data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DatasetShapeViolation(
                f"Words file is not valid UTF-8 JSON: {e}"
            ) from e

    store = WordStore(parse_words(json_data, expected_count))
    logger.info("Loaded %d words from %s", len(store), json_file)
    return store
