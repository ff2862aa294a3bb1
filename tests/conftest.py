"""
Shared fixtures: a synthetic 1000-word dataset and a seeded generator.
"""

import json
import random

import pytest

from parole.app.logic.words import WordRecord, WordStore


def make_entries(count=1000):
    return [
        {"rank": i, "italian": f"parola{i}", "english": f"word{i}"}
        for i in range(1, count + 1)
    ]


@pytest.fixture
def entries():
    return make_entries()


@pytest.fixture
def store(entries):
    return WordStore(
        WordRecord(rank=e["rank"], source=e["italian"], target=e["english"])
        for e in entries
    )


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def words_file(tmp_path, entries):
    path = tmp_path / "words.json"
    path.write_text(json.dumps(entries), encoding="utf-8")
    return path
