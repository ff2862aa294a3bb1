import pytest

from parole.app.logic.words import OutOfRange, WordRecord, WordStore


def test_slice_returns_first_lesson_in_order(store):
    words = store.slice(0, 100)
    assert len(words) == 100
    assert [w.rank for w in words] == list(range(1, 101))
    assert words[0] == WordRecord(rank=1, source="parola1", target="word1")


def test_slice_is_half_open(store):
    words = store.slice(200, 300)
    assert words[0].rank == 201
    assert words[-1].rank == 300


def test_empty_slice(store):
    assert store.slice(1000, 1000) == []


@pytest.mark.parametrize("start, end", [(-1, 10), (10, 5), (900, 1001)])
def test_slice_out_of_range(store, start, end):
    with pytest.raises(OutOfRange):
        store.slice(start, end)


def test_slice_does_not_expose_backing_list(store):
    words = store.slice(0, 3)
    words.clear()
    assert len(store.slice(0, 3)) == 3


def test_len_and_iteration(store):
    assert len(store) == 1000
    assert next(iter(store)).rank == 1


def test_records_are_immutable():
    record = WordRecord(rank=1, source="di", target="of")
    with pytest.raises(AttributeError):
        record.rank = 2
