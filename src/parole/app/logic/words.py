from collections.abc import Iterable, Iterator
from dataclasses import dataclass


class OutOfRange(IndexError):
    pass


@dataclass(frozen=True)
class WordRecord:
    rank: int
    source: str
    target: str


class WordStore:
    """
    Read-only, rank-ordered sequence of words.

    Lessons read their words through `slice`, a half-open range
    `[start_index, end_index)` over the backing list.
    """

    def __init__(self, records: Iterable[WordRecord]):
        self._records: tuple[WordRecord, ...] = tuple(records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[WordRecord]:
        return iter(self._records)

    def slice(self, start_index: int, end_index: int) -> list[WordRecord]:
        if not 0 <= start_index <= end_index <= len(self._records):
            raise OutOfRange(
                f"Invalid word range [{start_index}, {end_index}) "
                f"for {len(self._records)} words"
            )
        return list(self._records[start_index:end_index])
