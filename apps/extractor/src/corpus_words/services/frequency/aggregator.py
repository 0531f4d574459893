from __future__ import annotations

from collections.abc import Iterator
from threading import Lock


class FrequencyTable:
    """Word -> count table safe for concurrent ``increment`` calls.

    Keys are spread over ``shards`` independent dicts, each guarded by its own
    lock, so writers only contend when their words hash to the same shard.
    Counts only ever go up.
    """

    def __init__(self, *, shards: int = 64) -> None:
        if shards <= 0:
            raise ValueError("shards must be > 0")
        self._shards: list[dict[str, int]] = [{} for _ in range(shards)]
        self._locks = [Lock() for _ in range(shards)]

    def _shard_index(self, word: str) -> int:
        return hash(word) % len(self._shards)

    def increment(self, word: str) -> int:
        index = self._shard_index(word)
        shard = self._shards[index]
        with self._locks[index]:
            count = shard.get(word, 0) + 1
            shard[word] = count
        return count

    def get(self, word: str) -> int:
        index = self._shard_index(word)
        with self._locks[index]:
            return self._shards[index].get(word, 0)

    def __len__(self) -> int:
        return sum(len(shard) for shard in self._shards)

    def total(self) -> int:
        return sum(sum(shard.values()) for shard in self._shards)

    def items(self) -> Iterator[tuple[str, int]]:
        """Yield ``(word, count)`` pairs in no particular order.

        Meant to be read once all writers have finished.
        """
        for index, shard in enumerate(self._shards):
            with self._locks[index]:
                entries = list(shard.items())
            yield from entries

    def snapshot(self) -> dict[str, int]:
        return dict(self.items())
