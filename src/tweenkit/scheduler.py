from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Optional


class Scheduler:
    """Drain push-mode sequences, one item each per frame.

    Sequences come from ``produce_sequence`` or :meth:`Program.run`; the
    host calls :meth:`update` from its frame callback. A sequence may cancel
    itself or another one while :meth:`update` is running.
    """

    def __init__(self) -> None:
        self._sequences: List[Iterator[Any]] = []
        self._running: Optional[Iterator[Any]] = None

    def _index(self, sequence: Iterator[Any]) -> int:
        for i, it in enumerate(self._sequences):
            if it is sequence:
                return i
        return -1

    def add(self, sequence: Iterable[Any]) -> Iterator[Any]:
        """Register ``sequence`` to be advanced on each :meth:`update`."""
        it = iter(sequence)
        self._sequences.append(it)
        return it

    def update(self) -> int:
        """Advance every sequence once and return how many are still active."""
        for it in list(self._sequences):
            if self._index(it) < 0:
                continue
            self._running = it
            try:
                next(it)
            except StopIteration:
                i = self._index(it)
                if i >= 0:
                    del self._sequences[i]
                continue
            finally:
                self._running = None
            if self._index(it) < 0:
                # cancelled itself while running
                _close(it)
        return len(self._sequences)

    def cancel(self, sequence: Iterator[Any]) -> bool:
        """Drop ``sequence`` without advancing it further."""
        i = self._index(sequence)
        if i < 0:
            return False
        del self._sequences[i]
        if sequence is not self._running:
            _close(sequence)
        return True

    def active(self) -> bool:
        return bool(self._sequences)

    def __len__(self) -> int:
        return len(self._sequences)


def _close(sequence: Iterator[Any]) -> None:
    close = getattr(sequence, "close", None)
    if close is not None:
        close()


__all__ = ["Scheduler"]
