"""
schedule.py
-----------
Harmonogram zdarzeń symulacji dyskretnej: rekordy (czas, element, typ)
pobierane rosnąco po czasie.

Wstawianie: nowy rekord trafia bezpośrednio przed pierwszy istniejący rekord,
którego czas NIE jest ściśle mniejszy od czasu nowego rekordu. Przy równych
czasach nowszy rekord jest więc zawsze przed starszymi.
"""

from __future__ import annotations

import bisect
import enum
from dataclasses import dataclass
from typing import Iterator

from .errors import EmptyQueue, InvalidParameters


class EventKind(enum.Enum):
    FAILURE = 0
    REPAIR = 1


@dataclass(frozen=True)
class EventRecord:
    """Zaplanowane zdarzenie: awaria lub naprawa elementu w chwili ``time``."""

    time: float
    element: int
    kind: EventKind

    def __post_init__(self) -> None:
        if not self.time >= 0.0:  # łapie też NaN
            raise InvalidParameters(f"Czas zdarzenia musi być ≥ 0, otrzymano {self.time}")


class EventSchedule:
    """
    Kolejka zdarzeń uporządkowana po czasie.

    Rekordy są przechowywane malejąco po czasie, więc najwcześniejszy leży
    na końcu listy i ``pop_earliest`` nie przesuwa pozostałych elementów.
    """

    def __init__(self) -> None:
        self._events: list[EventRecord] = []

    def insert(self, event: EventRecord) -> None:
        # za rekordami o czasie ≥ nowemu (równe czasy: nowszy wychodzi pierwszy)
        index = bisect.bisect_right(self._events, -event.time, key=_neg_time)
        self._events.insert(index, event)

    def pop_earliest(self) -> EventRecord:
        if not self._events:
            raise EmptyQueue("Harmonogram zdarzeń jest pusty.")
        return self._events.pop()

    def peek(self) -> EventRecord:
        if not self._events:
            raise EmptyQueue("Harmonogram zdarzeń jest pusty.")
        return self._events[-1]

    def clear(self) -> None:
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)

    def __bool__(self) -> bool:
        return bool(self._events)

    def __iter__(self) -> Iterator[EventRecord]:
        return iter(self._events[::-1])

    def __repr__(self) -> str:
        return f"EventSchedule(size={len(self._events)})"


def _neg_time(event: EventRecord) -> float:
    return -event.time
