"""
fault_tree.py
-------------
Drzewo błędów jako "arena" elementów adresowanych identyfikatorem.

Element o identyfikatorze ``i`` leży zawsze na pozycji ``i`` listy elementów,
a bramki odwołują się do dzieci wyłącznie przez identyfikatory. Dzięki temu
drzewo jest jedynym właścicielem elementów i nie ma cykli referencji
między bramką a jej wejściami.
"""

from __future__ import annotations

from typing import Iterator

import numpy as np

from .elements import BasicEvent, Element, Gate, Status
from .errors import (
    ContractViolation,
    IdOrderError,
    NotBasicEvent,
    UnknownElement,
    UnknownEventKind,
)
from .schedule import EventKind, EventRecord


class FaultTree:
    """
    Drzewo błędów: elementy indeksowane identyfikatorem + identyfikator korzenia.

    Parametry
    ----------
    root : int, opcjonalnie
        Identyfikator korzenia (zdarzenia szczytowego). Można ustawić później
        przez atrybut ``root``.

    Przykład
    --------
    >>> ids = IdGenerator()
    >>> ft = FaultTree()
    >>> c1 = BasicEvent(ids.next_id(), exponential(0.01), exponential(0.01, role="repair"))
    >>> c2 = BasicEvent(ids.next_id(), exponential(0.01), exponential(0.01, role="repair"))
    >>> g = GateAnd(ids.next_id(), [c1.id, c2.id])
    >>> for e in (c1, c2, g):
    ...     ft.add_element(e)
    >>> ft.root = g.id
    >>> ft.query_failed(ft.root)
    False
    """

    def __init__(self, root: int | None = None) -> None:
        self._elements: list[Element] = []
        self.root = root

    # ------------------------------------------------------------------
    # Budowa
    # ------------------------------------------------------------------

    def add_element(self, element: Element) -> None:
        """Dodaje element na pozycji równej jego identyfikatorowi."""
        expected = len(self._elements)
        if element.id != expected:
            raise IdOrderError(
                f"Element '{element.name}' ma id={element.id}, "
                f"a następny wolny identyfikator to {expected}. "
                f"Dodawaj elementy w kolejności wydania identyfikatorów."
            )
        self._elements.append(element)

    def element(self, element_id: int) -> Element:
        if not 0 <= element_id < len(self._elements):
            raise UnknownElement(
                f"Brak elementu o id={element_id} "
                f"(drzewo zawiera {len(self._elements)} elementów)."
            )
        return self._elements[element_id]

    def id_of(self, name: str) -> int:
        """Identyfikator elementu o podanej nazwie."""
        for element in self._elements:
            if element.name == name:
                return element.id
        raise UnknownElement(f"Brak elementu o nazwie '{name}'.")

    def _basic_event(self, element_id: int) -> BasicEvent:
        element = self.element(element_id)
        if not isinstance(element, BasicEvent):
            raise NotBasicEvent(
                f"Element '{element.name}' (id={element_id}) nie jest zdarzeniem "
                f"podstawowym — bramek nie można próbkować."
            )
        return element

    def validate(self) -> None:
        """
        Sprawdza spójność drzewa przed symulacją.

        Rzuca
        ------
        ContractViolation
            Gdy nie ustawiono korzenia.
        UnknownElement
            Gdy korzeń lub wejście którejś bramki wskazuje nieistniejący element.
        ContractViolation
            Gdy wejście bramki nie ma mniejszego identyfikatora niż bramka
            (np. cykl w strukturze bramek).
        """
        if self.root is None:
            raise ContractViolation("Nie ustawiono korzenia drzewa (root).")
        self.element(self.root)
        for element in self._elements:
            if isinstance(element, Gate):
                for child in element.children:
                    self.element(child)
                    if child >= element.id:
                        raise ContractViolation(
                            f"Bramka '{element.name}' (id={element.id}) ma wejście "
                            f"id={child}, które nie poprzedza bramki. Wejścia muszą "
                            f"zostać dodane do drzewa przed bramką (brak cykli)."
                        )

    # ------------------------------------------------------------------
    # Zapytania
    # ------------------------------------------------------------------

    def query_failed(self, element_id: int) -> bool:
        return self.element(element_id).query_failed(self)

    def query_root_failed(self) -> bool:
        if self.root is None:
            raise ContractViolation("Nie ustawiono korzenia drzewa (root).")
        return self.query_failed(self.root)

    def enumerate_basic_events(self) -> list[int]:
        """Identyfikatory zdarzeń podstawowych w kolejności rosnącej."""
        return [e.id for e in self._elements if e.is_basic]

    def statuses(self) -> dict[int, Status]:
        """Migawka statusów wszystkich zdarzeń podstawowych."""
        return {e.id: e.status for e in self._elements if isinstance(e, BasicEvent)}

    # ------------------------------------------------------------------
    # Próbkowanie
    # ------------------------------------------------------------------

    def sample_failure(self, element_id: int, rng: np.random.Generator) -> float:
        return self._basic_event(element_id).sample_failure_interval(rng)

    def sample_repair(self, element_id: int, rng: np.random.Generator) -> float:
        return self._basic_event(element_id).sample_repair_interval(rng)

    # ------------------------------------------------------------------
    # Mutacja stanu
    # ------------------------------------------------------------------

    def apply_event(self, event: EventRecord) -> None:
        """FAILURE → DEAD, REPAIR → ALIVE. Inny typ zdarzenia → UnknownEventKind."""
        if event.kind is EventKind.FAILURE:
            self.element(event.element).set_status(Status.DEAD)
        elif event.kind is EventKind.REPAIR:
            self.element(event.element).set_status(Status.ALIVE)
        else:
            raise UnknownEventKind(f"Nieznany typ zdarzenia: {event.kind!r}")

    def reset_basic_events(self) -> None:
        for element in self._elements:
            if element.is_basic:
                element.set_status(Status.ALIVE)

    # ------------------------------------------------------------------
    # Protokół kolekcji
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(self._elements)

    def __contains__(self, element_id: object) -> bool:
        return isinstance(element_id, int) and 0 <= element_id < len(self._elements)

    def __repr__(self) -> str:
        n_basic = len(self.enumerate_basic_events())
        return (
            f"FaultTree(elements={len(self._elements)}, basic_events={n_basic}, "
            f"root={self.root})"
        )
