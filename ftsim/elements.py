"""
elements.py
-----------
Elementy drzewa błędów (Fault Tree):

    BasicEvent  – liść drzewa; binarny status ALIVE/DEAD oraz dwa rozkłady
                  (czas do awarii, czas naprawy).
    GateAnd     – uszkodzona, gdy uszkodzone są WSZYSTKIE wejścia.
    GateOr      – uszkodzona, gdy uszkodzone jest DOWOLNE wejście.
    GateVote    – głosowanie większościowe: uszkodzona, gdy f > ⌊n/2⌋.

Stan bramek jest zawsze wyliczany rekurencyjnie z wejść (nigdy nie jest
przechowywany). Bramki znają dzieci wyłącznie po identyfikatorze i pytają
o ich stan przez ``FaultTree.query_failed`` — bez sprawdzania typu dziecka.
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Iterator

import numpy as np

from .distributions import Distribution, DistributionKind
from .errors import GateStatusError, InvalidParameters, InvalidStatus

if TYPE_CHECKING:
    from .fault_tree import FaultTree


class Status(enum.Enum):
    """Status zdarzenia podstawowego. DYNAMIC zarezerwowany dla bramek rezerwy (spare)."""

    ALIVE = 0
    DEAD = 1
    DYNAMIC = 2


class ElementKind(enum.Enum):
    BASIC = 0
    STATIC = 1


# ---------------------------------------------------------------------------
# Identyfikatory
# ---------------------------------------------------------------------------


class IdGenerator:
    """
    Monotoniczny licznik identyfikatorów od 0.

    Jeden generator na drzewo — identyfikator jest jednocześnie indeksem
    elementu w ``FaultTree``.
    """

    def __init__(self) -> None:
        self._counter = 0

    def next_id(self) -> int:
        self._counter += 1
        return self._counter - 1

    @property
    def issued(self) -> int:
        """Liczba wydanych identyfikatorów."""
        return self._counter


class Children:
    """Uporządkowana lista identyfikatorów wejść bramki."""

    def __init__(self, ids: list[int] | None = None) -> None:
        self._ids: list[int] = list(ids or [])

    def add(self, element: Element) -> None:
        self._ids.append(element.id)

    def add_id(self, element_id: int) -> None:
        self._ids.append(int(element_id))

    def get(self) -> list[int]:
        return list(self._ids)

    def __iter__(self) -> Iterator[int]:
        return iter(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def __repr__(self) -> str:
        return f"Children({self._ids})"


# ---------------------------------------------------------------------------
# Elementy
# ---------------------------------------------------------------------------


class Element:
    """Wspólny interfejs elementów drzewa: id, kind, query_failed, set_status."""

    kind: ElementKind

    def __init__(self, element_id: int, name: str | None = None) -> None:
        self.id = int(element_id)
        self.name = name if name is not None else f"{type(self).__name__}_{self.id}"

    def query_failed(self, tree: FaultTree) -> bool:
        raise NotImplementedError

    def set_status(self, status: Status) -> None:
        raise NotImplementedError

    @property
    def is_basic(self) -> bool:
        return self.kind is ElementKind.BASIC

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id}, name={self.name!r})"


class BasicEvent(Element):
    """
    Zdarzenie podstawowe — automat dwustanowy ALIVE ⇄ DEAD.

    Parametry
    ----------
    element_id : int
        Identyfikator z ``IdGenerator``.
    failure_dist : Distribution
        Rozkład czasu do awarii. NONE → InvalidParameters.
    repair_dist : Distribution
        Rozkład czasu naprawy (NONE = element nigdy nie jest naprawiany).
    name : str, opcjonalnie
        Nazwa do raportów.
    """

    kind = ElementKind.BASIC

    def __init__(
        self,
        element_id: int,
        failure_dist: Distribution,
        repair_dist: Distribution,
        name: str | None = None,
    ) -> None:
        super().__init__(element_id, name)
        if failure_dist.kind is DistributionKind.NONE:
            raise InvalidParameters(
                f"Zdarzenie '{self.name}': rozkład NONE (brak naprawy) nie może być "
                f"rozkładem awarii."
            )
        self.status = Status.ALIVE
        self.failure_dist = failure_dist
        self.repair_dist = repair_dist

    def query_failed(self, tree: FaultTree | None = None) -> bool:
        if self.status is Status.ALIVE:
            return False
        if self.status is Status.DEAD:
            return True
        raise InvalidStatus(f"Niepoprawny status zdarzenia '{self.name}': {self.status}")

    def set_status(self, status: Status) -> None:
        self.status = Status(status)

    def sample_failure_interval(self, rng: np.random.Generator) -> float:
        return self.failure_dist.sample_failure(rng)

    def sample_repair_interval(self, rng: np.random.Generator) -> float:
        return self.repair_dist.sample(rng)


class Gate(Element):
    """Bramka statyczna; stan wyliczany z wejść."""

    kind = ElementKind.STATIC
    gate_type = "GATE"

    def __init__(
        self,
        element_id: int,
        children: Children | list[int] | None = None,
        name: str | None = None,
    ) -> None:
        super().__init__(element_id, name)
        if isinstance(children, Children):
            self.children = children
        else:
            self.children = Children(children)

    def count_failed(self, tree: FaultTree) -> int:
        return sum(1 for child in self.children if tree.query_failed(child))

    def set_status(self, status: Status) -> None:
        raise GateStatusError(
            f"Nie można ręcznie ustawić statusu bramki {self.gate_type} "
            f"'{self.name}' — stan bramki wynika z jej wejść."
        )


class GateAnd(Gate):
    gate_type = "AND"

    def query_failed(self, tree: FaultTree) -> bool:
        # pusta lista wejść → brak awarii
        if len(self.children) == 0:
            return False
        return all(tree.query_failed(child) for child in self.children)


class GateOr(Gate):
    gate_type = "OR"

    def query_failed(self, tree: FaultTree) -> bool:
        return any(tree.query_failed(child) for child in self.children)


class GateVote(Gate):
    """Stała większość: uszkodzona, gdy więcej niż połowa wejść jest uszkodzona."""

    gate_type = "VOTE"

    @property
    def threshold(self) -> int:
        return len(self.children) // 2

    def query_failed(self, tree: FaultTree) -> bool:
        return self.count_failed(tree) > self.threshold


GATE_TYPES: dict[str, type[Gate]] = {
    "AND": GateAnd,
    "OR": GateOr,
    "VOTE": GateVote,
}
