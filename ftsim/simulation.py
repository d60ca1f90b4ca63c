"""
simulation.py
-------------
Symulacja dyskretna (DES) drzewa błędów z naprawami metodą Monte-Carlo.

Przebieg jednej próby:

    1. Dla każdego zdarzenia podstawowego losowany jest czas pierwszej awarii
       i wstawiany do harmonogramu jako zdarzenie FAILURE.
    2. Pętla: pobierz najwcześniejsze zdarzenie i zastosuj je do drzewa.
         FAILURE → sprawdź korzeń; uszkodzony → koniec próby (zapis czasu).
                   W przeciwnym razie wylosuj czas naprawy; jeśli > 0,
                   zaplanuj REPAIR (0.0 = element nigdy nie jest naprawiany).
         REPAIR  → wylosuj kolejny czas do awarii i zaplanuj FAILURE.
    3. Próba kończy się dokładnie wtedy, gdy awaria powoduje uszkodzenie korzenia.

Kampania to N niezależnych prób; między próbami wszystkie zdarzenia
podstawowe wracają do stanu ALIVE.
"""

from __future__ import annotations

import numpy as np

from .errors import ContractViolation, InvalidParameters
from .fault_tree import FaultTree
from .results import CampaignResult
from .schedule import EventKind, EventRecord, EventSchedule

# ---------------------------------------------------------------------------
# Stałe domyślne
# ---------------------------------------------------------------------------

DEFAULT_TRIALS = 10_000


# ---------------------------------------------------------------------------
# Pojedyncza próba
# ---------------------------------------------------------------------------


def simulate_trial(
    tree: FaultTree,
    root: int,
    rng: np.random.Generator,
    *,
    trace: list[EventRecord] | None = None,
) -> float:
    """
    Symuluje jedną próbę od stanu "wszystko sprawne" do awarii korzenia.

    Parametry
    ----------
    tree : FaultTree
        Drzewo ze zdarzeniami podstawowymi w stanie ALIVE.
    root : int
        Identyfikator korzenia (zdarzenia szczytowego).
    rng : np.random.Generator
        Generator liczb losowych współdzielony przez całą kampanię.
    trace : list, opcjonalnie
        Jeśli podano, dopisywane są do niej wszystkie przetworzone zdarzenia.

    Zwraca
    -------
    float
        Czas awarii systemu w tej próbie.
    """
    schedule = EventSchedule()

    for element in tree.enumerate_basic_events():
        failure_time = tree.sample_failure(element, rng)
        schedule.insert(EventRecord(failure_time, element, EventKind.FAILURE))

    while True:
        event = schedule.pop_earliest()
        tree.apply_event(event)
        if trace is not None:
            trace.append(event)

        if event.kind is EventKind.FAILURE:
            if tree.query_failed(root):
                return event.time
            repair_interval = tree.sample_repair(event.element, rng)
            if repair_interval > 0.0:
                schedule.insert(
                    EventRecord(event.time + repair_interval, event.element, EventKind.REPAIR)
                )
        else:
            failure_interval = tree.sample_failure(event.element, rng)
            schedule.insert(
                EventRecord(event.time + failure_interval, event.element, EventKind.FAILURE)
            )


# ---------------------------------------------------------------------------
# Kampania
# ---------------------------------------------------------------------------


def run_campaign(
    tree: FaultTree,
    root: int | None = None,
    n_trials: int = DEFAULT_TRIALS,
    rng: np.random.Generator | None = None,
    *,
    seed: int | None = None,
) -> CampaignResult:
    """
    Uruchamia ``n_trials`` niezależnych prób i zbiera czasy awarii systemu.

    Parametry
    ----------
    tree : FaultTree
        Kompletne drzewo błędów.
    root : int, opcjonalnie
        Korzeń; domyślnie ``tree.root``.
    n_trials : int
        Liczba prób. Domyślnie 10 000.
    rng : np.random.Generator, opcjonalnie
        Generator liczb losowych. Gdy brak — ``np.random.default_rng(seed)``.
    seed : int, opcjonalnie
        Ziarno generatora (ignorowane, gdy podano ``rng``).

    Zwraca
    -------
    CampaignResult
        Czasy awarii w kolejności prób. Po powrocie wszystkie zdarzenia
        podstawowe mają status ALIVE.

    Rzuca
    ------
    InvalidParameters
        Gdy ``n_trials`` < 0. Dla 0 prób wynik jest pusty.
    """
    if n_trials < 0:
        raise InvalidParameters(f"Liczba prób musi być ≥ 0, otrzymano {n_trials}")
    if root is None:
        root = tree.root
    if root is None:
        raise ContractViolation("Nie ustawiono korzenia drzewa (root).")
    if rng is None:
        rng = np.random.default_rng(seed)

    times: list[float] = []
    for _ in range(n_trials):
        tree.reset_basic_events()
        times.append(simulate_trial(tree, root, rng))
    tree.reset_basic_events()

    return CampaignResult(times=times)


class MonteCarloCampaign:
    """
    Kampania Monte-Carlo dla jednego drzewa błędów.

    Parametry
    ----------
    tree : FaultTree
        Drzewo błędów; sprawdzane przez ``FaultTree.validate()`` już w konstruktorze.
    root : int, opcjonalnie
        Korzeń; domyślnie ``tree.root``.
    n_trials : int
        Liczba prób. Domyślnie DEFAULT_TRIALS (10 000).
    seed : int, opcjonalnie
        Ziarno generatora — powtarzalne wyniki.
    rng : np.random.Generator, opcjonalnie
        Własny generator (ma pierwszeństwo przed ``seed``).

    Przykład
    --------
    >>> campaign = MonteCarloCampaign(build_reference_tree(), n_trials=1000, seed=7)
    >>> result = campaign.run()
    >>> print(f"MTTF ≈ {result.mttf:.1f} h")
    """

    def __init__(
        self,
        tree: FaultTree,
        root: int | None = None,
        n_trials: int = DEFAULT_TRIALS,
        *,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        if n_trials < 0:
            raise InvalidParameters(f"Liczba prób musi być ≥ 0, otrzymano {n_trials}")
        if root is not None:
            tree.root = root
        tree.validate()

        self.tree = tree
        self.n_trials = n_trials
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self._result: CampaignResult | None = None

    @property
    def root(self) -> int:
        return self.tree.root

    @property
    def result(self) -> CampaignResult:
        """Wynik ostatniego ``run()``."""
        if self._result is None:
            raise RuntimeError("Wywołaj najpierw run().")
        return self._result

    def run(self) -> CampaignResult:
        self._result = run_campaign(self.tree, self.root, self.n_trials, self._rng)
        return self._result
