"""
builder.py
----------
Budowa drzewa błędów z tabel (pandas) oraz konfiguracja referencyjna.

Wymagane kolumny wejściowe
--------------------------
events_df : Name, Failure_Dist
            (opcjonalnie: Failure_Rate, Failure_Shape, Failure_Scale,
             Repair_Dist, Repair_Rate, Repair_Shape, Repair_Scale)
gates_df  : Name, Gate_Type, Inputs

``Inputs`` to lista CSV nazw wejść (np. "C1, C2") — tak jak designatory w BOM.
Brak ``Repair_Dist`` (lub pusta komórka) oznacza rozkład NONE — brak naprawy.

Identyfikatory: najpierw zdarzenia podstawowe (kolejność wierszy), potem
bramki w kolejności topologicznej (wejścia przed bramką nadrzędną).
"""

from __future__ import annotations

import pandas as pd

from .distributions import Distribution, DistributionKind, exponential
from .elements import GATE_TYPES, BasicEvent, GateAnd, GateVote, IdGenerator
from .errors import InvalidParameters
from .fault_tree import FaultTree

# ---------------------------------------------------------------------------
# Stałe domyślne
# ---------------------------------------------------------------------------

_REQUIRED_EVENTS = {"Name", "Failure_Dist"}
_REQUIRED_GATES = {"Name", "Gate_Type", "Inputs"}

REFERENCE_RATE = 1.0 / 100.0


def _check_columns(df: pd.DataFrame, required: set[str], name: str) -> None:
    missing = required - set(df.columns)
    if missing:
        raise KeyError(
            f"DataFrame '{name}' brakuje kolumn: {missing}. "
            f"Dostępne kolumny: {set(df.columns)}"
        )


def _number(row: pd.Series, col: str) -> float:
    value = row.get(col, 0.0)
    if pd.isna(value):
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidParameters(
            f"Kolumna '{col}': wartość {value!r} nie jest liczbą."
        ) from None


def _distribution(row: pd.Series, prefix: str, role: str) -> Distribution:
    kind = row.get(f"{prefix}_Dist")
    if kind is None or pd.isna(kind) or str(kind).strip() == "":
        kind = DistributionKind.NONE
    return Distribution(
        kind,
        rate=_number(row, f"{prefix}_Rate"),
        shape=_number(row, f"{prefix}_Shape"),
        scale=_number(row, f"{prefix}_Scale"),
        role=role,
    )


def _split_inputs(value: object) -> list[str]:
    if value is None or (not isinstance(value, (list, tuple)) and pd.isna(value)):
        return []
    if isinstance(value, (list, tuple)):
        return [str(v).strip() for v in value if str(v).strip()]
    return [v.strip() for v in str(value).split(",") if v.strip()]


# ---------------------------------------------------------------------------
# Budowa z tabel
# ---------------------------------------------------------------------------


def build_fault_tree(
    events_df: pd.DataFrame,
    gates_df: pd.DataFrame,
    root: str,
) -> FaultTree:
    """
    Buduje ``FaultTree`` z tabel zdarzeń podstawowych i bramek.

    Parametry
    ----------
    events_df : pd.DataFrame
        Zdarzenia podstawowe: nazwa i parametry rozkładów awarii / naprawy.
    gates_df : pd.DataFrame
        Bramki: nazwa, typ (AND / OR / VOTE) i lista wejść (CSV nazw).
    root : str
        Nazwa zdarzenia szczytowego.

    Zwraca
    -------
    FaultTree
        Drzewo z ustawionym ``root``.

    Rzuca
    ------
    KeyError
        Brak wymaganej kolumny, nieznana nazwa wejścia lub korzenia.
    InvalidParameters
        Zdublowana nazwa, nieznany typ bramki lub rozkładu, niepoprawne
        parametry rozkładu, cykl w strukturze bramek.

    Przykład
    --------
    >>> events = pd.DataFrame({
    ...     "Name": ["C1", "C2"],
    ...     "Failure_Dist": ["exponential", "exponential"],
    ...     "Failure_Rate": [0.01, 0.01],
    ...     "Repair_Dist": ["exponential", "exponential"],
    ...     "Repair_Rate": [0.01, 0.01],
    ... })
    >>> gates = pd.DataFrame({"Name": ["TOP"], "Gate_Type": ["AND"], "Inputs": ["C1, C2"]})
    >>> tree = build_fault_tree(events, gates, root="TOP")
    >>> tree.enumerate_basic_events()
    [0, 1]
    """
    _check_columns(events_df, _REQUIRED_EVENTS, "events_df")
    _check_columns(gates_df, _REQUIRED_GATES, "gates_df")

    event_names = events_df["Name"].astype(str).str.strip().tolist()
    gate_names = gates_df["Name"].astype(str).str.strip().tolist()
    all_names = event_names + gate_names
    duplicated = sorted({n for n in all_names if all_names.count(n) > 1})
    if duplicated:
        raise InvalidParameters(f"Zdublowane nazwy elementów: {duplicated}")

    gate_defs: dict[str, tuple[str, list[str]]] = {}
    for name, (_, row) in zip(gate_names, gates_df.iterrows()):
        gate_type = str(row["Gate_Type"]).strip().upper()
        if gate_type not in GATE_TYPES:
            raise InvalidParameters(
                f"Nieznany typ bramki '{row['Gate_Type']}' dla '{name}'. "
                f"Dostępne: {sorted(GATE_TYPES)}"
            )
        inputs = _split_inputs(row["Inputs"])
        unknown = [i for i in inputs if i not in all_names]
        if unknown:
            raise KeyError(f"Bramka '{name}' odwołuje się do nieznanych wejść: {unknown}")
        gate_defs[name] = (gate_type, inputs)

    if root not in all_names:
        raise KeyError(f"Nieznany korzeń drzewa: '{root}'")

    ids = IdGenerator()
    tree = FaultTree()
    name_to_id: dict[str, int] = {}

    # Krok 1 — zdarzenia podstawowe
    for name, (_, row) in zip(event_names, events_df.iterrows()):
        try:
            failure = _distribution(row, "Failure", "failure")
            repair = _distribution(row, "Repair", "repair")
        except InvalidParameters as exc:
            raise InvalidParameters(f"Zdarzenie '{name}': {exc}") from exc
        event = BasicEvent(ids.next_id(), failure, repair, name=name)
        tree.add_element(event)
        name_to_id[name] = event.id

    # Krok 2 — bramki w kolejności topologicznej
    visiting: set[str] = set()

    def add_gate(name: str) -> int:
        if name in name_to_id:
            return name_to_id[name]
        if name in visiting:
            raise InvalidParameters(f"Cykl w strukturze bramek (przez '{name}').")
        visiting.add(name)
        gate_type, inputs = gate_defs[name]
        child_ids = [add_gate(child) for child in inputs]
        gate = GATE_TYPES[gate_type](ids.next_id(), child_ids, name=name)
        tree.add_element(gate)
        name_to_id[name] = gate.id
        visiting.discard(name)
        return gate.id

    for name in gate_names:
        add_gate(name)

    tree.root = name_to_id[root]
    return tree


# ---------------------------------------------------------------------------
# Konfiguracja referencyjna
# ---------------------------------------------------------------------------


def build_reference_tree(rate: float = REFERENCE_RATE) -> FaultTree:
    """
    Drzewo referencyjne: 3 pary zdarzeń (C1..C6) połączone bramkami AND,
    a nad nimi głosowanie 2-z-3 (VOTE) jako korzeń.

    Wszystkie zdarzenia: awaria ~ Exp(rate), naprawa ~ Exp(rate);
    domyślnie rate = 1/100 [1/h].
    """
    ids = IdGenerator()
    tree = FaultTree()

    events = [
        BasicEvent(
            ids.next_id(),
            exponential(rate),
            exponential(rate, role="repair"),
            name=f"C{i + 1}",
        )
        for i in range(6)
    ]
    for event in events:
        tree.add_element(event)

    pairs = []
    for i in range(3):
        gate = GateAnd(ids.next_id(), name=f"G{i + 1}")
        gate.children.add(events[2 * i])
        gate.children.add(events[2 * i + 1])
        tree.add_element(gate)
        pairs.append(gate)

    top = GateVote(ids.next_id(), name="TOP")
    for gate in pairs:
        top.children.add(gate)
    tree.add_element(top)

    tree.root = top.id
    return tree
