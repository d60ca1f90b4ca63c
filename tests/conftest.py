"""
tests/conftest.py
-----------------
Wspólne fixtures: generator z ustalonym ziarnem i małe drzewa z jedną bramką.
"""

import numpy as np
import pytest

from ftsim.distributions import exponential, no_repair
from ftsim.elements import BasicEvent, GateAnd, GateOr, GateVote, IdGenerator
from ftsim.fault_tree import FaultTree


def _gate_tree(gate_cls, n_children: int, *, repairable: bool = True) -> FaultTree:
    ids = IdGenerator()
    tree = FaultTree()
    events = []
    for _ in range(n_children):
        repair = exponential(0.01, role="repair") if repairable else no_repair()
        event = BasicEvent(ids.next_id(), exponential(0.01), repair)
        tree.add_element(event)
        events.append(event)
    gate = gate_cls(ids.next_id())
    for event in events:
        gate.children.add(event)
    tree.add_element(gate)
    tree.root = gate.id
    return tree


@pytest.fixture
def make_gate_tree():
    """
    Fabryka drzew: ``make_gate_tree(gate_cls, n, repairable=True)`` zwraca
    n zdarzeń Exp(0.01) pod jedną bramką ``gate_cls`` (korzeń).
    """
    return _gate_tree


@pytest.fixture
def rng() -> np.random.Generator:
    """Generator z ustalonym ziarnem — powtarzalne testy."""
    return np.random.default_rng(12345)


@pytest.fixture
def and_tree() -> FaultTree:
    """Dwa zdarzenia Exp(0.01)/Exp(0.01) pod bramką AND."""
    return _gate_tree(GateAnd, 2)


@pytest.fixture
def or_tree() -> FaultTree:
    return _gate_tree(GateOr, 2)


@pytest.fixture
def vote_tree_no_repair() -> FaultTree:
    """Trzy zdarzenia bez napraw pod bramką VOTE (większość z 3)."""
    return _gate_tree(GateVote, 3, repairable=False)
