"""
tests/test_builder.py
---------------------
Unit testy dla budowy drzewa z tabel (build_fault_tree) i drzewa referencyjnego.
"""

import numpy as np
import pandas as pd
import pytest

from ftsim.builder import build_fault_tree, build_reference_tree
from ftsim.distributions import DistributionKind
from ftsim.elements import BasicEvent, GateAnd, GateVote, Status
from ftsim.errors import InvalidParameters
from ftsim.simulation import run_campaign


@pytest.fixture
def events_df() -> pd.DataFrame:
    return pd.DataFrame({
        "Name": ["C1", "C2", "C3", "C4", "C5", "C6"],
        "Failure_Dist": ["exponential"] * 6,
        "Failure_Rate": [0.01] * 6,
        "Repair_Dist": ["exponential"] * 6,
        "Repair_Rate": [0.01] * 6,
    })


@pytest.fixture
def gates_df() -> pd.DataFrame:
    return pd.DataFrame({
        "Name": ["G1", "G2", "G3", "TOP"],
        "Gate_Type": ["AND", "AND", "AND", "VOTE"],
        "Inputs": ["C1, C2", "C3, C4", "C5, C6", "G1, G2, G3"],
    })


# ---------------------------------------------------------------------------
# Testy: drzewo referencyjne
# ---------------------------------------------------------------------------


class TestReferenceTree:
    def test_structure(self):
        tree = build_reference_tree()
        assert len(tree) == 10
        assert tree.enumerate_basic_events() == [0, 1, 2, 3, 4, 5]
        assert tree.root == 9

        top = tree.element(tree.root)
        assert isinstance(top, GateVote)
        assert top.children.get() == [6, 7, 8]
        for gate_id, pair in zip((6, 7, 8), ([0, 1], [2, 3], [4, 5])):
            gate = tree.element(gate_id)
            assert isinstance(gate, GateAnd)
            assert gate.children.get() == pair

    def test_distributions(self):
        tree = build_reference_tree()
        for element_id in tree.enumerate_basic_events():
            event = tree.element(element_id)
            assert event.failure_dist.kind is DistributionKind.EXPONENTIAL
            assert event.failure_dist.rate == pytest.approx(0.01)
            assert event.repair_dist.rate == pytest.approx(0.01)

    def test_root_fails_with_two_pairs(self):
        tree = build_reference_tree()
        for element_id in (0, 1, 2):
            tree.element(element_id).set_status(Status.DEAD)
        assert tree.query_root_failed() is False
        tree.element(3).set_status(Status.DEAD)
        assert tree.query_root_failed() is True

    def test_campaign_on_reference_tree(self):
        result = run_campaign(build_reference_tree(), n_trials=200, seed=42)
        assert result.n_trials == 200
        assert all(t > 0.0 for t in result.times)


# ---------------------------------------------------------------------------
# Testy: build_fault_tree
# ---------------------------------------------------------------------------


class TestBuildFromTables:
    def test_matches_reference(self, events_df, gates_df):
        tree = build_fault_tree(events_df, gates_df, root="TOP")
        reference = build_reference_tree()
        assert len(tree) == len(reference)
        assert tree.root == reference.root
        for a, b in zip(tree, reference):
            assert (a.id, a.name, type(a)) == (b.id, b.name, type(b))
            if not a.is_basic:
                assert a.children.get() == b.children.get()

    def test_same_seed_same_results_as_reference(self, events_df, gates_df):
        tree = build_fault_tree(events_df, gates_df, root="TOP")
        a = run_campaign(tree, n_trials=50, seed=9)
        b = run_campaign(build_reference_tree(), n_trials=50, seed=9)
        assert a.times == b.times

    def test_gates_ordered_topologically(self, events_df, gates_df):
        """Bramka nadrzędna podana przed wejściami i tak dostaje wyższe id."""
        reordered = gates_df.iloc[::-1].reset_index(drop=True)
        tree = build_fault_tree(events_df, reordered, root="TOP")
        for element in tree:
            if not element.is_basic:
                assert all(child < element.id for child in element.children)

    def test_inputs_as_list(self, events_df):
        gates = pd.DataFrame({
            "Name": ["TOP"],
            "Gate_Type": ["or"],
            "Inputs": [["C1", "C6"]],
        })
        tree = build_fault_tree(events_df, gates, root="TOP")
        assert tree.element(tree.root).children.get() == [0, 5]

    def test_missing_repair_column_means_no_repair(self, gates_df):
        events = pd.DataFrame({
            "Name": ["C1", "C2", "C3", "C4", "C5", "C6"],
            "Failure_Dist": ["weibull"] * 6,
            "Failure_Shape": [1.5] * 6,
            "Failure_Scale": [100.0] * 6,
        })
        tree = build_fault_tree(events, gates_df, root="TOP")
        event = tree.element(0)
        assert isinstance(event, BasicEvent)
        assert event.failure_dist.kind is DistributionKind.WEIBULL
        assert not event.repair_dist.is_repairable

    def test_empty_repair_cell_means_no_repair(self, events_df, gates_df):
        events_df.loc[2, "Repair_Dist"] = np.nan
        with pytest.warns(UserWarning, match="NONE"):
            tree = build_fault_tree(events_df, gates_df, root="TOP")
        assert not tree.element(2).repair_dist.is_repairable
        assert tree.element(3).repair_dist.is_repairable

    def test_root_may_be_inner_gate(self, events_df, gates_df):
        tree = build_fault_tree(events_df, gates_df, root="G2")
        assert tree.element(tree.root).name == "G2"


class TestBuildErrors:
    def test_missing_event_columns(self, events_df, gates_df):
        with pytest.raises(KeyError, match="Failure_Dist"):
            build_fault_tree(events_df.drop(columns=["Failure_Dist"]), gates_df, root="TOP")

    def test_missing_gate_columns(self, events_df, gates_df):
        with pytest.raises(KeyError, match="Inputs"):
            build_fault_tree(events_df, gates_df.drop(columns=["Inputs"]), root="TOP")

    def test_unknown_input(self, events_df, gates_df):
        gates_df.loc[0, "Inputs"] = "C1, C9"
        with pytest.raises(KeyError, match="C9"):
            build_fault_tree(events_df, gates_df, root="TOP")

    def test_unknown_root(self, events_df, gates_df):
        with pytest.raises(KeyError, match="korzeń"):
            build_fault_tree(events_df, gates_df, root="SYSTEM")

    def test_unknown_gate_type(self, events_df, gates_df):
        gates_df.loc[3, "Gate_Type"] = "XOR"
        with pytest.raises(InvalidParameters, match="XOR"):
            build_fault_tree(events_df, gates_df, root="TOP")

    def test_duplicate_names(self, events_df, gates_df):
        gates_df.loc[0, "Name"] = "C1"
        with pytest.raises(InvalidParameters, match="Zdublowane"):
            build_fault_tree(events_df, gates_df, root="TOP")

    def test_cycle(self, events_df):
        gates = pd.DataFrame({
            "Name": ["A", "B"],
            "Gate_Type": ["OR", "AND"],
            "Inputs": ["C1, B", "C2, A"],
        })
        with pytest.raises(InvalidParameters, match="Cykl"):
            build_fault_tree(events_df, gates, root="A")

    def test_bad_distribution_names_event(self, events_df, gates_df):
        events_df.loc[4, "Failure_Rate"] = -1.0
        with pytest.raises(InvalidParameters, match="C5"):
            build_fault_tree(events_df, gates_df, root="TOP")

    def test_non_numeric_cell_names_event(self, events_df, gates_df):
        events_df["Failure_Rate"] = events_df["Failure_Rate"].astype(object)
        events_df.loc[1, "Failure_Rate"] = "abc"
        with pytest.raises(InvalidParameters, match="C2.*Failure_Rate"):
            build_fault_tree(events_df, gates_df, root="TOP")

    def test_no_repair_as_failure_rejected(self, events_df, gates_df):
        events_df.loc[0, "Failure_Dist"] = "none"
        with pytest.raises(InvalidParameters, match="C1"):
            build_fault_tree(events_df, gates_df, root="TOP")
