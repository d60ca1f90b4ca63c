"""
main.py – Demo symulacji Monte-Carlo drzewa błędów z naprawami
================================================================
Uruchom: python main.py
"""

import pandas as pd

from ftsim import (
    DEFAULT_TRIALS,
    MonteCarloCampaign,
    build_fault_tree,
    build_reference_tree,
    write_failure_times,
)

# ---------------------------------------------------------------------------
# Przykładowe drzewo w postaci tabel (to samo co drzewo referencyjne)
# ---------------------------------------------------------------------------

EVENTS = pd.DataFrame({
    "Name": ["C1", "C2", "C3", "C4", "C5", "C6"],
    "Failure_Dist": ["exponential"] * 6,
    "Failure_Rate": [0.01] * 6,
    "Repair_Dist": ["exponential"] * 6,
    "Repair_Rate": [0.01] * 6,
})

GATES = pd.DataFrame({
    "Name": ["G1", "G2", "G3", "TOP"],
    "Gate_Type": ["AND", "AND", "AND", "VOTE"],
    "Inputs": ["C1, C2", "C3, C4", "C5, C6", "G1, G2, G3"],
})

# Wariant bez napraw — głosowanie 2-z-3 nad zdarzeniami Weibulla
EVENTS_NO_REPAIR = pd.DataFrame({
    "Name": ["P1", "P2", "P3"],
    "Failure_Dist": ["weibull"] * 3,
    "Failure_Shape": [1.5] * 3,
    "Failure_Scale": [100.0] * 3,
    "Repair_Dist": ["none"] * 3,
})

GATES_NO_REPAIR = pd.DataFrame({
    "Name": ["TOP"],
    "Gate_Type": ["VOTE"],
    "Inputs": ["P1, P2, P3"],
})

MISSION_TIMES = [10.0, 50.0, 100.0, 200.0, 500.0]


def print_separator(char: str = "─", width: int = 80) -> None:
    print(char * width)


def print_summary(title: str, result) -> None:
    s = result.summary()
    print(f"\n📊 {title}\n")
    print(f"  Liczba prób                = {s['n']}")
    print(f"  MTTF (średnia)             = {s['MTTF']:,.2f} h")
    print(f"  Odchylenie standardowe     = {s['std']:,.2f} h")
    print(f"  Min / Max                  = {s['min']:,.2f} h / {s['max']:,.2f} h")
    print(f"  Kwantyle 5% / 50% / 95%    = "
          f"{s['q05']:,.1f} / {s['q50']:,.1f} / {s['q95']:,.1f} h")

    print(f"\n  {'t [h]':>10} | {'R(t)':>8}")
    print("  " + "─" * 22)
    for _, row in result.reliability_curve(MISSION_TIMES).iterrows():
        print(f"  {row['t']:>10.1f} | {row['R_t']:>8.4f}")


def run_demo(n_trials: int = DEFAULT_TRIALS, seed: int = 2024) -> None:
    print()
    print("=" * 80)
    print("  SYMULACJA MONTE-CARLO DRZEWA BŁĘDÓW (AND / OR / VOTE) Z NAPRAWAMI")
    print(f"  Liczba prób: {n_trials:,}  |  ziarno: {seed}")
    print("=" * 80)

    # ------------------------------------------------------------------
    # 1. Drzewo referencyjne (budowane w kodzie)
    # ------------------------------------------------------------------
    tree = build_reference_tree()
    print(f"\n🌳 Drzewo referencyjne: {tree}")
    print_separator()
    for element in tree:
        kind = "BE" if element.is_basic else element.gate_type
        if element.is_basic:
            extra = f"awaria: {element.failure_dist!r}, naprawa: {element.repair_dist!r}"
        else:
            extra = "wejścia: " + ", ".join(tree.element(c).name for c in element.children)
        print(f"  [{element.id:>2}] {element.name:<5} {kind:<5} {extra}")

    campaign = MonteCarloCampaign(tree, n_trials=n_trials, seed=seed)
    result = campaign.run()
    print_summary("WYNIKI — drzewo referencyjne", result)

    path = write_failure_times(result)
    print(f"\n💾 Zapisano {result.n_trials} czasów awarii do '{path}'.")

    # ------------------------------------------------------------------
    # 2. To samo drzewo zbudowane z tabel
    # ------------------------------------------------------------------
    tree_tab = build_fault_tree(EVENTS, GATES, root="TOP")
    result_tab = MonteCarloCampaign(tree_tab, n_trials=n_trials, seed=seed).run()
    print_summary("WYNIKI — drzewo z tabel (powinno być identyczne)", result_tab)

    # ------------------------------------------------------------------
    # 3. Głosowanie 2-z-3 bez napraw
    # ------------------------------------------------------------------
    tree_nr = build_fault_tree(EVENTS_NO_REPAIR, GATES_NO_REPAIR, root="TOP")
    result_nr = MonteCarloCampaign(tree_nr, n_trials=n_trials, seed=seed).run()
    print_summary("WYNIKI — VOTE 2-z-3, Weibull(1.5, 100), bez napraw", result_nr)

    print()
    print("=" * 80)
    print("  Koniec symulacji.")
    print("=" * 80)
    print()


if __name__ == "__main__":
    run_demo()
