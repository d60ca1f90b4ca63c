"""
results.py
----------
Wynik kampanii Monte-Carlo: próbka czasów awarii systemu (jeden czas na próbę)
oraz podstawowe statystyki rozkładu czasu do awarii.

Estymatory:
    MTTF  ≈ średnia z próbki czasów awarii
    R(t)  ≈ #{prób z czasem awarii > t} / N
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Sequence

import pandas as pd

# ---------------------------------------------------------------------------
# Stałe domyślne
# ---------------------------------------------------------------------------

DEFAULT_OUTPUT_PATH = "output.txt"
DEFAULT_QUANTILES: tuple[float, ...] = (0.05, 0.25, 0.5, 0.75, 0.95)


@dataclass
class CampaignResult:
    """Czasy awarii systemu w kolejności prób."""

    times: list[float] = field(default_factory=list)

    @property
    def n_trials(self) -> int:
        return len(self.times)

    def to_series(self) -> pd.Series:
        return pd.Series(
            self.times,
            index=pd.RangeIndex(len(self.times), name="trial"),
            name="failure_time",
            dtype=float,
        )

    @property
    def mttf(self) -> float | None:
        """Średni czas do awarii systemu (None dla pustej próbki)."""
        if not self.times:
            return None
        return float(self.to_series().mean())

    def summary(self, quantiles: Sequence[float] = DEFAULT_QUANTILES) -> dict[str, Any]:
        """
        Statystyki opisowe próbki.

        Zwraca
        -------
        dict
            n, MTTF, std, min, max oraz kwantyle jako klucze 'q05', 'q50', ...
            Dla pustej próbki wartości liczbowe to None.
        """
        s = self.to_series()
        out: dict[str, Any] = {"n": int(s.size)}
        if s.empty:
            out.update({"MTTF": None, "std": None, "min": None, "max": None})
            for q in quantiles:
                out[_quantile_key(q)] = None
            return out

        out["MTTF"] = float(s.mean())
        out["std"] = float(s.std(ddof=1)) if s.size > 1 else 0.0
        out["min"] = float(s.min())
        out["max"] = float(s.max())
        for q, value in s.quantile(list(quantiles)).items():
            out[_quantile_key(q)] = float(value)
        return out

    def reliability_at(self, t: float) -> float:
        """Empiryczna niezawodność R(t) — odsetek prób, w których system przetrwał t."""
        if not self.times:
            raise ValueError("Brak wyników — kampania nie zawiera żadnej próby.")
        s = self.to_series()
        return float((s > t).mean())

    def reliability_curve(self, times: Iterable[float]) -> pd.DataFrame:
        """Tabela [t, R_t] dla podanych punktów czasu."""
        points = [float(t) for t in times]
        return pd.DataFrame(
            {"t": points, "R_t": [self.reliability_at(t) for t in points]}
        )


def _quantile_key(q: float) -> str:
    return f"q{round(q * 100):02d}"


# ---------------------------------------------------------------------------
# Zapis do pliku
# ---------------------------------------------------------------------------


def format_failure_times(times: Iterable[float]) -> str:
    """Czasy rozdzielone pojedynczą spacją, bez separatora na końcu."""
    return " ".join(repr(float(t)) for t in times)


def write_failure_times(
    times: Iterable[float] | CampaignResult,
    path: str | Path = DEFAULT_OUTPUT_PATH,
) -> Path:
    """
    Zapisuje czasy awarii jako tekst (np. ``output.txt``).

    Zwraca
    -------
    Path
        Ścieżka zapisanego pliku.
    """
    if isinstance(times, CampaignResult):
        times = times.times
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(format_failure_times(times), encoding="utf-8")
    return p
