"""
distributions.py
----------------
Adapter rozkładów prawdopodobieństwa czasu do awarii i czasu naprawy.

Obsługiwane rozkłady:

    EXPONENTIAL  – parametr: rate (λ)           → rng.exponential(1/λ)
    WEIBULL      – parametry: shape (k), scale   → scale · rng.weibull(k)
    GAMMA        – parametry: shape (k), scale   → rng.gamma(k, scale)
    NONE         – "brak naprawy", próbka = 0.0  (tylko jako rozkład naprawy)

Generowanie liczb losowych deleguje do ``numpy.random.Generator``.
Parametry są walidowane od razu w konstruktorze.
"""

from __future__ import annotations

import enum
import math
import warnings
from typing import Literal

import numpy as np

from .errors import ContractViolation, InvalidParameters

DistributionRole = Literal["failure", "repair"]


class DistributionKind(enum.Enum):
    """Typ rozkładu."""

    EXPONENTIAL = "exponential"
    WEIBULL = "weibull"
    GAMMA = "gamma"
    NONE = "none"

    @classmethod
    def parse(cls, value: str | DistributionKind) -> DistributionKind:
        """Zamienia nazwę (np. 'Weibull', 'EXP') na DistributionKind."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidParameters(
                f"Typ rozkładu musi być nazwą lub DistributionKind, otrzymano {value!r}"
            )
        key = value.strip().lower()
        aliases = {"exp": "exponential", "no_repair": "none"}
        key = aliases.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise InvalidParameters(
                f"Nieznany typ rozkładu: '{value}'. "
                f"Dostępne: {[k.value for k in cls]}"
            ) from None


def _require_positive(name: str, value: float, kind: DistributionKind) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidParameters(
            f"Rozkład {kind.value}: parametr '{name}' musi być liczbą, otrzymano {value!r}"
        ) from None
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidParameters(
            f"Rozkład {kind.value}: parametr '{name}' musi być dodatni "
            f"i skończony, otrzymano {value}"
        )
    return value


class Distribution:
    """
    Rozkład czasu (awarii lub naprawy) dla zdarzenia podstawowego.

    Parametry
    ----------
    kind : DistributionKind lub str
        Typ rozkładu.
    rate : float
        Intensywność λ [1/h] — tylko dla EXPONENTIAL.
    shape : float
        Parametr kształtu — WEIBULL i GAMMA. Dla EXPONENTIAL ignorowany
        (niezerowa wartość → UserWarning; 0.0 wycisza ostrzeżenie).
    scale : float
        Parametr skali — WEIBULL i GAMMA.
    role : {"failure", "repair"}
        Rola rozkładu. NONE jest dozwolony wyłącznie dla "repair".

    Rzuca
    ------
    InvalidParameters
        Gdy wybrany rozkład odrzuca parametry lub NONE użyto jako rozkładu awarii.

    Przykład
    --------
    >>> rng = np.random.default_rng(1)
    >>> d = Distribution("weibull", shape=1.5, scale=100.0)
    >>> d.sample(rng) >= 0.0
    True
    """

    def __init__(
        self,
        kind: DistributionKind | str,
        *,
        rate: float = 0.0,
        shape: float = 0.0,
        scale: float = 0.0,
        role: DistributionRole = "failure",
    ) -> None:
        if role not in ("failure", "repair"):
            raise InvalidParameters(f"Nieznana rola rozkładu: '{role}'")

        self.kind = DistributionKind.parse(kind)
        self.role: DistributionRole = role
        self.rate = 0.0
        self.shape = 0.0
        self.scale = 0.0

        if self.kind is DistributionKind.EXPONENTIAL:
            if shape != 0.0 or scale != 0.0:
                warnings.warn(
                    "Rozkład wykładniczy — parametry shape/scale są ignorowane. "
                    "Użyj shape = scale = 0.0, aby wyciszyć ten komunikat.",
                    UserWarning,
                    stacklevel=2,
                )
            self.rate = _require_positive("rate", rate, self.kind)

        elif self.kind in (DistributionKind.WEIBULL, DistributionKind.GAMMA):
            self.shape = _require_positive("shape", shape, self.kind)
            self.scale = _require_positive("scale", scale, self.kind)

        else:  # NONE
            if role == "failure":
                raise InvalidParameters(
                    "Rozkład NONE (brak naprawy) nie może być rozkładem awarii."
                )
            if rate != 0.0 or shape != 0.0 or scale != 0.0:
                warnings.warn(
                    "Rozkład NONE — parametry są ignorowane. "
                    "Użyj rate = shape = scale = 0.0, aby wyciszyć ten komunikat.",
                    UserWarning,
                    stacklevel=2,
                )

    # ------------------------------------------------------------------
    # Próbkowanie
    # ------------------------------------------------------------------

    def sample(self, rng: np.random.Generator) -> float:
        """Losuje jeden odstęp czasu ≥ 0. Dla NONE zwraca dokładnie 0.0."""
        if self.kind is DistributionKind.EXPONENTIAL:
            # numpy parametryzuje rozkład wykładniczy skalą = 1/λ
            return float(rng.exponential(1.0 / self.rate))
        if self.kind is DistributionKind.WEIBULL:
            return float(self.scale * rng.weibull(self.shape))
        if self.kind is DistributionKind.GAMMA:
            return float(rng.gamma(self.shape, self.scale))
        return 0.0

    def sample_failure(self, rng: np.random.Generator) -> float:
        """Losuje czas do awarii. NONE jako rozkład awarii → ContractViolation."""
        if self.kind is DistributionKind.NONE:
            raise ContractViolation("Nie można próbkować rozkładu NONE jako czasu awarii.")
        return self.sample(rng)

    # ------------------------------------------------------------------
    # Właściwości pomocnicze
    # ------------------------------------------------------------------

    @property
    def is_repairable(self) -> bool:
        return self.kind is not DistributionKind.NONE

    @property
    def mean(self) -> float:
        """Teoretyczna wartość oczekiwana (NONE → 0.0)."""
        if self.kind is DistributionKind.EXPONENTIAL:
            return 1.0 / self.rate
        if self.kind is DistributionKind.WEIBULL:
            return self.scale * math.gamma(1.0 + 1.0 / self.shape)
        if self.kind is DistributionKind.GAMMA:
            return self.shape * self.scale
        return 0.0

    def __repr__(self) -> str:
        if self.kind is DistributionKind.EXPONENTIAL:
            return f"Distribution(exponential, rate={self.rate})"
        if self.kind is DistributionKind.NONE:
            return "Distribution(none)"
        return f"Distribution({self.kind.value}, shape={self.shape}, scale={self.scale})"


# ---------------------------------------------------------------------------
# Skróty
# ---------------------------------------------------------------------------


def exponential(rate: float, *, role: DistributionRole = "failure") -> Distribution:
    return Distribution(DistributionKind.EXPONENTIAL, rate=rate, role=role)


def weibull(shape: float, scale: float, *, role: DistributionRole = "failure") -> Distribution:
    return Distribution(DistributionKind.WEIBULL, shape=shape, scale=scale, role=role)


def gamma(shape: float, scale: float, *, role: DistributionRole = "failure") -> Distribution:
    return Distribution(DistributionKind.GAMMA, shape=shape, scale=scale, role=role)


def no_repair() -> Distribution:
    """Rozkład naprawy "nigdy nie naprawiany"."""
    return Distribution(DistributionKind.NONE, role="repair")
