"""
errors.py
---------
Hierarchia wyjątków pakietu ftsim.

Dwie klasy błędów:

    InvalidParameters  – błąd walidacji przy konstrukcji (np. ujemna skala
                         rozkładu). Wywołujący może poprawić dane i spróbować
                         ponownie.
    ContractViolation  – złamany niezmiennik drzewa lub kolejki zdarzeń.
                         Błąd krytyczny: kontynuacja symulacji dałaby
                         statystycznie bezwartościowe wyniki.
"""


class FaultTreeError(Exception):
    """Bazowy wyjątek pakietu."""


class InvalidParameters(FaultTreeError, ValueError):
    """Niepoprawne parametry przy konstrukcji elementu lub kampanii."""


class ContractViolation(FaultTreeError, RuntimeError):
    """Złamany kontrakt drzewa błędów — przerwanie symulacji."""


class UnknownElement(ContractViolation, LookupError):
    """Identyfikator spoza zakresu drzewa."""


class NotBasicEvent(ContractViolation, TypeError):
    """Próba próbkowania elementu, który nie jest zdarzeniem podstawowym."""


class GateStatusError(ContractViolation):
    """Bramki nie mają niezależnie ustawialnego statusu."""


class InvalidStatus(ContractViolation):
    """Status zdarzenia podstawowego inny niż ALIVE / DEAD."""


class UnknownEventKind(ContractViolation):
    """Nieznany typ zdarzenia w kolejce (uszkodzony harmonogram)."""


class IdOrderError(ContractViolation):
    """Element dodany poza kolejnością identyfikatorów."""


class EmptyQueue(ContractViolation, IndexError):
    """Pobranie zdarzenia z pustego harmonogramu."""
