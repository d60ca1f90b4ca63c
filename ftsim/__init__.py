"""
ftsim
Symulacja Monte-Carlo czasu do awarii naprawialnych systemów opisanych drzewem błędów.
"""

from .errors import (
    FaultTreeError,
    InvalidParameters,
    ContractViolation,
    UnknownElement,
    NotBasicEvent,
    GateStatusError,
    InvalidStatus,
    UnknownEventKind,
    IdOrderError,
    EmptyQueue,
)
from .distributions import (
    Distribution,
    DistributionKind,
    exponential,
    weibull,
    gamma,
    no_repair,
)
from .elements import (
    Status,
    ElementKind,
    IdGenerator,
    Children,
    BasicEvent,
    GateAnd,
    GateOr,
    GateVote,
)
from .fault_tree import FaultTree
from .schedule import EventKind, EventRecord, EventSchedule
from .results import (
    CampaignResult,
    format_failure_times,
    write_failure_times,
    DEFAULT_OUTPUT_PATH,
)
from .simulation import simulate_trial, run_campaign, MonteCarloCampaign, DEFAULT_TRIALS
from .builder import build_fault_tree, build_reference_tree

__all__ = [
    # Wyjątki
    "FaultTreeError",
    "InvalidParameters",
    "ContractViolation",
    "UnknownElement",
    "NotBasicEvent",
    "GateStatusError",
    "InvalidStatus",
    "UnknownEventKind",
    "IdOrderError",
    "EmptyQueue",
    # Rozkłady
    "Distribution",
    "DistributionKind",
    "exponential",
    "weibull",
    "gamma",
    "no_repair",
    # Drzewo błędów
    "Status",
    "ElementKind",
    "IdGenerator",
    "Children",
    "BasicEvent",
    "GateAnd",
    "GateOr",
    "GateVote",
    "FaultTree",
    # Symulacja
    "EventKind",
    "EventRecord",
    "EventSchedule",
    "simulate_trial",
    "run_campaign",
    "MonteCarloCampaign",
    "DEFAULT_TRIALS",
    # Wyniki
    "CampaignResult",
    "format_failure_times",
    "write_failure_times",
    "DEFAULT_OUTPUT_PATH",
    # Budowa drzewa
    "build_fault_tree",
    "build_reference_tree",
]
