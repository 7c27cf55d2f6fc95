"""Mortgage refinance engine — loan models, calculators, and snapshot storage."""

from .models import ComparisonResult, LoanSnapshot, LoanSpec, SimulationResult

__all__ = [
    "ComparisonResult",
    "LoanSnapshot",
    "LoanSpec",
    "SimulationResult",
]
