"""Ticket fee calculation for several airlines and cabin classes."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from collections.abc import Iterable
from enum import Enum
from typing import Optional, Sequence

SAMPLE_TICKETS = (
    "United 150.0 Premium",
    "United 120.0 economy",
    "United 100.0 business",
    "Delta 60.0 economy",
    "Delta 60.0 premium",
    "Delta 60.0 Business",
    "SouthWest 1000.0 Economy",
    "SouthWest 4000.0 Economy",
)


class Airline(Enum):
    UNITED = "united"
    DELTA = "delta"
    SOUTHWEST = "southwest"


class Cabin(Enum):
    ECONOMY = "economy"
    PREMIUM = "premium"
    BUSINESS = "business"


class FeeCalculator(ABC):
    """Computes a ticket's cost from its cabin and distance."""

    @staticmethod
    def _operating_cost(cabin: Cabin, miles: float) -> float:
        if cabin is Cabin.PREMIUM:
            return 25.0
        if cabin is Cabin.BUSINESS:
            return 50.0 + 0.25 * miles
        return 0.0

    @abstractmethod
    def cost(self, cabin: Cabin, miles: float) -> float:
        """Return the fee for flying ``miles`` in ``cabin``."""


class UnitedCalculator(FeeCalculator):
    def cost(self, cabin: Cabin, miles: float) -> float:
        return self._operating_cost(cabin, miles) + miles * 0.75


class DeltaCalculator(FeeCalculator):
    def cost(self, cabin: Cabin, miles: float) -> float:
        return self._operating_cost(cabin, miles) + miles * 0.5


class SouthwestCalculator(FeeCalculator):
    def cost(self, cabin: Cabin, miles: float) -> float:
        return 1.0 * miles


_CALCULATORS: dict[Airline, FeeCalculator] = {
    Airline.UNITED: UnitedCalculator(),
    Airline.DELTA: DeltaCalculator(),
    Airline.SOUTHWEST: SouthwestCalculator(),
}


def calculator_for(airline: Airline) -> FeeCalculator:
    """Return the shared calculator for ``airline``."""
    return _CALCULATORS[Airline(airline)]


def parse_ticket(line: str) -> tuple[Airline, float, Cabin]:
    """Parse '<airline> <miles> <cabin>', case-insensitively.

    Raises ValueError for a missing field, bad distance or unknown name.
    """
    fields = line.lower().split()
    if len(fields) < 3:
        raise ValueError(f"ticket needs airline, miles and cabin: {line!r}")
    try:
        miles = float(fields[1])
    except ValueError:
        raise ValueError(f"invalid distance {fields[1]!r}") from None
    try:
        airline = Airline(fields[0])
    except ValueError:
        raise ValueError(f"unknown airline {fields[0]!r}") from None
    try:
        cabin = Cabin(fields[2])
    except ValueError:
        raise ValueError(f"unknown cabin {fields[2]!r}") from None
    return airline, miles, cabin


def process_tickets(lines: Iterable[str]) -> list[float]:
    """Return the cost of each ticket line, in order."""
    costs = []
    for line in lines:
        airline, miles, cabin = parse_ticket(line)
        costs.append(calculator_for(airline).cost(cabin, miles))
    return costs


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the cost of each ticket given, or of the built-in sample tickets."""
    parser = argparse.ArgumentParser(description="Compute airline ticket costs.")
    parser.add_argument("tickets", nargs="*", help="tickets as 'airline miles cabin'")
    args = parser.parse_args(argv)
    for cost in process_tickets(args.tickets or SAMPLE_TICKETS):
        print(f"{cost:g}")
    return 0