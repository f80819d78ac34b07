"""
Purpose: Central configuration for courier matching.
What it does:

Stores the tunable constants of the scoring formula:

PRIORITY_COEFFICIENT = 0.5
TIE_BREAK_DISTANCE = 1.0

Rule: No logic here, just parameters so you can tune without rewriting code.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DispatchPolicy:
    """
    Central configuration for the score-based matching strategy.

    score = distance * transport_weight - priority * priority_coefficient
    """

    # --- Priority discount ---
    # Subtracted per priority point. Uniform across candidates, so on its own
    # it never changes which courier wins.
    priority_coefficient: float = 0.5

    # --- Fairness tie-break ---
    # Couriers whose distances to pickup differ by less than this are
    # considered equidistant; the one with fewer deliveries today wins.
    tie_break_distance: float = 1.0

    def validate(self) -> None:
        """
        Basic sanity checks.
        """
        if self.priority_coefficient < 0:
            raise ValueError("priority_coefficient must be >= 0")

        if self.tie_break_distance < 0:
            raise ValueError("tie_break_distance must be >= 0")


def default_dispatch_policy() -> DispatchPolicy:
    """
    Convenience factory for the default policy.
    """
    p = DispatchPolicy()
    p.validate()
    return p
