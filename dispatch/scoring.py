"""
Purpose: Ranking/selection model (the "who is best" layer).
What it does:
Takes the free couriers for an order, drops the ones that cannot carry it,
and picks the lowest-scoring courier:

    score = distance * transport_weight - priority * priority_coefficient

Tie-breaking rules (deterministic):
- couriers less than `tie_break_distance` apart in distance to pickup are
  treated as equidistant; fewer deliveries today wins (fairness)
- otherwise the lower score wins, and the first courier in list order
  keeps an exact tie

Pure function: no store access, no side effects beyond debug logging.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from couriers.models import Courier
from orders.models import Order

from .candidate_filter import filter_eligible_couriers
from .policy import DispatchPolicy, default_dispatch_policy

logger = logging.getLogger(__name__)

# Any callable with this shape can replace the default strategy in the Dispatcher.
MatchingStrategy = Callable[[Order, Sequence[Courier]], Optional[Courier]]


def score_courier(courier: Courier, order: Order, policy: Optional[DispatchPolicy] = None) -> float:
    policy = policy or default_dispatch_policy()
    distance = courier.location.distance_to(order.pickup_location)
    return _score(distance, courier, order, policy)


def _score(distance: float, courier: Courier, order: Order, policy: DispatchPolicy) -> float:
    return distance * courier.courier_type.transport_weight - order.priority * policy.priority_coefficient


def find_best_courier(
    order: Order,
    candidates: Sequence[Courier],
    policy: Optional[DispatchPolicy] = None,
) -> Optional[Courier]:
    """
    Select the best courier for `order` from `candidates`.

    Returns None when there are no candidates or none of them can carry
    the order weight.
    """
    if not candidates:
        return None

    policy = policy or default_dispatch_policy()

    eligible = filter_eligible_couriers(candidates, order.weight_kg)
    if not eligible:
        logger.warning(
            f"No couriers can carry {order.weight_kg}kg for order {order.id} (available: {len(candidates)})"
        )
        return None

    best_courier: Optional[Courier] = None
    best_score = float("inf")
    best_distance = float("inf")

    for courier in eligible:
        distance = courier.location.distance_to(order.pickup_location)
        score = _score(distance, courier, order, policy)

        logger.debug(
            f"Courier {courier.id} [{courier.courier_type.value}] distance={distance:.2f} "
            f"score={score:.2f} completed_today={courier.completed_orders_today}"
        )

        if best_courier is None:
            is_better = True
        elif abs(distance - best_distance) < policy.tie_break_distance:
            # Near-equidistant: load-balance by recent activity before raw score.
            if courier.completed_orders_today < best_courier.completed_orders_today:
                is_better = True
            elif courier.completed_orders_today == best_courier.completed_orders_today:
                is_better = score < best_score
            else:
                is_better = False
        else:
            is_better = score < best_score

        if is_better:
            best_courier = courier
            best_score = score
            best_distance = distance

    logger.info(
        f"Best courier for order {order.id}: {best_courier.id} "
        f"[{best_courier.courier_type.value}] score={best_score:.2f}"
    )
    return best_courier


def score_based_strategy(policy: DispatchPolicy) -> MatchingStrategy:
    """
    Bind a policy into a MatchingStrategy callable for the Dispatcher.
    """
    policy.validate()

    def strategy(order: Order, candidates: Sequence[Courier]) -> Optional[Courier]:
        return find_best_courier(order, candidates, policy)

    return strategy
