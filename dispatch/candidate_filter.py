#Purpose: Non-routing hard eligibility filtering (rule gates).
#Builds the base candidate set before scoring.
#Only vehicle capacity is enforced here: status is already guaranteed
#by the store (find_free), and distance is the scorer's job.
#Output: couriers able to carry the order (still not ranked).

from typing import List, Sequence

from couriers.models import Courier


def filter_eligible_couriers(couriers: Sequence[Courier], weight_kg: float) -> List[Courier]:
    """
    Returns only couriers whose transport type can carry `weight_kg`.
    Input order is preserved.
    """
    eligible = []

    for courier in couriers:
        if not courier.courier_type.can_carry(weight_kg):
            continue

        eligible.append(courier)

    return eligible
