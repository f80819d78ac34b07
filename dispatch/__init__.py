#Expose the high-level pipeline pieces:
#Candidate filtering (hard rules)
#Scoring / ranking (matching strategy)
#Dispatcher orchestrator (the "one call" entry point)

from .candidate_filter import filter_eligible_couriers
from .policy import DispatchPolicy, default_dispatch_policy
from .scoring import MatchingStrategy, find_best_courier, score_based_strategy, score_courier
from .dispatcher import Dispatcher, DispatchStats #the engine to call to dispatch an order to a courier

__all__ = [
    "filter_eligible_couriers",
    "DispatchPolicy",
    "default_dispatch_policy",
    "MatchingStrategy",
    "find_best_courier",
    "score_based_strategy",
    "score_courier",
    "Dispatcher",
    "DispatchStats",
]
