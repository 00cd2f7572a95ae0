# Scheduler module
from .leitner import (
    Scheduler,
    LeitnerScheduler,
    default_scheduler,
    new_bucket_map,
    to_bucket_sets,
    get_bucket_range,
    practice,
    update,
    get_hint,
    compute_progress,
)

__all__ = [
    "Scheduler",
    "LeitnerScheduler",
    "default_scheduler",
    "new_bucket_map",
    "to_bucket_sets",
    "get_bucket_range",
    "practice",
    "update",
    "get_hint",
    "compute_progress",
]
