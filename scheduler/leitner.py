"""Modified-Leitner Spaced Repetition Algorithm Implementation.

Cards live in numbered buckets. Bucket 0 is practiced every day and bucket
``i`` (i >= 1) is practiced on days divisible by ``2 ** i``. An easy answer
moves a card up one bucket, a hard answer keeps it in place and a wrong
answer sends it back to bucket 0.
"""
from typing import Iterable, Optional, Protocol

from core import (
    AnswerDifficulty,
    BucketMap,
    BucketRange,
    BucketSets,
    Flashcard,
    PracticeRecord,
    Progress,
)


class Scheduler(Protocol):
    """Protocol for bucket schedulers."""

    def practice(self, buckets: BucketSets, day: int) -> set[Flashcard]:
        """Select the cards due on ``day``."""
        ...

    def update(self, buckets: BucketMap, card: Flashcard, difficulty: AnswerDifficulty) -> BucketMap:
        """Move ``card`` according to ``difficulty``."""
        ...


def new_bucket_map(cards: Iterable[Flashcard]) -> BucketMap:
    """Put every card into bucket 0."""
    cards = set(cards)
    if not cards:
        return {}
    return {0: cards}


def to_bucket_sets(buckets: BucketMap) -> BucketSets:
    """Convert a bucket map into a list of sets indexed by bucket number.

    Missing buckets become empty sets. An empty map gives an empty list.
    The input map is not modified; its sets are reused in the result.
    """
    if not buckets:
        return []
    max_bucket = max(buckets)
    return [buckets.get(i, set()) for i in range(max_bucket + 1)]


def get_bucket_range(buckets: BucketSets) -> Optional[BucketRange]:
    """Return the range of buckets that contain cards, or None if all are empty."""
    occupied = [i for i, cards in enumerate(buckets) if cards]
    if not occupied:
        return None
    return BucketRange(min_bucket=occupied[0], max_bucket=occupied[-1])


def practice(buckets: BucketSets, day: int) -> set[Flashcard]:
    """Select the cards to practice on ``day`` (day 0 is the first day)."""
    due: set[Flashcard] = set()
    for i, cards in enumerate(buckets):
        if i == 0 or day % (2 ** i) == 0:
            due.update(cards)
    return due


def update(buckets: BucketMap, card: Flashcard, difficulty: AnswerDifficulty) -> BucketMap:
    """Return a new bucket map with ``card`` moved after a practice trial.

    Args:
        buckets: Current bucket map. Left untouched.
        card: The card that was practiced. A card found in no bucket is
            treated as if it were in bucket 0.
        difficulty: How well the learner did on the card.

    Returns:
        A new bucket map that shares no sets with ``buckets``.
    """
    current = 0
    for bucket, cards in buckets.items():
        if card in cards:
            current = bucket
            break

    if difficulty is AnswerDifficulty.EASY:
        target = current + 1
    elif difficulty is AnswerDifficulty.HARD:
        target = current
    else:
        target = 0

    # Copy every set so the caller's map never sees the move
    new_buckets = {bucket: set(cards) for bucket, cards in buckets.items()}
    if current in new_buckets:
        new_buckets[current].discard(card)
    new_buckets.setdefault(target, set()).add(card)
    return new_buckets


def get_hint(card: Flashcard) -> str:
    """Return the stored hint for the front of ``card``."""
    return card.hint


def compute_progress(buckets: BucketSets, history: Optional[Iterable[PracticeRecord]] = None) -> Progress:
    """Compute statistics about the learner's progress.

    ``history`` is accepted for callers that keep a practice log, but the
    statistics depend only on where the cards are now.
    """
    distribution = [len(cards) for cards in buckets]
    total = sum(distribution)
    learned = total - (distribution[0] if distribution else 0)
    return Progress(
        total_cards=total,
        learned_cards=learned,
        bucket_distribution=distribution,
    )


class LeitnerScheduler:
    """Modified-Leitner bucket scheduler.

    Stateless wrapper over the module functions so callers can depend on
    the ``Scheduler`` protocol.
    """

    new_bucket_map = staticmethod(new_bucket_map)
    to_bucket_sets = staticmethod(to_bucket_sets)
    get_bucket_range = staticmethod(get_bucket_range)
    practice = staticmethod(practice)
    update = staticmethod(update)
    get_hint = staticmethod(get_hint)
    compute_progress = staticmethod(compute_progress)


# Default scheduler instance
default_scheduler = LeitnerScheduler()
