# Domain models
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


@dataclass(frozen=True, eq=False)
class Flashcard:
    """Core domain model for a flashcard.

    Cards compare and hash by identity: two cards with the same text are
    still two different cards.
    """
    front: str = ""
    back: str = ""
    hint: str = ""
    tags: tuple[str, ...] = ()


class AnswerDifficulty(Enum):
    """How well the learner recalled a card in one practice trial."""
    WRONG = 0
    HARD = 1
    EASY = 2


BucketMap = dict[int, set[Flashcard]]
BucketSets = list[set[Flashcard]]


@dataclass(frozen=True)
class BucketRange:
    """Lowest and highest bucket holding at least one card."""
    min_bucket: int
    max_bucket: int


@dataclass
class Progress:
    """Summary of learning progress over the current buckets."""
    total_cards: int = 0
    learned_cards: int = 0
    bucket_distribution: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class PracticeRecord:
    """One answered practice trial."""
    card: Flashcard
    difficulty: AnswerDifficulty
    day: Optional[int] = None
