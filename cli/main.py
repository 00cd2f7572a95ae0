#!/usr/bin/env python3
"""Leitbox CLI - inspect and simulate a Modified-Leitner flashcard deck."""
import argparse
import csv
import json
from pathlib import Path
from typing import Optional

import structlog

from config import Settings, load_settings
from core import AnswerDifficulty, BucketMap, Flashcard
from logging_config import configure_logging
from scheduler import (
    compute_progress,
    get_bucket_range,
    new_bucket_map,
    practice,
    to_bucket_sets,
    update,
)

logger = structlog.get_logger(__name__)

DIFFICULTY_CHOICES = {d.name.lower(): d for d in AnswerDifficulty}


def _parse_import_file(path: Path) -> list[dict]:
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    if path.suffix.lower() == ".jsonl":
        rows = []
        with path.open("r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if line:
                    rows.append(json.loads(line))
        return rows
    if path.suffix.lower() == ".json":
        data = json.loads(path.read_text(encoding="utf-8"))
        if isinstance(data, list):
            return data
        raise ValueError("JSON file must be a list of objects.")
    if path.suffix.lower() == ".csv":
        with path.open("r", encoding="utf-8-sig", newline="") as f:
            return list(csv.DictReader(f))
    raise ValueError("Unsupported format. Use .jsonl, .json, or .csv")


def _text_field(row: dict, name: str) -> str:
    value = row.get(name)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"Field '{name}' must be text, got {type(value).__name__}.")
    return value.strip()


def _parse_tags(raw) -> tuple[str, ...]:
    if not raw:
        return ()
    if isinstance(raw, str):
        raw = raw.split(",")
    elif not isinstance(raw, (list, tuple)):
        raise ValueError(f"Field 'tags' must be a list or comma-separated text, got {type(raw).__name__}.")
    return tuple(str(t).strip() for t in raw if str(t).strip())


def load_deck(path: Path) -> list[Flashcard]:
    """Read flashcards from a json/jsonl/csv file, skipping rows without a front."""
    cards = []
    for row in _parse_import_file(path):
        if not isinstance(row, dict):
            raise ValueError(f"Deck rows must be objects, got {type(row).__name__}.")
        front = _text_field(row, "front")
        if not front:
            continue
        cards.append(Flashcard(
            front=front,
            back=_text_field(row, "back"),
            hint=_text_field(row, "hint"),
            tags=_parse_tags(row.get("tags")),
        ))
    logger.info("deck_loaded", path=str(path), cards=len(cards))
    return cards


def simulate(buckets: BucketMap, days: int, difficulty: AnswerDifficulty) -> BucketMap:
    """Answer every due card with ``difficulty`` on days 0..days-1."""
    for day in range(days):
        due = practice(to_bucket_sets(buckets), day)
        for card in due:
            buckets = update(buckets, card, difficulty)
        logger.debug("day_simulated", day=day, practiced=len(due))
    return buckets


def _print_progress(buckets: BucketMap) -> None:
    sets = to_bucket_sets(buckets)
    progress = compute_progress(sets)
    bucket_range = get_bucket_range(sets)
    print(f"Total cards: {progress.total_cards}")
    print(f"Learned cards: {progress.learned_cards}")
    if bucket_range is None:
        print("Bucket range: -")
    else:
        print(f"Bucket range: {bucket_range.min_bucket}-{bucket_range.max_bucket}")
    for i, count in enumerate(progress.bucket_distribution):
        print(f"  bucket {i}: {count}")


def practice_day(args: argparse.Namespace, settings: Settings) -> None:
    cards = load_deck(Path(args.deck))
    due = practice(to_bucket_sets(new_bucket_map(cards)), args.day)
    if not due:
        print(f"No cards due on day {args.day}.")
        return
    print(f"# Day {args.day}\n")
    for card in sorted(due, key=lambda c: c.front):
        print(f"- {card.front}")


def simulate_deck(args: argparse.Namespace, settings: Settings) -> None:
    days = args.days if args.days is not None else settings.simulate_days
    name = args.difficulty or settings.default_difficulty
    difficulty = DIFFICULTY_CHOICES.get(name.lower())
    if difficulty is None:
        raise ValueError(f"Unknown difficulty: {name}")

    buckets = simulate(new_bucket_map(load_deck(Path(args.deck))), days, difficulty)
    print(f"Simulated {days} day(s) answering '{difficulty.name.lower()}'.\n")
    _print_progress(buckets)


def show_progress(args: argparse.Namespace, settings: Settings) -> None:
    _print_progress(new_bucket_map(load_deck(Path(args.deck))))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Leitbox: a Modified-Leitner flashcard scheduler.")
    parser.add_argument("--config", default="", help="Path to config.json.")
    parser.add_argument("--log-level", default="", help="Log level (DEBUG, INFO, ...).")
    sub = parser.add_subparsers(dest="command", required=True)

    p_practice = sub.add_parser("practice", help="List the cards due on a day.")
    p_practice.add_argument("--deck", required=True, help="Deck file (json/jsonl/csv).")
    p_practice.add_argument("--day", type=int, default=0, help="Day number, starting at 0.")
    p_practice.set_defaults(func=practice_day)

    p_simulate = sub.add_parser("simulate", help="Simulate daily practice with one fixed answer.")
    p_simulate.add_argument("--deck", required=True, help="Deck file (json/jsonl/csv).")
    p_simulate.add_argument("--days", type=int, default=None, help="Number of days to simulate.")
    p_simulate.add_argument(
        "--difficulty", choices=sorted(DIFFICULTY_CHOICES), default=None, help="Answer given to every due card."
    )
    p_simulate.set_defaults(func=simulate_deck)

    p_progress = sub.add_parser("progress", help="Show progress statistics for a deck.")
    p_progress.add_argument("--deck", required=True, help="Deck file (json/jsonl/csv).")
    p_progress.set_defaults(func=show_progress)

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level or "INFO")
    settings = load_settings(Path(args.config) if args.config else None)
    if not args.log_level:
        configure_logging(settings.log_level)
    try:
        args.func(args, settings)
    except (FileNotFoundError, ValueError) as exc:
        logger.error("command_failed", command=args.command, error=str(exc))
        parser.exit(1, f"error: {exc}\n")


if __name__ == "__main__":
    main()
