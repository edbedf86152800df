#!/usr/bin/env python3
"""
Command line interface for sign practice.
"""

import sys
import json
import argparse
from datetime import date
from pathlib import Path

import yaml

from .recognition import recognize
from .core.landmarks import as_frame
from .scheduling import JsonFileReviewStore, ReviewDeck
from .scheduling.scheduler import as_date
from .utils.config import ConfigManager
from .utils.logger import Logger
from .vocabulary import find_entry, load_vocabulary


def _parse_date(value: str) -> date:
    try:
        return as_date(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid date (expected yyyy-mm-dd): {value}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Practise signs with spaced repetition")
    parser.add_argument(
        "--config",
        type=str,
        help="Path to a YAML configuration merged over the defaults"
    )
    parser.add_argument(
        "--state",
        type=str,
        help="Path to the review state JSON file (overrides storage.path)"
    )

    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True

    signs_parser = subparsers.add_parser("signs", help="List the vocabulary")
    signs_parser.add_argument("--date", type=_parse_date, default=None, help="Reference date (yyyy-mm-dd)")

    due_parser = subparsers.add_parser("due", help="List signs due for review")
    due_parser.add_argument("--date", type=_parse_date, default=None, help="Reference date (yyyy-mm-dd)")
    due_parser.add_argument("--limit", type=int, help="Maximum number of signs (0 for all)")

    review_parser = subparsers.add_parser("review", help="Record a review outcome")
    review_parser.add_argument("sign", type=str, help="Sign id, e.g. \"More\"")
    outcome = review_parser.add_mutually_exclusive_group(required=True)
    outcome.add_argument("--success", dest="success", action="store_true", help="Sign produced correctly")
    outcome.add_argument("--fail", dest="success", action="store_false", help="Sign needs another try")
    review_parser.add_argument("--date", type=_parse_date, default=None, help="Review date (yyyy-mm-dd)")

    recognize_parser = subparsers.add_parser("recognize", help="Classify a landmark frame")
    recognize_parser.add_argument("sign", type=str, help="Target sign label")
    recognize_parser.add_argument("frame", type=str, help="JSON file with the detected hands")

    return parser


def _open_deck(config, state_path, today: date) -> ReviewDeck:
    store = JsonFileReviewStore(state_path or config['storage']['path'])
    deck = ReviewDeck(
        store,
        load_vocabulary(config['vocabulary']),
        queue_limit=int(config['review']['queue_limit'])
    )
    deck.load(today)
    return deck


def _cmd_signs(args, config, logger) -> int:
    today = args.date or date.today()
    deck = _open_deck(config, args.state, today)

    for entry in deck.vocabulary:
        item = deck.item(entry.id)
        check = "AI-checked" if entry.ai_supported else "Manual"
        due = item.due.isoformat() if item else "-"
        print(f"{entry.id:<14} {entry.category:<10} {check:<11} due {due}")
    return 0


def _cmd_due(args, config, logger) -> int:
    today = args.date or date.today()
    deck = _open_deck(config, args.state, today)

    due = deck.due_signs(today, limit=args.limit)
    if not due:
        logger.info("Nothing due - pick any sign for free practice")
    for sign_id in due:
        print(sign_id)
    return 0


def _cmd_review(args, config, logger) -> int:
    today = args.date or date.today()
    deck = _open_deck(config, args.state, today)

    if find_entry(deck.vocabulary, args.sign) is None:
        logger.warning(f"{args.sign} is not in the vocabulary; recording it anyway")

    item = deck.record_review(args.sign, args.success, today)
    logger.log_review(args.sign, args.success, item.to_dict())
    print(json.dumps({args.sign: item.to_dict()}))
    return 0


def _cmd_recognize(args, config, logger) -> int:
    frame_path = Path(args.frame)
    with open(frame_path, 'r') as f:
        hands = json.load(f)

    result = recognize(args.sign, hands)
    payload = result.to_dict() if result else None
    logger.log_recognition(args.sign, payload, len(as_frame(hands)))
    print(json.dumps(payload))
    return 0


COMMANDS = {
    "signs": _cmd_signs,
    "due": _cmd_due,
    "review": _cmd_review,
    "recognize": _cmd_recognize,
}


def main(argv=None) -> int:
    """Main function for the sign practice CLI."""
    args = build_parser().parse_args(argv)

    # Configuration problems are reported before logging is configured
    try:
        config = ConfigManager().load_with_defaults(args.config)
    except (FileNotFoundError, yaml.YAMLError, ValueError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1

    logger = Logger.from_config(config)
    logger.log_config(config)

    try:
        return COMMANDS[args.command](args, config, logger)
    except (OSError, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
