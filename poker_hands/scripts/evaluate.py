#!/usr/bin/env python
"""Command-line hand evaluator.

Classifies hands written in card notation, compares two hands, or deals
random hands from a shuffled deck and reports the winner.

Usage:
    python -m poker_hands.scripts.evaluate "Ah Kh Qh Jh Th"
    python -m poker_hands.scripts.evaluate "7h 7d 7c 7s 9h" "5h 4c 3s 2d Ah"
    python -m poker_hands.scripts.evaluate --compare "Kh Kd Kc Ks 5h" "Kh Kd Kc Ks Ah"
    python -m poker_hands.scripts.evaluate --deal 2 --seed 42
    python -m poker_hands.scripts.evaluate --help
"""

import argparse
import logging
import sys
from dataclasses import dataclass, field
from typing import List, Optional

from poker_hands.engine import Deck, deal_hands
from poker_hands.errors import PokerError
from poker_hands.rules import Hand, best_hand, compare_hands, describe_outcome, parse_hand
from poker_hands.utils.seeding import make_rng

logger = logging.getLogger(__name__)

# Exit code for malformed input (argparse uses the same for usage errors)
EXIT_BAD_INPUT = 2


@dataclass
class EvaluateConfig:
    """Evaluator configuration."""

    hands: List[str] = field(default_factory=list)
    compare: bool = False
    deal: int = 0
    seed: Optional[int] = None
    verbose: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "EvaluateConfig":
        return cls(
            hands=list(args.hands),
            compare=args.compare,
            deal=args.deal,
            seed=args.seed,
            verbose=args.verbose,
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Classify and compare five-card poker hands")
    parser.add_argument(
        "hands",
        nargs="*",
        help="Hands in card notation, e.g. 'Ah Kh Qh Jh Th' or 'A♥ K♥ Q♥ J♥ 10♥'",
    )
    parser.add_argument("--compare", action="store_true", help="Compare exactly two hands")
    parser.add_argument("--deal", type=int, default=0, help="Deal N random hands and show the winner")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the shuffle")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def format_hand_line(label: str, hand: Hand) -> str:
    return f"{label}: {hand}"


def run_classify(hand_strings: List[str]) -> List[Hand]:
    """Classify and print each hand."""
    hands = [parse_hand(s) for s in hand_strings]
    for i, hand in enumerate(hands):
        label = f"Hand {i + 1}" if len(hands) > 1 else "Hand"
        print(format_hand_line(label, hand))
    return hands


def run_compare(first: str, second: str) -> str:
    """Compare two hands and print the outcome."""
    hand1 = parse_hand(first)
    hand2 = parse_hand(second)
    outcome = describe_outcome(compare_hands(hand1, hand2))
    print(format_hand_line("First", hand1))
    print(format_hand_line("Second", hand2))
    print(f"Result: {outcome}")
    return outcome


def run_deal(num_hands: int, seed: Optional[int] = None) -> List[Hand]:
    """Deal hands from a freshly shuffled deck and print the winner(s)."""
    deck = Deck.standard().shuffle(make_rng(seed))
    hands = deal_hands(deck, num_hands)
    for i, hand in enumerate(hands):
        print(format_hand_line(f"Hand {i + 1}", hand))

    winners = best_hand(hands)
    if len(winners) == 1:
        print(f"\nHand {winners[0] + 1} wins!")
    else:
        print("\nTie between hands " + ", ".join(str(i + 1) for i in winners))
    return hands


def run(config: EvaluateConfig) -> int:
    if config.seed is not None and config.seed < 0:
        print("Error: --seed must be non-negative", file=sys.stderr)
        return EXIT_BAD_INPUT

    if config.deal:
        if config.deal < 0:
            print("Error: --deal must be positive", file=sys.stderr)
            return EXIT_BAD_INPUT
        run_deal(config.deal, seed=config.seed)
        return 0

    if config.compare:
        if len(config.hands) != 2:
            print("Error: --compare needs exactly two hands", file=sys.stderr)
            return EXIT_BAD_INPUT
        run_compare(config.hands[0], config.hands[1])
        return 0

    if not config.hands:
        print("Error: no hand given (see --help)", file=sys.stderr)
        return EXIT_BAD_INPUT

    hands = run_classify(config.hands)
    if len(hands) == 2:
        print(f"Result: {describe_outcome(compare_hands(hands[0], hands[1]))}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = EvaluateConfig.from_args(args)

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return run(config)
    except PokerError as exc:
        logger.debug("Rejected input %r", config.hands, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT


if __name__ == "__main__":
    sys.exit(main())
