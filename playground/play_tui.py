#!/usr/bin/env python3
"""
Interactive poker hand evaluator in the terminal.

Usage:
1) Start the evaluator:
   python playground/play_tui.py

2) Reproducible "deal" command:
   python playground/play_tui.py --seed 42

Input tips:
- "Ah Kd Qc Js Th" or "A♥ K♦ Q♣ J♠ 10♥": evaluate a hand (it is remembered)
- "compare": compare the remembered hand against the next one entered
- "compare 2h 2d 5c 9s Kh": compare in one line
- "deal": deal a random hand
- "clear": forget the remembered hand
- "help": show instructions
- "exit" / "quit": leave
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box
from rich.prompt import Prompt

from poker_hands.rules import Card, Hand, Suit
from poker_hands.rules.ranks import RANK_SYMBOLS, SUIT_SYMBOLS
from poker_hands.session import EvaluatorSession, ReplyKind, SessionReply


# ==============================================================================
# Constants & Config
# ==============================================================================

SUIT_STYLES = {
    Suit.HEARTS: "bold red1",
    Suit.DIAMONDS: "bold red1",
    Suit.CLUBS: "bold green1",
    Suit.SPADES: "bold cyan1",
}

OUTCOME_STYLES = {
    "first wins": "bold green",
    "second wins": "bold magenta",
    "tie": "bold yellow",
}

console = Console()
logger = logging.getLogger(__name__)

# ==============================================================================
# UI Helpers
# ==============================================================================

def get_card_rich_text(card: Card) -> Text:
    """Return a Rich Text object for a card with symbol and color."""
    rank_char = RANK_SYMBOLS[card.rank]
    symbol = SUIT_SYMBOLS[card.suit]

    # Three lines: rank top-left, suit centered, rank bottom-right
    line1 = f"{rank_char:<3}"
    line2 = f" {symbol} "
    line3 = f"{rank_char:>3}"
    return Text(f"{line1}\n{line2}\n{line3}", style=SUIT_STYLES[card.suit])


def render_hand_visual(cards: Sequence[Card]) -> Table:
    """Render a horizontal list of cards."""
    grid = Table.grid(padding=(0, 1))
    grid.add_row(*[Panel(get_card_rich_text(c), expand=False, padding=(0, 1), border_style="white") for c in cards])
    return grid


def render_hand_panel(hand: Hand, title: str = "Hand") -> Panel:
    """Cards plus category and comparison key."""
    caption = Text(hand.category, style="bold yellow", justify="center")
    key = Text(f"key {list(hand.key)}", style="dim", justify="center")
    return Panel(Group(render_hand_visual(hand.cards), caption, key), title=title, box=box.ROUNDED, expand=False)


def render_reply(reply: SessionReply) -> Optional[object]:
    """Turn a session reply into something printable."""
    if reply.kind == ReplyKind.HAND and reply.hand is not None:
        return render_hand_panel(reply.hand)
    if reply.kind == ReplyKind.COMPARE and reply.hand is not None and reply.previous is not None:
        grid = Table.grid(padding=(0, 2))
        grid.add_row(render_hand_panel(reply.previous, "First"), render_hand_panel(reply.hand, "Second"))
        verdict = Text(reply.outcome.upper(), style=OUTCOME_STYLES.get(reply.outcome, "bold"), justify="center")
        return Group(grid, verdict)
    if reply.kind == ReplyKind.ERROR:
        return Text(f"Error: {reply.message}", style="red")
    if reply.kind == ReplyKind.HELP:
        return Panel(reply.message, title="Help", box=box.ROUNDED)
    if reply.kind == ReplyKind.EMPTY:
        return None
    return Text(reply.message, style="dim")


def make_header() -> Panel:
    title = Text("Poker Hand Evaluator", style="bold white on blue", justify="center")
    return Panel(title, box=box.HEAVY)


# ==============================================================================
# Main Loop
# ==============================================================================

def run_loop(session: EvaluatorSession) -> None:
    console.print(make_header())
    console.print(render_reply(session.handle("help")))

    while True:
        prompt = "Compare with" if session.awaiting_compare else "Hand"
        try:
            line = Prompt.ask(f"[bold cyan]{prompt}[/bold cyan]")
        except (KeyboardInterrupt, EOFError):
            console.print("\n[dim]Bye.[/dim]")
            return

        reply = session.handle(line)
        if reply.kind == ReplyKind.EXIT:
            console.print(f"[dim]{reply.message}[/dim]")
            return

        renderable = render_reply(reply)
        if renderable is not None:
            console.print(renderable)


def main():
    parser = argparse.ArgumentParser(description="Poker Hands: interactive evaluator")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the deal command")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()
    if args.seed is not None and args.seed < 0:
        parser.error("--seed must be non-negative")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    run_loop(EvaluatorSession(seed=args.seed))


if __name__ == "__main__":
    main()
