# -*- coding: utf-8 -*-
"""
Day 04: Scratchcards
====================

Each card lists winning numbers and the numbers you have; its match count is
the size of their intersection.

1. A card is worth 1 point for its first match, doubled for every further
   match; sum the points;
2. A card with n matches wins one copy of each of the next n cards (for every
   copy of it held). Count the cards in the pile at the end.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

import numpy as np

from src.data.loaders import load_text, split_lines
from src.utils.preprocessing import strip_label

logger = logging.getLogger(__name__)

DAY = 4


@dataclass(frozen=True)
class Scratchcard:
    id: int
    matches: int

    @property
    def points(self) -> int:
        return 2 ** (self.matches - 1) if self.matches > 0 else 0


def parse_card(line: str) -> Scratchcard:
    """
    Parse one card

    Example line:
        Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53
    """
    header, sep, body = strip_label(line, 'Card').partition(':')
    winning, bar, have = body.partition('|')
    if not sep or not bar:
        raise ValueError(f"Malformed scratchcard: {line!r}")

    winning_set = {int(n) for n in winning.split()}
    have_set = {int(n) for n in have.split()}
    return Scratchcard(id=int(header), matches=len(winning_set & have_set))


def parse_cards(text: str) -> List[Scratchcard]:
    return [parse_card(line) for line in split_lines(text)]


def total_points(cards: List[Scratchcard]) -> int:
    return sum(card.points for card in cards)


def process_card_pile(cards: List[Scratchcard]) -> int:
    """
    Total number of cards once all copies have been won

    Copies never extend past the end of the table.

    Args:
        cards: cards in id order

    Returns:
        Number of original cards plus copies
    """
    pile = np.ones(len(cards), dtype=np.int64)
    for idx, card in enumerate(cards):
        pile[idx + 1: idx + 1 + card.matches] += pile[idx]
    return int(pile.sum())


def main(input_path: Optional[str] = None) -> Dict[str, int]:
    """Solve both parts of day 04"""
    cards = parse_cards(load_text(DAY, input_path))
    logger.info(f"Day 04: {len(cards)} scratchcards")

    part1 = total_points(cards)
    print(f"Part 1: Total points: {part1}")

    part2 = process_card_pile(cards)
    print(f"Part 2: Total cards: {part2}")

    return {'part1': part1, 'part2': part2}


if __name__ == '__main__':
    main()
