# -*- coding: utf-8 -*-
"""
Day 07: Camel cards
===================

Hands of five cards are ranked first by type (five of a kind down to high
card), then card by card from the left. Total winnings are the sum of
rank * bid, the weakest hand having rank 1.

1. Normal rules, J is the jack;
2. J is a joker: the weakest card in tie-breaks, but it stands in for
   whatever card makes the strongest hand type.
"""

import logging
from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Optional, Tuple

from src.data.loaders import load_text, split_lines

logger = logging.getLogger(__name__)

DAY = 7
HAND_SIZE = 5
JOKER = 'J'

# weakest first
CARD_ORDER = '23456789TJQKA'
JOKER_CARD_ORDER = 'J23456789TQKA'


class HandType(IntEnum):
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    FULL_HOUSE = 4
    FOUR_OF_A_KIND = 5
    FIVE_OF_A_KIND = 6


_TYPE_BY_SHAPE: Dict[Tuple[int, ...], HandType] = {
    (5,): HandType.FIVE_OF_A_KIND,
    (4, 1): HandType.FOUR_OF_A_KIND,
    (3, 2): HandType.FULL_HOUSE,
    (3, 1, 1): HandType.THREE_OF_A_KIND,
    (2, 2, 1): HandType.TWO_PAIR,
    (2, 1, 1, 1): HandType.ONE_PAIR,
    (1, 1, 1, 1, 1): HandType.HIGH_CARD,
}


def hand_type(cards: str, jokers: bool = False) -> HandType:
    """
    Type of a hand

    Args:
        cards: five card labels, e.g. "KTJJT"
        jokers: treat J as a wildcard

    Returns:
        Strongest HandType the cards can form
    """
    counts = Counter(cards)
    wildcards = counts.pop(JOKER, 0) if jokers else 0

    shape = sorted(counts.values(), reverse=True) or [0]
    # jokers always join the largest group
    shape[0] += wildcards
    return _TYPE_BY_SHAPE[tuple(shape)]


@dataclass(frozen=True)
class Hand:
    cards: str
    bid: int

    @classmethod
    def from_line(cls, line: str) -> 'Hand':
        """Parse "32T3K 765" """
        parts = line.split()
        if len(parts) != 2:
            raise ValueError(f"Expected cards and bid: {line!r}")
        cards, bid = parts
        if len(cards) != HAND_SIZE or any(card not in CARD_ORDER for card in cards):
            raise ValueError(f"Invalid hand {cards!r}")
        return cls(cards=cards, bid=int(bid))

    def sort_key(self, jokers: bool = False) -> Tuple[HandType, Tuple[int, ...]]:
        order = JOKER_CARD_ORDER if jokers else CARD_ORDER
        return hand_type(self.cards, jokers), tuple(order.index(card) for card in self.cards)


def parse_hands(text: str) -> List[Hand]:
    return [Hand.from_line(line) for line in split_lines(text)]


def total_winnings(hands: List[Hand], jokers: bool = False) -> int:
    """Sum of rank * bid with hands ordered weakest to strongest"""
    ranked = sorted(hands, key=lambda hand: hand.sort_key(jokers))
    return sum(rank * hand.bid for rank, hand in enumerate(ranked, start=1))


def main(input_path: Optional[str] = None) -> Dict[str, int]:
    """Solve both parts of day 07"""
    hands = parse_hands(load_text(DAY, input_path))
    logger.info(f"Day 07: {len(hands)} hands")

    part1 = total_winnings(hands)
    print(f"Part 1: Total winnings: {part1}")

    part2 = total_winnings(hands, jokers=True)
    print(f"Part 2: Total winnings: {part2}")

    return {'part1': part1, 'part2': part2}


if __name__ == '__main__':
    main()
