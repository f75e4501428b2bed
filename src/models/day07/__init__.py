# -*- coding: utf-8 -*-
"""
Day 07: Camel cards
===================
"""

from .camel_cards import main, Hand, HandType, hand_type, parse_hands, total_winnings
