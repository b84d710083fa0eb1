"""Poker hand history parser for PokerStars format"""

from kadet.parser.pokerstars_parser import (
    PokerStarsParser, parse_player_count, parse_roster
)
from kadet.parser.action_filter import filter_actions
from kadet.parser.number_scanner import scan_number, HandParseError, NumberOverflowError
from kadet.parser.winnings_calculator import (
    WinningsCalculator, MissingActionsError, compute_winnings
)
from kadet.parser.data_structures import (
    Player, HandSummary, Poker, Variant, Limits, MaxSize
)

__all__ = [
    'PokerStarsParser',
    'parse_player_count',
    'parse_roster',
    'filter_actions',
    'compute_winnings',
    'scan_number',
    'WinningsCalculator',
    'HandParseError',
    'NumberOverflowError',
    'MissingActionsError',
    'Player',
    'HandSummary',
    'Poker',
    'Variant',
    'Limits',
    'MaxSize'
]
