"""
PokerStars hand history parser.

Reads a single PokerStars tournament hand history and extracts the table
capacity, the seated players with their starting stacks, and the lines that
mention each player. Winnings are reduced from those lines by
WinningsCalculator.
"""

from typing import List, Optional
import logging

from kadet.parser.action_filter import split_lines, filter_actions
from kadet.parser.data_structures import Player, HandSummary
from kadet.parser.winnings_calculator import WinningsCalculator, compute_winnings

logger = logging.getLogger(__name__)

# Header line and table/button line come before the seat declarations
HEADER_LINES = 2


def parse_player_count(text: str) -> Optional[int]:
    """
    Extract the declared table capacity.

    Reads the first digit in front of the colon on the last line of the
    hand. Only single digit capacities can be read this way, so a 10-max
    table reports 1.

    Args:
        text: Hand history text

    Returns:
        Seat count, or None if the last line has no colon or no digit
    """
    lines = split_lines(text)
    if not lines:
        return None

    seat, colon, _ = lines[-1].partition(':')
    if not colon:
        return None

    for char in seat:
        if '0' <= char <= '9':
            return int(char)

    return None


def parse_roster(text: str) -> Optional[List[Player]]:
    """
    Extract the seated players in declaration order.

    Takes as many lines after the header as the table has seats. Lines that
    don't read as seat declarations are skipped, so the roster can be
    shorter than the seat count.

    Args:
        text: Hand history text

    Returns:
        List of Player objects, or None if the seat count can't be read
    """
    player_count = parse_player_count(text)
    if player_count is None:
        logger.debug("No seat count found, skipping roster")
        return None

    seat_lines = split_lines(text)[HEADER_LINES:HEADER_LINES + player_count]

    players = []
    for line in seat_lines:
        player = Player.from_line(line)
        if player is None:
            logger.debug(f"Dropped seat line: {line!r}")
            continue
        players.append(player)

    return players


class PokerStarsParser:
    """
    Parser for PokerStars hand history format.

    Thin wrapper over the module level functions that also builds a full
    HandSummary with every player's winnings.
    """

    def parse_player_count(self, hand_text: str) -> Optional[int]:
        return parse_player_count(hand_text)

    def parse_roster(self, hand_text: str) -> Optional[List[Player]]:
        return parse_roster(hand_text)

    def filter_actions(self, hand_text: str, player_name: str) -> List[str]:
        return filter_actions(hand_text, player_name)

    def compute_winnings(self, hand_text: str, player: Player) -> int:
        return compute_winnings(hand_text, player)

    def parse_single_hand(self, hand_text: str) -> Optional[HandSummary]:
        """
        Parse a single hand history.

        Args:
            hand_text: Text of a single hand history

        Returns:
            HandSummary with roster and winnings, or None if the hand
            can't be parsed

        Example:
            parser = PokerStarsParser()
            summary = parser.parse_single_hand(text)
            print(summary.winnings)
        """
        if not hand_text.strip():
            return None

        player_count = parse_player_count(hand_text)
        players = parse_roster(hand_text)
        if player_count is None or players is None:
            logger.info("Could not read seat count, hand skipped")
            return None

        calculator = WinningsCalculator(hand_text)
        summary = HandSummary(
            player_count=player_count,
            players=players,
            winnings=calculator.calculate_all(players)
        )

        logger.debug(f"Parsed hand with {len(players)}/{player_count} players")
        return summary
