"""
Net result calculation for players in a hand.

Reduces a player's action lines to a signed chip delta. A hand the player
won ends on a line stating the amount collected; a hand the player lost
ends on a line with no amount, and the loss is the sum of everything
committed after the opening line.
"""

from typing import Dict, List, Optional
import logging

from kadet.parser.action_filter import filter_actions
from kadet.parser.data_structures import Player
from kadet.parser.number_scanner import scan_number, NumberOverflowError, HandParseError

logger = logging.getLogger(__name__)


class MissingActionsError(HandParseError):
    """Raised when a player has no lines in the hand to calculate from"""


def _sanitize(action: str, player: Player) -> str:
    """Strip the player's name and seat label so only amounts remain"""
    return action.replace(player.name, "").replace(player.seat, "")


def _scan(action: str) -> Optional[int]:
    try:
        return scan_number(action)
    except NumberOverflowError as e:
        logger.warning(f"Ignoring amount in {action!r}: {e}")
        return None


def compute_winnings(text: str, player: Player) -> int:
    """
    Calculate a player's net chip result for the hand.

    If the player's last line carries an amount, that amount is what they
    won. Otherwise every amount after the first line (the ante or blind
    post) is deducted from the starting stack and the difference is
    returned.

    Args:
        text: Hand history text
        player: Player from the roster

    Returns:
        Winnings (positive) or loss (zero or negative)

    Raises:
        MissingActionsError: If no line of the hand mentions the player
    """
    actions = filter_actions(text, player.name)
    if not actions:
        raise MissingActionsError(f"No action lines for player {player.name!r}")

    sanitized = [_sanitize(action, player) for action in actions]

    won = _scan(sanitized[-1])
    if won is not None:
        return won

    remaining = player.chips
    for action in sanitized[1:]:
        amount = _scan(action)
        if amount is not None:
            remaining -= amount

    return remaining - player.chips


class WinningsCalculator:
    """
    Calculates net results for every player in a hand.

    Each call re-reads the hand text; nothing is cached between players.
    """

    def __init__(self, hand_text: str):
        """
        Initialize winnings calculator.

        Args:
            hand_text: Hand history text
        """
        self.hand_text = hand_text

    def calculate(self, player: Player) -> int:
        return compute_winnings(self.hand_text, player)

    def calculate_all(self, players: List[Player]) -> Dict[Player, int]:
        """
        Calculate winnings for all players in the roster.

        Returns:
            Dictionary mapping each player to their net result, in roster
            order. Players sharing a name keep separate results.
        """
        results = {}
        for player in players:
            results[player] = self.calculate(player)
            logger.debug(f"{player.seat} {player.name}: {results[player]:+d}")
        return results
