"""
Data structures for hand history parsing.

These classes represent the parsed components of a single hand and are used
by the winnings pipeline and the API layer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Dict

from kadet.parser.number_scanner import scan_number, NumberOverflowError


class Variant(Enum):
    """Poker game variants"""
    HOLDEM = "holdem"


class Limits(Enum):
    """Betting structures"""
    NO_LIMIT = "no_limit"


class MaxSize(Enum):
    """Table seat capacity"""
    SIX = 6
    NINE = 9


@dataclass(frozen=True)
class Player:
    """
    Represents a seated player in a hand.

    Attributes:
        seat: Raw seat label before the colon (e.g. 'Seat 5')
        name: Player's screen name
        chips: Stack size at start of hand
    """
    seat: str
    name: str
    chips: int = 0

    @classmethod
    def from_line(cls, line: str) -> Optional["Player"]:
        """
        Build a player from a seat declaration line.

        Expects the 'Seat N: NAME (CHIPS in chips)' layout. The name sits
        between ': ' and ' (' and the stack is scanned from the parenthesis on.

        Args:
            line: One seat declaration line

        Returns:
            Player, or None if the line can't be read as a seat declaration
        """
        start = line.find(':')
        if start == -1:
            return None

        end = line.find('(', start)
        if end == -1:
            return None

        try:
            chips = scan_number(line[end:])
        except NumberOverflowError:
            return None

        if chips is None:
            return None

        return cls(
            seat=line[:start],
            name=line[start + 2:end - 1],
            chips=chips
        )

    def __repr__(self) -> str:
        return f"Player({self.seat}, {self.name}, {self.chips})"


@dataclass
class Poker:
    """Descriptive table model: variant, limits and seat capacity"""
    variant: Variant = Variant.HOLDEM
    limits: Limits = Limits.NO_LIMIT
    table_size: MaxSize = MaxSize.NINE


@dataclass
class HandSummary:
    """
    Result of parsing a single hand.

    Attributes:
        player_count: Declared table capacity
        players: Roster in seat declaration order
        winnings: Net chip result keyed by player
    """
    player_count: int
    players: List[Player] = field(default_factory=list)
    winnings: Dict[Player, int] = field(default_factory=dict)

    def get_player(self, player_name: str) -> Optional[Player]:
        """Get player by name"""
        for player in self.players:
            if player.name == player_name:
                return player
        return None

    def get_winnings(self, player_name: str) -> Optional[int]:
        """Net result of the first seated player with this name"""
        player = self.get_player(player_name)
        if player is None:
            return None
        return self.winnings[player]

    def winners(self) -> List[str]:
        """Names of players with a positive result"""
        return [player.name for player, amount in self.winnings.items() if amount > 0]

    def total(self) -> int:
        return sum(self.winnings.values())

    def __repr__(self) -> str:
        return f"HandSummary(seats={self.player_count}, players={len(self.players)})"
