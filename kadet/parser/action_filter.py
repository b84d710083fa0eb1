"""
Action line selection for hand histories.

Any line of the hand that names a player counts as one of that player's
action lines: postings, bets, showdown lines and summary entries alike.
"""

from typing import List


def split_lines(text: str) -> List[str]:
    """Split trimmed hand text into lines, dropping any carriage returns"""
    trimmed = text.strip()
    if not trimmed:
        return []
    return [line.rstrip('\r') for line in trimmed.split('\n')]


def filter_actions(text: str, player_name: str) -> List[str]:
    """
    Get every line of the hand that mentions a player.

    Matching is a plain substring test: no word boundaries, no case
    folding. A name contained in another player's name matches that
    player's lines too.

    Args:
        text: Hand history text
        player_name: Exact screen name

    Returns:
        Matching lines in original order
    """
    return [line for line in split_lines(text) if player_name in line]
