"""
Input validation utilities for the hand history API.
"""

import logging
from fastapi import HTTPException, status

from kadet.config import get_settings

logger = logging.getLogger(__name__)


class InputValidator:
    """Utilities for validating user input."""

    MAX_PLAYER_NAME_LENGTH = 100

    @staticmethod
    def validate_hand_text(hand_text: str) -> str:
        """
        Validate submitted hand history text.

        Args:
            hand_text: Raw hand history

        Returns:
            The hand text, unchanged

        Raises:
            HTTPException: If the text is empty or too large
        """
        if not hand_text or not hand_text.strip():
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Hand history text is required"
            )

        max_chars = get_settings().max_hand_chars
        if len(hand_text) > max_chars:
            logger.warning(f"Rejected hand history of {len(hand_text)} chars")
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"Hand history too large (max {max_chars} chars)"
            )

        return hand_text

    @staticmethod
    def validate_player_name(player_name: str) -> str:
        """
        Validate a player name.

        Names are matched literally against the hand, so they are not
        stripped or normalised here.

        Raises:
            HTTPException: If player name is invalid
        """
        if not player_name or not player_name.strip():
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Player name is required"
            )

        if len(player_name) > InputValidator.MAX_PLAYER_NAME_LENGTH:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Player name too long (max {InputValidator.MAX_PLAYER_NAME_LENGTH} chars)"
            )

        return player_name
