"""
FastAPI backend for the hand history winnings parser.

Provides REST API endpoints for:
- Reading the table size and seated players of a hand
- Listing the lines that mention a player
- Calculating each player's net result for a hand
"""

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
import logging

from kadet.config import get_settings
from kadet.parser import PokerStarsParser, Player
from kadet.validation import InputValidator

# Get settings
settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Hand History API",
    description="Parses PokerStars hand histories and calculates player winnings",
    version="1.0.0",
    docs_url=None if settings.is_production else "/docs",
    redoc_url=None if settings.is_production else "/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Accept"],
)

parser = PokerStarsParser()

# ========================================
# Pydantic Models
# ========================================


class HandRequest(BaseModel):
    """Request model carrying a single hand history"""
    text: str = Field(..., description="Full text of one PokerStars hand history")


class ActionsRequest(HandRequest):
    """Request model for a player's action lines"""
    player_name: str = Field(..., description="Exact screen name as it appears in the hand")


class WinningsRequest(HandRequest):
    """Request model for winnings calculation"""
    player_name: Optional[str] = Field(None, description="Limit the result to one player")


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    timestamp: datetime


class PlayerCountResponse(BaseModel):
    player_count: int


class PlayerResponse(BaseModel):
    """Seated player"""
    seat: str
    name: str
    chips: int


class PlayersResponse(BaseModel):
    players: List[PlayerResponse]


class ActionsResponse(BaseModel):
    player_name: str
    actions: List[str]


class PlayerResultResponse(PlayerResponse):
    """Seated player with net result"""
    winnings: int


class WinningsResponse(BaseModel):
    """Response model for winnings calculation"""
    player_count: int
    results: List[PlayerResultResponse]


def _player_response(player: Player) -> PlayerResponse:
    return PlayerResponse(seat=player.seat, name=player.name, chips=player.chips)


def _unparseable() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail="Could not read the table size from this hand history"
    )


# ========================================
# API Endpoints
# ========================================

@app.get("/", tags=["Root"])
async def root():
    """Root endpoint"""
    return {
        "message": "Hand History API",
        "version": "1.0.0",
        "docs": app.docs_url,
        "health": "/api/health"
    }


@app.get(
    "/api/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="Health check"
)
async def health_check():
    """Health check endpoint"""
    return HealthResponse(status="healthy", timestamp=datetime.now())


@app.post(
    "/api/hands/player-count",
    response_model=PlayerCountResponse,
    tags=["Hands"],
    summary="Read table size",
    description="Read the declared seat count of a hand"
)
async def get_player_count(request: HandRequest):
    text = InputValidator.validate_hand_text(request.text)

    player_count = parser.parse_player_count(text)
    if player_count is None:
        raise _unparseable()

    return PlayerCountResponse(player_count=player_count)


@app.post(
    "/api/hands/players",
    response_model=PlayersResponse,
    tags=["Hands"],
    summary="List seated players",
    description="List seated players and starting stacks in seat declaration order"
)
async def get_players(request: HandRequest):
    text = InputValidator.validate_hand_text(request.text)

    players = parser.parse_roster(text)
    if players is None:
        raise _unparseable()

    return PlayersResponse(players=[_player_response(p) for p in players])


@app.post(
    "/api/hands/actions",
    response_model=ActionsResponse,
    tags=["Hands"],
    summary="List a player's action lines"
)
async def get_actions(request: ActionsRequest):
    text = InputValidator.validate_hand_text(request.text)
    player_name = InputValidator.validate_player_name(request.player_name)

    return ActionsResponse(
        player_name=player_name,
        actions=parser.filter_actions(text, player_name)
    )


@app.post(
    "/api/hands/winnings",
    response_model=WinningsResponse,
    tags=["Hands"],
    summary="Calculate winnings",
    description="Calculate the net chip result of each seated player, or of one player"
)
async def get_winnings(request: WinningsRequest):
    """
    Calculate net results for a hand.

    Process:
    1. Read seat count and roster
    2. Optionally narrow the roster to the requested player
    3. Reduce each player's action lines to a net result

    Returns:
        Seat count and one result per player
    """
    text = InputValidator.validate_hand_text(request.text)

    summary = parser.parse_single_hand(text)
    if summary is None:
        raise _unparseable()

    players = summary.players
    if request.player_name is not None:
        player_name = InputValidator.validate_player_name(request.player_name)
        player = summary.get_player(player_name)
        if player is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Player '{player_name}' is not seated in this hand"
            )
        players = [player]

    logger.info(f"Calculated winnings for {len(players)} player(s)")

    return WinningsResponse(
        player_count=summary.player_count,
        results=[
            PlayerResultResponse(
                seat=p.seat,
                name=p.name,
                chips=p.chips,
                winnings=summary.winnings[p]
            )
            for p in players
        ]
    )


@app.on_event("startup")
async def startup_event():
    """Run on application startup"""
    logger.info(f"Starting Hand History API ({settings.environment})")


@app.on_event("shutdown")
async def shutdown_event():
    """Run on application shutdown"""
    logger.info("Shutting down Hand History API")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "kadet.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        reload=not settings.is_production
    )
