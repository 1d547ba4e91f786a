from pydantic import BaseModel
from typing import Optional


class StartRoundRequest(BaseModel):
    difficulty: Optional[str] = None  # falls back to GAME_DEFAULT_DIFFICULTY


class GuessRequest(BaseModel):
    round_id: str
    guess: str
