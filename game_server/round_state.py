# immutable round state.
# Every transition returns a new RoundState; nothing mutates in place, so a
# controller can swap its reference atomically and readers never see a
# half-applied guess.
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from game_server import config
from game_server.card_utils.card import Card
from game_server.card_utils.compare import ComparisonResult


class RoundStatus(str, Enum):
    IDLE = "idle"
    IN_PROGRESS = "in_progress"
    WON = "won"


def hint_count(difficulty: Optional[str]) -> int:
    return config.HINT_COUNTS.get(difficulty, config.DEFAULT_HINT_COUNT)


@dataclass(frozen=True)
class GuessEntry:
    card: Card
    result: ComparisonResult

    def to_dict(self) -> Dict[str, Any]:
        return {"card": self.card.to_dict(), "result": self.result.to_dict()}


@dataclass(frozen=True)
class RoundState:
    round_id: str
    status: RoundStatus = RoundStatus.IDLE
    difficulty: str = config.DEFAULT_DIFFICULTY
    answer: Optional[Card] = None
    guessed_names: Tuple[str, ...] = ()
    history: Tuple[GuessEntry, ...] = ()

    @property
    def hint_count(self) -> int:
        return hint_count(self.difficulty)

    def has_guessed(self, name: str) -> bool:
        return name in self.guessed_names

    def started(self, answer: Card, difficulty: str) -> "RoundState":
        return replace(
            self,
            status=RoundStatus.IN_PROGRESS,
            difficulty=difficulty,
            answer=answer,
            guessed_names=(),
            history=(),
        )

    def with_guess_name(self, name: str) -> "RoundState":
        if self.has_guessed(name):
            return self
        return replace(self, guessed_names=self.guessed_names + (name,))

    def without_guess_name(self, name: str) -> "RoundState":
        return replace(self, guessed_names=tuple(n for n in self.guessed_names if n != name))

    def with_entry(self, entry: GuessEntry) -> "RoundState":
        # a name match is terminal; later entries never move the round back
        won = self.status is RoundStatus.WON or entry.result.is_correct
        return replace(
            self,
            history=self.history + (entry,),
            status=RoundStatus.WON if won else self.status,
        )

    def answer_summary(self) -> Optional[Dict[str, Any]]:
        """Answer details, only once the round is won."""
        if self.status is not RoundStatus.WON or self.answer is None:
            return None
        return {"name": self.answer.name, "desc": self.answer.desc}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "round_id": self.round_id,
            "status": self.status.value,
            "difficulty": self.difficulty,
            "hint_count": self.hint_count,
            "guesses": list(self.guessed_names),
            "history": [entry.to_dict() for entry in self.history],
            "answer": self.answer_summary(),
        }
