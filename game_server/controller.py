# round controller and the in-memory round registry.
import threading
import uuid
from collections import OrderedDict
from typing import Optional

from game_server import config
from game_server.card_utils.compare import compare
from game_server.card_utils.reference_lists import ATTRIBUTES, RACES, ReferenceList
from game_server.errors import (
    CardLookupError,
    CardNotFoundError,
    DuplicateGuessError,
    EmptyGuessError,
    RoundAlreadyWonError,
    RoundNotFoundError,
    RoundNotStartedError,
)
from game_server.round_state import GuessEntry, RoundState, RoundStatus
from game_server.utils.card_api import CardLookup
from server_logs.loggers import round_logger


class RoundController:
    """Drives one round: Idle -> InProgress -> Won.

    The card lookup happens outside the lock; the guess name is recorded
    before it starts so a second submission of the same name is rejected
    while the first is still in flight.
    """

    def __init__(self, lookup: CardLookup, round_id: str = None,
                 attribute_list: ReferenceList = ATTRIBUTES, race_list: ReferenceList = RACES):
        self.lookup = lookup
        self.attribute_list = attribute_list
        self.race_list = race_list
        self._state = RoundState(round_id=round_id or str(uuid.uuid4()))
        self._lock = threading.Lock()

    @property
    def state(self) -> RoundState:
        return self._state

    @property
    def round_id(self) -> str:
        return self._state.round_id

    def start(self, difficulty: Optional[str] = None) -> RoundState:
        difficulty = difficulty or config.DEFAULT_DIFFICULTY
        answer = self.lookup.fetch_random_monster_card()

        with self._lock:
            self._state = self._state.started(answer, difficulty)
            state = self._state

        round_logger.info(
            "round_started",
            round_id=state.round_id,
            difficulty=difficulty,
            hint_count=state.hint_count,
        )
        return state

    def submit_guess(self, raw_name: Optional[str]) -> GuessEntry:
        name = (raw_name or "").strip()
        if not name:
            raise EmptyGuessError()

        with self._lock:
            state = self._state
            if state.status is RoundStatus.IDLE:
                raise RoundNotStartedError()
            if state.status is RoundStatus.WON:
                raise RoundAlreadyWonError()
            if state.has_guessed(name):
                round_logger.warning("guess_rejected_duplicate", round_id=state.round_id, guess=name)
                raise DuplicateGuessError()
            self._state = state.with_guess_name(name)

        try:
            card = self.lookup.fetch_card_by_name(name)
        except Exception as e:
            # a failed lookup does not use up the name
            with self._lock:
                self._state = self._state.without_guess_name(name)
            round_logger.warning("guess_lookup_failed", round_id=self.round_id, guess=name, error=str(e))
            if isinstance(e, CardLookupError):
                raise
            raise CardLookupError() from e

        if card is None:
            round_logger.info("guess_card_not_found", round_id=self.round_id, guess=name)
            raise CardNotFoundError()

        with self._lock:
            state = self._state
            if state.status is RoundStatus.WON:
                raise RoundAlreadyWonError()
            if any(prior.card.name == card.name for prior in state.history):
                # another spelling of a card already scored; typed name stays recorded
                round_logger.warning("guess_rejected_duplicate", round_id=state.round_id,
                                     guess=name, card_name=card.name)
                raise DuplicateGuessError()
            entry = GuessEntry(card=card, result=compare(card, state.answer, self.attribute_list, self.race_list))
            self._state = state.with_guess_name(card.name).with_entry(entry)
            state = self._state

        round_logger.info(
            "guess_scored",
            round_id=state.round_id,
            guess=name,
            card_name=card.name,
            correct=entry.result.is_correct,
            guess_count=len(state.history),
        )
        if state.status is RoundStatus.WON:
            round_logger.info("round_won", round_id=state.round_id, guesses=len(state.guessed_names))
        return entry


class RoundRegistry:
    """Active rounds keyed by round id, oldest evicted first."""

    def __init__(self, max_rounds: int = None):
        self.max_rounds = max_rounds or config.MAX_ACTIVE_ROUNDS
        self._rounds: "OrderedDict[str, RoundController]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self):
        return len(self._rounds)

    def create(self, lookup: CardLookup) -> RoundController:
        controller = RoundController(lookup)
        with self._lock:
            self._rounds[controller.round_id] = controller
            while len(self._rounds) > self.max_rounds:
                evicted, _ = self._rounds.popitem(last=False)
                round_logger.debug("round_evicted", round_id=evicted)
        return controller

    def get(self, round_id: str) -> RoundController:
        with self._lock:
            controller = self._rounds.get(round_id)
        if controller is None:
            raise RoundNotFoundError()
        return controller

    def discard(self, round_id: str):
        with self._lock:
            self._rounds.pop(round_id, None)
