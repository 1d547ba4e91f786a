# card database access.
# Everything that talks to YGOPRODeck lives here; the rest of the game only
# sees the CardLookup interface and Card objects.
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from game_server import config
from game_server.card_utils.card import Card, is_monster_type
from game_server.errors import CardLookupError
from server_logs.loggers import lookup_logger


class CardLookup(ABC):
    @abstractmethod
    def fetch_random_monster_card(self) -> Card: ...

    @abstractmethod
    def fetch_card_by_name(self, name: str) -> Optional[Card]: ...


class YgoProDeckClient(CardLookup):
    """Thin client for the YGOPRODeck v7 API.

    "No card matched" comes back as HTTP 400 with an `error` body; that is
    reported as None. Anything else that goes wrong raises CardLookupError.
    """

    def __init__(self, base_url: str = None, timeout: float = None,
                 max_random_attempts: int = None, session: requests.Session = None):
        self.base_url = (base_url or config.YGO_API_BASE).rstrip("/")
        self.timeout = timeout if timeout is not None else config.YGO_REQUEST_TIMEOUT
        self.max_random_attempts = max_random_attempts or config.MAX_RANDOM_ATTEMPTS
        self.session = session or self._build_session()

    @staticmethod
    def _build_session() -> requests.Session:
        session = requests.Session()
        session.headers.update({"Accept": "application/json"})
        retries = Retry(
            total=3,
            backoff_factor=0.3,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET"],
        )
        adapter = HTTPAdapter(max_retries=retries)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session

    def _get(self, endpoint: str, params: Dict[str, Any] = None) -> Optional[Any]:
        """GET an endpoint and decode it. Returns None on the API's 'no match' answer."""
        url = f"{self.base_url}/{endpoint}"
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            lookup_logger.error("lookup_request_failed", endpoint=endpoint, params=params, error=str(e))
            raise CardLookupError() from e

        if response.status_code == 400:
            lookup_logger.debug("lookup_no_match", endpoint=endpoint, params=params)
            return None

        try:
            response.raise_for_status()
            return response.json()
        except requests.HTTPError as e:
            lookup_logger.error("lookup_bad_status", endpoint=endpoint, status=response.status_code)
            raise CardLookupError() from e
        except ValueError as e:
            lookup_logger.error("lookup_bad_body", endpoint=endpoint, error=str(e))
            raise CardLookupError() from e

    @staticmethod
    def _first_card(payload: Any) -> Optional[Dict[str, Any]]:
        # cardinfo.php and newer randomcard.php wrap cards in {"data": [...]};
        # older randomcard.php returned the bare card object
        if isinstance(payload, dict) and "data" in payload:
            cards = payload["data"]
            if not isinstance(cards, list):
                raise CardLookupError()
            if not cards:
                return None
            if not isinstance(cards[0], dict):
                raise CardLookupError()
            return cards[0]
        if isinstance(payload, dict) and "name" in payload:
            return payload
        if payload is None:
            return None
        raise CardLookupError()

    def fetch_random_monster_card(self) -> Card:
        for attempt in range(1, self.max_random_attempts + 1):
            data = self._first_card(self._get("randomcard.php"))
            if data and is_monster_type(data.get("type")):
                card = Card.from_api(data)
                lookup_logger.info("random_monster_drawn", attempt=attempt, card_name=card.name)
                return card
            lookup_logger.debug("random_card_skipped", attempt=attempt,
                                card_type=data.get("type") if data else None)

        lookup_logger.error("random_monster_exhausted", attempts=self.max_random_attempts)
        raise CardLookupError("Could not draw a monster card, try again later")

    def fetch_card_by_name(self, name: str) -> Optional[Card]:
        """Exact name first, then the API's partial-name search."""
        for param in ("name", "fname"):
            data = self._first_card(self._get("cardinfo.php", {param: name}))
            if data:
                card = Card.from_api(data)
                lookup_logger.info("card_resolved", query=name, match=param, card_name=card.name)
                return card

        lookup_logger.info("card_not_found", query=name)
        return None
