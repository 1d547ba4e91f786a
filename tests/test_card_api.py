"""Tests for the YGOPRODeck client, with the HTTP session faked out."""

import pytest
import requests

from game_server.errors import CardLookupError
from game_server.utils.card_api import YgoProDeckClient

SPELL = {"name": "Pot of Greed", "type": "Spell Card", "race": "Normal", "desc": "Draw 2 cards."}
MONSTER = {
    "name": "Dark Magician", "type": "Normal Monster", "attribute": "DARK",
    "race": "Spellcaster", "level": 7, "atk": 2500, "def": 2100, "desc": "Wizard.",
}
NO_MATCH = {"error": "No card matching your query was found in the database."}


class FakeResponse:
    def __init__(self, status_code=200, body=None, bad_json=False):
        self.status_code = status_code
        self._body = body
        self._bad_json = bad_json

    def json(self):
        if self._bad_json:
            raise ValueError("Expecting value")
        return self._body

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


class FakeSession:
    """Returns queued responses in order and records every request."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, params, timeout))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def make_client(*responses, **kwargs):
    session = FakeSession(*responses)
    return YgoProDeckClient(base_url="https://api.test/v7/", timeout=2, session=session, **kwargs), session


class TestRandomMonster:
    """Tests for drawing the answer card."""

    def test_skips_non_monsters(self):
        client, session = make_client(FakeResponse(body=SPELL), FakeResponse(body=MONSTER))
        card = client.fetch_random_monster_card()
        assert card.name == "Dark Magician"
        assert len(session.calls) == 2
        assert session.calls[0] == ("https://api.test/v7/randomcard.php", None, 2)

    def test_accepts_data_envelope(self):
        client, _ = make_client(FakeResponse(body={"data": [MONSTER]}))
        assert client.fetch_random_monster_card().atk == 2500

    def test_gives_up_after_max_attempts(self):
        client, session = make_client(*[FakeResponse(body=SPELL)] * 3, max_random_attempts=3)
        with pytest.raises(CardLookupError):
            client.fetch_random_monster_card()
        assert len(session.calls) == 3

    def test_connection_error(self):
        client, _ = make_client(requests.ConnectionError("down"))
        with pytest.raises(CardLookupError):
            client.fetch_random_monster_card()


class TestCardByName:
    """Tests for resolving a guessed name."""

    def test_exact_match(self):
        client, session = make_client(FakeResponse(body={"data": [MONSTER]}))
        card = client.fetch_card_by_name("Dark Magician")
        assert card.name == "Dark Magician"
        assert session.calls[0][1] == {"name": "Dark Magician"}

    def test_falls_back_to_partial_name(self):
        client, session = make_client(
            FakeResponse(status_code=400, body=NO_MATCH),
            FakeResponse(body={"data": [MONSTER]}),
        )
        card = client.fetch_card_by_name("dark magic")
        assert card.name == "Dark Magician"
        assert [c[1] for c in session.calls] == [{"name": "dark magic"}, {"fname": "dark magic"}]

    def test_not_found(self):
        client, _ = make_client(
            FakeResponse(status_code=400, body=NO_MATCH),
            FakeResponse(status_code=400, body=NO_MATCH),
        )
        assert client.fetch_card_by_name("zzz") is None

    def test_empty_data_is_not_found(self):
        client, _ = make_client(FakeResponse(body={"data": []}), FakeResponse(body={"data": []}))
        assert client.fetch_card_by_name("zzz") is None

    def test_server_error(self):
        client, _ = make_client(FakeResponse(status_code=503))
        with pytest.raises(CardLookupError):
            client.fetch_card_by_name("Dark Magician")

    def test_timeout(self):
        client, _ = make_client(requests.Timeout("slow"))
        with pytest.raises(CardLookupError):
            client.fetch_card_by_name("Dark Magician")

    def test_malformed_body(self):
        client, _ = make_client(FakeResponse(bad_json=True))
        with pytest.raises(CardLookupError):
            client.fetch_card_by_name("Dark Magician")

    def test_non_object_entry_in_data(self):
        client, _ = make_client(FakeResponse(body={"data": ["oops"]}))
        with pytest.raises(CardLookupError):
            client.fetch_card_by_name("Dark Magician")

    def test_unexpected_shape(self):
        client, _ = make_client(FakeResponse(body=["not", "a", "card"]))
        with pytest.raises(CardLookupError):
            client.fetch_card_by_name("Dark Magician")


class TestSession:
    """Tests for the default session."""

    def test_default_session_has_retries(self):
        client = YgoProDeckClient()
        adapter = client.session.get_adapter("https://db.ygoprodeck.com")
        assert adapter.max_retries.total == 3
        assert client.base_url == "https://db.ygoprodeck.com/api/v7"
