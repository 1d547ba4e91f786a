"""Shared fixtures: sample cards and an in-memory card lookup."""

import pytest

from game_server.card_utils.card import Card
from game_server.errors import CardLookupError
from game_server.utils.card_api import CardLookup


BLUE_EYES = Card(
    name="Blue-Eyes White Dragon", type="Normal Monster", attribute="LIGHT",
    race="Dragon", level=8, atk=3000, defense=2500,
    desc="This legendary dragon is a powerful engine of destruction.",
)
DARK_MAGICIAN = Card(
    name="Dark Magician", type="Normal Monster", attribute="DARK",
    race="Spellcaster", level=7, atk=2500, defense=2100,
    desc="The ultimate wizard in terms of attack and defense.",
)
SUMMONED_SKULL = Card(
    name="Summoned Skull", type="Normal Monster", attribute="DARK",
    race="Fiend", level=6, atk=2500, defense=1200,
    desc="A fiend with dark powers for confusing the enemy.",
)
GAZELLE = Card(
    name="Gazelle the King of Mythical Beasts", type="Normal Monster",
    attribute="EARTH", race="Beast", level=4, atk=1500, defense=1200,
    desc="This monster moves so fast that it looks like an illusion.",
)


class FakeLookup(CardLookup):
    """Card lookup backed by a dict; counts calls and can be told to fail."""

    def __init__(self, answer=BLUE_EYES, cards=None, failing=()):
        self.answer = answer
        self.cards = {c.name: c for c in (cards or [BLUE_EYES, DARK_MAGICIAN, SUMMONED_SKULL, GAZELLE])}
        self.failing = set(failing)
        self.random_calls = 0
        self.name_calls = []

    def fetch_random_monster_card(self):
        self.random_calls += 1
        if "__random__" in self.failing:
            raise CardLookupError()
        return self.answer

    def fetch_card_by_name(self, name):
        self.name_calls.append(name)
        if name in self.failing:
            raise CardLookupError()
        return self.cards.get(name)


@pytest.fixture
def lookup():
    return FakeLookup()
