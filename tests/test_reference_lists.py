"""Tests for ordered reference lists."""

import random

import pytest

from game_server.card_utils.reference_lists import ATTRIBUTES, RACES, ReferenceList


class TestReferenceList:
    """Tests for label positions and distances."""

    def test_attribute_order(self):
        assert ATTRIBUTES.labels == ("暗", "光", "水", "炎", "地", "风", "神")

    def test_race_list_size(self):
        assert len(RACES) == 21
        assert RACES.labels[0] == "龙族"
        assert RACES.labels[-1] == "创造神族"

    def test_index_of_label_and_alias(self):
        assert ATTRIBUTES.index_of("炎") == 3
        assert ATTRIBUTES.index_of("FIRE") == 3
        assert ATTRIBUTES.index_of("fire") == 3
        assert RACES.index_of("Winged Beast") == RACES.index_of("鸟兽族")

    def test_unknown_label(self):
        assert ATTRIBUTES.index_of("LAUGH") is None
        assert ATTRIBUTES.index_of("") is None
        assert ATTRIBUTES.index_of(None) is None
        assert "Beast" not in RACES
        assert "Cyberse" not in RACES

    def test_distance(self):
        assert ATTRIBUTES.distance("暗", "炎") == 3
        assert ATTRIBUTES.distance("炎", "暗") == 3
        assert ATTRIBUTES.distance("DARK", "DIVINE") == 6
        assert RACES.distance("Dragon", "Psychic") is None

    def test_duplicate_labels_rejected(self):
        with pytest.raises(ValueError):
            ReferenceList("bad", ["a", "b", "a"])

    def test_alias_to_missing_label_rejected(self):
        with pytest.raises(ValueError):
            ReferenceList("bad", ["a"], aliases={"A": "z"})


class TestShuffled:
    """Tests for the shuffled presentation order."""

    def test_contains_every_label_once(self):
        for ref in (ATTRIBUTES, RACES):
            shuffled = ref.shuffled()
            assert len(shuffled) == len(ref)
            assert sorted(shuffled) == sorted(ref.labels)

    def test_leaves_list_order_unchanged(self):
        ATTRIBUTES.shuffled(random.Random(3))
        assert ATTRIBUTES.labels[0] == "暗"

    def test_seeded_rng_is_repeatable(self):
        assert RACES.shuffled(random.Random(7)) == RACES.shuffled(random.Random(7))
