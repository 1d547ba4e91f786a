# fixed, ordered category lists used for ordinal scoring.
# A label's position is what "distance" is measured in, so the order of
# ATTRIBUTES and RACES must never change between releases.
import random
from typing import Dict, Iterable, List, Optional, Tuple


class ReferenceList:
    """An ordered sequence of category labels.

    The card database speaks English ("DARK", "Spellcaster") while the lists
    are kept in their display language, so each list carries an alias table
    from database label to list label. Anything outside both is unknown.
    """

    def __init__(self, name: str, labels: Iterable[str], aliases: Dict[str, str] = None):
        self.name = name
        self.labels: Tuple[str, ...] = tuple(labels)
        if len(set(self.labels)) != len(self.labels):
            raise ValueError(f"Reference list '{name}' contains duplicate labels.")

        self._positions = {label: i for i, label in enumerate(self.labels)}
        self._aliases: Dict[str, str] = {}
        for alias, label in (aliases or {}).items():
            if label not in self._positions:
                raise ValueError(f"Alias '{alias}' points at unknown label '{label}'.")
            self._aliases[alias.casefold()] = label

    def __len__(self) -> int:
        return len(self.labels)

    def __iter__(self):
        return iter(self.labels)

    def __contains__(self, label) -> bool:
        return self.resolve(label) is not None

    def resolve(self, label: Optional[str]) -> Optional[str]:
        """Map a raw label (list label or alias) onto its list label."""
        if not label:
            return None
        if label in self._positions:
            return label
        return self._aliases.get(label.casefold())

    def index_of(self, label: Optional[str]) -> Optional[int]:
        resolved = self.resolve(label)
        if resolved is None:
            return None
        return self._positions[resolved]

    def distance(self, a: Optional[str], b: Optional[str]) -> Optional[int]:
        """Absolute position difference, or None when either label is unknown."""
        ia = self.index_of(a)
        ib = self.index_of(b)
        if ia is None or ib is None:
            return None
        return abs(ia - ib)

    def shuffled(self, rng: random.Random = None) -> List[str]:
        rng = rng or random
        return rng.sample(list(self.labels), len(self.labels))


ATTRIBUTES = ReferenceList(
    "attributes",
    ["暗", "光", "水", "炎", "地", "风", "神"],
    aliases={
        "DARK": "暗",
        "LIGHT": "光",
        "WATER": "水",
        "FIRE": "炎",
        "EARTH": "地",
        "WIND": "风",
        "DIVINE": "神",
    },
)

RACES = ReferenceList(
    "races",
    [
        "龙族", "魔法师族", "战士族", "兽战士族", "恶魔族", "天使族", "不死族",
        "机械族", "水族", "炎族", "岩石族", "鸟兽族", "植物族", "昆虫族",
        "雷族", "鱼族", "海龙族", "爬虫类族", "恐龙族", "幻神兽族", "创造神族",
    ],
    aliases={
        "Dragon": "龙族",
        "Spellcaster": "魔法师族",
        "Warrior": "战士族",
        "Beast-Warrior": "兽战士族",
        "Fiend": "恶魔族",
        "Fairy": "天使族",
        "Zombie": "不死族",
        "Machine": "机械族",
        "Aqua": "水族",
        "Pyro": "炎族",
        "Rock": "岩石族",
        "Winged Beast": "鸟兽族",
        "Plant": "植物族",
        "Insect": "昆虫族",
        "Thunder": "雷族",
        "Fish": "鱼族",
        "Sea Serpent": "海龙族",
        "Reptile": "爬虫类族",
        "Dinosaur": "恐龙族",
        "Divine-Beast": "幻神兽族",
        "Creator-God": "创造神族",
        "Creator God": "创造神族",
    },
)
