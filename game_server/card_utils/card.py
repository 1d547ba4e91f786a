# card data class.
# Immutable snapshot of a monster card as the game scores it. Built from a
# YGOPRODeck payload; `level`, `atk` and `def` are always ints (missing,
# null or non-numeric values become 0) so comparisons never mix types.
from dataclasses import dataclass, asdict
from typing import Any, Dict


def to_int(value: Any) -> int:
    if value is None or isinstance(value, bool):
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        pass
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return 0


@dataclass(frozen=True)
class Card:
    name: str
    type: str = ""
    attribute: str = ""
    race: str = ""
    level: int = 0
    atk: int = 0
    defense: int = 0
    desc: str = ""

    @property
    def is_monster(self) -> bool:
        return is_monster_type(self.type)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Card":
        """Build a Card from one entry of the card database's `data` array."""
        return cls(
            name=data.get("name") or "",
            type=data.get("type") or "",
            attribute=data.get("attribute") or "",
            race=data.get("race") or "",
            level=to_int(data.get("level")),
            atk=to_int(data.get("atk")),
            defense=to_int(data.get("def")),
            desc=data.get("desc") or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["def"] = out.pop("defense")
        return out


def is_monster_type(card_type: str) -> bool:
    return "Monster" in (card_type or "")
