# scoring of a guessed card against the round's answer.
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from game_server.card_utils.card import Card, to_int
from game_server.card_utils.reference_lists import ReferenceList


@dataclass(frozen=True)
class FieldResult:
    """Outcome for one field of a guess.

    `distance` is only set when the field is not an exact match. For
    category fields `comparable` is False when either label is missing
    from the reference list; no distance is given in that case.
    """
    field: str
    guessed: Any
    exact: bool
    distance: Optional[int] = None
    comparable: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "field": self.field,
            "guessed": self.guessed,
            "exact": self.exact,
            "distance": self.distance,
            "comparable": self.comparable,
        }


@dataclass(frozen=True)
class ComparisonResult:
    name: FieldResult
    attribute: FieldResult
    race: FieldResult
    level: FieldResult
    atk: FieldResult
    defense: FieldResult

    @property
    def is_correct(self) -> bool:
        return self.name.exact

    def fields(self) -> Tuple[FieldResult, ...]:
        return (self.name, self.attribute, self.race, self.level, self.atk, self.defense)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_correct": self.is_correct,
            "fields": [f.to_dict() for f in self.fields()],
        }


def compare_name(guess: str, answer: str) -> FieldResult:
    return FieldResult(field="name", guessed=guess, exact=guess == answer)


def compare_category(field: str, guess: str, answer: str, ref: ReferenceList) -> FieldResult:
    if guess == answer or (ref.resolve(guess) is not None and ref.resolve(guess) == ref.resolve(answer)):
        return FieldResult(field=field, guessed=guess, exact=True)

    distance = ref.distance(guess, answer)
    if distance is None:
        return FieldResult(field=field, guessed=guess, exact=False, comparable=False)
    return FieldResult(field=field, guessed=guess, exact=False, distance=distance)


def compare_number(field: str, guess: Any, answer: Any) -> FieldResult:
    g = to_int(guess)
    a = to_int(answer)
    if g == a:
        return FieldResult(field=field, guessed=g, exact=True)
    return FieldResult(field=field, guessed=g, exact=False, distance=abs(g - a))


def compare(guess: Card, answer: Card, attribute_list: ReferenceList, race_list: ReferenceList) -> ComparisonResult:
    """Score `guess` against `answer` field by field. Pure."""
    return ComparisonResult(
        name=compare_name(guess.name, answer.name),
        attribute=compare_category("attribute", guess.attribute, answer.attribute, attribute_list),
        race=compare_category("race", guess.race, answer.race, race_list),
        level=compare_number("level", guess.level, answer.level),
        atk=compare_number("atk", guess.atk, answer.atk),
        defense=compare_number("def", guess.defense, answer.defense),
    )
