"""Food lists: work out which ingredients can hold an allergen."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class Food:
    ingredients: list[str] = field(default_factory=list)
    allergens: list[str] = field(default_factory=list)


@dataclass
class FoodListing:
    foods: list[Food] = field(default_factory=list)

    def __iter__(self) -> Iterator[Food]:
        return iter(self.foods)

    def __len__(self) -> int:
        return len(self.foods)

    def _candidates(self) -> tuple[set[str], dict[str, set[str]]]:
        """Ingredients of foods with allergens, and each allergen's possible sources."""
        foods_by_allergen: dict[str, list[Food]] = defaultdict(list)
        all_ingredients: set[str] = set()
        for food in self.foods:
            if food.allergens:
                all_ingredients.update(food.ingredients)
            for allergen in food.allergens:
                foods_by_allergen[allergen].append(food)

        candidates = {}
        for allergen, foods in foods_by_allergen.items():
            common = set.intersection(*(set(food.ingredients) for food in foods))
            if common:
                candidates[allergen] = common
        return all_ingredients, candidates

    def find_non_allergenic_ingredients(self) -> tuple[list[str], list[str]]:
        """Return the safe ingredients, and the allergenic ones ordered by allergen name."""
        all_ingredients, candidates = self._candidates()

        resolved: set[str] = set()
        while True:
            removals = []
            for allergen, ingredients in candidates.items():
                if allergen in resolved or len(ingredients) != 1:
                    continue
                resolved.add(allergen)
                removals.extend(
                    (other, ingredient)
                    for other in candidates
                    if other != allergen
                    for ingredient in ingredients
                )
            if not removals:
                break
            for allergen, ingredient in removals:
                candidates[allergen].discard(ingredient)

        possibly_allergic = set().union(*candidates.values())
        safe = sorted(all_ingredients - possibly_allergic)
        allergic = [
            ingredient
            for allergen in sorted(candidates)
            for ingredient in sorted(candidates[allergen])
        ]
        return safe, allergic

    def count_occurrences_for(self, ingredients: list[str]) -> dict[str, int]:
        """How many times each of the given ingredients appears across all foods."""
        counts = dict.fromkeys(ingredients, 0)
        for food in self.foods:
            for ingredient in food.ingredients:
                if ingredient in counts:
                    counts[ingredient] += 1
        return counts


def _parse_food(line: str) -> Food:
    raw_ingredients, marker, raw_allergens = line.partition(" (contains ")
    allergens = raw_allergens.rstrip(")").split(", ") if marker else []
    return Food(ingredients=raw_ingredients.split(" "), allergens=allergens)


def parse_food_listing(text: str) -> FoodListing:
    """Parse lines such as ``a b c (contains dairy, fish)``."""
    return FoodListing([_parse_food(line) for line in text.splitlines() if line.strip()])