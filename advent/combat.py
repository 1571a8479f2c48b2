"""Crab combat card game, plain and recursive."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from itertools import islice


@dataclass
class Deck:
    """A player's cards, top of the deck first."""

    player: int
    cards: deque[int] = field(default_factory=deque)

    def __post_init__(self) -> None:
        self.cards = deque(self.cards)

    def score(self) -> int:
        """Each card times its position counted from the bottom."""
        return sum(
            card * position
            for position, card in zip(range(len(self.cards), 0, -1), self.cards)
        )

    def serialize(self) -> str:
        return f"{self.player}:[{' '.join(str(card) for card in self.cards)}]"

    def place_cards(self, winner: int, loser: int) -> None:
        """Put the winning card, then the losing card, at the bottom."""
        self.cards.append(winner)
        self.cards.append(loser)


def serialize_round(first: Deck, second: Deck) -> str:
    return f"{first.serialize()} && {second.serialize()}"


def parse_decks(text: str) -> tuple[Deck, Deck]:
    """Parse the two ``Player N:`` sections."""
    cards_by_player: dict[int, list[int]] = {}
    current: int | None = None
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        if line.startswith("Player"):
            current = int(line.removeprefix("Player ").rstrip(":"))
            cards_by_player[current] = []
            continue
        if current is None:
            raise ValueError(f"card {line!r} appears before any player")
        cards_by_player[current].append(int(line))

    if len(cards_by_player) != 2:
        raise ValueError("exactly two players are required")
    first, second = (Deck(player, cards) for player, cards in cards_by_player.items())
    return first, second


def _winner(first: Deck, second: Deck) -> Deck:
    return first if first.cards else second


def battle(first: Deck, second: Deck) -> Deck:
    """Play a plain game, changing both decks, and return the winner's deck."""
    while first.cards and second.cards:
        first_card = first.cards.popleft()
        second_card = second.cards.popleft()
        if first_card > second_card:
            first.place_cards(first_card, second_card)
        else:
            second.place_cards(second_card, first_card)
    return _winner(first, second)


def recursive_battle(first: Deck, second: Deck) -> Deck:
    """Play a recursive game, changing both decks, and return the winner's deck.

    A repeated position ends the game in favour of the first deck.
    """
    seen: set[str] = set()
    while first.cards and second.cards:
        position = serialize_round(first, second)
        if position in seen:
            return first
        seen.add(position)

        first_card = first.cards.popleft()
        second_card = second.cards.popleft()

        if len(first.cards) >= first_card and len(second.cards) >= second_card:
            sub_first = Deck(first.player, islice(first.cards, first_card))
            sub_second = Deck(second.player, islice(second.cards, second_card))
            first_wins = recursive_battle(sub_first, sub_second) is sub_first
        else:
            first_wins = first_card > second_card

        if first_wins:
            first.place_cards(first_card, second_card)
        else:
            second.place_cards(second_card, first_card)

    return _winner(first, second)


def new_deck(player: int, cards: Iterable[int]) -> Deck:
    return Deck(player, deque(cards))