"""
Generation Search - Enumerates what one player can do in a generation.

For every subset of the offered cards the player can afford to buy,
walk the resulting hand in order and branch on playing or skipping
each card. A card that needs decisions (where to place a tile, whose
plants to destroy) branches once per legal answer. Every leaf is one
possible generation: the cards bought, the turns taken and the
player's final state.

Branches never share state: each play resolves on a fresh clone of
the game, so the search is deterministic and side-effect free.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Iterable

from ..catalog.card import Card
from .board import MarsBoard, standard_board
from .effect_resolver import EffectResolver, default_resolver
from .operation import Choice, PlayerTurn, PlayStatus, TurnAction
from .player import PlayerId, PlayerState
from .state import Game

logger = logging.getLogger(__name__)

MAX_OFFERED_CARDS = 10


@dataclass(frozen=True)
class GenerationPlay:
    """One way to spend a generation."""
    purchased: tuple[Card, ...]
    turns: tuple[PlayerTurn, ...]
    final_state: PlayerState
    final_game: Game = field(compare=False, repr=False)


@dataclass
class SearchStats:
    subsets: int = 0
    affordable_subsets: int = 0
    plays_resolved: int = 0
    leaves: int = 0


class GenerationSearch:
    """
    Exhaustive search over purchases and play sequences for one player.

    By default cards are considered in hand order (play-or-skip per
    card); all_orderings=True also explores every order of play.
    """

    def __init__(self, game: Game, player_id: PlayerId, resolver: EffectResolver | None = None):
        self.game = game
        self.player_id = player_id
        self.resolver = resolver or default_resolver()
        self.stats = SearchStats()

    def run(self, offered_cards: Iterable[Card], all_orderings: bool = False) -> list[GenerationPlay]:
        offered = list(offered_cards)
        if len(offered) > MAX_OFFERED_CARDS:
            raise ValueError(
                f"At most {MAX_OFFERED_CARDS} cards can be offered, got {len(offered)}"
            )
        self.stats = SearchStats()
        results: list[GenerationPlay] = []

        for mask in range(1 << len(offered)):
            self.stats.subsets += 1
            purchased = tuple(card for i, card in enumerate(offered) if mask & (1 << i))
            game = self.game.clone()
            if not game.purchase_cards(self.player_id, purchased):
                continue
            self.stats.affordable_subsets += 1
            if all_orderings:
                self._explore_orderings(game, (), purchased, results)
            else:
                hand = tuple(game.player(self.player_id).hand)
                self._explore(game, hand, 0, (), purchased, results)

        logger.debug(
            "Generation search: %d subsets, %d affordable, %d plays resolved, %d results",
            self.stats.subsets,
            self.stats.affordable_subsets,
            self.stats.plays_resolved,
            len(results),
        )
        return results

    def _resolve_play(self, game: Game, card: Card, choices: tuple[Choice, ...] = ()) -> list[Game]:
        """Every fully resolved outcome of playing `card`, one per chain of answers."""
        attempt = self.resolver.play_card(game, self.player_id, card, choices)
        self.stats.plays_resolved += 1
        if attempt.status == PlayStatus.PLAYABLE:
            return [attempt.resulting_game]
        if attempt.status == PlayStatus.UNPLAYABLE:
            return []
        outcomes = []
        for choice in attempt.pending_choice.as_choices():
            outcomes.extend(self._resolve_play(game, card, choices + (choice,)))
        return outcomes

    def _leaf(
        self,
        game: Game,
        turns: tuple[PlayerTurn, ...],
        purchased: tuple[Card, ...],
        results: list[GenerationPlay],
    ) -> None:
        self.stats.leaves += 1
        results.append(GenerationPlay(
            purchased=purchased,
            turns=turns + (PlayerTurn(TurnAction.pass_turn()),),
            final_state=game.player(self.player_id),
            final_game=game,
        ))

    def _explore(
        self,
        game: Game,
        hand: tuple[Card, ...],
        index: int,
        turns: tuple[PlayerTurn, ...],
        purchased: tuple[Card, ...],
        results: list[GenerationPlay],
    ) -> None:
        """Play-or-skip the card at `index`, then move on to the next one."""
        if index == len(hand):
            self._leaf(game, turns, purchased, results)
            return

        card = hand[index]
        for played in self._resolve_play(game, card):
            turn = PlayerTurn(TurnAction.play_card(card), tuple(played.operation_log[len(game.operation_log):]))
            self._explore(played, hand, index + 1, turns + (turn,), purchased, results)
        self._explore(game, hand, index + 1, turns, purchased, results)

    def _explore_orderings(
        self,
        game: Game,
        turns: tuple[PlayerTurn, ...],
        purchased: tuple[Card, ...],
        results: list[GenerationPlay],
    ) -> None:
        """Stop here, or play any distinct card still in hand and recurse."""
        self._leaf(game, turns, purchased, results)
        seen = set()
        for card in list(game.player(self.player_id).hand):
            if card.name in seen:
                continue
            seen.add(card.name)
            for played in self._resolve_play(game, card):
                turn = PlayerTurn(TurnAction.play_card(card), tuple(played.operation_log[len(game.operation_log):]))
                self._explore_orderings(played, turns + (turn,), purchased, results)


def get_possible_generation_plays(
    state: PlayerState,
    opponents: Iterable[PlayerState],
    offered_cards: Iterable[Card],
    board: MarsBoard | None = None,
) -> list[GenerationPlay]:
    """
    All (purchased cards, turns, final state) outcomes for `state`.

    Raises ValueError if more than 10 cards are offered.
    """
    game = Game.new([state, *opponents], board=board.clone() if board else standard_board())
    return GenerationSearch(game, state.player_id).run(offered_cards)
