"""
Game State - Board, players, deck and the operation log.

Design principles:
- All mutation goes through execute_operation() (see reducer.py)
- Serializable: see snapshot.py for the round-trippable form
- Randomness is pinned: reshuffles are seeded from random_seed and
  reshuffle_count, so a game can be replayed exactly
"""

from __future__ import annotations
from copy import deepcopy
from dataclasses import dataclass, field
from typing import Iterable

from ..catalog.card import Card
from .board import MarsBoard, TileStatus, standard_board
from .coordinates import TileLocation
from .milestones import milestone_and_award_points
from .operation import GameOperation
from .player import PlayerId, PlayerState


@dataclass
class Game:
    """
    Complete game state.

    The draw deck is ordered top first: draw_deck[0] is drawn next.
    """
    board: MarsBoard
    players: dict[PlayerId, PlayerState]
    draw_deck: list[Card] = field(default_factory=list)
    discard_pile: list[Card] = field(default_factory=list)
    random_seed: int = 0
    reshuffle_count: int = 0
    generation: int = 1
    claimed_milestones: dict[str, PlayerId] = field(default_factory=dict)
    funded_awards: dict[str, PlayerId] = field(default_factory=dict)
    operation_log: list[GameOperation] = field(default_factory=list)

    @classmethod
    def new(
        cls,
        players: Iterable[PlayerState],
        board: MarsBoard | None = None,
        draw_deck: Iterable[Card] = (),
        random_seed: int = 0,
    ) -> Game:
        player_map = {}
        for player in players:
            if player.player_id in player_map:
                raise ValueError(f"Duplicate player id {player.player_id}")
            player_map[player.player_id] = player
        return cls(
            board=board if board is not None else standard_board(),
            players=player_map,
            draw_deck=list(draw_deck),
            random_seed=random_seed,
        )

    # =========================================================================
    # Players
    # =========================================================================

    @property
    def player_ids(self) -> list[PlayerId]:
        return sorted(self.players)

    def get_player(self, player_id: PlayerId) -> PlayerState | None:
        return self.players.get(player_id)

    def player(self, player_id: PlayerId) -> PlayerState:
        player = self.players.get(player_id)
        if player is None:
            raise ValueError(f"Unknown player {player_id}")
        return player

    def opponents_of(self, player_id: PlayerId) -> list[PlayerState]:
        return [self.players[pid] for pid in self.player_ids if pid != player_id]

    def get_tile_status(self, location: TileLocation) -> TileStatus:
        return self.board.get_tile_status(location)

    # =========================================================================
    # Mutation
    # =========================================================================

    def execute_operation(self, operation: GameOperation) -> None:
        from .reducer import execute_operation
        execute_operation(self, operation)

    def apply_operations(self, operations: Iterable[GameOperation]) -> None:
        for operation in operations:
            self.execute_operation(operation)

    def advance_generation(self) -> None:
        """Run production for every player and start the next generation."""
        for pid in self.player_ids:
            self.execute_operation(GameOperation.produce(pid))
        self.execute_operation(GameOperation.reset_card_actions())
        self.execute_operation(GameOperation.advance_generation())

    def purchase_cards(self, player_id: PlayerId, cards: Iterable[Card]) -> bool:
        """Buy cards into the player's hand. False (no change) if unaffordable."""
        cards = tuple(cards)
        if not self.player(player_id).can_purchase(len(cards)):
            return False
        self.execute_operation(GameOperation.purchase_cards(player_id, cards))
        return True

    def clone(self) -> Game:
        """Deep copy for lookahead."""
        return deepcopy(self)

    # =========================================================================
    # Scoring
    # =========================================================================

    def get_total_victory_points(self, player_id: PlayerId) -> int:
        """Player points plus milestones and awards."""
        player = self.player(player_id)
        return player.get_total_victory_points(self.board) + milestone_and_award_points(
            player_id,
            [self.players[pid] for pid in self.player_ids],
            self.board,
            self.claimed_milestones,
            self.funded_awards,
        )

    def scores(self) -> dict[PlayerId, int]:
        return {pid: self.get_total_victory_points(pid) for pid in self.player_ids}
