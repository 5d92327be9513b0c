"""
Action Generator - Enumerates the turn actions a player could start.

Used by:
1. Callers driving a game loop, to offer moves
2. The HTTP API, to show available actions
3. Validation (is this action among the legal ones?)

An action is listed when its preconditions hold right now (cost,
requirements, untapped card, parameter not maxed). Listing it does not
promise that every decision inside it has a legal answer; resolve it
with the EffectResolver to find out.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .effect_resolver import STANDARD_PROJECTS
from .milestones import AWARDS, MILESTONES, award_unavailable_reason, milestone_unavailable_reason
from .operation import StandardProject, TurnAction
from .player import PlayerId

if TYPE_CHECKING:
    from .state import Game


@dataclass
class ActionGenerator:
    """Generates legal turn actions for one player."""
    game: Game

    def generate(self, player_id: PlayerId) -> list[TurnAction]:
        actions = []
        actions.extend(self._generate_card_plays(player_id))
        actions.extend(self._generate_card_actions(player_id))
        actions.extend(self._generate_standard_projects(player_id))
        actions.extend(self._generate_milestones(player_id))
        actions.extend(self._generate_awards(player_id))

        # Passing is always available
        actions.append(TurnAction.pass_turn())
        return actions

    def _generate_card_plays(self, player_id: PlayerId) -> list[TurnAction]:
        player = self.game.player(player_id)
        seen = set()
        actions = []
        for card in player.hand:
            if card.name in seen:
                continue
            seen.add(card.name)
            if player.can_play_card(self.game.board, card) is not None:
                actions.append(TurnAction.play_card(card))
        return actions

    def _generate_card_actions(self, player_id: PlayerId) -> list[TurnAction]:
        player = self.game.player(player_id)
        actions = []
        for played in player.active_cards():
            if played.instance_id in player.tapped_active_cards:
                continue
            for index in range(len(played.card.actions)):
                actions.append(TurnAction.perform_action(played.instance_id, index))
        return actions

    def _generate_standard_projects(self, player_id: PlayerId) -> list[TurnAction]:
        player = self.game.player(player_id)
        board = self.game.board
        actions = []
        for project, (cost, _) in STANDARD_PROJECTS.items():
            if not player.can_afford(cost):
                continue
            if project in (StandardProject.ASTEROID, StandardProject.CONVERT_HEAT) and board.temperature_maxed:
                continue
            if project == StandardProject.AQUIFER and board.oceans_maxed:
                continue
            actions.append(TurnAction.standard_project(project))
        return actions

    def _generate_milestones(self, player_id: PlayerId) -> list[TurnAction]:
        player = self.game.player(player_id)
        return [
            TurnAction.claim_milestone(name)
            for name in MILESTONES
            if milestone_unavailable_reason(
                name, player, self.game.board, self.game.claimed_milestones
            ) is None
        ]

    def _generate_awards(self, player_id: PlayerId) -> list[TurnAction]:
        player = self.game.player(player_id)
        return [
            TurnAction.fund_award(name)
            for name in AWARDS
            if award_unavailable_reason(name, player, self.game.funded_awards) is None
        ]


def legal_turn_actions(game: Game, player_id: PlayerId) -> list[TurnAction]:
    """Every turn action `player_id` could start, ending with PASS."""
    return ActionGenerator(game).generate(player_id)
