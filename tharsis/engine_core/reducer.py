"""
Reducer - Applies operations to game state.

The reducer is the single point of state mutation.
All state changes go through execute_operation().

Design principles:
- One handler per OperationType, looked up in a dispatch table
- Operations arrive already validated by the interpreter, so a failed
  check here is an InvariantViolation, never a rule rejection
- Every applied operation is appended to the game's operation log
"""

from __future__ import annotations
import logging
import random
from typing import TYPE_CHECKING, Callable

from .board import TileStatus
from .errors import InvariantViolation
from .milestones import AWARDS, MAX_AWARDS, MAX_MILESTONES, MILESTONES
from .operation import GameOperation, OperationType
from .player import CARD_PRICE, ActiveEffect, PlayedCard

if TYPE_CHECKING:
    from .state import Game

logger = logging.getLogger(__name__)

# Fields an operation must carry for its type
_REQUIRED_FIELDS: dict[OperationType, tuple[str, ...]] = {
    OperationType.CHANGE_RESOURCES: ("player_id", "resource"),
    OperationType.CHANGE_PRODUCTION: ("player_id", "resource"),
    OperationType.CHANGE_CARD_RESOURCE: ("player_id", "instance_id", "card_resource"),
    OperationType.DRAW_CARDS: ("player_id",),
    OperationType.DISCARD_CARDS: ("player_id",),
    OperationType.PUT_CARD_INTO_PLAY: ("player_id", "card", "instance_id"),
    OperationType.PLACE_CITY_TILE: ("player_id", "location", "city_kind"),
    OperationType.PLACE_GREENERY: ("player_id", "location"),
    OperationType.PLACE_SPECIAL_TILE: ("player_id", "location", "special_tile"),
    OperationType.PLACE_OCEAN: ("location",),
    OperationType.RAISE_TERRAFORM_RATING: ("player_id",),
    OperationType.ADD_EFFECT: ("player_id", "effect"),
    OperationType.CONSUME_NEXT_CARD_EFFECTS: ("player_id",),
    OperationType.MARK_CARD_ACTION_USED: ("player_id", "instance_id"),
    OperationType.PURCHASE_CARDS: ("player_id",),
    OperationType.PRODUCE: ("player_id",),
    OperationType.CLAIM_MILESTONE: ("player_id", "name"),
    OperationType.FUND_AWARD: ("player_id", "name"),
}


class Reducer:
    """
    Applies GameOperations to a Game in place.

    Stateless - all state is in Game.
    """

    def apply(self, game: Game, operation: GameOperation) -> None:
        handler = self._get_handler(operation.op_type)
        if handler is None:
            raise InvariantViolation(f"No handler for operation type: {operation.op_type}")
        missing = [
            name for name in _REQUIRED_FIELDS.get(operation.op_type, ())
            if getattr(operation, name) is None
        ]
        if missing:
            raise InvariantViolation(
                f"{operation.op_type.value} operation is missing {', '.join(missing)}"
            )
        logger.debug("Applying %s for player %s", operation.op_type.value, operation.player_id)
        handler(game, operation)
        game.operation_log.append(operation)

    def _get_handler(self, op_type: OperationType) -> Callable[[Game, GameOperation], None] | None:
        """Get the handler function for an operation type."""
        handlers = {
            OperationType.CHANGE_RESOURCES: self._handle_change_resources,
            OperationType.CHANGE_PRODUCTION: self._handle_change_production,
            OperationType.CHANGE_CARD_RESOURCE: self._handle_change_card_resource,
            OperationType.DRAW_CARDS: self._handle_draw_cards,
            OperationType.DISCARD_CARDS: self._handle_discard_cards,
            OperationType.PUT_CARD_INTO_PLAY: self._handle_put_card_into_play,
            OperationType.PLACE_CITY_TILE: self._handle_place_city_tile,
            OperationType.PLACE_GREENERY: self._handle_place_greenery,
            OperationType.PLACE_SPECIAL_TILE: self._handle_place_special_tile,
            OperationType.PLACE_OCEAN: self._handle_place_ocean,
            OperationType.RAISE_TEMPERATURE: self._handle_raise_temperature,
            OperationType.RAISE_OXYGEN: self._handle_raise_oxygen,
            OperationType.RAISE_TERRAFORM_RATING: self._handle_raise_terraform_rating,
            OperationType.ADD_EFFECT: self._handle_add_effect,
            OperationType.CONSUME_NEXT_CARD_EFFECTS: self._handle_consume_next_card_effects,
            OperationType.MARK_CARD_ACTION_USED: self._handle_mark_card_action_used,
            OperationType.RESET_CARD_ACTIONS: self._handle_reset_card_actions,
            OperationType.PURCHASE_CARDS: self._handle_purchase_cards,
            OperationType.PRODUCE: self._handle_produce,
            OperationType.ADVANCE_GENERATION: self._handle_advance_generation,
            OperationType.CLAIM_MILESTONE: self._handle_claim_milestone,
            OperationType.FUND_AWARD: self._handle_fund_award,
        }
        return handlers.get(op_type)

    # =========================================================================
    # Economy
    # =========================================================================

    def _handle_change_resources(self, game: Game, op: GameOperation) -> None:
        player = game.player(op.player_id)
        balance = player.resource(op.resource) + op.count
        if balance < 0:
            raise InvariantViolation(
                f"Player {op.player_id} would have {balance} {op.resource.value}"
            )
        player.resources[op.resource] = balance

    def _handle_change_production(self, game: Game, op: GameOperation) -> None:
        player = game.player(op.player_id)
        level = player.production_of(op.resource) + op.count
        if level < player.production_floor(op.resource):
            raise InvariantViolation(
                f"Player {op.player_id} {op.resource.value} production would drop to {level}"
            )
        player.production[op.resource] = level

    def _handle_change_card_resource(self, game: Game, op: GameOperation) -> None:
        player = game.player(op.player_id)
        played = player.get_played(op.instance_id)
        if played is None:
            raise InvariantViolation(f"Player {op.player_id} has no card #{op.instance_id}")
        if played.card.supported_card_resource() != op.card_resource:
            raise InvariantViolation(
                f"{played.card.name} cannot hold {op.card_resource.value} resources"
            )
        key = (op.instance_id, op.card_resource)
        amount = player.card_resources.get(key, 0) + op.count
        if amount < 0:
            raise InvariantViolation(f"{played.card.name} would hold {amount} {op.card_resource.value}")
        player.card_resources[key] = amount

    # =========================================================================
    # Cards
    # =========================================================================

    def _handle_draw_cards(self, game: Game, op: GameOperation) -> None:
        player = game.player(op.player_id)
        if op.count < 0:
            raise InvariantViolation(f"Cannot draw {op.count} cards")
        if len(game.draw_deck) < op.count:
            if len(game.draw_deck) + len(game.discard_pile) < op.count:
                raise InvariantViolation(
                    f"Cannot draw {op.count} cards: {len(game.draw_deck)} in deck, "
                    f"{len(game.discard_pile)} in discard pile"
                )
            self._reshuffle(game)
        drawn = game.draw_deck[:op.count]
        del game.draw_deck[:op.count]
        player.hand.extend(drawn)

    def _reshuffle(self, game: Game) -> None:
        """Shuffle the discard pile under the remaining deck."""
        pile = list(game.discard_pile)
        rng = random.Random(f"{game.random_seed}/{game.reshuffle_count}")
        rng.shuffle(pile)
        game.draw_deck.extend(pile)
        game.discard_pile.clear()
        game.reshuffle_count += 1
        logger.debug("Reshuffled %d cards into the deck (reshuffle #%d)", len(pile), game.reshuffle_count)

    def _handle_discard_cards(self, game: Game, op: GameOperation) -> None:
        player = game.player(op.player_id)
        for card in op.cards:
            if card not in player.hand:
                raise InvariantViolation(f"{card.name} is not in player {op.player_id}'s hand")
            player.hand.remove(card)
            game.discard_pile.append(card)

    def _handle_purchase_cards(self, game: Game, op: GameOperation) -> None:
        if not game.player(op.player_id).purchase_cards(op.cards):
            raise InvariantViolation(
                f"Player {op.player_id} cannot pay {CARD_PRICE * len(op.cards)} MC for {len(op.cards)} cards"
            )

    def _handle_put_card_into_play(self, game: Game, op: GameOperation) -> None:
        player = game.player(op.player_id)
        if op.card not in player.hand:
            raise InvariantViolation(f"{op.card.name} is not in player {op.player_id}'s hand")
        if op.instance_id < player.next_instance_id:
            raise InvariantViolation(f"Instance id {op.instance_id} is already in use")
        player.hand.remove(op.card)
        player.played_cards.append(PlayedCard(op.instance_id, op.card))
        player.next_instance_id = op.instance_id + 1

    # =========================================================================
    # Board
    # =========================================================================

    def _handle_place_city_tile(self, game: Game, op: GameOperation) -> None:
        game.board.place(op.location, TileStatus.city(op.city_kind, op.player_id))

    def _handle_place_greenery(self, game: Game, op: GameOperation) -> None:
        game.board.place(op.location, TileStatus.greenery(op.player_id))

    def _handle_place_special_tile(self, game: Game, op: GameOperation) -> None:
        game.board.place(op.location, TileStatus.special(op.special_tile, op.player_id))

    def _handle_place_ocean(self, game: Game, op: GameOperation) -> None:
        game.board.place(op.location, TileStatus.ocean())

    def _handle_raise_temperature(self, game: Game, op: GameOperation) -> None:
        game.board.raise_temperature()

    def _handle_raise_oxygen(self, game: Game, op: GameOperation) -> None:
        game.board.raise_oxygen()

    def _handle_raise_terraform_rating(self, game: Game, op: GameOperation) -> None:
        game.player(op.player_id).terraform_rating += op.count

    # =========================================================================
    # Effects and tap state
    # =========================================================================

    def _handle_add_effect(self, game: Game, op: GameOperation) -> None:
        player = game.player(op.player_id)
        if op.next_card_only:
            player.next_card_this_generation_effects.append(op.effect)
            return
        if player.get_played(op.instance_id) is None:
            raise InvariantViolation(f"Effect source #{op.instance_id} is not in play")
        player.effects.append(ActiveEffect(op.instance_id, op.effect))

    def _handle_consume_next_card_effects(self, game: Game, op: GameOperation) -> None:
        game.player(op.player_id).next_card_this_generation_effects.clear()

    def _handle_mark_card_action_used(self, game: Game, op: GameOperation) -> None:
        player = game.player(op.player_id)
        played = player.get_played(op.instance_id)
        if played is None or not played.card.actions:
            raise InvariantViolation(f"Card #{op.instance_id} has no actions")
        if op.instance_id in player.tapped_active_cards:
            raise InvariantViolation(f"{played.card.name} was already used this generation")
        player.tapped_active_cards.add(op.instance_id)

    def _handle_reset_card_actions(self, game: Game, op: GameOperation) -> None:
        for player in game.players.values():
            player.tapped_active_cards.clear()

    # =========================================================================
    # Production phase
    # =========================================================================

    def _handle_produce(self, game: Game, op: GameOperation) -> None:
        game.player(op.player_id).advance_generation()

    def _handle_advance_generation(self, game: Game, op: GameOperation) -> None:
        game.generation += 1

    # =========================================================================
    # Milestones and awards
    # =========================================================================

    def _handle_claim_milestone(self, game: Game, op: GameOperation) -> None:
        game.player(op.player_id)
        if op.name not in MILESTONES:
            raise InvariantViolation(f"Unknown milestone '{op.name}'")
        if op.name in game.claimed_milestones:
            raise InvariantViolation(f"{op.name} is already claimed")
        if len(game.claimed_milestones) >= MAX_MILESTONES:
            raise InvariantViolation("All milestones are claimed")
        game.claimed_milestones[op.name] = op.player_id

    def _handle_fund_award(self, game: Game, op: GameOperation) -> None:
        game.player(op.player_id)
        if op.name not in AWARDS:
            raise InvariantViolation(f"Unknown award '{op.name}'")
        if op.name in game.funded_awards:
            raise InvariantViolation(f"{op.name} is already funded")
        if len(game.funded_awards) >= MAX_AWARDS:
            raise InvariantViolation("All awards are funded")
        game.funded_awards[op.name] = op.player_id


_REDUCER = Reducer()


def execute_operation(game: Game, operation: GameOperation) -> None:
    """Apply one operation. Raises InvariantViolation if it would corrupt the game."""
    _REDUCER.apply(game, operation)


def handled_operation_types() -> set[OperationType]:
    return {op_type for op_type in OperationType if _REDUCER._get_handler(op_type) is not None}
