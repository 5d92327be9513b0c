"""
Operations - Atomic, replayable state mutations and turn records.

GameOperation is the unit of the operation log: the interpreter emits
them, the reducer applies them. Applying the log of a game against its
initial snapshot reproduces the final state.

Also defines what a turn looks like from the outside:
- TurnAction: what the player chose to do (play a card, use an action, ...)
- Choice / PendingChoice: answers to, and requests for, player decisions
- PlayAttempt: the outcome of resolving a turn action
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from ..catalog.card import Card, CardEffect, CityKind, ImmediateImpact, SpecialTile
from ..catalog.resource import CardResource, Resource
from .coordinates import TileLocation

if TYPE_CHECKING:
    from .state import Game

PlayerId = int


class OperationType(str, Enum):
    CHANGE_RESOURCES = "change_resources"
    CHANGE_PRODUCTION = "change_production"
    CHANGE_CARD_RESOURCE = "change_card_resource"
    DRAW_CARDS = "draw_cards"
    DISCARD_CARDS = "discard_cards"
    PUT_CARD_INTO_PLAY = "put_card_into_play"
    PLACE_CITY_TILE = "place_city_tile"
    PLACE_GREENERY = "place_greenery"
    PLACE_SPECIAL_TILE = "place_special_tile"
    PLACE_OCEAN = "place_ocean"
    RAISE_TEMPERATURE = "raise_temperature"
    RAISE_OXYGEN = "raise_oxygen"
    RAISE_TERRAFORM_RATING = "raise_terraform_rating"
    ADD_EFFECT = "add_effect"
    CONSUME_NEXT_CARD_EFFECTS = "consume_next_card_effects"
    MARK_CARD_ACTION_USED = "mark_card_action_used"
    RESET_CARD_ACTIONS = "reset_card_actions"
    PURCHASE_CARDS = "purchase_cards"
    PRODUCE = "produce"
    ADVANCE_GENERATION = "advance_generation"
    CLAIM_MILESTONE = "claim_milestone"
    FUND_AWARD = "fund_award"


@dataclass(frozen=True)
class GameOperation:
    """
    One atomic mutation.

    `count` is a signed delta for CHANGE_* operations and a plain
    amount otherwise. Fields an operation type doesn't use stay unset.
    """
    op_type: OperationType
    player_id: PlayerId | None = None
    resource: Resource | None = None
    card_resource: CardResource | None = None
    count: int = 0
    instance_id: int | None = None
    card: Card | None = None
    cards: tuple[Card, ...] = ()
    location: TileLocation | None = None
    city_kind: CityKind | None = None
    special_tile: SpecialTile | None = None
    effect: CardEffect | None = None
    next_card_only: bool = False
    name: str | None = None

    @classmethod
    def change_resources(cls, player_id: PlayerId, resource: Resource, delta: int) -> GameOperation:
        return cls(OperationType.CHANGE_RESOURCES, player_id=player_id, resource=resource, count=delta)

    @classmethod
    def change_production(cls, player_id: PlayerId, resource: Resource, delta: int) -> GameOperation:
        return cls(OperationType.CHANGE_PRODUCTION, player_id=player_id, resource=resource, count=delta)

    @classmethod
    def change_card_resource(
        cls, player_id: PlayerId, instance_id: int, card_resource: CardResource, delta: int
    ) -> GameOperation:
        return cls(
            OperationType.CHANGE_CARD_RESOURCE,
            player_id=player_id,
            instance_id=instance_id,
            card_resource=card_resource,
            count=delta,
        )

    @classmethod
    def draw_cards(cls, player_id: PlayerId, count: int) -> GameOperation:
        return cls(OperationType.DRAW_CARDS, player_id=player_id, count=count)

    @classmethod
    def discard_cards(cls, player_id: PlayerId, cards: tuple[Card, ...]) -> GameOperation:
        return cls(OperationType.DISCARD_CARDS, player_id=player_id, cards=tuple(cards))

    @classmethod
    def put_card_into_play(cls, player_id: PlayerId, card: Card, instance_id: int) -> GameOperation:
        return cls(OperationType.PUT_CARD_INTO_PLAY, player_id=player_id, card=card, instance_id=instance_id)

    @classmethod
    def place_city_tile(cls, player_id: PlayerId, location: TileLocation, city_kind: CityKind) -> GameOperation:
        return cls(OperationType.PLACE_CITY_TILE, player_id=player_id, location=location, city_kind=city_kind)

    @classmethod
    def place_greenery(cls, player_id: PlayerId, location: TileLocation) -> GameOperation:
        return cls(OperationType.PLACE_GREENERY, player_id=player_id, location=location)

    @classmethod
    def place_special_tile(
        cls, player_id: PlayerId, location: TileLocation, tile: SpecialTile
    ) -> GameOperation:
        return cls(OperationType.PLACE_SPECIAL_TILE, player_id=player_id, location=location, special_tile=tile)

    @classmethod
    def place_ocean(cls, location: TileLocation) -> GameOperation:
        return cls(OperationType.PLACE_OCEAN, location=location)

    @classmethod
    def raise_temperature(cls) -> GameOperation:
        return cls(OperationType.RAISE_TEMPERATURE)

    @classmethod
    def raise_oxygen(cls) -> GameOperation:
        return cls(OperationType.RAISE_OXYGEN)

    @classmethod
    def raise_terraform_rating(cls, player_id: PlayerId, count: int = 1) -> GameOperation:
        return cls(OperationType.RAISE_TERRAFORM_RATING, player_id=player_id, count=count)

    @classmethod
    def add_effect(
        cls, player_id: PlayerId, instance_id: int | None, effect: CardEffect, next_card_only: bool = False
    ) -> GameOperation:
        return cls(
            OperationType.ADD_EFFECT,
            player_id=player_id,
            instance_id=instance_id,
            effect=effect,
            next_card_only=next_card_only,
        )

    @classmethod
    def consume_next_card_effects(cls, player_id: PlayerId) -> GameOperation:
        return cls(OperationType.CONSUME_NEXT_CARD_EFFECTS, player_id=player_id)

    @classmethod
    def mark_card_action_used(cls, player_id: PlayerId, instance_id: int) -> GameOperation:
        return cls(OperationType.MARK_CARD_ACTION_USED, player_id=player_id, instance_id=instance_id)

    @classmethod
    def reset_card_actions(cls) -> GameOperation:
        return cls(OperationType.RESET_CARD_ACTIONS)

    @classmethod
    def purchase_cards(cls, player_id: PlayerId, cards: tuple[Card, ...]) -> GameOperation:
        return cls(OperationType.PURCHASE_CARDS, player_id=player_id, cards=tuple(cards))

    @classmethod
    def produce(cls, player_id: PlayerId) -> GameOperation:
        """Production phase for one player."""
        return cls(OperationType.PRODUCE, player_id=player_id)

    @classmethod
    def advance_generation(cls) -> GameOperation:
        return cls(OperationType.ADVANCE_GENERATION)

    @classmethod
    def claim_milestone(cls, player_id: PlayerId, name: str) -> GameOperation:
        return cls(OperationType.CLAIM_MILESTONE, player_id=player_id, name=name)

    @classmethod
    def fund_award(cls, player_id: PlayerId, name: str) -> GameOperation:
        return cls(OperationType.FUND_AWARD, player_id=player_id, name=name)


# ============================================================================
# Turns
# ============================================================================

class StandardProject(str, Enum):
    POWER_PLANT = "power_plant"
    ASTEROID = "asteroid"
    AQUIFER = "aquifer"
    GREENERY = "greenery"
    CITY = "city"
    CONVERT_PLANTS = "convert_plants"
    CONVERT_HEAT = "convert_heat"


class TurnActionType(str, Enum):
    PLAY_CARD = "play_card"
    PERFORM_ACTION = "perform_action"
    STANDARD_PROJECT = "standard_project"
    CLAIM_MILESTONE = "claim_milestone"
    FUND_AWARD = "fund_award"
    PASS = "pass"


@dataclass(frozen=True)
class TurnAction:
    """What a player does with one of their turns."""
    action_type: TurnActionType
    card: Card | None = None
    instance_id: int | None = None
    action_index: int = 0
    project: StandardProject | None = None
    name: str | None = None

    @classmethod
    def play_card(cls, card: Card) -> TurnAction:
        return cls(TurnActionType.PLAY_CARD, card=card)

    @classmethod
    def perform_action(cls, instance_id: int, action_index: int = 0) -> TurnAction:
        return cls(TurnActionType.PERFORM_ACTION, instance_id=instance_id, action_index=action_index)

    @classmethod
    def standard_project(cls, project: StandardProject) -> TurnAction:
        return cls(TurnActionType.STANDARD_PROJECT, project=project)

    @classmethod
    def claim_milestone(cls, name: str) -> TurnAction:
        return cls(TurnActionType.CLAIM_MILESTONE, name=name)

    @classmethod
    def fund_award(cls, name: str) -> TurnAction:
        return cls(TurnActionType.FUND_AWARD, name=name)

    @classmethod
    def pass_turn(cls) -> TurnAction:
        return cls(TurnActionType.PASS)

    def describe(self) -> str:
        if self.action_type == TurnActionType.PLAY_CARD:
            return f"play {self.card.name}"
        if self.action_type == TurnActionType.PERFORM_ACTION:
            return f"use action {self.action_index} of card #{self.instance_id}"
        if self.action_type == TurnActionType.STANDARD_PROJECT:
            return f"standard project {self.project.value}"
        if self.action_type in (TurnActionType.CLAIM_MILESTONE, TurnActionType.FUND_AWARD):
            return f"{self.action_type.value.replace('_', ' ')} {self.name}"
        return "pass"


@dataclass(frozen=True)
class PlayerTurn:
    """A resolved turn: the action taken and the operations it produced."""
    action: TurnAction
    operations: tuple[GameOperation, ...] = ()


# ============================================================================
# Choices
# ============================================================================

class ChoiceType(str, Enum):
    LOCATION = "location"
    PLAYER = "player"
    CARD = "card"
    OPTION = "option"


@dataclass(frozen=True)
class Choice:
    """
    A player's answer to one pending decision.

    Choices are consumed in the order decisions come up.
    """
    location: TileLocation | None = None
    player_id: PlayerId | None = None
    instance_id: int | None = None
    option_index: int | None = None

    @classmethod
    def at(cls, location: TileLocation) -> Choice:
        return cls(location=location)

    @classmethod
    def player(cls, player_id: PlayerId) -> Choice:
        return cls(player_id=player_id)

    @classmethod
    def card(cls, player_id: PlayerId, instance_id: int) -> Choice:
        return cls(player_id=player_id, instance_id=instance_id)

    @classmethod
    def option(cls, index: int) -> Choice:
        return cls(option_index=index)


@dataclass(frozen=True)
class PendingChoice:
    """A decision the player still has to make, with every legal answer."""
    choice_type: ChoiceType
    impact: ImmediateImpact
    options: tuple[Any, ...] = ()

    def accepts(self, choice: Choice) -> bool:
        return self.answer_of(choice) in self.options

    def as_choices(self) -> list[Choice]:
        """Every legal answer, in option order."""
        if self.choice_type == ChoiceType.LOCATION:
            return [Choice.at(location) for location in self.options]
        if self.choice_type == ChoiceType.PLAYER:
            return [Choice.player(player_id) for player_id in self.options]
        if self.choice_type == ChoiceType.CARD:
            return [Choice.card(player_id, instance_id) for player_id, instance_id in self.options]
        return [Choice.option(index) for index in self.options]

    def answer_of(self, choice: Choice) -> Any:
        if self.choice_type == ChoiceType.LOCATION:
            return choice.location
        if self.choice_type == ChoiceType.PLAYER:
            return choice.player_id
        if self.choice_type == ChoiceType.CARD:
            return (choice.player_id, choice.instance_id)
        return choice.option_index


class PlayStatus(str, Enum):
    UNPLAYABLE = "unplayable"
    PARTIALLY_PLAYABLE = "partially_playable"
    PLAYABLE = "playable"


@dataclass(frozen=True)
class PlayAttempt:
    """
    Result of resolving a turn action.

    - UNPLAYABLE: not permitted; `reason` says why
    - PARTIALLY_PLAYABLE: resolution stopped at `pending_choice`;
      `operations` were emitted so far and `remaining` still need resolving
    - PLAYABLE: fully resolved into `operations`

    `resulting_game` is the scratch game with `operations` applied.
    """
    status: PlayStatus
    operations: tuple[GameOperation, ...] = ()
    remaining: tuple[ImmediateImpact, ...] = ()
    pending_choice: PendingChoice | None = None
    reason: str | None = None
    source: int | None = None
    resulting_game: Game | None = field(default=None, compare=False, repr=False)

    @classmethod
    def unplayable(cls, reason: str) -> PlayAttempt:
        return cls(PlayStatus.UNPLAYABLE, reason=reason)

    @classmethod
    def partial(
        cls,
        operations: list[GameOperation],
        remaining: list[ImmediateImpact],
        pending_choice: PendingChoice,
        source: int | None,
        resulting_game: Game,
    ) -> PlayAttempt:
        return cls(
            PlayStatus.PARTIALLY_PLAYABLE,
            operations=tuple(operations),
            remaining=tuple(remaining),
            pending_choice=pending_choice,
            source=source,
            resulting_game=resulting_game,
        )

    @classmethod
    def playable(cls, operations: list[GameOperation], resulting_game: Game) -> PlayAttempt:
        return cls(PlayStatus.PLAYABLE, operations=tuple(operations), resulting_game=resulting_game)

    @property
    def is_playable(self) -> bool:
        return self.status == PlayStatus.PLAYABLE

    @property
    def is_unplayable(self) -> bool:
        return self.status == PlayStatus.UNPLAYABLE
