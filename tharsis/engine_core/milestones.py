"""
Milestones and Awards.

Milestones are claimed by reaching a threshold (8 MC, 5 VP each, at
most 3 per game). Awards are funded for 8 / 14 / 20 MC (at most 3) and
pay 5 VP to the leader and 2 VP to the runner-up at game end.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable

from ..catalog.card import CardTag
from ..catalog.resource import Resource
from .board import MarsBoard
from .player import PlayerState

MILESTONE_COST = 8
MILESTONE_POINTS = 5
MAX_MILESTONES = 3

AWARD_COSTS = (8, 14, 20)
MAX_AWARDS = len(AWARD_COSTS)
FIRST_PLACE_POINTS = 5
SECOND_PLACE_POINTS = 2


@dataclass(frozen=True)
class Milestone:
    name: str
    description: str
    threshold: int
    metric: Callable[[PlayerState, MarsBoard], int]

    def is_reached(self, player: PlayerState, board: MarsBoard) -> bool:
        return self.metric(player, board) >= self.threshold


@dataclass(frozen=True)
class Award:
    name: str
    description: str
    metric: Callable[[PlayerState, MarsBoard], int]


def _owned_tiles(player: PlayerState, board: MarsBoard) -> int:
    return (
        board.city_count(owner=player.player_id)
        + len(board.greeneries_owned_by(player.player_id))
        + len(board.special_tiles_owned_by(player.player_id))
    )


MILESTONES: dict[str, Milestone] = {
    m.name: m for m in (
        Milestone("Terraformer", "terraform rating of at least 35", 35,
                  lambda p, b: p.terraform_rating),
        Milestone("Mayor", "own at least 3 cities", 3,
                  lambda p, b: b.city_count(owner=p.player_id)),
        Milestone("Gardener", "own at least 3 greeneries", 3,
                  lambda p, b: len(b.greeneries_owned_by(p.player_id))),
        Milestone("Builder", "have at least 8 building tags", 8,
                  lambda p, b: p.active_tag_count(CardTag.BUILDING)),
        Milestone("Planner", "have at least 16 cards in hand", 16,
                  lambda p, b: len(p.hand)),
    )
}

AWARDS: dict[str, Award] = {
    a.name: a for a in (
        Award("Landlord", "most tiles in play", _owned_tiles),
        Award("Banker", "highest megacredit production",
              lambda p, b: p.production_of(Resource.MEGACREDITS)),
        Award("Scientist", "most science tags",
              lambda p, b: p.active_tag_count(CardTag.SCIENCE)),
        Award("Thermalist", "most heat resources",
              lambda p, b: p.resource(Resource.HEAT)),
        Award("Miner", "most steel and titanium resources",
              lambda p, b: p.resource(Resource.STEEL) + p.resource(Resource.TITANIUM)),
    )
}


def next_award_cost(funded_count: int) -> int | None:
    """Cost of funding one more award, or None if all slots are taken."""
    if funded_count >= MAX_AWARDS:
        return None
    return AWARD_COSTS[funded_count]


def milestone_unavailable_reason(
    name: str, player: PlayerState, board: MarsBoard, claimed: dict[str, int]
) -> str | None:
    milestone = MILESTONES.get(name)
    if milestone is None:
        return f"unknown milestone '{name}'"
    if name in claimed:
        return f"{name} is already claimed"
    if len(claimed) >= MAX_MILESTONES:
        return "all milestones are claimed"
    if not milestone.is_reached(player, board):
        return f"{name} requires {milestone.description}"
    if player.resource(Resource.MEGACREDITS) < MILESTONE_COST:
        return f"claiming costs {MILESTONE_COST} MC"
    return None


def award_unavailable_reason(
    name: str, player: PlayerState, funded: dict[str, int]
) -> str | None:
    if name not in AWARDS:
        return f"unknown award '{name}'"
    if name in funded:
        return f"{name} is already funded"
    cost = next_award_cost(len(funded))
    if cost is None:
        return "all awards are funded"
    if player.resource(Resource.MEGACREDITS) < cost:
        return f"funding costs {cost} MC"
    return None


def award_points(
    award: Award, players: list[PlayerState], board: MarsBoard
) -> dict[int, int]:
    """
    Points per player for one funded award.

    Everyone tied for first scores first place; second place is only
    awarded when first place was not shared.
    """
    scores = {p.player_id: award.metric(p, board) for p in players}
    if not scores:
        return {}
    ranked = sorted(set(scores.values()), reverse=True)
    points = {pid: 0 for pid in scores}
    first = [pid for pid, score in scores.items() if score == ranked[0]]
    for pid in first:
        points[pid] = FIRST_PLACE_POINTS
    if len(first) == 1 and len(ranked) > 1:
        for pid, score in scores.items():
            if score == ranked[1]:
                points[pid] = SECOND_PLACE_POINTS
    return points


def milestone_and_award_points(
    player_id: int,
    players: list[PlayerState],
    board: MarsBoard,
    claimed: dict[str, int],
    funded: dict[str, int],
) -> int:
    total = MILESTONE_POINTS * sum(1 for owner in claimed.values() if owner == player_id)
    for name in funded:
        total += award_points(AWARDS[name], players, board).get(player_id, 0)
    return total
