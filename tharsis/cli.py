"""
Tharsis CLI - Command-line interface for the engine.

Usage:
    tharsis validate <catalog>                      Validate a built-in catalog or a JSON file
    tharsis search --megacredits N <card>...        Enumerate one player's generation plays
    tharsis board [--snapshot FILE]                 Print tile statuses
    tharsis score <snapshot_file>                   Print victory points per player
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from pydantic import ValidationError

THARSIS_LOG_LEVEL = os.getenv("THARSIS_LOG_LEVEL", "WARNING")


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Tharsis - Terraforming Mars rules engine",
        prog="tharsis",
    )
    parser.add_argument(
        "--log-level",
        default=THARSIS_LOG_LEVEL,
        help="Logging level (default: $THARSIS_LOG_LEVEL or WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate a card catalog")
    validate_parser.add_argument("catalog", help="Built-in catalog name or path to a JSON card list")

    # Search command
    search_parser = subparsers.add_parser("search", help="Enumerate generation plays")
    search_parser.add_argument("cards", nargs="*", help="Names of the offered cards (at most 10)")
    search_parser.add_argument("--catalog", default="base", help="Built-in catalog name or JSON path")
    search_parser.add_argument("--megacredits", type=int, default=0, help="Starting megacredits")
    search_parser.add_argument("--all-orderings", action="store_true", help="Also vary play order")
    search_parser.add_argument("--limit", type=int, default=20, help="Plays to print")

    # Board command
    board_parser = subparsers.add_parser("board", help="Print tile statuses")
    board_parser.add_argument("--snapshot", help="Game snapshot JSON (default: empty standard board)")

    # Score command
    score_parser = subparsers.add_parser("score", help="Print victory points from a snapshot")
    score_parser.add_argument("snapshot", help="Game snapshot JSON")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "validate":
        cmd_validate(args)
    elif args.command == "search":
        cmd_search(args)
    elif args.command == "board":
        cmd_board(args)
    elif args.command == "score":
        cmd_score(args)
    else:
        parser.print_help()
        sys.exit(1)


def load_catalog(name_or_path: str):
    """A built-in catalog by name, else a JSON card list on disk."""
    from .catalog import BUILTIN_CATALOGS, CardCatalog

    factory = BUILTIN_CATALOGS.get(name_or_path)
    if factory is not None:
        return factory()
    path = Path(name_or_path)
    if not path.exists():
        print(f"Error: No built-in catalog or file named {name_or_path}")
        print(f"Built-in catalogs: {', '.join(sorted(BUILTIN_CATALOGS))}")
        sys.exit(1)
    return CardCatalog.from_file(path)


def load_snapshot(path: str):
    from .engine_core.snapshot import load_game

    try:
        return load_game(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError:
        print(f"Error: File not found: {path}")
        sys.exit(1)
    except (ValidationError, ValueError) as e:
        print(f"Error: Invalid snapshot {path}: {e}")
        sys.exit(1)


def cmd_validate(args):
    """Validate a card catalog."""
    from .catalog import CatalogValidationError
    from .catalog.catalog import dump_summary

    print(f"Validating: {args.catalog}")
    try:
        catalog = load_catalog(args.catalog)
    except ValidationError as e:
        print(f"Malformed card data: {e}")
        sys.exit(1)
    except CatalogValidationError as e:
        print("\nErrors:")
        for error in e.errors:
            print(f"  - {error}")
        sys.exit(1)

    result = catalog.validate()
    if result.warnings:
        print("\nWarnings:")
        for w in result.warnings:
            print(f"  - {w}")
    print(dump_summary(catalog))
    print("Catalog is valid")


def cmd_search(args):
    """Enumerate every generation the player could have with the offered cards."""
    from .catalog import UnknownCardError
    from .catalog.resource import Resource
    from .engine_core.generation_search import GenerationSearch
    from .engine_core.player import PlayerStateBuilder
    from .engine_core.state import Game

    catalog = load_catalog(args.catalog)
    try:
        offered = catalog.resolve(args.cards)
    except UnknownCardError as e:
        print(f"Error: {e}")
        sys.exit(1)

    player = PlayerStateBuilder(0).with_megacredits(args.megacredits).solo().build()
    try:
        plays = GenerationSearch(Game.new([player]), 0).run(offered, args.all_orderings)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(f"{len(plays)} possible generation(s)")
    for play in plays[:args.limit]:
        bought = ", ".join(card.name for card in play.purchased) or "nothing"
        turns = "; ".join(turn.action.describe() for turn in play.turns)
        mc = play.final_state.resource(Resource.MEGACREDITS)
        print(f"- bought {bought} | {turns} | MC {mc} TR {play.final_state.terraform_rating}")
    if len(plays) > args.limit:
        print(f"... {len(plays) - args.limit} more")


def cmd_board(args):
    """Print tile statuses."""
    from .engine_core.board import standard_board

    board = load_snapshot(args.snapshot).board if args.snapshot else standard_board()
    print(board.render())


def cmd_score(args):
    """Print victory points per player."""
    game = load_snapshot(args.snapshot)
    print(f"Generation {game.generation}")
    for player_id, points in game.scores().items():
        print(f"  player {player_id}: {points} VP")


if __name__ == "__main__":
    main()
