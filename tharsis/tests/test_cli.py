"""
Tests for the command-line interface.
"""

import pytest

from ..catalog import base_game
from ..cli import main
from ..engine_core.player import PlayerStateBuilder
from ..engine_core.snapshot import dump_game
from ..engine_core.state import Game


class TestCli:
    """Tests for the tharsis subcommands."""

    def test_validate_builtin(self, capsys):
        main(["validate", "base"])
        assert "Catalog is valid" in capsys.readouterr().out

    def test_validate_file(self, tmp_path, capsys):
        path = tmp_path / "cards.json"
        path.write_text(base_game().to_json())
        main(["validate", str(path)])
        assert "Catalog is valid" in capsys.readouterr().out

    def test_validate_missing(self, capsys):
        with pytest.raises(SystemExit):
            main(["validate", "no-such-catalog"])
        assert "Built-in catalogs" in capsys.readouterr().out

    def test_search(self, capsys):
        main(["search", "--megacredits", "50", "Sponsors", "Power Plant"])
        assert capsys.readouterr().out.startswith("9 possible generation(s)")

    def test_search_unknown_card(self, capsys):
        with pytest.raises(SystemExit):
            main(["search", "Moon Base"])

    def test_board(self, capsys):
        main(["board"])
        assert capsys.readouterr().out.startswith("oxygen=0 temperature=-30 oceans=0")

    def test_score(self, tmp_path, capsys):
        game = Game.new([PlayerStateBuilder(0).build(), PlayerStateBuilder(1).build()])
        path = tmp_path / "game.json"
        path.write_text(dump_game(game))
        main(["score", str(path)])
        out = capsys.readouterr().out
        assert "player 0: 20 VP" in out
        assert "player 1: 20 VP" in out

    def test_no_command(self):
        with pytest.raises(SystemExit):
            main([])
