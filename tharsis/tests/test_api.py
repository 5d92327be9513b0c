"""
Tests for the API layer.

Tests:
- Game lifecycle via the HTTP endpoints
- Moves with commit and preview
- Raw operations and invariant refusals
- Error status codes
"""

import inspect

import pytest
from fastapi.testclient import TestClient

from ..api.app import create_app
from ..api.schemas import CreateGameRequest, PlayerSetup
from ..api.service import GameService

GAMES = "/api/v1/games"


@pytest.fixture
def service():
    """Create a fresh game service."""
    return GameService()


@pytest.fixture
def client(service):
    return TestClient(create_app(service))


@pytest.fixture
def game_id(client):
    """A solo game with Sponsors in hand."""
    response = client.post(GAMES, json={
        "players": [{"player_id": 0, "megacredits": 40, "hand": ["Sponsors"]}],
        "random_seed": 3,
    })
    assert response.status_code == 200
    return response.json()["game_id"]


class TestGameService:
    """Tests for GameService without HTTP."""

    def test_create_solo_game(self, service):
        result = service.create_game(CreateGameRequest(players=[PlayerSetup(player_id=0)]))
        assert result.players[0].terraform_rating == 14
        assert result.catalog == "base"
        assert result.deck_size > 0

    def test_dealt_cards_leave_the_deck(self, service):
        bare = service.create_game(CreateGameRequest(players=[PlayerSetup(player_id=0)]))
        dealt = service.create_game(CreateGameRequest(
            players=[PlayerSetup(player_id=0, hand=["Sponsors"], played_cards=["Mine"])],
        ))
        assert dealt.deck_size == bare.deck_size - 2

    def test_unknown_catalog(self, service):
        result = service.create_game(CreateGameRequest(catalog="moon", players=[PlayerSetup(player_id=0)]))
        assert result.error_code == "VALIDATION_ERROR"
        assert result.details == {"available": ["base", "corporate"]}

    def test_end_game(self, service):
        created = service.create_game(CreateGameRequest(players=[PlayerSetup(player_id=0)]))
        assert service.end_game(created.game_id)
        assert not service.end_game(created.game_id)
        assert service.list_games() == []


class TestGameEndpoints:
    """Tests for creating, reading and ending games."""

    def test_get_game(self, client, game_id):
        response = client.get(f"{GAMES}/{game_id}")
        assert response.status_code == 200
        data = response.json()
        assert data["generation"] == 1
        assert data["players"][0]["hand"] == ["Sponsors"]
        assert data["players"][0]["resources"]["megacredits"] == 40

    def test_missing_game(self, client):
        response = client.get(f"{GAMES}/nope")
        assert response.status_code == 404
        assert response.json()["error_code"] == "GAME_NOT_FOUND"

    def test_unknown_card_in_setup(self, client):
        response = client.post(GAMES, json={"players": [{"player_id": 0, "hand": ["Moon Base"]}]})
        assert response.status_code == 400
        assert response.json()["error_code"] == "UNKNOWN_CARD"

    def test_duplicate_player_ids(self, client):
        response = client.post(GAMES, json={"players": [{"player_id": 0}, {"player_id": 0}]})
        assert response.status_code == 422

    def test_list_and_delete(self, client, game_id):
        assert client.get(GAMES).json() == {"games": [game_id], "count": 1}
        assert client.delete(f"{GAMES}/{game_id}").status_code == 200
        assert client.delete(f"{GAMES}/{game_id}").status_code == 404
        assert client.get(GAMES).json()["count"] == 0

    def test_snapshot(self, client, game_id):
        response = client.get(f"{GAMES}/{game_id}/snapshot")
        assert response.status_code == 200
        assert response.json()["game_id"] == game_id

    def test_advance(self, client, game_id):
        data = client.post(f"{GAMES}/{game_id}/advance").json()
        assert data["generation"] == 2
        assert data["players"][0]["resources"]["megacredits"] == 40 + 14


class TestMoves:
    """Tests for the move endpoints."""

    def test_play_card(self, client, game_id):
        response = client.post(f"{GAMES}/{game_id}/play", json={"player_id": 0, "card_name": "Sponsors"})
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "playable"
        assert data["committed"] is True
        player = data["game"]["players"][0]
        assert player["played_cards"] == ["Sponsors"]
        assert player["production"]["megacredits"] == 2
        assert player["resources"]["megacredits"] == 34

    def test_preview_leaves_game_alone(self, client, game_id):
        data = client.post(
            f"{GAMES}/{game_id}/play",
            json={"player_id": 0, "card_name": "Sponsors", "commit": False},
        ).json()
        assert data["status"] == "playable"
        assert data["committed"] is False
        assert data["game"]["players"][0]["hand"] == ["Sponsors"]

    def test_card_not_in_hand(self, client, game_id):
        data = client.post(f"{GAMES}/{game_id}/play", json={"player_id": 0, "card_name": "Mine"}).json()
        assert data["status"] == "unplayable"
        assert data["reason"]
        assert data["committed"] is False

    def test_unknown_card(self, client, game_id):
        response = client.post(f"{GAMES}/{game_id}/play", json={"player_id": 0, "card_name": "Moon Base"})
        assert response.status_code == 400

    def test_unknown_player(self, client, game_id):
        response = client.post(f"{GAMES}/{game_id}/play", json={"player_id": 4, "card_name": "Sponsors"})
        assert response.status_code == 422

    def test_city_needs_a_location(self, client, game_id):
        url = f"{GAMES}/{game_id}/standard-projects"
        data = client.post(url, json={"player_id": 0, "project": "city"}).json()
        assert data["status"] == "partially_playable"
        assert data["pending_choice"]["options"]
        assert data["committed"] is False

        data = client.post(url, json={
            "player_id": 0,
            "project": "city",
            "choices": [{"location": {"x": 4, "y": -5}}],
        }).json()
        assert data["status"] == "playable"
        assert data["committed"] is True

        tile = client.get(f"{GAMES}/{game_id}/tiles", params={"x": 4, "y": -5}).json()
        assert tile["kind"] == "city"
        assert tile["owner"] == 0

    def test_legal_actions(self, client, game_id):
        data = client.get(f"{GAMES}/{game_id}/actions", params={"player_id": 0}).json()
        assert "play Sponsors" in data["actions"]
        assert data["actions"][-1] == "pass"


class TestOperations:
    """Tests for raw operations."""

    def test_apply_operation(self, client, game_id):
        response = client.post(f"{GAMES}/{game_id}/operations", json={
            "operation": {"op_type": "change_resources", "player_id": 0, "resource": "heat", "count": 5},
        })
        assert response.status_code == 200
        assert response.json()["players"][0]["resources"]["heat"] == 5

    def test_violation_is_refused(self, client, game_id):
        response = client.post(f"{GAMES}/{game_id}/operations", json={
            "operation": {"op_type": "change_resources", "player_id": 0, "resource": "megacredits", "count": -100},
        })
        assert response.status_code == 409
        assert response.json()["error_code"] == "NOT_PERMITTED"

        game = client.get(f"{GAMES}/{game_id}").json()
        assert game["players"][0]["resources"]["megacredits"] == 40


class TestQueries:
    """Tests for scores, tiles and search."""

    def test_victory_points(self, client, game_id):
        data = client.get(f"{GAMES}/{game_id}/victory-points").json()
        assert data["scores"] == {"0": 14}

    def test_empty_tile(self, client, game_id):
        data = client.get(f"{GAMES}/{game_id}/tiles", params={"x": 5, "y": -1}).json()
        assert data["kind"] == "empty"
        assert data["owner"] is None

    def test_tile_off_the_board(self, client, game_id):
        response = client.get(f"{GAMES}/{game_id}/tiles", params={"x": 40, "y": 40})
        assert response.status_code == 422

    def test_search(self, client, game_id):
        response = client.post(f"{GAMES}/{game_id}/search", json={
            "player_id": 0,
            "offered_cards": ["Mine", "Power Plant"],
        })
        assert response.status_code == 200
        data = response.json()
        assert data["count"] == len(data["plays"])
        assert all(play["turns"][-1] == "pass" for play in data["plays"])

    def test_search_offer_limit(self, client, game_id):
        response = client.post(f"{GAMES}/{game_id}/search", json={
            "player_id": 0,
            "offered_cards": ["Mine"] * 11,
        })
        assert response.status_code == 422


class TestSystemEndpoints:

    def test_search_runs_in_threadpool(self, client):
        route = next(r for r in client.app.routes if getattr(r, "path", None) == f"{GAMES}/{{game_id}}/search")
        assert not inspect.iscoroutinefunction(route.endpoint)

    def test_health(self, client):
        assert client.get("/health").json() == {
            "status": "healthy",
            "service": "tharsis-engine",
            "version": "1.0.0",
        }

    def test_root(self, client):
        assert client.get("/").json()["health"] == "/health"
