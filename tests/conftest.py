import random

import pytest

from database.game import GameDBManager
from database.goal import GoalDBManager
from database.player import PlayerDBManager
from database.team import TeamDBManager
from fakes import FakeSupabase
from models.player import Player, Position
from services.game_manager import GameManager
from services.team_balancer import BalancerConfig, TeamBalancer


@pytest.fixture
def supabase():
    return FakeSupabase()


@pytest.fixture
def stores(supabase):
    return {
        "players": PlayerDBManager(supabase),
        "games": GameDBManager(supabase),
        "teams": TeamDBManager(supabase),
        "goals": GoalDBManager(supabase),
    }


@pytest.fixture
def balancer_config():
    return BalancerConfig()


@pytest.fixture
def balancer(balancer_config):
    return TeamBalancer(balancer_config, rng=random.Random(7))


@pytest.fixture
def game_manager(stores, balancer):
    return GameManager(
        game_db_manager=stores["games"],
        player_db_manager=stores["players"],
        team_db_manager=stores["teams"],
        goal_db_manager=stores["goals"],
        balancer=balancer,
    )


def make_players(field=0, goalkeepers=0, start_id=1):
    """Goalkeepers first, then field players, with consecutive ids"""
    players = []
    player_id = start_id
    for i in range(goalkeepers):
        players.append(
            Player(id=player_id, name=f"Keeper {i}", position=[Position.GOALKEEPER])
        )
        player_id += 1
    for i in range(field):
        role = [Position.DEFENDER, Position.MIDFIELDER, Position.FORWARD][i % 3]
        players.append(Player(id=player_id, name=f"Player {i}", position=[role]))
        player_id += 1
    return players


def player_rows(field=0, goalkeepers=0):
    """Rows as stored in the players table"""
    rows = []
    for i in range(goalkeepers):
        rows.append({"name": f"Keeper {i}", "nickname": None,
                     "position": "Guarda-Redes", "is_active": True, "goals_count": 0})
    for i in range(field):
        role = ["Defesa", "Meio-campo", "Avançado"][i % 3]
        rows.append({"name": f"Player {i}", "nickname": f"P{i}",
                     "position": role, "is_active": True, "goals_count": 0})
    return rows


@pytest.fixture
def seed_game(supabase):
    """Seed players and a game confirming the given player ids"""

    def _seed(field=0, goalkeepers=0, selected=None, **game_fields):
        supabase.seed("players", player_rows(field, goalkeepers))
        if selected is None:
            selected = [row["id"] for row in supabase.tables["players"]]
        game = {"title": "Pelada de quinta", "date": "2024-06-27", "time": "21:00",
                "location": "Pavilhão", "is_confirmed": False,
                "selected_players": selected, "teamA": [], "teamB": [],
                "scorea": None, "scoreb": None}
        game.update(game_fields)
        supabase.seed("games", [game])
        return supabase.tables["games"][-1]["id"]

    return _seed
