from dataclasses import dataclass, field
from typing import List
import logging

from database.game import GameDBManager
from database.goal import GoalDBManager
from database.player import PlayerDBManager
from database.team import TeamDBManager
from models.game import Game
from models.goal import Goal
from models.team import TEAM_NAMES, Team
from services.exceptions import (
    GoalNotFoundError,
    InsufficientPlayersError,
    InvalidGoalError,
    MatchNotFoundError,
    PartialPersistenceError,
    PlayerNotFoundError,
    TeamsNotGeneratedError,
)
from services.team_balancer import TeamBalancer

logger = logging.getLogger(__name__)


@dataclass
class TeamGenerationResult:
    game_id: int
    team_a: List[int]
    team_b: List[int]
    teams: List[Team] = field(default_factory=list)


class GameManager:
    """
    Game workflows on top of the stores: confirmations, team generation,
    goals and final score.
    """

    def __init__(
        self,
        game_db_manager: GameDBManager,
        player_db_manager: PlayerDBManager,
        team_db_manager: TeamDBManager,
        goal_db_manager: GoalDBManager,
        balancer: TeamBalancer,
        replace_existing_teams: bool = False,
    ):
        self.game_db_manager = game_db_manager
        self.player_db_manager = player_db_manager
        self.team_db_manager = team_db_manager
        self.goal_db_manager = goal_db_manager
        self.balancer = balancer
        self.replace_existing_teams = replace_existing_teams

    def get_game(self, game_id) -> Game:
        game = self.game_db_manager.get_game(game_id)
        if not game:
            raise MatchNotFoundError(game_id)
        return game

    def toggle_player_confirmation(self, game_id, player_id) -> Game:
        """Add the player to the game's confirmed list, or remove them if present"""
        game = self.get_game(game_id)
        player_id = int(player_id)

        if player_id in game.selected_players:
            selected = [p for p in game.selected_players if p != player_id]
        else:
            if not self.player_db_manager.get_player(player_id):
                raise PlayerNotFoundError(player_id)
            selected = game.selected_players + [player_id]

        logger.info(f"Game {game.id} confirmed players: {selected}")
        return self.game_db_manager.update_selected_players(game.id, selected)

    def generate_teams(self, game_id) -> TeamGenerationResult:
        """
        Balance the confirmed players of a game and persist the result.

        The game's teamA/teamB fields are written first, then one team record
        per side. If the team records fail after the game was updated a
        PartialPersistenceError is raised; use retry_team_creation for it.
        Previous team records are removed only once the new ones are saved,
        and only when replace_existing_teams is set.
        """
        game = self.get_game(game_id)
        min_players = self.balancer.config.min_players

        if len(game.selected_players) < min_players:
            raise InsufficientPlayersError(min_players, len(game.selected_players))

        catalogue = self.player_db_manager.list_players()
        candidates = self.balancer.resolve_candidates(game.selected_players, catalogue)
        if len(candidates) < min_players:
            raise InsufficientPlayersError(min_players, len(candidates))

        team_a, team_b = self.balancer.balance(candidates)

        self.game_db_manager.update_teams(game.id, team_a, team_b)

        created = self._create_teams(game.id, {"A": team_a, "B": team_b})
        if self.replace_existing_teams:
            self._delete_previous_teams(game.id, [team.id for team in created])
        return TeamGenerationResult(game.id, team_a, team_b, created)

    def retry_team_creation(self, game_id) -> TeamGenerationResult:
        """Create the team records that are missing for the game's stored teams"""
        game = self.get_game(game_id)
        if not game.has_teams:
            raise TeamsNotGeneratedError(game.id)

        existing = self._current_teams(game)
        rosters = {"A": game.team_a, "B": game.team_b}
        missing = {side: players for side, players in rosters.items() if not existing[side]}

        created = self._create_teams(game.id, missing)
        teams = [existing[side] for side in ("A", "B") if existing[side]] + created
        return TeamGenerationResult(game.id, game.team_a, game.team_b, teams)

    def _create_teams(self, game_id, rosters: dict) -> List[Team]:
        created = []
        try:
            for side, players in rosters.items():
                created.append(
                    self.team_db_manager.create_team(Team.new(game_id, side, players))
                )
        except Exception as e:
            logger.error(f"Error creating teams for game {game_id}: {e}")
            raise PartialPersistenceError(
                game_id, rosters.get("A"), rosters.get("B"), created
            ) from e
        return created

    def _current_teams(self, game: Game) -> dict:
        """
        Latest team record per side whose roster still matches the game.

        Records left over from an earlier generation do not count.
        """
        teams = self.team_db_manager.get_current_teams(game.id)
        rosters = {"A": game.team_a, "B": game.team_b}
        return {
            side: team if team and set(team.players) == set(rosters[side]) else None
            for side, team in teams.items()
        }

    def _delete_previous_teams(self, game_id, keep_ids):
        for team in self.team_db_manager.get_teams_by_game(game_id):
            if team.id not in keep_ids:
                self.team_db_manager.delete_team(team.id)

    def confirm_teams(self, game_id) -> Game:
        game = self.get_game(game_id)
        if not game.has_teams:
            raise TeamsNotGeneratedError(game.id)
        return self.game_db_manager.confirm_game(game.id)

    def register_goal(self, game_id, player_id, team, minute=None) -> Goal:
        """
        Record a goal, bumping the scorer's goal count and the team's score.
        The scorer must be in the roster of the team they scored for.
        """
        team = team.upper()
        if team not in TEAM_NAMES:
            raise InvalidGoalError(f"Unknown team: {team}")

        game = self.get_game(game_id)
        player = self.player_db_manager.get_player(player_id)
        if not player:
            raise PlayerNotFoundError(player_id)

        if game.team_of(player.id) != team:
            raise InvalidGoalError(
                f"{player.display_name} is not in {TEAM_NAMES[team]}"
            )

        goal = self.goal_db_manager.create_goal(
            Goal(game_id=game.id, player_id=player.id, team=team, minute=minute)
        )
        goal.player_name = player.display_name

        self.player_db_manager.change_goals_count(player.id, 1)
        self._change_team_score(game, team, 1)
        logger.info(f"Goal in game {game.id} by {player.display_name} ({team})")
        return goal

    def delete_goal(self, goal_id) -> Goal:
        goal = self.goal_db_manager.get_goal(goal_id)
        if not goal:
            raise GoalNotFoundError(goal_id)
        game = self.get_game(goal.game_id)

        self.goal_db_manager.delete_goal(goal.id)
        self.player_db_manager.change_goals_count(goal.player_id, -1)
        self._change_team_score(game, goal.team, -1)
        return goal

    def list_goals(self, game_id) -> List[Goal]:
        return self.goal_db_manager.get_goals_by_game(game_id)

    def _change_team_score(self, game: Game, side, delta):
        team = self._current_teams(game)[side]
        if not team:
            logger.warning(f"Game {game.id} has no {TEAM_NAMES[side]} record")
            return
        self.team_db_manager.update_team(team.id, {"score": max(0, team.score + delta)})

    def set_final_score(self, game_id, score_a: int, score_b: int) -> Game:
        """Store the final score and mark the winning team (none on a draw)"""
        if score_a < 0 or score_b < 0:
            raise ValueError("Scores must not be negative")

        game = self.game_db_manager.update_game_score(
            self.get_game(game_id).id, score_a, score_b
        )

        teams = self._current_teams(game)
        scores = {"A": score_a, "B": score_b}
        for side, team in teams.items():
            if not team:
                continue
            other = "B" if side == "A" else "A"
            self.team_db_manager.update_team(
                team.id,
                {"score": scores[side], "is_winner": scores[side] > scores[other]},
            )
        return game

    def get_teams(self, game_id) -> dict:
        """Current team records of a game with their players resolved"""
        game = self.get_game(game_id)
        teams = self._current_teams(game)
        player_ids = game.team_a + game.team_b
        players = {p.id: p for p in self.player_db_manager.get_players_by_ids(player_ids)}

        return {
            "game": game,
            "teams": teams,
            "A": [players[p] for p in game.team_a if p in players],
            "B": [players[p] for p in game.team_b if p in players],
        }

    def delete_game(self, game_id) -> None:
        """Delete a game together with its goals and team records"""
        game = self.get_game(game_id)
        self.goal_db_manager.delete_goals_by_game(game.id)
        self.team_db_manager.delete_teams_by_game(game.id)
        self.game_db_manager.delete_game(game.id)
        logger.info(f"Game {game.id} deleted")
