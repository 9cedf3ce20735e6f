import logging

from database.base import BaseManager
from models.game import Game

logger = logging.getLogger(__name__)


class GameDBManager(BaseManager):
    def list_games(self) -> list[Game]:
        """Get all games, newest first"""
        result = (
            self.supabase.table("games")
            .select("*")
            .order("created_at", desc=True)
            .execute()
        )
        return [Game.from_db(record) for record in result.data or []]

    def get_game(self, game_id) -> Game | None:
        result = self.supabase.table("games").select("*").eq("id", game_id).execute()
        return Game.from_db(result.data[0]) if result.data else None

    def create_game(self, title, date, time, location) -> Game:
        """Create a game with an empty confirmation list"""
        game_data = {
            "title": title,
            "date": date,
            "time": time,
            "location": location,
            "is_confirmed": False,
            "selected_players": [],
        }
        result = self.supabase.table("games").insert(game_data).execute()
        if not result.data:
            raise RuntimeError("Error creating game")
        return Game.from_db(result.data[0])

    def update_game(self, game_id, update_data: dict) -> Game:
        """Apply a partial update to a game record and return the stored game"""
        update_data = {
            key: value for key, value in update_data.items() if value is not None
        }
        logger.debug(f"Updating game {game_id}: {update_data}")

        result = (
            self.supabase.table("games")
            .update(update_data)
            .eq("id", int(game_id))
            .execute()
        )
        if not result.data:
            raise RuntimeError(f"No data returned after updating game {game_id}")
        return Game.from_db(result.data[0])

    def update_teams(self, game_id, team_a, team_b) -> Game:
        return self.update_game(
            game_id,
            {"teamA": [int(p) for p in team_a], "teamB": [int(p) for p in team_b]},
        )

    def update_selected_players(self, game_id, player_ids) -> Game:
        return self.update_game(
            game_id, {"selected_players": [int(p) for p in player_ids]}
        )

    def update_game_score(self, game_id, score_a, score_b) -> Game:
        return self.update_game(game_id, {"scorea": score_a, "scoreb": score_b})

    def confirm_game(self, game_id) -> Game:
        return self.update_game(game_id, {"is_confirmed": True})

    def delete_game(self, game_id) -> None:
        self.supabase.table("games").delete().eq("id", game_id).execute()
